from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .analysis import script_type
from .classifier import classify, code_units
from .config import KanascopeConfig, load_config
from .conversion import ScriptConverter, build_converter_from_config

app = typer.Typer(help="Japanese script analysis and conversion CLI.", no_args_is_help=True)

TEXT_HELP = "Input text, or '-' to read from stdin."


class CodeUnitPayload(TypedDict):
    char: str
    code_unit: str
    character_class: str


@app.command("classify")
def classify_command(
    text: str = typer.Argument(..., help=TEXT_HELP),
) -> None:
    """Print the character class of every UTF-16 code unit as JSON."""
    source = _read_text(text)
    payload: List[CodeUnitPayload] = []
    for char in source:
        for unit in code_units(char):
            payload.append(
                {
                    "char": char,
                    "code_unit": f"U+{unit:04X}",
                    "character_class": classify(unit).value,
                }
            )
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command("script-type")
def script_type_command(
    text: str = typer.Argument(..., help=TEXT_HELP),
) -> None:
    """Print the script type of the text taken as a single token."""
    typer.echo(script_type(_read_text(text)).value)


@app.command()
def analyze(
    text: str = typer.Argument(..., help=TEXT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    tokenizer: str | None = typer.Option(
        None, "--tokenizer", "-t", help="Tokenizer to use ('sudachi' or 'script_run')."
    ),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    split_mode: str | None = typer.Option(
        None, "--split-mode", help="Sudachi split mode (A, B or C)."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Tokenize the text and emit a JSON script summary."""
    converter = _build_converter(config, tokenizer, transliterator, split_mode, log_level)
    analysis = converter.analyze(_read_text(text))
    typer.echo(json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2))


@app.command()
def romaji(
    text: str = typer.Argument(..., help=TEXT_HELP),
    separator: str | None = typer.Option(
        None, "--separator", "-s", help="String inserted between tokens."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    tokenizer: str | None = typer.Option(
        None, "--tokenizer", "-t", help="Tokenizer to use ('sudachi' or 'script_run')."
    ),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    split_mode: str | None = typer.Option(
        None, "--split-mode", help="Sudachi split mode (A, B or C)."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Romanize Japanese text."""
    cfg = _load_cli_config(config, tokenizer, transliterator, split_mode, log_level)
    if separator is not None:
        cfg.separator = separator
    converter = _converter_for(cfg)
    typer.echo(converter.to_romaji(_read_text(text), cfg.separator))


@app.command()
def hiragana(
    text: str = typer.Argument(..., help=TEXT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    tokenizer: str | None = typer.Option(
        None, "--tokenizer", "-t", help="Tokenizer to use ('sudachi' or 'script_run')."
    ),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    split_mode: str | None = typer.Option(
        None, "--split-mode", help="Sudachi split mode (A, B or C)."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Render Japanese text in hiragana."""
    converter = _build_converter(config, tokenizer, transliterator, split_mode, log_level)
    typer.echo(converter.to_hiragana(_read_text(text)))


@app.command()
def katakana(
    text: str = typer.Argument(..., help=TEXT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    tokenizer: str | None = typer.Option(
        None, "--tokenizer", "-t", help="Tokenizer to use ('sudachi' or 'script_run')."
    ),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    split_mode: str | None = typer.Option(
        None, "--split-mode", help="Sudachi split mode (A, B or C)."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Render Japanese text in katakana."""
    converter = _build_converter(config, tokenizer, transliterator, split_mode, log_level)
    typer.echo(converter.to_katakana(_read_text(text)))


@app.command("romaji-to-hiragana")
def romaji_to_hiragana(
    text: str = typer.Argument(..., help=TEXT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Render romaji in hiragana."""
    converter = _build_converter(
        config, "script_run", transliterator, None, log_level
    )
    typer.echo(converter.romaji_to_hiragana(_read_text(text)))


@app.command("romaji-to-katakana")
def romaji_to_katakana(
    text: str = typer.Argument(..., help=TEXT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Render romaji in katakana."""
    converter = _build_converter(
        config, "script_run", transliterator, None, log_level
    )
    typer.echo(converter.romaji_to_katakana(_read_text(text)))


@app.command("replace-kanji")
def replace_kanji(
    text: str = typer.Argument(..., help=TEXT_HELP),
    config: Path | None = typer.Option(None, "--config", "-c"),
    tokenizer: str | None = typer.Option(
        None, "--tokenizer", "-t", help="Tokenizer to use ('sudachi' or 'script_run')."
    ),
    transliterator: str | None = typer.Option(
        None, "--transliterator", help="Transliterator to use ('kakasi')."
    ),
    split_mode: str | None = typer.Option(
        None, "--split-mode", help="Sudachi split mode (A, B or C)."
    ),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Replace kanji and mixed-script words with their hiragana reading."""
    converter = _build_converter(config, tokenizer, transliterator, split_mode, log_level)
    typer.echo(converter.replace_kanji_with_hiragana(_read_text(text)))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = KanascopeConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _load_cli_config(
    config: Path | None,
    tokenizer: str | None,
    transliterator: str | None,
    split_mode: str | None,
    log_level: str | None,
) -> KanascopeConfig:
    """Load the configuration file and apply CLI overrides on top of it."""
    try:
        cfg = load_config(config)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if tokenizer:
        cfg.tokenizer_name = tokenizer
    if transliterator:
        cfg.transliterator_name = transliterator
    if split_mode:
        cfg.sudachi.split_mode = split_mode
    if log_level:
        cfg.log_level = log_level
    _configure_logging(cfg.log_level)
    return cfg


def _build_converter(
    config: Path | None,
    tokenizer: str | None,
    transliterator: str | None,
    split_mode: str | None,
    log_level: str | None,
) -> ScriptConverter:
    cfg = _load_cli_config(config, tokenizer, transliterator, split_mode, log_level)
    return _converter_for(cfg)


def _converter_for(cfg: KanascopeConfig) -> ScriptConverter:
    try:
        return build_converter_from_config(cfg)
    except (ImportError, ValueError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown log level '{level_name}'.", param_hint="--log-level"
        )
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _read_text(text: str) -> str:
    if text == "-":
        return sys.stdin.read().rstrip("\n")
    return text


if __name__ == "__main__":
    main()
