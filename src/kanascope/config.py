from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class SudachiSettings:
    """Configuration block for the SudachiPy tokenizer."""

    split_mode: str = "C"
    dict_name: str = "core"


@dataclass(slots=True)
class KanascopeConfig:
    """Configuration options for script conversion."""

    tokenizer_name: str = "sudachi"
    transliterator_name: str = "kakasi"
    separator: str = ""
    log_level: str = "WARNING"
    sudachi: SudachiSettings = field(default_factory=SudachiSettings)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(KanascopeConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "sudachi" in data:
        sudachi_value = data["sudachi"]
        if isinstance(sudachi_value, SudachiSettings):
            kwargs["sudachi"] = sudachi_value
        elif isinstance(sudachi_value, Mapping):
            kwargs["sudachi"] = _build_sudachi_settings(sudachi_value)
        else:
            kwargs.pop("sudachi")
    return kwargs


def _build_sudachi_settings(data: Mapping[str, Any]) -> SudachiSettings:
    sudachi_allowed = {field.name for field in fields(SudachiSettings)}
    filtered = {key: data[key] for key in data if key in sudachi_allowed}
    return SudachiSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> KanascopeConfig:
    """Build a KanascopeConfig from a dictionary-like input."""
    if data is None:
        return KanascopeConfig()
    return KanascopeConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> KanascopeConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> KanascopeConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return KanascopeConfig()
    return config_from_yaml(path)
