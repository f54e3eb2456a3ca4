from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, List

from .analysis import needs_reading, script_type
from .classifier import STRING_PREDICATES, contains_japanese
from .engines import (
    ConversionUnavailable,
    Tokenizer,
    TransformUnavailable,
    Transliterator,
    build_tokenizer_from_config,
    build_transliterator_from_config,
)
from .models import Span, SyllabaryTarget, TextAnalysis, Token

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from .config import KanascopeConfig

logger = logging.getLogger(__name__)


class ScriptConverter:
    """
    Romanize and re-kana Japanese text on top of a tokenizer and transliterator.

    Engine failures never escape the public methods. ``to_romaji`` keeps what it
    produced before the failing token; the whole-string kana conversions return
    their input unchanged.
    """

    def __init__(self, tokenizer: Tokenizer, transliterator: Transliterator) -> None:
        self._tokenizer = tokenizer
        self._transliterator = transliterator

    @property
    def tokenizer(self) -> Tokenizer:
        return self._tokenizer

    @property
    def transliterator(self) -> Transliterator:
        return self._transliterator

    def tokens(self, text: str) -> List[Token]:
        """Tokenize text and annotate every span with its script type."""
        tokens: List[Token] = []
        with self._spans(text) as spans:
            for span in spans:
                piece = text[span.offset : span.end]
                tokens.append(
                    Token(
                        text=piece,
                        offset=span.offset,
                        length=span.length,
                        script_type=script_type(piece),
                        is_word=span.is_word,
                    )
                )
        return tokens

    def analyze(self, text: str) -> TextAnalysis:
        """Summarize the scripts used in text."""
        return TextAnalysis(
            text=text,
            contains_japanese=contains_japanese(text),
            predicates={name: check(text) for name, check in STRING_PREDICATES.items()},
            tokens=self.tokens(text),
        )

    def to_romaji(self, text: str, separator: str = "") -> str:
        """Return the Latin rendering of text, joining word tokens with separator."""
        if not contains_japanese(text):
            return text
        return self._romanize(text, separator)

    def to_hiragana(self, text: str) -> str:
        return self._to_syllabary(text, SyllabaryTarget.HIRAGANA)

    def to_katakana(self, text: str) -> str:
        return self._to_syllabary(text, SyllabaryTarget.KATAKANA)

    def romaji_to_hiragana(self, text: str) -> str:
        """Render romaji as hiragana. No accuracy guarantee."""
        return self._transform(text, text, SyllabaryTarget.HIRAGANA)

    def romaji_to_katakana(self, text: str) -> str:
        """Render romaji as katakana. No accuracy guarantee."""
        return self._transform(text, text, SyllabaryTarget.KATAKANA)

    def replace_kanji_with_hiragana(self, text: str) -> str:
        """Rewrite kanji and mixed-script tokens in hiragana, keeping the rest."""
        pieces: List[str] = []
        with self._spans(text) as spans:
            for span in spans:
                piece = text[span.offset : span.end]
                if needs_reading(script_type(piece)):
                    pieces.append(self.to_hiragana(piece))
                else:
                    pieces.append(piece)
        return "".join(pieces)

    def _romanize(self, text: str, separator: str) -> str:
        pieces: List[str] = []
        with self._spans(text) as spans:
            for span in spans:
                if not span.is_word:
                    continue
                piece = text[span.offset : span.end]
                try:
                    pieces.append(self._transliterator.to_latin(piece))
                except ConversionUnavailable as exc:
                    logger.warning(
                        "Stopping romanization at offset %s: %s", span.offset, exc
                    )
                    break
        return separator.join(pieces)

    def _to_syllabary(self, text: str, target: SyllabaryTarget) -> str:
        if not contains_japanese(text):
            return text
        return self._transform(self._romanize(text, ""), text, target)

    def _transform(self, latin: str, fallback: str, target: SyllabaryTarget) -> str:
        try:
            return self._transliterator.to_syllabary(latin, target)
        except TransformUnavailable as exc:
            logger.warning("Returning input unchanged: %s", exc)
            return fallback

    @contextmanager
    def _spans(self, text: str) -> Iterator[Iterator[Span]]:
        # Close the tokenizer's iterator on every exit path, including early breaks.
        spans = iter(self._tokenizer.tokenize(text))
        try:
            yield spans
        finally:
            close = getattr(spans, "close", None)
            if close is not None:
                close()


def build_converter_from_config(config: "KanascopeConfig") -> ScriptConverter:
    """Assemble a ScriptConverter from the engines named in the config."""
    return ScriptConverter(
        build_tokenizer_from_config(config),
        build_transliterator_from_config(config),
    )
