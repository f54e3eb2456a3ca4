from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CharacterClass(str, Enum):
    """Script category of a single UTF-16 code unit."""

    SPACE = "space"
    OTHER = "other"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANJI = "kanji"
    PERIOD = "period"
    COMMA = "comma"
    SYMBOL = "symbol"
    HALFWIDTH_KATAKANA = "halfwidthKatakana"
    FULLWIDTH_LATIN = "fullwidthLatin"
    FULLWIDTH_DIGIT = "fullwidthDigit"
    ASCII = "ascii"


class ScriptType(str, Enum):
    """Script category of a whole token."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    HALFWIDTH_KATAKANA = "halfwidthKatakana"
    COMPOUND = "compound"
    KANJI = "kanji"
    OTHER = "other"


class SyllabaryTarget(str, Enum):
    """Output script of a Latin-to-syllabary transform."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"


@dataclass(slots=True, frozen=True)
class Span:
    """A tokenizer span: ``length`` characters starting at ``offset``."""

    offset: int
    length: int
    is_word: bool = True

    @property
    def end(self) -> int:
        return self.offset + self.length


@dataclass(slots=True)
class Token:
    """A span resolved against its source string."""

    text: str
    offset: int
    length: int
    script_type: ScriptType
    is_word: bool = True


@dataclass(slots=True)
class TextAnalysis:
    """Script summary of a string."""

    text: str
    contains_japanese: bool
    predicates: dict[str, bool] = field(default_factory=dict)
    tokens: list[Token] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "text": self.text,
            "contains_japanese": self.contains_japanese,
            "predicates": dict(self.predicates),
            "tokens": [
                {
                    "text": token.text,
                    "offset": token.offset,
                    "length": token.length,
                    "script_type": token.script_type.value,
                    "is_word": token.is_word,
                }
                for token in self.tokens
            ],
        }
