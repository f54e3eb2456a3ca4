"""
Per-code-unit script classification.

Code point ranges:

* Hiragana: 3040-309F
* Katakana: 30A0-30FF, except 30FB (KATAKANA MIDDLE DOT)
* Kanji: CJK Radicals Supplement 2E80-2EFF, Kangxi Radicals 2F00-2FDF,
  CJK Unified Ideographs 4E00-9FAF
* Period: 3001, FF64, FF0E
* Comma: 3002, FF61, FF0C
* Space: 3000
* Full-width Latin: FF01-FF5E
* Full-width digits: FF10-FF19
* Half-width katakana: FF61-FF9F

The period/comma tables are kept as-is even though 3001 is the ideographic
comma glyph and 3002 the ideographic full stop.
"""

from __future__ import annotations

from typing import Callable, Iterator

from .models import CharacterClass

HIRAGANA_RANGE = (0x3040, 0x309F)
KATAKANA_RANGE = (0x30A0, 0x30FF)
KATAKANA_MIDDLE_DOT = 0x30FB
KANJI_RANGES = ((0x2E80, 0x2EFF), (0x2F00, 0x2FDF), (0x4E00, 0x9FAF))
PERIOD_UNITS = frozenset({0x3001, 0xFF64, 0xFF0E})
COMMA_UNITS = frozenset({0x3002, 0xFF61, 0xFF0C})
IDEOGRAPHIC_SPACE = 0x3000
FULLWIDTH_LATIN_RANGE = (0xFF01, 0xFF5E)
FULLWIDTH_DIGIT_RANGE = (0xFF10, 0xFF19)
HALFWIDTH_KATAKANA_RANGE = (0xFF61, 0xFF9F)
# Half-width katakana proper; only consulted for the middle dot exemption.
HALFWIDTH_KATAKANA_LETTERS_RANGE = (0xFF66, 0xFF9F)
JAPANESE_SPECIFIC_RANGES = ((0x3040, 0x30FF), (0xFF01, 0xFF9F))


def _in_range(unit: int, bounds: tuple[int, int]) -> bool:
    return bounds[0] <= unit <= bounds[1]


def code_units(text: str) -> Iterator[int]:
    """Yield the UTF-16 code units of ``text``."""
    for char in text:
        value = ord(char)
        if value < 0x10000:
            yield value
        else:
            value -= 0x10000
            yield 0xD800 | (value >> 10)
            yield 0xDC00 | (value & 0x3FF)


def is_hiragana_unit(unit: int) -> bool:
    return _in_range(unit, HIRAGANA_RANGE)


def is_katakana_unit(unit: int) -> bool:
    return _in_range(unit, KATAKANA_RANGE) and (
        unit != KATAKANA_MIDDLE_DOT
        or _in_range(unit, HALFWIDTH_KATAKANA_LETTERS_RANGE)
    )


def is_kanji_unit(unit: int) -> bool:
    return any(_in_range(unit, bounds) for bounds in KANJI_RANGES)


def is_period_unit(unit: int) -> bool:
    return unit in PERIOD_UNITS


def is_comma_unit(unit: int) -> bool:
    return unit in COMMA_UNITS


def is_space_unit(unit: int) -> bool:
    return unit == IDEOGRAPHIC_SPACE


def is_fullwidth_latin_unit(unit: int) -> bool:
    return _in_range(unit, FULLWIDTH_LATIN_RANGE)


def is_fullwidth_digit_unit(unit: int) -> bool:
    return _in_range(unit, FULLWIDTH_DIGIT_RANGE)


def is_halfwidth_katakana_unit(unit: int) -> bool:
    return _in_range(unit, HALFWIDTH_KATAKANA_RANGE)


def is_japanese_specific(unit: int) -> bool:
    """True for syllabary, full/half-width form and period/comma units."""
    return (
        any(_in_range(unit, bounds) for bounds in JAPANESE_SPECIFIC_RANGES)
        or is_period_unit(unit)
        or is_comma_unit(unit)
    )


# First match wins.
_CLASS_TABLE: tuple[tuple[Callable[[int], bool], CharacterClass], ...] = (
    (is_hiragana_unit, CharacterClass.HIRAGANA),
    (is_katakana_unit, CharacterClass.KATAKANA),
    (is_kanji_unit, CharacterClass.KANJI),
    (is_period_unit, CharacterClass.PERIOD),
    (is_comma_unit, CharacterClass.COMMA),
    (is_space_unit, CharacterClass.SPACE),
    (is_fullwidth_latin_unit, CharacterClass.FULLWIDTH_LATIN),
    (is_fullwidth_digit_unit, CharacterClass.FULLWIDTH_DIGIT),
    (is_halfwidth_katakana_unit, CharacterClass.HALFWIDTH_KATAKANA),
)


def classify(unit: int) -> CharacterClass:
    """Return the CharacterClass of a single UTF-16 code unit."""
    for predicate, char_class in _CLASS_TABLE:
        if predicate(unit):
            return char_class
    return CharacterClass.OTHER


def classify_text(text: str) -> list[CharacterClass]:
    """Classify every code unit of ``text`` in order."""
    return [classify(unit) for unit in code_units(text)]


def _all_units(text: str, predicate: Callable[[int], bool]) -> bool:
    return all(predicate(unit) for unit in code_units(text))


def contains_japanese(text: str) -> bool:
    """True when every code unit is Japanese-specific or kanji (and for "")."""
    return _all_units(
        text, lambda unit: is_japanese_specific(unit) or is_kanji_unit(unit)
    )


def is_hiragana(text: str) -> bool:
    return _all_units(text, is_hiragana_unit)


def is_katakana(text: str) -> bool:
    return _all_units(text, is_katakana_unit)


def is_kanji(text: str) -> bool:
    return _all_units(text, is_kanji_unit)


def is_halfwidth_katakana(text: str) -> bool:
    return _all_units(text, is_halfwidth_katakana_unit)


def is_fullwidth_latin(text: str) -> bool:
    return _all_units(text, is_fullwidth_latin_unit)


def is_fullwidth_digit(text: str) -> bool:
    return _all_units(text, is_fullwidth_digit_unit)


# Japanese names for the same checks.
is_hankaku_katakana = is_halfwidth_katakana
is_zenkaku_romaji = is_fullwidth_latin
is_zenkaku_numerical = is_fullwidth_digit

STRING_PREDICATES: dict[str, Callable[[str], bool]] = {
    "is_hiragana": is_hiragana,
    "is_katakana": is_katakana,
    "is_kanji": is_kanji,
    "is_halfwidth_katakana": is_halfwidth_katakana,
    "is_fullwidth_latin": is_fullwidth_latin,
    "is_fullwidth_digit": is_fullwidth_digit,
}
