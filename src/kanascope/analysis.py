from __future__ import annotations

from .classifier import classify, code_units
from .models import CharacterClass, ScriptType

JAPANESE_SCRIPT_CLASSES = frozenset(
    {
        CharacterClass.KATAKANA,
        CharacterClass.HIRAGANA,
        CharacterClass.KANJI,
        CharacterClass.HALFWIDTH_KATAKANA,
    }
)

_SINGLE_CLASS_TYPES = {
    CharacterClass.HIRAGANA: ScriptType.HIRAGANA,
    CharacterClass.KATAKANA: ScriptType.KATAKANA,
    CharacterClass.KANJI: ScriptType.KANJI,
    CharacterClass.HALFWIDTH_KATAKANA: ScriptType.HALFWIDTH_KATAKANA,
}


def script_type(token: str) -> ScriptType:
    """
    Infer the ScriptType of a token.

    Scanning stops at the first code unit whose class differs from the first
    unit's class: the token is ``compound`` if that unit is Japanese script
    (hiragana, katakana, kanji, half-width katakana) and ``other`` otherwise.
    The rest of the token is not inspected, so "ひらカa" is ``compound`` while
    "東京x東" is ``other``.
    """
    units = code_units(token)
    first = next(units, None)
    if first is None:
        return ScriptType.OTHER

    running = classify(first)
    for unit in units:
        char_class = classify(unit)
        if char_class != running:
            if char_class in JAPANESE_SCRIPT_CLASSES:
                return ScriptType.COMPOUND
            return ScriptType.OTHER

    return _SINGLE_CLASS_TYPES.get(running, ScriptType.OTHER)


def needs_reading(kind: ScriptType) -> bool:
    """True for token types that are rewritten through a phonetic reading."""
    return kind in (ScriptType.KANJI, ScriptType.COMPOUND)
