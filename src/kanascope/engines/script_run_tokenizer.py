from __future__ import annotations

from itertools import groupby
from typing import Iterator

from ..classifier import classify, code_units
from ..models import CharacterClass, Span
from .base import Tokenizer

NON_WORD_CLASSES = frozenset(
    {CharacterClass.SPACE, CharacterClass.PERIOD, CharacterClass.COMMA}
)


class ScriptRunTokenizer(Tokenizer):
    """
    Dictionary-free tokenizer that splits text into runs of one script.

    This keeps the converter usable without a morphological dictionary; kanji
    and their okurigana end up in separate tokens.
    """

    def tokenize(self, text: str) -> Iterator[Span]:
        offset = 0
        for (_, is_word), group in groupby(text, key=_run_key):
            length = len(list(group))
            yield Span(offset=offset, length=length, is_word=is_word)
            offset += length


def _run_key(char: str) -> tuple[str, bool]:
    char_class = classify(next(code_units(char)))
    if char_class in NON_WORD_CLASSES:
        return char_class.value, False
    if char_class is CharacterClass.OTHER:
        if char.isspace():
            return "blank", False
        if char.isalnum():
            return "alnum", True
        # Each symbol becomes its own run keyed by the character.
        return f"symbol:{char}", False
    return char_class.value, True
