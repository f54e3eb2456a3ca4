from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from kanascope.engines.base import (
    ConversionUnavailable,
    Tokenizer,
    TransformUnavailable,
    Transliterator,
)
from kanascope.models import Span, SyllabaryTarget

PUNCTUATION = set("。、．，！？ 　")

READINGS = {
    "日本": "nippon",
    "の": "no",
    "歴史": "rekishi",
    "や": "ya",
    "文化": "bunka",
    "が": "ga",
    "大好き": "daisuki",
    "です": "desu",
    "東京": "toukyou",
    "カタカナ": "katakana",
    "ひらがな": "hiragana",
    "漢字": "kanji",
    "食べる": "taberu",
}

SYLLABARY = {
    "toukyou": ("とうきょう", "トウキョウ"),
    "kanji": ("かんじ", "カンジ"),
    "taberu": ("たべる", "タベル"),
    "katakana": ("かたかな", "カタカナ"),
    "hiragana": ("ひらがな", "ヒラガナ"),
    "sugoidesune": ("すごいですね", "スゴイデスネ"),
}


class FakeTokenizer(Tokenizer):
    """Greedy longest-match tokenizer over a fixed vocabulary."""

    def __init__(self, vocabulary: Iterable[str] = READINGS) -> None:
        self.vocabulary = sorted(set(vocabulary), key=len, reverse=True)
        self.opened = 0
        self.closed = 0

    def tokenize(self, text: str) -> Iterator[Span]:
        self.opened += 1
        try:
            offset = 0
            while offset < len(text):
                length = next(
                    (len(word) for word in self.vocabulary if text.startswith(word, offset)),
                    1,
                )
                is_word = text[offset] not in PUNCTUATION
                yield Span(offset=offset, length=length, is_word=is_word)
                offset += length
        finally:
            self.closed += 1


class FakeTransliterator(Transliterator):
    """Dictionary-backed transliterator with deterministic failures."""

    def __init__(
        self,
        readings: Mapping[str, str] = READINGS,
        syllabary: Mapping[str, tuple[str, str]] = SYLLABARY,
    ) -> None:
        self.readings = dict(readings)
        self.syllabary = dict(syllabary)
        self.latin_calls: list[str] = []

    def to_latin(self, token: str) -> str:
        self.latin_calls.append(token)
        try:
            return self.readings[token]
        except KeyError as exc:
            raise ConversionUnavailable(f"no reading for {token!r}") from exc

    def to_syllabary(self, text: str, target: SyllabaryTarget) -> str:
        try:
            hira, kata = self.syllabary[text.lower()]
        except KeyError as exc:
            raise TransformUnavailable(f"cannot transform {text!r}") from exc
        return kata if target is SyllabaryTarget.KATAKANA else hira
