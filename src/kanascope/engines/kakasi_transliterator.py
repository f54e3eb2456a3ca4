from __future__ import annotations

import logging
import re
from typing import Any, Iterator, Mapping

import jaconv
import pykakasi

from ..models import SyllabaryTarget
from .base import ConversionUnavailable, Transliterator, TransformUnavailable

logger = logging.getLogger(__name__)

LATIN_LETTER_RE = re.compile(r"[A-Za-z]")
# A small tsu doubling nothing: at the end, before another small tsu or before a non-kana.
DANGLING_SOKUON_RE = re.compile(r"っ(?:っ|(?![ぁ-ゖ]))")
SYLLABIC_N = "ん"
# Romaji starts that would otherwise merge with a preceding syllabic n.
SEPARATE_AFTER_N = frozenset("aeiouyn")


class KakasiTransliterator(Transliterator):
    """
    Transliterator using pykakasi for readings and jaconv for romaji input.

    Japanese tokens are romanized with pykakasi's Hepburn output, which spells
    long vowels out (東京 -> toukyou). A syllabic n followed by a vowel, y or n
    is written ``n'`` (金曜日 -> kin'youbi, こんにちは -> kon'nichiha) so the
    romaji reads back to the same kana. Latin text is converted with
    ``jaconv.alphabet2kana``; letters left over or a small tsu with nothing to
    double mean the text was not romaji and the transform is reported as
    unavailable.
    """

    def __init__(self) -> None:
        self._kakasi = pykakasi.kakasi()

    def to_latin(self, token: str) -> str:
        if not token:
            return ""
        try:
            parts = self._kakasi.convert(token)
            chunks = [chunk for part in parts for chunk in self._chunks(part)]
        except Exception as exc:
            raise ConversionUnavailable(f"pykakasi failed on {token!r}") from exc

        latin = ""
        after_n = False
        for text, is_syllabic_n in chunks:
            if not text:
                continue
            if after_n and text[0].lower() in SEPARATE_AFTER_N:
                latin += "'"
            latin += text
            after_n = is_syllabic_n
        if not latin or not latin.isascii():
            raise ConversionUnavailable(f"No Latin transcription for {token!r}")
        return latin

    def to_syllabary(self, text: str, target: SyllabaryTarget) -> str:
        hiragana = jaconv.alphabet2kana(text.lower())
        if LATIN_LETTER_RE.search(hiragana) or DANGLING_SOKUON_RE.search(hiragana):
            raise TransformUnavailable(
                f"Unable to render {text!r} as {target.value}"
            )
        if target is SyllabaryTarget.KATAKANA:
            return jaconv.hira2kata(hiragana)
        return hiragana

    def _chunks(self, part: Mapping[str, Any]) -> Iterator[tuple[str, bool]]:
        """Yield (romaji, is_syllabic_n) pieces of one pykakasi part."""
        hira = part.get("hira", "")
        if SYLLABIC_N not in hira:
            yield part.get("hepburn", ""), False
            return
        # Romanize around each ん so its boundary stays visible.
        for index, segment in enumerate(hira.split(SYLLABIC_N)):
            if index:
                yield "n", True
            if segment:
                yield "".join(
                    item.get("hepburn", "") for item in self._kakasi.convert(segment)
                ), False
