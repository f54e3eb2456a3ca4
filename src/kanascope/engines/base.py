from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from ..models import Span, SyllabaryTarget


class KanascopeError(Exception):
    """Base class for engine failures absorbed by the converter."""


class ConversionUnavailable(KanascopeError):
    """Raised when a token or text cannot be transcribed."""


class TransformUnavailable(KanascopeError):
    """Raised when a Latin-to-syllabary transform cannot be applied."""


class Tokenizer(ABC):
    """Abstract Japanese word segmenter."""

    @abstractmethod
    def tokenize(self, text: str) -> Iterator[Span]:
        """Yield ordered, non-overlapping spans that together cover ``text``."""
        raise NotImplementedError


class Transliterator(ABC):
    """Abstract phonetic conversion engine."""

    @abstractmethod
    def to_latin(self, token: str) -> str:
        """Return the Latin transcription of a Japanese token."""
        raise NotImplementedError

    @abstractmethod
    def to_syllabary(self, text: str, target: SyllabaryTarget) -> str:
        """Return a hiragana or katakana rendering of Latin ``text``."""
        raise NotImplementedError
