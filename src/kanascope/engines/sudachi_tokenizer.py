from __future__ import annotations

import importlib
import logging
from typing import Any, Iterator, cast

from ..models import Span
from .base import Tokenizer

logger = logging.getLogger(__name__)

sudachipy: Any | None = None

# Part-of-speech heads that carry no reading: supplementary symbols and blanks.
NON_WORD_POS = frozenset({"補助記号", "空白"})
SPLIT_MODES = ("A", "B", "C")


class SudachiTokenizer(Tokenizer):
    """
    Word segmenter backed by SudachiPy.

    Mode A yields the shortest units (東京都 -> 東京, 都), mode C the longest
    (東京都). Spans not covered by a morpheme are emitted as non-word spans so the
    output always covers the input.
    """

    def __init__(self, split_mode: str = "C", dict_name: str = "core") -> None:
        module = _ensure_sudachipy()
        normalized = split_mode.upper().strip()
        if normalized not in SPLIT_MODES:
            raise ValueError(
                f"Unknown Sudachi split mode '{split_mode}'. Use one of A, B, C."
            )
        self.split_mode = normalized
        self._mode = getattr(module.SplitMode, normalized)
        self._tokenizer = module.Dictionary(dict=dict_name).create()
        logger.debug(
            "Created Sudachi tokenizer dict=%s mode=%s", dict_name, normalized
        )

    def tokenize(self, text: str) -> Iterator[Span]:
        if not text:
            return
        cursor = 0
        for morpheme in self._tokenizer.tokenize(text, self._mode):
            begin, end = morpheme.begin(), morpheme.end()
            if end <= begin:
                continue
            if begin > cursor:
                yield Span(offset=cursor, length=begin - cursor, is_word=False)
            pos = morpheme.part_of_speech()
            is_word = not (pos and pos[0] in NON_WORD_POS) and bool(
                text[begin:end].strip()
            )
            yield Span(offset=begin, length=end - begin, is_word=is_word)
            cursor = end
        if cursor < len(text):
            yield Span(offset=cursor, length=len(text) - cursor, is_word=False)


def _ensure_sudachipy() -> Any:
    global sudachipy
    if sudachipy is not None:
        return sudachipy
    try:  # pragma: no cover - import guard
        module = cast(Any, importlib.import_module("sudachipy"))
    except Exception as exc:  # pragma: no cover - import guard
        raise ImportError(
            "SudachiPy is required for SudachiTokenizer. "
            "Install it with `pip install sudachipy sudachidict-core`."
        ) from exc
    sudachipy = module
    return sudachipy
