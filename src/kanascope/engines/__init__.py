from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .base import (
    ConversionUnavailable,
    KanascopeError,
    Tokenizer,
    TransformUnavailable,
    Transliterator,
)
from .kakasi_transliterator import KakasiTransliterator
from .script_run_tokenizer import ScriptRunTokenizer
from .sudachi_tokenizer import SudachiTokenizer

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import KanascopeConfig

__all__ = [
    "ConversionUnavailable",
    "KanascopeError",
    "TransformUnavailable",
    "Tokenizer",
    "Transliterator",
    "KakasiTransliterator",
    "ScriptRunTokenizer",
    "SudachiTokenizer",
    "create_tokenizer",
    "create_transliterator",
    "build_tokenizer_from_config",
    "build_transliterator_from_config",
]


def create_tokenizer(name: str, **kwargs: Any) -> Tokenizer:
    """Factory for building tokenizers by name."""
    normalized = name.lower().strip()
    if normalized == "sudachi":
        return SudachiTokenizer(**kwargs)
    if normalized in {"script_run", "script-run"}:
        return ScriptRunTokenizer()
    raise ValueError(f"Unknown tokenizer '{name}'.")


def create_transliterator(name: str) -> Transliterator:
    """Factory for building transliterators by name."""
    normalized = name.lower().strip()
    if normalized in {"kakasi", "pykakasi"}:
        return KakasiTransliterator()
    raise ValueError(f"Unknown transliterator '{name}'.")


def build_tokenizer_from_config(config: "KanascopeConfig") -> Tokenizer:
    """Convenience helper to build a tokenizer from KanascopeConfig."""
    if config.tokenizer_name.lower().strip() == "sudachi":
        return create_tokenizer(
            config.tokenizer_name,
            split_mode=config.sudachi.split_mode,
            dict_name=config.sudachi.dict_name,
        )
    return create_tokenizer(config.tokenizer_name)


def build_transliterator_from_config(config: "KanascopeConfig") -> Transliterator:
    """Convenience helper to build a transliterator from KanascopeConfig."""
    return create_transliterator(config.transliterator_name)
