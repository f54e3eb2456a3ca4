"""
kanascope package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .analysis import script_type
from .classifier import (
    classify,
    contains_japanese,
    is_fullwidth_digit,
    is_fullwidth_latin,
    is_halfwidth_katakana,
    is_hankaku_katakana,
    is_hiragana,
    is_japanese_specific,
    is_kanji,
    is_katakana,
    is_zenkaku_numerical,
    is_zenkaku_romaji,
)
from .config import KanascopeConfig, config_from_dict, config_from_yaml, load_config
from .conversion import ScriptConverter, build_converter_from_config
from .engines import (
    ConversionUnavailable,
    KanascopeError,
    TransformUnavailable,
    create_tokenizer,
    create_transliterator,
)
from .models import CharacterClass, ScriptType, Span, SyllabaryTarget, Token

__all__ = [
    "CharacterClass",
    "ScriptType",
    "Span",
    "SyllabaryTarget",
    "Token",
    "classify",
    "contains_japanese",
    "is_fullwidth_digit",
    "is_fullwidth_latin",
    "is_halfwidth_katakana",
    "is_hankaku_katakana",
    "is_hiragana",
    "is_japanese_specific",
    "is_kanji",
    "is_katakana",
    "is_zenkaku_numerical",
    "is_zenkaku_romaji",
    "script_type",
    "KanascopeConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ScriptConverter",
    "build_converter_from_config",
    "ConversionUnavailable",
    "KanascopeError",
    "TransformUnavailable",
    "create_tokenizer",
    "create_transliterator",
]

__version__ = "0.1.0"
