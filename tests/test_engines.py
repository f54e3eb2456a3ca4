from __future__ import annotations

from types import SimpleNamespace
from typing import Any

import pytest

from kanascope.config import KanascopeConfig, SudachiSettings
from kanascope.conversion import ScriptConverter
from kanascope.engines import (
    KakasiTransliterator,
    ScriptRunTokenizer,
    build_tokenizer_from_config,
    create_tokenizer,
    create_transliterator,
)
from kanascope.engines import kakasi_transliterator as kakasi_module
from kanascope.engines import sudachi_tokenizer as sudachi_module
from kanascope.engines.base import ConversionUnavailable, TransformUnavailable
from kanascope.models import Span, SyllabaryTarget


class FakeMorpheme:
    def __init__(self, begin: int, end: int, pos: str) -> None:
        self._begin = begin
        self._end = end
        self._pos = pos

    def begin(self) -> int:
        return self._begin

    def end(self) -> int:
        return self._end

    def part_of_speech(self) -> tuple[str, ...]:
        return (self._pos, "*", "*", "*", "*", "*")


def _fake_sudachipy(morphemes: list[FakeMorpheme], calls: dict[str, Any]) -> Any:
    class FakeSudachiTokenizer:
        def tokenize(self, text: str, mode: str) -> list[FakeMorpheme]:
            calls["mode"] = mode
            calls["text"] = text
            return morphemes

    class FakeDictionary:
        def __init__(self, dict: str = "core") -> None:
            calls["dict"] = dict

        def create(self) -> FakeSudachiTokenizer:
            return FakeSudachiTokenizer()

    return SimpleNamespace(
        Dictionary=FakeDictionary,
        SplitMode=SimpleNamespace(A="mode-a", B="mode-b", C="mode-c"),
    )


def test_sudachi_tokenizer_marks_symbols_and_fills_gaps(monkeypatch):
    calls: dict[str, Any] = {}
    text = "東京 に行く。"
    morphemes = [
        FakeMorpheme(0, 2, "名詞"),
        FakeMorpheme(3, 4, "助詞"),
        FakeMorpheme(4, 6, "動詞"),
        FakeMorpheme(6, 7, "補助記号"),
    ]
    monkeypatch.setattr(sudachi_module, "sudachipy", _fake_sudachipy(morphemes, calls))

    tokenizer = sudachi_module.SudachiTokenizer(split_mode="a", dict_name="full")
    spans = list(tokenizer.tokenize(text))

    assert spans == [
        Span(0, 2, True),
        Span(2, 1, False),
        Span(3, 1, True),
        Span(4, 2, True),
        Span(6, 1, False),
    ]
    assert calls == {"dict": "full", "mode": "mode-a", "text": text}
    assert tokenizer.split_mode == "A"


def test_sudachi_tokenizer_covers_trailing_text(monkeypatch):
    calls: dict[str, Any] = {}
    monkeypatch.setattr(
        sudachi_module,
        "sudachipy",
        _fake_sudachipy([FakeMorpheme(0, 2, "名詞")], calls),
    )
    tokenizer = sudachi_module.SudachiTokenizer()
    assert list(tokenizer.tokenize("東京  ")) == [Span(0, 2, True), Span(2, 2, False)]
    assert list(tokenizer.tokenize("")) == []


def test_sudachi_tokenizer_rejects_unknown_split_mode(monkeypatch):
    monkeypatch.setattr(sudachi_module, "sudachipy", _fake_sudachipy([], {}))
    with pytest.raises(ValueError):
        sudachi_module.SudachiTokenizer(split_mode="D")


def test_build_tokenizer_from_config_passes_sudachi_settings(monkeypatch):
    calls: dict[str, Any] = {}
    monkeypatch.setattr(sudachi_module, "sudachipy", _fake_sudachipy([], calls))
    config = KanascopeConfig(sudachi=SudachiSettings(split_mode="B", dict_name="small"))

    tokenizer = build_tokenizer_from_config(config)

    assert isinstance(tokenizer, sudachi_module.SudachiTokenizer)
    assert tokenizer.split_mode == "B"
    assert calls["dict"] == "small"


def test_script_run_tokenizer_covers_input():
    text = "東京タワーは333m、すごい！ ok"
    spans = list(ScriptRunTokenizer().tokenize(text))
    pieces = [(text[s.offset : s.end], s.is_word) for s in spans]

    assert pieces == [
        ("東京", True),
        ("タワー", True),
        ("は", True),
        ("333m", True),
        ("、", False),
        ("すごい", True),
        ("！", True),
        (" ", False),
        ("ok", True),
    ]
    assert sum(s.length for s in spans) == len(text)


def test_factories_reject_unknown_names():
    with pytest.raises(ValueError):
        create_tokenizer("mecab")
    with pytest.raises(ValueError):
        create_transliterator("icu")


def test_factories_build_dependency_free_engines():
    assert isinstance(create_tokenizer("script_run"), ScriptRunTokenizer)
    assert isinstance(create_transliterator("pykakasi"), KakasiTransliterator)


def test_kakasi_transliterator_romanizes_kana_and_kanji():
    transliterator = KakasiTransliterator()
    assert transliterator.to_latin("漢字") == "kanji"
    assert transliterator.to_latin("カタカナ") == "katakana"
    assert transliterator.to_latin("ひらがな") == "hiragana"


def test_kakasi_transliterator_rejects_unreadable_tokens(monkeypatch):
    transliterator = KakasiTransliterator()
    monkeypatch.setattr(
        transliterator,
        "_kakasi",
        SimpleNamespace(convert=lambda text: [{"orig": text, "hepburn": ""}]),
    )
    with pytest.raises(ConversionUnavailable):
        transliterator.to_latin("〆")


def test_kakasi_transliterator_renders_romaji_in_kana():
    transliterator = KakasiTransliterator()
    assert transliterator.to_syllabary("Sugoidesune", SyllabaryTarget.HIRAGANA) == "すごいですね"
    assert transliterator.to_syllabary("Sugoidesune", SyllabaryTarget.KATAKANA) == "スゴイデスネ"


def test_kakasi_transliterator_reports_leftover_latin(monkeypatch):
    monkeypatch.setattr(kakasi_module.jaconv, "alphabet2kana", lambda text: text)
    with pytest.raises(TransformUnavailable):
        KakasiTransliterator().to_syllabary("qwrty", SyllabaryTarget.HIRAGANA)


def test_converter_with_bundled_engines():
    converter = ScriptConverter(ScriptRunTokenizer(), KakasiTransliterator())
    assert converter.to_romaji("ひらがな") == "hiragana"
    assert converter.to_romaji("カタカナ", separator=" ") == "katakana"
    assert converter.romaji_to_katakana("Sugoidesune") == "スゴイデスネ"


def test_kakasi_transliterator_marks_syllabic_n():
    transliterator = KakasiTransliterator()
    assert transliterator.to_latin("金曜日") == "kin'youbi"
    assert transliterator.to_latin("今夜") == "kon'ya"
    assert transliterator.to_latin("こんにちは") == "kon'nichiha"
    assert transliterator.to_latin("原因") == "gen'in"
    # No mark before other consonants or at the end of the word.
    assert transliterator.to_latin("文化") == "bunka"
    assert transliterator.to_latin("日本") == "nippon"


def test_kakasi_transliterator_marks_syllabic_n_across_parts(monkeypatch):
    transliterator = KakasiTransliterator()
    parts = {
        "ほ": [{"orig": "ほ", "hira": "ほ", "hepburn": "ho"}],
        "本屋": [
            {"orig": "本", "hira": "ほん", "hepburn": "hon"},
            {"orig": "屋", "hira": "や", "hepburn": "ya"},
        ],
    }
    monkeypatch.setattr(
        transliterator, "_kakasi", SimpleNamespace(convert=lambda text: parts[text])
    )
    assert transliterator.to_latin("本屋") == "hon'ya"


def test_kakasi_transliterator_rejects_dangling_small_tsu():
    transliterator = KakasiTransliterator()
    with pytest.raises(TransformUnavailable):
        transliterator.to_syllabary("abc", SyllabaryTarget.HIRAGANA)
    assert transliterator.to_syllabary("kitte", SyllabaryTarget.HIRAGANA) == "きって"


def test_converter_returns_unreadable_fullwidth_latin_unchanged():
    converter = ScriptConverter(ScriptRunTokenizer(), KakasiTransliterator())
    assert converter.to_hiragana("ＡＢＣ") == "ＡＢＣ"
    assert converter.to_katakana("ＡＢＣ") == "ＡＢＣ"


@pytest.fixture(scope="module")
def sudachi_converter() -> ScriptConverter:
    pytest.importorskip("sudachipy")
    pytest.importorskip("sudachidict_core")
    return ScriptConverter(sudachi_module.SudachiTokenizer(), KakasiTransliterator())


def test_sudachi_converter_romanizes_words(sudachi_converter: ScriptConverter):
    assert sudachi_converter.to_romaji("東京") == "toukyou"
    assert sudachi_converter.to_romaji("カタカナ") == "katakana"
    assert sudachi_converter.to_romaji("ひらがな") == "hiragana"


def test_sudachi_converter_romanizes_sentence(sudachi_converter: ScriptConverter):
    sentence = "日本の歴史や文化が大好きです。"
    assert (
        sudachi_converter.to_romaji(sentence, separator=" ")
        == "nippon no rekishi ya bunka ga daisuki desu"
    )
    assert sudachi_converter.to_romaji(sentence) == "nipponnorekishiyabunkagadaisukidesu"


def test_sudachi_converter_keeps_syllabic_n_in_kana(sudachi_converter: ScriptConverter):
    assert sudachi_converter.replace_kanji_with_hiragana("金曜日") == "きんようび"
    assert sudachi_converter.to_hiragana("今夜") == "こんや"
    assert sudachi_converter.to_katakana("今夜") == "コンヤ"
    assert sudachi_converter.to_hiragana("こんにちは") == "こんにちは"
