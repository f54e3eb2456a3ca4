"""Minimal example showing how to romanize and re-kana Japanese text directly."""

from __future__ import annotations

from kanascope import build_converter_from_config, load_config


def main() -> None:
    config = load_config()
    converter = build_converter_from_config(config)

    sample_text = "日本の歴史や文化が大好きです。"
    print("Original:\n", sample_text)
    print("\nRomaji:\n", converter.to_romaji(sample_text, separator=" "))
    print("\nKanji as hiragana:\n", converter.replace_kanji_with_hiragana(sample_text))
    print("\nTokens:")
    for token in converter.tokens(sample_text):
        print(f"  {token.text}\t{token.script_type.value}")


if __name__ == "__main__":
    main()
