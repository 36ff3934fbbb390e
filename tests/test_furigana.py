from __future__ import annotations

import pytest

from services.furigana import (
    Kana,
    Kanji,
    encode_furigana,
    kana_str,
    kanji_str,
    parse_furigana,
)


def test_parse_mixed_segments() -> None:
    assert parse_furigana("まき[散|ち]らす") == [
        Kana("まき"),
        Kanji("散", ("ち",)),
        Kana("らす"),
    ]


def test_parse_multiple_readings() -> None:
    assert parse_furigana("[音楽|おん|がく]") == [Kanji("音楽", ("おん", "がく"))]


def test_parse_empty() -> None:
    assert parse_furigana("") == []


@pytest.mark.parametrize(
    "text, expected",
    [
        ("[行|い", [Kana("[行|い")]),
        ("[行]く", [Kana("[行]く")]),
        ("あ[", [Kana("あ[")]),
        ("[[行|い]く", [Kana("["), Kanji("行", ("い",)), Kana("く")]),
    ],
)
def test_malformed_brackets_are_plain_text(text: str, expected: list) -> None:
    assert parse_furigana(text) == expected


def test_reading_groups() -> None:
    assert Kanji("音楽", ("おん", "がく")).reading_groups() == [("音", "おん"), ("楽", "がく")]
    assert Kanji("今日", ("きょう",)).reading_groups() == [("今日", "きょう")]
    assert Kanji("行", ("い",)).reading_groups() == [("行", "い")]


def test_reading_groups_with_count_mismatch_keep_whole_literal() -> None:
    assert Kanji("日本語", ("に", "ほんご")).reading_groups() == [("日本語", "にほんご")]


def test_projections() -> None:
    segments = parse_furigana("[引|ひ]っ[掛|か]かる")
    assert kanji_str(segments) == "引っ掛かる"
    assert kana_str(segments) == "ひっかかる"


def test_encode() -> None:
    segments = [Kana("お"), Kanji("音楽", ("おん", "がく")), Kana("を")]
    assert encode_furigana(segments) == "お[音楽|おん|がく]を"


def test_encode_kanji_without_readings_writes_literal() -> None:
    assert encode_furigana([Kanji("行", ()), Kana("く")]) == "行く"


def test_encode_parse_roundtrip() -> None:
    text = "[日本語|に|ほん|ご]で[話|はな]す"
    assert encode_furigana(parse_furigana(text)) == text
