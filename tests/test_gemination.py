"""促音と子音重ねの変換テスト。"""
from __future__ import annotations

from kana.gemination import double_consonants, mark_small_tsu, small_tsu_table
from kana.register import Register


def test_double_consonants_copies_follower() -> None:
    cases = [
        ("kaっka", "kakka"),
        ("maっcha", "matcha"),
        ("KAッKA", "KAKKA"),
        ("MAッCHA", "MATCHA"),
        ("zaっshi", "zasshi"),
    ]
    for text, expected in cases:
        assert double_consonants(text) == expected, text


def test_double_consonants_literal_forms() -> None:
    cases = [
        ("っっ", "xx"),
        ("xaっxa", "xaxxa"),
        ("っa", "xtsua"),
        ("っna", "xna"),
        ("っ", "x"),
        ("っ!", "x!"),
        ("ッッ", "XX"),
        ("ッA", "XTSUA"),
    ]
    for text, expected in cases:
        assert double_consonants(text) == expected, text


def test_double_consonants_follow_small_tsu_script() -> None:
    assert double_consonants("ッっ") == "Xx"
    assert double_consonants("っッa") == "xXTSUa"


def test_double_consonants_without_small_tsu_is_identity() -> None:
    assert double_consonants("kakka") == "kakka"


def test_mark_small_tsu() -> None:
    cases = [
        (Register.HIRAGANA, "かkか", "かっか"),
        (Register.HIRAGANA, "まtちゃ", "まっちゃ"),
        (Register.HIRAGANA, "まcちゃ", "まっちゃ"),
        (Register.HIRAGANA, "ざsし", "ざっし"),
        (Register.HIRAGANA, "らlら", "らっら"),
        (Register.HIRAGANA, "らrら", "らっら"),
        (Register.KATAKANA, "カKカ", "カッカ"),
        (Register.KATAKANA, "ヴァVヴァ", "ヴァッヴァ"),
    ]
    for register, text, expected in cases:
        assert mark_small_tsu(text, register) == expected, text


def test_mark_small_tsu_ignores_mismatched_letters() -> None:
    assert mark_small_tsu("かtか", Register.HIRAGANA) == "かtか"
    assert mark_small_tsu("かKか", Register.HIRAGANA) == "かKか"
    assert mark_small_tsu("カkカ", Register.KATAKANA) == "カkカ"
    assert mark_small_tsu("k", Register.HIRAGANA) == "k"


def test_small_tsu_table_is_cached() -> None:
    assert small_tsu_table(Register.HIRAGANA) is small_tsu_table(Register.HIRAGANA)
    assert "nな" not in small_tsu_table(Register.HIRAGANA)
