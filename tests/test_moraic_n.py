"""撥音の区切り処理のテスト。"""
from __future__ import annotations

from kana.moraic_n import insert_separators, resolve_separators
from kana.register import Register


def test_insert_separators_before_vowels_and_glides() -> None:
    cases = [
        ("ぜんいん", "ぜん'いん"),
        ("しんよう", "しん'よう"),
        ("ンヤ", "ン'ヤ"),
        ("ぜんにん", "ぜんにん"),
        ("かん", "かん"),
        ("ん", "ん"),
        ("", ""),
    ]
    for text, expected in cases:
        assert insert_separators(text) == expected, text


def test_resolve_separators_per_register() -> None:
    cases = [
        (Register.HIRAGANA, "zen'in", "zeんin"),
        (Register.HIRAGANA, "shin’you", "shiんyou"),
        (Register.HIRAGANA, "n'", "n'"),
        (Register.HIRAGANA, "n'k", "n'k"),
        (Register.HIRAGANA, "N'A", "N'A"),
        (Register.KATAKANA, "ZEN'IN", "ZEンIN"),
        (Register.KATAKANA, "zen'in", "zen'in"),
    ]
    for register, text, expected in cases:
        assert resolve_separators(text, register) == expected, text
