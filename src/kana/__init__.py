"""Kana/romaji conversion public exports."""
from .conversion import (
    Operation,
    UnknownOperationError,
    convert,
    to_hiragana,
    to_kana,
    to_katakana,
    to_romaji,
    to_romaji_cased,
)
from .register import Register
from .rules import RuleTable
from .script import (
    contains_hiragana,
    contains_kanji,
    contains_katakana,
    extract_kanji,
    hiragana_to_katakana,
    is_hiragana,
    is_kanji,
    is_katakana,
    katakana_to_hiragana,
)

__all__ = [
    "Operation",
    "Register",
    "RuleTable",
    "UnknownOperationError",
    "contains_hiragana",
    "contains_kanji",
    "contains_katakana",
    "convert",
    "extract_kanji",
    "hiragana_to_katakana",
    "is_hiragana",
    "is_kanji",
    "is_katakana",
    "katakana_to_hiragana",
    "to_hiragana",
    "to_kana",
    "to_katakana",
    "to_romaji",
    "to_romaji_cased",
]
