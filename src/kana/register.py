"""Hiragana/katakana register selection."""
from __future__ import annotations

import string
from enum import Enum

from .script import hiragana_to_katakana_text, katakana_to_hiragana_text

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_LOWER_LETTERS = frozenset(string.ascii_lowercase)
_UPPER_LETTERS = frozenset(string.ascii_uppercase)


class Register(str, Enum):
    """Output script of a kana conversion, tied to the case of its romaji.

    Lowercase romaji belongs to hiragana and uppercase romaji to katakana.
    """

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"

    @classmethod
    def of_letter(cls, char: str) -> Register | None:
        """Register implied by an ASCII letter, or None for anything else."""

        if char in _LOWER_LETTERS:
            return cls.HIRAGANA
        if char in _UPPER_LETTERS:
            return cls.KATAKANA
        return None

    @property
    def nasal(self) -> str:
        return "ん" if self is Register.HIRAGANA else "ン"

    @property
    def small_tsu(self) -> str:
        return "っ" if self is Register.HIRAGANA else "ッ"

    def fold(self, text: str) -> str:
        """Fold ASCII letters to this register's case; other scripts are kept."""

        return fold_ascii(text, self)

    def adopt(self, text: str) -> str:
        """Replace kana of the other script with this register's counterpart."""

        if self is Register.HIRAGANA:
            return katakana_to_hiragana_text(text)
        return hiragana_to_katakana_text(text)


def fold_ascii(text: str, register: Register) -> str:
    return text.translate(_TO_LOWER if register is Register.HIRAGANA else _TO_UPPER)
