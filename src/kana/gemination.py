"""促音(っ/ッ)とローマ字の子音重ねの相互変換。"""
from __future__ import annotations

from functools import lru_cache

from .register import Register
from .rules import RuleTable
from .tables import kana_initials

SMALL_TSU: dict[str, Register] = {"っ": Register.HIRAGANA, "ッ": Register.KATAKANA}
VOWEL_LETTERS = frozenset("aeiouAEIOU")
NASAL_LETTERS = frozenset("nN")
LITERAL_SMALL_TSU = "x"
LITERAL_SMALL_TSU_BEFORE_VOWEL = "xtsu"


def double_consonants(text: str) -> str:
    """Spell every small tsu left in romaji output as a doubled consonant.

    The follower's letter is copied with its case; ``ch`` takes ``t``
    (``matcha``). Before a vowel the literal ``xtsu`` is written and before
    ``n``, a non-letter or the end of text the literal ``x``, so the result
    reads back to the same kana.
    """

    if not any(char in SMALL_TSU for char in text):
        return text

    out: list[str] = []
    last = len(text) - 1
    for idx, char in enumerate(text):
        register = SMALL_TSU.get(char)
        if register is None:
            out.append(char)
            continue
        follower = text[idx + 1] if idx < last else ""
        out.append(_spell_small_tsu(follower, uppercase=register is Register.KATAKANA))
    return "".join(out)


def _spell_small_tsu(follower: str, *, uppercase: bool) -> str:
    if follower in VOWEL_LETTERS:
        literal = LITERAL_SMALL_TSU_BEFORE_VOWEL
    elif follower.isascii() and follower.isalpha() and follower not in NASAL_LETTERS:
        if follower == "c":
            return "t"
        if follower == "C":
            return "T"
        return follower
    else:
        literal = LITERAL_SMALL_TSU
    return literal.upper() if uppercase else literal


@lru_cache(maxsize=None)
def small_tsu_table(register: Register) -> RuleTable:
    """Pairs of (leftover consonant + kana) that denote a geminate in ``register``."""

    entries: dict[str, str] = {}
    for letter, kana_chars in kana_initials(register).items():
        letter = register.fold(letter)
        for kana in kana_chars:
            entries[letter + kana] = register.small_tsu + kana
    return RuleTable(entries, name=f"small_tsu_{register.value}")


def mark_small_tsu(text: str, register: Register) -> str:
    """Turn a consonant the main table left behind into a small tsu.

    ``kakka`` leaves ``かkか`` after the main table; the ``k`` before ``か``
    becomes ``っ``. ``tch``/``cch`` and ``ssh`` resolve the same way.
    """

    return small_tsu_table(register).rewrite(text)
