"""撥音(ん/ン)と後続の母音・ヤ行との区切り(アポストロフィ)の処理。"""
from __future__ import annotations

from .register import Register

NASALS = frozenset("んン")
AMBIGUOUS_FOLLOWERS = frozenset("あいうえおやゆよアイウエオヤユヨ")
ROMAJI_FOLLOWERS = frozenset("aeiouyAEIOUY")
SEPARATOR = "'"
SEPARATORS = frozenset({"'", "’"})


def insert_separators(text: str) -> str:
    """Mark every nasal that would fuse with the next kana once romanised.

    ``ぜんいん`` becomes ``ぜん'いん`` so that it spells ``zen'in`` rather
    than ``zenin``. A nasal before a consonant mora is left alone.
    """

    out: list[str] = []
    last = len(text) - 1
    for idx, char in enumerate(text):
        out.append(char)
        if char in NASALS and idx < last and text[idx + 1] in AMBIGUOUS_FOLLOWERS:
            out.append(SEPARATOR)
    return "".join(out)


def resolve_separators(text: str, register: Register) -> str:
    """Replace ``n'`` before a vowel or ``y`` with the register's nasal kana."""

    nasal_letter = register.fold("n")
    out: list[str] = []
    idx = 0
    limit = len(text)
    while idx < limit:
        char = text[idx]
        if (
            char == nasal_letter
            and idx + 2 < limit
            and text[idx + 1] in SEPARATORS
            and text[idx + 2] in ROMAJI_FOLLOWERS
        ):
            out.append(register.nasal)
            idx += 2
            continue
        out.append(char)
        idx += 1
    return "".join(out)
