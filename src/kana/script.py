"""文字種の判定・漢字抽出・ひらがな/カタカナ変換。"""
from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

# Inclusive code point ranges of the Unicode Script property. The prolonged
# sound mark, middle dot and the combining voicing marks are Common, so they
# belong to none of the three scripts.
HIRAGANA_RANGES: tuple[tuple[int, int], ...] = (
    (0x3041, 0x3096),
    (0x309D, 0x309F),
    (0x1B001, 0x1B11F),
    (0x1B132, 0x1B132),
    (0x1B150, 0x1B152),
    (0x1F200, 0x1F200),
)

KATAKANA_RANGES: tuple[tuple[int, int], ...] = (
    (0x30A1, 0x30FA),
    (0x30FD, 0x30FF),
    (0x31F0, 0x31FF),
    (0x32D0, 0x32FE),
    (0x3300, 0x3357),
    (0xFF66, 0xFF6F),
    (0xFF71, 0xFF9D),
    (0x1AFF0, 0x1AFF3),
    (0x1AFF5, 0x1AFFB),
    (0x1AFFD, 0x1AFFE),
    (0x1B000, 0x1B000),
    (0x1B120, 0x1B122),
    (0x1B155, 0x1B155),
    (0x1B164, 0x1B167),
)

HAN_RANGES: tuple[tuple[int, int], ...] = (
    (0x2E80, 0x2E99),
    (0x2E9B, 0x2EF3),
    (0x2F00, 0x2FD5),
    (0x3005, 0x3005),
    (0x3007, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFA6D),
    (0xFA70, 0xFAD9),
    (0x16FE2, 0x16FE3),
    (0x16FF0, 0x16FF1),
    (0x20000, 0x2A6DF),
    (0x2A700, 0x2B739),
    (0x2B740, 0x2B81D),
    (0x2B820, 0x2CEA1),
    (0x2CEB0, 0x2EBE0),
    (0x2EBF0, 0x2EE5D),
    (0x2F800, 0x2FA1D),
    (0x30000, 0x3134A),
    (0x31350, 0x323AF),
)

SPACES = frozenset({" ", "　"})
KANA_SEPARATORS = SPACES | {"ー"}

_SWAP_OFFSET = 0x60
_HIRAGANA_SWAPPABLE = ((0x3041, 0x3096), (0x309D, 0x309E))
_KATAKANA_SWAPPABLE = ((0x30A1, 0x30F6), (0x30FD, 0x30FE))


def _starts(ranges: Sequence[tuple[int, int]]) -> list[int]:
    return [low for low, _ in ranges]


_HIRAGANA_STARTS = _starts(HIRAGANA_RANGES)
_KATAKANA_STARTS = _starts(KATAKANA_RANGES)
_HAN_STARTS = _starts(HAN_RANGES)


def _in_ranges(char: str, ranges: Sequence[tuple[int, int]], starts: Sequence[int]) -> bool:
    code = ord(char)
    idx = bisect_right(starts, code) - 1
    return idx >= 0 and code <= ranges[idx][1]


def is_hiragana_char(char: str) -> bool:
    return _in_ranges(char, HIRAGANA_RANGES, _HIRAGANA_STARTS)


def is_katakana_char(char: str) -> bool:
    return _in_ranges(char, KATAKANA_RANGES, _KATAKANA_STARTS)


def is_kanji_char(char: str) -> bool:
    return _in_ranges(char, HAN_RANGES, _HAN_STARTS)


def _all_in(text: str, ignored: frozenset[str], predicate) -> bool:
    remaining = [char for char in text if char not in ignored]
    if not remaining:
        return False
    return all(predicate(char) for char in remaining)


def is_hiragana(text: str) -> bool:
    """Return True if every character is hiragana, ignoring spaces and ー."""

    return _all_in(text, KANA_SEPARATORS, is_hiragana_char)


def is_katakana(text: str) -> bool:
    """Return True if every character is katakana, ignoring spaces and ー."""

    return _all_in(text, KANA_SEPARATORS, is_katakana_char)


def is_kanji(text: str) -> bool:
    """Return True if every character is kanji, ignoring spaces."""

    return _all_in(text, SPACES, is_kanji_char)


def contains_hiragana(text: str) -> bool:
    return any(is_hiragana_char(char) for char in text)


def contains_katakana(text: str) -> bool:
    return any(is_katakana_char(char) for char in text)


def contains_kanji(text: str) -> bool:
    return any(is_kanji_char(char) for char in text)


def extract_kanji(text: str) -> list[str]:
    """Return every kanji in order of appearance, repeats included."""

    return [char for char in text if is_kanji_char(char)]


def _swap_map(ranges: Sequence[tuple[int, int]], offset: int) -> dict[int, int]:
    return {code: code + offset for low, high in ranges for code in range(low, high + 1)}


HIRAGANA_TO_KATAKANA: dict[int, int] = _swap_map(_HIRAGANA_SWAPPABLE, _SWAP_OFFSET)
KATAKANA_TO_HIRAGANA: dict[int, int] = _swap_map(_KATAKANA_SWAPPABLE, -_SWAP_OFFSET)


def hiragana_to_katakana(char: str) -> str:
    """ひらがな1文字を対応するカタカナへ置き換える。対象外はそのまま返す。"""

    code = HIRAGANA_TO_KATAKANA.get(ord(char))
    return chr(code) if code is not None else char


def katakana_to_hiragana(char: str) -> str:
    """カタカナ1文字を対応するひらがなへ置き換える。対象外はそのまま返す。"""

    code = KATAKANA_TO_HIRAGANA.get(ord(char))
    return chr(code) if code is not None else char


def hiragana_to_katakana_text(text: str) -> str:
    return text.translate(HIRAGANA_TO_KATAKANA)


def katakana_to_hiragana_text(text: str) -> str:
    return text.translate(KATAKANA_TO_HIRAGANA)
