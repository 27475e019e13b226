"""ローマ字⇔かな変換パイプライン。

各変換はルールテーブルと小さな変換関数を順に適用する ``Pipeline`` として
組み立てられ、初回利用時に一度だけ構築される。
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache, partial

from .gemination import double_consonants, mark_small_tsu
from .moraic_n import insert_separators, resolve_separators
from .register import Register
from .tables import (
    irregular_spelling_table,
    kana_special_table,
    kana_to_romaji_table,
    romaji_special_table,
    romaji_to_kana_table,
)

LOGGER = logging.getLogger(__name__)

Stage = Callable[[str], str]


class Operation(str, Enum):
    """Names accepted by :func:`convert`."""

    ROMAJI = "romaji"
    ROMAJI_CASED = "romaji-cased"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANA = "kana"


class UnknownOperationError(ValueError):
    """Raised when :func:`convert` receives an operation it does not know."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        self.choices = tuple(op.value for op in Operation)
        super().__init__(f"unknown operation {operation!r}; expected one of {', '.join(self.choices)}")


@dataclass(frozen=True)
class Pipeline:
    name: str
    stages: tuple[tuple[str, Stage], ...]

    @property
    def stage_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.stages)

    def run(self, text: str) -> str:
        for _, stage in self.stages:
            text = stage(text)
        return text

    __call__ = run


def _build(name: str, stages: list[tuple[str, Stage]]) -> Pipeline:
    pipeline = Pipeline(name=name, stages=tuple(stages))
    LOGGER.debug("pipeline name=%s stages=%s", name, ",".join(pipeline.stage_names))
    return pipeline


@lru_cache(maxsize=None)
def romaji_pipeline(phonetic: bool, cased: bool) -> Pipeline:
    """kana→romaji. Without ``cased`` the whole output is folded to lowercase."""

    stages: list[tuple[str, Stage]] = [
        ("moraic_n", insert_separators),
        ("kana_to_romaji", kana_to_romaji_table()),
        ("phonetic" if phonetic else "literal", irregular_spelling_table(phonetic)),
        ("gemination", double_consonants),
        ("special", romaji_special_table()),
    ]
    if not cased:
        stages.append(("lower", str.lower))
    return _build("romaji_cased" if cased else "romaji", stages)


@lru_cache(maxsize=None)
def kana_pipeline(register: Register, swap: bool = True) -> Pipeline:
    """romaji→kana for one register; ``swap`` also rewrites kana of the other script."""

    stages: list[tuple[str, Stage]] = [
        ("fold", register.fold),
        ("moraic_n", partial(resolve_separators, register=register)),
        ("romaji_to_kana", romaji_to_kana_table(register)),
        ("gemination", partial(mark_small_tsu, register=register)),
    ]
    if swap:
        stages.append(("swap", register.adopt))
    stages.append(("special", kana_special_table()))
    return _build(register.value if swap else f"{register.value}_unswapped", stages)


def to_romaji(text: str, phonetic: bool = False) -> str:
    """かなを小文字のローマ字へ変換する。

    ``to_romaji_cased(text).lower()`` と同じ結果になり、入力中のラテン文字も
    小文字へそろえる。
    """

    return romaji_pipeline(phonetic, False).run(text)


def to_romaji_cased(text: str, phonetic: bool = False) -> str:
    """ひらがなは小文字、カタカナは大文字のローマ字へ変換する。"""

    return romaji_pipeline(phonetic, True).run(text)


def to_hiragana(text: str) -> str:
    """ローマ字とカタカナをひらがなへ変換する。"""

    return kana_pipeline(Register.HIRAGANA).run(text)


def to_katakana(text: str) -> str:
    """ローマ字とひらがなをカタカナへ変換する。"""

    return kana_pipeline(Register.KATAKANA).run(text)


def split_case_runs(text: str) -> list[tuple[Register, str]]:
    """Cut ``text`` into runs of one letter case.

    Scalars that are not ASCII letters stay with the run before them;
    leading ones join the first run. Text without any letter is a single
    hiragana run.
    """

    leading: list[str] = []
    runs: list[tuple[Register, list[str]]] = []
    for char in text:
        register = Register.of_letter(char)
        if register is None:
            (runs[-1][1] if runs else leading).append(char)
            continue
        if not runs or runs[-1][0] is not register:
            runs.append((register, []))
        runs[-1][1].append(char)

    if not runs:
        return [(Register.HIRAGANA, text)] if text else []
    runs[0][1][:0] = leading
    return [(register, "".join(chars)) for register, chars in runs]


def to_kana(text: str) -> str:
    """Lowercase romaji to hiragana and uppercase romaji to katakana.

    Kana already in the input keeps its script: ``"バナナ tabete"`` becomes
    ``"バナナ たべて"``. A syllable whose letters change case midway is only
    partly converted (``"OnaJi"`` → ``"オなJい"``).
    """

    return "".join(kana_pipeline(register, swap=False).run(run) for register, run in split_case_runs(text))


def convert(text: str, operation: str | Operation, phonetic: bool = False) -> str:
    """Dispatch ``text`` to the conversion named by ``operation``."""

    try:
        op = Operation(operation)
    except ValueError:
        raise UnknownOperationError(str(operation)) from None

    if op is Operation.ROMAJI:
        return to_romaji(text, phonetic=phonetic)
    if op is Operation.ROMAJI_CASED:
        return to_romaji_cased(text, phonetic=phonetic)
    if op is Operation.HIRAGANA:
        return to_hiragana(text)
    if op is Operation.KATAKANA:
        return to_katakana(text)
    return to_kana(text)
