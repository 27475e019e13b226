"""Longest-match rule tables and the single-pass rewriter."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping

LOGGER = logging.getLogger(__name__)


class _Node:
    __slots__ = ("children", "replacement")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.replacement: str | None = None


class RuleTable:
    """パターン→置換の読み取り専用テーブル。

    Patterns live in a trie keyed by code point, so the longest pattern that
    matches at a scan position is found in a single walk regardless of the
    order the entries were supplied in.
    """

    __slots__ = ("_name", "_root", "_size")

    def __init__(
        self,
        entries: Mapping[str, str] | Iterable[tuple[str, str]],
        *,
        name: str = "rules",
    ) -> None:
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        root = _Node()
        size = 0
        max_length = 0
        for pattern, replacement in pairs:
            if not pattern:
                raise ValueError(f"{name}: empty pattern")
            node = root
            for char in pattern:
                node = node.children.setdefault(char, _Node())
            if node.replacement is not None:
                raise ValueError(f"{name}: duplicate pattern {pattern!r}")
            node.replacement = replacement
            size += 1
            max_length = max(max_length, len(pattern))

        self._name = name
        self._root = root
        self._size = size
        LOGGER.debug("rule_table name=%s patterns=%d longest=%d", name, size, max_length)

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return self._size

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, str) and self.get(pattern) is not None

    def __repr__(self) -> str:
        return f"RuleTable(name={self._name!r}, patterns={self._size})"

    def get(self, pattern: str) -> str | None:
        node: _Node | None = self._root
        for char in pattern:
            node = node.children.get(char)
            if node is None:
                return None
        return node.replacement

    def items(self) -> Iterator[tuple[str, str]]:
        stack: list[tuple[str, _Node]] = [("", self._root)]
        while stack:
            prefix, node = stack.pop()
            if node.replacement is not None:
                yield prefix, node.replacement
            for char, child in node.children.items():
                stack.append((prefix + char, child))

    def longest_match(self, text: str, start: int = 0) -> tuple[int, str] | None:
        """Return ``(length, replacement)`` for the longest pattern at ``start``."""

        node = self._root
        best: tuple[int, str] | None = None
        idx = start
        limit = len(text)
        while idx < limit:
            node = node.children.get(text[idx])
            if node is None:
                break
            idx += 1
            if node.replacement is not None:
                best = (idx - start, node.replacement)
        return best

    def rewrite(self, text: str) -> str:
        """Apply the table once, left to right, without overlapping matches.

        Characters that start no pattern are copied through unchanged.
        """

        if not text or not self._size:
            return text
        out: list[str] = []
        idx = 0
        limit = len(text)
        while idx < limit:
            match = self.longest_match(text, idx)
            if match is None:
                out.append(text[idx])
                idx += 1
                continue
            length, replacement = match
            out.append(replacement)
            idx += length
        return "".join(out)

    __call__ = rewrite
