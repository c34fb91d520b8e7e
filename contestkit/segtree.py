"""Segment trees for point updates with range queries, and range additions."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any


class _SegmentTree:
    """Bottom-up segment tree over 1-based positions with an associative combine."""

    _IDENTITY: Any = None

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        size = 1
        while size < self._n:
            size *= 2
        self._size = size
        self._tree = [self._IDENTITY] * (2 * size)
        for i, value in enumerate(items):
            self._tree[size + i] = self._leaf(value)
        for i in range(size - 1, 0, -1):
            self._tree[i] = self._combine(self._tree[2 * i], self._tree[2 * i + 1])

    def __len__(self) -> int:
        return self._n

    @staticmethod
    def _leaf(value: int) -> Any:
        return value

    @staticmethod
    def _combine(left: Any, right: Any) -> Any:
        raise NotImplementedError

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._n:
            raise IndexError(f"position {position} is outside 1..{self._n}")

    def _fold(self, left: int, right: int) -> Any:
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range ({left}, {right}) is outside 1..{self._n}")
        lo = left - 1 + self._size
        hi = right + self._size
        left_acc = self._IDENTITY
        right_acc = self._IDENTITY
        while lo < hi:
            if lo & 1:
                left_acc = self._combine(left_acc, self._tree[lo])
                lo += 1
            if hi & 1:
                hi -= 1
                right_acc = self._combine(self._tree[hi], right_acc)
            lo //= 2
            hi //= 2
        return self._combine(left_acc, right_acc)

    def query(self, left: int, right: int) -> Any:
        """Return the combined value over positions ``left..right`` inclusive."""
        return self._fold(left, right)

    def update(self, position: int, value: int) -> None:
        """Set the value at 1-based ``position``."""
        self._check_position(position)
        i = self._size + position - 1
        self._tree[i] = self._leaf(value)
        i //= 2
        while i:
            self._tree[i] = self._combine(self._tree[2 * i], self._tree[2 * i + 1])
            i //= 2


class SumSegmentTree(_SegmentTree):
    """Range sums with point assignment."""

    _IDENTITY = 0

    @staticmethod
    def _combine(left: int, right: int) -> int:
        return left + right

    def query(self, left: int, right: int) -> int:
        """Return the sum of positions ``left..right`` inclusive."""
        return self._fold(left, right)

    def update(self, position: int, value: int) -> None:
        """Set the value at 1-based ``position``."""
        super().update(position, value)


class MinSegmentTree(_SegmentTree):
    """Range minimums with point assignment."""

    _IDENTITY = math.inf

    @staticmethod
    def _combine(left: float, right: float) -> float:
        return left if left <= right else right

    def query(self, left: int, right: int) -> int:
        """Return the minimum of positions ``left..right`` inclusive."""
        return self._fold(left, right)

    def update(self, position: int, value: int) -> None:
        """Set the value at 1-based ``position``."""
        super().update(position, value)


class PrefixMaxSegmentTree(_SegmentTree):
    """Maximum prefix sum inside a range, never below zero, with point assignment."""

    _IDENTITY = (0, 0)

    @staticmethod
    def _leaf(value: int) -> tuple[int, int]:
        return value, max(0, value)

    @staticmethod
    def _combine(left: tuple[int, int], right: tuple[int, int]) -> tuple[int, int]:
        return left[0] + right[0], max(left[1], left[0] + right[1])

    def query(self, left: int, right: int) -> int:
        """Return the largest sum of a prefix of ``left..right`` (the empty one counts)."""
        return self._fold(left, right)[1]

    def update(self, position: int, value: int) -> None:
        """Set the value at 1-based ``position``."""
        super().update(position, value)


class RangeAddSegmentTree:
    """Array supporting addition over a range and reading single positions."""

    def __init__(self, values: Iterable[int]) -> None:
        self._base = list(values)
        self._n = len(self._base)
        self._tree = [0] * (self._n + 1)

    def __len__(self) -> int:
        return self._n

    def _bump(self, index: int, delta: int) -> None:
        while index <= self._n:
            self._tree[index] += delta
            index += index & -index

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every position in ``left..right`` inclusive."""
        if not 1 <= left <= right <= self._n:
            raise IndexError(f"range ({left}, {right}) is outside 1..{self._n}")
        self._bump(left, value)
        self._bump(right + 1, -value)

    def value_at(self, position: int) -> int:
        """Return the current value at 1-based ``position``."""
        if not 1 <= position <= self._n:
            raise IndexError(f"position {position} is outside 1..{self._n}")
        total = self._base[position - 1]
        index = position
        while index:
            total += self._tree[index]
            index -= index & -index
        return total