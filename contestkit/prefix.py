"""Static range queries answered with prefix tables, and positional removals."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate


def _checked(queries: Iterable[tuple[int, int]], size: int) -> Iterator[tuple[int, int]]:
    for left, right in queries:
        if not 1 <= left <= right <= size:
            raise IndexError(f"range ({left}, {right}) is outside 1..{size}")
        yield left, right


def range_sums(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Return the sum of each 1-based inclusive range in ``queries``."""
    prefix = list(accumulate(values, initial=0))
    return [prefix[r] - prefix[l - 1] for l, r in _checked(queries, len(prefix) - 1)]


def range_xors(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Return the XOR of each 1-based inclusive range in ``queries``."""
    prefix = list(accumulate(values, operator.xor, initial=0))
    return [prefix[r] ^ prefix[l - 1] for l, r in _checked(queries, len(prefix) - 1)]


def forest_queries(
    grid: Sequence[str], queries: Iterable[tuple[int, int, int, int]]
) -> list[int]:
    """Count ``*`` cells in each rectangle ``(y1, x1, y2, x2)``, 1-based inclusive."""
    rows = list(grid)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    table = [[0] * (width + 1)]
    for row in rows:
        running = 0
        line = [0]
        for above, cell in zip(table[-1][1:], row):
            running += cell == "*"
            line.append(above + running)
        table.append(line)

    height = len(rows)
    answers = []
    for y1, x1, y2, x2 in queries:
        if not (1 <= y1 <= y2 <= height and 1 <= x1 <= x2 <= width):
            raise IndexError(f"rectangle ({y1}, {x1}, {y2}, {x2}) is outside the grid")
        answers.append(
            table[y2][x2] - table[y2][x1 - 1] - table[y1 - 1][x2] + table[y1 - 1][x1 - 1]
        )
    return answers


class _OrderTree:
    """Fenwick tree over present slots, supporting k-th present lookup."""

    def __init__(self, size: int) -> None:
        self._size = size
        self._tree = [0] + [i & -i for i in range(1, size + 1)]
        self._top = 1 << size.bit_length() if size else 0
        self.remaining = size

    def pop_kth(self, k: int) -> int:
        """Remove the k-th present slot (1-based) and return its 0-based index."""
        position = 0
        step = self._top
        while step:
            following = position + step
            if following <= self._size and self._tree[following] < k:
                position = following
                k -= self._tree[following]
            step >>= 1
        index = position + 1
        while index <= self._size:
            self._tree[index] -= 1
            index += index & -index
        self.remaining -= 1
        return position


def list_removals(values: Sequence[int], positions: Iterable[int]) -> list[int]:
    """Remove elements by current 1-based position, returning them in order."""
    items = list(values)
    tree = _OrderTree(len(items))
    removed = []
    for position in positions:
        if not 1 <= position <= tree.remaining:
            raise IndexError(f"position {position} is outside 1..{tree.remaining}")
        removed.append(items[tree.pop_kth(position)])
    return removed