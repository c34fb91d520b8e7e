"""Ad hoc puzzles: walls, passing games, blocking, orderings, paintings and herds."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _settles(heights: Sequence[int], level: int) -> bool:
    """Tell whether vertical 2x1 bricks can raise every column to ``level``."""
    pending = 0
    for height in heights:
        gap = level - height - pending
        if gap < 0:
            return False
        if gap % 2:
            pending += 1
        elif pending:
            pending -= 1
    return pending == 0


def can_level_wall(heights: Iterable[int]) -> bool:
    """Tell whether vertical bricks can make every part of the wall the same height."""
    values = list(heights)
    base = max(values, default=0) + len(values)
    return _settles(values, base) or _settles(values, base + 1)


def hoofball(positions: Iterable[int]) -> int:
    """Return the fewest balls needed so that every cow touches one.

    Each cow passes to its nearest neighbour, preferring the left one on ties.
    """
    xs = sorted(positions)
    n = len(xs)
    if n == 0:
        raise ValueError("at least one cow is needed")
    if n == 1:
        return 1

    targets = []
    for i, x in enumerate(xs):
        left = x - xs[i - 1] if i > 0 else math.inf
        right = xs[i + 1] - x if i < n - 1 else math.inf
        targets.append(i - 1 if left <= right else i + 1)

    incoming = Counter(targets)
    unreached = sum(1 for i in range(n) if incoming[i] == 0)
    closed_pairs = sum(
        1
        for i, t in enumerate(targets)
        if i < t and incoming[i] == 1 and incoming[t] == 1 and targets[t] == i
    )
    return unreached + closed_pairs


def _open_neighbours(rows: int, cols: int, cell: tuple[int, int]) -> int:
    x, y = cell
    if not (1 <= x <= rows and 1 <= y <= cols):
        raise ValueError(f"cell {cell} is outside the {rows}x{cols} grid")
    return sum(1 for dx, dy in _STEPS if 1 <= x + dx <= rows and 1 <= y + dy <= cols)


def min_blocking_cells(
    rows: int, cols: int, first: tuple[int, int], second: tuple[int, int]
) -> int:
    """Return the fewest cells to block so that the two 1-based cells are cut apart."""
    return min(
        _open_neighbours(rows, cols, first), _open_neighbours(rows, cols, second)
    )


def _fits(
    n: int,
    order: Sequence[int],
    ranked: set[int],
    placed: dict[int, int],
    fixed_cows: set[int],
    pos: int,
) -> bool:
    checked: set[int] = set()
    z = 0
    for i in range(1, n + 1):
        occupant = placed.get(i)
        if i == pos:
            if occupant is not None:
                return False
            if 1 not in ranked or 1 in checked:
                continue
            if z < len(order) and order[z] == 1:
                z += 1
                continue
            return False
        if occupant is None:
            if z < len(order) and order[z] not in fixed_cows:
                checked.add(order[z])
                z += 1
        else:
            if occupant not in ranked or occupant in checked:
                continue
            if z < len(order) and order[z] == occupant:
                z += 1
                continue
            return False
    return True


def milking_order(
    n: int, order: Sequence[int], fixed: Iterable[tuple[int, int]]
) -> int | None:
    """Return the earliest 1-based position at which cow 1 can be milked.

    ``order`` lists cows that must be milked in that relative order; ``fixed``
    holds ``(cow, position)`` pairs. Returns None when no position works.
    """
    order = list(order)
    placed: dict[int, int] = {}
    fixed_cows: set[int] = set()
    for cow, position in fixed:
        if not 1 <= position <= n:
            raise ValueError(f"position {position} is outside 1..{n}")
        fixed_cows.add(cow)
        placed[position] = cow
        if cow == 1:
            return position
    ranked = set(order)
    for pos in range(1, n + 1):
        if _fits(n, order, ranked, placed, fixed_cows, pos):
            return pos
    return None


def modern_art(canvas: Sequence[str]) -> int:
    """Count colours that could have been painted first.

    The canvas holds digits, ``0`` for blank; each colour was one rectangle.
    """
    rows = list(canvas)
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("canvas rows must all have the same length")

    boxes: dict[str, list[int]] = {}
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if not cell.isdigit():
                raise ValueError(f"not a colour: {cell!r}")
            if cell == "0":
                continue
            box = boxes.get(cell)
            if box is None:
                boxes[cell] = [r, r, c, c]
            else:
                box[0] = min(box[0], r)
                box[1] = max(box[1], r)
                box[2] = min(box[2], c)
                box[3] = max(box[3], c)

    covering: set[str] = set()
    for colour, (top, bottom, left, right) in boxes.items():
        for row in rows[top : bottom + 1]:
            for cell in row[left : right + 1]:
                if cell != "0" and cell != colour:
                    covering.add(cell)
    return len(boxes.keys() - covering)


def sleepy_herding(positions: Iterable[int]) -> tuple[int, int]:
    """Return the fewest and most moves needed to bring three cows together."""
    values = sorted(positions)
    if len(values) != 3:
        raise ValueError("exactly three positions are needed")
    a, b, c = values
    if b == a + 1 and c == b + 1:
        return 0, 0
    low = 1 if c == b + 2 or a == b - 2 else 2
    high = max(c - b - 1, b - a - 1, 0)
    return low, high


def sleepy_sorting(order: Sequence[int]) -> int:
    """Return how many cows must move to the back for the line to become sorted."""
    items = list(order)
    n = len(items)
    if sorted(items) != list(range(1, n + 1)):
        raise ValueError("order must be a permutation of 1..n")
    removed: set[int] = set()
    smallest = 1
    moves = 0
    for i, cow in enumerate(items, start=1):
        if cow != smallest:
            moves = i
        removed.add(cow)
        while smallest in removed:
            smallest += 1
    return moves


def taming_the_herd(log: Sequence[int]) -> tuple[int, int] | None:
    """Return the fewest and most breakouts consistent with the counter log.

    Entries of -1 are missing. Returns None when the log is inconsistent.
    """
    days = list(log)
    if not days:
        raise ValueError("log must not be empty")
    if any(value < -1 for value in days):
        raise ValueError("log entries must be -1 or more")
    if days[0] >= 1:
        return None
    days[0] = 0

    for i in range(len(days)):
        value = days[i]
        if value == -1:
            continue
        j, expected = i - 1, value - 1
        while expected != -1:
            if days[j] != -1:
                if days[j] != expected:
                    return None
                break
            days[j] = expected
            j -= 1
            expected -= 1

    breakouts = days.count(0)
    return breakouts, breakouts + days.count(-1)