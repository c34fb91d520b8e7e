"""Problems whose answers follow from sorting the input."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations


def _blast(bales: Sequence[int], start: int, step: int) -> int:
    """Count bales destroyed on one side of ``start`` by a growing chain reaction."""
    count = 0
    edge = start
    radius = 1
    j = start + step
    n = len(bales)

    def reached(index: int) -> bool:
        return 0 <= index < n and abs(bales[index] - bales[edge]) <= radius

    while reached(j):
        while reached(j):
            j += step
            count += 1
        edge = j - step
        radius += 1
    return count


def angry_cows(bales: Iterable[int]) -> int:
    """Return the most hay bales one well-aimed cow can make explode."""
    positions = sorted(bales)
    return max(
        (1 + _blast(positions, i, -1) + _blast(positions, i, 1) for i in range(len(positions))),
        default=0,
    )


def cow_college(tuitions: Iterable[int]) -> tuple[int, int]:
    """Return ``(money, tuition)`` for the tuition earning the most.

    Every cow willing to pay at least the tuition attends; ties go to the
    smaller tuition.
    """
    ordered = sorted(tuitions)
    n = len(ordered)
    best_money = 0
    best_tuition = 0
    for i, tuition in enumerate(ordered):
        money = (n - i) * tuition
        if money > best_money:
            best_money, best_tuition = money, tuition
    return best_money, best_tuition


def kayaking(weights: Sequence[int]) -> int:
    """Return the least total instability of the tandem kayaks.

    Two people ride single kayaks; the rest are paired, each pair adding the
    difference of its weights.
    """
    ordered = sorted(weights)
    if len(ordered) < 2 or len(ordered) % 2:
        raise ValueError("an even number of at least two weights is needed")
    best = None
    for i, j in combinations(range(len(ordered)), 2):
        rest = [w for k, w in enumerate(ordered) if k != i and k != j]
        cost = sum(high - low for low, high in zip(rest[::2], rest[1::2]))
        if best is None or cost < best:
            best = cost
    return best


def permutator(a: Sequence[int], b: Sequence[int]) -> int:
    """Reorder ``b`` to minimise the sum over all subarrays of sum ``a[i]*b[i]``."""
    n = len(a)
    if len(b) != n:
        raise ValueError("a and b must have the same length")
    weights = sorted(value * (i + 1) * (n - i) for i, value in enumerate(a))
    return sum(w * v for w, v in zip(weights, sorted(b, reverse=True)))


def casino(cards: Sequence[Sequence[int]]) -> int:
    """Return the total winnings over all pairs of players.

    Each pair wins, for every column, the absolute difference of their cards.
    """
    rows = [list(row) for row in cards]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("every player must hold the same number of cards")
    n = len(rows)
    total = 0
    for column in zip(*rows):
        for i, value in enumerate(sorted(column)):
            total += value * (2 * i - (n - 1))
    return total


def cow_queue(cows: Iterable[tuple[int, int]]) -> int:
    """Return when the last cow finishes, given ``(arrival, duration)`` pairs."""
    time = 0
    for arrival, duration in sorted(cows):
        time = max(time, arrival) + duration
    return time