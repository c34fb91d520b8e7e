"""Small simulation problems: signals, traffic, tickets, shuffles, buckets and searches."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

_KINDS = ("on", "off", "none")


def cow_signal(rows: Iterable[str], k: int) -> list[str]:
    """Enlarge a picture by ``k`` in both directions."""
    if k < 1:
        raise ValueError(f"scale must be positive, got {k}")
    return ["".join(ch * k for ch in row) for row in rows for _ in range(k)]


def measuring_traffic(
    readings: Iterable[tuple[str, int, int]],
) -> tuple[tuple[int, int], tuple[int, int]]:
    """Estimate traffic flow from sensor readings along a highway.

    Each reading is ``(kind, low, high)`` with kind ``"on"``, ``"off"`` or
    ``"none"``. Returns the estimated range before the first sensor and the
    range after the last one.
    """
    ramp_low = ramp_high = 0
    before: tuple[int, int] | None = None
    after_low = after_high = 0
    for kind, low, high in readings:
        if kind not in _KINDS:
            raise ValueError(f"unknown reading kind {kind!r}")
        if before is None:
            if kind == "on":
                ramp_low += low
                ramp_high += high
            elif kind == "off":
                ramp_low -= high
                ramp_high -= high
            else:
                before = (
                    min(max(ramp_low, low), max(0, high - ramp_high)),
                    high - ramp_low,
                )
                after_low, after_high = max(ramp_low, low), high
        elif kind == "on":
            after_low += low
            after_high += high
        elif kind == "off":
            after_low -= high
            after_high -= low
        else:
            after_low = max(after_low, low)
            after_high = min(after_high, high)
    if before is None:
        raise ValueError("at least one 'none' reading is needed")
    return before, (after_low, after_high)


def _per_mile(segments: Iterable[tuple[int, int]]) -> list[int]:
    miles = []
    for length, speed in segments:
        if length < 0:
            raise ValueError(f"segment length must not be negative, got {length}")
        miles.extend([speed] * length)
    return miles


def speeding_ticket(
    road: Iterable[tuple[int, int]], journey: Iterable[tuple[int, int]]
) -> int:
    """Return the largest amount by which the journey exceeded the limit, or 0."""
    limits = _per_mile(road)
    speeds = _per_mile(journey)
    if len(speeds) > len(limits):
        raise ValueError("the journey is longer than the road")
    return max([0, *(speed - limit for speed, limit in zip(speeds, limits))])


def bovine_shuffle(order: Sequence[int], ids: Sequence[str]) -> list[str]:
    """Recover the starting line-up from the line-up after three shuffles.

    ``order[i]`` is the 1-based position that the cow at position i+1 moves to.
    """
    n = len(order)
    if len(ids) != n:
        raise ValueError("order and ids must have the same length")
    for target in order:
        if not 1 <= target <= n:
            raise ValueError(f"position {target} is outside 1..{n}")

    def after_three(position: int) -> int:
        for _ in range(3):
            position = order[position - 1]
        return position

    return [ids[after_three(position) - 1] for position in range(1, n + 1)]


def bucket_list(cows: Iterable[tuple[int, int, int]]) -> int:
    """Return the most buckets in use at once.

    Each cow is ``(start, end, buckets)``; its buckets are freed at ``end``.
    """
    changes: defaultdict[int, int] = defaultdict(int)
    for start, end, buckets in cows:
        if end < start:
            raise ValueError(f"end {end} comes before start {start}")
        changes[start] += buckets
        changes[end] -= buckets
    running = best = 0
    for time in sorted(changes):
        running += changes[time]
        best = max(best, running)
    return best


def lost_cow(start: int, target: int) -> int:
    """Return the distance walked zig-zagging from ``start`` until ``target`` is found.

    The walk visits start+1, start-2, start+4, start-8 and so on.
    """
    if start == target:
        return 0
    forward = target > start
    walked = 0
    position = start
    step = 1
    while True:
        following = start + step
        if (forward and following >= target) or (not forward and following <= target):
            return walked + abs(position - target)
        walked += abs(following - position)
        position = following
        step *= -2