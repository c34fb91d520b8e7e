"""Dynamic-programming counting and optimisation problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError(f"target must not be negative, got {target}")


def _usable_coins(coins: Iterable[int]) -> list[int]:
    """Return the coins with zero-valued ones dropped; reject negative ones."""
    usable = []
    for coin in coins:
        if coin < 0:
            raise ValueError(f"coin values must not be negative, got {coin}")
        if coin:
            usable.append(coin)
    return usable


def array_description(values: Sequence[int], upper: int) -> int:
    """Count arrays matching ``values`` (0 = unknown) with entries in 1..upper.

    Adjacent entries may differ by at most one. The count is taken modulo 10**9+7.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError(f"upper bound must be positive, got {upper}")

    first, *rest = values
    previous = [0] * (upper + 2)
    if first == 0:
        previous[1 : upper + 1] = [1] * upper
    elif 1 <= first <= upper:
        previous[first] = 1

    for value in rest:
        current = [0] * (upper + 2)
        if value == 0:
            allowed: Iterable[int] = range(1, upper + 1)
        elif 1 <= value <= upper:
            allowed = (value,)
        else:
            allowed = ()
        for j in allowed:
            current[j] = (previous[j - 1] + previous[j] + previous[j + 1]) % MOD
        previous = current

    return sum(previous) % MOD


def book_shop(prices: Sequence[int], pages: Sequence[int], budget: int) -> int:
    """Return the most pages obtainable by buying books within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError(f"budget must not be negative, got {budget}")

    best = [-1] * (budget + 1)
    best[0] = 0
    for price, count in zip(prices, pages):
        if price < 0:
            raise ValueError(f"prices must not be negative, got {price}")
        if price > budget:
            continue
        for spent in range(budget - price, -1, -1):
            if best[spent] >= 0:
                best[spent + price] = max(best[spent + price], best[spent] + count)
    return max(best)


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Count ordered sequences of coins summing to ``target``, modulo 10**9+7.

    Every coin given counts as a separate choice, so repeated values add up.
    """
    _check_target(target)
    usable = _usable_coins(coins)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in usable if c <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Count multisets of distinct coin values summing to ``target``, modulo 10**9+7."""
    _check_target(target)
    usable = sorted(set(_usable_coins(coins)), reverse=True)
    ways = [1] + [0] * target
    for coin in usable:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(n: int) -> int:
    """Count ordered throws of a six-sided die summing to ``n``, modulo 10**9+7.

    A sum of zero yields zero throws counted.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 0
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[max(0, total - 6) : total]) % MOD
    return ways[n]


def grid_paths(grid: Sequence[str]) -> int:
    """Count right/down paths through ``grid`` avoiding ``*`` cells, modulo 10**9+7."""
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")

    counts = [0] * width
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "*":
                counts[c] = 0
            elif r == 0 and c == 0:
                counts[c] = 1
            elif c > 0:
                counts[c] = (counts[c] + counts[c - 1]) % MOD
    return counts[-1]


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins summing to ``target``, or None if impossible."""
    _check_target(target)
    usable = _usable_coins(coins)
    best: list[float] = [0] + [math.inf] * target
    for amount in range(1, target + 1):
        best[amount] = min(
            (best[amount - c] + 1 for c in usable if c <= amount), default=math.inf
        )
    result = best[target]
    return None if math.isinf(result) else int(result)


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach zero, each step subtracting a digit."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(
            steps[value - int(digit)] for digit in str(value) if digit != "0"
        )
    return steps[n]