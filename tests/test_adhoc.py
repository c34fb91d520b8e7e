import random

import pytest

from contestkit.adhoc import (
    can_level_wall,
    hoofball,
    milking_order,
    min_blocking_cells,
    modern_art,
    sleepy_herding,
    sleepy_sorting,
    taming_the_herd,
)


def test_level_wall_examples():
    assert can_level_wall([2, 1, 1, 2, 5]) is True
    assert can_level_wall([1, 2, 3]) is False


@pytest.mark.parametrize(
    "heights", [[2, 1, 1, 2, 5], [1, 2, 3], [4, 5, 3], [10, 10], [3, 1, 4, 1, 5]]
)
def test_level_wall_shift_invariant(heights):
    assert can_level_wall(heights) == can_level_wall([h + 3 for h in heights])
    assert can_level_wall(heights) == can_level_wall([h + 10 for h in heights])


def test_level_wall_equal_columns():
    assert can_level_wall([7, 7, 7]) == can_level_wall([1, 1, 1, 1])


def test_hoofball_example():
    assert hoofball([7, 1, 3, 11, 4]) == 2


def test_hoofball_order_invariant():
    positions = [7, 1, 3, 11, 4, 20, 22, 30]
    expected = hoofball(positions)
    rng = random.Random(5)
    for _ in range(5):
        shuffled = positions[:]
        rng.shuffle(shuffled)
        assert hoofball(shuffled) == expected
    assert 1 <= expected <= len(positions)


def test_hoofball_single_and_empty():
    assert hoofball([42]) == 1
    with pytest.raises(ValueError):
        hoofball([])


def test_blocking_corner():
    assert min_blocking_cells(5, 5, (1, 1), (3, 3)) == 2


def test_blocking_symmetry():
    first, second = (2, 3), (4, 1)
    assert min_blocking_cells(4, 6, first, second) == min_blocking_cells(
        4, 6, second, first
    )
    assert min_blocking_cells(4, 6, first, second) == min_blocking_cells(
        6, 4, (3, 2), (1, 4)
    )
    assert min_blocking_cells(9, 9, (5, 5), (5, 6)) <= 4


def test_blocking_outside():
    with pytest.raises(ValueError):
        min_blocking_cells(3, 3, (0, 1), (2, 2))
    with pytest.raises(ValueError):
        min_blocking_cells(3, 3, (1, 1), (2, 4))


def test_milking_order_example():
    fixed = [(5, 3), (3, 1)]
    result = milking_order(6, [4, 5, 6], fixed)
    assert result == 4
    assert result not in {position for _, position in fixed}


def test_milking_order_cow_one_fixed():
    assert milking_order(5, [2, 3], [(1, 4)]) == 4


def test_milking_order_after_fixed_leader():
    n = 4
    assert milking_order(n, [2, 1], [(2, 3)]) == n


def test_milking_order_bad_position():
    with pytest.raises(ValueError):
        milking_order(3, [2], [(2, 7)])


def test_modern_art_example():
    assert modern_art(["2230", "2737", "2777", "0000"]) == 1


def test_modern_art_disjoint_colours():
    canvas = ["1122", "1122"]
    assert modern_art(canvas) == len(set("".join(canvas)))
    blank = ["000", "000"]
    assert modern_art(blank) == len(set("".join(blank)) - {"0"})


def test_modern_art_bounded_by_colours():
    canvas = ["1110", "1220", "1330", "0000"]
    assert modern_art(canvas) <= len(set("".join(canvas)) - {"0"})


def test_modern_art_rejects_bad_input():
    with pytest.raises(ValueError):
        modern_art(["12", "1x"])
    with pytest.raises(ValueError):
        modern_art(["12", "1"])


def test_herding_example():
    assert sleepy_herding([4, 7, 9]) == (1, 2)


def test_herding_consecutive():
    assert sleepy_herding([6, 5, 7]) == (0, 0)


def test_herding_invariants():
    base = sleepy_herding([4, 7, 9])
    assert sleepy_herding([9, 4, 7]) == base
    assert sleepy_herding([104, 107, 109]) == base
    low, high = sleepy_herding([1, 10, 30])
    assert low <= high


def test_herding_needs_three():
    with pytest.raises(ValueError):
        sleepy_herding([1, 2])


def test_sleepy_sorting_example():
    assert sleepy_sorting([1, 2, 4, 3]) == 3


def test_sleepy_sorting_sorted_and_bounds():
    order = list(range(1, 8))
    assert sleepy_sorting(order) == sleepy_sorting([])
    reversed_order = order[::-1]
    assert sleepy_sorting(reversed_order) < len(reversed_order)


def test_sleepy_sorting_rejects_non_permutation():
    with pytest.raises(ValueError):
        sleepy_sorting([1, 1, 2])
    with pytest.raises(ValueError):
        sleepy_sorting([2, 3])


def test_taming_example():
    assert taming_the_herd([-1, -1, -1, 1]) == (2, 3)


def test_taming_inconsistent():
    assert taming_the_herd([1, -1, -1]) is None
    assert taming_the_herd([0, 2, -1]) is None


def test_taming_fully_known():
    log = [0, 1, 2, 0, 1]
    zeros = log.count(0)
    assert taming_the_herd(log) == (zeros, zeros)


def test_taming_all_unknown():
    log = [-1, -1, -1]
    low, high = taming_the_herd(log)
    assert high == len(log)
    assert low <= high


def test_taming_invalid():
    with pytest.raises(ValueError):
        taming_the_herd([])
    with pytest.raises(ValueError):
        taming_the_herd([0, -2])