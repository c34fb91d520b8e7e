import random

import pytest

from contestkit.sortings import (
    angry_cows,
    casino,
    cow_college,
    cow_queue,
    kayaking,
    permutator,
)


def test_angry_cows_sample():
    assert angry_cows([8, 5, 6, 13, 3, 4]) == 5


def test_angry_cows_order_invariant():
    bales = [8, 5, 6, 13, 3, 4]
    assert angry_cows(list(reversed(bales))) == angry_cows(bales)


def test_angry_cows_adjacent_all_explode():
    bales = [1, 2, 3, 4, 5]
    assert angry_cows(bales) == len(bales)


def test_angry_cows_far_apart():
    assert angry_cows([0, 100, 200]) == angry_cows([50])


def test_angry_cows_empty():
    assert angry_cows([]) == 0


def test_cow_college_sample():
    assert cow_college([1, 6, 4, 6]) == (12, 4)


def test_cow_college_money_matches_tuition():
    tuitions = [7, 2, 9, 9, 3, 5]
    money, tuition = cow_college(tuitions)
    assert money == tuition * sum(t >= tuition for t in tuitions)
    assert money >= max(tuitions)


def test_cow_college_tie_prefers_smaller():
    money, tuition = cow_college([2, 4])
    assert (money, tuition) == (4, 2)


def test_kayaking_equal_pairs_are_free():
    assert kayaking([5, 5, 7, 7, 1, 100]) == 0


def test_kayaking_order_invariant():
    weights = [1, 3, 4, 6, 3, 4, 100, 200]
    shuffled = weights[:]
    random.Random(1).shuffle(shuffled)
    assert kayaking(shuffled) == kayaking(weights)


def test_kayaking_two_people():
    assert kayaking([10, 90]) == 0


def test_kayaking_odd_rejected():
    with pytest.raises(ValueError):
        kayaking([1, 2, 3])


def test_permutator_single_element():
    assert permutator([6], [7]) == 6 * 7


def test_permutator_b_order_irrelevant():
    a = [1, 8, 7, 2, 4]
    b = [9, 7, 2, 9, 3]
    assert permutator(a, b) == permutator(a, sorted(b))


def test_permutator_scales_linearly():
    a = [1, 8, 7, 2, 4]
    b = [9, 7, 2, 9, 3]
    assert permutator(a, [2 * v for v in b]) == 2 * permutator(a, b)


def test_permutator_length_mismatch():
    with pytest.raises(ValueError):
        permutator([1, 2], [1])


def test_casino_sample():
    cards = [[1, 4, 2, 8, 5], [7, 9, 2, 1, 4], [3, 8, 5, 3, 1]]
    assert casino(cards) == 50


def test_casino_two_players():
    assert casino([[1, 2], [4, 6]]) == abs(1 - 4) + abs(2 - 6)


def test_casino_identical_players():
    assert casino([[3, 5, 8]] * 4) == casino([[1, 2, 3]])


def test_casino_ragged_rejected():
    with pytest.raises(ValueError):
        casino([[1, 2], [3]])


def test_cow_queue_sample():
    assert cow_queue([(2, 1), (8, 3), (5, 7)]) == 15


def test_cow_queue_single_cow():
    assert cow_queue([(10, 4)]) == 10 + 4


def test_cow_queue_order_invariant_and_bound():
    cows = [(2, 1), (8, 3), (5, 7), (0, 2)]
    result = cow_queue(cows)
    assert result == cow_queue(list(reversed(cows)))
    assert result >= sum(d for _, d in cows)