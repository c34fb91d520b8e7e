import random

import pytest

from contestkit.shortest import (
    UnreachableError,
    all_pairs_shortest,
    flight_discount,
    flight_routes,
    shortest_routes,
)


def _random_graph(seed, n, extra):
    rng = random.Random(seed)
    edges = [(i, i + 1, rng.randint(1, 20)) for i in range(1, n)]
    for _ in range(extra):
        u = rng.randint(1, n)
        v = rng.randint(1, n)
        edges.append((u, v, rng.randint(1, 20)))
    return edges


def test_shortest_routes_sample():
    edges = [(1, 2, 6), (1, 3, 2), (3, 2, 3), (1, 3, 4)]
    assert shortest_routes(3, edges) == [0, 5, 2]


def test_flight_discount_sample():
    edges = [(1, 2, 3), (2, 3, 1), (1, 3, 7), (2, 1, 5)]
    assert flight_discount(3, edges) == 2


def test_flight_routes_sample():
    edges = [(1, 2, 1), (1, 3, 3), (2, 3, 2), (2, 4, 6), (3, 2, 8), (3, 4, 1)]
    assert flight_routes(4, edges, 3) == [4, 4, 7]


def test_shortest_routes_unreachable_is_none():
    result = shortest_routes(3, [(1, 2, 5)])
    assert result[0] == 0
    assert result[1] == 5
    assert result[2] is None


@pytest.mark.parametrize("seed", range(5))
def test_all_pairs_agrees_with_dijkstra_on_symmetric_edges(seed):
    n = 7
    edges = _random_graph(seed, n, 10)
    both = edges + [(v, u, w) for u, v, w in edges]
    single = shortest_routes(n, both)
    pairs = all_pairs_shortest(n, edges, [(1, v) for v in range(1, n + 1)])
    assert pairs == single


@pytest.mark.parametrize("seed", range(5))
def test_all_pairs_is_symmetric_and_zero_on_diagonal(seed):
    n = 6
    edges = _random_graph(seed, n, 6)
    queries = [(u, v) for u in range(1, n + 1) for v in range(1, n + 1)]
    answers = dict(zip(queries, all_pairs_shortest(n, edges, queries)))
    for u, v in queries:
        assert answers[(u, v)] == answers[(v, u)]
    assert all(answers[(u, u)] == 0 for u in range(1, n + 1))


def test_all_pairs_keeps_cheapest_parallel_edge_and_reports_unreachable():
    answers = all_pairs_shortest(3, [(1, 2, 10), (1, 2, 4)], [(2, 1), (1, 3)])
    assert answers == [4, None]


@pytest.mark.parametrize("seed", range(6))
def test_flight_discount_never_exceeds_full_price(seed):
    n = 6
    edges = _random_graph(seed, n, 8)
    full = shortest_routes(n, edges)[-1]
    discounted = flight_discount(n, edges)
    assert discounted <= full
    assert 2 * discounted >= full // 1 - max(w for _, _, w in edges)


def test_flight_discount_unreachable_raises():
    with pytest.raises(UnreachableError):
        flight_discount(3, [(1, 2, 4), (3, 1, 2)])


@pytest.mark.parametrize("seed", range(6))
def test_flight_routes_first_is_shortest_and_sorted(seed):
    n = 5
    edges = _random_graph(seed, n, 8)
    routes = flight_routes(n, edges, 4)
    assert routes[0] == shortest_routes(n, edges)[-1]
    assert routes == sorted(routes)
    assert len(routes) <= 4
    assert flight_routes(n, edges, 1) == routes[:1]


def test_flight_routes_unreachable_is_empty():
    assert flight_routes(3, [(1, 2, 1)], 2) == []


def test_invalid_inputs_raise():
    with pytest.raises(ValueError):
        shortest_routes(2, [(1, 3, 1)])
    with pytest.raises(ValueError):
        flight_routes(2, [(1, 2, 1)], 0)
    with pytest.raises(ValueError):
        all_pairs_shortest(2, [], [(1, 5)])