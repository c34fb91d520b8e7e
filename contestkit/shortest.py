"""Shortest-path problems on weighted graphs with nodes numbered from 1."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable


class UnreachableError(ValueError):
    """Raised when the destination cannot be reached from the start."""


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    if n < 1:
        raise ValueError(f"the graph needs at least one node, got {n}")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append((v, w))
    return adjacency


def shortest_routes(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Return the shortest distance from node 1 to each node 1..n over directed edges.

    Nodes that cannot be reached get None.
    """
    adjacency = _adjacency(n, edges)
    dist: list[int | None] = [None] * (n + 1)
    heap = [(0, 1)]
    while heap:
        d, u = heapq.heappop(heap)
        if dist[u] is not None:
            continue
        dist[u] = d
        for v, w in adjacency[u]:
            if dist[v] is None:
                heapq.heappush(heap, (d + w, v))
    return dist[1:]


def all_pairs_shortest(
    n: int,
    edges: Iterable[tuple[int, int, int]],
    queries: Iterable[tuple[int, int]],
) -> list[int | None]:
    """Answer distance queries over undirected edges; None where no path exists."""
    if n < 1:
        raise ValueError(f"the graph needs at least one node, got {n}")
    dist = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        dist[i][i] = 0
    for u, v, w in edges:
        _check_node(u, n)
        _check_node(v, n)
        if w < dist[u][v]:
            dist[u][v] = dist[v][u] = w

    nodes = range(1, n + 1)
    for k in nodes:
        through = dist[k]
        for i in nodes:
            row = dist[i]
            via = row[k]
            if via == math.inf:
                continue
            for j in nodes:
                candidate = via + through[j]
                if candidate < row[j]:
                    row[j] = candidate

    answers: list[int | None] = []
    for u, v in queries:
        _check_node(u, n)
        _check_node(v, n)
        d = dist[u][v]
        answers.append(None if d == math.inf else int(d))
    return answers


def flight_discount(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the cheapest cost from 1 to n when one flight may be taken at half price.

    The halved price is rounded down.
    """
    adjacency = _adjacency(n, edges)
    settled: set[tuple[int, bool]] = set()
    heap: list[tuple[int, int, bool]] = [(0, 1, False)]
    while heap:
        cost, node, used = heapq.heappop(heap)
        if (node, used) in settled:
            continue
        if node == n:
            return cost
        settled.add((node, used))
        for nxt, price in adjacency[node]:
            if (nxt, used) not in settled:
                heapq.heappush(heap, (cost + price, nxt, used))
            if not used and (nxt, True) not in settled:
                heapq.heappush(heap, (cost + price // 2, nxt, True))
    raise UnreachableError(f"node {n} cannot be reached from node 1")


def flight_routes(n: int, edges: Iterable[tuple[int, int, int]], k: int) -> list[int]:
    """Return the ``k`` cheapest route costs from 1 to n, in increasing order.

    Routes may revisit nodes; fewer than ``k`` costs come back if fewer routes exist.
    """
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    adjacency = _adjacency(n, edges)
    visits = [0] * (n + 1)
    costs: list[int] = []
    heap = [(0, 1)]
    while heap:
        cost, node = heapq.heappop(heap)
        if visits[node] >= k:
            continue
        visits[node] += 1
        if node == n:
            costs.append(cost)
            if len(costs) == k:
                break
        for nxt, price in adjacency[node]:
            if visits[nxt] < k:
                heapq.heappush(heap, (cost + price, nxt))
    return costs