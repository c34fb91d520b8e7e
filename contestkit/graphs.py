"""Graph problems on unweighted graphs: ordering, components, cycles and escapes."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence

# Moves as (row delta, column delta) with the letter naming each step.
_MOVES = (((0, 1), "R"), ((1, 0), "D"), ((0, -1), "L"), ((-1, 0), "U"))


def _check_node(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(
    n: int, edges: Iterable[tuple[int, int]], *, undirected: bool = False
) -> list[list[int]]:
    if n < 0:
        raise ValueError(f"the number of nodes must not be negative, got {n}")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_node(u, n)
        _check_node(v, n)
        adjacency[u].append(v)
        if undirected:
            adjacency[v].append(u)
    return adjacency


def course_schedule(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Order courses 1..n so that for each edge ``(u, v)`` course u comes first.

    Returns None when the requirements form a cycle.
    """
    adjacency = _adjacency(n, edges)
    indegree = [0] * (n + 1)
    for targets in adjacency:
        for v in targets:
            indegree[v] += 1

    queue = deque(node for node in range(1, n + 1) if indegree[node] == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for v in adjacency[node]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order if len(order) == n else None


def strongly_connected_components(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Label nodes 1..n by strongly connected component.

    Labels run from 1 in the order components are completed, so component 1
    has no edge leading to any other component.
    """
    adjacency = _adjacency(n, edges)
    index = [0] * (n + 1)
    low = [0] * (n + 1)
    on_stack = [False] * (n + 1)
    label = [0] * (n + 1)
    stack: list[int] = []
    counter = 0
    components = 0

    for root in range(1, n + 1):
        if index[root]:
            continue
        counter += 1
        index[root] = low[root] = counter
        stack.append(root)
        on_stack[root] = True
        work = [(root, iter(adjacency[root]))]
        while work:
            node, neighbours = work[-1]
            for nxt in neighbours:
                if not index[nxt]:
                    counter += 1
                    index[nxt] = low[nxt] = counter
                    stack.append(nxt)
                    on_stack[nxt] = True
                    work.append((nxt, iter(adjacency[nxt])))
                    break
                if on_stack[nxt]:
                    low[node] = min(low[node], index[nxt])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[node])
                if low[node] == index[node]:
                    components += 1
                    while True:
                        member = stack.pop()
                        on_stack[member] = False
                        label[member] = components
                        if member == node:
                            break
    return label[1:]


def flight_routes_check(n: int, edges: Iterable[tuple[int, int]]) -> tuple[int, int] | None:
    """Check that every city can reach every other one.

    Returns None if so, otherwise a pair ``(a, b)`` such that b cannot be
    reached from a.
    """
    if n < 1:
        raise ValueError(f"the graph needs at least one node, got {n}")
    labels = strongly_connected_components(n, edges)
    if max(labels) == 1:
        return None
    first = labels.index(1) + 1
    second = labels.index(2) + 1
    return first, second


def round_trip(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Find a cycle in an undirected graph, listed with its first city repeated at the end.

    Returns None when the graph has no cycle.
    """
    adjacency = _adjacency(n, edges, undirected=True)
    visited = [False] * (n + 1)
    for root in range(1, n + 1):
        if visited[root]:
            continue
        visited[root] = True
        path = [root]
        work = [(root, 0, iter(adjacency[root]))]
        while work:
            node, parent, neighbours = work[-1]
            for nxt in neighbours:
                if nxt == parent:
                    continue
                if visited[nxt]:
                    loop = path[path.index(nxt):]
                    return [nxt, *reversed(loop)]
                visited[nxt] = True
                path.append(nxt)
                work.append((nxt, node, iter(adjacency[nxt])))
                break
            else:
                work.pop()
                path.pop()
    return None


def round_trip_directed(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Find a directed cycle, listed with its first city repeated at the end.

    Returns None when the graph is acyclic.
    """
    adjacency = _adjacency(n, edges)
    state = [0] * (n + 1)  # 0 unseen, 1 on the current path, 2 finished
    for root in range(1, n + 1):
        if state[root]:
            continue
        state[root] = 1
        path = [root]
        work = [(root, iter(adjacency[root]))]
        while work:
            node, neighbours = work[-1]
            for nxt in neighbours:
                if state[nxt] == 1:
                    return [node, *path[path.index(nxt):]]
                if state[nxt] == 0:
                    state[nxt] = 1
                    path.append(nxt)
                    work.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                state[node] = 2
                work.pop()
                path.pop()
    return None


def monsters(grid: Sequence[str]) -> str | None:
    """Find a way for ``A`` to leave the grid before any ``M`` can catch it.

    Walls are ``#``. Returns the moves as a string of ``L``, ``R``, ``U`` and
    ``D`` (empty if ``A`` already stands on the border), or None if no safe
    escape exists.
    """
    rows = list(grid)
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    height = len(rows)

    def on_border(r: int, c: int) -> bool:
        return r in (0, height - 1) or c in (0, width - 1)

    def open_neighbours(r: int, c: int):
        for (dr, dc), step in _MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and rows[nr][nc] != "#":
                yield nr, nc, step

    monster_time = [[math.inf] * width for _ in range(height)]
    queue: deque[tuple[int, int]] = deque()
    start = None
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "A":
                start = (r, c)
            elif cell == "M":
                monster_time[r][c] = 0
                queue.append((r, c))
    if start is None:
        raise ValueError("grid has no starting cell 'A'")
    if on_border(*start):
        return ""

    while queue:
        r, c = queue.popleft()
        for nr, nc, _ in open_neighbours(r, c):
            if monster_time[nr][nc] == math.inf:
                monster_time[nr][nc] = monster_time[r][c] + 1
                queue.append((nr, nc))

    came_from: dict[tuple[int, int], tuple[tuple[int, int], str] | None] = {start: None}
    walk: deque[tuple[int, int, int]] = deque([(*start, 0)])
    while walk:
        r, c, t = walk.popleft()
        if t >= monster_time[r][c]:
            continue
        for nr, nc, step in open_neighbours(r, c):
            cell = (nr, nc)
            if cell in came_from or monster_time[nr][nc] <= t + 1:
                continue
            came_from[cell] = ((r, c), step)
            if on_border(nr, nc):
                steps = []
                link = came_from[cell]
                while link is not None:
                    previous, move = link
                    steps.append(move)
                    link = came_from[previous]
                return "".join(reversed(steps))
            walk.append((nr, nc, t + 1))
    return None