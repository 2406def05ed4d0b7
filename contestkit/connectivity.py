"""Cut vertices, bridges and other connectivity solvers for undirected graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Edge = tuple[int, int]


def _check_vertex(vertex: int, first: int, last: int) -> None:
    if not first <= vertex <= last:
        raise ValueError(f"vertex {vertex} outside {first}..{last}")


def _adjacency(n: int, edges: Iterable[Edge], first: int = 1) -> list[list[int]]:
    """Undirected adjacency lists for vertices ``first``..``first + n - 1``."""
    adj: list[list[int]] = [[] for _ in range(n + first)]
    last = first + n - 1
    for u, v in edges:
        _check_vertex(u, first, last)
        _check_vertex(v, first, last)
        adj[u].append(v)
        adj[v].append(u)
    return adj


def articulation_points(n: int, edges: Iterable[Edge]) -> list[int]:
    """Cut vertices of a graph on vertices 0..n-1, in increasing order."""
    adj = _adjacency(n, edges, first=0)
    entry = [-1] * n
    low = [0] * n
    timer = 0
    cut: set[int] = set()
    for root in range(n):
        if entry[root] != -1:
            continue
        entry[root] = low[root] = timer
        timer += 1
        root_children = 0
        stack = [(root, -1, iter(adj[root]))]
        while stack:
            vertex, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if entry[neighbour] != -1:
                    low[vertex] = min(low[vertex], entry[neighbour])
                else:
                    entry[neighbour] = low[neighbour] = timer
                    timer += 1
                    stack.append((neighbour, vertex, iter(adj[neighbour])))
                    break
            else:
                stack.pop()
                if parent == -1:
                    continue
                low[parent] = min(low[parent], low[vertex])
                if parent == root:
                    root_children += 1
                elif low[vertex] >= entry[parent]:
                    cut.add(parent)
        if root_children > 1:
            cut.add(root)
    return sorted(cut)


def bridges(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Bridges in the component of vertex 1, in input order.

    Vertices are 1..n. An edge back to a vertex's tree parent is never taken
    as a second path, so parallel edges are not told apart.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    edges = list(edges)
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for index, (u, v) in enumerate(edges):
        _check_vertex(u, 1, n)
        _check_vertex(v, 1, n)
        adj[u].append((v, index))
        adj[v].append((u, index))
    depth = {1: 0}
    low = {1: 0}
    is_bridge = [False] * len(edges)
    stack = [(1, 0, -1, iter(adj[1]))]
    while stack:
        vertex, parent, via, neighbours = stack[-1]
        for neighbour, index in neighbours:
            if neighbour not in depth:
                depth[neighbour] = low[neighbour] = depth[vertex] + 1
                stack.append((neighbour, vertex, index, iter(adj[neighbour])))
                break
            if neighbour != parent:
                low[vertex] = min(low[vertex], depth[neighbour])
        else:
            stack.pop()
            if parent:
                low[parent] = min(low[parent], low[vertex])
                if low[vertex] == depth[vertex]:
                    is_bridge[via] = True
    return [edge for edge, flag in zip(edges, is_bridge) if flag]


def harmonizing_edges(n: int, edges: Iterable[Edge]) -> int:
    """Fewest edges to add so that reaching ``r`` from ``l`` reaches all of l..r."""
    adj = _adjacency(n, edges)
    seen = [False] * (n + 1)
    reach = -1
    added = 0
    for start in range(1, n + 1):
        if seen[start]:
            continue
        seen[start] = True
        highest = start
        stack = [start]
        while stack:
            vertex = stack.pop()
            highest = max(highest, vertex)
            for neighbour in adj[vertex]:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    stack.append(neighbour)
        if start < reach:
            added += 1
        reach = max(reach, highest)
    return added


def pair_edges(n: int, edges: Iterable[Edge]) -> list[tuple[int, int, int]] | None:
    """Split the edges into paths ``(a, b, c)`` of two edges sharing ``b``.

    Returns ``None`` when no such split exists, as with an odd edge count.
    """
    edges = list(edges)
    if len(edges) % 2:
        return None
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for index, (u, v) in enumerate(edges):
        _check_vertex(u, 1, n)
        _check_vertex(v, 1, n)
        if u == v:
            raise ValueError(f"self-loop at vertex {u}")
        adj[u].append((v, index))
        adj[v].append((u, index))

    parent_edge = [-1] * (n + 1)
    seen = [False] * (n + 1)
    finish_order: list[int] = []
    for start in range(1, n + 1):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour, index in neighbours:
                if not seen[neighbour]:
                    seen[neighbour] = True
                    parent_edge[neighbour] = index
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                stack.pop()
                finish_order.append(vertex)

    used = [False] * len(edges)
    paths: list[tuple[int, int, int]] = []
    for vertex in finish_order:
        pending = []
        for neighbour, index in adj[vertex]:
            if index != parent_edge[vertex] and not used[index]:
                used[index] = True
                pending.append(neighbour)
        for a, c in zip(pending[0::2], pending[1::2]):
            paths.append((a, vertex, c))
        if len(pending) % 2:
            up = parent_edge[vertex]
            if up == -1:
                return None
            used[up] = True
            u, v = edges[up]
            paths.append((pending[-1], vertex, v if u == vertex else u))
    return paths


def two_routes_time(n: int, railways: Iterable[Edge]) -> int | None:
    """Hours until both the train and the bus have reached town ``n``.

    The train rides railways and the bus rides roads between every pair of
    towns without a railway. Returns ``None`` when one of them cannot arrive.
    """
    if n < 1:
        raise ValueError("there must be at least one town")
    rail: set[frozenset[int]] = set()
    for u, v in railways:
        _check_vertex(u, 1, n)
        _check_vertex(v, 1, n)
        rail.add(frozenset((u, v)))
    use_rail = frozenset((1, n)) not in rail
    distance = {1: 0}
    queue = deque([1])
    while queue:
        vertex = queue.popleft()
        for other in range(1, n + 1):
            if other not in distance and (frozenset((vertex, other)) in rail) == use_rail:
                distance[other] = distance[vertex] + 1
                queue.append(other)
    return distance.get(n)