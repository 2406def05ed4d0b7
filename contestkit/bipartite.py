"""Two-colouring solvers: labelings, vertex covers and Johnny's path-or-cycles."""

from __future__ import annotations

from collections.abc import Iterable

from .trees import _adjacency

Edge = tuple[int, int]

LABELING_MODULUS = 998_244_353


def count_beautiful_labelings(n: int, edges: Iterable[Edge]) -> int:
    """Ways to write 1, 2 or 3 on vertices so every edge has an odd sum.

    Counted modulo 998244353; zero when the graph is not bipartite.
    """
    adj = _adjacency(n, edges)
    color: list[int | None] = [None] * (n + 1)
    total = 1
    for start in range(1, n + 1):
        if color[start] is not None:
            continue
        color[start] = 0
        sizes = [1, 0]
        stack = [start]
        while stack:
            vertex = stack.pop()
            for neighbour in adj[vertex]:
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[vertex]
                    sizes[color[neighbour]] += 1
                    stack.append(neighbour)
                elif color[neighbour] == color[vertex]:
                    return 0
        ways = pow(2, sizes[0], LABELING_MODULUS) + pow(2, sizes[1], LABELING_MODULUS)
        total = total * ways % LABELING_MODULUS
    return total


def dominating_half(n: int, edges: Iterable[Edge]) -> list[int]:
    """At most n/2 vertices such that every vertex is chosen or next to one.

    Takes the smaller side of a depth-first tree from vertex 1, in visit order.
    """
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    adj = _adjacency(n, edges)
    sides: tuple[list[int], list[int]] = ([1], [])
    seen = {1}
    stack = [(1, 0, iter(adj[1]))]
    while stack:
        vertex, side, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in seen:
                seen.add(neighbour)
                sides[1 - side].append(neighbour)
                stack.append((neighbour, 1 - side, iter(adj[neighbour])))
                break
        else:
            stack.pop()
    return sides[1] if len(sides[1]) < len(sides[0]) else sides[0]


def split_vertex_covers(n: int, edges: Iterable[Edge]) -> tuple[list[int], list[int]] | None:
    """Two disjoint vertex covers, or ``None`` when the graph is not bipartite.

    Each component's first vertex goes to the second cover; vertices appear
    in depth-first visit order.
    """
    adj = _adjacency(n, edges)
    color: list[int | None] = [None] * (n + 1)
    groups: tuple[list[int], list[int]] = ([], [])
    for start in range(1, n + 1):
        if color[start] is not None:
            continue
        color[start] = 0
        groups[0].append(start)
        stack = [(start, iter(adj[start]))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if color[neighbour] == color[vertex]:
                    return None
                if color[neighbour] is None:
                    color[neighbour] = 1 - color[vertex]
                    groups[color[neighbour]].append(neighbour)
                    stack.append((neighbour, iter(adj[neighbour])))
                    break
            else:
                stack.pop()
    return groups[1], groups[0]


def johnny_solve(n: int, k: int, edges: Iterable[Edge]) -> tuple[str, list]:
    """Find a simple path of at least n/k vertices, or k special cycles.

    Returns ``("PATH", vertices)`` walking up from the deepest vertex of a
    depth-first tree to vertex 1, or ``("CYCLES", cycles)`` with up to ``k``
    cycles whose lengths are at least 3 and not divisible by 3.
    """
    if k < 1:
        raise ValueError("k must be positive")
    if n < 1:
        raise ValueError("the graph needs at least one vertex")
    adj = _adjacency(n, edges)
    depth = [0] * (n + 1)
    parent = [0] * (n + 1)
    has_child = [False] * (n + 1)
    visited = [False] * (n + 1)
    depth[1] = 1
    visited[1] = True
    deepest, best_depth = 1, 1
    leaves: list[int] = []
    stack = [(1, iter(adj[1]))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                parent[neighbour] = vertex
                depth[neighbour] = depth[vertex] + 1
                has_child[vertex] = True
                if depth[neighbour] > best_depth:
                    deepest, best_depth = neighbour, depth[neighbour]
                stack.append((neighbour, iter(adj[neighbour])))
                break
        else:
            stack.pop()
            if not has_child[vertex]:
                leaves.append(vertex)

    def climb(start: int, stop: int) -> list[int]:
        path = [start]
        while path[-1] != stop:
            if path[-1] == 0:
                raise ValueError(f"vertex {stop} is not an ancestor of {start}")
            path.append(parent[path[-1]])
        return path

    if best_depth >= n // k:
        return "PATH", climb(deepest, 1)

    cycles: list[list[int]] = []
    for leaf in leaves:
        if len(cycles) == k:
            break
        others = [u for u in adj[leaf] if u != parent[leaf]][:2]
        if len(others) < 2:
            raise ValueError(f"leaf {leaf} needs degree at least 3")
        a, b = others
        if (depth[leaf] - depth[a] + 1) % 3:
            cycles.append(climb(leaf, a))
        elif (depth[leaf] - depth[b] + 1) % 3:
            cycles.append(climb(leaf, b))
        else:
            if depth[a] > depth[b]:
                a, b = b, a
            cycles.append([leaf, *climb(b, a)])
    return "CYCLES", cycles