"""Solvers for problems on trees and parent-pointer forests."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from itertools import pairwise

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Undirected adjacency lists for vertices 1..n, in edge order."""
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _preorder(
    adj: Sequence[Sequence[int]], root: int, blocked: int | None = None
) -> Iterator[tuple[int, int, int]]:
    """Yield ``(vertex, parent, depth)`` in depth-first order; the root's parent is 0.

    Neighbours are visited in adjacency order and ``blocked`` is never entered.
    """
    stack = [(root, 0, 0)]
    while stack:
        vertex, parent, depth = stack.pop()
        yield vertex, parent, depth
        for neighbour in reversed(adj[vertex]):
            if neighbour != parent and neighbour != blocked:
                stack.append((neighbour, vertex, depth + 1))


def _farthest(
    adj: Sequence[Sequence[int]], root: int, blocked: int | None = None
) -> tuple[int, int]:
    """First vertex in depth-first order at the greatest depth, and that depth."""
    best, best_depth = root, 0
    for vertex, _, depth in _preorder(adj, root, blocked):
        if depth > best_depth:
            best, best_depth = vertex, depth
    return best, best_depth


def _diameter(adj: Sequence[Sequence[int]], root: int, blocked: int | None = None) -> int:
    """Length in edges of the longest path in the component of ``root``."""
    far, _ = _farthest(adj, root, blocked)
    return _farthest(adj, far, blocked)[1]


def _tree_path(adj: Sequence[Sequence[int]], start: int, end: int) -> list[int]:
    """Vertices on the path from ``start`` to ``end``, excluding ``start``."""
    parent: dict[int, int | None] = {start: None}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbour in adj[vertex]:
            if neighbour not in parent:
                parent[neighbour] = vertex
                queue.append(neighbour)
    if end not in parent:
        raise ValueError(f"vertex {end} is not reachable from {start}")
    path: list[int] = []
    vertex = end
    while vertex != start:
        path.append(vertex)
        vertex = parent[vertex]
    path.reverse()
    return path


def count_sad_vertices(values: Sequence[int], parent_edges: Sequence[tuple[int, int]]) -> int:
    """Count vertices whose weighted distance from vertex 1 exceeds their value.

    ``values[i]`` belongs to vertex ``i + 1``; ``parent_edges[i]`` is the
    ``(parent, weight)`` pair of vertex ``i + 2``.
    """
    n = len(values)
    if n == 0:
        raise ValueError("the tree needs at least one vertex")
    if len(parent_edges) != n - 1:
        raise ValueError("expected one parent edge for each vertex after the first")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for child, (parent, weight) in enumerate(parent_edges, start=2):
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} of vertex {child} outside 1..{n}")
        adj[parent].append((child, weight))
        adj[child].append((parent, weight))
    distance = {1: 0}
    stack = [1]
    while stack:
        vertex = stack.pop()
        for neighbour, weight in adj[vertex]:
            if neighbour not in distance:
                distance[neighbour] = distance[vertex] + weight
                stack.append(neighbour)
    return sum(1 for vertex, dist in distance.items() if dist > values[vertex - 1])


def ant_route(n: int, edges: Iterable[Edge], leaf_order: Iterable[int]) -> list[int] | None:
    """Walk from vertex 1 through the leaves in the given order and back.

    Returns the visited vertices, or ``None`` when the walk would use some
    edge more than twice (longer than ``2n - 1`` vertices).
    """
    adj = _adjacency(n, edges)
    leaf_count = sum(1 for vertex in range(2, n + 1) if len(adj[vertex]) == 1)
    stops = list(leaf_order)
    if len(stops) != leaf_count:
        raise ValueError(f"expected {leaf_count} leaves, got {len(stops)}")
    for stop in stops:
        if not 1 <= stop <= n:
            raise ValueError(f"leaf {stop} outside 1..{n}")
    route = [1]
    for start, end in pairwise([1, *stops, 1]):
        route.extend(_tree_path(adj, start, end))
    return route if len(route) <= 2 * n - 1 else None


def count_pairs_at_distance(n: int, k: int, edges: Iterable[Edge]) -> int:
    """Number of unordered vertex pairs exactly ``k`` edges apart."""
    adj = _adjacency(n, edges)
    order = list(_preorder(adj, 1))
    depth_counts: dict[int, list[int]] = {}
    pairs = 0
    for vertex, parent, _ in reversed(order):
        counts = [1] + [0] * k
        for child in adj[vertex]:
            if child == parent:
                continue
            below = depth_counts.pop(child)
            pairs += sum(counts[i] * below[k - i - 1] for i in range(k))
            for i in range(1, k + 1):
                counts[i] += below[i - 1]
        depth_counts[vertex] = counts
    return pairs


def min_operations(parents: Sequence[int], bounds: Sequence[tuple[int, int]]) -> int:
    """Fewest operations so every vertex value lies within its bounds.

    ``parents[i]`` is the parent of vertex ``i + 2``; ``bounds[i]`` is the
    ``(low, high)`` range of vertex ``i + 1``. Each vertex passes up as much
    as its subtree gathered, capped at ``high``, and costs one operation when
    that falls short of ``low``.
    """
    n = len(bounds)
    if len(parents) != n - 1:
        raise ValueError("expected one parent for each vertex after the first")
    adj = _adjacency(n, ((child, parent) for child, parent in enumerate(parents, start=2)))
    gathered = [0] * (n + 1)
    operations = 0
    for vertex, parent, _ in reversed(list(_preorder(adj, 1))):
        low, high = bounds[vertex - 1]
        value = min(high, gathered[vertex])
        if value < low:
            value = high
            operations += 1
        gathered[vertex] = value
        gathered[parent] += value
    return operations


def fix_tree(parents: Sequence[int]) -> tuple[int, list[int]]:
    """Turn a parent array into a valid rooted tree with fewest changes.

    ``parents[i]`` is the parent of vertex ``i + 1``; a root is its own parent.
    Returns the number of changes and the repaired array.
    """
    n = len(parents)
    for parent in parents:
        if not 1 <= parent <= n:
            raise ValueError(f"parent {parent} outside 1..{n}")
    original = [0, *parents]
    result = original.copy()
    root = next((vertex for vertex in range(1, n + 1) if original[vertex] == vertex), 0)
    state = [0] * (n + 1)
    changes = 0
    for start in range(1, n + 1):
        if state[start]:
            continue
        chain = []
        vertex = start
        while True:
            state[vertex] = 1
            chain.append(vertex)
            target = original[vertex]
            if target == vertex:
                if root != vertex:
                    result[vertex] = root
                    changes += 1
                break
            if state[target] == 0:
                vertex = target
                continue
            if state[target] == 1:
                changes += 1
                if root == 0:
                    root = vertex
                result[vertex] = root
            break
        for visited in chain:
            state[visited] = 2
    return changes, result[1:]


def three_paths(n: int, edges: Iterable[Edge]) -> tuple[int, tuple[int, int, int]]:
    """Three distinct vertices whose connecting paths cover the most edges.

    Returns the number of covered edges and the three vertices.
    """
    if n < 3:
        raise ValueError("the tree needs at least three vertices")
    adj = _adjacency(n, edges)
    first, _ = _farthest(adj, 1)
    second, length = _farthest(adj, first)
    if length == n - 1:
        third = next(v for v in range(1, n + 1) if v not in (first, second))
        return length, (first, second, third)
    spine = [first, *_tree_path(adj, first, second)]
    distance = {vertex: 0 for vertex in spine}
    queue = deque(spine)
    third, reach = 0, 0
    while queue:
        vertex = queue.popleft()
        for neighbour in adj[vertex]:
            if neighbour not in distance:
                distance[neighbour] = distance[vertex] + 1
                queue.append(neighbour)
                if distance[neighbour] > reach:
                    reach, third = distance[neighbour], neighbour
    return length + reach, (first, second, third)


def find_root(n: int, edges: Iterable[Edge], colors: Sequence[int]) -> int | None:
    """A vertex whose every hanging subtree is single-coloured, or ``None``."""
    edges = list(edges)
    if len(colors) != n:
        raise ValueError(f"expected {n} colours, got {len(colors)}")
    adj = _adjacency(n, edges)
    color = [None, *colors]
    if all(c == colors[0] for c in colors):
        return 1

    def subtrees_uniform(root: int) -> bool:
        return all(
            parent in (0, root) or color[vertex] == color[parent]
            for vertex, parent, _ in _preorder(adj, root)
        )

    for u, v in edges:
        if color[u] != color[v]:
            for candidate in (u, v):
                if subtrees_uniform(candidate):
                    return candidate
            return None
    return None


def max_two_paths_profit(edges: Iterable[Edge]) -> int:
    """Largest product of lengths of two vertex-disjoint paths in a tree."""
    edges = list(edges)
    if not edges:
        return 0
    n = max(max(u, v) for u, v in edges)
    adj = _adjacency(n, edges)
    best = 0
    for a, b in edges:
        best = max(best, _diameter(adj, a, blocked=b) * _diameter(adj, b, blocked=a))
    return best


def is_valid_bfs(n: int, edges: Iterable[Edge], order: Iterable[int]) -> bool:
    """Whether ``order`` is a breadth-first visiting order of the tree from vertex 1."""
    order = list(order)
    if sorted(order) != list(range(1, n + 1)):
        return False
    position = {vertex: index for index, vertex in enumerate(order)}
    adj = _adjacency(n, edges)
    seen = {1}
    sequence = [1]
    queue = deque([1])
    while queue:
        vertex = queue.popleft()
        for neighbour in sorted(adj[vertex], key=position.__getitem__):
            if neighbour not in seen:
                seen.add(neighbour)
                sequence.append(neighbour)
                queue.append(neighbour)
    return sequence == order