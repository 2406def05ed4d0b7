from collections import Counter

import pytest

from contestkit.connectivity import (
    articulation_points,
    bridges,
    harmonizing_edges,
    pair_edges,
    two_routes_time,
)


def _components(vertices, edges):
    parent = {v: v for v in vertices}

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        parent[find(u)] = find(v)
    return len({find(v) for v in vertices})


CUT_GRAPHS = [
    (5, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 2)]),
    (6, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]),
    (7, [(0, 1), (0, 2), (0, 3), (3, 4), (4, 5), (5, 3)]),
    (6, [(0, 1), (1, 2), (3, 4)]),
]


def test_cycle_has_no_cut_vertices():
    assert articulation_points(4, [(0, 1), (1, 2), (2, 3), (3, 0)]) == []


@pytest.mark.parametrize("n, edges", CUT_GRAPHS)
def test_cut_vertices_are_exactly_those_that_disconnect(n, edges):
    cut = articulation_points(n, edges)
    assert cut == sorted(cut)
    before = _components(range(n), edges)
    for vertex in range(n):
        rest = [v for v in range(n) if v != vertex]
        kept = [(u, v) for u, v in edges if vertex not in (u, v)]
        assert (vertex in cut) == (_components(rest, kept) > before)


def test_cut_vertices_reject_out_of_range():
    with pytest.raises(ValueError):
        articulation_points(2, [(0, 2)])


BRIDGE_GRAPHS = [
    (4, [(1, 2), (2, 3), (3, 1), (3, 4)]),
    (6, [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 6), (6, 4)]),
    (5, [(1, 2), (2, 3), (3, 4), (4, 5), (5, 1)]),
]


@pytest.mark.parametrize("n, edges", BRIDGE_GRAPHS)
def test_bridges_are_exactly_the_disconnecting_edges(n, edges):
    found = bridges(n, edges)
    vertices = range(1, n + 1)
    before = _components(vertices, edges)
    for index, edge in enumerate(edges):
        rest = edges[:index] + edges[index + 1 :]
        assert (edge in found) == (_components(vertices, rest) > before)


def test_every_tree_edge_is_a_bridge_in_input_order():
    edges = [(1, 2), (1, 3), (3, 4), (3, 5)]
    assert bridges(5, edges) == edges


def test_bridges_reject_out_of_range():
    with pytest.raises(ValueError):
        bridges(3, [(1, 4)])


def test_harmonizing_sample_needs_one_edge():
    edges = [(1, 2), (2, 7), (3, 4), (6, 3), (5, 7), (3, 8), (6, 8), (11, 12)]
    assert harmonizing_edges(14, edges) == 1


def test_harmonious_graph_needs_nothing():
    assert harmonizing_edges(20, [(7, 9), (9, 8), (4, 5)]) == 0


def test_harmonizing_is_zero_after_connecting_everything():
    edges = [(1, 4), (2, 6)]
    assert harmonizing_edges(6, edges + [(1, 2), (3, 4), (5, 6)]) == harmonizing_edges(
        6, [(i, i + 1) for i in range(1, 6)]
    )


def _assert_partition(edges, paths):
    assert len(paths) * 2 == len(edges)
    used = Counter()
    for a, b, c in paths:
        used[frozenset((a, b))] += 1
        used[frozenset((b, c))] += 1
    assert used == Counter(frozenset(edge) for edge in edges)


@pytest.mark.parametrize(
    "n, edges",
    [
        (
            8,
            [(1, 2), (2, 3), (3, 4), (4, 1), (1, 3), (2, 4),
             (3, 5), (3, 6), (5, 6), (6, 7), (6, 8), (7, 8)],
        ),
        (5, [(1, 2), (1, 3), (1, 4), (1, 5)]),
        (2, [(1, 2), (1, 2)]),
        (5, [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 3)]),
        (7, [(1, 2), (2, 3), (5, 6), (6, 7)]),
    ],
)
def test_pair_edges_partitions_every_edge(n, edges):
    paths = pair_edges(n, edges)
    _assert_partition(edges, paths)


def test_pair_edges_odd_count_has_no_solution():
    assert pair_edges(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_pair_edges_rejects_self_loop():
    with pytest.raises(ValueError):
        pair_edges(2, [(1, 1), (1, 2)])


def test_two_routes_sample():
    assert two_routes_time(4, [(1, 3), (3, 4)]) == 2


def test_two_routes_unreachable_bus():
    all_pairs = [(1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]
    assert two_routes_time(4, all_pairs) is None


def test_two_routes_is_order_independent():
    railways = [(4, 2), (3, 5), (4, 5), (5, 1), (1, 2)]
    assert two_routes_time(5, railways) == two_routes_time(5, list(reversed(railways)))


def test_two_routes_rejects_unknown_town():
    with pytest.raises(ValueError):
        two_routes_time(3, [(1, 5)])