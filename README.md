# contestkit

A library of solvers for well-known programming-contest problems. Each solver
is a plain function that takes Python values (ints, lists, tuples, strings)
and returns its answer instead of printing it. The package has no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `contestkit.bigint`: `BigInt`, a signed integer of unlimited size built
  from an `int` or a decimal string (leading `+`/`-` signs allowed). It
  supports `+`, `-`, `*`, `//`, `%`, `divmod`, `^` (exponentiation, ignoring
  the exponent's sign), comparison and hashing, plus `digit_count()`,
  `digit_sum()` and `is_zero()`. Division and remainder truncate toward
  zero, so the remainder takes the dividend's sign. The module also has
  `gcd` and `lcm`.
- `contestkit.arithmetic`: counting, greedy and number-theory problems:
  `days_until_empty`, `polyhedron_faces`, `cheapest_fare`, `compote_fruits`,
  `max_ribbon_pieces`, `moves_to_divisible`, `elephant_steps`, `is_prime`,
  `composite_pair`, `max_query_sum`, `max_dance_pairs`, `assign_event_dates`,
  `count_towers`, `range_updates` and `minimal_generating_set`.
- `contestkit.trees`: problems on trees and parent arrays:
  `count_sad_vertices`, `ant_route`, `count_pairs_at_distance`,
  `min_operations`, `fix_tree`, `three_paths`, `find_root`,
  `max_two_paths_profit` and `is_valid_bfs`.
- `contestkit.connectivity`: `articulation_points` (vertices 0..n-1),
  `bridges`, `harmonizing_edges`, `pair_edges` and `two_routes_time`.
- `contestkit.bipartite`: two-colouring problems: `count_beautiful_labelings`,
  `dominating_half`, `split_vertex_covers` and `johnny_solve`.
- `contestkit.grids`: `last_to_burn` (multi-source breadth-first spread on a
  grid) and `museum_pictures`.
- `contestkit.puzzles`: `friendly_spiders`, `nearest_opposite_parity`,
  `bracket_replacements`, `count_queens`, `ball_positions` and
  `assign_bridges`.

Unless a docstring says otherwise, graph vertices are numbered from 1 and
edges are given as `(u, v)` tuples.

## Example

```python
from contestkit.bigint import BigInt, gcd
from contestkit.arithmetic import cheapest_fare
from contestkit.connectivity import bridges

a = BigInt(99999999) * BigInt(1000200000003000)
print(a)
print(BigInt(2) ^ BigInt(100))       # 2 to the power of 100
print(gcd(BigInt(84), BigInt(36)))   # 12

print(cheapest_fare(6, 2, 1, 2))     # 6

print(bridges(4, [(1, 2), (2, 3), (3, 1), (3, 4)]))   # [(3, 4)]
```

Where a problem has no solution, the function returns the value its
docstring names (usually `None`); input that is out of range raises
`ValueError`.

## What it does not do

There is no command-line program: the package reads no input files and
writes no output. Call the functions from Python.