"""Small counting, greedy and number-theory solvers."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate, count
from math import isqrt

TOWER_MODULUS = 1_000_000_007

POLYHEDRON_FACES = {
    "Tetrahedron": 4,
    "Cube": 6,
    "Octahedron": 8,
    "Dodecahedron": 12,
    "Icosahedron": 20,
}


def days_until_empty(capacity: int, refill: int) -> int:
    """Day on which a barn first becomes empty.

    The barn starts full, gains ``refill`` grains each day up to its capacity,
    and on day ``i`` sparrows eat ``i`` grains.
    """
    if capacity <= refill:
        return capacity
    remaining = capacity - refill
    low, high = 0, 2_000_000_000
    while low < high:
        mid = (low + high) // 2
        if mid * (mid + 1) // 2 >= remaining:
            high = mid
        else:
            low = mid + 1
    return low + refill


def polyhedron_faces(names: Iterable[str]) -> int:
    """Total faces of the named regular polyhedra; unknown names count nothing."""
    return sum(POLYHEDRON_FACES.get(name, 0) for name in names)


def cheapest_fare(rides: int, pack_size: int, ride_price: int, pack_price: int) -> int:
    """Lowest cost for ``rides`` rides with single tickets and ride packs."""
    if pack_size * ride_price <= pack_price:
        return rides * ride_price
    packs, rest = divmod(rides, pack_size)
    return packs * pack_price + min(rest * ride_price, pack_price)


def compote_fruits(lemons: int, apples: int, pears: int) -> int:
    """Most fruits usable in the ratio 1 lemon : 2 apples : 4 pears."""
    portions = min(lemons, apples // 2, pears // 4)
    return portions * 7


def max_ribbon_pieces(length: int, a: int, b: int, c: int) -> int:
    """Most pieces of lengths ``a``, ``b``, ``c`` that cut a ribbon exactly.

    Returns 0 when no exact cut exists.
    """
    if min(a, b, c) <= 0:
        raise ValueError("piece lengths must be positive")
    best = 0
    for first in range(length // a + 1):
        for second in range(length // b + 1):
            rest = length - first * a - second * b
            if rest < 0:
                break
            if rest == 0:
                best = max(best, first + second)
            elif rest % c == 0:
                best = max(best, rest // c + first + second)
    return best


def moves_to_divisible(a: int, b: int) -> int:
    """Fewest increments of ``a`` that make it divisible by ``b``."""
    if a % b == 0:
        return 0
    return (a // b + 1) * b - a


def elephant_steps(distance: int) -> int:
    """Fewest steps of length 1 to 5 that cover ``distance``."""
    steps = 0
    for stride in (5, 4, 3, 2, 1):
        taken, distance = divmod(distance, stride)
        steps += taken
    return steps


def is_prime(n: int) -> bool:
    """Trial-division primality test; values below 4 count as prime."""
    if n < 4:
        return True
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def composite_pair(n: int) -> tuple[int, int]:
    """Two composite numbers whose difference is ``n``, larger one first."""
    for small in count(4):
        large = small + n
        if not is_prime(small) and not is_prime(large):
            return large, small
    raise AssertionError("unreachable")


def max_query_sum(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> int:
    """Largest total of 1-based inclusive range-sum queries after reordering values."""
    size = len(values)
    diff = [0] * (size + 1)
    for left, right in queries:
        if not 1 <= left <= right <= size:
            raise ValueError(f"query ({left}, {right}) out of range")
        diff[left - 1] += 1
        diff[right] -= 1
    counts = sorted(accumulate(diff[:size]))
    return sum(value * hits for value, hits in zip(sorted(values), counts))


def max_dance_pairs(boys: Iterable[int], girls: Iterable[int]) -> int:
    """Most pairs whose skills differ by at most one, matched greedily."""
    boys, girls = sorted(boys), sorted(girls)
    seekers, partners = (boys, girls) if len(boys) <= len(girls) else (girls, boys)
    taken: set[int] = set()
    pairs = 0
    for skill in seekers:
        match = next(
            (
                index
                for index, other in enumerate(partners)
                if index not in taken and abs(other - skill) <= 1
            ),
            None,
        )
        if match is not None:
            taken.add(match)
            pairs += 1
    return pairs


def assign_event_dates(intervals: Sequence[tuple[int, int]]) -> list[int | None]:
    """Pick a distinct date inside each ``(first, last)`` interval.

    Intervals are served from the one with the latest start, each taking the
    latest free day; an interval left with no free day gets ``None``.
    """
    order = sorted(
        range(len(intervals)),
        key=lambda index: (intervals[index][0], intervals[index][1], index),
    )
    used: set[int] = set()
    dates: list[int | None] = [None] * len(intervals)
    for index in reversed(order):
        first, last = intervals[index]
        date = next((day for day in range(last, first - 1, -1) if day not in used), None)
        if date is not None:
            used.add(date)
            dates[index] = date
    return dates


def count_towers(red: int, green: int) -> int:
    """Number of tallest red-green towers, modulo 1e9+7.

    A tower of height h has levels of 1..h blocks, each level one colour.
    """
    total = red + green
    height = 0
    while (height + 1) * (height + 2) // 2 <= total:
        height += 1
    blocks = height * (height + 1) // 2
    small = min(red, green)
    ways = [1] + [0] * small
    for level in range(1, height + 1):
        for used in range(small, level - 1, -1):
            ways[used] = (ways[used] + ways[used - level]) % TOWER_MODULUS
    return sum(ways[max(0, blocks - max(red, green)) : small + 1]) % TOWER_MODULUS


def range_updates(size: int, updates: Iterable[tuple[int, int, int]]) -> list[int]:
    """Array of ``size`` zeros after adding ``value`` to each 0-based range [l, r]."""
    diff = [0] * (size + 1)
    for left, right, value in updates:
        if not 0 <= left <= right < size:
            raise ValueError(f"update range ({left}, {right}) out of bounds")
        diff[left] += value
        diff[right + 1] -= value
    return list(accumulate(diff[:size]))


def minimal_generating_set(values: Iterable[int]) -> list[int]:
    """Distinct set with the smallest maximum that generates ``values``.

    A set generates another when every target is reached from some member by
    repeatedly applying ``x -> 2x`` or ``x -> 2x + 1``. Returned sorted.
    """
    members = set(values)
    heap = [-value for value in members]
    heapq.heapify(heap)
    while heap:
        largest = -heap[0]
        candidate = largest
        while candidate in members:
            candidate //= 2
        if candidate == 0:
            break
        heapq.heapreplace(heap, -candidate)
        members.remove(largest)
        members.add(candidate)
    return sorted(members)