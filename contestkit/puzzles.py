"""Assorted puzzle solvers: spiders, parity jumps, brackets, queens, balls, bridges."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from math import gcd

_CLOSING = {")": "(", "]": "[", "}": "{", ">": "<"}
_OPENING = frozenset(_CLOSING.values())


def _prime_factors(value: int) -> list[int]:
    """Distinct prime factors in increasing order."""
    factors = []
    divisor = 2
    while divisor * divisor <= value:
        if value % divisor == 0:
            factors.append(divisor)
            while value % divisor == 0:
                value //= divisor
        divisor += 1
    if value > 1:
        factors.append(value)
    return factors


def friendly_spiders(legs: Sequence[int], source: int, target: int) -> list[int] | None:
    """Shortest chain of spiders passing a message from ``source`` to ``target``.

    Spiders are numbered from 1; two are friends when their leg counts share
    a factor above one. Returns ``None`` when no chain exists.
    """
    n = len(legs)
    for spider in (source, target):
        if not 1 <= spider <= n:
            raise ValueError(f"spider {spider} outside 1..{n}")
    if any(count < 1 for count in legs):
        raise ValueError("leg counts must be positive")
    if source == target:
        return [source]
    if gcd(legs[source - 1], legs[target - 1]) > 1:
        return [source, target]

    # Spiders are positive nodes, primes are negative nodes.
    adj: defaultdict[int, list[int]] = defaultdict(list)
    for spider, count in enumerate(legs, start=1):
        for prime in _prime_factors(count):
            adj[spider].append(-prime)
            adj[-prime].append(spider)

    parent: dict[int, int | None] = {source: None}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbour in adj[node]:
            if neighbour not in parent:
                parent[neighbour] = node
                queue.append(neighbour)
    if target not in parent:
        return None
    chain = []
    node: int | None = target
    while node is not None:
        if node > 0:
            chain.append(node)
        node = parent[node]
    chain.reverse()
    return chain


def nearest_opposite_parity(values: Sequence[int]) -> list[int]:
    """Fewest jumps from each position to a value of the other parity.

    From 1-based position ``i`` one may jump to ``i - a[i]`` or ``i + a[i]``.
    Unreachable positions get -1.
    """
    n = len(values)
    a = [0, *values]
    answer = [-1] * (n + 1)
    incoming: list[list[int]] = [[] for _ in range(n + 1)]
    queue: deque[int] = deque()
    for i in range(1, n + 1):
        for j in (i - a[i], i + a[i]):
            if 1 <= j <= n:
                incoming[j].append(i)
                if a[j] % 2 != a[i] % 2:
                    answer[i] = 1
        if answer[i] == 1:
            queue.append(i)
    while queue:
        v = queue.popleft()
        for u in incoming[v]:
            if answer[u] == -1 and a[u] % 2 == a[v] % 2:
                answer[u] = answer[v] + 1
                queue.append(u)
    return answer[1:]


def bracket_replacements(text: str) -> int | None:
    """Fewest bracket replacements making ``text`` a regular bracket sequence.

    An opening bracket may become any opening one and a closing bracket any
    closing one. Returns ``None`` when it is impossible.
    """
    stack: list[str] = []
    replacements = 0
    for char in text:
        if char not in _CLOSING and char not in _OPENING:
            raise ValueError(f"unexpected character {char!r}")
        if char in _CLOSING and stack and stack[-1] in _OPENING:
            if stack.pop() != _CLOSING[char]:
                replacements += 1
        else:
            stack.append(char)
    return None if stack else replacements


def count_queens(n: int) -> int:
    """Number of ways to place ``n`` non-attacking queens on an n x n board."""
    if n < 1:
        raise ValueError("the board needs at least one column")
    full = (1 << n) - 1

    def place(rows: int, rising: int, falling: int) -> int:
        if rows == full:
            return 1
        total = 0
        free = full & ~(rows | rising | falling)
        while free:
            bit = free & -free
            free ^= bit
            total += place(rows | bit, ((rising | bit) << 1) & full, (falling | bit) >> 1)
        return total

    return place(0, 0, 0)


def ball_positions(players: int, start: int, throws: Iterable[tuple[int, str]]) -> list[int]:
    """Players who may hold the ball after the throws, in increasing order.

    Players 1..``players`` stand in a circle. Each throw is a distance and a
    direction: ``"0"`` clockwise, ``"1"`` counter-clockwise, ``"?"`` unknown.
    """
    if players < 1:
        raise ValueError("there must be at least one player")
    if not 1 <= start <= players:
        raise ValueError(f"start {start} outside 1..{players}")
    holders = {start}
    for distance, direction in throws:
        if direction not in ("0", "1", "?"):
            raise ValueError(f"unknown direction {direction!r}")
        moved: set[int] = set()
        for holder in holders:
            if direction in ("0", "?"):
                moved.add((holder + distance - 1) % players + 1)
            if direction in ("1", "?"):
                moved.add((holder - distance - 1) % players + 1)
        holders = moved
    return sorted(holders)


def assign_bridges(
    islands: Sequence[tuple[int, int]], bridges: Sequence[int]
) -> list[int] | None:
    """Bridge number (1-based) for each gap between adjacent islands.

    Island ``i`` spans ``(l, r)``; a bridge of length ``b`` fits the gap after
    it when ``l[i+1] - r[i] <= b <= r[i+1] - l[i]``. Each bridge is used at
    most once. Returns ``None`` when some gap cannot be bridged.
    """
    gaps = len(islands) - 1
    if gaps <= 0:
        return []
    events: list[tuple[int, int, int]] = []
    for i, ((left, right), (next_left, next_right)) in enumerate(zip(islands, islands[1:])):
        events.append((next_left - right, -1, i))
        events.append((next_right - left, 1, i))
    events.extend((length, 0, j) for j, length in enumerate(bridges))
    events.sort()

    answer: list[int | None] = [None] * gaps
    closed: set[int] = set()
    open_gaps: list[tuple[int, int]] = []
    for _, kind, index in events:
        if kind == -1:
            left, right = islands[index]
            next_right = islands[index + 1][1]
            heapq.heappush(open_gaps, (next_right - left, index))
        elif kind == 1:
            closed.add(index)
        else:
            while open_gaps and open_gaps[0][1] in closed:
                heapq.heappop(open_gaps)
            if open_gaps:
                _, gap = heapq.heappop(open_gaps)
                answer[gap] = index + 1
                closed.add(gap)
    if any(bridge is None for bridge in answer):
        return None
    return answer