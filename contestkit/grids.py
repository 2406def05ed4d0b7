"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

Cell = tuple[int, int]

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _inside(cell: Cell, rows: int, cols: int) -> bool:
    return 1 <= cell[0] <= rows and 1 <= cell[1] <= cols


def last_to_burn(rows: int, cols: int, sources: Iterable[Cell]) -> Cell:
    """Cell of a ``rows`` x ``cols`` field that catches fire last.

    Fire starts at every 1-based source cell at once and spreads to the four
    neighbours each minute. Among cells reached last, the first one the
    spread discovers is returned; with nothing left to burn, the last source.
    """
    distance: dict[Cell, int] = {}
    queue: deque[Cell] = deque()
    last: Cell | None = None
    for x, y in sources:
        cell = (x, y)
        if not _inside(cell, rows, cols):
            raise ValueError(f"source {cell} outside the {rows}x{cols} field")
        distance[cell] = 0
        queue.append(cell)
        last = cell
    if last is None:
        raise ValueError("at least one source is needed")
    farthest = 0
    while queue:
        x, y = queue.popleft()
        for dx, dy in _STEPS:
            neighbour = (x + dx, y + dy)
            if _inside(neighbour, rows, cols) and neighbour not in distance:
                reached = distance[(x, y)] + 1
                distance[neighbour] = reached
                queue.append(neighbour)
                if reached > farthest:
                    farthest, last = reached, neighbour
    return last


def museum_pictures(grid: Sequence[str], queries: Iterable[Cell]) -> list[int]:
    """Pictures Igor can see starting from each 1-based query cell.

    ``grid`` rows hold ``.`` for empty cells and ``*`` for walls; a picture
    hangs on every side shared by an empty cell and a wall.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    for row in grid:
        if len(row) != cols:
            raise ValueError("all grid rows must have the same width")
        if set(row) - {".", "*"}:
            raise ValueError(f"unexpected character in grid row {row!r}")

    component: dict[Cell, int] = {}
    pictures: list[int] = []
    for r in range(rows):
        for c in range(cols):
            if grid[r][c] != "." or (r, c) in component:
                continue
            label = len(pictures)
            seen = 0
            component[(r, c)] = label
            stack = [(r, c)]
            while stack:
                x, y = stack.pop()
                for dx, dy in _STEPS:
                    nx, ny = x + dx, y + dy
                    if not (0 <= nx < rows and 0 <= ny < cols):
                        continue
                    if grid[nx][ny] == "*":
                        seen += 1
                    elif (nx, ny) not in component:
                        component[(nx, ny)] = label
                        stack.append((nx, ny))
            pictures.append(seen)

    answers = []
    for x, y in queries:
        if not _inside((x, y), rows, cols):
            raise ValueError(f"query {(x, y)} outside the grid")
        if grid[x - 1][y - 1] != ".":
            raise ValueError(f"query {(x, y)} is on a wall")
        answers.append(pictures[component[(x - 1, y - 1)]])
    return answers