"""Connectivity utilities over a carved grid: flood fill and tree checks."""
from __future__ import annotations

from collections import deque
from typing import List, Sequence, Set, Tuple

Coord2D = Tuple[int, int]


def flood_open(grid: Sequence[Sequence[bool]], start: Coord2D) -> Set[Coord2D]:
    """Return every open ``(x, z)`` reachable from ``start`` by orthogonal steps."""
    size = len(grid)
    sx, sz = start
    if not (0 <= sx < size and 0 <= sz < size) or grid[sz][sx]:
        return set()
    q = deque([start])
    visited = {start}
    while q:
        cx, cz = q.popleft()
        for dx, dz in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            nx, nz = cx + dx, cz + dz
            if 0 <= nx < size and 0 <= nz < size and (nx, nz) not in visited:
                if not grid[nz][nx]:
                    visited.add((nx, nz))
                    q.append((nx, nz))
    return visited


def odd_cells(size: int) -> List[Coord2D]:
    return [(x, z) for z in range(1, size - 1, 2) for x in range(1, size - 1, 2)]


def open_cells(grid: Sequence[Sequence[bool]]) -> List[Coord2D]:
    return [(x, z) for z, row in enumerate(grid) for x, solid in enumerate(row) if not solid]


def count_connectors(grid: Sequence[Sequence[bool]]) -> int:
    """Count open cells with exactly one even coordinate (corridor cells)."""
    return sum(1 for x, z in open_cells(grid) if (x % 2) != (z % 2))


def is_spanning_tree(grid: Sequence[Sequence[bool]]) -> bool:
    """True when the open cells form a tree covering every interior odd cell.

    Rooms are odd/odd cells, corridors join exactly two rooms. The carve is a
    tree iff all rooms are open, nothing else is open, everything is reachable
    from (1, 1), and there are exactly ``rooms - 1`` corridors.
    """
    size = len(grid)
    rooms = odd_cells(size)
    if any(grid[z][x] for x, z in rooms):
        return False
    opened = open_cells(grid)
    if any(x % 2 == 0 and z % 2 == 0 for x, z in opened):
        return False
    if count_connectors(grid) != len(rooms) - 1:
        return False
    return len(flood_open(grid, (1, 1))) == len(opened)


__all__ = ["flood_open", "odd_cells", "open_cells", "count_connectors", "is_spanning_tree"]
