"""Maze carving: recursive backtracking over the odd-coordinate lattice.

The grid starts fully solid. Carving begins at the fixed cell (1, 1) and walks
two cells at a time, opening the cell in between, so odd coordinates act as
room centers and even coordinates as the corridors joining them. Direction
order is reshuffled at every cell, which is what gives the maze its shape.

The walk uses an explicit stack instead of call recursion. Each stack frame
holds its own shuffled direction list and a cursor into it, so cells are
visited (and the random stream consumed) in exactly the order the recursive
version would use.
"""
from __future__ import annotations

import random
from typing import List, Sequence, Tuple

from .config import MIN_SIZE
from .errors import InvalidDimension

Grid = Tuple[Tuple[bool, ...], ...]
MutableGrid = List[List[bool]]

START = (1, 1)

# (dx, dz) per direction: North, East, South, West
STEPS: Tuple[Tuple[int, int], ...] = ((0, -2), (2, 0), (0, 2), (-2, 0))


def validate_size(size) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidDimension(size, f"maze size must be an integer, got {size!r}", code="type")
    if size < MIN_SIZE:
        raise InvalidDimension(size, f"maze size must be at least {MIN_SIZE}, got {size}", code="min")
    if size % 2 == 0:
        raise InvalidDimension(size, f"maze size must be odd, got {size}", code="odd")
    return size


def shuffle(items: List[int], rng: random.Random) -> None:
    """In-place Fisher-Yates shuffle drawing only from ``rng``."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


class MazeGenerator:
    def __init__(self, size: int, rng: random.Random):
        self.size = validate_size(size)
        self.rng = rng

    def init_grid(self) -> MutableGrid:
        n = self.size
        return [[True for _ in range(n)] for _ in range(n)]

    def _inside(self, x: int, z: int) -> bool:
        return 0 < x < self.size - 1 and 0 < z < self.size - 1

    def _directions(self) -> List[int]:
        order = [0, 1, 2, 3]
        shuffle(order, self.rng)
        return order

    def carve_passages(self, grid: MutableGrid, start: Tuple[int, int] = START) -> int:
        """Carve the maze into ``grid`` starting at ``start``; return cells visited."""
        sx, sz = start
        grid[sz][sx] = False
        visited = 1
        # frame: [x, z, shuffled directions, cursor]
        stack = [[sx, sz, self._directions(), 0]]
        while stack:
            frame = stack[-1]
            x, z, order, cursor = frame
            if cursor >= len(order):
                stack.pop()
                continue
            frame[3] = cursor + 1
            dx, dz = STEPS[order[cursor]]
            nx, nz = x + dx, z + dz
            if not self._inside(nx, nz) or not grid[nz][nx]:
                continue
            grid[z + dz // 2][x + dx // 2] = False
            grid[nz][nx] = False
            visited += 1
            stack.append([nx, nz, self._directions(), 0])
        return visited

    def run(self) -> Grid:
        grid = self.init_grid()
        self.carve_passages(grid)
        return freeze(grid)


def freeze(grid: Sequence[Sequence[bool]]) -> Grid:
    return tuple(tuple(row) for row in grid)


def generate(size: int, rng: random.Random) -> Grid:
    """Return a carved, frozen ``size`` x ``size`` grid (``True`` = solid).

    Raises :class:`InvalidDimension` before touching ``rng`` when ``size`` is
    not an odd integer of at least 5.
    """
    return MazeGenerator(size, rng).run()


__all__ = ["Grid", "MazeGenerator", "generate", "validate_size", "shuffle", "freeze", "STEPS", "START"]
