"""Derive placement instructions from a frozen maze grid.

Phases, in emission order:
    * Structure sweep (row-major): solid cells become a stacked pair of walls
      (levels 1 and 2), open cells a single floor tile at level 0.
    * Entry floor at the entry cell.
    * Exit floor plus an exit marker tagged as a trigger at the exit cell.
      Both are emitted unconditionally; the grid is never consulted or changed.
    * Props on open odd-coordinate cells, one random draw per cell.
"""
from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from .placements import (
    CRATE,
    ENTRY_FLOOR,
    EXIT_FLOOR,
    EXIT_MARKER,
    FLOOR,
    GROUP_FLOOR,
    GROUP_PROPS,
    GROUP_WALLS,
    TORCH,
    WALL,
    Placement,
)

Coord2D = Tuple[int, int]

WALL_LEVELS = (1, 2)
EXIT_MARKER_LEVEL = 0.5
TORCH_OFFSET = 0.5
TORCH_LEVEL = 2.5
TORCH_SCALE = 0.5


class LayoutPlanner:
    def __init__(self, rng: random.Random, crate_chance: float = 0.2, torch_chance: float = 0.1):
        self.rng = rng
        self.crate_chance = crate_chance
        self.torch_chance = torch_chance

    def structure(self, grid: Sequence[Sequence[bool]]) -> List[Placement]:
        out: List[Placement] = []
        for z, row in enumerate(grid):
            for x, solid in enumerate(row):
                if solid:
                    for level in WALL_LEVELS:
                        out.append(Placement(WALL, x, z, level, group=GROUP_WALLS))
                else:
                    out.append(Placement(FLOOR, x, z, 0, group=GROUP_FLOOR))
        return out

    def entry(self, pos: Coord2D) -> List[Placement]:
        x, z = pos
        return [Placement(ENTRY_FLOOR, x, z, 0)]

    def exit(self, pos: Coord2D) -> List[Placement]:
        x, z = pos
        return [
            Placement(EXIT_FLOOR, x, z, 0),
            Placement(EXIT_MARKER, x, z, EXIT_MARKER_LEVEL, tags=("exit", "trigger"), group=GROUP_PROPS),
        ]

    def props(self, grid: Sequence[Sequence[bool]]) -> List[Placement]:
        """Roll a crate or torch for every open odd-coordinate interior cell.

        Draw order is rows (z) outer, columns (x) inner; a seeded source
        therefore yields the same props on every run.
        """
        size = len(grid)
        torch_cut = self.crate_chance + self.torch_chance
        out: List[Placement] = []
        for z in range(1, size - 1, 2):
            for x in range(1, size - 1, 2):
                if grid[z][x]:
                    continue
                r = self.rng.random()
                if r < self.crate_chance:
                    out.append(Placement(CRATE, x, z, 0, group=GROUP_PROPS))
                elif r < torch_cut:
                    out.append(
                        Placement(TORCH, x + TORCH_OFFSET, z, TORCH_LEVEL, scale=TORCH_SCALE, group=GROUP_PROPS)
                    )
        return out

    def run(
        self,
        grid: Sequence[Sequence[bool]],
        entry: Coord2D = (1, 1),
        exit: Optional[Coord2D] = None,
    ) -> Tuple[Placement, ...]:
        if exit is None:
            exit = (len(grid) - 2, len(grid) - 2)
        placements = self.structure(grid)
        placements.extend(self.entry(entry))
        placements.extend(self.exit(exit))
        placements.extend(self.props(grid))
        return tuple(placements)


def plan(
    grid: Sequence[Sequence[bool]],
    rng: random.Random,
    entry: Coord2D = (1, 1),
    exit: Optional[Coord2D] = None,
    crate_chance: float = 0.2,
    torch_chance: float = 0.1,
) -> Tuple[Placement, ...]:
    return LayoutPlanner(rng, crate_chance, torch_chance).run(grid, entry, exit)


__all__ = ["LayoutPlanner", "plan", "WALL_LEVELS", "TORCH_LEVEL", "TORCH_SCALE", "TORCH_OFFSET"]
