"""Glyphs for the text rendering of a maze and its placements."""
from typing import Iterable, List, Sequence

from .placements import CRATE, ENTRY_FLOOR, EXIT_MARKER, TORCH, Placement

SOLID = "#"
OPEN = "."
ENTRY = "E"
EXIT = "X"
CRATE_GLYPH = "c"
TORCH_GLYPH = "t"

# Later entries win when several placements share a cell
_OVERLAY = [
    (CRATE, CRATE_GLYPH),
    (TORCH, TORCH_GLYPH),
    (ENTRY_FLOOR, ENTRY),
    (EXIT_MARKER, EXIT),
]


def render_rows(grid: Sequence[Sequence[bool]], placements: Iterable[Placement] = ()) -> List[str]:
    rows = [[SOLID if solid else OPEN for solid in row] for row in grid]
    by_kind = {}
    for p in placements:
        by_kind.setdefault(p.kind, []).append(p)
    for kind, glyph in _OVERLAY:
        for p in by_kind.get(kind, []):
            x, z = p.cell
            rows[z][x] = glyph
    return ["".join(r) for r in rows]


def render_ascii(grid: Sequence[Sequence[bool]], placements: Iterable[Placement] = ()) -> str:
    return "\n".join(render_rows(grid, placements))


__all__ = ["SOLID", "OPEN", "ENTRY", "EXIT", "CRATE_GLYPH", "TORCH_GLYPH", "render_rows", "render_ascii"]
