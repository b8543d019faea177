"""Placement instructions emitted by the layout planner.

A placement is an immutable value describing one object the host scene should
instantiate: what it is (``kind``), where it sits on the grid (``x``, ``z``),
its vertical ``level`` and an optional ``scale`` hint. ``group`` names the
scene container the original level builder parented the object under
(``None`` for objects it left at the scene root).
"""
from __future__ import annotations

from typing import Any, Dict, NamedTuple, Optional, Tuple, Union

FLOOR = "floor"
WALL = "wall"
ENTRY_FLOOR = "entry_floor"
EXIT_FLOOR = "exit_floor"
EXIT_MARKER = "exit_marker"
CRATE = "crate"
TORCH = "torch"

KINDS = (FLOOR, WALL, ENTRY_FLOOR, EXIT_FLOOR, EXIT_MARKER, CRATE, TORCH)
PROP_KINDS = (CRATE, TORCH)

# Scene containers
GROUP_FLOOR = "floor"
GROUP_WALLS = "walls"
GROUP_PROPS = "props"

# Exit trigger volume edge length consumed by the collision collaborator
EXIT_TRIGGER_EXTENT = 1.5

Number = Union[int, float]


class Placement(NamedTuple):
    kind: str
    x: Number
    z: Number
    level: Number = 0
    scale: Number = 1.0
    tags: Tuple[str, ...] = ()
    group: Optional[str] = None

    @property
    def cell(self) -> Tuple[int, int]:
        """Grid cell the placement belongs to (torch offsets are dropped)."""
        return int(self.x), int(self.z)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "x": self.x,
            "z": self.z,
            "level": self.level,
            "scale": self.scale,
            "tags": list(self.tags),
            "group": self.group,
        }


__all__ = [
    "Placement",
    "FLOOR",
    "WALL",
    "ENTRY_FLOOR",
    "EXIT_FLOOR",
    "EXIT_MARKER",
    "CRATE",
    "TORCH",
    "KINDS",
    "PROP_KINDS",
    "GROUP_FLOOR",
    "GROUP_WALLS",
    "GROUP_PROPS",
    "EXIT_TRIGGER_EXTENT",
]
