"""Public maze package interface.

Minimal public surface:
    from mazecrawl.maze import Maze, MazeConfig, generate, plan, InvalidDimension
"""

from .config import DEFAULT_SIZE, MIN_SIZE, MazeConfig
from .errors import InvalidDimension
from .generator import Grid, MazeGenerator, generate
from .pipeline import Maze
from .placements import (
    CRATE,
    ENTRY_FLOOR,
    EXIT_FLOOR,
    EXIT_MARKER,
    FLOOR,
    TORCH,
    WALL,
    Placement,
)
from .planner import LayoutPlanner, plan

__all__ = [
    "Maze",
    "MazeConfig",
    "MazeGenerator",
    "LayoutPlanner",
    "InvalidDimension",
    "Grid",
    "Placement",
    "generate",
    "plan",
    "DEFAULT_SIZE",
    "MIN_SIZE",
    "FLOOR",
    "WALL",
    "ENTRY_FLOOR",
    "EXIT_FLOOR",
    "EXIT_MARKER",
    "CRATE",
    "TORCH",
]
