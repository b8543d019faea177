from collections import Counter
from typing import Any, Dict

from .connectivity import count_connectors, flood_open
from .placements import KINDS


def init_metrics() -> Dict[str, Any]:
    return {
        'cells_open': 0,
        'cells_solid': 0,
        'connectors': 0,
        'reachable_from_entry': 0,
        'exit_was_open': False,
        'placements': 0,
        'runtime_ms': 0.0,
    }


def collect_counts(maze: "Maze", metrics: Dict[str, Any]) -> None:
    grid = maze.grid
    size = len(grid)
    open_count = sum(1 for row in grid for solid in row if not solid)
    metrics['cells_open'] = open_count
    metrics['cells_solid'] = size * size - open_count
    metrics['connectors'] = count_connectors(grid)
    metrics['reachable_from_entry'] = len(flood_open(grid, maze.entry_pos))
    ex, ez = maze.exit_pos
    metrics['exit_was_open'] = not grid[ez][ex]
    metrics['placements'] = len(maze.placements)
    counts = Counter(p.kind for p in maze.placements)
    for kind in KINDS:
        metrics[f'placements_{kind}'] = counts.get(kind, 0)
