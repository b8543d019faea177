"""Pipeline orchestration for maze generation.

Provides the public Maze class: one seeded random stream drives carving and
then prop placement, so a (seed, size) pair always yields the same grid and
the same placement sequence.
"""
from __future__ import annotations

import dataclasses
import os
import random
import time
from typing import Any, Dict, Optional, Tuple

from flask import current_app, has_app_context

from ..logging_utils import get_logger
from .config import MazeConfig
from .generator import MazeGenerator, validate_size
from .metrics import collect_counts, init_metrics
from .planner import LayoutPlanner
from .seeds import random_seed
from .tiles import render_ascii

log = get_logger("mazecrawl.maze")


class Maze:
    def __init__(
        self,
        config: Optional[MazeConfig] = None,
        *,
        seed: Optional[int] = None,
        size: Optional[int] = None,
        enable_metrics: bool = True,
    ):
        # Work on a copy; the caller's config may be reused for other mazes
        config = dataclasses.replace(config or MazeConfig())
        if seed is not None:
            config.seed = seed
        if size is not None:
            config.size = size
        # 0 is a valid deterministic seed; None => random
        if config.seed is None:
            config.seed = random_seed()
        self.config = config
        self.seed = config.seed
        # Fails fast before any allocation or random draw
        self.size = validate_size(config.size)
        self.enable_metrics = enable_metrics
        self._apply_overrides()
        self.entry_pos: Tuple[int, int] = config.entry_pos()
        self.exit_pos: Tuple[int, int] = config.exit_pos()
        # Player spawns one unit above the entry floor
        self.spawn_pos: Tuple[int, int, int] = (self.entry_pos[0], 1, self.entry_pos[1])
        self.metrics: Dict[str, Any] = init_metrics() if self.enable_metrics else {}
        self._rng = random.Random(self.seed)
        self._run_pipeline()

    def _apply_overrides(self):
        env_key = 'MAZE_ENABLE_GENERATION_METRICS'
        if env_key in os.environ:
            self.enable_metrics = os.environ.get(env_key, '').lower() not in {'0', 'false', 'no', ''}
        # Flask app config wins over the environment when an app context is active
        if has_app_context() and env_key in current_app.config:
            self.enable_metrics = bool(current_app.config.get(env_key))

    def _run_pipeline(self):
        if self.enable_metrics:
            start = time.perf_counter()
            phase_times = {}

            def _phase(label, fn, *a, **k):
                ps = time.perf_counter()
                r = fn(*a, **k)
                phase_times[label] = int((time.perf_counter() - ps) * 1000)
                return r
        else:
            def _phase(label, fn, *a, **k):
                return fn(*a, **k)

        gen = MazeGenerator(self.size, self._rng)
        self._check_inside(self.entry_pos, 'entry')
        self._check_inside(self.exit_pos, 'exit')
        self.grid = _phase('generate', gen.run)
        planner = LayoutPlanner(self._rng, self.config.crate_chance, self.config.torch_chance)
        self.placements = _phase('plan', planner.run, self.grid, self.entry_pos, self.exit_pos)

        if self.enable_metrics:
            collect_counts(self, self.metrics)
            self.metrics['runtime_ms'] = int((time.perf_counter() - start) * 1000)
            self.metrics['phase_ms'] = phase_times
            if not self.metrics['exit_was_open']:
                log.warn(event="exit_forced_open", seed=self.seed, size=self.size, exit=self.exit_pos)
        log.info(
            event="maze_generated",
            seed=self.seed,
            size=self.size,
            placements=len(self.placements),
            runtime_ms=self.metrics.get('runtime_ms'),
        )

    def _check_inside(self, pos: Tuple[int, int], label: str):
        x, z = pos
        if not (0 <= x < self.size and 0 <= z < self.size):
            raise ValueError(f"{label} position {pos} lies outside a {self.size}x{self.size} maze")

    def to_ascii(self) -> str:
        return render_ascii(self.grid, self.placements)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "size": self.size,
            "grid": [[1 if solid else 0 for solid in row] for row in self.grid],
            "entry": list(self.entry_pos),
            "exit": list(self.exit_pos),
            "spawn": list(self.spawn_pos),
            "placements": [p.to_dict() for p in self.placements],
            "metrics": dict(self.metrics),
        }


__all__ = ["Maze"]
