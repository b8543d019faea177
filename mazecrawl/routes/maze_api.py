"""
project: Mazecrawl
module: maze_api.py
License: MIT

Maze generation API routes.

Serves generated mazes as JSON (grid plus ordered placement instructions) or
as a plain-text map. Generation is deterministic per (seed, size), so results
are cached in-process.
"""

import threading

from flask import Blueprint, current_app, jsonify, request

from mazecrawl.logging_utils import get_logger
from mazecrawl.maze import InvalidDimension, Maze
from mazecrawl.maze.seeds import coerce_seed

log = get_logger("mazecrawl.api")

bp_maze = Blueprint("maze", __name__)

# (seed, size) -> Maze. Flask may serve requests from several threads.
_maze_cache = {}
_maze_cache_lock = threading.Lock()


def get_cached_maze(seed: int, size: int) -> Maze:
    cfg = current_app.config
    if cfg.get("MAZE_DISABLE_CACHE"):
        return Maze(seed=seed, size=size)
    key = (seed, size)
    with _maze_cache_lock:
        maze = _maze_cache.get(key)
        if maze is not None:
            return maze
    maze = Maze(seed=seed, size=size)
    with _maze_cache_lock:
        _maze_cache[key] = maze
        if len(_maze_cache) > cfg.get("MAZE_CACHE_MAX", 8):
            first_key = next(iter(_maze_cache.keys()))
            if first_key != key:
                _maze_cache.pop(first_key, None)
    return maze


def _error(field: str, message: str, code: str, status: int = 400):
    return jsonify({"error": message, "field": field, "code": code}), status


def _maze_from_request():
    """Resolve (seed, size) from query params and build the maze.

    Returns ``(maze, None)`` or ``(None, error_response)``.
    """
    raw_size = request.args.get("size")
    if raw_size in (None, ""):
        size = current_app.config.get("MAZE_DEFAULT_SIZE", 21)
    else:
        try:
            size = int(raw_size)
        except ValueError:
            return None, _error("size", "size must be an integer", "type")
    max_size = current_app.config.get("MAZE_MAX_SIZE", 101)
    if size > max_size:
        log.warn(event="invalid_dimension", size=size, code="max")
        return None, _error("size", f"maze size must be at most {max_size}, got {size}", "max")
    seed = coerce_seed(request.args.get("seed"))
    try:
        return get_cached_maze(seed, size), None
    except InvalidDimension as e:
        log.warn(event="invalid_dimension", size=e.size, code=e.code)
        return None, _error("size", e.message, e.code)


@bp_maze.route("/api/maze")
def maze_json():
    """
    Return a generated maze.
    Query: seed=<int|str> (optional, random when omitted), size=<odd int, 5..MAZE_MAX_SIZE>
    Response: { seed, size, grid, entry, exit, spawn, placements, metrics }
    """
    maze, err = _maze_from_request()
    if err:
        return err
    return jsonify(maze.to_dict())


@bp_maze.route("/api/maze/ascii")
def maze_ascii():
    maze, err = _maze_from_request()
    if err:
        return err
    body = maze.to_ascii() + "\n"
    return current_app.response_class(body, mimetype="text/plain", headers={"X-Maze-Seed": str(maze.seed)})
