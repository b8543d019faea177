"""
project: Mazecrawl
module: __init__.py
License: MIT

Flask application factory.

Configuration is sourced from environment variables (optionally loaded from a
local .env file) with defaults suitable for development. A local `instance/`
directory holds runtime files such as the rotating log.
"""

import logging
import os
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

from mazecrawl.maze.config import DEFAULT_SIZE

# Load .env if present so MAZE_* settings can be supplied without exporting
# shell variables during development.
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def create_app(overrides: dict | None = None) -> Flask:
    """Build the Flask app, register blueprints and error handlers."""
    app = Flask(__name__, instance_relative_config=True)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        # Read-only installs can still serve requests without the instance dir
        pass

    app.config.update(
        SECRET_KEY=os.getenv("SECRET_KEY", "dev-secret-change-me"),
        MAZE_DEFAULT_SIZE=int(os.getenv("MAZE_DEFAULT_SIZE", str(DEFAULT_SIZE))),
        MAZE_MAX_SIZE=int(os.getenv("MAZE_MAX_SIZE", "101")),
        MAZE_ENABLE_GENERATION_METRICS=_env_flag("MAZE_ENABLE_GENERATION_METRICS", "1"),
        MAZE_CACHE_MAX=int(os.getenv("MAZE_CACHE_MAX", "8")),
        MAZE_DISABLE_CACHE=_env_flag("MAZE_DISABLE_CACHE", "0"),
    )
    if overrides:
        app.config.update(overrides)

    from mazecrawl.routes.maze_api import bp_maze

    app.register_blueprint(bp_maze)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal server error", "error_id": error_id}), 500

    return app


__all__ = ["create_app"]
