"""
project: Mazecrawl
module: server.py
License: MIT

Server bootstrap: builds the Flask app, configures logging and serves the
maze API.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from mazecrawl import create_app


def start_server(host="0.0.0.0", port=5000, debug: bool = False):  # pragma: no cover (runtime only)
    """Start the development server with console and rotating-file logging."""
    app = create_app()
    _configure_logging(app.instance_path)
    try:
        print(f"[INFO] Starting maze API on {host}:{port}")
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        print("\n[INFO] Server stopped by user (Ctrl+C)")
        sys.exit(0)


def _configure_logging(log_dir: str):
    """Configure logging to both console and ``<log_dir>/mazecrawl.log``.

    Safe to call repeatedly: existing root handlers are replaced.
    """
    try:
        os.makedirs(log_dir, exist_ok=True)
    except OSError:
        pass
    log_path = os.path.join(log_dir, "mazecrawl.log")

    root = logging.getLogger()
    root.setLevel(logging.INFO)
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(fmt)

    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(fmt)

    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(file_handler)
    root.addHandler(console)
    return log_path
