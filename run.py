"""Mazecrawl CLI entry point.

Provides subcommands for generating a maze to stdout and for running the
HTTP maze API. Accepts configuration via flags and environment variables,
with optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

# Disable colors if output is not a real terminal (e.g., during pytest capture)
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    Mazecrawl maze level generator

    Generate a maze and its placement instructions, or serve them over HTTP.
    Configuration can be provided via CLI flags or environment variables. If
    both are present, CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          MAZE_DEFAULT_SIZE   Maze size when --size is omitted (default: 21)
          MAZE_SEED           Seed when --seed is omitted (default: random)
          HOST                Bind address for the API server (default: 0.0.0.0)
          PORT                Port for the API server (default: 5000)

        Examples:
          # Print a random 21x21 maze
          python run.py generate

          # Reproduce a maze from a word seed as JSON
          python run.py generate --size 31 --seed dragon --json

          # Serve the maze API on port 8080
          python run.py server --port 8080
        """
    )

    parser = argparse.ArgumentParser(
        prog="Mazecrawl",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"Mazecrawl {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a maze and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a maze and print its text map (or full JSON with --json)",
    )
    gen_parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Odd maze size >= 5 (default: env MAZE_DEFAULT_SIZE or 21)",
    )
    gen_parser.add_argument(
        "--seed",
        default=None,
        help="Integer or word seed (default: env MAZE_SEED or random)",
    )
    gen_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print grid, placements and metrics as JSON",
    )
    gen_parser.set_defaults(command="generate")

    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP maze API",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask maze API server",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # If no subcommand provided, default to generate
    if len(argv) == 0:
        argv = ["generate"]

    return parser.parse_args(argv)


def _label(text: str) -> str:
    return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text


def _value(val) -> str:
    return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)


def _error(message: str) -> None:
    prefix = f"{Fore.RED}[ERROR]{Style.RESET_ALL}" if _COLOR_ENABLED else "[ERROR]"
    print(f"{prefix} {message}", file=sys.stderr)


def _run_generate(args) -> int:
    from mazecrawl.maze import InvalidDimension, Maze
    from mazecrawl.maze.seeds import coerce_seed

    size = args.size if args.size is not None else int(os.getenv("MAZE_DEFAULT_SIZE", "21"))
    seed = coerce_seed(args.seed if args.seed is not None else os.getenv("MAZE_SEED"))
    try:
        maze = Maze(seed=seed, size=size)
    except InvalidDimension as e:
        _error(e.message)
        return 1

    if args.as_json:
        print(json.dumps(maze.to_dict(), separators=(",", ":")))
        return 0

    m = maze.metrics
    divider = "=" * 40
    lines = [
        divider,
        f"  {_label('Seed:'):12} {_value(maze.seed)}",
        f"  {_label('Size:'):12} {_value(f'{maze.size}x{maze.size}')}",
        f"  {_label('Crates:'):12} {_value(m.get('placements_crate', 0))}",
        f"  {_label('Torches:'):12} {_value(m.get('placements_torch', 0))}",
        divider,
        maze.to_ascii(),
    ]
    print("\n".join(lines))
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if _COLOR_ENABLED:
        _color_init()
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    mode = (getattr(args, "command", None) or "generate").lower()
    if mode == "generate":
        return _run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))
    debug = bool(getattr(args, "debug", False) or os.getenv("FLASK_DEBUG") == "1")

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    from mazecrawl.logging_utils import log
    from mazecrawl.server import start_server

    title = f"{Fore.CYAN}{Style.BRIGHT}Mazecrawl API{Style.RESET_ALL}" if _COLOR_ENABLED else "Mazecrawl API"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    print(
        "\n".join(
            [
                divider,
                f"  {title}",
                divider,
                f"  {_label('Host:'):12} {_value(host)}",
                f"  {_label('Port:'):12} {_value(port)}",
                f"  {_label('Debug:'):12} {_value('YES' if debug else 'NO')}",
                divider,
                "",
            ]
        )
    )
    log.info(event="listen", host=host, port=port, debug=debug)
    start_server(host=host, port=port, debug=debug)
    return 0


def _console_main() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
