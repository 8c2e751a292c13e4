"""
lifegrid CLI - Command-line interface for the engine.

Usage:
    lifegrid step <file> [-n N] [--toroidal] [--all]   Step a universe and print it
    lifegrid random <columns> <rows> [--seed S]        Print a random universe
    lifegrid validate <file>                           Check a universe file parses
    lifegrid serve [--host H] [--port P]               Run the HTTP API

Use '-' as <file> to read from stdin.
"""

import argparse
import logging
import os
import random
import sys

from .engine_core import Universe, ToroidalUniverse, ParseUniverseError

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="lifegrid - Conway's Game of Life on a finite grid",
        prog="lifegrid",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("LIFEGRID_LOG_LEVEL", "INFO").upper(),
        help="Logging level (default: $LIFEGRID_LOG_LEVEL or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Step command
    step_parser = subparsers.add_parser("step", help="Step a universe and print it")
    step_parser.add_argument("file", help="Path to universe text file, or '-' for stdin")
    step_parser.add_argument("--generations", "-n", type=int, default=1, help="Generations to step")
    step_parser.add_argument("--toroidal", action="store_true", help="Wrap around the edges")
    step_parser.add_argument("--all", action="store_true", help="Print every generation")

    # Random command
    random_parser = subparsers.add_parser("random", help="Print a random universe")
    random_parser.add_argument("columns", type=int, help="Width")
    random_parser.add_argument("rows", type=int, help="Height")
    random_parser.add_argument("--seed", type=int, help="Seed for reproducible output")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Check a universe file parses")
    validate_parser.add_argument("file", help="Path to universe text file, or '-' for stdin")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")

    args = parser.parse_args(argv)

    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid LIFEGRID_LOG_LEVEL: {args.log_level}")

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "step":
        cmd_step(args)
    elif args.command == "random":
        cmd_random(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def read_universe(path: str, universe_type: type[Universe] = Universe) -> Universe:
    """Read and parse a universe file. Exits with status 1 on failure."""
    try:
        if path == "-":
            text = sys.stdin.read()
        else:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {path}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        return universe_type.parse(text)
    except ParseUniverseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_step(args):
    """Step a universe and print the result."""
    if args.generations < 0:
        print("Error: --generations must be >= 0", file=sys.stderr)
        sys.exit(1)

    universe_type = ToroidalUniverse if args.toroidal else Universe
    universe = read_universe(args.file, universe_type)
    logger.debug("Loaded %r", universe)

    if args.all:
        print(universe.to_text())
    for _ in range(args.generations):
        universe = universe.step()
        if args.all:
            print(universe.to_text())

    if not args.all:
        sys.stdout.write(universe.to_text())


def cmd_random(args):
    """Print a random universe."""
    if args.columns < 0 or args.rows < 0:
        print("Error: columns and rows must be >= 0", file=sys.stderr)
        sys.exit(1)
    if (args.columns == 0) != (args.rows == 0):
        print("Error: columns and rows must both be zero or both be positive", file=sys.stderr)
        sys.exit(1)

    rng = random.Random(args.seed)
    universe = Universe.new_random(args.columns, args.rows, lambda: rng.random() > 0.5)
    sys.stdout.write(universe.to_text())


def cmd_validate(args):
    """Validate a universe file."""
    universe = read_universe(args.file)
    print(
        f"Valid universe: {universe.columns}x{universe.rows}, "
        f"{universe.live_cell_count()} live cell(s)"
    )


def cmd_serve(args):
    """Run the HTTP API under uvicorn."""
    import uvicorn

    logger.info("Serving lifegrid API on %s:%d", args.host, args.port)
    uvicorn.run("lifegrid.api.app:create_app", factory=True, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
