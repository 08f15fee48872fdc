#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py puzzle.txt                      # A* (Manhattan), Rich terminal
    python main.py puzzle.txt -s bfs -f vanilla    # breadth-first, plain output
    python main.py puzzle.json --no-animate -v     # no replay, debug logging
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamesolver import Strategy  # noqa: E402
from backend.models import InvalidBoardError, load_puzzle  # noqa: E402
from frontend.cli.logs import setup_logging  # noqa: E402

# Boards outside this range are refused before searching; the state space
# beyond 8×8 is far too large to explore synchronously.
MIN_SIZE = 2
MAX_SIZE = 8


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    puzzle: Path = typer.Argument(
        ...,
        help="Puzzle file: whitespace-separated rows with '.' for the gap, or JSON.",
    ),
    strategy: Strategy = typer.Option(
        Strategy.astar_manhattan, "-s", "--strategy",
        help="Search strategy.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend used to display the result.",
    ),
    animate: bool = typer.Option(
        True, "--animate/--no-animate",
        help="Replay the solution move by move.",
    ),
    delay: float = typer.Option(
        0.25, "--delay",
        min=0.0,
        help="Seconds between replayed moves.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Enable debug logging.",
    ),
) -> None:
    """Solve a sliding puzzle by graph search."""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)

    try:
        board = load_puzzle(puzzle)
    except FileNotFoundError:
        typer.secho(f'Error: Could not find file "{puzzle}".', fg="red", err=True)
        raise typer.Exit(code=1)
    except OSError as exc:
        typer.secho(f'Error: Could not read "{puzzle}": {exc.strerror}.', fg="red", err=True)
        raise typer.Exit(code=1)
    except InvalidBoardError as exc:
        typer.secho(f"Error: {exc}", fg="red", err=True)
        raise typer.Exit(code=1)

    if not MIN_SIZE <= board.size <= MAX_SIZE:
        typer.secho(
            f"Error: board size {board.size} is outside {MIN_SIZE}-{MAX_SIZE}.",
            fg="red", err=True,
        )
        raise typer.Exit(code=1)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, strategy, animate=animate, delay=delay)


if __name__ == "__main__":
    app()
