"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes) to show the puzzle, report the
solver's answer and replay the solution move by move.
"""

from __future__ import annotations

import sys
import time

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SearchResult, Solver, Strategy
from backend.models.board import Board


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = len(str(board.size * board.size - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.size)

    lines: list[str] = [sep]
    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append(f"{_DIM} {'·':>{width}} {_R}")
            elif board.is_tile_correct(r, c):
                cells.append(f"{_G} {val:>{width}} {_R}")
            else:
                cells.append(f" {val:>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _report(result: SearchResult) -> str:
    if not result.solved:
        return f"{_RED}Puzzle cannot be solved.{_R}"
    return (
        f"Puzzle can be solved in {result.num_moves} moves: "
        f"{_C}{result.moves}{_R}"
    )


# -- replay -------------------------------------------------------------------


def _replay(board: Board, moves: str, delay: float) -> None:
    """Apply *moves* one at a time, redrawing the board after each."""
    game = GamePlay(board)
    for i, move in enumerate(moves):
        game.move(move)
        _clear()
        size = game.size
        print(f"  {_C}=== Solving… ({size}×{size}) ==={_R}")
        print()
        print(_render_board(game.board))
        print()
        print(f"  Move {i + 1}/{len(moves)}  ({move})")
        sys.stdout.flush()
        time.sleep(delay)


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    strategy: Strategy,
    animate: bool = True,
    delay: float = 0.25,
) -> SearchResult:
    """Print *board*, solve it with *strategy* and show the answer."""
    print(board)
    print()

    result = Solver.solve(board, strategy)

    if animate and result.solved and result.moves:
        _replay(board, result.moves, delay)
        print()
    print(_report(result))
    print(f"  {_DIM}States expanded: {result.expanded}{_R}")
    return result
