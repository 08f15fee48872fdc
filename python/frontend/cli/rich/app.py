"""Rich terminal frontend — styled tables, colours, and panels.

Uses the ``rich`` library to show the puzzle, the solver's answer and an
animated replay of the solution, sharing the same backend as the vanilla
CLI.
"""

from __future__ import annotations

import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SearchResult, Solver, Strategy
from backend.models.board import Board

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _board_panel(board: Board, title: str, style: str, footer: Text | None = None) -> Panel:
    body = Align.center(_render_board(board))
    if footer is not None:
        body = Group(body, Align.center(footer))
    return Panel(
        body,
        title=f"[bold {style}]{title}[/bold {style}]",
        border_style=style,
        padding=(1, 2),
    )


def _summary(result: SearchResult, strategy: Strategy) -> Text:
    text = Text()
    if result.solved:
        text.append("  Solved in ", style="dim")
        text.append(str(result.num_moves), style="bold yellow")
        text.append(" moves: ", style="dim")
        text.append(result.moves or "(already solved)", style="bold cyan")
    else:
        text.append("  IMPOSSIBLE", style="bold red")
        text.append("  puzzle cannot be solved", style="red")
    text.append(f"\n  {strategy}", style="dim")
    text.append("  expanded ", style="dim")
    text.append(str(result.expanded), style="bold yellow")
    text.append(" states", style="dim")
    return text


# -- replay -------------------------------------------------------------------


def _replay(board: Board, moves: str, delay: float) -> Board:
    """Animate *moves* in place; returns the final board."""
    game = GamePlay(board)
    size = game.size
    with Live(console=console, refresh_per_second=30) as live:
        for i, move in enumerate(moves):
            game.move(move)
            progress = Text()
            progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
            progress.append(f"({move})", style="dim")
            live.update(
                Align.center(
                    _board_panel(
                        game.board, f"Replay  {size}×{size}", "cyan", progress
                    )
                )
            )
            live.refresh()
            time.sleep(delay)
    return game.board


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    strategy: Strategy,
    animate: bool = True,
    delay: float = 0.25,
) -> SearchResult:
    """Show *board*, solve it with *strategy* and display the answer."""
    size = board.size
    console.print()
    console.print(
        Align.center(_board_panel(board, f"Sliding Puzzle  {size}×{size}", "bright_blue"))
    )

    with console.status(f"[cyan]Searching with {strategy}…[/cyan]"):
        result = Solver.solve(board, strategy)

    final = board
    if animate and result.solved and result.moves:
        final = _replay(board, result.moves, delay)

    style = "bold green" if result.solved else "bold red"
    console.print(
        Align.center(
            _board_panel(final, "Result", style, _summary(result, strategy))
        )
    )
    return result
