"""Shared board builders for the test suite."""

from __future__ import annotations

import random

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction

GOAL_3x3 = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
GOAL_2x2 = Board.from_rows([[1, 2], [3, 0]])


def scrambled(size: int, moves: str) -> Board:
    """Apply gap *moves* to the goal board; every move must be legal."""
    game = GamePlay(Board.goal(size))
    assert game.play(moves) == len(moves), f"illegal scramble {moves!r}"
    return game.board


def swapped(board: Board, a: int, b: int) -> Board:
    """Return *board* with tiles *a* and *b* exchanged (flips parity)."""
    rows = board.to_rows()
    for row in rows:
        for c, v in enumerate(row):
            if v == a:
                row[c] = b
            elif v == b:
                row[c] = a
    return Board.from_rows(rows)


def replays_to_goal(board: Board, moves: str) -> bool:
    """True if *moves* are all legal from *board* and end on the goal."""
    game = GamePlay(board)
    return game.play(moves) == len(moves) and game.is_won


def random_walk(size: int, length: int, seed: int) -> Board:
    """Walk the gap *length* legal steps from the goal, never undoing a step."""
    rng = random.Random(seed)
    board = Board.goal(size)
    previous: Direction | None = None
    for _ in range(length):
        options = [
            d for d in Direction
            if board.can_move(d) and d is not (previous.opposite if previous else None)
        ]
        previous = rng.choice(options)
        board = board.apply_move(previous)
    return board
