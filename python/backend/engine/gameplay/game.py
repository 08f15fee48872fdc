"""Replays gap moves on a board — used to animate and verify solutions."""

from __future__ import annotations

from backend.models.board import Board, Direction


class GamePlay:
    """Tracks a board and the number of moves applied to it."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.moves: int = 0

    @property
    def size(self) -> int:
        return self.board.size

    # -- movement (direction = where the *gap* moves) -------------------------

    def move(self, direction: Direction | str) -> bool:
        """Move the gap one cell in *direction*.

        E.g. ``Direction.UP`` slides the tile **above** the gap down.
        Returns True if the move was valid.
        """
        moved = self.board.apply_move(Direction(direction))
        if moved is None:
            return False
        self.board = moved
        self.moves += 1
        return True

    def play(self, moves: str) -> int:
        """Apply *moves* in order, stopping at the first invalid one.

        Returns the number of moves applied.
        """
        for applied, m in enumerate(moves):
            if not self.move(m):
                return applied
        return len(moves)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
