"""Board model for the sliding puzzle search engine."""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from enum import StrEnum


class InvalidBoardError(ValueError):
    """Raised when a grid is not a well-formed sliding puzzle board."""


class Direction(StrEnum):
    """Direction the *gap* moves in (the tile on that side slides into it)."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Board:
    """An immutable snapshot of the puzzle.

    Tiles are stored row-major as a tuple of tuples. 0 represents the gap.
    Equality and hashing depend on the tiles only, so two boards reached by
    different move orders are interchangeable.
    """

    tiles: tuple[tuple[int, ...], ...]
    size: int = field(init=False, compare=False)
    blank_pos: tuple[int, int] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tiles", _as_tiles(self.tiles))
        _validate(self.tiles)
        object.__setattr__(self, "size", len(self.tiles))
        object.__setattr__(self, "blank_pos", _find_blank(self.tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows) -> Board:
        """Create a board from any two-dimensional array-like of ints.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
        """
        return cls(rows)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        return cls.from_rows(flat[r * size : (r + 1) * size] for r in range(size))

    @classmethod
    def _trusted(cls, tiles: tuple[tuple[int, ...], ...], blank_pos: tuple[int, int]) -> Board:
        """Build a board derived from a valid one, skipping validation."""
        board = object.__new__(cls)
        object.__setattr__(board, "tiles", tiles)
        object.__setattr__(board, "size", len(tiles))
        object.__setattr__(board, "blank_pos", blank_pos)
        return board

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board: 1..N²-1 in row-major order, gap last."""
        flat = list(range(1, size * size)) + [0]
        return cls.from_flat(size, flat)

    # -- queries --------------------------------------------------------------

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row][col]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        last = self.size * self.size
        for row in self.tiles:
            for val in row:
                if val != expected % last:
                    return False
                expected += 1
        return True

    def goal_position(self, value: int) -> tuple[int, int]:
        """Row and column where *value* sits on the goal board."""
        if value == 0:
            return self.size - 1, self.size - 1
        return (value - 1) // self.size, (value - 1) % self.size

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.goal_position(self.tiles[row][col]) == (row, col)

    # -- moves ----------------------------------------------------------------

    def can_move(self, direction: Direction) -> bool:
        br, bc = self.blank_pos
        dr, dc = direction.offset
        return 0 <= br + dr < self.size and 0 <= bc + dc < self.size

    def apply_move(self, direction: Direction) -> Board | None:
        """Return a new board with the gap moved one cell in *direction*.

        Returns ``None`` when the gap already sits on that edge. ``self`` is
        never modified.
        """
        if not self.can_move(direction):
            return None
        br, bc = self.blank_pos
        dr, dc = direction.offset
        tr, tc = br + dr, bc + dc

        rows = [list(row) for row in self.tiles]
        rows[br][bc], rows[tr][tc] = rows[tr][tc], 0
        return Board._trusted(tuple(tuple(row) for row in rows), (tr, tc))

    def to_rows(self) -> list[list[int]]:
        return [list(row) for row in self.tiles]

    def __str__(self) -> str:
        return "\n".join(
            "\t".join("." if v == 0 else str(v) for v in row) for row in self.tiles
        )


# -- validation ---------------------------------------------------------------


def _as_tiles(rows) -> tuple[tuple[int, ...], ...]:
    """Copy *rows* into nested tuples, refusing anything but whole numbers."""
    try:
        return tuple(tuple(_as_tile(v) for v in row) for row in rows)
    except TypeError as exc:
        raise InvalidBoardError(f"Board rows must hold integers: {exc}") from exc


def _as_tile(value) -> int:
    # bool is an int subclass but never a tile number
    if isinstance(value, bool):
        raise TypeError(f"{value!r} is not a tile number")
    return operator.index(value)


def _validate(tiles: tuple[tuple[int, ...], ...]) -> None:
    size = len(tiles)
    if size == 0:
        raise InvalidBoardError("Board must have at least one row.")
    for r, row in enumerate(tiles):
        if len(row) != size:
            raise InvalidBoardError(
                f"Board must be square: row {r} has {len(row)} cells, "
                f"expected {size}."
            )
    values = sorted(v for row in tiles for v in row)
    if values != list(range(size * size)):
        raise InvalidBoardError(
            f"A {size}×{size} board must hold each of 0..{size * size - 1} "
            f"exactly once."
        )


def _find_blank(tiles: tuple[tuple[int, ...], ...]) -> tuple[int, int]:
    for r, row in enumerate(tiles):
        for c, v in enumerate(row):
            if v == 0:
                return r, c
    raise InvalidBoardError("Board has no gap.")
