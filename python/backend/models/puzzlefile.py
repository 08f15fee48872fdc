"""Puzzle file loading.

Two formats are understood:

* plain text — one board row per line, tokens separated by spaces or tabs,
  ``.`` (or ``0``) marking the gap::

      1 2 3
      4 . 6
      7 5 8

* JSON — an object with a ``tiles`` key holding the rows, the same shape the
  test fixtures use::

      {"tiles": [[1, 2, 3], [4, 0, 6], [7, 5, 8]]}
"""

from __future__ import annotations

import json
from pathlib import Path

from backend.models.board import Board, InvalidBoardError

GAP_TOKEN = "."


def load_puzzle(path: Path) -> Board:
    """Read *path* and return its board.

    Raises ``FileNotFoundError`` if the file is missing and
    ``InvalidBoardError`` if its contents do not describe a valid board.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidBoardError(f"Puzzle file is not UTF-8 text: {exc}") from exc
    if path.suffix.lower() == ".json":
        return parse_json(text)
    return parse_text(text)


def parse_text(text: str) -> Board:
    rows: list[list[int]] = []
    width = -1
    for lineno, line in enumerate(text.splitlines(), 1):
        tokens = line.split()
        if not tokens:
            continue

        # every row must be the same length
        if width == -1:
            width = len(tokens)
        elif len(tokens) != width:
            raise InvalidBoardError(
                f"Badly formed puzzle: line {lineno} has {len(tokens)} "
                f"tokens, expected {width}."
            )

        try:
            rows.append([0 if t == GAP_TOKEN else int(t) for t in tokens])
        except ValueError as exc:
            raise InvalidBoardError(
                f"Badly formed puzzle: line {lineno}: {exc}"
            ) from exc

    if not rows:
        raise InvalidBoardError("Puzzle file is empty.")
    return Board.from_rows(rows)


def parse_json(text: str) -> Board:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidBoardError(f"Puzzle file is not valid JSON: {exc}") from exc
    if not isinstance(data, dict) or "tiles" not in data:
        raise InvalidBoardError('JSON puzzle must be an object with a "tiles" key.')
    return Board.from_rows(data["tiles"])
