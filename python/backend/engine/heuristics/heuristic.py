"""Node evaluation functions for best-first search.

A heuristic scores a node as ``g + h``: the moves already made (the node's
depth) plus an estimate of the moves still needed. Lower scores are more
promising. Both estimates below never overestimate the remaining moves, so
A* with either returns a shortest solution.
"""

from __future__ import annotations

from typing import Protocol

from backend.models.node import Node


class Heuristic(Protocol):
    def evaluate(self, node: Node) -> int: ...


class Misplaced:
    """Depth plus the number of tiles not on their goal cell (gap excluded)."""

    def evaluate(self, node: Node) -> int:
        board = node.board
        misplaced = 0
        for r, row in enumerate(board.tiles):
            for c, val in enumerate(row):
                if val != 0 and not board.is_tile_correct(r, c):
                    misplaced += 1
        return node.depth + misplaced


class Manhattan:
    """Depth plus the summed row and column distance of every tile to its goal."""

    def evaluate(self, node: Node) -> int:
        board = node.board
        size = board.size
        distance = 0
        for r, row in enumerate(board.tiles):
            for c, val in enumerate(row):
                if val == 0:
                    continue
                goal_row, goal_col = (val - 1) // size, (val - 1) % size
                distance += abs(r - goal_row) + abs(c - goal_col)
        return node.depth + distance
