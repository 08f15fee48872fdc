"""Sliding puzzle solver — named search strategies over ``GraphSearch``."""

from __future__ import annotations

import logging
from bisect import bisect_left, insort
from enum import StrEnum
from typing import Callable

from backend.engine.frontier import FifoQueue, LifoStack, OrderedCollection, PriorityQueue
from backend.engine.gamesolver.search import GraphSearch, SearchResult, SearchStatus
from backend.engine.heuristics import Manhattan, Misplaced
from backend.models.board import Board, Direction

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    bfs = "bfs"
    dfs = "dfs"
    astar_misplaced = "astar-misplaced"
    astar_manhattan = "astar-manhattan"


# -- strategy registry -------------------------------------------------------

_FRONTIERS: dict[Strategy, Callable[[], OrderedCollection]] = {
    Strategy.bfs: FifoQueue,
    Strategy.dfs: LifoStack,
    Strategy.astar_misplaced: lambda: PriorityQueue(Misplaced()),
    Strategy.astar_manhattan: lambda: PriorityQueue(Manhattan()),
}


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def make_frontier(strategy: Strategy) -> OrderedCollection:
        """Return a fresh, empty frontier implementing *strategy*."""
        return _FRONTIERS[Strategy(strategy)]()

    @staticmethod
    def solve(
        board: Board,
        strategy: Strategy = Strategy.astar_manhattan,
        check_parity: bool = True,
    ) -> SearchResult:
        """Search for a move sequence that solves *board*.

        With *check_parity* the inversion-parity test runs first, so boards
        that can never reach the goal are reported without exploring their
        (possibly huge) reachable state space.
        """
        if check_parity and not Solver.is_solvable(board):
            logger.info("Board fails the parity check; skipping search")
            return SearchResult(SearchStatus.UNSOLVABLE, None, 0)

        result = GraphSearch().solve(board, Solver.make_frontier(strategy))
        if result.solved:
            logger.info(
                "%s: solved in %d moves, %d states expanded",
                strategy, result.num_moves, result.expanded,
            )
        else:
            logger.info("%s: no solution, %d states expanded", strategy, result.expanded)
        return result

    @staticmethod
    def hint(board: Board, strategy: Strategy = Strategy.astar_manhattan) -> Direction | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        result = Solver.solve(board, strategy)
        return Direction(result.moves[0]) if result.solved else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        n = board.size
        flat = [v for row in board.tiles for v in row if v != 0]
        inv = 0
        seen: list[int] = []
        for v in flat:
            inv += len(seen) - bisect_left(seen, v)
            insort(seen, v)
        if n % 2 == 1:
            return inv % 2 == 0
        blank_from_bottom = n - 1 - board.blank_pos[0]
        return (inv + blank_from_bottom) % 2 == 0
