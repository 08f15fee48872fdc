"""Generic graph search over sliding puzzle boards."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from backend.engine.frontier import OrderedCollection
from backend.models.board import Board
from backend.models.node import Node

logger = logging.getLogger(__name__)


class SearchStatus(StrEnum):
    RUNNING = "running"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search.

    ``moves`` lists the gap moves from the start board to the goal, one
    character per move (``"U"``, ``"D"``, ``"L"``, ``"R"``), or is ``None``
    when the goal is unreachable. ``expanded`` counts the distinct states
    expanded before the search stopped.
    """

    status: SearchStatus
    moves: str | None
    expanded: int

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def num_moves(self) -> int:
        return len(self.moves) if self.moves is not None else 0


class GraphSearch:
    """Runs the graph-search loop with a caller-supplied frontier.

    The frontier alone decides the search order: a ``FifoQueue`` gives
    breadth-first search, a ``LifoStack`` depth-first search and a
    ``PriorityQueue`` A*. A state is pruned only once it has been expanded,
    so the same board can be waiting in the frontier more than once.
    """

    def __init__(self) -> None:
        self.status = SearchStatus.RUNNING
        self.explored: set[Node] = set()

    def solve(self, board: Board, frontier: OrderedCollection) -> SearchResult:
        self.status = SearchStatus.RUNNING
        self.explored = set()

        root = Node.root(board)
        frontier.push(root)
        logger.debug(
            "Searching %d×%d board with %s", board.size, board.size,
            type(frontier).__name__,
        )

        while not frontier.is_empty():
            node = frontier.pop()

            if node.is_goal():
                self.status = SearchStatus.SOLVED
                moves = construct_path(root, node)
                logger.debug(
                    "Goal reached at depth %d after expanding %d states",
                    node.depth, len(self.explored),
                )
                return SearchResult(self.status, moves, len(self.explored))

            self.explored.add(node)
            for successor in node.successors():
                if successor is not None and successor not in self.explored:
                    frontier.push(successor)

        self.status = SearchStatus.UNSOLVABLE
        logger.debug("Frontier exhausted after expanding %d states", len(self.explored))
        return SearchResult(self.status, None, len(self.explored))


def construct_path(start: Node, node: Node) -> str:
    """Walk parent links from *node* back to *start*, collecting actions."""
    actions: list[str] = []
    current = node
    while current != start:
        actions.append(current.action.value)
        current = current.parent
    return "".join(reversed(actions))
