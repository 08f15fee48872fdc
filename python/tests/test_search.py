"""GraphSearch tests — the search loop, path reconstruction and outcomes."""

from __future__ import annotations

import pytest

from backend.engine.frontier import FifoQueue, LifoStack, PriorityQueue
from backend.engine.gamesolver import GraphSearch, SearchStatus, construct_path
from backend.engine.heuristics import Manhattan, Misplaced
from backend.models.board import Board, Direction
from backend.models.node import Node
from helpers import GOAL_2x2, GOAL_3x3, random_walk, replays_to_goal, swapped

ALL_FRONTIERS = {
    "bfs": FifoQueue,
    "dfs": LifoStack,
    "astar-misplaced": lambda: PriorityQueue(Misplaced()),
    "astar-manhattan": lambda: PriorityQueue(Manhattan()),
}
# Depth-first search wanders through most of the 3x3 state space, so it is
# only run on 2x2 boards here.
OPTIMAL_FRONTIERS = {k: v for k, v in ALL_FRONTIERS.items() if k != "dfs"}


# -- end-to-end scenarios -----------------------------------------------------


@pytest.mark.parametrize("factory", ALL_FRONTIERS.values(), ids=ALL_FRONTIERS.keys())
def test_goal_board_needs_no_moves(factory) -> None:
    search = GraphSearch()
    result = search.solve(GOAL_3x3, factory())
    assert result.status is SearchStatus.SOLVED
    assert result.moves == ""
    assert result.num_moves == 0
    assert result.expanded == 0


@pytest.mark.parametrize("factory", OPTIMAL_FRONTIERS.values(), ids=OPTIMAL_FRONTIERS.keys())
def test_one_move_from_goal(factory) -> None:
    board = Board.from_rows([[1, 2, 3], [4, 5, 0], [7, 8, 6]])
    result = GraphSearch().solve(board, factory())
    assert result.solved
    assert result.moves == "D"


@pytest.mark.parametrize("factory", ALL_FRONTIERS.values(), ids=ALL_FRONTIERS.keys())
@pytest.mark.parametrize("tiles", [(1, 2), (1, 3), (2, 3)])
def test_transposed_tiles_are_unsolvable(factory, tiles) -> None:
    board = swapped(GOAL_2x2, *tiles)
    search = GraphSearch()
    result = search.solve(board, factory())

    assert result.status is SearchStatus.UNSOLVABLE
    assert search.status is SearchStatus.UNSOLVABLE
    assert result.moves is None
    assert not result.solved
    # a 2x2 board reaches exactly half of the 4! arrangements
    assert result.expanded == 12


@pytest.mark.slow
@pytest.mark.timeout(300)
def test_transposed_3x3_exhausts_half_the_state_space() -> None:
    board = swapped(GOAL_3x3, 7, 8)
    result = GraphSearch().solve(board, FifoQueue())

    assert result.status is SearchStatus.UNSOLVABLE
    # 9! / 2 arrangements share the start board's parity
    assert result.expanded == 181440


@pytest.mark.parametrize("factory", ALL_FRONTIERS.values(), ids=ALL_FRONTIERS.keys())
def test_board_built_from_lists_is_searchable(factory) -> None:
    board = Board([[1, 2], [0, 3]])
    result = GraphSearch().solve(board, factory())
    assert result.solved
    assert replays_to_goal(board, result.moves)


@pytest.mark.parametrize("factory", ALL_FRONTIERS.values(), ids=ALL_FRONTIERS.keys())
@pytest.mark.parametrize("seed", range(4))
def test_every_frontier_solves_2x2(factory, seed: int) -> None:
    board = random_walk(2, 7, seed)
    result = GraphSearch().solve(board, factory())
    assert result.solved
    assert replays_to_goal(board, result.moves)


# -- optimality ---------------------------------------------------------------


@pytest.mark.parametrize("seed", range(6))
@pytest.mark.parametrize("length", [4, 8, 12])
def test_astar_matches_bfs_length(length: int, seed: int) -> None:
    board = random_walk(3, length, seed)

    bfs = GraphSearch().solve(board, FifoQueue())
    misplaced = GraphSearch().solve(board, PriorityQueue(Misplaced()))
    manhattan = GraphSearch().solve(board, PriorityQueue(Manhattan()))

    assert bfs.solved and misplaced.solved and manhattan.solved
    assert bfs.num_moves <= length
    assert misplaced.num_moves == bfs.num_moves
    assert manhattan.num_moves == bfs.num_moves
    for result in (bfs, misplaced, manhattan):
        assert replays_to_goal(board, result.moves)


@pytest.mark.parametrize(
    ("rows", "expected"),
    [
        ([[1, 2, 3], [4, 5, 6], [0, 7, 8]], "RR"),
        ([[1, 2, 3], [4, 0, 6], [7, 5, 8]], "DR"),
        ([[1, 2, 3], [0, 4, 6], [7, 5, 8]], "RDR"),
    ],
)
def test_known_short_solutions(rows, expected: str) -> None:
    board = Board.from_rows(rows)
    for factory in OPTIMAL_FRONTIERS.values():
        assert GraphSearch().solve(board, factory()).moves == expected


def test_hardest_8_puzzle_needs_31_moves() -> None:
    board = Board.from_rows([[8, 6, 7], [2, 5, 4], [3, 0, 1]])
    result = GraphSearch().solve(board, PriorityQueue(Manhattan()))
    assert result.solved
    assert result.num_moves == 31
    assert replays_to_goal(board, result.moves)


def test_15_puzzle() -> None:
    board = random_walk(4, 14, seed=3)
    result = GraphSearch().solve(board, PriorityQueue(Manhattan()))
    assert result.solved
    assert result.num_moves <= 14
    assert replays_to_goal(board, result.moves)


# -- bookkeeping --------------------------------------------------------------


def test_expanded_counts_explored_states() -> None:
    board = random_walk(3, 6, seed=1)
    search = GraphSearch()
    assert search.status is SearchStatus.RUNNING

    result = search.solve(board, FifoQueue())
    assert search.status is SearchStatus.SOLVED
    assert result.expanded == len(search.explored)
    assert Node.root(board) in search.explored


def test_search_object_is_reusable() -> None:
    search = GraphSearch()
    first = search.solve(swapped(GOAL_2x2, 1, 2), FifoQueue())
    second = search.solve(GOAL_2x2, FifoQueue())
    assert first.status is SearchStatus.UNSOLVABLE
    assert second.status is SearchStatus.SOLVED
    assert second.expanded == 0


def test_construct_path_walks_parents() -> None:
    root = Node.root(Board.from_rows([[1, 2, 3], [0, 4, 6], [7, 5, 8]]))
    node = root
    for d in "RDR":
        node = Node.child(node, Direction(d))
    assert construct_path(root, node) == "RDR"
    assert len(construct_path(root, node)) == node.depth
    assert construct_path(root, root) == ""
