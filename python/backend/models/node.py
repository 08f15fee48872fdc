"""Search-tree node wrapping a board snapshot."""

from __future__ import annotations

from backend.models.board import Board, Direction

# Successor slots are always produced in this order.
SUCCESSOR_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class Node:
    """A board plus the path information that led to it.

    Nodes link to their parent only, so the search tree is walked upwards
    from a goal node to rebuild the move sequence. Equality and hashing
    delegate to the board: two nodes reaching the same configuration via
    different move orders are the same state.
    """

    __slots__ = ("_board", "_parent", "_action", "_depth")

    def __init__(
        self,
        board: Board,
        parent: Node | None = None,
        action: Direction | None = None,
    ) -> None:
        self._board = board
        self._parent = parent
        self._action = action
        self._depth = 0 if parent is None else parent.depth + 1

    # -- construction helpers -------------------------------------------------

    @classmethod
    def root(cls, board: Board) -> Node:
        return cls(board)

    @classmethod
    def child(cls, parent: Node, direction: Direction) -> Node | None:
        """Return the node reached by moving the gap, or ``None`` if illegal."""
        board = parent.board.apply_move(direction)
        if board is None:
            return None
        return cls(board, parent, direction)

    # -- accessors ------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self._board

    @property
    def parent(self) -> Node | None:
        return self._parent

    @property
    def action(self) -> Direction | None:
        return self._action

    @property
    def depth(self) -> int:
        return self._depth

    def is_goal(self) -> bool:
        return self._board.is_solved()

    def successors(self) -> tuple[Node | None, ...]:
        """Return four slots (up, down, left, right); ``None`` marks an illegal move."""
        return tuple(Node.child(self, d) for d in SUCCESSOR_ORDER)

    # -- identity -------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self._board == other._board

    def __hash__(self) -> int:
        return hash(self._board)

    def __repr__(self) -> str:
        return (
            f"Node(depth={self._depth}, action={self._action!s}, "
            f"tiles={self._board.tiles})"
        )
