"""Binary min-heap of nodes ranked by a heuristic."""

from __future__ import annotations

from typing import NamedTuple

from backend.engine.frontier.collection import ContractViolation, OrderedCollection
from backend.engine.heuristics import Heuristic
from backend.models.node import Node


class _Entry(NamedTuple):
    priority: int
    node: Node


class PriorityQueue(OrderedCollection):
    """A minimum priority queue; lower heuristic values are popped first.

    The heap lives in a flat list (root at 0, children of ``i`` at ``2i+1``
    and ``2i+2``). Alongside it ``_location`` maps every queued node to its
    current slot and is updated on every swap.

    The search only prunes explored states, so two distinct node objects
    carrying the same board may be queued at once. ``_location`` is therefore
    keyed by node identity; pushing the *same* node object twice is a
    contract violation.

    A priority is computed once, when the node is pushed, and never updated.
    Equal priorities are ordered by heap structure, not insertion order.
    """

    def __init__(self, heuristic: Heuristic) -> None:
        self._heuristic = heuristic
        self._heap: list[_Entry] = []
        self._location: dict[int, int] = {}

    def push(self, node: Node) -> None:
        if id(node) in self._location:
            raise ContractViolation(f"node already queued: {node!r}")

        priority = self._heuristic.evaluate(node)

        # add the new entry as the last leaf, then restore heap order
        self._heap.append(_Entry(priority, node))
        self._location[id(node)] = len(self._heap) - 1
        self._percolate_up(len(self._heap) - 1)

    def pop(self) -> Node:
        if not self._heap:
            raise ContractViolation("pop from an empty priority queue")

        root = self._heap[0]
        del self._location[id(root.node)]

        # move the last leaf to the root, then push it down
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._location[id(last.node)] = 0
            self._push_down(0)

        return root.node

    def __len__(self) -> int:
        return len(self._heap)

    # -- inspection -----------------------------------------------------------

    def index_of(self, node: Node) -> int | None:
        """Current heap slot of *node*, or ``None`` if it is not queued."""
        return self._location.get(id(node))

    def priorities(self) -> list[int]:
        """Priorities in heap-array order."""
        return [entry.priority for entry in self._heap]

    # -- heap maintenance -----------------------------------------------------

    def _percolate_up(self, start: int) -> int:
        curr = start
        parent = _parent(curr)
        while curr > 0 and self._heap[curr].priority < self._heap[parent].priority:
            self._swap(curr, parent)
            curr = parent
            parent = _parent(curr)
        return curr

    def _push_down(self, start: int) -> int:
        heap = self._heap
        curr = start
        left, right = _left(curr), _right(curr)

        while right < len(heap):
            smaller = left if heap[left].priority < heap[right].priority else right
            if heap[curr].priority <= heap[smaller].priority:
                break
            self._swap(curr, smaller)
            curr = smaller
            left, right = _left(curr), _right(curr)

        # a node with a single (left) child only occurs just above the last leaf
        if left < len(heap) and heap[left].priority < heap[curr].priority:
            self._swap(curr, left)
            curr = left
        return curr

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._location[id(heap[i].node)] = i
        self._location[id(heap[j].node)] = j


def _left(i: int) -> int:
    return 2 * i + 1


def _right(i: int) -> int:
    return 2 * i + 2


def _parent(i: int) -> int:
    return (i - 1) // 2
