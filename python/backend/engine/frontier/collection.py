"""Ordered collections of nodes that decide the order of expansion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque

from backend.models.node import Node


class ContractViolation(RuntimeError):
    """A frontier was used against its preconditions (a programming error)."""


class OrderedCollection(ABC):
    """The frontier of a graph search.

    Which node ``pop`` returns is what distinguishes breadth-first,
    depth-first and best-first search; the search loop itself never changes.
    """

    @abstractmethod
    def push(self, node: Node) -> None: ...

    @abstractmethod
    def pop(self) -> Node:
        """Remove and return the next node. Raises ``ContractViolation`` if empty."""

    @abstractmethod
    def __len__(self) -> int: ...

    def is_empty(self) -> bool:
        return len(self) == 0


class FifoQueue(OrderedCollection):
    """First in, first out: breadth-first order."""

    def __init__(self) -> None:
        self._queue: deque[Node] = deque()

    def push(self, node: Node) -> None:
        self._queue.append(node)

    def pop(self) -> Node:
        if not self._queue:
            raise ContractViolation("pop from an empty queue")
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class LifoStack(OrderedCollection):
    """Last in, first out: depth-first order."""

    def __init__(self) -> None:
        self._stack: list[Node] = []

    def push(self, node: Node) -> None:
        self._stack.append(node)

    def pop(self) -> Node:
        if not self._stack:
            raise ContractViolation("pop from an empty stack")
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)
