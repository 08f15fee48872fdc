from backend.engine.frontier.collection import (
    ContractViolation,
    FifoQueue,
    LifoStack,
    OrderedCollection,
)
from backend.engine.frontier.priority_queue import PriorityQueue

__all__ = [
    "ContractViolation",
    "FifoQueue",
    "LifoStack",
    "OrderedCollection",
    "PriorityQueue",
]
