from backend.engine.gamesolver.search import (
    GraphSearch,
    SearchResult,
    SearchStatus,
    construct_path,
)
from backend.engine.gamesolver.solver import Solver, Strategy

__all__ = [
    "GraphSearch",
    "SearchResult",
    "SearchStatus",
    "Solver",
    "Strategy",
    "construct_path",
]
