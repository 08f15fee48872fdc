from backend.engine.heuristics.heuristic import Heuristic, Manhattan, Misplaced

__all__ = ["Heuristic", "Manhattan", "Misplaced"]
