from backend.models.board import Board, Direction, InvalidBoardError
from backend.models.node import Node
from backend.models.puzzlefile import load_puzzle

__all__ = ["Board", "Direction", "InvalidBoardError", "Node", "load_puzzle"]
