from .types import CellIndex, Symbol
from .core.board import Board
from .game.results import Continue, Draw, InvalidMove, TurnResult, Winner

__all__ = [
    "Board",
    "CellIndex",
    "Continue",
    "Draw",
    "InvalidMove",
    "Symbol",
    "TurnResult",
    "Winner",
]
