# src/tictactoe/types.py

from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Optional


class Symbol(Enum):
    X = "X"
    O = "O"

    def other(self) -> "Symbol":
        return Symbol.O if self is Symbol.X else Symbol.X

    def __str__(self) -> str:
        return self.value


Cell = Optional[Symbol]


class CellIndex(NamedTuple):
    column: int
    row: int
