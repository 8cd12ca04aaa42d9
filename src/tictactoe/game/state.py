from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from tictactoe.core.board import Board
from tictactoe.types import CellIndex


@dataclass(slots=True)
class GameState:
    board: Board
    last_status: str = ""
    winning_line: Optional[List[CellIndex]] = None
