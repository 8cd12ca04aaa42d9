from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional, Tuple

from tictactoe.config import WIDTH
from tictactoe.types import CellIndex, Symbol

if TYPE_CHECKING:
    from tictactoe.core.board import Board

Line = List[CellIndex]

ROWS: List[Line] = [[CellIndex(c, r) for c in range(WIDTH)] for r in range(WIDTH)]
COLUMNS: List[Line] = [[CellIndex(c, r) for r in range(WIDTH)] for c in range(WIDTH)]
MAIN_DIAGONAL: Line = [CellIndex(i, i) for i in range(WIDTH)]
ANTI_DIAGONAL: Line = [CellIndex(WIDTH - 1 - i, i) for i in range(WIDTH)]
CENTER = CellIndex(1, 1)


def _line_owner(board: Board, line: Line) -> Optional[Symbol]:
    a, b, c = (board.get(i) for i in line)
    if a is not None and a == b == c:
        return a
    return None


def check_winner_with_line(board: Board) -> Optional[Tuple[Symbol, Line]]:
    for line in ROWS + COLUMNS:
        p = _line_owner(board, line)
        if p is not None:
            return p, line

    # Every diagonal runs through the center
    if board.get(CENTER) is None:
        return None

    for line in (MAIN_DIAGONAL, ANTI_DIAGONAL):
        p = _line_owner(board, line)
        if p is not None:
            return p, line

    return None


def check_winner(board: Board) -> Optional[Symbol]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def line_kind(line: Line) -> str:
    if line in ROWS:
        return "row"
    if line in COLUMNS:
        return "column"
    return "diagonal"


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
