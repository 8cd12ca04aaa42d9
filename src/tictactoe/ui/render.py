from __future__ import annotations
from typing import Iterable, Optional, Set

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.types import Cell, CellIndex, Symbol
from tictactoe.ui.colors import c, HEADER, DIM, FG_CYAN, FG_RED, FG_YELLOW, REVERSE


def _piece(cell: Cell) -> str:
    if cell is None:
        return " "
    if cell is Symbol.X:
        return c("X", FG_RED)
    return c("O", FG_YELLOW)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render_text(board: Board, highlight: Optional[Iterable[CellIndex]] = None) -> str:
    """
    Styled version of Board.as_text(): same layout, colored pieces,
    highlighted cells shown in reverse video.
    """
    hl: Set[CellIndex] = set(highlight) if highlight else set()
    deco = c(config.VERTICAL_DECO, DIM)

    cells = board.cells()
    lines = [deco]
    for row in range(config.WIDTH):
        parts = [c(f"{row}|", DIM)]
        for column in range(config.WIDTH):
            idx = CellIndex(column, row)
            p = _piece(cells[column + config.WIDTH * row])
            if idx in hl:
                p = c(p, REVERSE)
            parts.append(p + c("|", DIM))
        parts.append(c(str(row), DIM))
        lines.append("".join(parts))
    lines.append(deco)
    return "\n".join(lines) + "\n"


def render(board: Board, status: str = "", highlight: Optional[Iterable[CellIndex]] = None) -> None:
    clear_screen()

    print(render_text(board, highlight), end="")
    if status:
        print(c(status, FG_CYAN))


def banner(text: str) -> None:
    print(c(text, HEADER))
