# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple

from tictactoe.config import VERTICAL_DECO, WIDTH
from tictactoe.core.rules import check_winner
from tictactoe.game.results import Continue, Draw, InvalidMove, TurnResult, Winner
from tictactoe.types import Cell, CellIndex, Symbol


def _offset(index: CellIndex) -> int:
    column, row = index
    if not (0 <= column < WIDTH and 0 <= row < WIDTH):
        raise ValueError(f"Cell index out of range: {tuple(index)}")
    return column + WIDTH * row


@dataclass(slots=True)
class Board:
    current_player: Symbol
    _cells: List[Cell] = field(
        init=False, repr=False, default_factory=lambda: [None] * (WIDTH * WIDTH)
    )

    def get(self, index: CellIndex) -> Cell:
        return self._cells[_offset(index)]

    def cells(self) -> Tuple[Cell, ...]:
        """Row-major snapshot of all cells."""
        return tuple(self._cells)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def process_turn(self, index: CellIndex) -> TurnResult:
        """
        Place the current player's symbol at `index` and classify the result.

        An occupied cell gives InvalidMove and leaves the board untouched.
        On Winner or Draw the turn pointer stays on the player who just moved.
        """
        if not self._try_player_move(index):
            return InvalidMove()

        winner = check_winner(self)
        if winner is not None:
            return Winner(winner)

        if self.is_full():
            return Draw()

        self.current_player = self.current_player.other()
        return Continue()

    def _try_player_move(self, index: CellIndex) -> bool:
        offset = _offset(index)
        if self._cells[offset] is not None:
            return False
        self._cells[offset] = self.current_player
        return True

    def _write_row(self, out: List[str], row: int) -> None:
        parts = [f"{row}|"]
        for column in range(WIDTH):
            cell = self.get(CellIndex(column, row))
            parts.append(f"{cell if cell is not None else ' '}|")
        parts.append(f"{row}\n")
        out.append("".join(parts))

    def as_text(self) -> str:
        out = [VERTICAL_DECO + "\n"]
        for row in range(WIDTH):
            self._write_row(out, row)
        out.append(VERTICAL_DECO + "\n")
        return "".join(out)
