from __future__ import annotations
from typing import Optional

from tictactoe.config import EXIT, WIDTH
from tictactoe.types import CellIndex, Symbol


def _clean(raw: str) -> str:
    return raw.strip().lower()


def is_exit(raw: str) -> bool:
    return _clean(raw) == EXIT


def parse_index(tok: str) -> Optional[int]:
    """
    Unsigned integer token such as "2" or "+2", ASCII digits only.
    Returns None for anything else, negatives included.
    """
    digits = tok[1:] if tok.startswith("+") else tok
    if not (digits.isascii() and digits.isdecimal()):
        return None
    return int(digits)


def parse_starting_player(raw: str) -> Optional[Symbol]:
    """
    Returns the chosen symbol, or None when the user typed the exit keyword.
    """
    if is_exit(raw):
        return None
    s = _clean(raw)
    if s == "x":
        return Symbol.X
    if s == "o":
        return Symbol.O
    raise ValueError(f'I couldn\'t understand that. Type "{EXIT}" to quit.')


def parse_move(raw: str) -> Optional[CellIndex]:
    """
    Parse a "COLUMN ROW" move. Returns None for the exit keyword.

    Tokens that are not integers are skipped; the move needs exactly two
    integers, each inside the board.
    """
    if is_exit(raw):
        return None

    nums = [n for n in (parse_index(tok) for tok in _clean(raw).split()) if n is not None]
    if len(nums) != 2:
        raise ValueError("Invalid input format!\nPlease try again.")

    column, row = nums
    if column >= WIDTH or row >= WIDTH:
        raise ValueError(f"Column and row must be between 0 and {WIDTH - 1}.")
    return CellIndex(column, row)


def parse_play_again(raw: str) -> bool:
    s = _clean(raw)
    if s == "y":
        return True
    if s == "n":
        return False
    raise ValueError("Invalid input format, please try again.")
