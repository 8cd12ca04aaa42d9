from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, Union

from tictactoe.types import Symbol


@dataclass(frozen=True, slots=True)
class Continue:
    """Move accepted, turn passed to the other player."""
    is_terminal: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Draw:
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Winner:
    symbol: Symbol
    is_terminal: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class InvalidMove:
    """Cell already occupied. Nothing changed; same player moves again."""
    is_terminal: ClassVar[bool] = False


TurnResult = Union[Continue, Draw, Winner, InvalidMove]
