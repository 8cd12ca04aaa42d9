"""
Pytest fixtures for tic-tac-toe tests.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

import matplotlib

matplotlib.use("Agg")

import pytest

from tictactoe import config
from tictactoe.core.board import Board
from tictactoe.game.results import TurnResult
from tictactoe.types import CellIndex, Symbol


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    """Strip ANSI styling so printed text can be matched directly."""
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


@pytest.fixture
def board() -> Board:
    return Board(Symbol.X)


@pytest.fixture
def play() -> Callable[[Board, Iterable[tuple[int, int]]], List[TurnResult]]:
    def _play(b: Board, moves: Iterable[tuple[int, int]]) -> List[TurnResult]:
        return [b.process_turn(CellIndex(col, row)) for col, row in moves]

    return _play


@pytest.fixture
def scripted_input(monkeypatch):
    """
    Replace input() with a fixed list of lines. Running past the end
    behaves like EOF on stdin.
    """
    def _install(lines: Iterable[str]) -> None:
        it = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _install
