from __future__ import annotations
from typing import Optional

from tictactoe.config import EXIT
from tictactoe.core.board import Board
from tictactoe.core.rules import check_winner_with_line
from tictactoe.game.results import Continue, Draw, InvalidMove, Winner
from tictactoe.game.state import GameState
from tictactoe.types import Symbol
from tictactoe.ui.prompts import parse_move, parse_play_again, parse_starting_player
from tictactoe.ui.render import banner, render


def _read(prompt: str = "") -> Optional[str]:
    # EOF on stdin is treated like typing the exit keyword
    try:
        return input(prompt)
    except EOFError:
        return None


def select_starting_player() -> Optional[Symbol]:
    while True:
        print("Who will play first? Type X or O")
        raw = _read()
        if raw is None:
            return None
        try:
            return parse_starting_player(raw)
        except ValueError as e:
            print(e)


def _turn_prompt(player: Symbol) -> str:
    return (
        f"Player {player} it's your turn.\n"
        f"Type your move in COLUMN ROW format.\n"
        f'Type "{EXIT}" to quit'
    )


def run_game(starting: Symbol) -> bool:
    """
    Play one game from an empty board.

    Returns True when the player asked to leave mid-game, False when the
    game reached a win or a draw.
    """
    state = GameState(board=Board(starting))

    while True:
        render(state.board, state.last_status)
        print(_turn_prompt(state.board.current_player))

        raw = _read()
        if raw is None:
            return True

        try:
            move = parse_move(raw)
        except ValueError as e:
            state.last_status = str(e)
            continue

        if move is None:
            return True

        result = state.board.process_turn(move)
        match result:
            case Continue():
                state.last_status = ""
            case InvalidMove():
                state.last_status = "Space already occupied. Please try again."
            case Draw():
                render(state.board, "It's a draw!")
                return False
            case Winner(symbol=symbol):
                found = check_winner_with_line(state.board)
                state.winning_line = found[1] if found else None
                render(state.board, f"Player {symbol} won!", highlight=state.winning_line)
                return False


def ask_play_again() -> bool:
    print("Play again? Y/N")
    while True:
        raw = _read()
        if raw is None:
            return False
        try:
            return parse_play_again(raw)
        except ValueError as e:
            print(e)


def run_session() -> None:
    banner("Welcome to tic-tac-toe.")

    while True:
        starting = select_starting_player()
        if starting is None:
            return

        if run_game(starting):
            return

        if not ask_play_again():
            return
