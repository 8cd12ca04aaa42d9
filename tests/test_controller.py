"""
Tests for the interactive terminal session, driven with scripted input.
"""

from __future__ import annotations

from tictactoe.game import controller
from tictactoe.main import main
from tictactoe.types import Symbol


class TestRunGame:
    def test_win(self, scripted_input, capsys):
        scripted_input(["0 0", "0 1", "1 1", "0 2", "2 2"])

        assert controller.run_game(Symbol.X) is False

        out = capsys.readouterr().out
        assert "Player X won!" in out
        assert "Player O it's your turn." in out

    def test_draw(self, scripted_input, capsys):
        scripted_input(["0 0", "1 0", "2 0", "1 1", "0 1", "2 1", "1 2", "0 2", "2 2"])

        assert controller.run_game(Symbol.X) is False
        assert "It's a draw!" in capsys.readouterr().out

    def test_occupied_reprompts_same_player(self, scripted_input, capsys):
        scripted_input(["1 1", "1 1", "exit"])

        assert controller.run_game(Symbol.X) is True

        out = capsys.readouterr().out
        assert "Space already occupied. Please try again." in out
        # O was asked twice: after X's move and after the rejection
        assert out.count("Player O it's your turn.") == 2

    def test_bad_input_messages(self, scripted_input, capsys):
        scripted_input(["hello", "5 5", "exit"])

        assert controller.run_game(Symbol.O) is True

        out = capsys.readouterr().out
        assert "Invalid input format!" in out
        assert "between 0 and 2" in out
        assert out.count("Player O it's your turn.") == 3

    def test_eof_quits(self, scripted_input):
        scripted_input([])
        assert controller.run_game(Symbol.X) is True


class TestSession:
    def test_full_session(self, scripted_input, capsys):
        scripted_input([
            "q",                                        # not understood
            "o",
            "0 0", "1 0", "0 1", "1 1", "0 2",          # O wins column 0
            "maybe", "y",                              # play again
            "x",
            "exit",
        ])

        controller.run_session()

        out = capsys.readouterr().out
        assert out.startswith("Welcome to tic-tac-toe.")
        assert "I couldn't understand that." in out
        assert "Player O won!" in out
        assert "Invalid input format, please try again." in out
        assert out.count("Who will play first? Type X or O") == 3
        assert "Player X it's your turn." in out

    def test_exit_at_start(self, scripted_input, capsys):
        scripted_input(["exit"])
        controller.run_session()
        assert "it's your turn" not in capsys.readouterr().out

    def test_no_replay(self, scripted_input, capsys):
        scripted_input(["x", "0 0", "0 1", "1 0", "1 1", "2 0", "n", "x"])
        controller.run_session()

        out = capsys.readouterr().out
        assert "Player X won!" in out
        assert out.count("Who will play first?") == 1

    def test_main_entry(self, scripted_input, capsys):
        scripted_input(["exit"])
        main()
        assert "Welcome" in capsys.readouterr().out
