from __future__ import annotations

from tictactoe.game.controller import run_session


def main() -> None:
    try:
        run_session()
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
