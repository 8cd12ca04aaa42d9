from __future__ import annotations

import sys

from .cli.make_figures import main as figures_main
from .cli.replay_csv import main as replay_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # Minimal subcommand router
    cmd = argv[0].lower() if argv else ""
    rest = argv[1:]

    if cmd in {"replay", "analyze"}:
        return replay_main(rest)

    if cmd in {"figures", "plots", "make-figures", "make_figures"}:
        return figures_main(rest)

    # Bare flags are treated as replay
    if cmd.startswith("-"):
        return replay_main(argv)

    print("Usage:")
    print("  python -m tictactoe_analysis replay --csv games.csv [--out results.csv]")
    print("  python -m tictactoe_analysis figures --csv games.csv [--figures-dir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
