from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_games import LoadSpec, load_games
from ..metrics.summarize import by_start, line_counts, numeric_summary, outcome_counts
from ..replay import replay_frame


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe_analysis replay",
        description="Replay scripted tic-tac-toe games from a CSV and summarize the outcomes.",
    )
    ap.add_argument("--csv", type=str, required=True, help="CSV with game_id,start,moves columns")
    ap.add_argument("--out", type=str, default=None, help="Optional path to write the per-game results CSV")
    ap.add_argument("--top", type=int, default=20, help="Rows of the per-game table to print (0 prints all)")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    csv_path = Path(args.csv)
    games = load_games(LoadSpec(csv_path=csv_path))
    results = replay_frame(games)

    print(f"\nLoaded: {csv_path}")
    print(f"Games: {len(results):,}")

    print("\n=== Games ===")
    shown = results if args.top <= 0 else results.head(args.top)
    print(shown.to_string(index=False))

    print("\n=== Outcomes ===")
    print(outcome_counts(results).to_string(index=False))

    print("\n=== By starting player ===")
    print(by_start(results).to_string(index=False))

    lines = line_counts(results)
    if not lines.empty:
        print("\n=== Winning lines ===")
        print(lines.to_string(index=False))

    desc = numeric_summary(results)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(out_path, index=False)
        print(f"\nSaved: {out_path}")

    return 0
