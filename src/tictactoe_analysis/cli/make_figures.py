# src/tictactoe_analysis/cli/make_figures.py
from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_games import LoadSpec, load_games
from ..metrics.summarize import outcome_counts
from ..plots.chart import plot_game_length, plot_outcomes
from ..replay import replay_frame


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="tictactoe_analysis figures",
        description="Replay scripted games from a CSV and chart the outcomes.",
    )
    ap.add_argument("--csv", type=str, required=True, help="CSV with game_id,start,moves columns")
    ap.add_argument("--figures-dir", type=str, default="figures", help="Directory for saved PNGs")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-length", action="store_true", help="Skip the game length histogram")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    results = replay_frame(load_games(LoadSpec(csv_path=Path(args.csv))))
    outdir = Path(args.figures_dir)

    saved = [plot_outcomes(outcome_counts(results), outdir, show=args.show)]
    if not args.no_length:
        saved.append(plot_game_length(results, outdir, show=args.show))

    for path in saved:
        if path is not None:
            print(f"Saved: {path}")

    return 0
