from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def plot_outcomes(counts: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if counts.empty or "outcome" not in counts.columns:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    plt.bar(counts["outcome"].astype(str), counts["games"].astype(int))
    plt.title("Outcomes")
    plt.xlabel("outcome")
    plt.ylabel("games")

    if show:
        plt.show()
        return None

    path = outdir / "outcomes.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_game_length(df: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    if df.empty or "moves_played" not in df.columns:
        return None

    if not show:
        _ensure_dir(outdir)

    fig = plt.figure()
    # Games last between 1 and 9 accepted moves
    plt.hist(df["moves_played"].astype(int), bins=range(1, 11), align="left", rwidth=0.8)
    plt.title("Accepted moves per game")
    plt.xlabel("moves")
    plt.ylabel("games")

    if show:
        plt.show()
        return None

    path = outdir / "game_length.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
