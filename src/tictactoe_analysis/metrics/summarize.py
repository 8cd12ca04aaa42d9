from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def outcome_counts(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per outcome label: "X wins", "O wins", "draw", "unfinished".
    """
    _require_cols(df, ["result", "winner"])

    labels = df.apply(
        lambda r: f"{r['winner']} wins" if r["result"] == "winner" else r["result"],
        axis=1,
    ) if not df.empty else pd.Series(dtype=str)

    counts = labels.value_counts().rename_axis("outcome").reset_index(name="games")
    counts = counts.sort_values(["games", "outcome"], ascending=[False, True])
    return counts.reset_index(drop=True)


def by_start(df: pd.DataFrame) -> pd.DataFrame:
    """Win/draw counts split by starting symbol."""
    _require_cols(df, ["start", "result", "winner"])

    out = df.assign(
        starter_won=(df["result"] == "winner") & (df["winner"] == df["start"]),
        other_won=(df["result"] == "winner") & (df["winner"] != df["start"]),
        drew=df["result"] == "draw",
    )
    grouped = out.groupby("start", sort=True)[["starter_won", "other_won", "drew"]].sum()
    grouped.insert(0, "games", out.groupby("start", sort=True).size())
    return grouped.astype(int).reset_index()


def line_counts(df: pd.DataFrame) -> pd.DataFrame:
    _require_cols(df, ["result", "line"])
    wins = df[df["result"] == "winner"]
    counts = wins["line"].value_counts().rename_axis("line").reset_index(name="wins")
    return counts.sort_values(["wins", "line"], ascending=[False, True]).reset_index(drop=True)


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe().T
