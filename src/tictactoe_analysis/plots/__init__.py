from .chart import (
    plot_game_length,
    plot_outcomes,
)

__all__ = [
    "plot_game_length",
    "plot_outcomes",
]
