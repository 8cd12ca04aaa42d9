# src/tictactoe/config.py

from __future__ import annotations

WIDTH = 3
VERTICAL_DECO = "-|0|1|2|-"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = False

# Typed at any prompt to leave the session
EXIT = "exit"
