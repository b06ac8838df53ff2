# src/connectfour/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# quiet by default so log lines don't scroll the board away
LOG_LEVEL = "WARNING"
