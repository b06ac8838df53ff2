from __future__ import annotations
from typing import Collection, Optional

from connectfour.errors import ColumnFullError
from connectfour.types import Move

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def parse_move(raw: str, cols: int, open_cols: Optional[Collection[int]] = None) -> Optional[Move]:
    """
    Turn 1-based column input into a Move; None means the player quit.

    With open_cols, a column that is not open is refused here, before the
    move reaches the game, the way a full column's button is disabled.
    """
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        return None

    try:
        col = int(s) - 1
    except ValueError:
        raise ValueError("Invalid input. Enter a column number or q.") from None

    if not 0 <= col < cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    if open_cols is not None and col not in open_cols:
        raise ColumnFullError(col)
    return Move(col)
