from __future__ import annotations
from connectfour import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"  # swaps fg/bg; good generic highlight

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GREEN = "\033[32m"
FG_GRAY = "\033[90m"


def c(s: str, *codes: str) -> str:
    if not config.USE_COLOR or not codes:
        return s
    return f"{''.join(codes)}{s}{RESET}"
