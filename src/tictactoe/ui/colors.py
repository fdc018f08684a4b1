from __future__ import annotations
from tictactoe.config import USE_COLOR

RESET = "\033[0m"
BOLD = "\033[1m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"


def c(s: str, code: str, enabled: bool = USE_COLOR) -> str:
    if not enabled:
        return s
    return f"{code}{s}{RESET}"
