from __future__ import annotations
from typing import Iterable, List, Optional, Set

from tictactoe.config import CLEAR_SCREEN, SIZE, USE_COLOR
from tictactoe.core.grid import Grid
from tictactoe.types import Cell, Marker
from tictactoe.ui.colors import c, BOLD, FG_CYAN, FG_RED, FG_YELLOW, REVERSE

SEPARATOR = "-" * (4 * SIZE - 1)


def _piece(cell: Cell, color: bool) -> str:
    if cell is None:
        return " "
    code = FG_YELLOW if cell is Marker.CIRCLE else FG_RED
    return c(cell.glyph, code, color)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def format_grid(grid: Grid, highlight: Optional[Iterable[int]] = None, color: bool = USE_COLOR) -> List[str]:
    """
    Lay the grid out as text rows:

         o | x |
        -----------
           | o |
    """
    hl: Set[int] = set(highlight) if highlight else set()
    lines: List[str] = []

    for r, row in enumerate(grid.rows()):
        parts = []
        for col, cell in enumerate(row):
            p = _piece(cell, color)
            if r * SIZE + col in hl:
                p = c(p, REVERSE, color)
            parts.append(p)
        lines.append(" " + " | ".join(parts))
        if r < SIZE - 1:
            lines.append(SEPARATOR)

    return lines


def render(grid: Grid, status: str = "", highlight: Optional[Iterable[int]] = None, color: bool = USE_COLOR) -> None:
    clear_screen()

    print(c("TIC-TAC-TOE", BOLD, color))
    print(c(status, FG_CYAN, color) if status else "")
    print()
    for line in format_grid(grid, highlight, color):
        print(line)
    print()
