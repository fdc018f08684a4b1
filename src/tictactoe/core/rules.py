from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from tictactoe.core.grid import Grid
from tictactoe.types import Line, Marker

# Scan order matters: rows top-to-bottom, columns left-to-right, then diagonals.
ROWS: Tuple[Line, ...] = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
COLUMNS: Tuple[Line, ...] = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
DIAGONALS: Tuple[Line, ...] = ((0, 4, 8), (2, 4, 6))
LINES: Tuple[Line, ...] = ROWS + COLUMNS + DIAGONALS


@dataclass(frozen=True, slots=True)
class InProgress:
    pass


@dataclass(frozen=True, slots=True)
class Win:
    marker: Marker


@dataclass(frozen=True, slots=True)
class Draw:
    pass


GameResult = Union[InProgress, Win, Draw]


def winning_line(grid: Grid) -> Optional[Tuple[Marker, Line]]:
    c = grid.cells
    for line in LINES:
        a, b, d = line
        m = c[a]
        if m is not None and m == c[b] == c[d]:
            return m, line
    return None


def evaluate(grid: Grid) -> GameResult:
    """
    Derive the game result from scratch.

    Returns Win for the first line (in LINES order) held entirely by one
    marker, Draw when no line wins and every cell is occupied, and
    InProgress otherwise.
    """
    w = winning_line(grid)
    if w is not None:
        return Win(w[0])
    if grid.is_full():
        return Draw()
    return InProgress()


def is_terminal(result: GameResult) -> bool:
    return not isinstance(result, InProgress)
