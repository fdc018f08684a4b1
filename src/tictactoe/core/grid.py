
# src/tictactoe/core/grid.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from tictactoe.config import SIZE, CELL_COUNT
from tictactoe.errors import OccupiedError
from tictactoe.logging_config import get_logger
from tictactoe.types import Cell, Coord, Marker

log = get_logger(__name__)


def index_of(row: int, col: int) -> int:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Position ({row}, {col}) is off the grid.")
    return row * SIZE + col


def coord_of(index: int) -> Coord:
    if not (0 <= index < CELL_COUNT):
        raise ValueError(f"Cell index {index} is off the grid.")
    return divmod(index, SIZE)


@dataclass(slots=True)
class Grid:
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [None] * CELL_COUNT
        if len(self.cells) != CELL_COUNT:
            raise ValueError(f"A grid holds exactly {CELL_COUNT} cells, got {len(self.cells)}.")

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[index_of(row, col)]

    def rows(self) -> List[List[Cell]]:
        return [self.cells[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)]

    def empty_cells(self) -> List[Coord]:
        return [coord_of(i) for i, c in enumerate(self.cells) if c is None]

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)

    def place(self, row: int, col: int, marker: Marker) -> None:
        """
        Put a marker on an unplayed cell.

        Raises OccupiedError (grid unchanged) if the cell already holds a marker.
        Coordinates outside 0..2 raise ValueError: the input layer never produces them.
        """
        i = index_of(row, col)
        occupant = self.cells[i]
        if occupant is not None:
            raise OccupiedError(row, col, occupant)

        self.cells[i] = marker
        log.debug("placed %s at (%d, %d)", marker.glyph, row, col)
