# src/tictactoe/types.py

from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple


class Marker(Enum):
    CIRCLE = 0
    CROSS = 1

    def opponent(self) -> "Marker":
        return opponent(self)

    @property
    def glyph(self) -> str:
        return display_glyph(self)

    @property
    def label(self) -> str:
        return self.name.capitalize()


# Circle is the first enumerant and always opens the game.
FIRST_MARKER = Marker.CIRCLE

Cell = Optional[Marker]
Coord = Tuple[int, int]  # (row, col)
Line = Tuple[int, int, int]  # cell indices


def opponent(marker: Marker) -> Marker:
    if marker is Marker.CIRCLE:
        return Marker.CROSS
    if marker is Marker.CROSS:
        return Marker.CIRCLE
    raise ValueError(f"Unknown marker: {marker!r}")


def display_glyph(marker: Marker) -> str:
    if marker is Marker.CIRCLE:
        return "o"
    if marker is Marker.CROSS:
        return "x"
    raise ValueError(f"Unknown marker: {marker!r}")
