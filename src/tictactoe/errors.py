from __future__ import annotations

from tictactoe.types import Marker


class TicTacToeError(Exception):
    """Base class for errors raised by the game engine."""


class OccupiedError(TicTacToeError, ValueError):
    """
    Raised when a marker is placed on a cell that already holds one.
    The grid is left untouched; the controller re-prompts the same player.
    """

    def __init__(self, row: int, col: int, occupant: Marker) -> None:
        self.row = row
        self.col = col
        self.occupant = occupant
        super().__init__(f"Cell ({row}, {col}) is already taken by {occupant.glyph}, choose another cell.")


class GameOverError(TicTacToeError, RuntimeError):
    """Raised when a move is requested after the game has finished."""
