from __future__ import annotations
from typing import Iterable, Optional, Protocol

from tictactoe.core.grid import Grid
from tictactoe.core.rules import GameResult
from tictactoe.types import Marker


class GameIO(Protocol):
    """
    Everything the game needs from the outside world.

    Request methods block until they have a valid answer; malformed input is
    handled (and re-prompted) on this side, never by the engine.
    """

    def request_player_name(self, player_number: int) -> str:
        ...

    def request_marker_choice(self, player_name: str) -> Marker:
        ...

    def request_cell_choice(self, player_name: str, axis_label: str) -> int:
        ...

    def notify(self, message: str) -> None:
        ...

    def render(self, grid: Grid, status: str = "", highlight: Optional[Iterable[int]] = None) -> None:
        ...

    def announce(self, result: GameResult, winner_name: Optional[str]) -> None:
        ...
