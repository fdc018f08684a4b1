"""Scripted stand-in for the terminal and small grid builders."""

from collections import deque
from typing import Iterable, List, Optional

from tictactoe.core.grid import Grid
from tictactoe.types import Marker

O = Marker.CIRCLE
X = Marker.CROSS


class ScriptedIO:
    """Replays queued answers and records everything the game shows."""

    def __init__(self, names=("Ada", "Bob"), marker=Marker.CIRCLE, cells: Iterable[int] = ()):
        self.names = deque(names)
        self.marker = marker
        self.cells = deque(cells)
        self.prompts: List[tuple] = []
        self.marker_requests: List[str] = []
        self.notices: List[str] = []
        self.renders: List[tuple] = []
        self.announcements: List[tuple] = []

    def queue_moves(self, *coords):
        for row, col in coords:
            self.cells.extend((row, col))

    def request_player_name(self, player_number: int) -> str:
        return self.names.popleft()

    def request_marker_choice(self, player_name: str) -> Marker:
        self.marker_requests.append(player_name)
        return self.marker

    def request_cell_choice(self, player_name: str, axis_label: str) -> int:
        self.prompts.append((player_name, axis_label))
        return self.cells.popleft()

    def notify(self, message: str) -> None:
        self.notices.append(message)

    def render(self, grid: Grid, status: str = "", highlight: Optional[Iterable[int]] = None) -> None:
        self.renders.append((list(grid.cells), status, tuple(highlight) if highlight else None))

    def announce(self, result, winner_name) -> None:
        self.announcements.append((result, winner_name))


def grid_of(*cells) -> Grid:
    return Grid(cells=list(cells))
