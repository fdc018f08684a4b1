from __future__ import annotations
from typing import Callable, Iterable, Optional

from tictactoe.config import USE_COLOR
from tictactoe.core.grid import Grid
from tictactoe.core.rules import GameResult, Win
from tictactoe.types import Marker
from tictactoe.ui import render as screen
from tictactoe.ui.colors import c, BOLD
from tictactoe.ui.prompts import parse_cell_choice, parse_marker_choice, parse_name


class ConsoleIO:
    """Terminal front end: reads answers with input() and draws with print()."""

    def __init__(self, read: Optional[Callable[[str], str]] = None, color: bool = USE_COLOR) -> None:
        self.read = read if read is not None else input
        self.color = color

    def request_player_name(self, player_number: int) -> str:
        return parse_name(self.read(f"Player {player_number}, enter your name: "), player_number)

    def request_marker_choice(self, player_name: str) -> Marker:
        while True:
            raw = self.read(f"{player_name}, choose a marker, 0 -> Circle, 1 -> Cross: ")
            try:
                return parse_marker_choice(raw)
            except ValueError as e:
                print(e)

    def request_cell_choice(self, player_name: str, axis_label: str) -> int:
        while True:
            raw = self.read(f"{player_name}, choose a {axis_label} to play (0, 1 or 2): ")
            try:
                return parse_cell_choice(raw)
            except ValueError as e:
                print(e)

    def notify(self, message: str) -> None:
        print(message)

    def render(self, grid: Grid, status: str = "", highlight: Optional[Iterable[int]] = None) -> None:
        screen.render(grid, status, highlight=highlight, color=self.color)

    def announce(self, result: GameResult, winner_name: Optional[str]) -> None:
        if isinstance(result, Win):
            name = winner_name or f"Player {result.marker.glyph}"
            print(c(f"{name} wins!", BOLD, self.color))
        else:
            print(c("Draw game.", BOLD, self.color))
