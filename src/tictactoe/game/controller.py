from __future__ import annotations
from typing import Optional, Tuple

from tictactoe.core.grid import Grid
from tictactoe.core.rules import GameResult, Win, evaluate, is_terminal, winning_line
from tictactoe.errors import GameOverError, OccupiedError
from tictactoe.game.players import Player, opener, setup_players
from tictactoe.game.state import AwaitingMove, Finished, GameState
from tictactoe.logging_config import get_logger
from tictactoe.ui.base import GameIO

log = get_logger(__name__)


def _turn_status(player: Player) -> str:
    return f"{player.name}'s turn ({player.marker.glyph})."


class TurnController:
    """
    Alternates the two players until the grid reports a win or a draw.

    The controller owns the grid for the whole game. Range checks belong to
    the io collaborator; the controller only handles occupied cells, by
    asking the same player again.
    """

    def __init__(self, io: GameIO, players: Tuple[Player, Player], grid: Optional[Grid] = None) -> None:
        if players[0].marker is players[1].marker:
            raise ValueError("Players must hold opposite markers.")
        self.io = io
        self.players = players
        grid = grid if grid is not None else Grid.empty()
        first = opener(players)
        self.state = GameState(
            players=players,
            phase=AwaitingMove(first),
            grid=grid,
            last_status=f"{first.name} starts.",
            moves_played=sum(1 for c in grid.cells if c is not None),
        )

        # A grid handed in already decided never asks for a move.
        result = evaluate(grid)
        if is_terminal(result):
            self.state.phase = Finished(result)
            self.state.last_status = self._final_status(result)

    @property
    def grid(self) -> Grid:
        return self.state.grid

    def other(self, player: Player) -> Player:
        return self.players[1] if player == self.players[0] else self.players[0]

    def name_of(self, result: GameResult) -> Optional[str]:
        if isinstance(result, Win):
            for p in self.players:
                if p.marker is result.marker:
                    return p.name
        return None

    def _final_status(self, result: GameResult) -> str:
        if isinstance(result, Win):
            return f"{self.name_of(result)} wins!"
        return "Draw game."

    def step(self) -> None:
        """Play one turn: prompt until a placement succeeds, then evaluate."""
        phase = self.state.phase
        if isinstance(phase, Finished):
            raise GameOverError("The game is over; no further moves are accepted.")

        player = phase.player
        while True:
            row = self.io.request_cell_choice(player.name, "row")
            col = self.io.request_cell_choice(player.name, "col")
            try:
                self.grid.place(row, col, player.marker)
                break
            except OccupiedError as e:
                log.info("%s tried occupied cell (%d, %d)", player.name, row, col)
                self.io.notify(str(e))

        self.state.moves_played += 1
        result = evaluate(self.grid)
        highlight = None

        if not is_terminal(result):
            nxt = self.other(player)
            self.state.phase = AwaitingMove(nxt)
            self.state.last_status = f"{player.name} played ({row}, {col}) | Next: {_turn_status(nxt)}"
        else:
            self.state.phase = Finished(result)
            if isinstance(result, Win):
                w = winning_line(self.grid)
                highlight = w[1] if w else None
            self.state.last_status = self._final_status(result)
            log.info("game finished after %d moves: %s", self.state.moves_played, self.state.last_status)

        log.debug("phase -> %s", self.state.phase)
        self.io.render(self.grid, self.state.last_status, highlight=highlight)

    def run(self) -> GameResult:
        self.io.render(self.grid, self.state.last_status)

        while not self.state.finished:
            self.step()

        result = self.state.phase.result  # type: ignore[union-attr]
        self.io.announce(result, self.name_of(result))
        return result


def run_game(io: GameIO) -> GameResult:
    players = setup_players(io)
    return TurnController(io, players).run()


