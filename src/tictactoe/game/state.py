from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple, Union

from tictactoe.core.grid import Grid
from tictactoe.core.rules import GameResult
from tictactoe.game.players import Player


@dataclass(frozen=True, slots=True)
class AwaitingMove:
    player: Player


@dataclass(frozen=True, slots=True)
class Finished:
    result: GameResult


Phase = Union[AwaitingMove, Finished]


@dataclass(slots=True)
class GameState:
    players: Tuple[Player, Player]
    phase: Phase
    grid: Grid = field(default_factory=Grid.empty)
    last_status: str = ""
    moves_played: int = 0

    @property
    def finished(self) -> bool:
        return isinstance(self.phase, Finished)
