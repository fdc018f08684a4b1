from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from tictactoe.logging_config import get_logger
from tictactoe.types import Marker, FIRST_MARKER
from tictactoe.ui.base import GameIO

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Player:
    name: str
    marker: Marker


def new_player(io: GameIO, number: int, marker: Optional[Marker] = None) -> Player:
    name = io.request_player_name(number)
    if marker is None:
        marker = io.request_marker_choice(name)
    return Player(name=name, marker=marker)


def setup_players(io: GameIO) -> Tuple[Player, Player]:
    """
    Collect both players. Only the first one picks a marker; the second
    always gets the opponent's.
    """
    p1 = new_player(io, 1)
    p2 = new_player(io, 2, p1.marker.opponent())
    log.info("%s plays %s, %s plays %s", p1.name, p1.marker.label, p2.name, p2.marker.label)
    return p1, p2


def opener(players: Tuple[Player, Player]) -> Player:
    """The player holding FIRST_MARKER moves first."""
    return players[0] if players[0].marker is FIRST_MARKER else players[1]
