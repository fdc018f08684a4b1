from __future__ import annotations

from tictactoe.config import SIZE
from tictactoe.types import Marker

CELL_ERROR = "You must choose 0, 1 or 2"
MARKER_ERROR = "Choose either 0 or 1"


def _clean(raw: str) -> str:
    return raw.rstrip("\r\n").strip()


def parse_name(raw: str, player_number: int) -> str:
    name = _clean(raw)
    return name if name else f"Player {player_number}"


def parse_marker_choice(raw: str) -> Marker:
    s = _clean(raw)
    if s not in {"0", "1"}:
        raise ValueError(MARKER_ERROR)
    return Marker(int(s))


def parse_cell_choice(raw: str) -> int:
    s = _clean(raw)
    if not s.isdecimal():
        raise ValueError(CELL_ERROR)
    v = int(s)
    if v >= SIZE:
        raise ValueError(CELL_ERROR)
    return v
