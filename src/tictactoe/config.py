# src/tictactoe/config.py

from __future__ import annotations

import os
from typing import Mapping


def color_enabled(environ: Mapping[str, str]) -> bool:
    # NO_COLOR counts only when set to a non-empty value
    return not environ.get("NO_COLOR")


SIZE = 3
CELL_COUNT = SIZE * SIZE

# UI toggles
USE_COLOR = color_enabled(os.environ)
CLEAR_SCREEN = True

# Logging (records go to stderr, the grid owns stdout)
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "WARNING")
LOG_FORMAT = os.environ.get("TICTACTOE_LOG_FORMAT", "simple")
