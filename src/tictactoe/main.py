from __future__ import annotations

from tictactoe.game.controller import run_game
from tictactoe.logging_config import get_logger, setup_logging
from tictactoe.ui.console import ConsoleIO
from tictactoe.ui.render import clear_screen

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    clear_screen()

    try:
        result = run_game(ConsoleIO())
    except (KeyboardInterrupt, EOFError):
        print("\nGame quit.")
        return 130

    log.info("result: %s", result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
