import argparse
import logging
import os
import sys

from PySide6.QtWidgets import QApplication
from tictactoe.config import APPLICATION_NAME, ORGANIZATION_NAME, COMPUTER_DELAY_MS, LOG_FORMAT, LOG_LEVEL_ENV
from tictactoe.game_logic import GameMode
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Tic-Tac-Toe")
    p.add_argument("--mode", choices=[m.value for m in GameMode], default=None,
                   help="start straight into a game against a human or the computer")
    theme = p.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="dark", action="store_true", default=None,
                       help="dark theme for this run")
    theme.add_argument("--light", dest="dark", action="store_false",
                       help="light theme for this run")
    p.add_argument("--delay", type=int, default=COMPUTER_DELAY_MS,
                   help="computer reply delay in milliseconds")
    p.add_argument("--log-level", default=os.environ.get(LOG_LEVEL_ENV, "INFO"),
                   choices=LOG_LEVELS, type=str.upper)
    args = p.parse_args(argv)
    if args.delay < 0:
        p.error("--delay must not be negative")
    # a default from the environment skips the choices check
    if args.log_level not in LOG_LEVELS:
        p.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    return args

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    app = QApplication(sys.argv[:1])
    app.setOrganizationName(ORGANIZATION_NAME)
    app.setApplicationName(APPLICATION_NAME)

    window = TicTacToeWindow(computer_delay_ms=args.delay, dark=args.dark)
    if args.mode:
        window.start_game(GameMode(args.mode))
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
