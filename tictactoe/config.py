# -----------------------------------------------------------------------------
# APP SETTINGS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"
ORGANIZATION_NAME = "tictactoe"
APPLICATION_NAME = "tictactoe-gui"

COMPUTER_DELAY_MS = 400            # let the human mark paint first
LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"
LOG_LEVEL_ENV = "TICTACTOE_LOG_LEVEL"

# -----------------------------------------------------------------------------
# BOARD COLORS
# -----------------------------------------------------------------------------

X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "#7cfc00"

DARK_BOARD_COLOR = "#333"
DARK_GRID_COLOR = "#555"
LIGHT_BOARD_COLOR = "#fafafa"
LIGHT_GRID_COLOR = "#222"
