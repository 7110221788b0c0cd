from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt, Signal

from ..game_logic import GameMode, Mark, OutcomeKind


def outcome_message(outcome):
    """
    result line for a finished game, empty while in progress
    """
    if outcome.kind is OutcomeKind.WIN:
        return f"{outcome.winner.value} wins!"
    if outcome.kind is OutcomeKind.DRAW:
        return "Draw!"
    return ""


def status_message(game_logic):
    """
    one line describing whose turn it is or how the game ended
    """
    if game_logic.game_over:
        return outcome_message(game_logic.outcome)
    if game_logic.mode is GameMode.HUMAN_VS_COMPUTER:
        if game_logic.current_player is Mark.O:
            return "Computer is thinking..."
        return "Your (X) turn"
    return f"Player {game_logic.current_player.value}'s turn"


def dark_mode_label(dark):
    # button names the theme it switches to
    return "Light mode" if dark else "Dark mode"


class GameOverlay(QWidget):
    """
    title screen / result screen on top of the board
    """
    mode_selected = Signal(object)   # GameMode
    dark_mode_toggled = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAutoFillBackground(True)
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)

        self.title_label = QLabel("Tic-Tac-Toe")
        f = QFont(); f.setPointSize(24); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.result_label = QLabel("")
        f = QFont(); f.setPointSize(18); self.result_label.setFont(f)
        self.result_label.setAlignment(Qt.AlignCenter)
        self.result_label.setVisible(False)
        layout.addWidget(self.result_label)

        buttons = QHBoxLayout()
        self.human_button = QPushButton("Play against another player")
        self.human_button.clicked.connect(lambda: self.mode_selected.emit(GameMode.HUMAN_VS_HUMAN))
        self.computer_button = QPushButton("Play against the computer")
        self.computer_button.clicked.connect(lambda: self.mode_selected.emit(GameMode.HUMAN_VS_COMPUTER))
        for b in (self.human_button, self.computer_button): buttons.addWidget(b)
        layout.addLayout(buttons)

        self.dark_mode_button = QPushButton(dark_mode_label(False))
        self.dark_mode_button.clicked.connect(lambda: self.dark_mode_toggled.emit())
        layout.addWidget(self.dark_mode_button, alignment=Qt.AlignCenter)

    def show_outcome(self, outcome):
        """
        show result text; hidden while the game is still running
        """
        text = outcome_message(outcome)
        self.result_label.setText(text)
        self.result_label.setVisible(bool(text))

    def set_dark(self, dark):
        self.dark_mode_button.setText(dark_mode_label(dark))
