import logging

from ..game_logic import GameLogic, GameMode, MoveStatus
from ..preferences import DisplayPreferences
from ..theme import apply_palette
from ..config import WINDOW_TITLE, COMPUTER_DELAY_MS
from .board_widget import BoardWidget
from .game_overlay import GameOverlay, status_message

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

log = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, game_logic=None, preferences=None,
                 computer_delay_ms=COMPUTER_DELAY_MS, dark=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic or GameLogic()
        self.preferences = preferences or DisplayPreferences()
        self.computer_delay_ms = computer_delay_ms
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self.overlay = GameOverlay(parent=self)
        # ui-only state, independent of the session
        self.overlay_visible = True
        self.dark_mode = self.preferences.dark_mode if dark is None else dark
        # pending computer reply, cancelled by any reset
        self._computer_timer = QTimer(self)
        self._computer_timer.setSingleShot(True)
        self._computer_timer.timeout.connect(self._play_computer_turn)

        self._setup_ui()
        self._apply_theme()
        self._set_overlay_visible(True)
        self.board_widget.set_accept_clicks(False)   # until a mode is picked
        self._update_message("Select a game mode.")

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(420, 560)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.overlay)
        self.overlay.mode_selected.connect(self.start_game)
        self.overlay.dark_mode_toggled.connect(self.toggle_dark_mode)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        human_action = QAction("New Game vs Player", self)
        human_action.triggered.connect(lambda: self.start_game(GameMode.HUMAN_VS_HUMAN))
        computer_action = QAction("New Game vs Computer", self)
        computer_action.triggered.connect(lambda: self.start_game(GameMode.HUMAN_VS_COMPUTER))
        reset_action = QAction("Reset", self)
        reset_action.triggered.connect(self.reset_game)
        dark_action = QAction("Toggle Dark Mode", self)
        dark_action.triggered.connect(self.toggle_dark_mode)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (human_action, computer_action, reset_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(dark_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = ""
        if is_error:     style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: #3cb371; font-weight: bold;"
        elif is_turn:    style = "color: #2a82da; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _set_overlay_visible(self, visible):
        self.overlay_visible = visible
        self.overlay.setVisible(visible)

    def _apply_theme(self):
        app = QApplication.instance()
        if app is not None:
            apply_palette(app, self.dark_mode)
        self.board_widget.set_dark(self.dark_mode)
        self.overlay.set_dark(self.dark_mode)

    @Slot()
    def toggle_dark_mode(self):
        """
        flip theme and remember it
        """
        self.dark_mode = not self.dark_mode
        self.preferences.dark_mode = self.dark_mode
        self._apply_theme()
        log.debug("dark mode %s", "on" if self.dark_mode else "off")

    @Slot(object)
    def start_game(self, mode):
        """
        new game in the chosen mode, overlay out of the way
        """
        self.game_logic.reset_game(mode)
        self._after_reset()

    @Slot()
    def reset_game(self):
        # same mode, fresh board
        self.game_logic.reset_game()
        self._after_reset()

    def _after_reset(self):
        self._computer_timer.stop()
        self.overlay.show_outcome(self.game_logic.outcome)
        self._set_overlay_visible(False)
        self.board_widget.set_accept_clicks(True)
        self.board_widget.update()
        self._update_message(status_message(self.game_logic), is_turn=True)

    def _handle_game_over(self):
        # end game UI updates
        self.board_widget.set_accept_clicks(False)
        self.overlay.show_outcome(self.game_logic.outcome)
        self._set_overlay_visible(True)
        self._update_message(status_message(self.game_logic), is_success=True)

    def _after_move(self, result):
        self.board_widget.update()
        if result.status in (MoveStatus.WIN, MoveStatus.DRAW):
            self._handle_game_over()
        elif self.game_logic.is_computer_turn:
            # block input until the computer has replied
            self.board_widget.set_accept_clicks(False)
            self._update_message(status_message(self.game_logic))
            self._computer_timer.start(self.computer_delay_ms)
        else:
            self.board_widget.set_accept_clicks(True)
            self._update_message(status_message(self.game_logic), is_turn=True)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # ignore clicks after game over
        if self.game_logic.game_over:
            return
        result = self.game_logic.make_move(index)
        if not result.accepted:
            self._update_message(result.reason, is_error=True)
            return
        self._after_move(result)

    @Slot()
    def _play_computer_turn(self):
        """
        computer reply, rejected by the engine if it is no longer O to move
        """
        result = self.game_logic.computer_move()
        if result.accepted:
            self._after_move(result)
