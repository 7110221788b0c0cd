"""
Tests for the presentation layer.

Tests:
- Status and result text
- Persisted dark mode preference
- Board click mapping
- Main window game flow
"""

import random

import pytest

from tictactoe.game_logic import Cell, GameLogic, GameMode, Mark, Outcome
from tictactoe.preferences import DisplayPreferences
from tictactoe.ui.game_overlay import dark_mode_label, outcome_message, status_message


class TestMessages:
    """Tests for status text."""

    def test_outcome_messages(self):
        """Finished games name the winner or the draw."""
        assert outcome_message(Outcome.win(Mark.X)) == "X wins!"
        assert outcome_message(Outcome.win(Mark.O)) == "O wins!"
        assert outcome_message(Outcome.draw()) == "Draw!"
        assert outcome_message(Outcome.in_progress()) == ""

    def test_human_turn_messages(self, human_game):
        """Human vs human names the player to move."""
        assert status_message(human_game) == "Player X's turn"
        human_game.make_move(0)
        assert status_message(human_game) == "Player O's turn"

    def test_computer_turn_message(self, computer_game):
        """Computer mode says when the computer is up."""
        assert status_message(computer_game) == "Your (X) turn"
        computer_game.make_move(4)
        assert status_message(computer_game) == "Computer is thinking..."

    def test_dark_mode_label(self):
        """Button names the theme it switches to."""
        assert dark_mode_label(False) == "Dark mode"
        assert dark_mode_label(True) == "Light mode"


class TestDisplayPreferences:
    """Tests for the stored dark mode flag."""

    def test_defaults_to_light(self, settings):
        """Nothing stored means light mode."""
        assert DisplayPreferences(settings).dark_mode is False

    def test_toggle_persists(self, settings, tmp_path):
        """Toggling survives a fresh settings object."""
        from PySide6.QtCore import QSettings
        prefs = DisplayPreferences(settings)
        assert prefs.toggle() is True
        reloaded = DisplayPreferences(QSettings(str(tmp_path / "prefs.ini"), QSettings.IniFormat))
        assert reloaded.dark_mode is True
        assert reloaded.toggle() is False


class TestBoardWidget:
    """Tests for click mapping."""

    def test_index_at(self, qapp):
        """Coordinates map row-major onto 0-8."""
        from tictactoe.ui.board_widget import BoardWidget
        widget = BoardWidget(GameLogic())
        widget.resize(300, 300)
        assert widget.index_at(10, 10) == 0
        assert widget.index_at(150, 150) == 4
        assert widget.index_at(290, 10) == 2
        assert widget.index_at(10, 290) == 6
        assert widget.index_at(299, 299) == 8
        assert widget.index_at(-5, 10) is None

    def test_index_at_centers_square(self, qapp):
        """Non-square widgets keep a centered square grid."""
        from tictactoe.ui.board_widget import BoardWidget
        widget = BoardWidget(GameLogic())
        widget.resize(400, 300)
        assert widget.index_at(20, 150) is None
        assert widget.index_at(60, 10) == 0


@pytest.fixture
def window(qapp, settings):
    from tictactoe.ui.main_window import TicTacToeWindow
    logic = GameLogic(rng=random.Random(3))
    win = TicTacToeWindow(game_logic=logic, preferences=DisplayPreferences(settings),
                          computer_delay_ms=0)
    yield win
    win.close()
    win.deleteLater()


class TestMainWindow:
    """Tests for window game flow."""

    def test_starts_with_overlay_and_locked_board(self, window):
        """Mode has to be picked first."""
        assert window.overlay_visible
        assert not window.board_widget.accepts_clicks()
        assert window.dark_mode is False

    def test_start_game_hides_overlay(self, window):
        """Picking a mode starts a fresh game."""
        window.start_game(GameMode.HUMAN_VS_HUMAN)
        assert not window.overlay_visible
        assert window.board_widget.accepts_clicks()
        assert window.message_label.text() == "Player X's turn"

    def test_rejected_click_shows_reason(self, window):
        """Clicking a taken cell reports it."""
        window.start_game(GameMode.HUMAN_VS_HUMAN)
        window._on_cell_clicked(0)
        window._on_cell_clicked(0)
        assert window.message_label.text() == "cell 0 taken"
        assert window.game_logic.board[0] is Cell.X
        assert window.game_logic.current_player is Mark.O

    def test_win_shows_overlay_with_result(self, window):
        """Game over brings the overlay back with the result."""
        window.start_game(GameMode.HUMAN_VS_HUMAN)
        for index in (0, 3, 1, 4, 2):
            window._on_cell_clicked(index)
        assert window.overlay_visible
        assert window.overlay.result_label.text() == "X wins!"
        assert not window.board_widget.accepts_clicks()

    def test_computer_replies(self, window):
        """Human move in computer mode queues one O reply."""
        window.start_game(GameMode.HUMAN_VS_COMPUTER)
        window._on_cell_clicked(4)
        assert window.game_logic.is_computer_turn
        assert not window.board_widget.accepts_clicks()
        window._play_computer_turn()
        board = window.game_logic.board
        assert board.count(Cell.O) == 1
        assert board.count(Cell.X) == 1
        assert window.game_logic.current_player is Mark.X
        assert window.board_widget.accepts_clicks()

    def test_reset_drops_pending_reply(self, window):
        """A reset before the computer replies leaves an empty board."""
        window.start_game(GameMode.HUMAN_VS_COMPUTER)
        window._on_cell_clicked(4)
        window.reset_game()
        window._play_computer_turn()
        assert all(cell is Cell.EMPTY for cell in window.game_logic.board)
        assert window.game_logic.mode is GameMode.HUMAN_VS_COMPUTER

    def test_toggle_dark_mode_persists(self, window):
        """Dark mode flips and is stored."""
        window.toggle_dark_mode()
        assert window.dark_mode is True
        assert window.preferences.dark_mode is True
        assert window.overlay.dark_mode_button.text() == "Light mode"
