"""
Pytest fixtures for Tic-Tac-Toe tests.
"""

import os
import random

# widgets are built headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe.game_logic import Cell, GameLogic, GameMode


def board_from(text):
    """Build a board from a 9-char string of 'X', 'O' and '.'."""
    assert len(text) == 9
    return tuple(Cell.EMPTY if ch == "." else Cell(ch) for ch in text)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible computer moves."""
    return random.Random(1234)


@pytest.fixture
def human_game(rng) -> GameLogic:
    """Fresh human vs human game."""
    return GameLogic(GameMode.HUMAN_VS_HUMAN, rng=rng)


@pytest.fixture
def computer_game(rng) -> GameLogic:
    """Fresh human vs computer game."""
    return GameLogic(GameMode.HUMAN_VS_COMPUTER, rng=rng)


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for all widget tests."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def settings(tmp_path):
    """QSettings backed by a throwaway ini file."""
    from PySide6.QtCore import QSettings
    return QSettings(str(tmp_path / "prefs.ini"), QSettings.IniFormat)
