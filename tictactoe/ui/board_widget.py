from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..game_logic import BOARD_SIZE, Cell
from ..config import (
    X_COLOR, O_COLOR, WIN_LINE_COLOR,
    DARK_BOARD_COLOR, DARK_GRID_COLOR, LIGHT_BOARD_COLOR, LIGHT_GRID_COLOR,
)


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits board index 0-8 on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling
        self._dark = False

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def accepts_clicks(self):
        return self._accept_clicks

    def set_dark(self, dark):
        self._dark = dark
        self.update()

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centered in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def index_at(self, x, y):
        """
        map widget coords to a board index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / BOARD_SIZE
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp to valid range
        row = max(0, min(row, BOARD_SIZE - 1)); col = max(0, min(col, BOARD_SIZE - 1))
        return row * BOARD_SIZE + col

    def _cell_center(self, index, ox, oy, cell_size):
        row, col = divmod(index, BOARD_SIZE)
        return QPointF(ox + col * cell_size + cell_size / 2,
                       oy + row * cell_size + cell_size / 2)

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and the winning line
        """
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing, True)
        ox, oy, side = self._geometry()
        # background
        painter.fillRect(self.rect(), QColor(DARK_BOARD_COLOR if self._dark else LIGHT_BOARD_COLOR))
        cell_size = side / BOARD_SIZE
        # grid lines
        painter.setPen(QPen(QColor(DARK_GRID_COLOR if self._dark else LIGHT_GRID_COLOR), 2))
        for i in range(1, BOARD_SIZE):
            x = ox + i * cell_size
            painter.drawLine(int(x), int(oy), int(x), int(oy + side))
            y = oy + i * cell_size
            painter.drawLine(int(ox), int(y), int(ox + side), int(y))
        # draw marks
        rad = cell_size / 2 * 0.7
        for index, sym in enumerate(self.game_logic.board):
            if sym is Cell.EMPTY: continue
            center = self._cell_center(index, ox, oy, cell_size)
            cx, cy = center.x(), center.y()
            if sym is Cell.X:
                painter.setPen(QPen(QColor(X_COLOR), 4))
                # two crossing lines
                painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
                painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
            else:
                painter.setPen(QPen(QColor(O_COLOR), 4))
                painter.drawEllipse(center, rad, rad)
        # strike through the winning line
        line = self.game_logic.winning_line
        if line:
            painter.setPen(QPen(QColor(WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap))
            painter.drawLine(self._cell_center(line[0], ox, oy, cell_size),
                             self._cell_center(line[2], ox, oy, cell_size))
        painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks or self.game_logic.game_over:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
