from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

# -----------------------------------------------------------------------------
# DARK COLORS
# -----------------------------------------------------------------------------

DARK_COLORS = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: Qt.white,
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: Qt.white,
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.BrightText: Qt.red,
    QPalette.Link: QColor(42, 130, 218),
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

# -----------------------------------------------------------------------------
# LIGHT COLORS
# -----------------------------------------------------------------------------

LIGHT_COLORS = {
    QPalette.Window: QColor(240, 240, 240),
    QPalette.WindowText: Qt.black,
    QPalette.Base: Qt.white,
    QPalette.AlternateBase: QColor(233, 233, 233),
    QPalette.ToolTipBase: QColor(255, 255, 220),
    QPalette.ToolTipText: Qt.black,
    QPalette.Text: Qt.black,
    QPalette.Button: QColor(225, 225, 225),
    QPalette.ButtonText: Qt.black,
    QPalette.BrightText: Qt.red,
    QPalette.Link: QColor(0, 102, 204),
    QPalette.Highlight: QColor(0, 120, 215),
    QPalette.HighlightedText: Qt.white,
    QPalette.PlaceholderText: QColor(120, 120, 120),
}

DISABLED_TEXT_COLOR = QColor(127, 127, 127)


def build_palette(dark):
    """
    palette for the requested theme, disabled roles greyed out
    """
    palette = QPalette()
    for role, color in (DARK_COLORS if dark else LIGHT_COLORS).items():
        palette.setColor(role, color)
    # disabled roles
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    return palette


def apply_palette(app: QApplication, dark):
    """
    Apply the light or dark palette on the Fusion style.
    """
    app.setStyle('Fusion')
    app.setPalette(build_palette(dark))
