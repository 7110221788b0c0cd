from PySide6.QtCore import QSettings

from .config import ORGANIZATION_NAME, APPLICATION_NAME

DARK_MODE_KEY = "darkMode"


class DisplayPreferences:
    """
    persisted light/dark choice, nothing to do with game rules
    """
    def __init__(self, settings=None):
        self.settings = settings or QSettings(ORGANIZATION_NAME, APPLICATION_NAME)

    @property
    def dark_mode(self):
        # stored as "true"/"false", default light
        return str(self.settings.value(DARK_MODE_KEY, "false")).lower() == "true"

    @dark_mode.setter
    def dark_mode(self, enabled):
        self.settings.setValue(DARK_MODE_KEY, "true" if enabled else "false")
        self.settings.sync()

    def toggle(self):
        """
        flip and store, returns the new value
        """
        self.dark_mode = not self.dark_mode
        return self.dark_mode
