"""Interpreter configuration wrapping QSettings."""

import logging

from PySide6.QtCore import QObject, Signal, Slot, QSettings

logger = logging.getLogger(__name__)

# Default values
DEFAULTS = {
    "transcript/maxRecordPreview": 200,
    "transcript/maxLines": 5000,
    "grid/columns": 10,
    "cost/missingPlaceholder": "—",
}


class ConfigManager(QObject):
    """Settings for the report parsers and transcript views."""

    settings_changed = Signal(str)  # key

    def __init__(self, parent=None, settings: QSettings | None = None):
        super().__init__(parent)
        self._settings = settings if settings is not None else QSettings()

    @Slot(str, result=str)
    def get_string(self, key: str) -> str:
        return str(self._settings.value(key, DEFAULTS.get(key, "")))

    @Slot(str, result=int)
    def get_int(self, key: str) -> int:
        val = self._settings.value(key, DEFAULTS.get(key, 0))
        try:
            return int(val)
        except (ValueError, TypeError):
            logger.debug("Invalid int for %s: %r, using default", key, val)
            return DEFAULTS.get(key, 0)

    @Slot(str, str)
    def set_string(self, key: str, value: str):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str, int)
    def set_int(self, key: str, value: int):
        self._settings.setValue(key, value)
        self.settings_changed.emit(key)

    @Slot(str)
    def reset(self, key: str):
        """Drop a stored value so the default applies again."""
        self._settings.remove(key)
        self.settings_changed.emit(key)

    # Typed accessors used by the interpreter

    def record_preview_length(self) -> int:
        return max(1, self.get_int("transcript/maxRecordPreview"))

    def max_transcript_lines(self) -> int:
        return max(1, self.get_int("transcript/maxLines"))

    def grid_columns(self) -> int:
        return max(1, self.get_int("grid/columns"))

    def missing_placeholder(self) -> str:
        return self.get_string("cost/missingPlaceholder")

