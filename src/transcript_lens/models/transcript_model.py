"""QAbstractListModel for the live transcript display buffer."""

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt, Slot, Signal, Property

from transcript_lens.types.transcript import ClassifiedLine
from transcript_lens.utils.ansi_html import ansi_to_html
from transcript_lens.utils.palette import DEFAULT_STREAM_PALETTE, StreamPalette


class TranscriptModel(QAbstractListModel):
    """Classified transcript lines, oldest first, capped at max_lines."""

    LabelRole = Qt.UserRole + 1
    TextRole = Qt.UserRole + 2
    ColorKeyRole = Qt.UserRole + 3
    ColorRole = Qt.UserRole + 4
    HtmlRole = Qt.UserRole + 5

    count_changed = Signal()

    def __init__(self, parent=None, palette: StreamPalette = DEFAULT_STREAM_PALETTE,
                 max_lines: int = 5000):
        super().__init__(parent)
        self._lines: list[ClassifiedLine] = []
        self._palette = palette
        self._max_lines = max_lines

    def roleNames(self):
        return {
            self.LabelRole: b"label",
            self.TextRole: b"text",
            self.ColorKeyRole: b"colorKey",
            self.ColorRole: b"color",
            self.HtmlRole: b"html",
        }

    def rowCount(self, parent=QModelIndex()):
        return len(self._lines)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._lines):
            return None

        line = self._lines[index.row()]

        if role == self.LabelRole:
            return line.label
        elif role == self.TextRole or role == Qt.DisplayRole:
            return line.text
        elif role == self.ColorKeyRole:
            return line.color_key.value
        elif role == self.ColorRole:
            return self._palette.color_for(line.color_key)
        elif role == self.HtmlRole:
            return ansi_to_html(line.text)
        return None

    def _get_count(self) -> int:
        return len(self._lines)

    count = Property(int, _get_count, notify=count_changed)

    @property
    def max_lines(self) -> int:
        return self._max_lines

    def set_max_lines(self, max_lines: int):
        self._max_lines = max(1, max_lines)
        self._trim()

    def lines(self) -> list[ClassifiedLine]:
        return list(self._lines)

    def append_lines(self, lines: list[ClassifiedLine]):
        """Append lines in arrival order, dropping the oldest past the cap."""
        if not lines:
            return
        start = len(self._lines)
        self.beginInsertRows(QModelIndex(), start, start + len(lines) - 1)
        self._lines.extend(lines)
        self.endInsertRows()
        self._trim()
        self.count_changed.emit()

    def _trim(self):
        overflow = len(self._lines) - self._max_lines
        if overflow <= 0:
            return
        self.beginRemoveRows(QModelIndex(), 0, overflow - 1)
        del self._lines[:overflow]
        self.endRemoveRows()

    @Slot()
    def clear(self):
        """Clear the transcript buffer."""
        self.beginResetModel()
        self._lines = []
        self.endResetModel()
        self.count_changed.emit()
