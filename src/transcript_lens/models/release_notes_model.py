"""QAbstractListModel for parsed release notes."""

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt, Slot

from transcript_lens.types.reports import ReleaseNotesEntry


class ReleaseNotesModel(QAbstractListModel):
    """One row per version, newest first as printed by the CLI."""

    VersionRole = Qt.UserRole + 1
    DateRole = Qt.UserRole + 2
    ChangesRole = Qt.UserRole + 3
    ChangeCountRole = Qt.UserRole + 4

    def __init__(self, parent=None):
        super().__init__(parent)
        self._entries: list[ReleaseNotesEntry] = []

    def roleNames(self):
        return {
            self.VersionRole: b"version",
            self.DateRole: b"date",
            self.ChangesRole: b"changes",
            self.ChangeCountRole: b"changeCount",
        }

    def rowCount(self, parent=QModelIndex()):
        return len(self._entries)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._entries):
            return None

        entry = self._entries[index.row()]

        if role == self.VersionRole or role == Qt.DisplayRole:
            return entry.version
        elif role == self.DateRole:
            return entry.date
        elif role == self.ChangesRole:
            return list(entry.changes)
        elif role == self.ChangeCountRole:
            return len(entry.changes)
        return None

    def set_entries(self, entries: list[ReleaseNotesEntry]):
        self.beginResetModel()
        self._entries = list(entries)
        self.endResetModel()

    @Slot()
    def clear(self):
        self.beginResetModel()
        self._entries = []
        self.endResetModel()
