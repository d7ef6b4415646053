"""QAbstractListModel exposing context usage grid cells to QML."""

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt, Slot, Signal, Property

from transcript_lens.services.grid_allocator import GRID_COLUMNS, to_rows
from transcript_lens.types.context import GridCell


class ContextGridModel(QAbstractListModel):
    """Flat list of grid cells; QML lays them out with `columns` per row."""

    IconRole = Qt.UserRole + 1
    ColorRole = Qt.UserRole + 2
    CategoryRole = Qt.UserRole + 3
    RowRole = Qt.UserRole + 4
    ColumnRole = Qt.UserRole + 5

    columns_changed = Signal()

    def __init__(self, parent=None, columns: int = GRID_COLUMNS):
        super().__init__(parent)
        self._cells: list[GridCell] = []
        self._columns = columns

    def roleNames(self):
        return {
            self.IconRole: b"icon",
            self.ColorRole: b"color",
            self.CategoryRole: b"category",
            self.RowRole: b"row",
            self.ColumnRole: b"column",
        }

    def rowCount(self, parent=QModelIndex()):
        return len(self._cells)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._cells):
            return None

        cell = self._cells[index.row()]

        if role == self.IconRole or role == Qt.DisplayRole:
            return cell.icon
        elif role == self.ColorRole:
            return cell.color
        elif role == self.CategoryRole:
            return cell.category
        elif role == self.RowRole:
            return index.row() // self._columns
        elif role == self.ColumnRole:
            return index.row() % self._columns
        return None

    def _get_columns(self) -> int:
        return self._columns

    columns = Property(int, _get_columns, notify=columns_changed)

    def set_columns(self, columns: int):
        if columns <= 0 or columns == self._columns:
            return
        self.beginResetModel()
        self._columns = columns
        self.endResetModel()
        self.columns_changed.emit()

    def set_cells(self, cells: list[GridCell]):
        """Replace the entire grid."""
        self.beginResetModel()
        self._cells = list(cells)
        self.endResetModel()

    def rows(self) -> list[list[GridCell]]:
        return to_rows(self._cells, self._columns)

    @Slot()
    def clear(self):
        self.beginResetModel()
        self._cells = []
        self.endResetModel()
