"""QAbstractListModel for the per-model breakdown of a cost report."""

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt, Slot

from transcript_lens.types.reports import ModelUsage


class ModelUsageModel(QAbstractListModel):

    NameRole = Qt.UserRole + 1
    InputTokensRole = Qt.UserRole + 2
    OutputTokensRole = Qt.UserRole + 3
    CacheReadRole = Qt.UserRole + 4
    CacheWriteRole = Qt.UserRole + 5
    WebSearchRole = Qt.UserRole + 6
    CostRole = Qt.UserRole + 7

    def __init__(self, parent=None):
        super().__init__(parent)
        self._models: list[ModelUsage] = []

    def roleNames(self):
        return {
            self.NameRole: b"name",
            self.InputTokensRole: b"inputTokens",
            self.OutputTokensRole: b"outputTokens",
            self.CacheReadRole: b"cacheReadTokens",
            self.CacheWriteRole: b"cacheWriteTokens",
            self.WebSearchRole: b"webSearchTokens",
            self.CostRole: b"cost",
        }

    def rowCount(self, parent=QModelIndex()):
        return len(self._models)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid() or index.row() >= len(self._models):
            return None

        usage = self._models[index.row()]

        if role == self.NameRole or role == Qt.DisplayRole:
            return usage.name
        elif role == self.InputTokensRole:
            return usage.input_tokens
        elif role == self.OutputTokensRole:
            return usage.output_tokens
        elif role == self.CacheReadRole:
            return usage.cache_read_tokens
        elif role == self.CacheWriteRole:
            return usage.cache_write_tokens
        elif role == self.WebSearchRole:
            return usage.web_search_tokens or ""
        elif role == self.CostRole:
            return usage.cost
        return None

    def set_models(self, models):
        self.beginResetModel()
        self._models = list(models)
        self.endResetModel()

    @Slot()
    def clear(self):
        self.beginResetModel()
        self._models = []
        self.endResetModel()
