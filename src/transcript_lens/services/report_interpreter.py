"""QObject facade that turns CLI output into the view models QML binds to.

Report blocks (cost, context, release notes) replace the current view model
when they parse, and leave it untouched when they don't. Transcript lines are
classified one at a time and appended to the transcript buffer in arrival
order.
"""

import logging

from PySide6.QtCore import QObject, Signal, Slot, Property

from transcript_lens.models.context_grid_model import ContextGridModel
from transcript_lens.models.model_usage_model import ModelUsageModel
from transcript_lens.models.release_notes_model import ReleaseNotesModel
from transcript_lens.models.transcript_model import TranscriptModel
from transcript_lens.services.config_manager import ConfigManager
from transcript_lens.services.context_parser import compute_context_delta, parse_context_report
from transcript_lens.services.cost_parser import parse_cost_report
from transcript_lens.services.grid_allocator import build_grid
from transcript_lens.services.line_classifier import classify_line
from transcript_lens.services.release_notes_parser import parse_release_notes
from transcript_lens.services.report_detector import detect_report_kind
from transcript_lens.types.context import ContextDelta, ContextReport
from transcript_lens.types.reports import CostReport, ReleaseNotesEntry, ReportKind
from transcript_lens.utils.palette import (
    CategoryPalette,
    DEFAULT_CATEGORY_PALETTE,
    DEFAULT_STREAM_PALETTE,
    StreamPalette,
)

logger = logging.getLogger(__name__)


class ReportInterpreter(QObject):
    """Parses CLI output blocks and lines into the exposed Qt models."""

    cost_report_changed = Signal()
    context_report_changed = Signal()
    release_notes_changed = Signal()

    def __init__(
        self,
        config: ConfigManager | None = None,
        category_palette: CategoryPalette = DEFAULT_CATEGORY_PALETTE,
        stream_palette: StreamPalette = DEFAULT_STREAM_PALETTE,
        parent=None,
    ):
        super().__init__(parent)
        self._config = config if config is not None else ConfigManager(self)
        self._category_palette = category_palette

        self._cost_report: CostReport | None = None
        self._context_report: ContextReport | None = None
        self._context_delta: ContextDelta | None = None
        self._release_notes: list[ReleaseNotesEntry] = []

        self.transcript_model = TranscriptModel(
            self, palette=stream_palette, max_lines=self._config.max_transcript_lines(),
        )
        self.grid_model = ContextGridModel(self, columns=self._config.grid_columns())
        self.model_usage_model = ModelUsageModel(self)
        self.release_notes_model = ReleaseNotesModel(self)

        self._config.settings_changed.connect(self._on_setting_changed)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def _get_total_cost(self) -> str:
        return self._cost_report.total_cost if self._cost_report else ""

    totalCost = Property(str, _get_total_cost, notify=cost_report_changed)

    def _get_context_percentage(self) -> int:
        return self._context_report.percentage if self._context_report else 0

    contextPercentage = Property(int, _get_context_percentage, notify=context_report_changed)

    def _get_context_model(self) -> str:
        return self._context_report.model if self._context_report else ""

    contextModel = Property(str, _get_context_model, notify=context_report_changed)

    def _get_has_release_notes(self) -> bool:
        return bool(self._release_notes)

    hasReleaseNotes = Property(bool, _get_has_release_notes, notify=release_notes_changed)

    @property
    def cost_report(self) -> CostReport | None:
        return self._cost_report

    @property
    def context_report(self) -> ContextReport | None:
        return self._context_report

    @property
    def context_delta(self) -> ContextDelta | None:
        """Change since the previously loaded context report, if any."""
        return self._context_delta

    @property
    def release_notes(self) -> list[ReleaseNotesEntry]:
        return list(self._release_notes)

    # ------------------------------------------------------------------
    # Report blocks
    # ------------------------------------------------------------------

    @Slot(str, result=bool)
    def load_cost_report(self, text: str) -> bool:
        report = parse_cost_report(text, placeholder=self._config.missing_placeholder())
        if report is None:
            logger.info("Cost output did not contain a total cost, ignoring")
            return False
        self._cost_report = report
        self.model_usage_model.set_models(report.models)
        self.cost_report_changed.emit()
        return True

    @Slot(str, result=bool)
    def load_context_report(self, text: str) -> bool:
        report = parse_context_report(text)
        if report is None:
            logger.info("Context output could not be parsed, no grid shown")
            return False
        previous = self._context_report
        self._context_delta = compute_context_delta(previous, report) if previous else None
        self._context_report = report
        self.grid_model.set_cells(build_grid(report, self._category_palette))
        self.context_report_changed.emit()
        return True

    @Slot(str, result=bool)
    def load_release_notes(self, text: str) -> bool:
        """Load release notes; an empty result is valid and clears the list."""
        self._release_notes = parse_release_notes(text)
        self.release_notes_model.set_entries(self._release_notes)
        self.release_notes_changed.emit()
        return bool(self._release_notes)

    @Slot(str, result=str)
    def load_report(self, text: str) -> str:
        """Detect the kind of a report block and load it. Returns the kind loaded."""
        kind = detect_report_kind(text)
        loaders = {
            ReportKind.COST: self.load_cost_report,
            ReportKind.CONTEXT: self.load_context_report,
            ReportKind.RELEASE_NOTES: self.load_release_notes,
        }
        loader = loaders.get(kind)
        if loader is None or not loader(text):
            return ReportKind.UNKNOWN.value
        return kind.value

    # ------------------------------------------------------------------
    # Transcript stream
    # ------------------------------------------------------------------

    @Slot(str, str, result=int)
    def append_output(self, text: str, stream: str = "stdout") -> int:
        """Classify one incoming transcript line. Returns the number of rows added."""
        lines = classify_line(text, stream, self._config.record_preview_length())
        self.transcript_model.append_lines(lines)
        return len(lines)

    @Slot()
    def clear_transcript(self):
        self.transcript_model.clear()

    def _on_setting_changed(self, key: str):
        if key == "transcript/maxLines":
            self.transcript_model.set_max_lines(self._config.max_transcript_lines())
        elif key == "grid/columns":
            self.grid_model.set_columns(self._config.grid_columns())
