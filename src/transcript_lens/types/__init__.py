"""Type definitions for Transcript Lens."""

from transcript_lens.types.reports import (
    CostReport,
    ModelUsage,
    ReleaseNotesEntry,
    ReportKind,
)
from transcript_lens.types.context import (
    CategoryDelta,
    ContextCategory,
    ContextDelta,
    ContextReport,
    GridCell,
    SubTable,
)
from transcript_lens.types.transcript import ClassifiedLine, ColorKey, StreamOrigin

__all__ = [
    "CostReport",
    "ModelUsage",
    "ReleaseNotesEntry",
    "ReportKind",
    "CategoryDelta",
    "ContextCategory",
    "ContextDelta",
    "ContextReport",
    "GridCell",
    "SubTable",
    "ClassifiedLine",
    "ColorKey",
    "StreamOrigin",
]
