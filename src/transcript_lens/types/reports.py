"""Report block types: cost summaries and release notes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ReportKind(str, Enum):
    COST = "cost"
    CONTEXT = "context"
    RELEASE_NOTES = "release-notes"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ModelUsage:
    """One per-model line of a cost report. Values keep their CLI formatting."""
    name: str
    input_tokens: str
    output_tokens: str
    cache_read_tokens: str
    cache_write_tokens: str
    cost: str
    web_search_tokens: Optional[str] = None


@dataclass(frozen=True)
class CostReport:
    total_cost: str
    api_duration: str
    wall_duration: str
    lines_added: int = 0
    lines_removed: int = 0
    models: tuple[ModelUsage, ...] = ()


@dataclass(frozen=True)
class ReleaseNotesEntry:
    version: str
    changes: tuple[str, ...] = field(default_factory=tuple)
    date: str = ""
