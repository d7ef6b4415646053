"""Parsing services for Transcript Lens."""

from transcript_lens.services.config_manager import ConfigManager
from transcript_lens.services.context_parser import compute_context_delta, parse_context_report
from transcript_lens.services.cost_parser import parse_cost_report
from transcript_lens.services.grid_allocator import allocate_counts, build_grid, to_rows
from transcript_lens.services.line_classifier import classify_line, classify_lines
from transcript_lens.services.release_notes_parser import parse_changelog, parse_release_notes
from transcript_lens.services.report_detector import detect_report_kind

__all__ = [
    "ConfigManager",
    "compute_context_delta",
    "parse_context_report",
    "parse_cost_report",
    "allocate_counts",
    "build_grid",
    "to_rows",
    "classify_line",
    "classify_lines",
    "parse_changelog",
    "parse_release_notes",
    "detect_report_kind",
]
