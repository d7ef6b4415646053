"""Parser for the CLI's `/cost` summary block."""

import logging
import re

from transcript_lens.types.reports import CostReport, ModelUsage
from transcript_lens.utils.text_sanitizer import sanitize_report

logger = logging.getLogger(__name__)

MISSING_PLACEHOLDER = "—"

_TOTAL_COST_RE = re.compile(r'Total cost:\s*(\$\s?[\d,]+(?:\.\d+)?)')
_API_DURATION_RE = re.compile(r'Total duration \(API\):[ \t]*(\S[^\n]*)')
_WALL_DURATION_RE = re.compile(r'Total duration \(wall\):[ \t]*(\S[^\n]*)')
_CODE_CHANGES_RE = re.compile(
    r'Total code changes:\s*(\d+)\s+lines?\s+added,\s*(\d+)\s+lines?\s+removed'
)
_MODEL_LINE_RE = re.compile(
    r'^[ \t]*(?P<name>[^\s:][^:\n]*?):[ \t]+'
    r'(?P<input>\S+) input,[ \t]*'
    r'(?P<output>\S+) output,[ \t]*'
    r'(?P<cache_read>\S+) cache read,[ \t]*'
    r'(?P<cache_write>\S+) cache write'
    r'(?:,[ \t]*(?P<web_search>\S+) web search)?'
    r'[ \t]*\((?P<cost>\$[\d,.]+)\)',
    re.MULTILINE,
)


def parse_cost_report(text: str, placeholder: str = MISSING_PLACEHOLDER) -> CostReport | None:
    """Parse a cost summary block.

    The "Total cost" line is the anchor: without it the block is not a cost
    report and nothing is returned, even if model lines are present. Missing
    durations fall back to ``placeholder``, missing code changes to zero.
    """
    try:
        return _parse(text, placeholder)
    except Exception:
        logger.debug("Failed to parse cost report", exc_info=True)
        return None


def _parse(text: str, placeholder: str) -> CostReport | None:
    clean = sanitize_report(text)

    total_match = _TOTAL_COST_RE.search(clean)
    if total_match is None:
        return None
    total_cost = total_match.group(1).replace(" ", "")

    api_duration = _optional_capture(_API_DURATION_RE, clean, placeholder)
    wall_duration = _optional_capture(_WALL_DURATION_RE, clean, placeholder)

    lines_added = lines_removed = 0
    changes_match = _CODE_CHANGES_RE.search(clean)
    if changes_match:
        lines_added = int(changes_match.group(1))
        lines_removed = int(changes_match.group(2))

    models = tuple(
        ModelUsage(
            name=m.group("name").strip(),
            input_tokens=m.group("input"),
            output_tokens=m.group("output"),
            cache_read_tokens=m.group("cache_read"),
            cache_write_tokens=m.group("cache_write"),
            cost=m.group("cost"),
            web_search_tokens=m.group("web_search"),
        )
        for m in _MODEL_LINE_RE.finditer(clean)
    )

    logger.debug(
        "Parsed cost report: total=%s models=%d", total_cost, len(models),
    )
    return CostReport(
        total_cost=total_cost,
        api_duration=api_duration,
        wall_duration=wall_duration,
        lines_added=lines_added,
        lines_removed=lines_removed,
        models=models,
    )


def _optional_capture(pattern: re.Pattern, text: str, default: str) -> str:
    match = pattern.search(text)
    if match is None:
        return default
    value = match.group(1).strip()
    return value or default
