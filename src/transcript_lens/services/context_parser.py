"""Parser for the CLI's `/context` markdown output, plus report deltas."""

import logging
import re

from transcript_lens.types.context import (
    CategoryDelta,
    ContextCategory,
    ContextDelta,
    ContextReport,
    SubTable,
)
from transcript_lens.utils.text_sanitizer import sanitize_report

logger = logging.getLogger(__name__)

# Accept both bold (**Model:**) and plain (Model:) labels
_MODEL_RE = re.compile(r'\*{0,2}Model:\*{0,2}[ \t]*(\S[^\n]*)')
_TOKENS_RE = re.compile(
    r'\*{0,2}Tokens:\*{0,2}\s*(\S+?)\s*/\s*(\S+)\s*\((\d+)%\)'
)
_CATEGORY_ROW_RE = re.compile(
    r'^\|\s*([^|]+?)\s*\|\s*([^|]+?)\s*\|\s*([\d.]+)%\s*\|',
    re.MULTILINE,
)
_SECTION_RE = re.compile(r'^###\s+(.+)', re.MULTILINE)
_TABLE_ROW_RE = re.compile(
    r'^\|\s*([^|]+?)\s*\|\s*([^|]+?)\s*\|\s*([^|]+?)\s*\|',
    re.MULTILINE,
)
_TOKEN_COUNT_RE = re.compile(r'^([\d,]*\.?\d+)\s*([kKmM]?)$')

CATEGORY_SECTION = "Estimated usage by category"

_SUFFIX_MULTIPLIERS = {"": 1, "k": 1_000, "m": 1_000_000}


def parse_context_report(text: str) -> ContextReport | None:
    """Parse a `/context` block into a ContextReport.

    The model line, the token summary line and at least one category row are
    required; if any is missing the whole report is rejected.
    """
    try:
        return _parse(text)
    except Exception:
        logger.debug("Failed to parse context report", exc_info=True)
        return None


def parse_token_count(value: str) -> int:
    """Convert '104,251', '10k' or '1.2M' to an integer token count.

    Raises ValueError for anything else.
    """
    match = _TOKEN_COUNT_RE.match(value.strip())
    if match is None:
        raise ValueError(f"Unrecognized token count: {value!r}")
    number = float(match.group(1).replace(",", ""))
    return int(round(number * _SUFFIX_MULTIPLIERS[match.group(2).lower()]))


def _parse(text: str) -> ContextReport | None:
    md = sanitize_report(text)

    model_match = _MODEL_RE.search(md)
    tokens_match = _TOKENS_RE.search(md)
    if model_match is None or tokens_match is None:
        return None

    model = model_match.group(1).strip().strip("*").strip()
    used_tokens = parse_token_count(tokens_match.group(1))
    max_tokens = parse_token_count(tokens_match.group(2))
    percentage = int(tokens_match.group(3))

    categories = []
    for match in _CATEGORY_ROW_RE.finditer(md):
        name = match.group(1).strip()
        if name == "Category" or name.startswith("---"):
            continue
        categories.append(ContextCategory(
            name=name,
            tokens=match.group(2).strip(),
            percentage=float(match.group(3)),
        ))

    if not categories:
        return None

    sub_tables = _parse_sub_tables(md)

    logger.debug(
        "Parsed context report: model=%s pct=%d categories=%d sub_tables=%d",
        model, percentage, len(categories), len(sub_tables),
    )
    return ContextReport(
        model=model,
        used_tokens=used_tokens,
        max_tokens=max_tokens,
        percentage=percentage,
        categories=tuple(categories),
        sub_tables=sub_tables,
    )


def _parse_sub_tables(md: str) -> tuple[SubTable, ...]:
    """Collect the titled three-column tables (MCP tools, memory files, ...)."""
    sections = list(_SECTION_RE.finditer(md))
    tables = []
    for i, section in enumerate(sections):
        title = section.group(1).strip()
        if title == CATEGORY_SECTION:
            continue
        end = sections[i + 1].start() if i + 1 < len(sections) else len(md)
        body = md[section.end():end]

        headers: tuple[str, ...] = ()
        rows = []
        for row in _TABLE_ROW_RE.finditer(body):
            cells = tuple(cell.strip() for cell in row.groups())
            if cells[0].startswith("---"):
                continue
            if not headers:
                headers = cells
            else:
                rows.append(cells)
        if rows:
            tables.append(SubTable(title=title, headers=headers, rows=tuple(rows)))
    return tuple(tables)


def compute_context_delta(prev: ContextReport, curr: ContextReport) -> ContextDelta:
    """Compare two reports: overall change plus every category that moved.

    Categories present on only one side count as 0% on the other.
    """
    prev_map = {c.name: c.percentage for c in prev.categories}
    curr_map = {c.name: c.percentage for c in curr.categories}

    deltas = []
    for name in dict.fromkeys([*prev_map, *curr_map]):
        before = prev_map.get(name, 0.0)
        after = curr_map.get(name, 0.0)
        if before != after:
            deltas.append(CategoryDelta(
                name=name,
                pct_before=before,
                pct_after=after,
                pct_delta=after - before,
            ))

    return ContextDelta(
        pct_delta=curr.percentage - prev.percentage,
        category_deltas=tuple(deltas),
    )
