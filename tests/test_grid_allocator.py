"""Tests for transcript_lens.services.grid_allocator."""

import pytest

from transcript_lens.services.context_parser import parse_context_report
from transcript_lens.services.grid_allocator import (
    GRID_CELLS,
    allocate_counts,
    build_grid,
    to_rows,
)
from transcript_lens.types.context import ContextCategory, ContextReport
from transcript_lens.utils.palette import CategoryPalette, DEFAULT_CATEGORY_PALETTE


def _report(*categories: tuple[str, float]) -> ContextReport:
    return ContextReport(
        model="test",
        used_tokens=0,
        max_tokens=0,
        percentage=0,
        categories=tuple(ContextCategory(name, "", pct) for name, pct in categories),
    )


def _count(cells, name: str) -> int:
    return sum(1 for cell in cells if cell.category == name)


# ---------------------------------------------------------------------------
# Allocation policy
# ---------------------------------------------------------------------------

def test_exactly_100_cells():
    cells = build_grid(_report(("A", 33), ("B", 33), ("C", 34)))
    assert len(cells) == GRID_CELLS


def test_last_bucket_absorbs_remainder():
    cells = build_grid(_report(("A", 33.4), ("B", 33.4), ("C", 20.0)))
    assert _count(cells, "A") == 33
    assert _count(cells, "B") == 33
    assert _count(cells, "C") == 100 - 33 - 33


def test_last_bucket_absorbs_remainder_after_rounding_up():
    cells = build_grid(_report(("A", 33.5), ("B", 33.5), ("C", 33.0)))
    assert _count(cells, "A") == 34
    assert _count(cells, "B") == 34
    assert _count(cells, "C") == 32


def test_small_nonzero_forced_to_one():
    cells = build_grid(_report(("Tiny", 0.4), ("Rest", 99.6)))
    assert _count(cells, "Tiny") == 1
    assert _count(cells, "Rest") == 99


def test_zero_percentage_gets_no_cells():
    cells = build_grid(_report(("Empty", 0.0), ("Rest", 100.0)))
    assert _count(cells, "Empty") == 0
    assert len(cells) == 100


def test_source_order_matters():
    forward = allocate_counts(_report(("A", 10.6), ("B", 89.4)).categories)
    reverse = allocate_counts(_report(("B", 89.4), ("A", 10.6)).categories)
    assert [count for _, count in forward] == [11, 89]
    assert [count for _, count in reverse] == [89, 11]


def test_single_category_takes_all():
    assert allocate_counts(_report(("Only", 12.0)).categories)[0][1] == 100


def test_negative_last_bucket_is_not_clamped():
    categories = _report(*[(f"c{i}", 0.2) for i in range(101)], ("Last", 50.0)).categories
    counts = allocate_counts(categories)
    assert counts[-1][1] == 100 - 101
    cells = build_grid(_report(*[(c.name, c.percentage) for c in categories]))
    assert _count(cells, "Last") == 0
    assert len(cells) == 101


def test_empty_categories_give_empty_grid():
    cells = build_grid(_report())
    assert cells == []
    assert to_rows(cells) == []


def test_custom_total():
    cells = build_grid(_report(("A", 50.0), ("B", 50.0)), total_cells=120)
    assert _count(cells, "B") == 70


# ---------------------------------------------------------------------------
# Palette lookup
# ---------------------------------------------------------------------------

def test_cells_use_palette():
    cells = build_grid(_report(("System prompt", 50.0), ("Free space", 50.0)))
    assert cells[0].color == "#a78bfa"
    assert cells[0].icon == "⛁"
    assert cells[-1].color == "#6b7280"
    assert cells[-1].icon == "▢"


def test_unknown_category_falls_back():
    cells = build_grid(_report(("Mystery", 100.0)))
    assert cells[0].color == DEFAULT_CATEGORY_PALETTE.default_color
    assert cells[0].icon == DEFAULT_CATEGORY_PALETTE.default_icon


def test_injected_palette():
    palette = CategoryPalette(colors={"A": "#000001"}, icons={"A": "x"}, default_color="#fff")
    cells = build_grid(_report(("A", 50.0), ("B", 50.0)), palette=palette)
    assert (cells[0].color, cells[0].icon) == ("#000001", "x")
    assert cells[-1].color == "#fff"


def test_parsed_report_grid(context_text):
    cells = build_grid(parse_context_report(context_text))
    assert [_count(cells, n) for n in ("System prompt", "Messages", "MCP tools", "Free space")] == [
        6, 23, 4, 67,
    ]


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

def test_rows_of_ten():
    rows = to_rows(build_grid(_report(("A", 100.0))))
    assert len(rows) == 10
    assert all(len(row) == 10 for row in rows)


def test_short_last_row_not_padded():
    cells = build_grid(_report(("A", 50.0)), total_cells=25)
    rows = to_rows(cells)
    assert [len(row) for row in rows] == [10, 10, 5]


def test_rows_preserve_order():
    cells = build_grid(_report(("A", 5.0), ("B", 95.0)))
    rows = to_rows(cells, cols=4)
    assert [c.category for c in rows[0]] == ["A", "A", "A", "A"]
    assert [c.category for c in rows[1]] == ["A", "B", "B", "B"]


def test_invalid_columns():
    with pytest.raises(ValueError):
        to_rows([], cols=0)
