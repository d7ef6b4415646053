"""Turn a context report's category percentages into a grid of cells.

The grid has one cell per percent (100 cells, 10 per row). Every category but
the last gets its rounded percentage, bumped to one cell when a non-zero share
would otherwise disappear. The last category takes whatever remains, so the
total is exact but all rounding drift lands on it. Category order therefore
changes the result and must be the order the CLI printed.
"""

import logging
import math
from typing import Sequence

from transcript_lens.types.context import ContextCategory, ContextReport, GridCell
from transcript_lens.utils.palette import CategoryPalette, DEFAULT_CATEGORY_PALETTE

logger = logging.getLogger(__name__)

GRID_CELLS = 100
GRID_COLUMNS = 10


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def allocate_counts(
    categories: Sequence[ContextCategory],
    total_cells: int = GRID_CELLS,
) -> list[tuple[ContextCategory, int]]:
    """Compute the cell count per category, in input order.

    The last count is ``total_cells`` minus the running total and is not
    clamped: with many tiny categories ahead of it, it can go negative.
    """
    allocations: list[tuple[ContextCategory, int]] = []
    running_total = 0
    last_index = len(categories) - 1

    for i, category in enumerate(categories):
        if i == last_index:
            count = total_cells - running_total
        else:
            count = _round_half_up(category.percentage)
            if count == 0 and category.percentage > 0:
                count = 1
        running_total += count
        allocations.append((category, count))

    if allocations and allocations[-1][1] < 0:
        logger.debug(
            "Last grid category %r allocated %d cells",
            allocations[-1][0].name, allocations[-1][1],
        )
    return allocations


def build_grid(
    report: ContextReport,
    palette: CategoryPalette = DEFAULT_CATEGORY_PALETTE,
    total_cells: int = GRID_CELLS,
) -> list[GridCell]:
    """Expand a report's categories into a flat list of colored cells."""
    cells: list[GridCell] = []
    for category, count in allocate_counts(report.categories, total_cells):
        cell = GridCell(
            icon=palette.icon_for(category.name),
            color=palette.color_for(category.name),
            category=category.name,
        )
        # Negative counts contribute nothing
        cells.extend([cell] * count)
    return cells


def to_rows(cells: Sequence[GridCell], cols: int = GRID_COLUMNS) -> list[list[GridCell]]:
    """Slice cells into rows of ``cols``; the last row may be short."""
    if cols <= 0:
        raise ValueError("cols must be positive")
    return [list(cells[i:i + cols]) for i in range(0, len(cells), cols)]
