"""Context usage types: parsed report, deltas and grid cells."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContextCategory:
    name: str
    tokens: str
    percentage: float


@dataclass(frozen=True)
class SubTable:
    title: str
    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class ContextReport:
    """Parsed `/context` output.

    Category order is kept exactly as printed by the CLI; the grid allocator
    gives the rounding remainder to whichever category comes last.
    """
    model: str
    used_tokens: int
    max_tokens: int
    percentage: int
    categories: tuple[ContextCategory, ...] = ()
    sub_tables: tuple[SubTable, ...] = ()


@dataclass(frozen=True)
class CategoryDelta:
    name: str
    pct_before: float
    pct_after: float
    pct_delta: float


@dataclass(frozen=True)
class ContextDelta:
    pct_delta: int
    category_deltas: tuple[CategoryDelta, ...] = ()


@dataclass(frozen=True)
class GridCell:
    icon: str
    color: str
    category: str
