"""Typer CLI for Transcript Lens: parse captured CLI output into JSON."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import orjson
import typer

from transcript_lens.services.context_parser import parse_context_report
from transcript_lens.services.cost_parser import MISSING_PLACEHOLDER, parse_cost_report
from transcript_lens.services.grid_allocator import GRID_COLUMNS, build_grid, to_rows
from transcript_lens.services.line_classifier import MAX_RECORD_PREVIEW, classify_lines
from transcript_lens.services.release_notes_parser import parse_changelog, parse_release_notes
from transcript_lens.services.report_detector import detect_report_kind

app = typer.Typer(
    name="transcript-lens",
    help="Turn coding-assistant CLI output into structured JSON view models.",
    no_args_is_help=True,
)

InputArg = Annotated[
    str,
    typer.Argument(help="File to read, or '-' for stdin"),
]


@app.callback()
def main(
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging")] = False,
) -> None:
    """Transcript Lens command line."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    try:
        return Path(source).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        _fail(f"Cannot read {source}: {exc.strerror or exc}")


def _emit(value) -> None:
    typer.echo(orjson.dumps(value, option=orjson.OPT_INDENT_2).decode("utf-8"))


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


@app.command()
def cost(
    source: InputArg = "-",
    placeholder: Annotated[
        str, typer.Option("--placeholder", help="Shown for missing durations"),
    ] = MISSING_PLACEHOLDER,
) -> None:
    """Parse a /cost summary."""
    report = parse_cost_report(_read(source), placeholder=placeholder)
    if report is None:
        _fail("No 'Total cost:' line found; not a cost report.")
    _emit(report)


@app.command()
def context(
    source: InputArg = "-",
    grid: Annotated[bool, typer.Option("--grid", help="Print the usage grid instead")] = False,
    columns: Annotated[int, typer.Option("--columns", min=1)] = GRID_COLUMNS,
) -> None:
    """Parse a /context usage report."""
    report = parse_context_report(_read(source))
    if report is None:
        _fail("Could not parse context usage report.")
    if grid:
        for row in to_rows(build_grid(report), columns):
            typer.echo(" ".join(cell.icon for cell in row))
        return
    _emit(report)


@app.command("release-notes")
def release_notes(
    source: InputArg = "-",
    changelog: Annotated[
        bool, typer.Option("--changelog", help="Input is CHANGELOG.md markdown"),
    ] = False,
) -> None:
    """Parse release notes into version entries."""
    text = _read(source)
    entries = parse_changelog(text) if changelog else parse_release_notes(text)
    _emit(entries)


@app.command()
def classify(
    source: InputArg = "-",
    stream: Annotated[str, typer.Option("--stream", help="Stream origin label")] = "stdout",
    max_preview: Annotated[int, typer.Option("--max-preview", min=1)] = MAX_RECORD_PREVIEW,
) -> None:
    """Classify transcript lines, one per input line."""
    lines = classify_lines(_read(source).splitlines(), stream, max_preview)
    _emit(lines)


@app.command()
def detect(source: InputArg = "-") -> None:
    """Print which kind of report a block is."""
    typer.echo(detect_report_kind(_read(source)).value)
