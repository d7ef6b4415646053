"""Tests for transcript_lens.services.cost_parser."""

import pytest

from transcript_lens.services.cost_parser import MISSING_PLACEHOLDER, parse_cost_report
from transcript_lens.types.reports import ModelUsage


# ---------------------------------------------------------------------------
# Full report
# ---------------------------------------------------------------------------

def test_parses_fixture(cost_text):
    report = parse_cost_report(cost_text)
    assert report is not None
    assert report.total_cost == "$12.3400"
    assert report.api_duration == "6m 19.7s"
    assert report.wall_duration == "1h 2m 3.4s"
    assert report.lines_added == 321
    assert report.lines_removed == 45


def test_models_in_source_order(cost_text):
    report = parse_cost_report(cost_text)
    assert [m.name for m in report.models] == ["claude-haiku-4-5", "claude-opus-4-6"]


def test_model_with_web_search(cost_text):
    opus = parse_cost_report(cost_text).models[1]
    assert opus == ModelUsage(
        name="claude-opus-4-6",
        input_tokens="1.2k",
        output_tokens="450k",
        cache_read_tokens="3.4m",
        cache_write_tokens="120.5k",
        cost="$12.31",
        web_search_tokens="3",
    )


def test_web_search_optional_per_line(cost_text):
    haiku = parse_cost_report(cost_text).models[0]
    assert haiku.web_search_tokens is None
    assert haiku.cost == "$0.0213"


# ---------------------------------------------------------------------------
# Anchor field
# ---------------------------------------------------------------------------

def test_total_cost_anchor():
    report = parse_cost_report("Total cost: $12.3400")
    assert report is not None
    assert report.total_cost == "$12.3400"


def test_missing_total_cost_returns_none():
    text = (
        "Total duration (API): 1m\n"
        "claude-opus-4-6: 1.2k input, 450k output, 0 cache read, 0 cache write ($0.28)\n"
    )
    assert parse_cost_report(text) is None


def test_malformed_total_cost_returns_none():
    assert parse_cost_report("Total cost: unknown") is None


@pytest.mark.parametrize("text", ["", None, "random terminal output"])
def test_non_report_returns_none(text):
    assert parse_cost_report(text) is None


# ---------------------------------------------------------------------------
# Optional fields
# ---------------------------------------------------------------------------

def test_missing_fields_default():
    report = parse_cost_report("Total cost: $0.00")
    assert report.api_duration == MISSING_PLACEHOLDER
    assert report.wall_duration == MISSING_PLACEHOLDER
    assert report.lines_added == 0
    assert report.lines_removed == 0
    assert report.models == ()


def test_custom_placeholder():
    report = parse_cost_report("Total cost: $0.00", placeholder="n/a")
    assert report.api_duration == "n/a"


def test_singular_line_changes():
    report = parse_cost_report(
        "Total cost: $0.01\nTotal code changes: 1 line added, 0 lines removed"
    )
    assert (report.lines_added, report.lines_removed) == (1, 0)


def test_single_model_line():
    text = (
        "Total cost: $0.28\n"
        "Usage by model:\n"
        "claude-opus-4-6: 1.2k input, 450k output, 0 cache read, 0 cache write ($0.28)\n"
    )
    report = parse_cost_report(text)
    assert len(report.models) == 1
    usage = report.models[0]
    assert usage.name == "claude-opus-4-6"
    assert usage.web_search_tokens is None
    assert usage.cost == "$0.28"


def test_wrapped_in_command_stdout_tag():
    text = "<local-command-stdout>Total cost: $3.21\nTotal duration (wall): 5s</local-command-stdout>"
    report = parse_cost_report(text)
    assert report.total_cost == "$3.21"
    assert report.wall_duration == "5s"
