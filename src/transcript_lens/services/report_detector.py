"""Route a report block to its parser by sniffing the anchor labels."""

import re

from transcript_lens.types.reports import ReportKind
from transcript_lens.utils.text_sanitizer import sanitize_report

_COST_ANCHOR_RE = re.compile(r'Total cost:\s*\$')
_CONTEXT_MODEL_RE = re.compile(r'\*{0,2}Model:')
_CONTEXT_TOKENS_RE = re.compile(r'\*{0,2}Tokens:')
_VERSION_RE = re.compile(r'^\s*Version\s+\S+:\s*$', re.MULTILINE)


def detect_report_kind(text: str) -> ReportKind:
    clean = sanitize_report(text)
    if _COST_ANCHOR_RE.search(clean):
        return ReportKind.COST
    if _CONTEXT_MODEL_RE.search(clean) and _CONTEXT_TOKENS_RE.search(clean):
        return ReportKind.CONTEXT
    if _VERSION_RE.search(clean):
        return ReportKind.RELEASE_NOTES
    return ReportKind.UNKNOWN
