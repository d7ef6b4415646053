"""Parsers for release notes and changelog text."""

import logging
import re

from transcript_lens.types.reports import ReleaseNotesEntry
from transcript_lens.utils.text_sanitizer import sanitize_report

logger = logging.getLogger(__name__)

_VERSION_HEADER_RE = re.compile(r'^Version\s+(\S+):$')
BULLET_GLYPHS = ("•", "-", "*", "·", "◦")
_GLYPH_CHARS = "".join(BULLET_GLYPHS)


def parse_release_notes(text: str) -> list[ReleaseNotesEntry]:
    """Parse `/release-notes` output.

    ``Version X:`` opens an entry and following bullet lines become its
    changes. Other lines are ignored, and a version with no changes is
    dropped.
    """
    entries: list[ReleaseNotesEntry] = []
    version = ""
    changes: list[str] = []

    for raw_line in sanitize_report(text).splitlines():
        line = raw_line.strip()
        if not line:
            continue

        header = _VERSION_HEADER_RE.match(line)
        if header:
            _flush(entries, version, changes)
            version = header.group(1)
            changes = []
            continue

        if version and line.startswith(BULLET_GLYPHS):
            change = line[1:].strip()
            # Rule lines such as "---" are not changes
            if change.strip(_GLYPH_CHARS + " "):
                changes.append(change)

    _flush(entries, version, changes)
    logger.debug("Parsed %d release notes entries", len(entries))
    return entries


def parse_changelog(text: str) -> list[ReleaseNotesEntry]:
    """Parse CHANGELOG.md text: ``## X.Y.Z`` or ``## X.Y.Z - Date`` sections."""
    entries: list[ReleaseNotesEntry] = []
    version = ""
    date = ""
    changes: list[str] = []

    for raw_line in sanitize_report(text).splitlines():
        line = raw_line.strip()

        if line.startswith("## "):
            _flush(entries, version, changes, date)
            header = line[3:].strip()
            version, sep, date = header.partition(" - ")
            version = version.strip()
            date = date.strip() if sep else ""
            changes = []
        elif line.startswith(("- ", "* ")):
            change = line[2:].strip()
            if change:
                changes.append(change)

    _flush(entries, version, changes, date)
    return entries


def _flush(
    entries: list[ReleaseNotesEntry],
    version: str,
    changes: list[str],
    date: str = "",
) -> None:
    if version and changes:
        entries.append(ReleaseNotesEntry(version=version, changes=tuple(changes), date=date))
