"""Strip terminal markup from captured CLI text before parsing."""

import re

# SGR sequences only: ESC [ params m
_ANSI_SGR_RE = re.compile(r'\x1b\[[0-9;]*m')
_ANSI_ANY_RE = re.compile(r'\x1b\[')

# Slash-command output is wrapped in this tag when it comes from a session log
_LOCAL_STDOUT_RE = re.compile(
    r'<local-command-stdout>(.*?)</local-command-stdout>',
    re.DOTALL,
)


def strip_ansi(raw: str) -> str:
    """Remove every ANSI color sequence, leaving all other characters intact."""
    if not raw:
        return ""
    text = raw
    # Removing one sequence can splice two fragments into a new one
    while True:
        text, count = _ANSI_SGR_RE.subn("", text)
        if count == 0:
            return text


def has_ansi_codes(text: str) -> bool:
    return bool(text) and _ANSI_ANY_RE.search(text) is not None


def unwrap_command_stdout(text: str) -> str:
    """Return the inner text of <local-command-stdout> blocks, or text unchanged."""
    if not text:
        return ""
    blocks = _LOCAL_STDOUT_RE.findall(text)
    if not blocks:
        return text
    return "\n".join(blocks)


def sanitize_report(text: str) -> str:
    """Prepare a report block for the parsers."""
    return strip_ansi(unwrap_command_stdout(text))
