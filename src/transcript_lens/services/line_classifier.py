"""Classify live transcript lines as structured events or raw stream output.

Each line is handled on its own. A line holding a single JSON record with a
recognised type becomes one tagged line; anything else is shown as output of
the stream it arrived on.
"""

import logging
from typing import Iterable

import orjson

from transcript_lens.types.transcript import ClassifiedLine, ColorKey, StreamOrigin
from transcript_lens.utils.text_sanitizer import strip_ansi

logger = logging.getLogger(__name__)

MAX_RECORD_PREVIEW = 200

# Keys that may carry the record's event type, checked in order
_TYPE_KEYS = ("type", "event", "kind")

# (substrings of the type, label, color key, content fields, fall back to whole record)
_RECORD_RULES: tuple[tuple[tuple[str, ...], str, ColorKey, tuple[str, ...], bool], ...] = (
    (("command", "tool"), "[tool]", ColorKey.TOOL, ("item", "payload", "command"), True),
    (("reasoning",), "[reasoning]", ColorKey.REASONING, ("summary", "text"), True),
    (("message", "assistant"), "[assistant]", ColorKey.ASSISTANT, ("text", "content"), False),
    (("error",), "[error]", ColorKey.ERROR, ("message",), True),
)

_STREAM_COLORS = {
    StreamOrigin.STDOUT.value: ColorKey.STDOUT,
    StreamOrigin.STDERR.value: ColorKey.STDERR,
    StreamOrigin.SYSTEM.value: ColorKey.SYSTEM,
    StreamOrigin.COMMAND.value: ColorKey.COMMAND,
}


def decode_record(line: str) -> dict | None:
    """Decode a line holding exactly one JSON object, else None.

    Records split across physical lines are not reassembled.
    """
    candidate = strip_ansi(line).strip()
    if not candidate.startswith("{") or "\n" in candidate:
        return None
    try:
        record = orjson.loads(candidate)
    except orjson.JSONDecodeError:
        return None
    return record if isinstance(record, dict) else None


def record_type(record: dict) -> str:
    for key in _TYPE_KEYS:
        value = record.get(key)
        if isinstance(value, str) and value:
            return value
    return ""


def classify_record(record: dict, max_preview: int = MAX_RECORD_PREVIEW) -> ClassifiedLine | None:
    """Map a decoded record to a tagged line, or None for unrecognised types."""
    type_name = record_type(record).lower()
    if not type_name:
        return None

    for needles, label, color_key, fields, whole_record in _RECORD_RULES:
        if not any(needle in type_name for needle in needles):
            continue
        for name in fields:
            value = record.get(name)
            if value is not None:
                return ClassifiedLine(label, _as_text(value, max_preview), color_key)
        text = _as_text(record, max_preview) if whole_record else ""
        return ClassifiedLine(label, text, color_key)
    return None


def classify_stream_text(text: str, stream: str = StreamOrigin.STDOUT.value) -> list[ClassifiedLine]:
    """Tag each non-blank sub-line of raw output with its stream origin."""
    # StreamOrigin members format as "StreamOrigin.X" on newer interpreters
    stream = getattr(stream, "value", stream)
    label = f"[{stream}]"
    color_key = _STREAM_COLORS.get(stream, ColorKey.STDOUT)
    return [
        ClassifiedLine(label, sub_line, color_key)
        for sub_line in text.splitlines()
        if sub_line.strip()
    ]


def classify_line(
    line: str,
    stream: str = StreamOrigin.STDOUT.value,
    max_preview: int = MAX_RECORD_PREVIEW,
) -> list[ClassifiedLine]:
    """Classify one transcript line. Blank input gives an empty list."""
    if not line or not line.strip():
        return []
    trimmed = line.strip()

    try:
        record = decode_record(trimmed)
        if record is not None:
            classified = classify_record(record, max_preview)
            # Wrapper events such as item.completed carry the real type on the item
            if classified is None and isinstance(record.get("item"), dict):
                classified = classify_record(record["item"], max_preview)
            if classified is not None:
                return [classified]
    except Exception:
        logger.debug("Structured classification failed, treating as raw text", exc_info=True)

    return classify_stream_text(trimmed, stream)


def classify_lines(
    lines: Iterable[str],
    stream: str = StreamOrigin.STDOUT.value,
    max_preview: int = MAX_RECORD_PREVIEW,
) -> list[ClassifiedLine]:
    """Classify lines in arrival order."""
    result: list[ClassifiedLine] = []
    for line in lines:
        result.extend(classify_line(line, stream, max_preview))
    return result


def _as_text(value, max_preview: int) -> str:
    if isinstance(value, str):
        return value
    return orjson.dumps(value).decode("utf-8")[:max_preview]
