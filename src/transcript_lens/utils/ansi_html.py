"""Lightweight ANSI escape code to HTML converter for raw terminal lines.

Handles SGR codes used by coding-assistant CLIs: the 8 standard colors and
their bright variants, 256-color indexes, bold, dim, italic, underline and
reset. Other CSI sequences (cursor movement etc.) are dropped.
"""

import html
import re

_SGR_RE = re.compile(r'\x1b\[([0-9;]*)m')
_OTHER_CSI_RE = re.compile(r'\x1b\[[0-9;]*[A-HJKSTfhilmnsu]')

FG_COLORS: dict[int, str] = {
    30: "#6b7280",  # black, lifted for dark backgrounds
    31: "#ef4444",
    32: "#22c55e",
    33: "#eab308",
    34: "#3b82f6",
    35: "#a855f7",
    36: "#06b6d4",
    37: "#d1d5db",
    90: "#9ca3af",
    91: "#f87171",
    92: "#4ade80",
    93: "#facc15",
    94: "#60a5fa",
    95: "#c084fc",
    96: "#22d3ee",
    97: "#f3f4f6",
}

BG_COLORS: dict[int, str] = {
    40: "#374151",
    41: "#991b1b",
    42: "#166534",
    43: "#854d0e",
    44: "#1e3a5f",
    45: "#6b21a8",
    46: "#155e75",
    47: "#e5e7eb",
    100: "#4b5563",
    101: "#b91c1c",
    102: "#15803d",
    103: "#a16207",
    104: "#1d4ed8",
    105: "#7e22ce",
    106: "#0891b2",
    107: "#f9fafb",
}

_BASE_16 = (
    "#000000", "#aa0000", "#00aa00", "#aa5500",
    "#0000aa", "#aa00aa", "#00aaaa", "#aaaaaa",
    "#555555", "#ff5555", "#55ff55", "#ffff55",
    "#5555ff", "#ff55ff", "#55ffff", "#ffffff",
)

_FLAG_CODES = {1: "bold", 2: "dim", 3: "italic", 4: "underline"}


def color_256_to_hex(n: int) -> str:
    """Map a 256-color palette index to a hex color."""
    if n < 16:
        return _BASE_16[n] if n >= 0 else "#aaaaaa"
    if n < 232:
        idx = n - 16
        r, g, b = idx // 36, (idx % 36) // 6, idx % 6
        return "#" + "".join(f"{0 if v == 0 else 55 + v * 40:02x}" for v in (r, g, b))
    level = 8 + (min(n, 255) - 232) * 10
    return f"#{level:02x}{level:02x}{level:02x}"


def _apply_codes(style: dict, codes: list[int]) -> None:
    i = 0
    while i < len(codes):
        code = codes[i]
        if code == 0:
            style.clear()
        elif code in _FLAG_CODES:
            style[_FLAG_CODES[code]] = True
        elif code == 22:
            style.pop("bold", None)
            style.pop("dim", None)
        elif code == 23:
            style.pop("italic", None)
        elif code == 24:
            style.pop("underline", None)
        elif code == 39:
            style.pop("fg", None)
        elif code == 49:
            style.pop("bg", None)
        elif code in FG_COLORS:
            style["fg"] = FG_COLORS[code]
        elif code in BG_COLORS:
            style["bg"] = BG_COLORS[code]
        elif code in (38, 48) and i + 1 < len(codes) and codes[i + 1] == 5:
            index = codes[i + 2] if i + 2 < len(codes) else 0
            style["fg" if code == 38 else "bg"] = color_256_to_hex(index)
            i += 2
        i += 1


def _style_attr(style: dict) -> str:
    parts = []
    if "fg" in style:
        parts.append(f"color:{style['fg']}")
    if "bg" in style:
        parts.append(f"background-color:{style['bg']}")
    if style.get("bold"):
        parts.append("font-weight:bold")
    if style.get("dim"):
        parts.append("opacity:0.6")
    if style.get("italic"):
        parts.append("font-style:italic")
    if style.get("underline"):
        parts.append("text-decoration:underline")
    return ";".join(parts)


def ansi_to_html(text: str) -> str:
    """Convert ANSI-colored text to escaped HTML with inline-styled spans."""
    if not text:
        return ""

    style: dict = {}
    out: list[str] = []
    span_open = False
    last = 0

    for match in _SGR_RE.finditer(text):
        before = text[last:match.start()]
        if before:
            out.append(html.escape(before, quote=True))
        last = match.end()

        params = match.group(1)
        codes = [int(c) if c else 0 for c in params.split(";")] if params else [0]
        _apply_codes(style, codes)

        if span_open:
            out.append("</span>")
            span_open = False
        attr = _style_attr(style)
        if attr:
            out.append(f'<span style="{attr}">')
            span_open = True

    rest = text[last:]
    if rest:
        out.append(html.escape(rest, quote=True))
    if span_open:
        out.append("</span>")

    return _OTHER_CSI_RE.sub("", "".join(out))
