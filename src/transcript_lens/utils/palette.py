"""Color and icon lookup tables for parsed view models.

Tables are immutable values passed into the allocator and the Qt models, so
the parsing layer never depends on global display state.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from transcript_lens.types.transcript import ColorKey


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class CategoryPalette:
    colors: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    icons: Mapping[str, str] = field(default_factory=lambda: _frozen({}))
    default_color: str = "#9ca3af"
    default_icon: str = "⛁"

    def color_for(self, category: str) -> str:
        return self.colors.get(category, self.default_color)

    def icon_for(self, category: str) -> str:
        return self.icons.get(category, self.default_icon)


DEFAULT_CATEGORY_PALETTE = CategoryPalette(
    colors=_frozen({
        "System prompt": "#a78bfa",
        "System tools": "#f87171",
        "System tools (deferred)": "#fb923c",
        "MCP tools": "#34d399",
        "MCP tools (deferred)": "#2dd4bf",
        "Custom agents": "#60a5fa",
        "Memory files": "#fbbf24",
        "Skills": "#facc15",
        "Messages": "#f472b6",
        "Free space": "#6b7280",
        "Autocompact buffer": "#4b5563",
    }),
    icons=_frozen({
        "Free space": "▢",
        "Autocompact buffer": "⊠",
    }),
)


@dataclass(frozen=True)
class StreamPalette:
    colors: Mapping[ColorKey, str] = field(default_factory=lambda: _frozen({}))
    default_color: str = "#d1d5db"

    def color_for(self, key: ColorKey) -> str:
        return self.colors.get(key, self.default_color)


DEFAULT_STREAM_PALETTE = StreamPalette(
    colors=_frozen({
        ColorKey.TOOL: "#60a5fa",
        ColorKey.REASONING: "#c084fc",
        ColorKey.ASSISTANT: "#4ade80",
        ColorKey.ERROR: "#f87171",
        ColorKey.STDOUT: "#d1d5db",
        ColorKey.STDERR: "#fb923c",
        ColorKey.SYSTEM: "#9ca3af",
        ColorKey.COMMAND: "#facc15",
    }),
)
