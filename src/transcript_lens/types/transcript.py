"""Types for classified transcript lines."""

from dataclasses import dataclass
from enum import Enum


class StreamOrigin(str, Enum):
    STDOUT = "stdout"
    STDERR = "stderr"
    SYSTEM = "system"
    COMMAND = "command"


class ColorKey(str, Enum):
    TOOL = "tool"
    REASONING = "reasoning"
    ASSISTANT = "assistant"
    ERROR = "error"
    STDOUT = "stdout"
    STDERR = "stderr"
    SYSTEM = "system"
    COMMAND = "command"


@dataclass(frozen=True)
class ClassifiedLine:
    label: str
    text: str
    color_key: ColorKey
