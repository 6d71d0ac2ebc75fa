# SPDX-License-Identifier: MIT
"""Console output abstraction.

Services and commands print through ``ConsoleProtocol`` so they never touch
Rich directly. ``RichConsole`` is used at runtime; ``MockConsole`` records
output for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]

type Segment = tuple[str, Style]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()  # green, passing check name
    ERROR = auto()  # red, failing check name
    WARNING = auto()  # yellow, failure detail
    DIM = auto()  # muted detail text
    BOLD = auto()

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling."""
        ...

    def print_segments(self, *segments: Segment) -> None:
        """Print one line assembled from separately styled segments."""
        ...

    def error(self, message: str) -> None:
        """Print an error message to stderr."""
        ...

    def newline(self) -> None:
        """Print an empty line."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Messages are rendered as ``Text`` rather than markup, so brackets in
    paths or environment values are printed literally. Lines are never
    wrapped at the terminal width; one result stays on one line.
    """

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(highlight=False, soft_wrap=True)
        self._stderr = Console(stderr=True, highlight=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red",
            Style.WARNING: "yellow",
            Style.DIM: "dim",
            Style.BOLD: "bold",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        from rich.text import Text

        self._console.print(Text(message, style=self._style_map.get(style, "")))

    def print_segments(self, *segments: Segment) -> None:
        from rich.text import Text

        line = Text.assemble(*((text, self._style_map.get(style, "")) for text, style in segments))
        self._console.print(line)

    def error(self, message: str) -> None:
        from rich.text import Text

        self._stderr.print(Text(message, style="red bold"))

    def newline(self) -> None:
        self._console.print()


@dataclass(frozen=True, slots=True)
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    segments: tuple[Segment, ...] = ()


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def print_segments(self, *segments: Segment) -> None:
        message = "".join(text for text, _ in segments)
        self.outputs.append(OutputRecord(message, Style.DEFAULT, tuple(segments)))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.ERROR))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
