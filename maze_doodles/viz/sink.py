"""Output-sink and terminal protocols plus an in-memory sink.

The renderer and the frame loop only talk to these protocols, so the same
code drives a curses screen, a text dump or a test buffer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeAlias


class SinkError(RuntimeError):
    """Writing to the output sink failed; the current run cannot continue."""


class Weight(Enum):
    NORMAL = "normal"
    BOLD = "bold"
    DIM = "dim"


@dataclass(frozen=True)
class Pen:
    """Color index (0-7) and weight for one written glyph."""

    color: int
    weight: Weight = Weight.NORMAL


# ---------------------------------------------------------------------------
# Frame-wait results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Continue:
    """The frame delay elapsed (or a non-exit key was pressed)."""


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Exit:
    """The user asked to quit."""


WaitResult: TypeAlias = Continue | Resize | Exit


class GlyphSink(Protocol):
    def move_to(self, x: int, y: int) -> None: ...

    def write(self, char: str, pen: Pen | None = None) -> None: ...

    def flush(self) -> None: ...


class Terminal(Protocol):
    def size(self) -> tuple[int, int]:
        """Current (columns, rows)."""
        ...

    def clear(self) -> None: ...

    def wait(self) -> WaitResult: ...


@dataclass
class BufferSink:
    """Sink that records glyphs in a dict keyed by (x, y)."""

    cells: dict[tuple[int, int], tuple[str, Pen | None]] = field(default_factory=dict)
    cursor: tuple[int, int] = (0, 0)
    flushes: int = 0

    def move_to(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def write(self, char: str, pen: Pen | None = None) -> None:
        self.cells[self.cursor] = (char, pen)
        x, y = self.cursor
        self.cursor = (x + 1, y)

    def flush(self) -> None:
        self.flushes += 1

    def char_at(self, x: int, y: int) -> str:
        return self.cells.get((x, y), (" ", None))[0]

    def pen_at(self, x: int, y: int) -> Pen | None:
        return self.cells.get((x, y), (" ", None))[1]

    def lines(self) -> list[str]:
        """Frame contents as text, one string per row."""
        if not self.cells:
            return []
        width = max(x for x, _ in self.cells) + 1
        height = max(y for _, y in self.cells) + 1
        return ["".join(self.char_at(x, y) for x in range(width)) for y in range(height)]
