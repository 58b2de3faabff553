"""Style enums, render presets and run configuration dataclasses.

All frozen dataclasses that parameterise a generate-and-solve run live here.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from random import Random

from maze_doodles.config.constants import (
    DEFAULT_AGENTS,
    DEFAULT_WAIT_MS,
    DEFAULT_WALL_COLOR,
    NUM_COLORS,
)

__all__ = [
    "AGENT_STYLES",
    "AgentStyle",
    "MAZE_STYLES",
    "MazeStyle",
    "RunConfig",
    "WallStyle",
]


# ---------------------------------------------------------------------------
# Style enums
# ---------------------------------------------------------------------------


class WallStyle(Enum):
    """Visual treatment of a wall pixel."""

    SOLID = "solid"
    CURVED = "curved"
    DOUBLE = "double"
    BOLD = "bold"
    BLOCK = "block"
    HEDGE = "hedge"

    @property
    def is_fill(self) -> bool:
        """True for styles that bypass the box-drawing lookup."""
        return self in (WallStyle.BLOCK, WallStyle.HEDGE)


class AgentStyle(Enum):
    """Glyph family used to draw solver agents."""

    SMILEY = "smiley"
    INCHWORM = "inchworm"
    TURTLE = "turtle"


def _check_color(color: int) -> None:
    if not 0 <= color < NUM_COLORS:
        raise ValueError(f"color must be in [0, {NUM_COLORS - 1}]")


# ---------------------------------------------------------------------------
# Render presets
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MazeStyle:
    """Wall styles for the border ("outer") and interior ("inner") pixels."""

    outer: WallStyle
    inner: WallStyle
    color: int = DEFAULT_WALL_COLOR

    def __post_init__(self) -> None:
        _check_color(self.color)

    def with_color(self, color: int) -> MazeStyle:
        return replace(self, color=color)


MAZE_STYLES: tuple[MazeStyle, ...] = (
    MazeStyle(WallStyle.SOLID, WallStyle.SOLID),
    MazeStyle(WallStyle.BOLD, WallStyle.CURVED),
    MazeStyle(WallStyle.DOUBLE, WallStyle.DOUBLE),
    MazeStyle(WallStyle.BLOCK, WallStyle.BLOCK),
    MazeStyle(WallStyle.BLOCK, WallStyle.HEDGE),
    MazeStyle(WallStyle.HEDGE, WallStyle.HEDGE),
)

AGENT_STYLES: tuple[AgentStyle, ...] = (
    AgentStyle.SMILEY,
    AgentStyle.INCHWORM,
    AgentStyle.TURTLE,
)


# ---------------------------------------------------------------------------
# Run configuration
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Knobs for one terminal session of generate-and-solve runs.

    Style indices wrap modulo the number of presets. ``None`` means "pick at
    random for every new maze".
    """

    maze_style: int | None = None
    color: int | None = None
    agent_style: int | None = None
    agents: int = DEFAULT_AGENTS
    wait_ms: int = DEFAULT_WAIT_MS
    interactive: bool = False
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.agents < 1:
            raise ValueError("agents must be >= 1")
        if self.wait_ms < 0:
            raise ValueError("wait_ms must be >= 0")
        if self.color is not None:
            _check_color(self.color)
        if self.maze_style is not None and self.maze_style < 0:
            raise ValueError("maze_style must be >= 0")
        if self.agent_style is not None and self.agent_style < 0:
            raise ValueError("agent_style must be >= 0")

    def resolve_maze_style(self, rng: Random) -> MazeStyle:
        """Return the configured preset (or a random one) with its color applied."""
        index = self.maze_style
        if index is None:
            index = rng.randrange(len(MAZE_STYLES))
        style = MAZE_STYLES[index % len(MAZE_STYLES)]
        color = self.color if self.color is not None else rng.randrange(1, NUM_COLORS)
        return style.with_color(color)

    def resolve_agent_style(self, rng: Random) -> AgentStyle:
        index = self.agent_style
        if index is None:
            index = rng.randrange(len(AGENT_STYLES))
        return AGENT_STYLES[index % len(AGENT_STYLES)]
