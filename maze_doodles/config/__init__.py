"""Configuration layer: constants, style presets and run config dataclasses."""

from maze_doodles.config.constants import (
    AGENT_SPAWN_INTERVAL,
    BLANK_GLYPH,
    BLOCK_GLYPH,
    DEFAULT_AGENTS,
    DEFAULT_WAIT_MS,
    DEFAULT_WALL_COLOR,
    HEDGE_GLYPHS,
    NUM_COLORS,
    PENDING_GLYPH,
)
from maze_doodles.config.types import (
    AGENT_STYLES,
    MAZE_STYLES,
    AgentStyle,
    MazeStyle,
    RunConfig,
    WallStyle,
)

__all__ = [
    "AGENT_SPAWN_INTERVAL",
    "AGENT_STYLES",
    "AgentStyle",
    "BLANK_GLYPH",
    "BLOCK_GLYPH",
    "DEFAULT_AGENTS",
    "DEFAULT_WAIT_MS",
    "DEFAULT_WALL_COLOR",
    "HEDGE_GLYPHS",
    "MAZE_STYLES",
    "MazeStyle",
    "NUM_COLORS",
    "PENDING_GLYPH",
    "RunConfig",
    "WallStyle",
]
