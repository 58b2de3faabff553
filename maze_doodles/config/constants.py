"""Centralized constants for maze generation, solving and rendering.

All magic numbers and glyph literals that appear across multiple modules are
defined here. Consuming modules should import from this module rather than
defining their own inline literals.
"""

from __future__ import annotations

DEFAULT_AGENTS = 4
"""Default number of solver agents released into each maze."""

DEFAULT_WAIT_MS = 60
"""Default delay between frames in milliseconds."""

AGENT_SPAWN_INTERVAL = 63
"""Frames between the release of successive agents."""

NUM_COLORS = 8
"""Size of the terminal palette (color indices 0-7)."""

DEFAULT_WALL_COLOR = 7
"""Palette index used for walls when a style does not set one."""

PENDING_GLYPH = "∎"
"""Marker drawn (dimmed) on cells the generator has not reached yet."""

BLOCK_GLYPH = "█"
"""Single glyph used by the solid-fill wall style."""

BLANK_GLYPH = " "
"""Glyph for closed pixels."""

HEDGE_GLYPHS: tuple[str, ...] = (
    "⡟", "⡪", "⡯", "⡳", "⡵", "⡵", "⡷", "⡹", "⡺", "⡻", "⡼", "⡽", "⡾", "⡿", "⢏", "⢕", "⢗",
    "⢜", "⢝", "⢞", "⢟", "⢮", "⢯", "⢷", "⢻", "⢽", "⢾", "⢿", "⣎", "⣏", "⣕", "⣗", "⣝", "⣞",
    "⣟", "⣣", "⣧", "⣪", "⣫", "⣮", "⣯", "⣳", "⣵", "⣷", "⣹", "⣺", "⣻", "⣼", "⣽", "⣾", "⣿",
)  # fmt: skip
"""Character set for the textured (hedge) wall style."""
