"""Visualization layer: glyph rendering, output sinks and image themes.

The curses adapters (``viz.terminal``), image export (``viz.image``) and the
command line (``viz.cli``) are imported from their modules directly.
"""

from maze_doodles.viz.renderer import MazeRenderer, connectivity, hedge_glyph
from maze_doodles.viz.sink import (
    BufferSink,
    Continue,
    Exit,
    GlyphSink,
    Pen,
    Resize,
    SinkError,
    Terminal,
    WaitResult,
    Weight,
)
from maze_doodles.viz.theme import (
    DARK_THEME,
    DEFAULT_THEME,
    PAPER_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "BufferSink",
    "Continue",
    "DARK_THEME",
    "DEFAULT_THEME",
    "Exit",
    "GlyphSink",
    "MazeRenderer",
    "PAPER_THEME",
    "Pen",
    "REGISTERED_THEMES",
    "Resize",
    "SinkError",
    "Terminal",
    "Theme",
    "WaitResult",
    "Weight",
    "connectivity",
    "get_theme",
    "hedge_glyph",
]
