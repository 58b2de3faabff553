"""Resolve maze bitmap pixels and agents into styled glyphs.

A wall pixel's glyph depends on which of its four bitmap neighbors are also
walls (the connectivity mask) and on the wall style of its region: pixels on
the bitmap border use the outer style, all others the inner style. Fill
styles skip the box-drawing lookup: ``BLOCK`` draws one fixed glyph and
``HEDGE`` picks from a character set by hashing the pixel coordinates with a
per-run seed, so an unchanged maze redraws identically every frame.
"""

from __future__ import annotations

import hashlib
from collections.abc import Sequence

import numpy as np

from maze_doodles.config.constants import (
    BLANK_GLYPH,
    BLOCK_GLYPH,
    HEDGE_GLYPHS,
    NUM_COLORS,
    PENDING_GLYPH,
)
from maze_doodles.config.types import AgentStyle, MazeStyle, WallStyle
from maze_doodles.domain.agent import Agent
from maze_doodles.domain.direction import BorderStyle, Direction, Directions, border_glyph
from maze_doodles.domain.maze import Maze
from maze_doodles.viz.sink import BufferSink, GlyphSink, Pen, Weight

Glyph = tuple[str, Pen | None]

_BORDER_STYLES: dict[WallStyle, BorderStyle] = {
    WallStyle.SOLID: BorderStyle.SINGLE,
    WallStyle.CURVED: BorderStyle.CURVED,
    WallStyle.DOUBLE: BorderStyle.DOUBLE,
    WallStyle.BOLD: BorderStyle.BOLD,
}

_BLANK: Glyph = (BLANK_GLYPH, None)


def connectivity(bitmap: np.ndarray, x: int, y: int) -> Directions:
    """Directions in which the pixel at (x, y) touches another wall pixel."""
    height, width = bitmap.shape
    mask = Directions.empty()
    if y > 0 and bitmap[y - 1, x]:
        mask |= Direction.NORTH
    if y + 1 < height and bitmap[y + 1, x]:
        mask |= Direction.SOUTH
    if x > 0 and bitmap[y, x - 1]:
        mask |= Direction.WEST
    if x + 1 < width and bitmap[y, x + 1]:
        mask |= Direction.EAST
    return mask


def hedge_glyph(seed: int, x: int, y: int) -> str:
    """Deterministic textured glyph for a pixel."""
    digest = hashlib.sha256(f"{seed}:{x}:{y}".encode()).digest()
    return HEDGE_GLYPHS[int.from_bytes(digest[:8], "big") % len(HEDGE_GLYPHS)]


class MazeRenderer:
    """Draws a maze and its agents through a ``GlyphSink``."""

    def __init__(
        self,
        maze_style: MazeStyle,
        agent_style: AgentStyle = AgentStyle.SMILEY,
        hedge_seed: int = 0,
    ) -> None:
        self.maze_style = maze_style
        self.agent_style = agent_style
        self.hedge_seed = hedge_seed
        self._wall_pen = Pen(maze_style.color)
        self._pending_pen = Pen(maze_style.color, Weight.DIM)

    def glyph_at(self, maze: Maze, x: int, y: int) -> Glyph:
        """Glyph for bitmap pixel (x, y) ignoring agents."""
        bitmap = maze.bitmap
        if not bitmap[y, x]:
            if x % 2 == 1 and y % 2 == 1:
                cell_x, cell_y = (x - 1) // 2, (y - 1) // 2
                if not maze.cell(cell_x, cell_y).visited:
                    return PENDING_GLYPH, self._pending_pen
            return _BLANK

        height, width = bitmap.shape
        x_border = x == 0 or x + 1 == width
        y_border = y == 0 or y + 1 == height
        on_border = x_border or y_border
        region_style = self.maze_style.outer if on_border else self.maze_style.inner

        if region_style is WallStyle.BLOCK:
            return BLOCK_GLYPH, self._wall_pen
        if region_style is WallStyle.HEDGE:
            return hedge_glyph(self.hedge_seed, x, y), self._wall_pen

        vertical = self.maze_style.outer if x_border else self.maze_style.inner
        horizontal = self.maze_style.outer if y_border else self.maze_style.inner
        glyph = border_glyph(
            connectivity(bitmap, x, y),
            self._border_style(vertical),
            self._border_style(horizontal),
        )
        return glyph, self._wall_pen

    def agent_glyph(self, agent: Agent) -> Glyph:
        return agent.glyph(self.agent_style), Pen(agent.color % NUM_COLORS, Weight.BOLD)

    def render(self, maze: Maze, agents: Sequence[Agent], sink: GlyphSink) -> None:
        """Write one full frame; the first agent listed wins a shared pixel."""
        occupied: dict[tuple[int, int], Agent] = {}
        for agent in agents:
            occupied.setdefault(agent.render_position, agent)

        bmp_width, bmp_height = maze.bitmap_size
        for y in range(bmp_height):
            sink.move_to(0, y)
            for x in range(bmp_width):
                agent = occupied.get((x, y))
                if agent is not None:
                    char, pen = self.agent_glyph(agent)
                else:
                    char, pen = self.glyph_at(maze, x, y)
                sink.write(char, pen)
        sink.flush()

    def frame_lines(self, maze: Maze, agents: Sequence[Agent] = ()) -> list[str]:
        """Render into memory and return the frame as text rows."""
        sink = BufferSink()
        self.render(maze, agents, sink)
        return sink.lines()

    @staticmethod
    def _border_style(style: WallStyle) -> BorderStyle:
        # A fill style in the other region degrades to thin lines at the seam.
        if style.is_fill:
            return BorderStyle.SINGLE
        return _BORDER_STYLES[style]
