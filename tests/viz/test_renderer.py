"""Tests for maze_doodles.viz.renderer module."""

from __future__ import annotations

from random import Random

import numpy as np

from maze_doodles.config.constants import BLOCK_GLYPH, HEDGE_GLYPHS, PENDING_GLYPH
from maze_doodles.config.types import AgentStyle, MazeStyle, WallStyle
from maze_doodles.domain.agent import Agent
from maze_doodles.domain.direction import (
    BORDERS_DOUBLE_SINGLE,
    BorderStyle,
    Direction,
    Directions,
)
from maze_doodles.domain.maze import Maze
from maze_doodles.viz.renderer import MazeRenderer, connectivity, hedge_glyph
from maze_doodles.viz.sink import BufferSink, Pen, Weight

SOLID = MazeStyle(WallStyle.SOLID, WallStyle.SOLID, color=7)


def _fixed_maze(fixed_order_rng) -> Maze:
    maze = Maze(2, 2)
    maze.build_all(fixed_order_rng)
    return maze


class TestConnectivity:
    def test_isolated_pixel(self) -> None:
        bitmap = np.zeros((3, 3), dtype=bool)
        bitmap[1, 1] = True
        assert connectivity(bitmap, 1, 1) == Directions.empty()

    def test_neighbors_and_edges(self) -> None:
        bitmap = np.ones((3, 3), dtype=bool)
        assert connectivity(bitmap, 1, 1) == Directions.all()
        assert connectivity(bitmap, 0, 0) == Directions.of(Direction.EAST, Direction.SOUTH)
        assert connectivity(bitmap, 2, 2) == Directions.of(Direction.WEST, Direction.NORTH)


class TestHedgeGlyph:
    def test_deterministic(self) -> None:
        assert hedge_glyph(5, 3, 4) == hedge_glyph(5, 3, 4)
        assert hedge_glyph(5, 3, 4) in HEDGE_GLYPHS

    def test_varies_with_seed(self) -> None:
        first = [hedge_glyph(1, x, 0) for x in range(40)]
        second = [hedge_glyph(2, x, 0) for x in range(40)]
        assert first != second


class TestGlyphs:
    def test_golden_two_by_two(self, fixed_order_rng) -> None:
        lines = MazeRenderer(SOLID).frame_lines(_fixed_maze(fixed_order_rng))
        assert lines == [
            "╶─┬─┐",
            "  │ │",
            "╷ ╵ ╵",
            "│    ",
            "└───╴",
        ]

    def test_wall_pen_uses_style_color(self, fixed_order_rng) -> None:
        maze = _fixed_maze(fixed_order_rng)
        renderer = MazeRenderer(SOLID.with_color(3))
        assert renderer.glyph_at(maze, 2, 0) == ("┬", Pen(3))

    def test_pending_cells_are_dimmed(self) -> None:
        maze = Maze(3, 3)
        maze.build_next(Random(0))
        renderer = MazeRenderer(SOLID)
        char, pen = renderer.glyph_at(maze, 5, 5)
        assert char == PENDING_GLYPH
        assert pen == Pen(7, Weight.DIM)
        assert renderer.glyph_at(maze, 1, 1) == (" ", None)

    def test_unbuilt_maze_is_all_pending(self) -> None:
        maze = Maze(2, 1)
        lines = MazeRenderer(SOLID).frame_lines(maze)
        assert lines[1] == f" {PENDING_GLYPH} {PENDING_GLYPH} "

    def test_block_style(self, built_maze) -> None:
        maze = built_maze(3, 3)
        renderer = MazeRenderer(MazeStyle(WallStyle.BLOCK, WallStyle.BLOCK))
        lines = renderer.frame_lines(maze)
        assert lines[0] == BLOCK_GLYPH * 7
        wall_chars = {c for line in lines for c in line} - {" "}
        assert wall_chars == {BLOCK_GLYPH}

    def test_hedge_inner_keeps_block_outer(self, built_maze) -> None:
        maze = built_maze(4, 4, seed=1)
        renderer = MazeRenderer(MazeStyle(WallStyle.BLOCK, WallStyle.HEDGE), hedge_seed=9)
        lines = renderer.frame_lines(maze)
        assert set(lines[0]) == {BLOCK_GLYPH}
        interior = {c for line in lines[1:-1] for c in line[1:-1]} - {" "}
        assert interior <= set(HEDGE_GLYPHS)

    def test_hedge_is_stable_across_frames(self, built_maze) -> None:
        maze = built_maze(5, 5, seed=2)
        renderer = MazeRenderer(MazeStyle(WallStyle.HEDGE, WallStyle.HEDGE), hedge_seed=42)
        assert renderer.frame_lines(maze) == renderer.frame_lines(maze)

    def test_outer_style_on_border(self, built_maze) -> None:
        maze = built_maze(3, 3)
        renderer = MazeRenderer(MazeStyle(WallStyle.DOUBLE, WallStyle.SOLID))
        lines = renderer.frame_lines(maze)
        assert lines[-1][0] == "╚"
        assert lines[3][0] == "║"


    def test_fill_styles_degrade_to_single_strokes_at_seam(self, built_maze) -> None:
        assert MazeRenderer._border_style(WallStyle.HEDGE) is BorderStyle.SINGLE
        assert MazeRenderer._border_style(WallStyle.BLOCK) is BorderStyle.SINGLE
        maze = built_maze(4, 4, seed=6)
        lines = MazeRenderer(MazeStyle(WallStyle.DOUBLE, WallStyle.BLOCK)).frame_lines(maze)
        left_edge = {line[0] for line in lines[1:-1]}
        assert left_edge <= set(BORDERS_DOUBLE_SINGLE)
        assert "║" in left_edge

class TestRender:
    def test_single_flush_per_frame(self, built_maze) -> None:
        sink = BufferSink()
        MazeRenderer(SOLID).render(built_maze(3, 2), (), sink)
        assert sink.flushes == 1
        assert len(sink.lines()) == 5
        assert all(len(line) == 7 for line in sink.lines())

    def test_agent_overrides_pixel(self, built_maze) -> None:
        maze = built_maze(3, 3)
        agent = Agent.create(maze, color=2)
        sink = BufferSink()
        MazeRenderer(SOLID, AgentStyle.SMILEY).render(maze, [agent], sink)
        assert sink.char_at(1, 1) == "☻"
        assert sink.pen_at(1, 1) == Pen(2, Weight.BOLD)

    def test_first_agent_wins_shared_pixel(self, built_maze) -> None:
        maze = built_maze(3, 3)
        first, second = Agent.create(maze, color=1), Agent.create(maze, color=5)
        sink = BufferSink()
        MazeRenderer(SOLID).render(maze, [first, second], sink)
        assert sink.pen_at(1, 1) == Pen(1, Weight.BOLD)

    def test_agent_past_border_is_not_drawn(self) -> None:
        maze = Maze(1, 1)
        maze.build_all(Random(0))
        agent = Agent.create(maze)
        agent.update(maze, Random(0))
        agent.update(maze, Random(0))
        lines = MazeRenderer(SOLID).frame_lines(maze, [agent])
        assert all(len(line) == 3 for line in lines)
        assert "☻" not in "".join(lines)
