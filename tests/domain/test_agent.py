"""Tests for maze_doodles.domain.agent module."""

from __future__ import annotations

from random import Random

import pytest

from maze_doodles.config.types import AgentStyle
from maze_doodles.domain.agent import Agent, Halted, Junction, Moving, Thinking
from maze_doodles.domain.direction import Direction, Directions
from maze_doodles.domain.maze import Maze


def _run_to_halt(agent: Agent, maze: Maze, rng: Random) -> int:
    limit = 8 * maze.width * maze.height + 8
    ticks = 0
    while not agent.is_halted:
        assert ticks < limit, "agent failed to halt"
        agent.update(maze, rng)
        ticks += 1
    return ticks


class TestAgentCreate:
    def test_starts_thinking_at_entrance(self, built_maze) -> None:
        maze = built_maze(4, 4)
        agent = Agent.create(maze, color=3)
        assert agent.position == maze.entrance
        assert agent.state == Thinking()
        assert agent.color == 3
        assert agent.closed == set()
        assert len(agent.path) == 1

    def test_root_junction_offers_open_walls(self, built_maze) -> None:
        maze = built_maze(6, 5, seed=4)
        agent = Agent.create(maze)
        root = agent.path[0]
        assert root.came_from is None
        assert root.open == ~maze.walls(0, 0)
        assert Direction.WEST not in root.open
        assert Direction.NORTH not in root.open

    def test_fixed_order_two_by_two_root(self, fixed_order_rng) -> None:
        maze = Maze(2, 2)
        maze.build_all(fixed_order_rng)
        root = Agent.create(maze).path[0]
        boundary_free = Directions.of(Direction.EAST, Direction.SOUTH)
        assert root.open & ~boundary_free == Directions.empty()
        assert root.open == Directions.of(Direction.SOUTH)


class TestAgentTransitions:
    def test_one_by_one_exits_in_two_ticks(self) -> None:
        maze = Maze(1, 1)
        maze.build_all(Random(0))
        agent = Agent.create(maze)
        rng = Random(0)

        agent.update(maze, rng)
        assert agent.state == Moving(Direction.EAST)
        assert agent.facing is Direction.EAST

        agent.update(maze, rng)
        assert agent.state == Halted(exited=True)
        assert agent.position == (0, 0)
        assert agent.has_exited

    def test_halted_is_terminal(self) -> None:
        maze = Maze(1, 1)
        maze.build_all(Random(0))
        agent = Agent.create(maze)
        rng = Random(0)
        _run_to_halt(agent, maze, rng)
        steps = agent.steps
        agent.update(maze, rng)
        assert agent.state == Halted(exited=True)
        assert agent.steps == steps

    def test_drawn_direction_is_removed_from_junction(self, built_maze) -> None:
        maze = built_maze(5, 5, seed=7)
        agent = Agent.create(maze)
        before = agent.path[-1].open
        agent.update(maze, Random(1))
        assert isinstance(agent.state, Moving)
        assert agent.path[-1].open == before.without(agent.state.direction)

    def test_new_junction_excludes_way_back(self, built_maze) -> None:
        maze = built_maze(5, 5, seed=7)
        agent = Agent.create(maze)
        rng = Random(1)
        agent.update(maze, rng)
        direction = agent.state.direction
        agent.update(maze, rng)
        junction = agent.path[-1]
        assert junction.came_from is direction.opposite
        assert direction.opposite not in junction.open

    def test_exhausted_junction_backtracks(self) -> None:
        maze = Maze(2, 1)
        maze.build_all(Random(0))
        agent = Agent(position=(1, 0), path=[Junction(Directions.empty(), Direction.WEST)])
        agent.path.insert(0, Junction(Directions.empty(), None))
        agent.update(maze, Random(0))
        assert agent.state == Moving(Direction.WEST)
        assert len(agent.path) == 1
        agent.update(maze, Random(0))
        assert agent.position == (0, 0)
        assert agent.state == Thinking()

    def test_exhausted_root_halts_without_exit(self) -> None:
        maze = Maze(2, 2)
        maze.build_all(Random(0))
        agent = Agent(position=(0, 0), path=[Junction(Directions.empty(), None)])
        agent.update(maze, Random(0))
        assert agent.state == Halted(exited=False)
        assert not agent.has_exited


class TestAgentSolves:
    @pytest.mark.parametrize("width,height", [(1, 1), (1, 5), (5, 1), (2, 2), (7, 4), (15, 10)])
    @pytest.mark.parametrize("seed", range(4))
    def test_always_exits_generated_maze(self, width: int, height: int, seed: int) -> None:
        maze = Maze(width, height)
        maze.build_all(Random(seed))
        agent = Agent.create(maze)
        _run_to_halt(agent, maze, Random(seed + 100))
        assert agent.has_exited
        assert agent.position == maze.exit
        assert agent.facing is Direction.EAST

    @pytest.mark.parametrize("seed", range(6))
    def test_thinking_always_transitions(self, seed: int) -> None:
        maze = Maze(9, 6)
        maze.build_all(Random(seed))
        agent = Agent.create(maze)
        rng = Random(seed)
        while not agent.is_halted:
            was_thinking = isinstance(agent.state, Thinking)
            agent.update(maze, rng)
            if was_thinking:
                assert not isinstance(agent.state, Thinking)

    @pytest.mark.parametrize("seed", range(6))
    def test_each_cell_gets_at_most_one_junction(self, seed: int) -> None:
        maze = Maze(8, 8)
        maze.build_all(Random(seed))
        agent = Agent.create(maze)
        rng = Random(seed)
        pushed = {agent.position}
        depth = len(agent.path)
        while not agent.is_halted:
            agent.update(maze, rng)
            if len(agent.path) > depth:
                assert agent.position not in pushed
                pushed.add(agent.position)
            depth = len(agent.path)
        assert len(pushed) <= maze.width * maze.height

    def test_independent_agents_do_not_share_state(self, built_maze) -> None:
        maze = built_maze(6, 6, seed=9)
        first, second = Agent.create(maze, 1), Agent.create(maze, 2)
        _run_to_halt(first, maze, Random(0))
        assert second.state == Thinking()
        assert second.closed == set()


class TestAgentRendering:
    def test_thinking_renders_on_cell_centre(self, built_maze) -> None:
        maze = built_maze(4, 4)
        agent = Agent.create(maze)
        assert agent.render_position == (1, 1)

    def test_moving_renders_between_cells(self) -> None:
        maze = Maze(1, 1)
        maze.build_all(Random(0))
        agent = Agent.create(maze)
        agent.update(maze, Random(0))
        assert agent.render_position == (2, 1)

    def test_exited_renders_past_border(self) -> None:
        maze = Maze(1, 1)
        maze.build_all(Random(0))
        agent = Agent.create(maze)
        _run_to_halt(agent, maze, Random(0))
        assert agent.render_position == (3, 1)
        bmp_width, _ = maze.bitmap_size
        assert agent.render_position[0] == bmp_width

    def test_glyphs_by_style(self) -> None:
        maze = Maze(1, 1)
        maze.build_all(Random(0))
        agent = Agent.create(maze)
        assert agent.glyph(AgentStyle.SMILEY) == "☻"
        assert agent.glyph(AgentStyle.INCHWORM) == "●"
        assert agent.glyph(AgentStyle.TURTLE) == "▶"
        agent.update(maze, Random(0))
        assert agent.glyph(AgentStyle.INCHWORM) == "╼"
        agent.update(maze, Random(0))
        assert agent.glyph(AgentStyle.TURTLE) == "■"
        assert agent.glyph(AgentStyle.SMILEY) == "☻"
