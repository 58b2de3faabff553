"""Frame-stepped driver: generate a maze, then release solver agents into it.

Every tick performs at most one generation step or one update per active
agent, renders a frame and then blocks on ``Terminal.wait``. A resize
discards the maze and agents and starts over at the new size; an exit
request returns before anything else runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from random import Random

from maze_doodles.config.constants import AGENT_SPAWN_INTERVAL, NUM_COLORS
from maze_doodles.config.types import RunConfig
from maze_doodles.domain.agent import Agent
from maze_doodles.domain.analysis import solution_path
from maze_doodles.domain.maze import Maze
from maze_doodles.viz.renderer import MazeRenderer
from maze_doodles.viz.sink import Continue, Exit, GlyphSink, Resize, Terminal, WaitResult

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Counters accumulated over one terminal session."""

    mazes_completed: int = 0
    frames: int = 0
    agents_exited: int = 0
    resizes: int = 0


def maze_dimensions(columns: int, rows: int) -> tuple[int, int]:
    """Largest cell grid whose bitmap fits the terminal, at least 1x1."""
    return max(1, columns // 2 - 1), max(1, rows // 2 - 1)


def spawn_agents(maze: Maze, count: int, rng: Random) -> list[Agent]:
    """Create ``count`` agents at the entrance in shuffled release order."""
    agents = [Agent.create(maze, color=(i + 1) % NUM_COLORS) for i in range(count)]
    rng.shuffle(agents)
    return agents


def solve(maze: Maze, rng: Random, agents: int = 1, max_ticks: int | None = None) -> list[Agent]:
    """Run agents on a built maze without rendering until all have halted.

    ``max_ticks`` bounds the loop; ``None`` relies on the tree walk's own
    termination.
    """
    if not maze.is_complete:
        raise ValueError("maze is not fully built")
    solvers = spawn_agents(maze, agents, rng)
    ticks = 0
    while not all(agent.is_halted for agent in solvers):
        if max_ticks is not None and ticks >= max_ticks:
            break
        for agent in solvers:
            agent.update(maze, rng)
        ticks += 1
    return solvers


def run(
    terminal: Terminal,
    sink: GlyphSink,
    config: RunConfig,
    rng: Random | None = None,
) -> RunSummary:
    """Generate and solve mazes until the terminal reports an exit request."""
    rng = rng if rng is not None else Random(config.seed)
    summary = RunSummary()

    while True:
        terminal.clear()
        columns, rows = terminal.size()
        width, height = maze_dimensions(columns, rows)
        maze = Maze(width, height)
        renderer = MazeRenderer(
            config.resolve_maze_style(rng),
            config.resolve_agent_style(rng),
            hedge_seed=rng.getrandbits(64),
        )
        logger.debug(
            "Starting %dx%d maze (style=%s, agents=%s)",
            width,
            height,
            renderer.maze_style,
            renderer.agent_style.value,
        )

        interrupt = _generate(maze, renderer, terminal, sink, rng, summary)
        if interrupt is None:
            interrupt = _release_agents(maze, renderer, terminal, sink, config, rng, summary)

        if isinstance(interrupt, Exit):
            logger.info("Exit requested after %d frames", summary.frames)
            return summary
        if isinstance(interrupt, Resize):
            summary.resizes += 1
            logger.info(
                "Terminal resized to %dx%d; regenerating", interrupt.width, interrupt.height
            )
            continue
        summary.mazes_completed += 1


def _generate(
    maze: Maze,
    renderer: MazeRenderer,
    terminal: Terminal,
    sink: GlyphSink,
    rng: Random,
    summary: RunSummary,
) -> WaitResult | None:
    """Build one cell per frame. Returns the interrupting wait result, if any."""
    while maze.build_next(rng):
        renderer.render(maze, (), sink)
        summary.frames += 1
        result = terminal.wait()
        if not isinstance(result, Continue):
            return result

    if logger.isEnabledFor(logging.INFO):
        logger.info(
            "Built %dx%d maze; solution is %d cells long",
            maze.width,
            maze.height,
            len(solution_path(maze)),
        )
    return None


def _release_agents(
    maze: Maze,
    renderer: MazeRenderer,
    terminal: Terminal,
    sink: GlyphSink,
    config: RunConfig,
    rng: Random,
    summary: RunSummary,
) -> WaitResult | None:
    """Animate agents, adding one every ``AGENT_SPAWN_INTERVAL`` frames."""
    agents = spawn_agents(maze, config.agents, rng)
    active = 1
    frames = 0

    while True:
        renderer.render(maze, agents[:active], sink)
        _update_active(maze, agents[:active], rng)

        frames += 1
        summary.frames += 1
        if frames % AGENT_SPAWN_INTERVAL == 0 and active < len(agents):
            active += 1

        if active == len(agents) and all(agent.is_halted for agent in agents):
            exited = sum(1 for agent in agents if agent.has_exited)
            summary.agents_exited += exited
            logger.info("All %d agents halted (%d exited)", len(agents), exited)
            return None

        result = terminal.wait()
        if not isinstance(result, Continue):
            return result


def _update_active(maze: Maze, agents: Sequence[Agent], rng: Random) -> None:
    for agent in agents:
        if agent.is_halted:
            continue
        agent.update(maze, rng)
        if agent.is_halted:
            logger.debug(
                "Agent %d halted at %s after %d steps (exited=%s)",
                agent.color,
                agent.position,
                agent.steps,
                agent.has_exited,
            )
