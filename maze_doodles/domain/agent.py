"""Depth-first backtracking solver that walks a built maze one tick at a time.

The agent is a three-state machine::

    Thinking --(draw an untried direction)--> Moving(d)
    Thinking --(junction exhausted, has parent)--> Moving(back), pop junction
    Thinking --(root exhausted)--> Halted(exited=False)
    Moving(d) --(step stays on grid)--> Thinking
    Moving(d) --(step leaves grid)--> Halted(exited=True)

Because the maze is a tree, each cell gets at most one junction per agent
and the walk always terminates.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import TYPE_CHECKING, TypeAlias

from maze_doodles.config.types import AgentStyle
from maze_doodles.domain.direction import Direction, Directions

if TYPE_CHECKING:
    from maze_doodles.domain.maze import Coord, Maze


@dataclass(frozen=True)
class Thinking:
    """Standing on a cell, about to pick the next direction."""


@dataclass(frozen=True)
class Moving:
    """Crossing the wall pixel toward the neighbor in ``direction``."""

    direction: Direction


@dataclass(frozen=True)
class Halted:
    """Terminal state; ``exited`` is True when the agent left through the exit."""

    exited: bool


AgentState: TypeAlias = Thinking | Moving | Halted


@dataclass
class Junction:
    """Untried directions of one cell on the search stack."""

    open: Directions
    came_from: Direction | None


_INCHWORM_GLYPHS: dict[Direction, str] = {
    Direction.NORTH: "╿",
    Direction.EAST: "╼",
    Direction.SOUTH: "╽",
    Direction.WEST: "╾",
}

_TURTLE_GLYPHS: dict[Direction, str] = {
    Direction.NORTH: "▲",
    Direction.EAST: "▶",
    Direction.SOUTH: "▼",
    Direction.WEST: "◀",
}


@dataclass
class Agent:
    """A single maze solver with its own search stack and closed set."""

    position: Coord
    color: int = 1
    state: AgentState = field(default_factory=Thinking)
    facing: Direction = Direction.EAST
    path: list[Junction] = field(default_factory=list)
    closed: set[Coord] = field(default_factory=set)
    steps: int = 0

    @classmethod
    def create(cls, maze: Maze, color: int = 1) -> Agent:
        """Place a fresh agent on the maze entrance."""
        x, y = maze.entrance
        root = Junction(open=~maze.walls(x, y), came_from=None)
        return cls(position=(x, y), color=color, path=[root])

    @property
    def is_halted(self) -> bool:
        return isinstance(self.state, Halted)

    @property
    def has_exited(self) -> bool:
        return isinstance(self.state, Halted) and self.state.exited

    def update(self, maze: Maze, rng: Random) -> None:
        """Advance the state machine by exactly one transition."""
        if isinstance(self.state, Thinking):
            self._think(rng)
        elif isinstance(self.state, Moving):
            self._move(maze, self.state.direction)
        else:
            return
        self.steps += 1

    def _think(self, rng: Random) -> None:
        junction = self.path[-1]
        direction = junction.open.choose(rng)
        if direction is not None:
            junction.open = junction.open.without(direction)
            self.facing = direction
            self.state = Moving(direction)
        elif junction.came_from is not None:
            self.path.pop()
            self.facing = junction.came_from
            self.state = Moving(junction.came_from)
        else:
            self.state = Halted(exited=False)

    def _move(self, maze: Maze, direction: Direction) -> None:
        self.closed.add(self.position)
        self.facing = direction
        x, y = self.position
        dx, dy = direction.delta
        nx_, ny_ = x + dx, y + dy
        if not maze.in_bounds(nx_, ny_):
            self.state = Halted(exited=True)
            return

        self.position = (nx_, ny_)
        if self.position not in self.closed:
            back = direction.opposite
            self.path.append(Junction(open=(~maze.walls(nx_, ny_)).without(back), came_from=back))
        self.state = Thinking()

    @property
    def render_position(self) -> Coord:
        """Bitmap pixel at which to draw the agent this frame.

        Moving agents sit on the wall pixel between cells; agents that left
        through the exit are pushed one pixel past the border.
        """
        x, y = self.position
        bx, by = 2 * x + 1, 2 * y + 1
        if isinstance(self.state, Moving):
            dx, dy = self.state.direction.delta
            return bx + dx, by + dy
        if self.has_exited:
            dx, dy = self.facing.delta
            return bx + 2 * dx, by + 2 * dy
        return bx, by

    def glyph(self, style: AgentStyle) -> str:
        if style is AgentStyle.SMILEY:
            return "☻"
        if style is AgentStyle.INCHWORM:
            if isinstance(self.state, Moving):
                return _INCHWORM_GLYPHS[self.state.direction]
            return "●"
        if self.is_halted:
            return "■"
        return _TURTLE_GLYPHS[self.facing]
