"""Domain layer: directions, maze generation, solver agents and graph analysis."""

from maze_doodles.domain.agent import Agent, AgentState, Halted, Junction, Moving, Thinking
from maze_doodles.domain.analysis import dead_ends, is_perfect, passage_graph, solution_path
from maze_doodles.domain.direction import (
    BORDER_GLYPHS,
    ORDERED_DIRECTIONS,
    BorderStyle,
    Direction,
    Directions,
    border_glyph,
)
from maze_doodles.domain.maze import Cell, Coord, FrontierEntry, Maze

__all__ = [
    "Agent",
    "AgentState",
    "BORDER_GLYPHS",
    "BorderStyle",
    "Cell",
    "Coord",
    "Direction",
    "Directions",
    "FrontierEntry",
    "Halted",
    "Junction",
    "Maze",
    "Moving",
    "ORDERED_DIRECTIONS",
    "Thinking",
    "border_glyph",
    "dead_ends",
    "is_perfect",
    "passage_graph",
    "solution_path",
]
