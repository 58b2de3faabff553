"""Animated perfect-maze generation and depth-first solver agents."""

from maze_doodles.domain import Agent, Direction, Directions, Maze

__all__ = ["Agent", "Direction", "Directions", "Maze"]

__version__ = "0.1.0"
