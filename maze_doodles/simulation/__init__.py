"""Simulation engine: the frame loop that drives generation and solving."""

from maze_doodles.simulation.engine import (
    RunSummary,
    maze_dimensions,
    run,
    solve,
    spawn_agents,
)

__all__ = [
    "RunSummary",
    "maze_dimensions",
    "run",
    "solve",
    "spawn_agents",
]
