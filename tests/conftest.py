from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from random import Random

import pytest

from maze_doodles.domain.direction import Direction
from maze_doodles.domain.maze import Coord, Maze


class FixedOrderRandom(Random):
    """Random whose shuffle always yields directions in a fixed order."""

    def __init__(self, order: Sequence[Direction], seed: int = 0) -> None:
        super().__init__(seed)
        self.order = list(order)

    def shuffle(self, x: list) -> None:  # type: ignore[override]
        x.sort(key=self.order.index)


def _reachable_cells(maze: Maze, start: Coord) -> set[Coord]:
    """Breadth-first reachability over open walls."""
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for direction in ~maze.walls(x, y):
            target = maze.neighbor(x, y, direction)
            if target is not None and target not in seen:
                seen.add(target)
                queue.append(target)
    return seen


def _built_maze(width: int, height: int, seed: int = 0) -> Maze:
    maze = Maze(width, height)
    maze.build_all(Random(seed))
    return maze


@pytest.fixture
def fixed_order_rng() -> FixedOrderRandom:
    return FixedOrderRandom([Direction.EAST, Direction.SOUTH, Direction.WEST, Direction.NORTH])


@pytest.fixture
def reachable() -> Callable[[Maze, Coord], set[Coord]]:
    return _reachable_cells


@pytest.fixture
def built_maze() -> Callable[..., Maze]:
    return _built_maze
