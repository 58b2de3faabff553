"""Randomized perfect-maze generation over a rectangular cell grid.

Wall-ownership invariant: each cell stores only its east and south walls.
The west wall of (x, y) is the east wall of (x - 1, y) and the north wall is
the south wall of (x, y - 1); cells on the west/north boundary are walled.
Two cells sharing a wall therefore can never disagree about it.

Generation is iterative depth-first growth from the entrance with an explicit
frontier stack. Frontier entries are deduplicated lazily when popped; pushing
a cell once per discovering neighbor is intentional and shapes the branching
of the resulting tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random

import numpy as np

from maze_doodles.domain.direction import ORDERED_DIRECTIONS, Direction, Directions

Coord = tuple[int, int]


@dataclass
class Cell:
    """Stored wall bits and generation state of one maze cell."""

    wall_east: bool = True
    wall_south: bool = True
    visited: bool = False


@dataclass(frozen=True)
class FrontierEntry:
    """A discovered cell together with the visited cell that discovered it."""

    cell: Coord
    origin: Coord


@dataclass(eq=False)
class Maze:
    """Logical wall grid plus the lazily derived display bitmap.

    The bitmap is ``(2 * height + 1) x (2 * width + 1)`` and indexed
    ``[y, x]``; ``True`` marks a wall pixel. Cell (x, y) is centred on
    bitmap pixel (2x + 1, 2y + 1).
    """

    width: int
    height: int
    cells: list[Cell] = field(init=False, repr=False)
    frontier: list[FrontierEntry] = field(init=False, repr=False)
    visited_count: int = field(init=False, default=0)
    _bitmap: np.ndarray | None = field(init=False, default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("maze dimensions must be >= 1")
        self.cells = [Cell() for _ in range(self.width * self.height)]
        exit_x, exit_y = self.exit
        self.cells[self._index(exit_x, exit_y)].wall_east = False
        self.frontier = [FrontierEntry(cell=self.entrance, origin=self.entrance)]

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def bitmap_size(self) -> tuple[int, int]:
        """(width, height) of the display bitmap."""
        return self.width * 2 + 1, self.height * 2 + 1

    @property
    def entrance(self) -> Coord:
        return 0, 0

    @property
    def exit(self) -> Coord:
        """Cell whose east wall opens onto the exterior."""
        return self.width - 1, self.height - 1

    @property
    def entrance_pixel(self) -> Coord:
        """Bitmap pixel left open on the west boundary next to the entrance."""
        x, y = self.entrance
        return 2 * x, 2 * y + 1

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self._index(x, y)]

    def neighbor(self, x: int, y: int, direction: Direction) -> Coord | None:
        """Coordinates one step away, or None when that leaves the grid."""
        dx, dy = direction.delta
        nx_, ny_ = x + dx, y + dy
        if not self.in_bounds(nx_, ny_):
            return None
        return nx_, ny_

    def walls(self, x: int, y: int) -> Directions:
        """Closed sides of cell (x, y), with west/north derived from neighbors."""
        cell = self.cell(x, y)
        walls = Directions.empty()
        if cell.wall_east:
            walls |= Direction.EAST
        if cell.wall_south:
            walls |= Direction.SOUTH
        if x == 0 or self.cell(x - 1, y).wall_east:
            walls |= Direction.WEST
        if y == 0 or self.cell(x, y - 1).wall_south:
            walls |= Direction.NORTH
        return walls

    def removed_walls(self) -> int:
        """Count internal walls that have been carved away.

        The exit opening lies on the boundary and is not counted.
        """
        removed = 0
        for y in range(self.height):
            for x in range(self.width):
                cell = self.cell(x, y)
                if x + 1 < self.width and not cell.wall_east:
                    removed += 1
                if y + 1 < self.height and not cell.wall_south:
                    removed += 1
        return removed

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @property
    def is_complete(self) -> bool:
        return self.visited_count == self.width * self.height

    @property
    def frontier_size(self) -> int:
        return len(self.frontier)

    def build_next(self, rng: Random) -> bool:
        """Visit one more cell. Returns False once the frontier is exhausted."""
        entry = self._pop_unvisited()
        if entry is None:
            return False

        x, y = entry.cell
        current = self.cell(x, y)
        current.visited = True
        self.visited_count += 1
        self._remove_wall_between(entry.cell, entry.origin)

        directions = list(ORDERED_DIRECTIONS)
        rng.shuffle(directions)
        for direction in directions:
            target = self.neighbor(x, y, direction)
            if target is None:
                continue
            if not self.cell(*target).visited:
                self.frontier.append(FrontierEntry(cell=target, origin=(x, y)))

        self._bitmap = None
        return True

    def build_all(self, rng: Random) -> int:
        """Run generation to completion and return the number of cells visited."""
        steps = 0
        while self.build_next(rng):
            steps += 1
        return steps

    def _pop_unvisited(self) -> FrontierEntry | None:
        while self.frontier:
            entry = self.frontier.pop()
            if not self.cell(*entry.cell).visited:
                return entry
        return None

    def _remove_wall_between(self, cell: Coord, origin: Coord) -> None:
        """Carve the wall shared by two adjacent cells (no-op when equal)."""
        (x, y), (ox, oy) = cell, origin
        if x < ox:
            self.cell(x, y).wall_east = False
        elif x > ox:
            self.cell(ox, oy).wall_east = False
        elif y < oy:
            self.cell(x, y).wall_south = False
        elif y > oy:
            self.cell(ox, oy).wall_south = False

    # ------------------------------------------------------------------
    # Bitmap
    # ------------------------------------------------------------------

    @property
    def bitmap(self) -> np.ndarray:
        """Read-only wall bitmap, recomputed if generation has moved on."""
        if self._bitmap is None:
            self._bitmap = self._render_bitmap()
        return self._bitmap

    def _render_bitmap(self) -> np.ndarray:
        bmp_width, bmp_height = self.bitmap_size
        bitmap = np.zeros((bmp_height, bmp_width), dtype=bool)

        for y in range(self.height):
            for x in range(self.width):
                if not self.cell(x, y).visited:
                    continue
                bx, by = 2 * x + 1, 2 * y + 1
                bitmap[by - 1, bx - 1] = True
                bitmap[by - 1, bx + 1] = True
                bitmap[by + 1, bx - 1] = True
                bitmap[by + 1, bx + 1] = True

                walls = self.walls(x, y)
                for direction in walls:
                    dx, dy = direction.delta
                    bitmap[by + dy, bx + dx] = True

        ex, ey = self.entrance_pixel
        bitmap[ey, ex] = False
        bitmap.setflags(write=False)
        return bitmap

    def _index(self, x: int, y: int) -> int:
        return y * self.width + x
