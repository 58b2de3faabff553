"""Matplotlib rendering of a maze bitmap to a static image."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402
from matplotlib.colors import BoundaryNorm, ListedColormap  # noqa: E402
from matplotlib.patches import Patch  # noqa: E402

from maze_doodles.domain.agent import Agent  # noqa: E402
from maze_doodles.domain.maze import Coord, Maze  # noqa: E402
from maze_doodles.viz.theme import DEFAULT_THEME, Theme  # noqa: E402

FLOOR, WALL, PENDING = 0, 1, 2


def _build_pixel_array(maze: Maze) -> np.ndarray:
    """Return (H, W) int array: 0 floor, 1 wall, 2 unvisited cell centre."""
    grid = maze.bitmap.astype(int)
    for y in range(maze.height):
        for x in range(maze.width):
            if not maze.cell(x, y).visited:
                grid[2 * y + 1, 2 * x + 1] = PENDING
    return grid


def _pixel_cmap(theme: Theme = DEFAULT_THEME) -> tuple[ListedColormap, BoundaryNorm]:
    """Discrete 3-color colormap (floor, wall, pending)."""
    cmap = ListedColormap([theme.floor_color, theme.wall_color, theme.pending_color])
    norm = BoundaryNorm([-0.5, 0.5, 1.5, 2.5], cmap.N)
    return cmap, norm


def _cell_centres(cells: Sequence[Coord]) -> tuple[list[int], list[int]]:
    return [2 * x + 1 for x, _ in cells], [2 * y + 1 for _, y in cells]


def render_maze_image(
    maze: Maze,
    output_path: Path,
    agents: Sequence[Agent] = (),
    solution: Sequence[Coord] | None = None,
    theme: Theme = DEFAULT_THEME,
    dpi: int = 150,
) -> Path:
    """Save a picture of the maze with optional solution path and agents.

    Agents are drawn at their render position, so exited agents sit just
    outside the frame next to the exit.
    """
    grid = _build_pixel_array(maze)
    cmap, norm = _pixel_cmap(theme)
    height, width = grid.shape

    fig, ax = plt.subplots(figsize=(max(2.0, width / 8), max(2.0, height / 8)))
    fig.patch.set_facecolor(theme.background_color)
    ax.imshow(grid, cmap=cmap, norm=norm, origin="upper", aspect="equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_xlim(-1.5, width + 0.5)
    ax.set_ylim(height + 0.5, -1.5)

    handles = [
        Patch(facecolor=theme.wall_color, edgecolor="gray", label="Wall"),
        Patch(facecolor=theme.floor_color, edgecolor="gray", label="Passage"),
    ]
    if solution:
        xs, ys = _cell_centres(solution)
        ax.plot(xs, ys, color=theme.solution_color, linewidth=1.5)
        handles.append(Patch(facecolor=theme.solution_color, label="Solution"))
    for agent in agents:
        px, py = agent.render_position
        color = theme.agent_colors[agent.color % len(theme.agent_colors)]
        ax.scatter([px], [py], s=30, color=color, edgecolors="black", zorder=3)

    fig.legend(handles=handles, loc="lower center", ncol=len(handles), fontsize=7, frameon=False)
    fig.tight_layout(rect=(0, 0.06, 1, 1))
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)
    return output_path
