"""Passage-graph analysis of generated mazes.

Cells are nodes and every carved internal wall is an edge. A finished maze
is perfect iff this graph is a tree spanning all ``width * height`` cells.
"""

from __future__ import annotations

from typing import TypeAlias

import networkx as nx

from maze_doodles.domain.direction import Direction
from maze_doodles.domain.maze import Coord, Maze

PassageGraph: TypeAlias = nx.Graph
"""A NetworkX graph whose nodes are (x, y) cell coordinates."""


def passage_graph(maze: Maze) -> PassageGraph:
    """Build the undirected graph of open passages between cells.

    Only east and south walls are inspected so each passage is added once.
    The exit opening leads off the grid and does not appear.
    """
    g = nx.Graph()
    width, height = maze.size
    for y in range(height):
        for x in range(width):
            g.add_node((x, y))
            walls = maze.walls(x, y)
            for direction in (Direction.EAST, Direction.SOUTH):
                if direction in walls:
                    continue
                target = maze.neighbor(x, y, direction)
                if target is not None:
                    g.add_edge((x, y), target)
    return g


def is_perfect(maze: Maze) -> bool:
    """True when passages form a spanning tree of the cell grid."""
    g = passage_graph(maze)
    return g.number_of_nodes() == maze.width * maze.height and nx.is_tree(g)


def solution_path(maze: Maze) -> list[Coord]:
    """Cells from the entrance to the exit, inclusive."""
    if not maze.is_complete:
        raise ValueError("maze is not fully built")
    g = passage_graph(maze)
    try:
        return list(nx.shortest_path(g, maze.entrance, maze.exit))
    except nx.NetworkXNoPath as exc:
        raise ValueError("exit is not reachable from the entrance") from exc


def dead_ends(maze: Maze) -> list[Coord]:
    """Cells with exactly one open passage (exit opening not counted)."""
    g = passage_graph(maze)
    return sorted(node for node, degree in g.degree() if degree == 1)
