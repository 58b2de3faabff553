from __future__ import annotations

import argparse
import curses
import logging
from pathlib import Path
from random import Random

from maze_doodles.config.constants import DEFAULT_AGENTS, DEFAULT_WAIT_MS, NUM_COLORS
from maze_doodles.config.types import RunConfig
from maze_doodles.domain.analysis import solution_path
from maze_doodles.domain.maze import Maze
from maze_doodles.simulation.engine import RunSummary, run, solve
from maze_doodles.viz.image import render_maze_image
from maze_doodles.viz.renderer import MazeRenderer
from maze_doodles.viz.terminal import CursesSink, CursesTerminal, setup_screen
from maze_doodles.viz.theme import get_theme

logger = logging.getLogger(__name__)


def _parse_color(value: str) -> int:
    try:
        color = int(value)
    except ValueError:
        color = -1
    if not 0 <= color < NUM_COLORS:
        raise argparse.ArgumentTypeError(f"must be an integer between 0 and {NUM_COLORS - 1}.")
    return color


def _parse_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be an integer, got {value!r}.") from None


def _positive_int(value: str) -> int:
    number = _parse_int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}.")
    return number


def _non_negative_int(value: str) -> int:
    number = _parse_int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value!r}.")
    return number


def _build_play_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("play", help="Animate maze generation and solving in the terminal")
    p.set_defaults(func=_handle_play)
    p.add_argument(
        "-m", "--maze-style", type=_non_negative_int, default=None, help="Maze render style index"
    )
    p.add_argument("-c", "--color", type=_parse_color, default=None, help="Maze wall color (0-7)")
    p.add_argument(
        "-a", "--agent-style", type=_non_negative_int, default=None, help="Agent render style index"
    )
    p.add_argument(
        "-n", "--agents", type=_positive_int, default=DEFAULT_AGENTS, help="Number of agents"
    )
    pacing = p.add_mutually_exclusive_group()
    pacing.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Advance one frame per key press (q or Esc quits)",
    )
    pacing.add_argument(
        "-w",
        "--wait",
        type=_non_negative_int,
        default=DEFAULT_WAIT_MS,
        help="Delay between frames in milliseconds",
    )
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-file", type=Path, default=None)


def _build_snapshot_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("snapshot", help="Generate and solve a maze, then save an image")
    p.set_defaults(func=_handle_snapshot)
    p.add_argument("--width", type=_positive_int, default=20)
    p.add_argument("--height", type=_positive_int, default=10)
    p.add_argument("--output", type=Path, required=True)
    p.add_argument("--theme", type=str, default="default", help="Theme preset name")
    p.add_argument("--agents", type=_non_negative_int, default=1)
    p.add_argument("--no-solution", action="store_true", help="Do not draw the solution path")
    p.add_argument("--seed", type=int, default=None)


def _build_text_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("text", help="Print a generated maze as box-drawing text")
    p.set_defaults(func=_handle_text)
    p.add_argument("--width", type=_positive_int, default=20)
    p.add_argument("--height", type=_positive_int, default=10)
    p.add_argument("-m", "--maze-style", type=_non_negative_int, default=0)
    p.add_argument("--seed", type=int, default=None)


def _configure_logging(level: str, log_file: Path | None, quiet: bool = False) -> None:
    if log_file is not None:
        logging.basicConfig(level=level, filename=log_file, force=True)
    elif quiet:
        logging.basicConfig(level=level, handlers=[logging.NullHandler()], force=True)
    else:
        logging.basicConfig(level=level, force=True)


def _play(stdscr: curses.window, config: RunConfig) -> RunSummary:
    colors = setup_screen(stdscr)
    terminal = CursesTerminal(stdscr, config.wait_ms, interactive=config.interactive)
    sink = CursesSink(stdscr, colors=colors)
    return run(terminal, sink, config)


def _handle_play(args: argparse.Namespace) -> None:
    # curses owns the screen, so log only to a file when one is given.
    _configure_logging(args.log_level, args.log_file, quiet=True)
    config = RunConfig(
        maze_style=args.maze_style,
        color=args.color,
        agent_style=args.agent_style,
        agents=args.agents,
        wait_ms=args.wait,
        interactive=args.interactive,
        seed=args.seed,
    )
    summary = curses.wrapper(_play, config)
    logger.info(
        "Session ended: %d mazes, %d frames, %d agents exited",
        summary.mazes_completed,
        summary.frames,
        summary.agents_exited,
    )


def _handle_snapshot(args: argparse.Namespace) -> None:
    _configure_logging(args.log_level, None)
    theme = get_theme(args.theme)
    rng = Random(args.seed)
    maze = Maze(args.width, args.height)
    maze.build_all(rng)
    agents = solve(maze, rng, agents=args.agents) if args.agents > 0 else []
    solution = None if args.no_solution else solution_path(maze)
    output = render_maze_image(maze, args.output, agents=agents, solution=solution, theme=theme)
    print(output)


def _handle_text(args: argparse.Namespace) -> None:
    _configure_logging(args.log_level, None)
    rng = Random(args.seed)
    maze = Maze(args.width, args.height)
    maze.build_all(rng)
    style = RunConfig(maze_style=args.maze_style, color=7).resolve_maze_style(rng)
    renderer = MazeRenderer(style, hedge_seed=rng.getrandbits(64))
    print("\n".join(renderer.frame_lines(maze)))


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Generate and solve mazes")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_play_parser(sub)
    _build_snapshot_parser(sub)
    _build_text_parser(sub)
    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
