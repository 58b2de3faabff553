"""Curses adapters for the ``GlyphSink`` and ``Terminal`` protocols."""

from __future__ import annotations

import curses

from maze_doodles.config.constants import NUM_COLORS
from maze_doodles.viz.sink import Continue, Exit, Pen, Resize, SinkError, WaitResult, Weight

# Palette order matches the color indices accepted on the command line.
_CURSES_COLORS: tuple[int, ...] = (
    curses.COLOR_WHITE,  # grey
    curses.COLOR_RED,
    curses.COLOR_GREEN,
    curses.COLOR_YELLOW,
    curses.COLOR_BLUE,
    curses.COLOR_MAGENTA,
    curses.COLOR_CYAN,
    curses.COLOR_WHITE,
)

_ESCAPE = 27


def setup_screen(stdscr: curses.window) -> bool:
    """Hide the cursor and register color pairs. Returns True if colors work."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    stdscr.nodelay(False)
    stdscr.keypad(True)
    if not curses.has_colors():
        return False
    curses.start_color()
    background = 0
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        pass
    for index in range(NUM_COLORS):
        try:
            curses.init_pair(index + 1, _CURSES_COLORS[index], background)
        except curses.error:
            return False
    return True


class CursesSink:
    """Writes glyphs to a curses window; errors surface as ``SinkError``.

    Glyphs that fall outside the window are dropped. The bottom-right cell is
    written with ``insstr`` because ``addstr`` fails when it cannot advance
    the cursor past it.
    """

    def __init__(self, stdscr: curses.window, colors: bool = True) -> None:
        self._stdscr = stdscr
        self._colors = colors
        self._cursor = (0, 0)

    def move_to(self, x: int, y: int) -> None:
        self._cursor = (x, y)

    def write(self, char: str, pen: Pen | None = None) -> None:
        x, y = self._cursor
        self._cursor = (x + 1, y)
        rows, cols = self._stdscr.getmaxyx()
        if x >= cols or y >= rows:
            return
        draw = self._stdscr.insstr if (x, y) == (cols - 1, rows - 1) else self._stdscr.addstr
        try:
            draw(y, x, char, self._attr(pen))
        except curses.error as exc:
            raise SinkError(f"failed to write glyph at ({x}, {y})") from exc

    def flush(self) -> None:
        try:
            self._stdscr.refresh()
        except curses.error as exc:
            raise SinkError("failed to refresh screen") from exc

    def _attr(self, pen: Pen | None) -> int:
        if pen is None:
            return curses.A_NORMAL
        attr = curses.color_pair(pen.color % NUM_COLORS + 1) if self._colors else 0
        if pen.weight is Weight.BOLD:
            attr |= curses.A_BOLD
        elif pen.weight is Weight.DIM:
            attr |= curses.A_DIM
        return attr


class CursesTerminal:
    """Frame pacing and key handling on a curses window.

    In timed mode any key press exits; in interactive mode each key advances
    one frame and only ``q`` or Esc exits.
    """

    def __init__(self, stdscr: curses.window, wait_ms: int, interactive: bool = False) -> None:
        self._stdscr = stdscr
        self._wait_ms = wait_ms
        self._interactive = interactive

    def size(self) -> tuple[int, int]:
        rows, cols = self._stdscr.getmaxyx()
        return cols, rows

    def clear(self) -> None:
        self._stdscr.clear()

    def wait(self) -> WaitResult:
        self._stdscr.timeout(-1 if self._interactive else self._wait_ms)
        while True:
            key = self._stdscr.getch()
            if key == -1:
                if self._interactive:
                    continue
                return Continue()
            if key == curses.KEY_RESIZE:
                curses.update_lines_cols()
                cols, rows = self.size()
                return Resize(cols, rows)
            if not self._interactive or key in (_ESCAPE, ord("q")):
                return Exit()
            return Continue()
