"""Compass directions, a 4-bit direction set, and box-drawing lookup tables.

Bit layout shared by ``Directions`` masks and the border tables::

    NORTH = 0b0001, EAST = 0b0010, SOUTH = 0b0100, WEST = 0b1000

A border table is a 16-character string indexed by that mask, so entry 5
(NORTH | SOUTH) is the vertical stroke of the table's style.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from random import Random

_FULL_MASK = 0b1111


class Direction(Enum):
    """One of the four compass directions; y grows southward."""

    NORTH = 0b0001
    EAST = 0b0010
    SOUTH = 0b0100
    WEST = 0b1000

    @property
    def bit(self) -> int:
        return self.value

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) step for this direction."""
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def choose(cls, rng: Random) -> Direction:
        return ORDERED_DIRECTIONS[rng.randrange(len(ORDERED_DIRECTIONS))]


ORDERED_DIRECTIONS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.NORTH: Direction.SOUTH,
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
}


@dataclass(frozen=True)
class Directions:
    """Immutable set of directions stored as a 4-bit integer mask."""

    mask: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= _FULL_MASK:
            raise ValueError(f"direction mask out of range: {self.mask}")

    @classmethod
    def empty(cls) -> Directions:
        return cls(0)

    @classmethod
    def all(cls) -> Directions:
        return cls(_FULL_MASK)

    @classmethod
    def of(cls, *directions: Direction) -> Directions:
        mask = 0
        for direction in directions:
            mask |= direction.bit
        return cls(mask)

    def __or__(self, other: Directions | Direction) -> Directions:
        return Directions(self.mask | _mask_of(other))

    def __and__(self, other: Directions | Direction) -> Directions:
        return Directions(self.mask & _mask_of(other))

    def __invert__(self) -> Directions:
        return Directions(~self.mask & _FULL_MASK)

    def __contains__(self, direction: object) -> bool:
        return isinstance(direction, Direction) and bool(self.mask & direction.bit)

    def __iter__(self) -> Iterator[Direction]:
        return (d for d in ORDERED_DIRECTIONS if self.mask & d.bit)

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def __bool__(self) -> bool:
        return self.mask != 0

    def __repr__(self) -> str:
        names = "|".join(d.name for d in self) or "EMPTY"
        return f"Directions({names})"

    def without(self, direction: Direction) -> Directions:
        return Directions(self.mask & ~direction.bit & _FULL_MASK)

    def single(self) -> Direction | None:
        """Return the only member, or None when the set is empty or plural."""
        members = list(self)
        return members[0] if len(members) == 1 else None

    def choose(self, rng: Random) -> Direction | None:
        """Pick a member uniformly at random; None for the empty set."""
        members = list(self)
        if not members:
            return None
        return rng.choice(members)


def _mask_of(value: Directions | Direction) -> int:
    if isinstance(value, Direction):
        return value.bit
    return value.mask


# ---------------------------------------------------------------------------
# Border glyph tables
# ---------------------------------------------------------------------------


class BorderStyle(Enum):
    """Box-drawing stroke family."""

    SINGLE = "single"
    CURVED = "curved"
    BOLD = "bold"
    DOUBLE = "double"


BORDERS_SINGLE = " ╵╶└╷│┌├╴┘─┴┐┤┬┼"
BORDERS_CURVED = " ╵╶╰╷│╭├╴╯─┴╮┤┬┼"
BORDERS_BOLD = " ╹╺┗╻┃┏┣╸┛━┻┓┫┳╋"
BORDERS_DOUBLE = " ╨╞╚╥║╔╠╡╝═╩╗╣╦╬"
BORDERS_BOLD_SINGLE = " ╹╶┖╻┃┎┠╴┚─┸┒┨┰╂"
BORDERS_SINGLE_BOLD = " ╵╺┕╷│┍┝╸┙━┷┑┥┯┿"
BORDERS_DOUBLE_SINGLE = " ╨╶╙╥║╓╟╴╜─╨╖╢╥╫"
BORDERS_SINGLE_DOUBLE = " ╵╞╘╷│╒╞╡╛═╧╕╡╤╪"

_S, _C, _B, _D = BorderStyle.SINGLE, BorderStyle.CURVED, BorderStyle.BOLD, BorderStyle.DOUBLE

# Keyed by (vertical stroke style, horizontal stroke style).
BORDER_GLYPHS: dict[tuple[BorderStyle, BorderStyle], str] = {
    (_S, _S): BORDERS_SINGLE,
    (_C, _C): BORDERS_CURVED,
    (_B, _B): BORDERS_BOLD,
    (_D, _D): BORDERS_DOUBLE,
    (_B, _S): BORDERS_BOLD_SINGLE,
    (_B, _C): BORDERS_BOLD_SINGLE,
    (_S, _B): BORDERS_SINGLE_BOLD,
    (_C, _B): BORDERS_SINGLE_BOLD,
    (_D, _S): BORDERS_DOUBLE_SINGLE,
    (_D, _C): BORDERS_DOUBLE_SINGLE,
    (_S, _D): BORDERS_SINGLE_DOUBLE,
    (_C, _D): BORDERS_SINGLE_DOUBLE,
}


def border_glyph(
    connections: Directions | int,
    vertical_style: BorderStyle,
    horizontal_style: BorderStyle,
) -> str:
    """Return the box-drawing glyph joining the given neighbor directions.

    Style pairs without a dedicated table (e.g. bold with double) fall back
    to the single-line table.
    """
    mask = connections if isinstance(connections, int) else connections.mask
    table = BORDER_GLYPHS.get((vertical_style, horizontal_style), BORDERS_SINGLE)
    return table[mask]
