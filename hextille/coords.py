"""Coordinate value types for hexagonal grids.

Cube coordinates use the names ``q``, ``r`` and ``s`` and always satisfy
``q + r + s == 0``. Axes are aligned as follows::

           -r
      +s   .^.   +q
        .´     `.
        |       |
        `.     .´
      -q   `.´   -s
           +r

Offset coordinates (``col``, ``row``) exist only for display and grid
construction; all arithmetic happens on :class:`Cube`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCoordinate


@dataclass(frozen=True, slots=True)
class Cube:
    """Integer cube coordinate.

    Plain construction does not check the ``q + r + s == 0`` constraint;
    use :meth:`create` at trust boundaries.
    """

    q: int
    r: int
    s: int

    @classmethod
    def create(cls, q: int, r: int, s: int) -> Cube:
        """Return ``Cube(q, r, s)`` or raise :class:`InvalidCoordinate`."""

        if q + r + s != 0:
            raise InvalidCoordinate(q, r, s)
        return cls(q, r, s)


@dataclass(frozen=True, slots=True)
class FractionalCube:
    """Real-valued cube coordinate, e.g. an interpolated position."""

    q: float
    r: float
    s: float


@dataclass(frozen=True, slots=True)
class Offset:
    col: int  # q-like
    row: int  # r-like


class Direction(str, Enum):
    """The six neighbour directions, clockwise from north east.

    ::

        NORTH_WEST        NORTH_EAST
                     .^.
                  .´s   q`.
          WEST    |       |  EAST
                  `.  r  .´
                     `.´
        SOUTH_WEST        SOUTH_EAST
    """

    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"


class Rotation(str, Enum):
    """Sense of a 60° rotation about the origin."""

    LEFT = "left"
    RIGHT = "right"


class Layout(Enum):
    """Concrete offset layouts.

    ``*_R`` layouts are pointy top and shove rows, ``*_Q`` layouts are flat
    top and shove columns. ``EVEN_*`` layouts shove the even lines
    (``shift == 1``), ``ODD_*`` the odd ones (``shift == 0``).
    """

    ODD_R = "odd_r"
    EVEN_R = "even_r"
    ODD_Q = "odd_q"
    EVEN_Q = "even_q"

    @property
    def is_row_layout(self) -> bool:
        return self in (Layout.ODD_R, Layout.EVEN_R)

    @property
    def shift(self) -> int:
        return 1 if self in (Layout.EVEN_R, Layout.EVEN_Q) else 0


__all__ = ["Cube", "FractionalCube", "Offset", "Direction", "Rotation", "Layout"]
