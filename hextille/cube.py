"""Cube coordinate algebra.

Every function assumes its inputs satisfy ``q + r + s == 0`` (see
:meth:`hextille.coords.Cube.create`) and returns a new :class:`Cube`.
"""

from __future__ import annotations

import math
from typing import Iterator

from .coords import Cube, Direction, FractionalCube, Rotation

ORIGIN = Cube(0, 0, 0)

_DIRECTION_VECTORS: dict[Direction, Cube] = {
    Direction.NORTH_EAST: Cube(+1, -1, 0),
    Direction.EAST: Cube(+1, 0, -1),
    Direction.SOUTH_EAST: Cube(0, +1, -1),
    Direction.SOUTH_WEST: Cube(-1, +1, 0),
    Direction.WEST: Cube(-1, 0, +1),
    Direction.NORTH_WEST: Cube(0, -1, +1),
}


def add(a: Cube, b: Cube) -> Cube:
    return Cube(a.q + b.q, a.r + b.r, a.s + b.s)


def subtract(a: Cube, b: Cube) -> Cube:
    return Cube(a.q - b.q, a.r - b.r, a.s - b.s)


def scale(a: Cube, k: int) -> Cube:
    return Cube(a.q * k, a.r * k, a.s * k)


def rotate(a: Cube, rotation: Rotation) -> Cube:
    """Rotate ``a`` by 60° about the origin.

    Six rotations in the same sense give back ``a``.

    >>> rotate(Cube(2, 0, -2), Rotation.LEFT)
    Cube(q=0, r=2, s=-2)
    >>> rotate(Cube(2, 0, -2), Rotation.RIGHT)
    Cube(q=2, r=-2, s=0)
    """

    if Rotation(rotation) is Rotation.LEFT:
        return Cube(-a.r, -a.s, -a.q)
    return Cube(-a.s, -a.q, -a.r)


def directions(direction: Direction) -> Cube:
    """Return the unit vector pointing towards ``direction``."""

    return _DIRECTION_VECTORS[Direction(direction)]


def neighbour(a: Cube, direction: Direction) -> Cube:
    return add(a, directions(direction))


def neighbours(a: Cube) -> Iterator[Cube]:
    """Yield the six neighbours of ``a`` in :class:`Direction` order."""

    for d in Direction:
        yield add(a, _DIRECTION_VECTORS[d])


def length(a: Cube) -> int:
    """Number of steps from the origin to ``a``."""

    # |q| + |r| + |s| is always even when the constraint holds
    return (abs(a.q) + abs(a.r) + abs(a.s)) // 2


def distance(a: Cube, b: Cube) -> int:
    return length(subtract(a, b))


def _round_half_away(value: float) -> int:
    whole = math.floor(abs(value))
    # compare the fraction itself, adding 0.5 can round up in floating point
    if abs(value) - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def round_hex(h: Cube | FractionalCube) -> Cube:
    """Round a fractional cube coordinate to the nearest tile.

    The component with the strictly largest rounding error is rebuilt from
    the other two. Otherwise ``r`` is rebuilt when its error beats ``s``'s,
    and ``s`` in every remaining case.

    >>> round_hex(FractionalCube(1.5, -2.25, 0.75))
    Cube(q=1, r=-2, s=1)
    >>> round_hex(FractionalCube(1.2, 2.5, -3.7))
    Cube(q=1, r=3, s=-4)
    """

    q = _round_half_away(h.q)
    r = _round_half_away(h.r)
    s = _round_half_away(h.s)

    q_diff = abs(q - h.q)
    r_diff = abs(r - h.r)
    s_diff = abs(s - h.s)

    if q_diff > r_diff and q_diff > s_diff:
        return Cube(-r - s, r, s)
    if r_diff > s_diff:
        return Cube(q, -q - s, s)
    return Cube(q, r, -q - r)


__all__ = [
    "ORIGIN",
    "add",
    "subtract",
    "scale",
    "rotate",
    "directions",
    "neighbour",
    "neighbours",
    "length",
    "distance",
    "round_hex",
]
