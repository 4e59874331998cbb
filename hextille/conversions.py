"""Conversions between cube and offset coordinates.

``shift`` selects the shoved lines: ``0`` shoves odd rows/columns, ``1``
even ones. Callers must pass ``0`` or ``1``; other values are not checked.
Parity is taken from the low bit and halves are floored, so negative rows
and columns convert correctly.
"""

from __future__ import annotations

from .coords import Cube, Layout, Offset


def roffset_from_cube(h: Cube, shift: int = 0) -> Offset:
    """Cube to pointy top r-offset coordinates.

    >>> roffset_from_cube(Cube(4, 3, -7), 1)
    Offset(col=6, row=3)
    """

    col = h.q + (h.r + shift * (h.r & 1)) // 2
    row = h.r
    return Offset(col, row)


def roffset_to_cube(o: Offset, shift: int = 0) -> Cube:
    q = o.col - (o.row + shift * (o.row & 1)) // 2
    r = o.row
    return Cube(q, r, -q - r)


def qoffset_from_cube(h: Cube, shift: int = 0) -> Offset:
    """Cube to flat top q-offset coordinates."""

    col = h.q
    row = h.r + (h.q + shift * (h.q & 1)) // 2
    return Offset(col, row)


def qoffset_to_cube(o: Offset, shift: int = 0) -> Cube:
    q = o.col
    r = o.row - (o.col + shift * (o.col & 1)) // 2
    return Cube(q, r, -q - r)


def cube_to_offset(h: Cube, layout: Layout) -> Offset:
    if layout.is_row_layout:
        return roffset_from_cube(h, layout.shift)
    return qoffset_from_cube(h, layout.shift)


def offset_to_cube(o: Offset, layout: Layout) -> Cube:
    if layout.is_row_layout:
        return roffset_to_cube(o, layout.shift)
    return qoffset_to_cube(o, layout.shift)


__all__ = [
    "roffset_from_cube",
    "roffset_to_cube",
    "qoffset_from_cube",
    "qoffset_to_cube",
    "cube_to_offset",
    "offset_to_cube",
]
