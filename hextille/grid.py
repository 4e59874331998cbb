"""Hex grids as sets of cube tiles with boundary and adjacency queries."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Set
from dataclasses import dataclass

from .conversions import roffset_from_cube, roffset_to_cube
from .coords import Cube, Direction, Offset
from .cube import neighbour
from .errors import EmptyGrid

log = logging.getLogger(__name__)


class HexGrid(Set):
    """A set of unique :class:`Cube` tiles.

    Tiles can be added but never removed. Membership uses full value
    equality of the cube coordinates.
    """

    __slots__ = ("_tiles",)

    def __init__(self, tiles: Iterable[Cube] = ()) -> None:
        self._tiles: set[Cube] = set(tiles)

    def __contains__(self, tile: object) -> bool:
        return tile in self._tiles

    def __iter__(self) -> Iterator[Cube]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._tiles)} tiles)"

    def add(self, tile: Cube) -> None:
        self._tiles.add(tile)

    def update(self, tiles: Iterable[Cube]) -> None:
        self._tiles.update(tiles)


@dataclass(frozen=True, slots=True)
class Boundaries:
    """Extent of a grid in r-offset coordinates, bounds inclusive."""

    min_col: int
    max_col: int
    min_row: int
    max_row: int


def create(rows: int, columns: int, offset_col: int = 0, offset_row: int = 0) -> HexGrid:
    """Build a rectangular grid of ``rows + 1`` by ``columns + 1`` tiles.

    Offset position ``(offset_col, offset_row)`` is the top left corner; with
    no offset that corner is the cube origin. Positions are converted with
    the r-offset layout and ``shift == 0``. Negative ``rows`` or ``columns``
    give an empty grid.
    """

    grid = HexGrid()
    for row in range(offset_row, offset_row + rows + 1):
        for col in range(offset_col, offset_col + columns + 1):
            grid.add(roffset_to_cube(Offset(col, row)))
    log.debug(
        "created grid of %d tiles anchored at (%d, %d)", len(grid), offset_col, offset_row
    )
    return grid


def boundaries(grid: Iterable[Cube], shift: int = 0) -> Boundaries:
    """Return the minimum and maximum r-offset column and row of ``grid``.

    >>> boundaries(create(4, 4, -2, -2))
    Boundaries(min_col=-2, max_col=2, min_row=-2, max_row=2)
    """

    offsets = [roffset_from_cube(h, shift) for h in grid]
    if not offsets:
        raise EmptyGrid("Cannot compute boundaries of an empty grid")
    return Boundaries(
        min_col=min(o.col for o in offsets),
        max_col=max(o.col for o in offsets),
        min_row=min(o.row for o in offsets),
        max_row=max(o.row for o in offsets),
    )


def has_neighbour(grid: Set[Cube], tile: Cube, direction: Direction) -> bool:
    """Whether the tile next to ``tile`` towards ``direction`` is in ``grid``."""

    return neighbour(tile, direction) in grid


def has_neighbours(grid: Set[Cube], tile: Cube) -> dict[Direction, bool]:
    """Map every direction to :func:`has_neighbour` for ``tile``.

    ``tile`` itself does not have to be part of ``grid``.
    """

    return {d: has_neighbour(grid, tile, d) for d in Direction}


__all__ = [
    "HexGrid",
    "Boundaries",
    "create",
    "boundaries",
    "has_neighbour",
    "has_neighbours",
]
