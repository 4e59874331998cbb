"""Cube coordinates, offset conversions and grids for hexagonal tiles."""

import logging

from .coords import Cube, FractionalCube, Offset, Direction, Rotation, Layout
from .cube import (
    ORIGIN,
    add,
    subtract,
    scale,
    rotate,
    directions,
    neighbour,
    neighbours,
    length,
    distance,
    round_hex,
)
from .conversions import (
    roffset_from_cube,
    roffset_to_cube,
    qoffset_from_cube,
    qoffset_to_cube,
    cube_to_offset,
    offset_to_cube,
)
from .grid import HexGrid, Boundaries, create, boundaries, has_neighbour, has_neighbours
from .errors import HextilleError, InvalidCoordinate, EmptyGrid

__version__ = "0.2.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Cube",
    "FractionalCube",
    "Offset",
    "Direction",
    "Rotation",
    "Layout",
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
    "roffset_from_cube",
    "roffset_to_cube",
    "qoffset_from_cube",
    "qoffset_to_cube",
    "cube_to_offset",
    "offset_to_cube",
    "HexGrid",
    "Boundaries",
    "create",
    "boundaries",
    "has_neighbour",
    "has_neighbours",
    "HextilleError",
    "InvalidCoordinate",
    "EmptyGrid",
]
