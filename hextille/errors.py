"""Exceptions raised by :mod:`hextille`."""

from __future__ import annotations


class HextilleError(Exception):
    """Base class for every error raised by the package."""


class InvalidCoordinate(HextilleError, ValueError):
    """Raised when cube coordinates break the ``q + r + s == 0`` constraint."""

    def __init__(self, q: int, r: int, s: int) -> None:
        self.q = q
        self.r = r
        self.s = s
        super().__init__(
            f"Invalid coordinates ({q}, {r}, {s}), constraint q + r + s = 0"
        )


class EmptyGrid(HextilleError, ValueError):
    """Raised when a query needs at least one tile but the grid has none."""


__all__ = ["HextilleError", "InvalidCoordinate", "EmptyGrid"]
