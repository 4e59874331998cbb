"""Text visualisation of grids for debugging.

Each tile is drawn as a pointy top hexagon. Rows are indented by their
r-offset column so neighbouring rows interlock::

       .^.     .^.
    .´0   0`.´-1  1`.
    |       |       |
    ^.   0 .^.   0 .^
       `.´     `.´

The renderers only read the grid.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable

from rich.panel import Panel
from rich.text import Text

from .config import RenderMode, RenderSettings
from .conversions import roffset_from_cube
from .coords import Cube
from .grid import boundaries

log = logging.getLogger(__name__)

_CELL_WIDTH = 8

# (first hexagon of a run, following hexagons) per section
_CUBE_PARTS: dict[str, tuple[str, str]] = {
    "top": ("   .^.   ", "  .^.   "),
    "top_coords": (".´{s:<2} {q:>2}`.", "´{s:<2} {q:>2}`."),
    "middle": ("|       |", "       |"),
    "bottom_coords": ("^. {r:>3} .^", ". {r:>3} .^"),
    "bottom": ("   `.´   ", "  `.´   "),
}

_OFFSET_PARTS: dict[str, tuple[str, str]] = {
    "top": ("   .^.   ", "  .^.   "),
    "top_coords": (".´     `.", "´     `."),
    "middle": ("|{col:>3} {row:<3}|", "{col:>3} {row:<3}|"),
    "bottom_coords": ("^.     .^", ".     .^"),
    "bottom": ("   `.´   ", "  `.´   "),
}


def _rows(grid: Iterable[Cube]) -> dict[int, list[Cube]]:
    rows: dict[int, list[Cube]] = defaultdict(list)
    for h in grid:
        rows[h.r].append(h)
    for tiles in rows.values():
        tiles.sort(key=lambda h: h.q)
    return rows


def _draw_row(
    tiles: list[Cube],
    parts: dict[str, tuple[str, str]],
    min_col: int,
    first_row: bool,
    last_row: bool,
) -> list[str]:
    offsets = [roffset_from_cube(h) for h in tiles]
    row = offsets[0].row
    # 8 columns per missing hexagon, odd rows are shoved half a hexagon right
    indent = " " * (_CELL_WIDTH * (offsets[0].col - min_col) + 4 * (row & 1))

    sections = ["top_coords", "middle", "bottom_coords"]
    if first_row:
        sections.insert(0, "top")
    if last_row:
        sections.append("bottom")

    lines = []
    for section in sections:
        first, following = parts[section]
        cells: list[str] = []
        previous: int | None = None
        for h, o in zip(tiles, offsets):
            if previous is None:
                template = first
            elif o.col - previous > 1:
                # restart the outline after a hole in the row
                cells.append(" " * (_CELL_WIDTH * (o.col - previous - 1) - 1))
                template = first
            else:
                template = following
            cells.append(template.format(q=h.q, r=h.r, s=h.s, col=o.col, row=o.row))
            previous = o.col
        lines.append(indent + "".join(cells))
    return lines


def _visualize(grid: Iterable[Cube], parts: dict[str, tuple[str, str]]) -> str:
    tiles = list(grid)
    bounds = boundaries(tiles)
    rows = _rows(tiles)
    lines: list[str] = []
    for row in range(bounds.min_row, bounds.max_row + 1):
        if row not in rows:
            # blank band keeps the rows around a missing one apart
            lines.append("")
            continue
        lines.extend(
            _draw_row(
                rows[row],
                parts,
                bounds.min_col,
                first_row=row - 1 not in rows,
                last_row=row + 1 not in rows,
            )
        )
    return "\n".join(lines)


def visualize_cube(grid: Iterable[Cube]) -> str:
    """Draw ``grid`` labelling every hexagon with its cube coordinates.

    ``s`` and ``q`` are printed above the centre, ``r`` below it.
    Raises :class:`~hextille.errors.EmptyGrid` for an empty grid.
    """

    return _visualize(grid, _CUBE_PARTS)


def visualize_offset(grid: Iterable[Cube]) -> str:
    """Draw ``grid`` labelling every hexagon with ``col row`` r-offsets."""

    return _visualize(grid, _OFFSET_PARTS)


def visualize(grid: Iterable[Cube], mode: RenderMode = RenderMode.CUBE) -> str:
    if RenderMode(mode) is RenderMode.OFFSET:
        return visualize_offset(grid)
    return visualize_cube(grid)


def draw_cube(grid: Iterable[Cube]) -> str:
    """Log :func:`visualize_cube` at DEBUG level and return it."""

    text = visualize_cube(grid)
    log.debug("\n%s", text)
    return text


def draw_offset(grid: Iterable[Cube]) -> str:
    text = visualize_offset(grid)
    log.debug("\n%s", text)
    return text


def render_panel(grid: Iterable[Cube], settings: RenderSettings | None = None) -> Panel:
    """Wrap the visualisation of ``grid`` in a rich :class:`~rich.panel.Panel`."""

    settings = settings or RenderSettings()
    text = Text(visualize(grid, settings.mode), no_wrap=True)
    return Panel(text, title=settings.title, border_style=settings.border_style)


__all__ = [
    "visualize_cube",
    "visualize_offset",
    "visualize",
    "draw_cube",
    "draw_offset",
    "render_panel",
]
