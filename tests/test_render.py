import logging

import pytest
from rich.console import Console
from rich.panel import Panel

from hextille import Cube, EmptyGrid, HexGrid, create
from hextille.config import RenderMode, RenderSettings
from hextille.render import (
    draw_cube,
    draw_offset,
    render_panel,
    visualize,
    visualize_cube,
    visualize_offset,
)


def test_visualize_cube_single_tile():
    assert visualize_cube(HexGrid([Cube(0, 0, 0)])).splitlines() == [
        "   .^.   ",
        ".´0   0`.",
        "|       |",
        "^.   0 .^",
        "   `.´   ",
    ]


def test_visualize_offset_single_tile():
    assert visualize_offset(HexGrid([Cube(0, 0, 0)])).splitlines() == [
        "   .^.   ",
        ".´     `.",
        "|  0 0  |",
        "^.     .^",
        "   `.´   ",
    ]


def test_visualize_cube_two_rows_interlock():
    assert visualize_cube(create(1, 1)).splitlines() == [
        "   .^.     .^.   ",
        ".´0   0`.´-1  1`.",
        "|       |       |",
        "^.   0 .^.   0 .^",
        "    .´-1  0`.´-2  1`.",
        "    |       |       |",
        "    ^.   1 .^.   1 .^",
        "       `.´     `.´   ",
    ]


def test_visualize_offset_labels_every_tile():
    text = visualize_offset(create(2, 2, -1, -1))
    for col in range(-1, 2):
        for row in range(-1, 2):
            assert f"{col:>3} {row:<3}|" in text


def test_visualize_leaves_room_for_holes_in_a_row():
    middle = visualize_cube(HexGrid([Cube(0, 0, 0), Cube(2, 0, -2)])).splitlines()[2]
    assert middle == "|       |" + " " * 7 + "|       |"


def test_visualize_does_not_modify_grid():
    grid = create(2, 2)
    before = set(grid)
    visualize_cube(grid)
    visualize_offset(grid)
    assert set(grid) == before


def test_visualize_empty_grid_fails():
    with pytest.raises(EmptyGrid):
        visualize_cube(HexGrid())


def test_visualize_dispatches_on_mode():
    grid = create(1, 1)
    assert visualize(grid, RenderMode.OFFSET) == visualize_offset(grid)
    assert visualize(grid, "cube") == visualize_cube(grid)


def test_draw_logs_at_debug_level(caplog):
    grid = create(1, 1)
    with caplog.at_level(logging.DEBUG, logger="hextille.render"):
        cube_text = draw_cube(grid)
        offset_text = draw_offset(grid)
    messages = [record.getMessage() for record in caplog.records if record.name == "hextille.render"]
    assert messages == ["\n" + cube_text, "\n" + offset_text]


def test_render_panel_uses_settings():
    settings = RenderSettings(mode=RenderMode.OFFSET, title="Test Grid", border_style="red")
    panel = render_panel(create(1, 1), settings)
    assert isinstance(panel, Panel)
    assert panel.title == "Test Grid"
    assert panel.border_style == "red"

    console = Console(width=80, color_system=None, record=True)
    console.print(panel)
    output = console.export_text()
    assert "Test Grid" in output
    assert "  1 1  |" in output


def test_visualize_separates_rows_around_a_missing_row():
    assert visualize_cube(HexGrid([Cube(0, 0, 0), Cube(-1, 2, -1)])).splitlines() == [
        "   .^.   ",
        ".´0   0`.",
        "|       |",
        "^.   0 .^",
        "   `.´   ",
        "",
        "   .^.   ",
        ".´-1 -1`.",
        "|       |",
        "^.   2 .^",
        "   `.´   ",
    ]
