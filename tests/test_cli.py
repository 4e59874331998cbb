import json

import pytest
from pydantic import ValidationError
from rich.console import Console

from hextille.__main__ import build_parser, main, resolve_settings
from hextille.config import RenderMode


def _run(argv):
    console = Console(width=120, color_system=None, record=True)
    assert main(argv, console=console) == 0
    return console.export_text()


def test_main_prints_boundaries_and_grid():
    output = _run(["--rows", "4", "--columns", "4", "--offset-col", "-2", "--offset-row", "-2"])
    assert "25 tiles, columns -2..2, rows -2..2" in output
    assert "Hex Grid" in output


def test_main_offset_mode():
    output = _run(["--rows", "0", "--columns", "0", "--mode", "offset"])
    assert "1 tiles" in output
    assert "|  0 0  |" in output


def test_command_line_overrides_config_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"grid": {"rows": 1, "columns": 1}, "render": {"mode": "offset"}}),
        encoding="utf-8",
    )
    args = build_parser().parse_args(["--config", str(path), "--columns", "3"])
    settings = resolve_settings(args)
    assert (settings.grid.rows, settings.grid.columns) == (1, 3)
    assert settings.render.mode is RenderMode.OFFSET


def test_invalid_override_is_rejected():
    args = build_parser().parse_args(["--rows", "-1"])
    with pytest.raises(ValidationError):
        resolve_settings(args)
