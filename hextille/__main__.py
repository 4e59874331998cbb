"""Command line entry point printing a debug view of a rectangular grid."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from rich.console import Console

from .config import HextilleSettings, RenderMode, load_settings
from .grid import boundaries
from .render import render_panel

log = logging.getLogger("hextille")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hextille", description="Build a rectangular hex grid and draw it."
    )
    parser.add_argument("--config", help="JSON settings file")
    parser.add_argument("--rows", type=int)
    parser.add_argument("--columns", type=int)
    parser.add_argument("--offset-col", type=int)
    parser.add_argument("--offset-row", type=int)
    parser.add_argument("--mode", choices=[m.value for m in RenderMode])
    parser.add_argument("--log-level")
    return parser


def resolve_settings(args: argparse.Namespace) -> HextilleSettings:
    """Merge command line overrides into the settings file (or defaults)."""

    settings = load_settings(args.config) if args.config else HextilleSettings()
    data = settings.model_dump()
    for key in ("rows", "columns", "offset_col", "offset_row"):
        value = getattr(args, key)
        if value is not None:
            data["grid"][key] = value
    if args.mode is not None:
        data["render"]["mode"] = args.mode
    if args.log_level is not None:
        data["log_level"] = args.log_level
    return HextilleSettings.model_validate(data)


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Run the ``hextille`` command."""

    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    log.info("building grid %s", settings.grid)

    grid = settings.grid.build()
    bounds = boundaries(grid)
    console = console or Console()
    console.print(
        f"{len(grid)} tiles, columns {bounds.min_col}..{bounds.max_col}, "
        f"rows {bounds.min_row}..{bounds.max_row}"
    )
    console.print(render_panel(grid, settings.render))
    return 0


if __name__ == "__main__":  # pragma: no cover - module entry point
    raise SystemExit(main())
