"""Validated settings for building and displaying grids."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .grid import HexGrid, create

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class RenderMode(str, Enum):
    """Which coordinates the debug renderer writes into each hexagon."""

    CUBE = "cube"
    OFFSET = "offset"


class GridSpec(BaseModel):
    """Rectangular grid parameters, see :func:`hextille.grid.create`."""

    model_config = ConfigDict(extra="forbid")

    rows: int = Field(default=4, ge=0)
    columns: int = Field(default=4, ge=0)
    offset_col: int = Field(default=0)
    offset_row: int = Field(default=0)

    def build(self) -> HexGrid:
        return create(self.rows, self.columns, self.offset_col, self.offset_row)


class RenderSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: RenderMode = Field(default=RenderMode.CUBE)
    title: str = Field(default="Hex Grid")
    border_style: str = Field(default="cyan")


class HextilleSettings(BaseModel):
    """Top-level settings document."""

    model_config = ConfigDict(extra="forbid")

    grid: GridSpec = Field(default_factory=GridSpec)
    render: RenderSettings = Field(default_factory=RenderSettings)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if isinstance(value, int):
            value = logging.getLevelName(value)
        level = str(value).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


def load_settings(path: str | Path) -> HextilleSettings:
    """Read a JSON settings document."""

    return HextilleSettings.model_validate_json(Path(path).read_text(encoding="utf-8"))


__all__ = ["RenderMode", "GridSpec", "RenderSettings", "HextilleSettings", "load_settings"]
