"""Validated configuration models for grids, meshes and logging."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .adapters import PlanarAdapter, PointAdapter, SpatialAdapter, UpAxis
from .coords import LayoutType

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid import HexagonalGrid


class GridConfig(BaseModel):
    """Layout and size of a hex grid."""

    model_config = ConfigDict(extra="forbid")

    layout: LayoutType = Field(default=LayoutType.POINTY_ODD)
    inscribed_radius: float = Field(default=0.5, gt=0.0)

    def build(self) -> HexagonalGrid:
        """Instantiate the :class:`~hexgrid.grid.HexagonalGrid` described here."""

        from .grid import HexagonalGrid

        return HexagonalGrid(self.layout, self.inscribed_radius)


class MeshConfig(BaseModel):
    """Subdivision and output space for generated meshes."""

    model_config = ConfigDict(extra="forbid")

    subdivide: int = Field(default=1, ge=0)
    up_axis: UpAxis | None = Field(default=UpAxis.Y)
    height: float = Field(default=0.0)

    def adapter(self) -> PointAdapter:
        if self.up_axis is None:
            return PlanarAdapter()
        return SpatialAdapter(up_axis=self.up_axis, height=self.height)


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = str(value).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @property
    def numeric_level(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


class HexgridConfig(BaseModel):
    """Top-level configuration payload."""

    model_config = ConfigDict(extra="forbid")

    grid: GridConfig = Field(default_factory=GridConfig)
    mesh: MeshConfig = Field(default_factory=MeshConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
