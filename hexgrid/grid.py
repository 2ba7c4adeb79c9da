"""Geometry of an infinite hexagonal grid.

:class:`HexagonalGrid` binds a :class:`~hexgrid.coords.LayoutType` to a hex
size and exposes every conversion and topology query for the three coordinate
systems. It keeps no state besides the layout and the radius, so one instance
can be shared freely.

Usage:
    grid = HexagonalGrid(LayoutType.POINTY_ODD, 0.5)
    axial = grid.to_axial(Offset(3, 4))
    ring = list(grid.get_neighbors_ring(axial, 2))
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import partial
from typing import Callable, Iterable, Iterator, Sequence

import structlog

from . import mesh
from .conversions import (
    axial_to_cubic,
    cubic_to_axial,
    cubic_to_offset,
    cubic_to_point,
    offset_to_cubic,
    point_to_cubic,
)
from .coords import Axial, Coordinate, Cubic, LayoutType, Offset
from .distance import cube_distance
from .errors import InvalidLayoutError, NotAdjacentError
from .geometry import EDGES_COUNT, Point2, deg2rad, midpoint
from .neighbors import (
    is_neighbors,
    neighbor_axial,
    neighbor_cubic,
    neighbor_index,
    neighbor_offset,
    normalize_index,
    ring,
    spiral,
)

logger = structlog.get_logger(__name__)


def _as_point(value: Sequence[float]) -> Point2:
    x, y = value
    return float(x), float(y)


@dataclass(frozen=True)
class HexagonalGrid:
    """Layout plus inscribed radius; everything else is derived."""

    layout: LayoutType
    inscribed_radius: float

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "layout", LayoutType(self.layout))
        except ValueError as exc:
            raise InvalidLayoutError("grid created with unexpected layout", layout=self.layout) from exc
        if self.inscribed_radius <= 0:
            raise ValueError("inscribed_radius must be positive")
        logger.debug(
            "Hexagonal grid created",
            layout=self.layout.value,
            inscribed_radius=self.inscribed_radius,
        )

    # ------------------------------------------------------------------
    # Metrics

    @property
    def described_radius(self) -> float:
        return self.inscribed_radius / math.cos(math.pi / EDGES_COUNT)

    @property
    def inscribed_diameter(self) -> float:
        return self.inscribed_radius * 2.0

    @property
    def described_diameter(self) -> float:
        return self.described_radius * 2.0

    @property
    def side_length(self) -> float:
        return self.described_radius

    @property
    def horizontal_offset(self) -> float:
        """Distance between a hex and its right-hand neighbor along X."""

        if self.layout.is_flat:
            return self.described_radius * 1.5
        return self.inscribed_radius * 2.0

    @property
    def vertical_offset(self) -> float:
        """Distance between a hex and its upper neighbor along Y."""

        if self.layout.is_flat:
            return self.inscribed_radius * 2.0
        return self.described_radius * 1.5

    @property
    def angle_to_first_neighbor(self) -> float:
        """Degrees between the (0, 1) vector and the direction of neighbor 0."""

        return 30.0 if self.layout.is_flat else 0.0

    # ------------------------------------------------------------------
    # Conversions

    def to_cubic(self, value: Coordinate | Sequence[float]) -> Cubic:
        if isinstance(value, Cubic):
            return value
        if isinstance(value, Axial):
            return axial_to_cubic(value)
        if isinstance(value, Offset):
            return offset_to_cubic(value, self.layout)
        return point_to_cubic(_as_point(value), self.layout, self.described_radius)

    def to_axial(self, value: Coordinate | Sequence[float]) -> Axial:
        if isinstance(value, Axial):
            return value
        return cubic_to_axial(self.to_cubic(value))

    def to_offset(self, value: Coordinate | Sequence[float]) -> Offset:
        if isinstance(value, Offset):
            return value
        return cubic_to_offset(self.to_cubic(value), self.layout)

    def to_point(self, coord: Coordinate) -> Point2:
        """Center of the hex in the continuous plane."""

        self._require_coordinate(coord)
        return cubic_to_point(
            self.to_cubic(coord),
            self.layout,
            self.described_radius,
            self.inscribed_diameter,
        )

    # ------------------------------------------------------------------
    # Neighbors

    def get_neighbor(self, coord: Coordinate, index: int) -> Coordinate:
        return self._step(coord)(coord, index)

    def get_neighbors(self, coord: Coordinate) -> Iterator[Coordinate]:
        step = self._step(coord)
        for index in range(EDGES_COUNT):
            yield step(coord, index)

    def is_neighbors(self, a: Coordinate, b: Coordinate) -> bool:
        self._require_same_type(a, b)
        return is_neighbors(a, b, self._step(a))

    def get_neighbor_index(self, center: Coordinate, neighbor: Coordinate) -> int:
        self._require_same_type(center, neighbor)
        return neighbor_index(center, neighbor, self.get_neighbors(center), self)

    def get_neighbors_ring(self, center: Coordinate, radius: int) -> Iterator[Coordinate]:
        return ring(center, radius, self._step(center))

    def get_neighbors_around(self, center: Coordinate, radius: int) -> Iterator[Coordinate]:
        return spiral(center, radius, self._step(center))

    def cube_distance(self, a: Coordinate, b: Coordinate) -> int:
        return cube_distance(self.to_cubic(a), self.to_cubic(b))

    # ------------------------------------------------------------------
    # Corners and edges

    def get_corner(self, coord: Coordinate, index: int) -> Point2:
        """Corner ``index`` of the hex, counter-clockwise from the first one."""

        cx, cy = self.to_point(coord)
        degrees = 60.0 * normalize_index(index)
        if self.layout.is_pointy:
            degrees -= 30.0
        radians = deg2rad(degrees)
        return (
            cx + self.described_radius * math.cos(radians),
            cy + self.described_radius * math.sin(radians),
        )

    def get_corners(self, coord: Coordinate) -> list[Point2]:
        return [self.get_corner(coord, index) for index in range(EDGES_COUNT)]

    def get_point_between_two_neighbours(self, a: Coordinate, b: Coordinate) -> Point2:
        """Midpoint of the edge shared by two adjacent hexes."""

        if not self.is_neighbors(a, b):
            logger.debug("Edge midpoint requested for non-neighbors", a=str(a), b=str(b))
            raise NotAdjacentError("Can't calculate point between not neighbors", self, a=a, b=b)
        return midpoint(self.to_point(a), self.to_point(b))

    # ------------------------------------------------------------------
    # Mesh

    @staticmethod
    def get_mesh_data(hexes_count: int, subdivide: int) -> mesh.MeshData:
        return mesh.get_mesh_data(hexes_count, subdivide)

    def create_hex_mesh(
        self,
        subdivide: int,
        set_vertex: Callable[[int, Point2], None],
        set_index: Callable[[int, int], None],
    ) -> None:
        mesh.create_hex_mesh(self, subdivide, set_vertex, set_index)

    def create_mesh(
        self,
        hexes: Iterable[Coordinate],
        subdivide: int,
        set_vertex: Callable[[int, Point2], None],
        set_index: Callable[[int, int], None],
    ) -> mesh.MeshData:
        return mesh.create_mesh(self, hexes, subdivide, set_vertex, set_index)

    # ------------------------------------------------------------------
    # Dispatch helpers

    def _step(self, coord: Coordinate) -> Callable:
        if isinstance(coord, Offset):
            return partial(neighbor_offset, layout=self.layout)
        if isinstance(coord, Axial):
            return neighbor_axial
        if isinstance(coord, Cubic):
            return neighbor_cubic
        raise TypeError(f"unsupported coordinate type: {type(coord).__name__}")

    @staticmethod
    def _require_coordinate(coord: object) -> None:
        if not isinstance(coord, (Offset, Axial, Cubic)):
            raise TypeError(f"unsupported coordinate type: {type(coord).__name__}")

    @staticmethod
    def _require_same_type(a: Coordinate, b: Coordinate) -> None:
        if type(a) is not type(b):
            raise TypeError(
                f"coordinates must share a type, got {type(a).__name__} and {type(b).__name__}"
            )
