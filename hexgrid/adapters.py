"""Bridges between plain ``(x, y)`` points and engine-side vector buffers.

The grid only ever speaks :data:`~hexgrid.geometry.Point2`. Anything that
renders (2D canvases, 3D engines with a Y- or Z-up convention) goes through a
:class:`PointAdapter`, and :func:`build_mesh_arrays` uses one to fill numpy
vertex/index buffers sized from :func:`~hexgrid.mesh.get_mesh_data`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Protocol, Sequence

import numpy as np
import structlog

from .geometry import Point2

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Coordinate
    from .grid import HexagonalGrid

logger = structlog.get_logger(__name__)


class UpAxis(str, Enum):
    """Axis left free for height when the grid plane is embedded in 3D."""

    Y = "y"
    Z = "z"


class PointAdapter(Protocol):
    """Two-way conversion between grid points and engine vectors."""

    dimensions: int

    def to_point(self, vector: Sequence[float]) -> Point2:
        ...

    def from_point(self, point: Point2) -> np.ndarray:
        ...


@dataclass(frozen=True)
class PlanarAdapter:
    """Grid plane mapped one to one onto 2D vectors."""

    dimensions: int = 2

    def to_point(self, vector: Sequence[float]) -> Point2:
        return float(vector[0]), float(vector[1])

    def from_point(self, point: Point2) -> np.ndarray:
        return np.array(point, dtype=np.float64)


@dataclass(frozen=True)
class SpatialAdapter:
    """Grid plane embedded in 3D; ``up_axis`` carries a constant ``height``."""

    up_axis: UpAxis = UpAxis.Y
    height: float = 0.0
    dimensions: int = 3

    def to_point(self, vector: Sequence[float]) -> Point2:
        if self.up_axis == UpAxis.Y:
            return float(vector[0]), float(vector[2])
        return float(vector[0]), float(vector[1])

    def from_point(self, point: Point2) -> np.ndarray:
        x, y = point
        if self.up_axis == UpAxis.Y:
            return np.array((x, self.height, y), dtype=np.float64)
        return np.array((x, y, self.height), dtype=np.float64)


@dataclass(frozen=True)
class MeshArrays:
    vertices: np.ndarray
    indices: np.ndarray

    @property
    def triangles(self) -> np.ndarray:
        return self.indices.reshape(-1, 3)


def build_mesh_arrays(
    grid: HexagonalGrid,
    hexes: Iterable[Coordinate],
    subdivide: int,
    adapter: PointAdapter | None = None,
) -> MeshArrays:
    """Generate the mesh for ``hexes`` straight into preallocated numpy buffers."""

    if adapter is None:
        adapter = PlanarAdapter()
    hexes = list(hexes)
    data = grid.get_mesh_data(len(hexes), subdivide)
    vertices = np.zeros((data.vertices_count, adapter.dimensions), dtype=np.float64)
    indices = np.zeros(data.indices_count, dtype=np.int32)

    def set_vertex(i: int, point: Point2) -> None:
        vertices[i] = adapter.from_point(point)

    def set_index(i: int, vertex: int) -> None:
        indices[i] = vertex

    grid.create_mesh(hexes, subdivide, set_vertex, set_index)
    logger.debug(
        "Mesh buffers filled",
        dimensions=adapter.dimensions,
        vertices=data.vertices_count,
        indices=data.indices_count,
    )
    return MeshArrays(vertices=vertices, indices=indices)


def vertex_normals(vertices: np.ndarray, indices: np.ndarray) -> np.ndarray:
    """Area-weighted, normalised per-vertex normals of a 3D triangle mesh."""

    vertices = np.asarray(vertices, dtype=np.float64)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise ValueError("vertex normals need an (n, 3) vertex array")
    triangles = np.asarray(indices, dtype=np.int64).reshape(-1, 3)

    a = vertices[triangles[:, 0]]
    b = vertices[triangles[:, 1]]
    c = vertices[triangles[:, 2]]
    face_normals = np.cross(b - a, c - a)

    normals = np.zeros_like(vertices)
    for corner in range(3):
        np.add.at(normals, triangles[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    np.divide(normals, lengths, out=normals, where=lengths > 0)
    return normals
