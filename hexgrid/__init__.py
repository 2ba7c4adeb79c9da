"""Geometry for infinite hexagonal grids: coordinates, topology and meshes."""

from .adapters import (
    MeshArrays,
    PlanarAdapter,
    PointAdapter,
    SpatialAdapter,
    UpAxis,
    build_mesh_arrays,
    vertex_normals,
)
from .config import GridConfig, HexgridConfig, LoggingConfig, MeshConfig
from .conversions import (
    axial_to_cubic,
    axial_to_offset,
    axial_to_point,
    cubic_to_axial,
    cubic_to_offset,
    cubic_to_point,
    offset_to_axial,
    offset_to_cubic,
    offset_to_point,
    point_to_cubic,
)
from .coords import Axial, Coordinate, Cubic, LayoutType, Offset
from .distance import axial_distance, cube_distance, offset_distance
from .errors import HexagonalError, InvalidCoordinateError, InvalidLayoutError, NotAdjacentError
from .geometry import Point2
from .grid import HexagonalGrid
from .log import configure_logging
from .mesh import MeshData, create_hex_mesh, create_mesh, get_mesh_data
from .neighbors import (
    neighbor_axial,
    neighbor_cubic,
    neighbor_offset,
    neighbors_axial,
    neighbors_cubic,
    neighbors_offset,
)

__version__ = "0.3.0"

__all__ = [
    "Axial",
    "Coordinate",
    "Cubic",
    "GridConfig",
    "HexagonalError",
    "HexagonalGrid",
    "HexgridConfig",
    "InvalidCoordinateError",
    "InvalidLayoutError",
    "LayoutType",
    "LoggingConfig",
    "MeshArrays",
    "MeshConfig",
    "MeshData",
    "NotAdjacentError",
    "Offset",
    "PlanarAdapter",
    "Point2",
    "PointAdapter",
    "SpatialAdapter",
    "UpAxis",
    "axial_distance",
    "axial_to_cubic",
    "axial_to_offset",
    "axial_to_point",
    "build_mesh_arrays",
    "configure_logging",
    "create_hex_mesh",
    "create_mesh",
    "cube_distance",
    "cubic_to_axial",
    "cubic_to_offset",
    "cubic_to_point",
    "get_mesh_data",
    "neighbor_axial",
    "neighbor_cubic",
    "neighbor_offset",
    "neighbors_axial",
    "neighbors_cubic",
    "neighbors_offset",
    "offset_distance",
    "offset_to_axial",
    "offset_to_cubic",
    "offset_to_point",
    "point_to_cubic",
    "vertex_normals",
]
