"""Triangulation of subdivided hexagonal disks.

The generator writes through two callbacks so the caller owns the buffers and
the vertex type:

    set_vertex(i, (x, y))      # position of vertex ``i``
    set_index(i, vertex)       # entry ``i`` of the triangle index buffer

Buffer sizes are known up front from :func:`get_mesh_data`, so a batch of
hexes always fills ``[0, vertices_count)`` and ``[0, indices_count)``.

The triangulation follows
http://www.voidinspace.com/2014/07/project-twa-part-1-generating-a-hexagonal-tile-and-its-triangular-grid/
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Iterable, NamedTuple

import structlog

from .geometry import Point2, rotate, translate

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import Coordinate
    from .grid import HexagonalGrid

logger = structlog.get_logger(__name__)

VertexSetter = Callable[[int, Point2], None]
IndexSetter = Callable[[int, int], None]

_SIN60 = math.sin(math.pi / 3.0)
_INV_TAN60 = 1.0 / math.tan(math.pi / 3.0)


class MeshData(NamedTuple):
    vertices_count: int
    indices_count: int


def get_mesh_data(hexes_count: int, subdivide: int) -> MeshData:
    """Number of vertices and indices needed for ``hexes_count`` hexes.

    Per hex: ``1 + sum(6 * i)`` vertices and ``sum(36 * i - 18)`` indices for
    ``i`` in ``1 .. subdivide``.
    """

    if hexes_count < 0:
        raise ValueError("hexes_count must be non-negative")
    if subdivide < 0:
        raise ValueError("subdivide must be non-negative")

    vertices = 1
    indices = 0
    for i in range(1, subdivide + 1):
        vertices += 6 * i
        indices += 36 * i - 18
    return MeshData(vertices * hexes_count, indices * hexes_count)


def create_hex_mesh(
    grid: HexagonalGrid,
    subdivide: int,
    set_vertex: VertexSetter,
    set_index: IndexSetter,
) -> None:
    """Triangulate one hex centred on the origin."""

    if subdivide < 0:
        raise ValueError("subdivide must be non-negative")

    radius = grid.described_radius
    angle = grid.angle_to_first_neighbor
    # Distance between two neighbouring points on a column.
    rdq = radius / subdivide if subdivide else 0.0

    vertex = 0
    index = 0

    # Running totals used to address the neighbouring columns.
    current_num_points = 0
    prev_col_num_points = 0

    np_col0 = 2 * subdivide + 1
    col_min = -subdivide
    col_max = subdivide

    for it_c in range(col_min, col_max + 1):
        x = _SIN60 * rdq * it_c

        np_col_i = np_col0 - abs(it_c)

        row_min = -subdivide
        if it_c < 0:
            row_min += abs(it_c)
        row_max = row_min + np_col_i - 1

        current_num_points += np_col_i

        for it_r in range(row_min, row_max + 1):
            z = _INV_TAN60 * x + rdq * it_r
            set_vertex(vertex, rotate((x, z), angle))

            # Triangles are spawned from every point except the last of the column.
            if vertex < current_num_points - 1:
                if col_min <= it_c < col_max:
                    pad_left = 1 if it_c < 0 else 0
                    set_index(index, vertex + np_col_i + pad_left)
                    set_index(index + 1, vertex + 1)
                    set_index(index + 2, vertex)
                    index += 3

                if col_min < it_c <= col_max:
                    pad_right = 1 if it_c > 0 else 0
                    set_index(index, vertex - prev_col_num_points + pad_right)
                    set_index(index + 1, vertex)
                    set_index(index + 2, vertex + 1)
                    index += 3

            vertex += 1

        prev_col_num_points = np_col_i


def create_mesh(
    grid: HexagonalGrid,
    hexes: Iterable[Coordinate],
    subdivide: int,
    set_vertex: VertexSetter,
    set_index: IndexSetter,
) -> MeshData:
    """Triangulate every hex of ``hexes`` into one shared pair of buffers.

    Each hex reuses the single-hex layout: its vertices are moved to the hex
    center and its indices are shifted past the vertices of the hexes already
    written. Returns the totals actually written.
    """

    per_hex = get_mesh_data(1, subdivide)
    vertex = 0
    index = 0
    count = 0

    for hex_coord in hexes:
        center = grid.to_point(hex_coord)
        base_vertex = vertex
        base_index = index

        def set_local_vertex(i: int, point: Point2) -> None:
            set_vertex(base_vertex + i, translate(point, center))

        def set_local_index(i: int, local_vertex: int) -> None:
            set_index(base_index + i, base_vertex + local_vertex)

        create_hex_mesh(grid, subdivide, set_local_vertex, set_local_index)

        vertex += per_hex.vertices_count
        index += per_hex.indices_count
        count += 1

    logger.debug(
        "Hex mesh generated",
        hexes=count,
        subdivide=subdivide,
        vertices=vertex,
        indices=index,
    )
    return MeshData(vertex, index)
