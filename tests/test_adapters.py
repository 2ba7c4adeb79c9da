import numpy as np
import pytest

from hexgrid import (
    HexagonalGrid,
    LayoutType,
    Offset,
    PlanarAdapter,
    SpatialAdapter,
    UpAxis,
    build_mesh_arrays,
    vertex_normals,
)

INSCRIBED_RADIUS = 0.5


@pytest.fixture
def grid() -> HexagonalGrid:
    return HexagonalGrid(LayoutType.FLAT_ODD, INSCRIBED_RADIUS)


def test_planar_adapter_roundtrip():
    adapter = PlanarAdapter()
    vector = adapter.from_point((1.5, -2.0))
    assert vector.shape == (2,)
    assert adapter.to_point(vector) == (1.5, -2.0)


@pytest.mark.parametrize(
    ("up_axis", "expected"),
    [(UpAxis.Y, (1.5, 4.0, -2.0)), (UpAxis.Z, (1.5, -2.0, 4.0))],
)
def test_spatial_adapter_places_height_on_the_up_axis(up_axis: UpAxis, expected) -> None:
    adapter = SpatialAdapter(up_axis=up_axis, height=4.0)
    vector = adapter.from_point((1.5, -2.0))
    assert tuple(vector) == expected
    assert adapter.to_point(vector) == (1.5, -2.0)


def test_grid_accepts_points_read_from_engine_vectors(grid: HexagonalGrid) -> None:
    adapter = SpatialAdapter()
    cell = Offset(3, 2)
    vector = adapter.from_point(grid.to_point(cell))
    assert grid.to_offset(adapter.to_point(vector)) == cell


def test_build_mesh_arrays_defaults_to_planar(grid: HexagonalGrid) -> None:
    arrays = build_mesh_arrays(grid, [Offset(0, 0)], 2)
    data = grid.get_mesh_data(1, 2)
    assert arrays.vertices.shape == (data.vertices_count, 2)
    assert arrays.indices.shape == (data.indices_count,)
    assert arrays.triangles.shape == (data.indices_count // 3, 3)


def test_build_mesh_arrays_in_space(grid: HexagonalGrid) -> None:
    hexes = (cell for cell in [Offset(0, 0), Offset(1, 1), Offset(2, 0)])
    arrays = build_mesh_arrays(grid, hexes, 3, SpatialAdapter(up_axis=UpAxis.Y, height=1.25))
    data = grid.get_mesh_data(3, 3)

    assert arrays.vertices.shape == (data.vertices_count, 3)
    assert np.all(arrays.vertices[:, 1] == 1.25)
    assert arrays.indices.max() < data.vertices_count
    assert arrays.indices.min() >= 0


def test_vertex_normals_point_along_the_up_axis(grid: HexagonalGrid) -> None:
    arrays = build_mesh_arrays(grid, [Offset(0, 0), Offset(0, 1)], 2, SpatialAdapter())
    normals = vertex_normals(arrays.vertices, arrays.indices)

    assert normals.shape == arrays.vertices.shape
    np.testing.assert_allclose(np.abs(normals[:, 1]), 1.0)
    np.testing.assert_allclose(normals[:, [0, 2]], 0.0, atol=1e-12)
    assert len(np.unique(np.sign(normals[:, 1]))) == 1


def test_vertex_normals_need_three_dimensions(grid: HexagonalGrid) -> None:
    arrays = build_mesh_arrays(grid, [Offset(0, 0)], 1)
    with pytest.raises(ValueError):
        vertex_normals(arrays.vertices, arrays.indices)
