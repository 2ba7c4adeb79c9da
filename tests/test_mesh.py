import math

import pytest

from hexgrid import HexagonalGrid, LayoutType, Offset, get_mesh_data
from hexgrid.geometry import similar

INSCRIBED_RADIUS = 0.5


def _single_hex(grid: HexagonalGrid, subdivide: int):
    vertices: dict[int, tuple[float, float]] = {}
    indices: dict[int, int] = {}
    grid.create_hex_mesh(subdivide, vertices.__setitem__, indices.__setitem__)
    return vertices, indices


def _signed_area(a, b, c) -> float:
    return ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2.0


@pytest.mark.parametrize("subdivide", [0, 1, 2, 3, 5])
def test_mesh_data_closed_form(subdivide: int) -> None:
    data = get_mesh_data(1, subdivide)
    assert data.vertices_count == 1 + 6 * subdivide * (subdivide + 1) // 2
    assert data.indices_count == 18 * subdivide * subdivide


def test_mesh_data_scales_with_hex_count():
    single = get_mesh_data(1, 3)
    batch = get_mesh_data(7, 3)
    assert batch.vertices_count == 7 * single.vertices_count
    assert batch.indices_count == 7 * single.indices_count
    assert get_mesh_data(0, 3) == (0, 0)


def test_mesh_data_rejects_negative_arguments():
    with pytest.raises(ValueError):
        get_mesh_data(1, -1)
    with pytest.raises(ValueError):
        get_mesh_data(-1, 1)


@pytest.mark.parametrize("layout", list(LayoutType))
@pytest.mark.parametrize("subdivide", [0, 1, 2, 3, 5])
def test_emitted_buffers_match_mesh_data(layout: LayoutType, subdivide: int) -> None:
    grid = HexagonalGrid(layout, INSCRIBED_RADIUS)
    vertices, indices = _single_hex(grid, subdivide)
    data = grid.get_mesh_data(1, subdivide)

    assert sorted(vertices) == list(range(data.vertices_count))
    assert sorted(indices) == list(range(data.indices_count))
    assert all(0 <= v < data.vertices_count for v in indices.values())


def test_zero_subdivision_is_a_single_center_vertex():
    grid = HexagonalGrid(LayoutType.FLAT_ODD, INSCRIBED_RADIUS)
    vertices, indices = _single_hex(grid, 0)
    assert vertices == {0: (0.0, 0.0)}
    assert indices == {}


@pytest.mark.parametrize("layout", list(LayoutType))
@pytest.mark.parametrize("subdivide", [1, 2, 3])
def test_triangles_share_one_winding_and_cover_the_hex(layout: LayoutType, subdivide: int) -> None:
    grid = HexagonalGrid(layout, INSCRIBED_RADIUS)
    vertices, indices = _single_hex(grid, subdivide)
    flat = [indices[i] for i in range(len(indices))]

    areas = [
        _signed_area(vertices[a], vertices[b], vertices[c])
        for a, b, c in zip(flat[0::3], flat[1::3], flat[2::3])
    ]
    assert all(area > 0 for area in areas)

    hex_area = 3 * math.sqrt(3) / 2 * grid.described_radius**2
    assert sum(areas) == pytest.approx(hex_area)


@pytest.mark.parametrize("layout", list(LayoutType))
@pytest.mark.parametrize("subdivide", [1, 2, 4])
def test_mesh_outline_matches_hex_corners(layout: LayoutType, subdivide: int) -> None:
    grid = HexagonalGrid(layout, INSCRIBED_RADIUS)
    vertices, _ = _single_hex(grid, subdivide)
    points = list(vertices.values())

    assert all(math.hypot(x, y) <= grid.described_radius + 1e-9 for x, y in points)
    for corner in grid.get_corners(Offset(0, 0)):
        assert any(similar(corner, p) for p in points)


@pytest.mark.parametrize("layout", list(LayoutType))
def test_batched_mesh_translates_and_offsets_each_hex(layout: LayoutType) -> None:
    grid = HexagonalGrid(layout, INSCRIBED_RADIUS)
    subdivide = 2
    hexes = [Offset(0, 0), Offset(1, 0), Offset(-2, 3)]
    local_vertices, local_indices = _single_hex(grid, subdivide)
    per_hex = grid.get_mesh_data(1, subdivide)

    vertices: dict[int, tuple[float, float]] = {}
    indices: dict[int, int] = {}
    written = grid.create_mesh(hexes, subdivide, vertices.__setitem__, indices.__setitem__)

    assert written == grid.get_mesh_data(len(hexes), subdivide)
    assert len(vertices) == written.vertices_count
    assert len(indices) == written.indices_count

    for n, hex_coord in enumerate(hexes):
        cx, cy = grid.to_point(hex_coord)
        for i, (x, y) in local_vertices.items():
            assert similar(vertices[n * per_hex.vertices_count + i], (x + cx, y + cy))
        for i, v in local_indices.items():
            assert indices[n * per_hex.indices_count + i] == n * per_hex.vertices_count + v


def test_batched_mesh_accepts_any_coordinate_type():
    grid = HexagonalGrid(LayoutType.POINTY_EVEN, INSCRIBED_RADIUS)
    cells = [Offset(0, 0), Offset(3, 1)]
    from_offset: dict[int, tuple[float, float]] = {}
    from_axial: dict[int, tuple[float, float]] = {}

    grid.create_mesh(cells, 1, from_offset.__setitem__, lambda i, v: None)
    grid.create_mesh([grid.to_axial(c) for c in cells], 1, from_axial.__setitem__, lambda i, v: None)

    assert from_offset.keys() == from_axial.keys()
    assert all(similar(from_offset[i], from_axial[i]) for i in from_offset)


def test_negative_subdivision_is_rejected():
    grid = HexagonalGrid(LayoutType.POINTY_ODD, INSCRIBED_RADIUS)
    with pytest.raises(ValueError):
        grid.create_hex_mesh(-1, lambda i, p: None, lambda i, v: None)
