from __future__ import annotations

from .coords import Axial, Cubic, LayoutType, Offset
from .errors import InvalidLayoutError
from .geometry import SQRT3, Point2

_FLAT_LAYOUTS = frozenset({LayoutType.FLAT_ODD, LayoutType.FLAT_EVEN})
_POINTY_LAYOUTS = frozenset({LayoutType.POINTY_ODD, LayoutType.POINTY_EVEN})


def axial_to_cubic(a: Axial) -> Cubic:
    x = a.q
    z = a.r
    y = -x - z
    return Cubic(x, y, z)


def cubic_to_axial(c: Cubic) -> Axial:
    return Axial(c.x, c.z)


def cubic_to_offset(c: Cubic, layout: LayoutType) -> Offset:
    x, z = c.x, c.z
    if layout == LayoutType.FLAT_ODD:
        col = x
        row = z + (x - (x & 1)) // 2
    elif layout == LayoutType.FLAT_EVEN:
        col = x
        row = z + (x + (x & 1)) // 2
    elif layout == LayoutType.POINTY_ODD:
        col = x + (z - (z & 1)) // 2
        row = z
    elif layout == LayoutType.POINTY_EVEN:
        col = x + (z + (z & 1)) // 2
        row = z
    else:
        raise InvalidLayoutError("cubic_to_offset failed with unexpected layout", layout=layout, coord=c)
    return Offset(col, row)


def offset_to_cubic(o: Offset, layout: LayoutType) -> Cubic:
    col, row = o.col, o.row
    if layout == LayoutType.FLAT_ODD:
        x = col
        z = row - (col - (col & 1)) // 2
    elif layout == LayoutType.FLAT_EVEN:
        x = col
        z = row - (col + (col & 1)) // 2
    elif layout == LayoutType.POINTY_ODD:
        x = col - (row - (row & 1)) // 2
        z = row
    elif layout == LayoutType.POINTY_EVEN:
        x = col - (row + (row & 1)) // 2
        z = row
    else:
        raise InvalidLayoutError("offset_to_cubic failed with unexpected layout", layout=layout, coord=o)
    y = -x - z
    return Cubic(x, y, z)


def axial_to_offset(a: Axial, layout: LayoutType) -> Offset:
    return cubic_to_offset(axial_to_cubic(a), layout)


def offset_to_axial(o: Offset, layout: LayoutType) -> Axial:
    return cubic_to_axial(offset_to_cubic(o, layout))


def point_to_cubic(point: Point2, layout: LayoutType, described_radius: float) -> Cubic:
    """Snap a continuous point to the cubic coordinate of the hex containing it."""

    x, y = point
    if layout in _FLAT_LAYOUTS:
        q = x * 2.0 / 3.0 / described_radius
        r = (-x / 3.0 + SQRT3 / 3.0 * y) / described_radius
    elif layout in _POINTY_LAYOUTS:
        q = (x * SQRT3 / 3.0 - y / 3.0) / described_radius
        r = y * 2.0 / 3.0 / described_radius
    else:
        raise InvalidLayoutError("point_to_cubic failed with unexpected layout", layout=layout, x=x, y=y)
    return Cubic.from_fractional(q, -q - r, r)


def axial_to_point(
    a: Axial,
    layout: LayoutType,
    described_radius: float,
    inscribed_diameter: float,
) -> Point2:
    """Center of the hex at ``a`` in the continuous plane."""

    if layout in _FLAT_LAYOUTS:
        x = described_radius * 1.5 * a.q
        y = inscribed_diameter * (a.r + a.q * 0.5)
    elif layout in _POINTY_LAYOUTS:
        x = inscribed_diameter * (a.q + a.r * 0.5)
        y = described_radius * 1.5 * a.r
    else:
        raise InvalidLayoutError("axial_to_point failed with unexpected layout", layout=layout, coord=a)
    return x, y


def cubic_to_point(
    c: Cubic,
    layout: LayoutType,
    described_radius: float,
    inscribed_diameter: float,
) -> Point2:
    return axial_to_point(cubic_to_axial(c), layout, described_radius, inscribed_diameter)


def offset_to_point(
    o: Offset,
    layout: LayoutType,
    described_radius: float,
    inscribed_diameter: float,
) -> Point2:
    return cubic_to_point(offset_to_cubic(o, layout), layout, described_radius, inscribed_diameter)
