from __future__ import annotations

from .conversions import axial_to_cubic, offset_to_cubic
from .coords import Axial, Cubic, LayoutType, Offset


def cube_distance(a: Cubic, b: Cubic) -> int:
    return (abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)) // 2


def axial_distance(a: Axial, b: Axial) -> int:
    return cube_distance(axial_to_cubic(a), axial_to_cubic(b))


def offset_distance(a: Offset, b: Offset, layout: LayoutType) -> int:
    return cube_distance(offset_to_cubic(a, layout), offset_to_cubic(b, layout))
