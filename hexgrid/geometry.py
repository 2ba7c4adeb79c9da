"""Planar helpers shared by point conversion and mesh generation."""

from __future__ import annotations

import math

Point2 = tuple[float, float]

SQRT3 = math.sqrt(3.0)
EDGES_COUNT = 6

_SIMILARITY_TOLERANCE = 1e-6


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rotate(point: Point2, degrees: float) -> Point2:
    """Rotate ``point`` around the origin by ``degrees`` (counter-clockwise for positive angles)."""

    radians = deg2rad(degrees)
    sin = math.sin(radians)
    cos = math.cos(radians)
    x, y = point
    return cos * x - sin * y, sin * x + cos * y


def midpoint(a: Point2, b: Point2) -> Point2:
    return (a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0


def translate(point: Point2, by: Point2) -> Point2:
    return point[0] + by[0], point[1] + by[1]


def similar(a: Point2, b: Point2, tolerance: float = _SIMILARITY_TOLERANCE) -> bool:
    """Whether two points coincide up to floating point noise."""

    return math.isclose(a[0], b[0], abs_tol=tolerance) and math.isclose(
        a[1], b[1], abs_tol=tolerance
    )
