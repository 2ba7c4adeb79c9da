from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, Iterator, TypeVar

import structlog

from .coords import Axial, Cubic, LayoutType, Offset
from .errors import InvalidLayoutError, NotAdjacentError
from .geometry import EDGES_COUNT

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid import HexagonalGrid

logger = structlog.get_logger(__name__)

T = TypeVar("T", Offset, Axial, Cubic)

# Clockwise, starting from the same direction for every layout.
AXIAL_DIRECTIONS: tuple[Axial, ...] = (
    Axial(+1, 0),
    Axial(+1, -1),
    Axial(0, -1),
    Axial(-1, 0),
    Axial(-1, +1),
    Axial(0, +1),
)

CUBIC_DIRECTIONS: tuple[Cubic, ...] = (
    Cubic(+1, -1, 0),
    Cubic(+1, 0, -1),
    Cubic(0, +1, -1),
    Cubic(-1, +1, 0),
    Cubic(-1, 0, +1),
    Cubic(0, -1, +1),
)

# Offset deltas follow the axial order above. "Shifted" rows (pointy) or
# columns (flat) are the ones pushed half a cell by the layout parity.
_POINTY_SHIFTED: tuple[Offset, ...] = (
    Offset(+1, 0),
    Offset(+1, -1),
    Offset(0, -1),
    Offset(-1, 0),
    Offset(0, +1),
    Offset(+1, +1),
)

_POINTY_UNSHIFTED: tuple[Offset, ...] = (
    Offset(+1, 0),
    Offset(0, -1),
    Offset(-1, -1),
    Offset(-1, 0),
    Offset(-1, +1),
    Offset(0, +1),
)

_FLAT_SHIFTED: tuple[Offset, ...] = (
    Offset(+1, +1),
    Offset(+1, 0),
    Offset(0, -1),
    Offset(-1, 0),
    Offset(-1, +1),
    Offset(0, +1),
)

_FLAT_UNSHIFTED: tuple[Offset, ...] = (
    Offset(+1, 0),
    Offset(+1, -1),
    Offset(0, -1),
    Offset(-1, -1),
    Offset(-1, 0),
    Offset(0, +1),
)


def normalize_index(index: int) -> int:
    """Wrap any integer index into ``[0, 6)`` (``-1`` becomes ``5``)."""

    return index % EDGES_COUNT


def offset_directions(o: Offset, layout: LayoutType) -> tuple[Offset, ...]:
    """Return the direction table matching the parity of ``o`` under ``layout``."""

    if layout == LayoutType.POINTY_ODD:
        return _POINTY_SHIFTED if (o.row & 1) == 1 else _POINTY_UNSHIFTED
    if layout == LayoutType.POINTY_EVEN:
        return _POINTY_SHIFTED if (o.row & 1) == 0 else _POINTY_UNSHIFTED
    if layout == LayoutType.FLAT_ODD:
        return _FLAT_SHIFTED if (o.col & 1) == 1 else _FLAT_UNSHIFTED
    if layout == LayoutType.FLAT_EVEN:
        return _FLAT_SHIFTED if (o.col & 1) == 0 else _FLAT_UNSHIFTED
    raise InvalidLayoutError("offset_directions failed with unexpected layout", layout=layout, coord=o)


def neighbor_axial(a: Axial, index: int) -> Axial:
    return a + AXIAL_DIRECTIONS[normalize_index(index)]


def neighbor_cubic(c: Cubic, index: int) -> Cubic:
    return c + CUBIC_DIRECTIONS[normalize_index(index)]


def neighbor_offset(o: Offset, index: int, layout: LayoutType) -> Offset:
    return o + offset_directions(o, layout)[normalize_index(index)]


def neighbors_axial(a: Axial) -> Iterator[Axial]:
    for d in AXIAL_DIRECTIONS:
        yield a + d


def neighbors_cubic(c: Cubic) -> Iterator[Cubic]:
    for d in CUBIC_DIRECTIONS:
        yield c + d


def neighbors_offset(o: Offset, layout: LayoutType) -> Iterator[Offset]:
    for d in offset_directions(o, layout):
        yield o + d


def is_neighbors(a: T, b: T, step: Callable[[T, int], T]) -> bool:
    """Scan the six neighbors of ``a`` produced by ``step`` looking for ``b``."""

    for index in range(EDGES_COUNT):
        if step(a, index) == b:
            return True
    return False


def neighbor_index(
    center: T,
    neighbor: T,
    neighbors: Iterable[T],
    grid: HexagonalGrid | None = None,
) -> int:
    """Position of ``neighbor`` among ``neighbors``; ``grid`` only enriches the error."""

    for index, current in enumerate(neighbors):
        if current == neighbor:
            return index
    logger.debug("Neighbor index lookup failed", center=str(center), neighbor=str(neighbor))
    raise NotAdjacentError("Can't find neighbor index", grid, center=center, neighbor=neighbor)


def ring(center: T, radius: int, step: Callable[[T, int], T]) -> Iterator[T]:
    """Yield the ``6 * radius`` cells at exactly ``radius`` steps, clockwise.

    The walk starts ``radius`` steps away in direction 4 and then follows each
    of the six directions in order for ``radius`` steps, yielding the current
    cell before every step. ``radius == 0`` yields only ``center``.
    """

    if radius < 0:
        raise ValueError("radius must be non-negative")
    if radius == 0:
        yield center
        return

    current = center
    for _ in range(radius):
        current = step(current, 4)

    for direction in range(EDGES_COUNT):
        for _ in range(radius):
            yield current
            current = step(current, direction)


def spiral(center: T, radius: int, step: Callable[[T, int], T]) -> Iterator[T]:
    """Yield rings ``0 .. radius - 1`` around ``center``."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    for current_radius in range(radius):
        yield from ring(center, current_radius, step)
