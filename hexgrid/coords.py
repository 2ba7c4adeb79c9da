from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidCoordinateError


class LayoutType(str, Enum):
    """The four orientation/parity combinations of a hex grid."""

    POINTY_ODD = "pointy_odd"  # odd rows shoved right [odd-r]
    POINTY_EVEN = "pointy_even"  # even rows shoved right [even-r]
    FLAT_ODD = "flat_odd"  # odd columns shoved down [odd-q]
    FLAT_EVEN = "flat_even"  # even columns shoved down [even-q]

    @property
    def is_flat(self) -> bool:
        return self in (LayoutType.FLAT_ODD, LayoutType.FLAT_EVEN)

    @property
    def is_pointy(self) -> bool:
        return self in (LayoutType.POINTY_ODD, LayoutType.POINTY_EVEN)

    @property
    def is_odd(self) -> bool:
        return self in (LayoutType.POINTY_ODD, LayoutType.FLAT_ODD)


@dataclass(frozen=True, slots=True)
class Offset:
    col: int
    row: int

    @classmethod
    def zero(cls) -> Offset:
        return cls(0, 0)

    def add(self, dcol: int, drow: int) -> Offset:
        return Offset(self.col + dcol, self.row + drow)

    @staticmethod
    def clamp(coord: Offset, lower: Offset, upper: Offset) -> Offset:
        """Clamp ``coord`` component-wise into the box spanned by ``lower`` and ``upper``."""

        col = min(max(coord.col, lower.col), upper.col)
        row = min(max(coord.row, lower.row), upper.row)
        return Offset(col, row)

    def __add__(self, other: Offset | int) -> Offset:
        """Add another offset, or shift both components by the same integer."""

        if isinstance(other, Offset):
            return Offset(self.col + other.col, self.row + other.row)
        if isinstance(other, int):
            return Offset(self.col + other, self.row + other)
        return NotImplemented

    def __sub__(self, other: Offset) -> Offset:
        if not isinstance(other, Offset):
            return NotImplemented
        return Offset(self.col - other.col, self.row - other.row)

    def __mul__(self, factor: int) -> Offset:
        if not isinstance(factor, int):
            return NotImplemented
        return Offset(self.col * factor, self.row * factor)

    def __floordiv__(self, divisor: int) -> Offset:
        if not isinstance(divisor, int):
            return NotImplemented
        return Offset(self.col // divisor, self.row // divisor)

    def __str__(self) -> str:
        return f"O-[{self.col}:{self.row}]"


@dataclass(frozen=True, slots=True)
class Axial:
    q: int
    r: int

    @classmethod
    def zero(cls) -> Axial:
        return cls(0, 0)

    def __add__(self, other: Axial | int) -> Axial:
        if isinstance(other, Axial):
            return Axial(self.q + other.q, self.r + other.r)
        if isinstance(other, int):
            return Axial(self.q + other, self.r + other)
        return NotImplemented

    def __sub__(self, other: Axial | int) -> Axial:
        if isinstance(other, Axial):
            return Axial(self.q - other.q, self.r - other.r)
        if isinstance(other, int):
            return Axial(self.q - other, self.r - other)
        return NotImplemented

    def __mul__(self, factor: int) -> Axial:
        if not isinstance(factor, int):
            return NotImplemented
        return Axial(self.q * factor, self.r * factor)

    def __str__(self) -> str:
        return f"A-[{self.q}:{self.r}]"


@dataclass(frozen=True, slots=True)
class Cubic:
    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if self.x + self.y + self.z != 0:
            raise InvalidCoordinateError(
                "For cubic coords, x + y + z must be 0", x=self.x, y=self.y, z=self.z
            )

    @classmethod
    def zero(cls) -> Cubic:
        return cls(0, 0, 0)

    @classmethod
    def from_fractional(cls, x: float, y: float, z: float) -> Cubic:
        """Round fractional cube coordinates to the nearest valid cell.

        Each component is rounded on its own; the one that moved the most is
        then recomputed from the other two so the triple sums to zero again.
        """

        rx, ry, rz = round(x), round(y), round(z)
        dx, dy, dz = abs(rx - x), abs(ry - y), abs(rz - z)
        if dx > dy and dx > dz:
            rx = -ry - rz
        elif dy > dz:
            ry = -rx - rz
        else:
            rz = -rx - ry
        return cls(rx, ry, rz)

    def is_valid(self) -> bool:
        return self.x + self.y + self.z == 0

    def rotate_right(self, times: int = 1) -> Cubic:
        """Rotate around the origin by ``times`` sixty degree clockwise steps."""

        current = self
        for _ in range(times % 6):
            current = Cubic(-current.y, -current.z, -current.x)
        return current

    def __add__(self, other: Cubic) -> Cubic:
        if not isinstance(other, Cubic):
            return NotImplemented
        return Cubic(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Cubic) -> Cubic:
        if not isinstance(other, Cubic):
            return NotImplemented
        return Cubic(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: int) -> Cubic:
        if not isinstance(factor, int):
            return NotImplemented
        return Cubic(self.x * factor, self.y * factor, self.z * factor)

    def __str__(self) -> str:
        if not self.is_valid():
            return "C-[Invalid]"
        return f"C-[{self.x}:{self.y}:{self.z}]"


Coordinate = Offset | Axial | Cubic
