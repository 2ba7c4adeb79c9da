"""Exception hierarchy raised by grid conversions and topology queries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .grid import HexagonalGrid


def _format_fields(fields: dict[str, Any]) -> str:
    return "".join(f"{name}={value}; " for name, value in fields.items())


class HexagonalError(Exception):
    """Base error carrying the grid parameters and the offending arguments.

    The rendered message is the human readable ``message`` followed by a
    ``name=value;`` listing of the grid (when given) and every extra field, so
    a failure can be reproduced from the log line alone.
    """

    def __init__(
        self,
        message: str,
        grid: HexagonalGrid | None = None,
        **fields: Any,
    ) -> None:
        self.message = message
        self.fields: dict[str, Any] = {}
        if grid is not None:
            self.fields.update(
                layout=grid.layout.value,
                inscribed_radius=grid.inscribed_radius,
                described_radius=grid.described_radius,
            )
        self.fields.update(fields)
        details = _format_fields(self.fields)
        super().__init__(f"{message} {details}".rstrip() if details else message)


class InvalidLayoutError(HexagonalError):
    """An unknown layout value reached a layout-dependent branch."""


class NotAdjacentError(HexagonalError, ValueError):
    """Two cells expected to be neighbors are not adjacent."""


class InvalidCoordinateError(HexagonalError, ValueError):
    """A cubic triple whose components do not sum to zero."""
