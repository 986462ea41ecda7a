"""Integer rectangle geometry and the grid rules for moving and resizing diagram items."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum

from cubes.diagram_item_types import GRID_SIZE

_HANDLE = 2


class SizingType(Enum):
    """Edge or corner of an item that a resize drags."""

    LEFT_TOP = "left_top"
    TOP = "top"
    RIGHT_TOP = "right_top"
    RIGHT = "right"
    RIGHT_BOTTOM = "right_bottom"
    BOTTOM = "bottom"
    LEFT_BOTTOM = "left_bottom"
    LEFT = "left"


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _trunc_mod(a: int, b: int) -> int:
    return a - _trunc_div(a, b) * b


@dataclass(frozen=True)
class Rect:
    """Integer rectangle whose last pixel column is ``x + width - 1``."""

    x: int
    y: int
    width: int
    height: int

    def adjusted(self, dx1: int, dy1: int, dx2: int, dy2: int) -> Rect:
        """Return the rectangle with ``dx1, dy1`` added to its top-left and ``dx2, dy2`` to its bottom-right."""
        return Rect(
            self.x + dx1,
            self.y + dy1,
            self.width + dx2 - dx1,
            self.height + dy2 - dy1,
        )

    def contains(self, x: int, y: int) -> bool:
        """Return whether the point lies inside the rectangle, edges included."""
        return self._span_contains(self.x, self.width, x) and self._span_contains(self.y, self.height, y)

    def center(self) -> tuple[int, int]:
        """Return the integer centre point."""
        x2 = self.x + self.width - 1
        y2 = self.y + self.height - 1
        return _trunc_div(self.x + x2, 2), _trunc_div(self.y + y2, 2)

    @staticmethod
    def _span_contains(start: int, length: int, value: int) -> bool:
        end = start + length - 1
        low, high = (end, start) if length < 0 else (start, end)
        return low <= value <= high


def snap_to_grid(value: float) -> float:
    """Round a coordinate to the nearest grid line, halves away from zero."""
    steps = value / GRID_SIZE
    rounded = math.copysign(math.floor(abs(steps) + 0.5), steps)
    return float(rounded * GRID_SIZE)


def _handle(x: int, y: int, width: int, height: int) -> Rect:
    return Rect(x, y, width, height)


def border_hit(rect: Rect, x: int, y: int) -> SizingType | None:
    """Return which edge or corner of ``rect`` the point grabs.

    None means the point is off the border band, or on a part of it that no
    handle covers.
    """
    outer = rect.adjusted(-_HANDLE, -_HANDLE, _HANDLE, _HANDLE)
    inner = rect.adjusted(_HANDLE, _HANDLE, -_HANDLE, -_HANDLE)
    if not outer.contains(x, y) or inner.contains(x, y):
        return None

    left, top = rect.x, rect.y
    right, bottom = rect.x + rect.width - 1, rect.y + rect.height - 1
    size = 2 * _HANDLE
    handles = (
        (_handle(left - _HANDLE, top - _HANDLE, size, size), SizingType.LEFT_TOP),
        (_handle(right - _HANDLE, bottom - _HANDLE, size, size), SizingType.RIGHT_BOTTOM),
        (_handle(right - _HANDLE, top - _HANDLE, size, size), SizingType.RIGHT_TOP),
        (_handle(left - _HANDLE, bottom - _HANDLE, size, size), SizingType.LEFT_BOTTOM),
        (_handle(left - _HANDLE, top + _HANDLE, size, rect.height - size), SizingType.LEFT),
        (_handle(right - _HANDLE, top + _HANDLE, size, rect.height - size), SizingType.RIGHT),
        (_handle(left + _HANDLE, top - _HANDLE, rect.width - size, size), SizingType.TOP),
        (_handle(left + _HANDLE, bottom - _HANDLE, rect.width - size, size), SizingType.BOTTOM),
    )
    return next((kind for area, kind in handles if area.contains(x, y)), None)


def resize_rect(rect: Rect, sizing_type: SizingType, dx: float, dy: float) -> tuple[Rect, tuple[int, int]]:
    """Resize ``rect`` by a mouse drag of ``dx, dy`` on the given handle.

    Returns the new rectangle and the offset by which the item's position must
    move from where the drag started, so that the opposite edges stay put.
    """
    if sizing_type in (SizingType.LEFT, SizingType.RIGHT):
        dy = 0
    elif sizing_type in (SizingType.TOP, SizingType.BOTTOM):
        dx = 0
    dx = int(snap_to_grid(dx))
    dy = int(snap_to_grid(dy))
    grid = GRID_SIZE

    if sizing_type in (SizingType.RIGHT_BOTTOM, SizingType.RIGHT, SizingType.BOTTOM):
        result = rect.adjusted(0, 0, dx, dy)
        if sizing_type is not SizingType.BOTTOM:
            result = replace(result, width=_trunc_div(result.width, grid) * grid)
        if sizing_type is not SizingType.RIGHT:
            result = replace(result, height=_trunc_div(result.height, grid) * grid)
        if result.width < grid:
            result = replace(result, width=grid)
        if result.height < grid:
            result = replace(result, height=grid)
        return result, (0, 0)

    if sizing_type in (SizingType.LEFT_TOP, SizingType.TOP, SizingType.LEFT):
        result = rect.adjusted(0, 0, -dx, -dy)
        if result.width < grid:
            result = replace(result, width=_trunc_mod(rect.width, grid) + grid)
        if result.height < grid:
            result = replace(result, height=_trunc_mod(rect.height, grid) + grid)
        return result, (rect.width - result.width, rect.height - result.height)

    if sizing_type is SizingType.RIGHT_TOP:
        result = rect.adjusted(0, 0, dx, -dy)
        result = replace(result, width=_trunc_div(result.width, grid) * grid)
        if result.width < grid:
            result = replace(result, width=grid)
        if result.height < grid:
            result = replace(result, height=_trunc_mod(rect.height, grid) + grid)
        return result, (0, rect.height - result.height)

    result = rect.adjusted(0, 0, -dx, dy)
    result = replace(result, height=_trunc_div(result.height, grid) * grid)
    if result.width < grid:
        result = replace(result, width=_trunc_mod(rect.width, grid) + grid)
    if result.height < grid:
        result = replace(result, height=grid)
    return result, (rect.width - result.width, 0)