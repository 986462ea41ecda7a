"""A movable, resizable item on the diagram grid: a unit icon or a text box."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

from cubes.diagram_item_types import (
    GRID_SIZE,
    HorizontalAlignment,
    ItemType,
    PropertiesForDrawing,
    VerticalAlignment,
)
from cubes.geometry import Rect, SizingType, border_hit, resize_rect, snap_to_grid

NOT_SELECTED_INCLUDE = "<not selected>"
_SHAPE_MARGIN = 2

Callback = Callable[["DiagramItem"], None]


def _font_for(pfd: PropertiesForDrawing) -> tuple[str, int]:
    if pfd.item_type is ItemType.TEXT:
        return ("Times", pfd.font_size)
    return ("Arial", 10)


class DiagramItem:
    """State and interaction rules of one diagram item.

    Positions are scene coordinates of the item's top-left corner; points given
    to ``hover`` are in item coordinates, points given to ``begin_resize`` and
    ``resize_to`` in scene coordinates. Optional callbacks are told when the
    item needs repainting, has been snapped to a new position, or was resized.
    """

    def __init__(
        self,
        properties_id: int,
        pfd: PropertiesForDrawing,
        *,
        position: tuple[float, float] = (0.0, 0.0),
        on_invalidate: Callback | None = None,
        on_position_changed: Callback | None = None,
        on_size_changed: Callback | None = None,
    ) -> None:
        self.properties_id = properties_id
        self.pfd = pfd.copy()
        self.position = (float(position[0]), float(position[1]))
        self.selected = False
        self.border_only = False
        self.on_invalidate = on_invalidate
        self.on_position_changed = on_position_changed
        self.on_size_changed = on_size_changed

        self.font = _font_for(self.pfd)
        self.group_font = ("Times", 10)
        if self.pfd.item_type is ItemType.TEXT:
            width, height = self.pfd.size
            self.icon_rect = Rect(0, 0, int(width), int(height))
        else:
            self.icon_rect = Rect(0, 0, GRID_SIZE * 2, GRID_SIZE * 2)

        self.resizing = False
        self.on_border = False
        self.sizing_type = SizingType.LEFT_TOP
        self._start_resize_pos = (0.0, 0.0)
        self._start_pos = self.position
        self._start_rect = self.icon_rect

    # Appearance

    @property
    def name(self) -> str:
        return self.pfd.name

    @property
    def size(self) -> tuple[int, int]:
        return (self.icon_rect.width, self.icon_rect.height)

    @property
    def shape(self) -> Rect:
        """Area that responds to the mouse: the icon with a small margin."""
        m = _SHAPE_MARGIN
        return self.icon_rect.adjusted(-m, -m, m, m)

    @property
    def show_include_name(self) -> bool:
        """Whether the group label is drawn above a unit item."""
        return self.pfd.item_type is not ItemType.TEXT and self.pfd.include_name != NOT_SELECTED_INCLUDE

    def _invalidate(self) -> None:
        if self.on_invalidate is not None:
            self.on_invalidate(self)

    def set_name(self, name: str) -> None:
        """Change the displayed name."""
        self.pfd.name = name
        self._invalidate()

    def set_include_name(self, include_name: str) -> None:
        """Change the group label."""
        self.pfd.include_name = include_name
        self._invalidate()

    def set_color(self, color: tuple[int, int, int, int] | None) -> None:
        """Change the frame colour."""
        self.pfd.color = color
        self._invalidate()

    def set_border_only(self, border_only: bool) -> None:
        """Draw only a plain border instead of the full item."""
        self.border_only = border_only
        self._invalidate()

    def set_size(self, width: float, height: float) -> None:
        """Set the icon size, keeping its top-left corner."""
        self.icon_rect = replace(self.icon_rect, width=int(width), height=int(height))

    def set_text(
        self,
        text: str,
        font_size: int,
        show_border: bool,
        horizontal_alignment: HorizontalAlignment,
        vertical_alignment: VerticalAlignment,
    ) -> None:
        """Change the text, font size, border and alignment of the item."""
        self.pfd.text = text
        if self.pfd.font_size != font_size:
            self.pfd.font_size = font_size
            self.font = _font_for(self.pfd)
        self.pfd.show_border = show_border
        self.pfd.horizontal_alignment = horizontal_alignment
        self.pfd.vertical_alignment = vertical_alignment
        self._invalidate()

    def display_text(self) -> str:
        """Return the text as drawn.

        Text items turn escaped line breaks into real ones; unit items break
        their name after every path separator.
        """
        if self.pfd.item_type is ItemType.TEXT:
            text = self.pfd.text
            for escaped in ("\\r\\n", "\\r", "\\n"):
                text = text.replace(escaped, "\n")
            return text
        return self.pfd.name.replace("\\", "\\\n").replace("/", "/\n")

    # Movement

    def snap_position(self, x: float, y: float) -> tuple[float, float]:
        """Return where a move to ``x, y`` lands: on the grid if the item is selected."""
        if not self.selected:
            return (x, y)
        snapped = (snap_to_grid(x), snap_to_grid(y))
        if self.on_position_changed is not None:
            self.on_position_changed(self)
        return snapped

    def line_anchor_position(self) -> tuple[float, float]:
        """Return the scene point where connecting lines attach: the icon centre."""
        cx, cy = self.icon_rect.center()
        return (self.position[0] + cx, self.position[1] + cy)

    # Resizing

    def hover(self, x: int, y: int) -> SizingType | None:
        """Track the pointer at item point ``x, y``; return the handle under it.

        Only a selected item shows resize handles.
        """
        if not self.selected:
            return None
        m = _SHAPE_MARGIN
        outer = self.icon_rect.adjusted(-m, -m, m, m)
        inner = self.icon_rect.adjusted(m, m, -m, -m)
        if not outer.contains(x, y) or inner.contains(x, y):
            self.on_border = False
            return None
        self.on_border = True
        hit = border_hit(self.icon_rect, x, y)
        if hit is not None:
            self.sizing_type = hit
        return hit

    def leave(self) -> None:
        """The pointer left the item."""
        self.on_border = False

    def begin_resize(self, x: float, y: float) -> bool:
        """Start resizing from scene point ``x, y`` if the pointer is on the border."""
        if not self.on_border:
            return False
        self.resizing = True
        self._start_resize_pos = (x, y)
        self._start_pos = self.position
        self._start_rect = self.icon_rect
        return True

    def resize_to(self, x: float, y: float) -> bool:
        """Drag the active handle to scene point ``x, y``; False if not resizing."""
        if not self.resizing:
            return False
        dx = x - self._start_resize_pos[0]
        dy = y - self._start_resize_pos[1]
        rect, (ox, oy) = resize_rect(self._start_rect, self.sizing_type, dx, dy)
        self.icon_rect = rect
        self.position = (self._start_pos[0] + ox, self._start_pos[1] + oy)
        if self.on_size_changed is not None:
            self.on_size_changed(self)
        self._invalidate()
        return True

    def end_resize(self) -> None:
        """Finish a resize, keeping the new size."""
        self.resizing = False

    def cancel_resize(self) -> bool:
        """Abort a resize and restore the size and position it started from."""
        if not self.resizing:
            return False
        self.resizing = False
        self.on_border = False
        self.icon_rect = self._start_rect
        self.position = self._start_pos
        self._invalidate()
        return True