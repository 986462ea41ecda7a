"""Types that describe how a diagram item is drawn."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any

GRID_SIZE = 16


class ItemType(Enum):
    """Kind of diagram item."""

    UNIT = "unit"
    TEXT = "text"
    GROUP = "group"


class HorizontalAlignment(Enum):
    """Horizontal placement of text inside an item."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlignment(Enum):
    """Vertical placement of text inside an item."""

    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass
class PropertiesForDrawing:
    """Everything needed to draw one diagram item.

    ``color`` is an RGBA tuple or None when unset; ``size`` is width and height.
    """

    pixmap: Any = None
    name: str = ""
    file_name: str = ""
    include_name: str = ""
    color: tuple[int, int, int, int] | None = None
    item_type: ItemType = ItemType.UNIT
    size: tuple[float, float] = (0.0, 0.0)
    text: str = ""
    font_size: int = 10
    show_border: bool = True
    horizontal_alignment: HorizontalAlignment = HorizontalAlignment.LEFT
    vertical_alignment: VerticalAlignment = VerticalAlignment.TOP

    def copy(self) -> PropertiesForDrawing:
        """Return an independent copy, including the image data."""
        return copy.deepcopy(self)