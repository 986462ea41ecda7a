import pytest

from cubes.diagram_item_types import GRID_SIZE
from cubes.geometry import Rect, SizingType, border_hit, resize_rect, snap_to_grid

SQUARE = Rect(0, 0, 2 * GRID_SIZE, 2 * GRID_SIZE)


def test_snap_rounds_half_away_from_zero():
    assert snap_to_grid(GRID_SIZE / 2) == GRID_SIZE
    assert snap_to_grid(-GRID_SIZE / 2) == -GRID_SIZE


def test_snap_rounds_down_below_half():
    assert snap_to_grid(GRID_SIZE / 2 - 1) == 0


@pytest.mark.parametrize("value", [-100.0, -3.5, 0.0, 5.0, 17.2, 250.0])
def test_snap_lands_on_grid_line_close_by(value):
    snapped = snap_to_grid(value)
    assert snapped % GRID_SIZE == 0
    assert abs(snapped - value) <= GRID_SIZE / 2


def test_snap_keeps_grid_values():
    assert snap_to_grid(3 * GRID_SIZE) == 3 * GRID_SIZE


def test_adjusted_round_trip():
    rect = Rect(5, 7, 40, 30)
    assert rect.adjusted(-2, -3, 4, 5).adjusted(2, 3, -4, -5) == rect
    assert rect.adjusted(0, 0, 0, 0) == rect


def test_adjusted_moves_edges():
    rect = Rect(5, 7, 40, 30)
    moved = rect.adjusted(-2, -2, 2, 2)
    assert (moved.x, moved.y) == (rect.x - 2, rect.y - 2)
    assert (moved.width, moved.height) == (rect.width + 4, rect.height + 4)


def test_contains_edges_inclusive():
    rect = Rect(10, 20, 5, 6)
    assert rect.contains(10, 20)
    assert rect.contains(10 + 5 - 1, 20 + 6 - 1)
    assert not rect.contains(10 + 5, 20)
    assert not rect.contains(10, 20 + 6)
    assert not rect.contains(9, 20)


def test_empty_rect_contains_nothing():
    assert not Rect(3, 3, 0, 10).contains(3, 5)


def test_center():
    assert SQUARE.center() == (15, 15)
    rect = Rect(-40, 12, 9, 3)
    assert rect.contains(*rect.center())


@pytest.mark.parametrize(
    "point, expected",
    [
        ((0, 0), SizingType.LEFT_TOP),
        ((31, 31), SizingType.RIGHT_BOTTOM),
        ((31, 0), SizingType.RIGHT_TOP),
        ((0, 31), SizingType.LEFT_BOTTOM),
        ((0, 16), SizingType.LEFT),
        ((31, 16), SizingType.RIGHT),
        ((16, 0), SizingType.TOP),
        ((16, 31), SizingType.BOTTOM),
        ((16, 16), None),
        ((100, 100), None),
    ],
)
def test_border_hit(point, expected):
    assert border_hit(SQUARE, *point) is expected


def test_resize_right_bottom_grows():
    result, offset = resize_rect(SQUARE, SizingType.RIGHT_BOTTOM, GRID_SIZE, GRID_SIZE)
    assert (result.x, result.y) == (SQUARE.x, SQUARE.y)
    assert result.width == SQUARE.width + GRID_SIZE
    assert result.height == SQUARE.height + GRID_SIZE
    assert offset == (0, 0)


def test_resize_right_ignores_vertical_drag():
    result, _ = resize_rect(SQUARE, SizingType.RIGHT, GRID_SIZE, 5 * GRID_SIZE)
    assert result.height == SQUARE.height
    assert result.width == SQUARE.width + GRID_SIZE


def test_resize_bottom_ignores_horizontal_drag():
    result, _ = resize_rect(SQUARE, SizingType.BOTTOM, 5 * GRID_SIZE, GRID_SIZE)
    assert result.width == SQUARE.width
    assert result.height == SQUARE.height + GRID_SIZE


def test_resize_small_drag_snaps_to_nothing():
    result, offset = resize_rect(SQUARE, SizingType.RIGHT_BOTTOM, GRID_SIZE / 2 - 1, 1)
    assert result == SQUARE
    assert offset == (0, 0)


def test_resize_left_top_keeps_opposite_corner():
    result, offset = resize_rect(SQUARE, SizingType.LEFT_TOP, -GRID_SIZE, -GRID_SIZE)
    assert result.width == SQUARE.width + GRID_SIZE
    assert offset == (-GRID_SIZE, -GRID_SIZE)
    assert offset[0] + result.width == SQUARE.width
    assert offset[1] + result.height == SQUARE.height


def test_resize_has_minimum_size():
    result, _ = resize_rect(SQUARE, SizingType.RIGHT_BOTTOM, -1000, -1000)
    assert (result.width, result.height) == (GRID_SIZE, GRID_SIZE)


def test_resize_left_shrink_is_bounded_and_anchored():
    rect = Rect(0, 0, 40, 40)
    result, offset = resize_rect(rect, SizingType.LEFT, 1000, 0)
    assert GRID_SIZE <= result.width < 2 * GRID_SIZE
    assert offset[0] + result.width == rect.width
    assert offset[1] == 0


def test_resize_right_top_moves_only_vertically():
    result, offset = resize_rect(SQUARE, SizingType.RIGHT_TOP, GRID_SIZE, -GRID_SIZE)
    assert offset[0] == 0
    assert offset[1] + result.height == SQUARE.height
    assert result.width == SQUARE.width + GRID_SIZE


def test_resize_left_bottom_moves_only_horizontally():
    result, offset = resize_rect(SQUARE, SizingType.LEFT_BOTTOM, -GRID_SIZE, GRID_SIZE)
    assert offset[1] == 0
    assert offset[0] + result.width == SQUARE.width
    assert result.height == SQUARE.height + GRID_SIZE