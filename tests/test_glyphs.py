import pytest

from revgraph.glyphs import (
    COLORS_NUM,
    LANE_COLOR_NAMES,
    Color,
    GlyphPart,
    active_lane,
    blend,
    lane_color_index,
    lane_glyph,
    lane_width,
)
from revgraph.lanes import LaneType

X1, X2, HEIGHT = 0, 12, 16


def _shapes(parts):
    return [p.shape for p in parts]


def _lines(parts):
    return [p for p in parts if p.shape == "line"]


def _vertical(parts):
    return next(p for p in _lines(parts) if p.geometry[0] == p.geometry[2])


def _horizontal(parts):
    return next(p for p in _lines(parts) if p.geometry[1] == p.geometry[3])


def test_blend_extremes():
    a, b = Color(10, 20, 30), Color(200, 150, 100)
    assert blend(a, b, 0) == a
    assert blend(a, b, 256) == b


def test_blend_default_is_midpoint():
    assert blend(Color(0, 0, 0), Color(200, 100, 50)) == Color(100, 50, 25)


def test_blend_same_color_is_unchanged():
    c = Color(17, 99, 250)
    for amount in (0, 64, 128, 208, 256):
        assert blend(c, c, amount) == c


def test_blend_bad_amount():
    with pytest.raises(ValueError):
        blend(Color(0, 0, 0), Color(1, 1, 1), 300)


def test_color_range_checked():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


def test_lane_width():
    assert lane_width(16) == 12
    assert lane_width(20) > lane_width(16)


def test_active_lane_first_active():
    assert active_lane([LaneType.NOT_ACTIVE, LaneType.ACTIVE]) == 1
    assert active_lane([LaneType.EMPTY, LaneType.MERGE_FORK_L, LaneType.ACTIVE]) == 1
    assert active_lane([LaneType.CROSS, LaneType.BOUNDARY]) == 1


def test_active_lane_defaults_to_zero():
    assert active_lane([LaneType.EMPTY, LaneType.NOT_ACTIVE]) == 0
    assert active_lane([]) == 0


def test_lane_color_index_wraps():
    assert lane_color_index(COLORS_NUM + 3) == lane_color_index(3) == 3
    assert len(LANE_COLOR_NAMES) == COLORS_NUM
    assert all(0 <= lane_color_index(i) < COLORS_NUM for i in range(40))


def test_empty_lane_draws_nothing():
    assert lane_glyph(LaneType.EMPTY, X1, X2, HEIGHT) == []


def test_active_lane_is_line_and_circle():
    parts = lane_glyph(LaneType.ACTIVE, X1, X2, HEIGHT)
    assert _shapes(parts) == ["line", "ellipse"]
    assert parts[1].pen == "black" and parts[1].brush == "lane"
    line = parts[0]
    assert line.geometry[1] == 0 and line.geometry[3] == 2 * (HEIGHT // 2)


def test_accepts_plain_int():
    assert lane_glyph(int(LaneType.ACTIVE), X1, X2, HEIGHT) == lane_glyph(
        LaneType.ACTIVE, X1, X2, HEIGHT
    )


def test_merge_fork_full_horizontal():
    parts = lane_glyph(LaneType.MERGE_FORK, X1, X2, HEIGHT)
    assert _shapes(parts) == ["line", "line", "rect"]
    vert, horiz = _vertical(parts), _horizontal(parts)
    assert horiz.pen == "active" and vert.pen == "lane"
    assert horiz.geometry[0] < vert.geometry[0] < horiz.geometry[2]


def test_merge_fork_right_ends_at_center():
    parts = lane_glyph(LaneType.MERGE_FORK_R, X1, X2, HEIGHT)
    vert, horiz = _vertical(parts), _horizontal(parts)
    assert horiz.geometry[2] == vert.geometry[0]
    assert horiz.geometry[0] < vert.geometry[0]


def test_merge_fork_left_starts_at_center():
    parts = lane_glyph(LaneType.MERGE_FORK_L, X1, X2, HEIGHT)
    vert, horiz = _vertical(parts), _horizontal(parts)
    assert horiz.geometry[0] == vert.geometry[0]
    assert horiz.geometry[2] > vert.geometry[0]


def test_rect_is_centered_on_vertical_line():
    parts = lane_glyph(LaneType.MERGE_FORK, X1, X2, HEIGHT)
    rect = next(p for p in parts if p.shape == "rect")
    x, y, w, h = rect.geometry
    assert w == h
    assert x + w // 2 == _vertical(parts).geometry[0]
    assert y + h // 2 == _horizontal(parts).geometry[1]


def test_branch_line_starts_at_center():
    parts = lane_glyph(LaneType.BRANCH, X1, X2, HEIGHT)
    line = _vertical(parts)
    assert line.geometry[1] == HEIGHT // 2
    assert line.geometry[3] > line.geometry[1]


def test_initial_line_ends_at_center():
    parts = lane_glyph(LaneType.INITIAL, X1, X2, HEIGHT)
    line = _vertical(parts)
    assert line.geometry[1] == 0 and line.geometry[3] == HEIGHT // 2
    assert parts[-1].shape == "ellipse"


def test_join_gradients():
    join = lane_glyph(LaneType.JOIN, X1, X2, HEIGHT)[0]
    join_l = lane_glyph(LaneType.JOIN_L, X1, X2, HEIGHT)[0]
    assert join.shape == "arc" and join_l.shape == "arc"
    assert join.gradient[3:] == ("lane", "active")
    assert join_l.gradient[3:] == ("active", "lane")


def test_tail_arc_goes_upwards():
    arc = lane_glyph(LaneType.TAIL, X1, X2, HEIGHT)[0]
    assert arc.shape == "arc"
    assert arc.geometry[3] < 0


def test_head_r_has_arc_but_no_lines():
    parts = lane_glyph(LaneType.HEAD_R, X1, X2, HEIGHT)
    assert _shapes(parts) == ["arc"]


def test_applied_is_green_plus():
    parts = lane_glyph(LaneType.APPLIED, X1, X2, HEIGHT)
    assert _shapes(parts) == ["rect", "rect"]
    assert all(p.pen is None and p.brush == "dark_green" for p in parts)
    assert parts[0].geometry[2] == parts[1].geometry[3]


def test_unapplied_is_red_minus():
    parts = lane_glyph(LaneType.UNAPPLIED, X1, X2, HEIGHT)
    assert len(parts) == 1
    assert parts[0] == GlyphPart("rect", parts[0].geometry, None, "red")


def test_boundary_shapes_use_background():
    circle = lane_glyph(LaneType.BOUNDARY, X1, X2, HEIGHT)
    square = lane_glyph(LaneType.BOUNDARY_C, X1, X2, HEIGHT)
    assert circle[-1].shape == "ellipse" and circle[-1].brush == "back"
    assert square[-1].shape == "rect" and square[-1].brush == "back"
    assert _shapes(square) == ["line", "line", "rect"]


def test_cross_empty_only_horizontal():
    parts = lane_glyph(LaneType.CROSS_EMPTY, X1, X2, HEIGHT)
    assert len(parts) == 1
    assert parts[0] == _horizontal(parts)