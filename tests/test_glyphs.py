import pytest

from revgraph.glyphs import (
    FILL_BACKGROUND,
    FILL_DARK_GREEN,
    FILL_LANE,
    FILL_RED,
    PADDING,
    active_lane_index,
    blend,
    lane_width,
    layout_row,
    paint_lane,
)
from revgraph.lanes import LaneType


def test_lane_width_is_three_quarters():
    assert lane_width(16) == 12
    assert lane_width(0) == 0


def test_blend_identity_cases():
    a, b = (10, 20, 30), (200, 100, 50)
    assert blend(a, a, 77) == a
    assert blend(a, b, 0) == a
    assert blend((0, 0, 0), (255, 255, 255)) == (127, 127, 127)


def test_blend_stays_between_inputs():
    a, b = (0, 50, 255), (255, 50, 0)
    for amount in (0, 64, 128, 208, 255):
        mixed = blend(a, b, amount)
        for lo, hi, v in zip(a, b, mixed):
            assert min(lo, hi) <= v <= max(lo, hi)


def test_active_lane_index():
    assert active_lane_index([LaneType.NOT_ACTIVE, LaneType.BRANCH, LaneType.ACTIVE]) == 1
    assert active_lane_index([LaneType.NOT_ACTIVE, LaneType.CROSS]) == 0
    assert active_lane_index([]) == 0


def test_empty_lane_draws_nothing():
    cell = paint_lane(LaneType.EMPTY, 0, 12, 16)
    assert (cell.arc, cell.vertical, cell.horizontal, cell.symbol) == (None, None, None, None)


def test_active_lane_geometry():
    cell = paint_lane(LaneType.ACTIVE, 0, 12, 16)
    assert cell.vertical.y1 == 0 and cell.vertical.y2 == 16
    assert cell.horizontal is None
    assert cell.arc is None
    assert cell.symbol.shape == "ellipse"
    assert cell.symbol.fill == FILL_LANE
    x, y, w, h = cell.symbol.rects[0]
    assert x + w // 2 == cell.vertical.x1
    assert y + h // 2 == 16 // 2
    assert w == h


def test_branch_vertical_runs_down_from_centre():
    cell = paint_lane(LaneType.BRANCH, 0, 12, 16)
    assert cell.vertical.y1 == 8 and cell.vertical.y2 == 16
    assert not cell.vertical.active


def test_initial_vertical_runs_up_to_centre():
    cell = paint_lane(LaneType.INITIAL, 0, 12, 16)
    assert cell.vertical.y1 == 0 and cell.vertical.y2 == 8


def test_merge_fork_horizontal_spans_padded_lane():
    cell = paint_lane(LaneType.MERGE_FORK, 12, 24, 16)
    assert cell.horizontal.x1 == 12 + PADDING
    assert cell.horizontal.x2 == 24 + PADDING
    assert cell.horizontal.active
    assert cell.symbol.shape == "rect"


def test_half_horizontals():
    right = paint_lane(LaneType.MERGE_FORK_R, 0, 12, 16)
    left = paint_lane(LaneType.MERGE_FORK_L, 0, 12, 16)
    assert right.horizontal.x1 == PADDING and right.horizontal.x2 == right.vertical.x1
    assert left.horizontal.x1 == left.vertical.x1 and left.horizontal.x2 == 12 + PADDING


@pytest.mark.parametrize(
    "lane_type, start, active_first",
    [
        (LaneType.JOIN, 0, False),
        (LaneType.HEAD_R, 0, False),
        (LaneType.JOIN_L, 90, True),
        (LaneType.TAIL, 270, True),
    ],
)
def test_arcs(lane_type, start, active_first):
    arc = paint_lane(lane_type, 0, 12, 16).arc
    assert arc.start_angle == start
    assert arc.span_angle == 90
    assert arc.active_first is active_first


def test_tail_l_has_no_arc():
    cell = paint_lane(LaneType.TAIL_L, 0, 12, 16)
    assert cell.arc is None
    assert cell.vertical.y2 == 8


def test_applied_and_unapplied_symbols():
    applied = paint_lane(LaneType.APPLIED, 0, 12, 16).symbol
    unapplied = paint_lane(LaneType.UNAPPLIED, 0, 12, 16).symbol
    assert applied.shape == "plus" and len(applied.rects) == 2
    assert applied.fill == FILL_DARK_GREEN and not applied.outlined
    assert unapplied.shape == "minus" and len(unapplied.rects) == 1
    assert unapplied.fill == FILL_RED


def test_boundary_symbols_use_background():
    assert paint_lane(LaneType.BOUNDARY, 0, 12, 16).symbol.shape == "ellipse"
    node = paint_lane(LaneType.BOUNDARY_C, 0, 12, 16).symbol
    assert node.shape == "rect" and node.fill == FILL_BACKGROUND


def test_paint_lane_rejects_unknown_type():
    with pytest.raises(ValueError):
        paint_lane(999, 0, 12, 16)


def test_layout_row_skips_empty_lanes():
    lanes = [LaneType.ACTIVE, LaneType.NOT_ACTIVE, LaneType.EMPTY, LaneType.CROSS]
    cells = layout_row(lanes, 1000, 16)
    width = lane_width(16)
    assert [c.lane for c in cells] == [0, 1, 3]
    assert cells[2].x1 == 3 * width and cells[2].x2 == 4 * width
    assert [c.active for c in cells] == [True, False, False]


def test_layout_row_stops_at_max_width():
    lanes = [LaneType.ACTIVE, LaneType.NOT_ACTIVE, LaneType.NOT_ACTIVE]
    assert [c.lane for c in layout_row(lanes, lane_width(16), 16)] == [0]
    assert len(layout_row(lanes, lane_width(16) + 1, 16)) == 2


def test_layout_row_colour_index_wraps():
    lanes = [LaneType.NOT_ACTIVE] * 9 + [LaneType.ACTIVE]
    cells = layout_row(lanes, 10_000, 16)
    assert cells[9].color_index == 9 % 8
    assert cells[9].active
    assert all(c.color_index == c.lane % 8 for c in cells)