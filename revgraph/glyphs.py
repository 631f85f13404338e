"""Geometry of the glyphs drawn in each lane of the history graph.

Nothing here paints: :func:`paint_lane` describes the arc, lines and centre
symbol of one lane, and :func:`layout_row` places a whole row of lanes. A
renderer turns the result into pixels.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace

from .lanes import LaneType, is_active

PADDING = 2
COLORS_NUM = 8

FILL_LANE = "lane"
FILL_BACKGROUND = "background"
FILL_RED = "red"
FILL_DARK_GREEN = "dark_green"

Color = tuple[int, int, int]
Rect = tuple[int, int, int, int]


@dataclass(frozen=True)
class Arc:
    """A quarter ellipse with a conical gradient between two colours.

    Angles are in degrees. ``active_first`` tells whether the gradient stop
    at 0.375 uses the active colour (and the one at 0.625 the lane colour)
    or the other way round.
    """

    x: int
    y: int
    width: int
    height: int
    start_angle: int
    span_angle: int
    gradient_center: tuple[int, int]
    gradient_angle: int
    active_first: bool


@dataclass(frozen=True)
class Segment:
    """A straight line; ``active`` lines use the active lane's colour."""

    x1: int
    y1: int
    x2: int
    y2: int
    active: bool


@dataclass(frozen=True)
class Symbol:
    """The mark at the centre of a lane: ellipse, rect, minus or plus."""

    shape: str
    rects: tuple[Rect, ...]
    fill: str
    outlined: bool


@dataclass(frozen=True)
class LaneCell:
    """Everything drawn in one lane of one row."""

    lane_type: LaneType
    x1: int
    x2: int
    arc: Arc | None
    vertical: Segment | None
    horizontal: Segment | None
    symbol: Symbol | None
    lane: int = 0
    color_index: int = 0
    active: bool = False


def lane_width(lane_height: int) -> int:
    """Width of a lane for rows ``lane_height`` pixels high."""
    return 3 * lane_height // 4


def blend(color1: Color, color2: Color, amount: int = 128) -> Color:
    """Mix two RGB colours; ``amount`` out of 256 is taken from ``color2``."""
    r1, g1, b1 = color1
    r2, g2, b2 = color2
    keep = 256 - amount
    return (
        (keep * r1 + amount * r2) // 256,
        (keep * g1 + amount * g2) // 256,
        (keep * b1 + amount * b2) // 256,
    )


def active_lane_index(lanes: Sequence[int]) -> int:
    """Index of the first lane holding the row's revision, 0 if none does."""
    return next((i for i, t in enumerate(lanes) if is_active(t)), 0)


_FULL_VERTICAL = frozenset({
    LaneType.ACTIVE, LaneType.NOT_ACTIVE, LaneType.MERGE_FORK,
    LaneType.MERGE_FORK_R, LaneType.MERGE_FORK_L, LaneType.JOIN,
    LaneType.JOIN_R, LaneType.JOIN_L, LaneType.CROSS,
})
_LOWER_VERTICAL = frozenset({LaneType.HEAD_L, LaneType.BRANCH})
_UPPER_VERTICAL = frozenset({
    LaneType.TAIL_L, LaneType.INITIAL, LaneType.BOUNDARY,
    LaneType.BOUNDARY_C, LaneType.BOUNDARY_R, LaneType.BOUNDARY_L,
})
_FULL_HORIZONTAL = frozenset({
    LaneType.MERGE_FORK, LaneType.JOIN, LaneType.HEAD, LaneType.TAIL,
    LaneType.CROSS, LaneType.CROSS_EMPTY, LaneType.BOUNDARY_C,
})
_LEFT_HORIZONTAL = frozenset({LaneType.MERGE_FORK_R, LaneType.BOUNDARY_R})
_RIGHT_HORIZONTAL = frozenset({
    LaneType.MERGE_FORK_L, LaneType.HEAD_L, LaneType.TAIL_L, LaneType.BOUNDARY_L,
})
_MERGE_FORKS = frozenset({LaneType.MERGE_FORK, LaneType.MERGE_FORK_R, LaneType.MERGE_FORK_L})
_BOUNDARY_NODES = frozenset({LaneType.BOUNDARY_C, LaneType.BOUNDARY_R, LaneType.BOUNDARY_L})


def _arc(t: LaneType, x1: int, x2: int, m: int, h: int) -> Arc | None:
    if t in (LaneType.JOIN, LaneType.JOIN_R, LaneType.HEAD, LaneType.HEAD_R):
        return Arc(m, h, 2 * (x1 - m), 2 * h, 0, 90, (x1, 2 * h), 225, False)
    if t == LaneType.JOIN_L:
        return Arc(m, h, 2 * (x2 - m), 2 * h, 90, 90, (x2, 2 * h), 315, True)
    if t in (LaneType.TAIL, LaneType.TAIL_R):
        return Arc(m, h, 2 * (x1 - m), -2 * h, 270, 90, (x1, 0), 135, True)
    return None


def _vertical(t: LaneType, m: int, h: int) -> Segment | None:
    if t in _FULL_VERTICAL:
        return Segment(m, 0, m, 2 * h, False)
    if t in _LOWER_VERTICAL:
        return Segment(m, h, m, 2 * h, False)
    if t in _UPPER_VERTICAL:
        return Segment(m, 0, m, h, False)
    return None


def _horizontal(t: LaneType, x1: int, x2: int, m: int, h: int) -> Segment | None:
    if t in _FULL_HORIZONTAL:
        return Segment(x1, h, x2, h, True)
    if t in _LEFT_HORIZONTAL:
        return Segment(x1, h, m, h, True)
    if t in _RIGHT_HORIZONTAL:
        return Segment(m, h, x2, h, True)
    return None


def _symbol(t: LaneType, m: int, h: int, r: int) -> Symbol | None:
    d = 2 * r
    centre = (m - r, h - r, d, d)
    if t in (LaneType.ACTIVE, LaneType.INITIAL, LaneType.BRANCH):
        return Symbol("ellipse", (centre,), FILL_LANE, True)
    if t in _MERGE_FORKS:
        return Symbol("rect", (centre,), FILL_LANE, True)
    if t == LaneType.UNAPPLIED:
        return Symbol("minus", ((m - r, h - 1, d, 2),), FILL_RED, False)
    if t == LaneType.APPLIED:
        return Symbol(
            "plus", ((m - r, h - 1, d, 2), (m - 1, h - r, 2, d)), FILL_DARK_GREEN, False
        )
    if t == LaneType.BOUNDARY:
        return Symbol("ellipse", (centre,), FILL_BACKGROUND, True)
    if t in _BOUNDARY_NODES:
        return Symbol("rect", (centre,), FILL_BACKGROUND, True)
    return None


def paint_lane(lane_type: int, x1: int, x2: int, lane_height: int) -> LaneCell:
    """Describe the glyph of one lane spanning ``x1``..``x2``."""
    t = LaneType(lane_type)
    px1, px2 = x1 + PADDING, x2 + PADDING
    h = lane_height // 2
    m = (px1 + px2) // 2
    r = (px2 - px1) // 3
    return LaneCell(
        lane_type=t,
        x1=x1,
        x2=x2,
        arc=_arc(t, px1, px2, m, h),
        vertical=_vertical(t, m, h),
        horizontal=_horizontal(t, px1, px2, m, h),
        symbol=_symbol(t, m, h, r),
    )


def layout_row(lanes: Sequence[int], max_width: int, lane_height: int) -> list[LaneCell]:
    """Lay out the non-empty lanes of a row that fit before ``max_width``."""
    active = active_lane_index(lanes)
    width = lane_width(lane_height)
    cells = []
    x2 = 0
    for i, lane_type in enumerate(lanes):
        if x2 >= max_width:
            break
        x1, x2 = x2, x2 + width
        if lane_type == LaneType.EMPTY:
            continue
        cell = paint_lane(lane_type, x1, x2, lane_height)
        cells.append(
            replace(cell, lane=i, color_index=i % COLORS_NUM, active=i == active)
        )
    return cells