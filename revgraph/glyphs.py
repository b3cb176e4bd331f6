"""Geometry and colours of the glyphs drawn in each lane of the history graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .lanes import LaneType

COLORS_NUM = 8
LANE_COLOR_NAMES = (
    "text",
    "red",
    "dark_green",
    "blue",
    "dark_gray",
    "brown",
    "magenta",
    "orange",
)

_PADDING = 2
_FULL_VERTICAL = {
    LaneType.ACTIVE,
    LaneType.NOT_ACTIVE,
    LaneType.MERGE_FORK,
    LaneType.MERGE_FORK_R,
    LaneType.MERGE_FORK_L,
    LaneType.JOIN,
    LaneType.JOIN_R,
    LaneType.JOIN_L,
    LaneType.CROSS,
}
_LOWER_VERTICAL = {LaneType.HEAD_L, LaneType.BRANCH}
_UPPER_VERTICAL = {
    LaneType.TAIL_L,
    LaneType.INITIAL,
    LaneType.BOUNDARY,
    LaneType.BOUNDARY_C,
    LaneType.BOUNDARY_R,
    LaneType.BOUNDARY_L,
}
_FULL_HORIZONTAL = {
    LaneType.MERGE_FORK,
    LaneType.JOIN,
    LaneType.HEAD,
    LaneType.TAIL,
    LaneType.CROSS,
    LaneType.CROSS_EMPTY,
    LaneType.BOUNDARY_C,
}
_LEFT_HORIZONTAL = {LaneType.MERGE_FORK_R, LaneType.BOUNDARY_R}
_RIGHT_HORIZONTAL = {
    LaneType.MERGE_FORK_L,
    LaneType.HEAD_L,
    LaneType.TAIL_L,
    LaneType.BOUNDARY_L,
}


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for channel in (self.red, self.green, self.blue):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


@dataclass(frozen=True)
class GlyphPart:
    """One drawing primitive of a lane glyph.

    ``shape`` is "arc", "line", "ellipse" or "rect". ``geometry`` holds
    (xa, ya, xb, yb) for lines, (x, y, w, h) for ellipses and rects and
    (x, y, w, h, start, span) for arcs, angles in 1/16 degree. ``pen`` and
    ``brush`` name colour roles: "lane", "active", "black", "back", "red",
    "dark_green" or None for none. Arcs carry a conical ``gradient`` of
    (cx, cy, angle, first role, second role).
    """

    shape: str
    geometry: tuple[int, ...]
    pen: Optional[str]
    brush: Optional[str] = None
    gradient: Optional[tuple[int, int, int, str, str]] = None


def blend(col1: Color, col2: Color, amount: int = 128) -> Color:
    """Mix *col2* into *col1* by amount/256."""
    if not 0 <= amount <= 256:
        raise ValueError(f"blend amount out of range: {amount}")
    keep = 256 - amount
    return Color(
        (keep * col1.red + amount * col2.red) // 256,
        (keep * col1.green + amount * col2.green) // 256,
        (keep * col1.blue + amount * col2.blue) // 256,
    )


def lane_width(lane_height: int) -> int:
    return 3 * lane_height // 4


def active_lane(lanes: Iterable[int]) -> int:
    """Index of the first active lane in a row, 0 when there is none."""
    return next(
        (i for i, t in enumerate(lanes) if LaneType(t).is_active()),
        0,
    )


def lane_color_index(lane: int) -> int:
    """Index into LANE_COLOR_NAMES of the colour of a lane."""
    return lane % COLORS_NUM


def lane_glyph(lane_type: int, x1: int, x2: int, lane_height: int) -> list[GlyphPart]:
    """The primitives that draw *lane_type* between *x1* and *x2*."""
    t = LaneType(lane_type)
    x1 += _PADDING
    x2 += _PADDING
    h = lane_height // 2
    m = (x1 + x2) // 2
    r = (x2 - x1) // 3
    d = 2 * r
    parts: list[GlyphPart] = []

    if t in (LaneType.JOIN, LaneType.JOIN_R, LaneType.HEAD, LaneType.HEAD_R):
        parts.append(
            GlyphPart(
                "arc",
                (m, h, 2 * (x1 - m), 2 * h, 0, 90 * 16),
                "gradient",
                gradient=(x1, 2 * h, 225, "lane", "active"),
            )
        )
    elif t == LaneType.JOIN_L:
        parts.append(
            GlyphPart(
                "arc",
                (m, h, 2 * (x2 - m), 2 * h, 90 * 16, 90 * 16),
                "gradient",
                gradient=(x2, 2 * h, 315, "active", "lane"),
            )
        )
    elif t in (LaneType.TAIL, LaneType.TAIL_R):
        parts.append(
            GlyphPart(
                "arc",
                (m, h, 2 * (x1 - m), -2 * h, 270 * 16, 90 * 16),
                "gradient",
                gradient=(x1, 0, 135, "active", "lane"),
            )
        )

    if t in _FULL_VERTICAL:
        parts.append(GlyphPart("line", (m, 0, m, 2 * h), "lane"))
    elif t in _LOWER_VERTICAL:
        parts.append(GlyphPart("line", (m, h, m, 2 * h), "lane"))
    elif t in _UPPER_VERTICAL:
        parts.append(GlyphPart("line", (m, 0, m, h), "lane"))

    if t in _FULL_HORIZONTAL:
        parts.append(GlyphPart("line", (x1, h, x2, h), "active"))
    elif t in _LEFT_HORIZONTAL:
        parts.append(GlyphPart("line", (x1, h, m, h), "active"))
    elif t in _RIGHT_HORIZONTAL:
        parts.append(GlyphPart("line", (m, h, x2, h), "active"))

    center = (m - r, h - r, d, d)
    if t in (LaneType.ACTIVE, LaneType.INITIAL, LaneType.BRANCH):
        parts.append(GlyphPart("ellipse", center, "black", "lane"))
    elif t in (LaneType.MERGE_FORK, LaneType.MERGE_FORK_R, LaneType.MERGE_FORK_L):
        parts.append(GlyphPart("rect", center, "black", "lane"))
    elif t == LaneType.UNAPPLIED:
        parts.append(GlyphPart("rect", (m - r, h - 1, d, 2), None, "red"))
    elif t == LaneType.APPLIED:
        parts.append(GlyphPart("rect", (m - r, h - 1, d, 2), None, "dark_green"))
        parts.append(GlyphPart("rect", (m - 1, h - r, 2, d), None, "dark_green"))
    elif t == LaneType.BOUNDARY:
        parts.append(GlyphPart("ellipse", center, "black", "back"))
    elif t in (LaneType.BOUNDARY_C, LaneType.BOUNDARY_R, LaneType.BOUNDARY_L):
        parts.append(GlyphPart("rect", center, "black", "back"))

    return parts