"""Moving between rows of the history view and resolving graph clicks."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from .lanes import LaneType


def next_highlighted(
    rows: int,
    current: int,
    direction: int,
    is_highlighted: Callable[[int], bool],
) -> Optional[int]:
    """Row of the next highlighted revision, or None when there is none.

    *direction* -1 searches upwards (newer), 1 downwards (older) and 0
    from the top of the list. *current* is the current row, -1 for none.
    """
    if rows <= 0:
        return None
    if direction == 0:
        if is_highlighted(0):
            return 0
        row = 0
    else:
        if not 0 <= current < rows:
            return None
        row = current
    step = 1 if direction >= 0 else -1
    row += step
    while 0 <= row < rows:
        if is_highlighted(row):
            return row
        row += step
    return None


def next_in_history(
    children: Sequence[str], parents: Sequence[str], direction: int
) -> Optional[str]:
    """The first child when *direction* is negative, else the first parent."""
    candidates = children if direction < 0 else parents
    return candidates[0] if candidates else None


def lane_at(x: int, lane_width: int) -> int:
    """Index of the lane under horizontal position *x*."""
    if lane_width <= 0:
        raise ValueError(f"lane width must be positive: {lane_width}")
    if x < 0:
        raise ValueError(f"position must not be negative: {x}")
    return x // lane_width


def lane_parents_children(
    lane_type: Optional[int],
    sha: str,
    parents: Sequence[str],
    lane_parent: str,
    children_of: Callable[[str], Sequence[str]],
) -> Optional[tuple[list[str], list[str]]]:
    """Parents and children reachable through a clicked lane.

    *lane_type* is None when the click falls outside the row's lanes.
    On the revision's own lane the revision's *parents* are used; on a
    lane passing through, *lane_parent* is the parent that lane leads to.
    Returns None when the lane leads nowhere.
    """
    if lane_type is None or lane_type == LaneType.EMPTY:
        return None
    if not LaneType(lane_type).is_free_lane():
        found_parents = list(parents)
        root = sha
    else:
        if not lane_parent:
            return None
        found_parents = [lane_parent]
        root = lane_parent
    return found_parents, list(children_of(root))


def pixmap_rows(
    revs: Sequence[str],
    has_ref: bool,
    max_rows: int = 10,
    dotdot_row: int = 5,
) -> tuple[int, list[tuple[int, str]]]:
    """Layout of the drag image of a selection.

    Returns the number of rows and the (row, revision) pairs drawn. A
    ref name, when present, takes row 0. Long selections show their
    start, an empty row, and their last ``dotdot_row - 1`` revisions.
    """
    rows = min(len(revs) + (1 if has_ref else 0), max_rows)
    row = 1 if has_ref else 0
    placed: list[tuple[int, str]] = []
    total = len(revs)
    i = 0
    while i < total:
        placed.append((row, revs[i]))
        row += 1
        remaining = total - i
        if rows - row == dotdot_row and remaining > dotdot_row + 1:
            row += 1
            i += remaining - dotdot_row
        i += 1
    return rows, placed


def sha_from_ann_id(shas: Sequence[str], ann_id: int, is_main: bool) -> str:
    """Sha of the revision with annotation id *ann_id* in a file history.

    Ids count from the oldest revision; the main history has none.
    """
    if is_main:
        return ""
    row = len(shas) - ann_id
    if not 0 <= row < len(shas):
        return ""
    return shas[row]