"""Lane state for drawing a revision history graph, one row at a time."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator, Sequence


class LaneType(IntEnum):
    """Glyph kinds that can appear in one lane (column) of the graph."""

    EMPTY = 0
    ACTIVE = 1
    NOT_ACTIVE = 2
    MERGE_FORK = 3
    MERGE_FORK_R = 4
    MERGE_FORK_L = 5
    JOIN = 6
    JOIN_R = 7
    JOIN_L = 8
    HEAD = 9
    HEAD_R = 10
    HEAD_L = 11
    TAIL = 12
    TAIL_R = 13
    TAIL_L = 14
    CROSS = 15
    CROSS_EMPTY = 16
    INITIAL = 17
    BRANCH = 18
    UNAPPLIED = 19
    APPLIED = 20
    BOUNDARY = 21
    BOUNDARY_C = 22
    BOUNDARY_L = 23
    BOUNDARY_R = 24

    def is_head(self) -> bool:
        return self in (LaneType.HEAD, LaneType.HEAD_R, LaneType.HEAD_L)

    def is_tail(self) -> bool:
        return self in (LaneType.TAIL, LaneType.TAIL_R, LaneType.TAIL_L)

    def is_join(self) -> bool:
        return self in (LaneType.JOIN, LaneType.JOIN_R, LaneType.JOIN_L)

    def is_node(self) -> bool:
        """True for merge/fork nodes, ordinary or at a boundary."""
        return self in (
            LaneType.MERGE_FORK,
            LaneType.MERGE_FORK_R,
            LaneType.MERGE_FORK_L,
            LaneType.BOUNDARY_C,
            LaneType.BOUNDARY_R,
            LaneType.BOUNDARY_L,
        )

    def is_boundary(self) -> bool:
        return self in (
            LaneType.BOUNDARY,
            LaneType.BOUNDARY_C,
            LaneType.BOUNDARY_L,
            LaneType.BOUNDARY_R,
        )

    def is_free_lane(self) -> bool:
        return self in (LaneType.NOT_ACTIVE, LaneType.CROSS) or self.is_join()

    def is_merge(self) -> bool:
        return (
            self in (LaneType.MERGE_FORK, LaneType.MERGE_FORK_R, LaneType.MERGE_FORK_L)
            or self.is_boundary()
        )

    def is_active(self) -> bool:
        return (
            self in (LaneType.ACTIVE, LaneType.INITIAL, LaneType.BRANCH)
            or self.is_merge()
        )


_NORMAL_NODES = (LaneType.MERGE_FORK, LaneType.MERGE_FORK_R, LaneType.MERGE_FORK_L)
_BOUNDARY_NODES = (LaneType.BOUNDARY_C, LaneType.BOUNDARY_R, LaneType.BOUNDARY_L)


class Lanes:
    """The lanes of a single history row, updated as revisions are walked.

    Each lane holds the glyph type to draw and the sha of the next commit
    expected to appear in that lane.
    """

    def __init__(self) -> None:
        self._types: list[LaneType] = []
        self._next: list[str] = []
        self._active = 0
        self._boundary = False
        self._node, self._node_r, self._node_l = _NORMAL_NODES

    def is_empty(self) -> bool:
        return not self._types

    def init(self, expected_sha: str) -> None:
        self.clear()
        self._active = 0
        self.set_boundary(False)
        self._add(LaneType.BRANCH, expected_sha, self._active)

    def clear(self) -> None:
        self._types.clear()
        self._next.clear()

    def is_fork(self, sha: str) -> tuple[bool, bool]:
        """Return (is_fork, is_discontinuity) for the given sha."""
        pos = self._find_next_sha(sha, 0)
        discontinuity = self._active != pos
        if pos == -1:
            return False, discontinuity
        return self._find_next_sha(sha, pos + 1) != -1, discontinuity

    def set_boundary(self, boundary: bool) -> None:
        self._node, self._node_r, self._node_l = (
            _BOUNDARY_NODES if boundary else _NORMAL_NODES
        )
        self._boundary = boundary
        if boundary:
            self._types[self._active] = LaneType.BOUNDARY

    def set_fork(self, sha: str) -> None:
        positions = list(self._positions(sha))
        if not positions:
            raise ValueError(f"no lane is waiting for {sha!r}")
        types = self._types
        for idx in positions:
            types[idx] = LaneType.TAIL
        types[self._active] = self._node

        start, end = positions[0], positions[-1]
        if types[start] == self._node:
            types[start] = self._node_l
        if types[end] == self._node:
            types[end] = self._node_r
        if types[start] == LaneType.TAIL:
            types[start] = LaneType.TAIL_L
        if types[end] == LaneType.TAIL:
            types[end] = LaneType.TAIL_R

        self._cross_between(start, end, untail=False)

    def set_merge(self, parents: Sequence[str]) -> None:
        """Mark a merge; set_fork() must already have been called if needed."""
        if self._boundary:
            return
        types = self._types
        current = types[self._active]
        was_fork = current == self._node
        was_fork_l = current == self._node_l
        was_fork_r = current == self._node_r
        start_join_was_cross = end_join_was_cross = False

        types[self._active] = self._node
        start = end = self._active
        for parent in parents[1:]:
            idx = self._find_next_sha(parent, 0)
            if idx != -1:
                if idx > end:
                    end = idx
                    end_join_was_cross = types[idx] == LaneType.CROSS
                if idx < start:
                    start = idx
                    start_join_was_cross = types[idx] == LaneType.CROSS
                types[idx] = LaneType.JOIN
            else:
                end = self._add(LaneType.HEAD, parent, end + 1)

        if types[start] == self._node and not was_fork and not was_fork_r:
            types[start] = self._node_l
        if types[end] == self._node and not was_fork and not was_fork_l:
            types[end] = self._node_r
        if types[start] == LaneType.JOIN and not start_join_was_cross:
            types[start] = LaneType.JOIN_L
        if types[end] == LaneType.JOIN and not end_join_was_cross:
            types[end] = LaneType.JOIN_R
        if types[start] == LaneType.HEAD:
            types[start] = LaneType.HEAD_L
        if types[end] == LaneType.HEAD:
            types[end] = LaneType.HEAD_R

        self._cross_between(start, end, untail=True)

    def set_initial(self) -> None:
        current = self._types[self._active]
        if not self._is_node(current) and current != LaneType.APPLIED:
            self._types[self._active] = (
                LaneType.BOUNDARY if self._boundary else LaneType.INITIAL
            )

    def set_applied(self) -> None:
        self._types[self._active] = LaneType.APPLIED

    def change_active_lane(self, sha: str) -> None:
        current = self._types[self._active]
        if current == LaneType.INITIAL or current.is_boundary():
            self._types[self._active] = LaneType.EMPTY
        else:
            self._types[self._active] = LaneType.NOT_ACTIVE

        idx = self._find_next_sha(sha, 0)
        if idx != -1:
            self._types[idx] = LaneType.ACTIVE
        else:
            idx = self._add(LaneType.BRANCH, sha, self._active)
        self._active = idx

    def after_merge(self) -> None:
        if self._boundary:
            return
        self._types = [self._settle_merge(t) for t in self._types]

    def after_fork(self) -> None:
        self._types = [self._settle_fork(t) for t in self._types]
        while self._types and self._types[-1] == LaneType.EMPTY:
            self._types.pop()
            self._next.pop()

    def is_branch(self) -> bool:
        return self._types[self._active] == LaneType.BRANCH

    def after_branch(self) -> None:
        self._types[self._active] = LaneType.ACTIVE

    def after_applied(self) -> None:
        self._types[self._active] = LaneType.ACTIVE

    def next_parent(self, sha: str) -> None:
        self._next[self._active] = "" if self._boundary else sha

    def lanes(self) -> list[LaneType]:
        """A snapshot of the current row's lane types."""
        return list(self._types)

    def _is_node(self, t: LaneType) -> bool:
        return t in (self._node, self._node_r, self._node_l)

    def _settle_merge(self, t: LaneType) -> LaneType:
        if t.is_head() or t.is_join() or t == LaneType.CROSS:
            return LaneType.NOT_ACTIVE
        if t == LaneType.CROSS_EMPTY:
            return LaneType.EMPTY
        if self._is_node(t):
            return LaneType.ACTIVE
        return t

    def _settle_fork(self, t: LaneType) -> LaneType:
        if t == LaneType.CROSS:
            t = LaneType.NOT_ACTIVE
        elif t.is_tail() or t == LaneType.CROSS_EMPTY:
            t = LaneType.EMPTY
        if not self._boundary and self._is_node(t):
            t = LaneType.ACTIVE
        return t

    def _cross_between(self, start: int, end: int, untail: bool) -> None:
        for i in range(start + 1, end):
            t = self._types[i]
            if t == LaneType.NOT_ACTIVE:
                self._types[i] = LaneType.CROSS
            elif t == LaneType.EMPTY:
                self._types[i] = LaneType.CROSS_EMPTY
            elif untail and t in (LaneType.TAIL_R, LaneType.TAIL_L):
                self._types[i] = LaneType.TAIL

    def _positions(self, sha: str) -> Iterator[int]:
        return (i for i, s in enumerate(self._next) if s == sha)

    def _find_next_sha(self, sha: str, pos: int) -> int:
        return next((i for i in self._positions(sha) if i >= pos), -1)

    def _find_type(self, lane_type: LaneType, pos: int) -> int:
        return next(
            (i for i, t in enumerate(self._types) if i >= pos and t == lane_type), -1
        )

    def _add(self, lane_type: LaneType, sha: str, pos: int) -> int:
        if pos < len(self._types):
            empty = self._find_type(LaneType.EMPTY, pos)
            if empty != -1:
                self._types[empty] = lane_type
                self._next[empty] = sha
                return empty
        self._types.append(lane_type)
        self._next.append(sha)
        return len(self._types) - 1