"""Per-row lane state used to draw the revision history graph.

A :class:`Lanes` instance describes one row of the graph at a time: for each
column it knows which glyph to draw and which commit is expected next in it.
Rows are processed from the newest revision to the oldest.
"""

from __future__ import annotations

from enum import IntEnum


class LaneType(IntEnum):
    """Glyph kinds that can appear in a lane of the history graph."""

    EMPTY = 1
    ACTIVE = 2
    NOT_ACTIVE = 3
    MERGE_FORK = 4
    MERGE_FORK_R = 5
    MERGE_FORK_L = 6
    JOIN = 7
    JOIN_R = 8
    JOIN_L = 9
    HEAD = 10
    HEAD_R = 11
    HEAD_L = 12
    TAIL = 13
    TAIL_R = 14
    TAIL_L = 15
    CROSS = 16
    CROSS_EMPTY = 17
    INITIAL = 18
    BRANCH = 19
    UNAPPLIED = 20
    APPLIED = 21
    BOUNDARY = 22
    BOUNDARY_C = 23
    BOUNDARY_R = 24
    BOUNDARY_L = 25


_HEADS = frozenset({LaneType.HEAD, LaneType.HEAD_R, LaneType.HEAD_L})
_TAILS = frozenset({LaneType.TAIL, LaneType.TAIL_R, LaneType.TAIL_L})
_JOINS = frozenset({LaneType.JOIN, LaneType.JOIN_R, LaneType.JOIN_L})
_MERGES = frozenset({LaneType.MERGE_FORK, LaneType.MERGE_FORK_R, LaneType.MERGE_FORK_L})
_BOUNDARIES = frozenset(
    {LaneType.BOUNDARY, LaneType.BOUNDARY_C, LaneType.BOUNDARY_R, LaneType.BOUNDARY_L}
)


def is_head(lane_type: int) -> bool:
    """True for the lane types that start a new line from a merge."""
    return lane_type in _HEADS


def is_tail(lane_type: int) -> bool:
    """True for the lane types that end a line into a fork."""
    return lane_type in _TAILS


def is_join(lane_type: int) -> bool:
    """True for the lane types that join an existing line into a merge."""
    return lane_type in _JOINS


def is_boundary(lane_type: int) -> bool:
    """True for the lane types drawn on boundary revisions."""
    return lane_type in _BOUNDARIES


def is_active(lane_type: int) -> bool:
    """True when the lane holds the revision of the current row."""
    return lane_type in (LaneType.ACTIVE, LaneType.INITIAL, LaneType.BRANCH) or (
        lane_type in _MERGES
    )


def is_free_lane(lane_type: int) -> bool:
    """True when the lane only passes through the current row."""
    return lane_type in (LaneType.NOT_ACTIVE, LaneType.CROSS) or is_join(lane_type)


class Lanes:
    """Lane glyphs and expected next commits for the current graph row."""

    def __init__(self) -> None:
        self._types: list[LaneType] = []
        self._next_shas: list[str] = []
        self._active = 0
        self._boundary = False
        self._node = LaneType.MERGE_FORK
        self._node_r = LaneType.MERGE_FORK_R
        self._node_l = LaneType.MERGE_FORK_L

    @property
    def active_lane(self) -> int:
        """Index of the lane holding the current revision."""
        return self._active

    def init(self, expected_sha: str) -> None:
        """Start a fresh graph whose first revision is ``expected_sha``."""
        self.clear()
        self._active = 0
        self.set_boundary(False)
        self._add(LaneType.BRANCH, expected_sha, self._active)

    def clear(self) -> None:
        """Drop all lanes."""
        self._types.clear()
        self._next_shas.clear()

    def is_empty(self) -> bool:
        return not self._types

    def is_fork(self, sha: str) -> tuple[bool, bool]:
        """Return ``(is_fork, is_discontinuity)`` for the revision ``sha``."""
        pos = self._find_next_sha(sha, 0)
        discontinuity = self._active != pos
        if pos == -1:
            return False, discontinuity
        return self._find_next_sha(sha, pos + 1) != -1, discontinuity

    def _is_node(self, lane_type: LaneType) -> bool:
        return lane_type in (self._node, self._node_r, self._node_l)

    def set_boundary(self, boundary: bool) -> None:
        """Switch boundary mode; must be called before the other setters."""
        if boundary:
            self._node, self._node_r, self._node_l = (
                LaneType.BOUNDARY_C,
                LaneType.BOUNDARY_R,
                LaneType.BOUNDARY_L,
            )
        else:
            self._node, self._node_r, self._node_l = (
                LaneType.MERGE_FORK,
                LaneType.MERGE_FORK_R,
                LaneType.MERGE_FORK_L,
            )
        self._boundary = boundary
        if boundary:
            self._types[self._active] = LaneType.BOUNDARY

    def set_fork(self, sha: str) -> None:
        """Mark the lanes expecting ``sha`` as tails converging on the active lane."""
        first = self._find_next_sha(sha, 0)
        if first == -1:
            raise ValueError(f"no lane expects revision {sha!r}")
        range_start = range_end = idx = first
        while idx != -1:
            range_end = idx
            self._types[idx] = LaneType.TAIL
            idx = self._find_next_sha(sha, idx + 1)
        self._types[self._active] = self._node

        types = self._types
        if types[range_start] == self._node:
            types[range_start] = self._node_l
        if types[range_end] == self._node:
            types[range_end] = self._node_r
        if types[range_start] == LaneType.TAIL:
            types[range_start] = LaneType.TAIL_L
        if types[range_end] == LaneType.TAIL:
            types[range_end] = LaneType.TAIL_R

        for i in range(range_start + 1, range_end):
            if types[i] == LaneType.NOT_ACTIVE:
                types[i] = LaneType.CROSS
            elif types[i] == LaneType.EMPTY:
                types[i] = LaneType.CROSS_EMPTY

    def set_merge(self, parents: list[str]) -> None:
        """Draw a merge of ``parents`` (the first one is skipped) into the active lane."""
        if self._boundary:
            return
        types = self._types
        current = types[self._active]
        was_fork = current == self._node
        was_fork_l = current == self._node_l
        was_fork_r = current == self._node_r
        start_join_was_cross = end_join_was_cross = False

        types[self._active] = self._node

        range_start = range_end = self._active
        for parent in parents[1:]:
            idx = self._find_next_sha(parent, 0)
            if idx != -1:
                if idx > range_end:
                    range_end = idx
                    end_join_was_cross = types[idx] == LaneType.CROSS
                if idx < range_start:
                    range_start = idx
                    start_join_was_cross = types[idx] == LaneType.CROSS
                types[idx] = LaneType.JOIN
            else:
                range_end = self._add(LaneType.HEAD, parent, range_end + 1)

        if types[range_start] == self._node and not was_fork and not was_fork_r:
            types[range_start] = self._node_l
        if types[range_end] == self._node and not was_fork and not was_fork_l:
            types[range_end] = self._node_r
        if types[range_start] == LaneType.JOIN and not start_join_was_cross:
            types[range_start] = LaneType.JOIN_L
        if types[range_end] == LaneType.JOIN and not end_join_was_cross:
            types[range_end] = LaneType.JOIN_R
        if types[range_start] == LaneType.HEAD:
            types[range_start] = LaneType.HEAD_L
        if types[range_end] == LaneType.HEAD:
            types[range_end] = LaneType.HEAD_R

        for i in range(range_start + 1, range_end):
            t = types[i]
            if t == LaneType.NOT_ACTIVE:
                types[i] = LaneType.CROSS
            elif t == LaneType.EMPTY:
                types[i] = LaneType.CROSS_EMPTY
            elif t in (LaneType.TAIL_R, LaneType.TAIL_L):
                types[i] = LaneType.TAIL

    def set_initial(self) -> None:
        """Mark the active revision as a root commit."""
        t = self._types[self._active]
        if not self._is_node(t) and t != LaneType.APPLIED:
            self._types[self._active] = (
                LaneType.BOUNDARY if self._boundary else LaneType.INITIAL
            )

    def set_applied(self) -> None:
        """Mark the active revision as an applied patch."""
        self._types[self._active] = LaneType.APPLIED

    def change_active_lane(self, sha: str) -> None:
        """Move the active lane to the one expecting ``sha``, opening one if needed."""
        t = self._types[self._active]
        if t == LaneType.INITIAL or is_boundary(t):
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
        """Reset merge glyphs before the next row."""
        if self._boundary:
            return
        for i, t in enumerate(self._types):
            if is_head(t) or is_join(t) or t == LaneType.CROSS:
                self._types[i] = LaneType.NOT_ACTIVE
            elif t == LaneType.CROSS_EMPTY:
                self._types[i] = LaneType.EMPTY
            elif self._is_node(t):
                self._types[i] = LaneType.ACTIVE

    def after_fork(self) -> None:
        """Reset fork glyphs and drop trailing empty lanes."""
        for i, t in enumerate(self._types):
            if t == LaneType.CROSS:
                t = LaneType.NOT_ACTIVE
            elif is_tail(t) or t == LaneType.CROSS_EMPTY:
                t = LaneType.EMPTY
            if not self._boundary and self._is_node(t):
                t = LaneType.ACTIVE
            self._types[i] = t
        while self._types and self._types[-1] == LaneType.EMPTY:
            self._types.pop()
            self._next_shas.pop()

    def is_branch(self) -> bool:
        return self._types[self._active] == LaneType.BRANCH

    def after_branch(self) -> None:
        self._types[self._active] = LaneType.ACTIVE

    def after_applied(self) -> None:
        self._types[self._active] = LaneType.ACTIVE

    def next_parent(self, sha: str) -> None:
        """Set the revision expected next in the active lane."""
        self._next_shas[self._active] = "" if self._boundary else sha

    def snapshot(self) -> tuple[LaneType, ...]:
        """The glyphs of the current row."""
        return tuple(self._types)

    def _find_next_sha(self, sha: str, pos: int) -> int:
        for i in range(pos, len(self._next_shas)):
            if self._next_shas[i] == sha:
                return i
        return -1

    def _find_type(self, lane_type: LaneType, pos: int) -> int:
        for i in range(pos, len(self._types)):
            if self._types[i] == lane_type:
                return i
        return -1

    def _add(self, lane_type: LaneType, sha: str, pos: int) -> int:
        if pos < len(self._types):
            pos = self._find_type(LaneType.EMPTY, pos)
            if pos != -1:
                self._types[pos] = lane_type
                self._next_shas[pos] = sha
                return pos
        self._types.append(lane_type)
        self._next_shas.append(sha)
        return len(self._types) - 1