"""Reference names attached to a revision: kinds, labels, colours and hit testing."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

TEXT_SPACING = 4
MARK_SPACING = 2
DETACHED_LABEL = "detached"

Color = tuple[int, int, int]

RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)
DARK_GREEN: Color = (0, 205, 0)
LIGHT_ORANGE: Color = (255, 221, 170)
PURPLE: Color = (221, 221, 255)


class RefType(IntEnum):
    """Kinds of reference names, in the order they are shown."""

    NONE = 0
    BRANCH = 1
    RMT_BRANCH = 2
    TAG = 4
    REF = 8


_ORDER = (RefType.BRANCH, RefType.RMT_BRANCH, RefType.TAG, RefType.REF)

_PREFIXES = {
    RefType.BRANCH: "",
    RefType.TAG: "tags/",
    RefType.RMT_BRANCH: "remotes/",
    RefType.REF: "bases/",
}


@dataclass(frozen=True)
class RefName:
    """One reference name of a revision; an empty NONE entry marks a detached HEAD."""

    name: str
    ref_type: RefType
    is_current: bool = False

    @property
    def label(self) -> str:
        return tag_mark_label(self.name, self.ref_type)

    @property
    def qualified(self) -> str:
        return qualified_ref_name(self.name, self.ref_type)


def ref_type_from_name(name: str) -> RefType:
    """Guess the kind of a fully qualified reference name."""
    if name.startswith("tags/"):
        return RefType.TAG
    if name.startswith("remotes/"):
        return RefType.RMT_BRANCH
    if name:
        return RefType.BRANCH
    return RefType.NONE


def qualified_ref_name(name: str, ref_type: RefType) -> str:
    """Prefix a short reference name with its namespace; empty for unknown kinds."""
    prefix = _PREFIXES.get(ref_type)
    if prefix is None:
        return ""
    return prefix + name


def tag_mark_label(name: str, ref_type: RefType) -> str:
    """Text drawn in the mark of a reference."""
    return DETACHED_LABEL if ref_type == RefType.NONE else name


def tag_mark_color(ref_type: RefType, is_current: bool) -> Color:
    """Background colour of the mark of a reference."""
    if ref_type == RefType.NONE:
        return RED
    if ref_type == RefType.BRANCH:
        return GREEN if is_current else DARK_GREEN
    if ref_type == RefType.RMT_BRANCH:
        return LIGHT_ORANGE
    if ref_type == RefType.TAG:
        return YELLOW
    if ref_type == RefType.REF:
        return PURPLE
    raise ValueError(f"unknown reference type {ref_type!r}")


def iter_ref_names(
    ref_names: Mapping[RefType, Sequence[str]],
    current_branch: str,
    detached: bool,
) -> Iterator[RefName]:
    """Yield the references of a revision in display order.

    A detached HEAD (``detached`` with no current branch) comes first as an
    empty NONE entry, then local branches, remote branches, tags and other refs.
    """
    if detached and not current_branch:
        yield RefName("", RefType.NONE, True)
    for ref_type in _ORDER:
        for name in ref_names.get(ref_type, ()):
            yield RefName(name, ref_type, bool(current_branch) and name == current_branch)


def ref_at_offset(
    ref_names: Iterable[RefName],
    x: int,
    start: int,
    text_width: Callable[[str, bool], int],
) -> str:
    """Qualified name of the reference mark under horizontal position ``x``.

    Marks are laid out from ``start``; ``text_width(label, bold)`` measures a
    label. Returns an empty string when ``x`` lies past every mark or on the
    detached mark.
    """
    offset = start
    for ref in ref_names:
        offset += text_width(ref.label, ref.is_current) + 2 * TEXT_SPACING
        if x <= offset:
            return ref.qualified
        offset += MARK_SPACING
    return ""