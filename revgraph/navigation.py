"""Keyboard, wheel and double-click navigation and which actions are enabled."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .dragdrop import ZERO_SHA

VIEW_DIFF = "view_diff"
VIEW_FILE = "view_file"
EXTERNAL_EDITOR = "external_editor"
EXTERNAL_DIFF = "external_diff"

MIN_FONT_SIZE = 2


class DoubleClickAction(IntEnum):
    """What double-clicking a file does."""

    VIEW_PATCH = 0
    OPEN_IN_EDITOR = 1
    OPEN_IN_DIFFER = 2


@dataclass(frozen=True)
class ContextActions:
    """Enabled state of the actions that depend on the selected revision and file.

    ``filter_tree`` says whether a path is selected; the tree filter stays
    enabled while it is switched on regardless.
    """

    view_file: bool
    external_diff: bool
    external_editor: bool
    save_file: bool
    filter_tree: bool
    mark_diff_to_sha: bool
    checkout: bool
    branch: bool
    tag: bool
    delete: bool
    push: bool
    pop: bool


def next_tab_index(current: int, count: int, delta: int) -> int:
    """Tab selected by a wheel turn of ``delta``; negative moves right, wrapping."""
    if count <= 0:
        raise ValueError("there are no tabs")
    if delta < 0:
        return 0 if current + 1 == count else current + 1
    return count - 1 if current - 1 < 0 else current - 1


def scroll_amount(delta: int, page_step: int, single_step: int) -> int:
    """Scroll distance for ``delta``; +-1 means a page minus one line."""
    if delta in (1, -1):
        return delta * (page_step - single_step)
    return delta * single_step


def adjusted_font_size(size: int, delta: int) -> int | None:
    """New font point size, or None when it would drop below the minimum."""
    new_size = size + delta
    if new_size < MIN_FONT_SIZE:
        return None
    return new_size


def file_double_click(
    action: DoubleClickAction, is_main_view: bool, is_first: bool, is_merge: bool
) -> str | None:
    """Action triggered by double-clicking a file, or None.

    The first entry of a merge's file list does nothing. ``is_main_view``
    tells whether the list belongs to the main revision view.
    """
    if is_first and is_merge:
        return None
    action = DoubleClickAction(action)
    if action is DoubleClickAction.OPEN_IN_EDITOR:
        return EXTERNAL_EDITOR
    if action is DoubleClickAction.OPEN_IN_DIFFER:
        return EXTERNAL_DIFF if is_main_view else None
    return VIEW_DIFF if is_main_view else VIEW_FILE


def context_actions(
    rev_sha: str,
    file_name: str,
    is_dir: bool,
    found: bool,
    is_unapplied: bool,
    is_applied: bool,
    ref_type: int,
    nothing_to_commit: bool,
) -> ContextActions:
    """Enabled actions for the revision ``rev_sha`` and file ``file_name``.

    Revision properties are ignored when the revision was not ``found``.
    """
    path_enabled = bool(file_name)
    file_enabled = path_enabled and not is_dir
    if not found:
        is_unapplied = is_applied = False
        ref_type = 0
    committed = found and rev_sha != ZERO_SHA and not is_unapplied
    return ContextActions(
        view_file=file_enabled,
        external_diff=file_enabled,
        external_editor=file_enabled,
        save_file=file_enabled,
        filter_tree=path_enabled,
        mark_diff_to_sha=rev_sha != ZERO_SHA,
        checkout=committed,
        branch=committed,
        tag=committed,
        delete=ref_type != 0,
        push=found and is_unapplied and nothing_to_commit,
        pop=found and is_applied and nothing_to_commit,
    )