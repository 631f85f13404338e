"""Helpers for repository-session state: recent repositories, startup and titles."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

APP_NAME = "RevGraph"
RECENT_PREFIX = "RECENT"


def update_recent_repos(
    recents: Sequence[str], new_entry: str, max_entries: int
) -> list[str]:
    """Move ``new_entry`` to the front of ``recents`` and cap the list length."""
    updated = list(recents)
    if new_entry in updated:
        updated.remove(new_entry)
    if new_entry:
        updated.insert(0, new_entry)
    return updated[:max_entries]


def recent_menu_labels(recents: Iterable[str]) -> list[tuple[str, str]]:
    """Return ``(label, data)`` pairs for the recent-repository menu entries."""
    return [
        (f"{number} {path}", f"{RECENT_PREFIX} {path}")
        for number, path in enumerate(recents, start=1)
    ]


def parse_recent_action(data: str) -> str | None:
    """Extract the directory from a recent-menu entry's data, or None."""
    if not data.startswith(RECENT_PREFIX):
        return None
    work_dir = data[len(RECENT_PREFIX) + 1:]
    return work_dir or None


def parse_view_file(args: Iterable[str]) -> str | None:
    """Find the file given by ``--view-file NAME`` or ``--view-file=NAME``.

    ``args`` are the command-line arguments without the program name; the
    last occurrence wins.
    """
    result = None
    retain_next = False
    for arg in args:
        if retain_next:
            retain_next = False
            result = arg
        elif arg == "--view-file":
            retain_next = True
        elif arg.startswith("--view-file="):
            result = arg[len("--view-file="):]
    return result


def startup_dir(
    recents: Sequence[str],
    reopen: bool,
    exists: Callable[[str], bool],
    cur_dir: str,
    cwd: str,
) -> str:
    """Choose the directory opened at startup."""
    if recents and reopen and exists(recents[0]):
        return recents[0]
    return cur_dir or cwd


def window_title(
    cur_dir: str, branch: str, filter_args: Sequence[str] | None
) -> str:
    """Build the main window title."""
    title = cur_dir
    if branch:
        title += f" [{branch}]"
    title += f" - {APP_NAME}"
    if filter_args is not None:
        title += " - FILTER ON < " + " ".join(filter_args) + " >"
    return title


def ref_menu_tree(refs: Iterable[str], sep: str = "/") -> dict:
    """Group ref names into nested submenus split on ``sep``.

    Each level is ``{"menus": {name: level}, "actions": [ref, ...]}``; a
    ref is placed as an action in the submenu named by all of its parts
    except the last, and keeps its full name.
    """
    root: dict = {"menus": {}, "actions": []}
    for ref in refs:
        parts = [p for p in ref.split(sep) if p]
        level = root
        for part in parts[:-1]:
            level = level["menus"].setdefault(part, {"menus": {}, "actions": []})
        level["actions"].append(ref)
    return root