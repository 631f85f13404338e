"""Drag and drop of revisions between revision lists.

A drag carries a small text payload: a header line ``RANGE@<dir>`` or
``LIST@<dir>`` followed by one sha per line, the first one optionally
followed by a space and the reference name the drag started on.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag

from .refs import RefType, ref_type_from_name

ZERO_SHA = "0" * 40
MIME_TYPE = "application/x-qgit-revs"


class DropAction(IntEnum):
    """What a drop does; the low three bits are the toolkit's drop action."""

    PATCH = 1
    REBASE = 2
    MOVE_REF = 10
    MERGE = 4


class DropFlags(IntFlag):
    """What a drag carries and where it comes from."""

    NONE = 0
    PATCHES = 1
    REV_LIST = 2
    REV_RANGE = 4
    SAME_REPO = 8


class Modifier(Enum):
    """Keyboard modifier held while dragging."""

    NONE = "none"
    CONTROL = "control"
    SHIFT = "shift"
    ALT = "alt"


_FORCED = {
    Modifier.CONTROL: DropAction.PATCH,
    Modifier.SHIFT: DropAction.REBASE,
    Modifier.ALT: DropAction.MERGE,
}

_NAMES = {
    DropAction.PATCH: "patching",
    DropAction.REBASE: "rebasing",
    DropAction.MOVE_REF: "moving",
    DropAction.MERGE: "merging",
}


class DropRejected(Exception):
    """Raised when a drag or drop cannot be accepted; the message explains why."""


@dataclass
class DropInfo:
    """The content of a drag as seen by the list it is dropped on."""

    flags: DropFlags = DropFlags.NONE
    shas: list[str] = field(default_factory=list)
    source_repo: str = ""
    source_ref: str = ""
    source_ref_type: RefType = RefType.NONE
    action: DropAction = DropAction.PATCH

    def rebase_args(self, target_sha: str) -> tuple[str, str, str]:
        """``(from, to, onto)`` for rebasing the dragged revisions onto ``target_sha``.

        A single dragged local branch is rebased whole, so ``from`` is empty.
        """
        if self.source_ref_type == RefType.BRANCH and len(self.shas) == 1:
            return "", self.source_ref, target_sha
        if not self.shas:
            raise ValueError("no revisions to rebase")
        return self.shas[-1], self.source_ref or self.shas[0], target_sha


@dataclass(frozen=True)
class DropDecision:
    """Outcome of hovering a drag over a target."""

    action: DropAction
    accepted: int
    status_message: str

    @property
    def drop_action(self) -> int:
        """The toolkit drop action for :attr:`action`."""
        return self.action & 0x7


def action_name(action: DropAction) -> str:
    """Gerund describing ``action``."""
    return _NAMES[DropAction(action)]


def _real_shas(shas: Sequence[str]) -> list[str]:
    return [sha for sha in shas if sha != ZERO_SHA]


def drag_text(shas: Sequence[str], contiguous: bool, ref_name: str) -> str | None:
    """Plain-text range description of a drag, or None for a non-contiguous one.

    ``shas`` are ordered from newest to oldest.
    """
    revs = _real_shas(shas)
    if not contiguous or not revs:
        return None
    text = f"{revs[-1]}.." if len(revs) > 1 else ""
    return text + (ref_name or revs[0])


def compose_drag_mime(
    shas: Sequence[str], current_dir: str, contiguous: bool, ref_name: str
) -> bytes:
    """Payload of a drag of ``shas`` from the repository at ``current_dir``."""
    revs = _real_shas(shas)
    if not revs:
        raise ValueError("no committed revisions to drag")
    header = f"{'RANGE' if contiguous else 'LIST'}@{current_dir}\n"
    if contiguous and ref_name:
        revs[0] += " " + ref_name
    return (header + "\n".join(revs)).encode("utf-8")


def parse_drag_mime(
    data: bytes | str,
    current_dir: str,
    repo_exists: Callable[[str], bool],
    clean_workdir: bool,
) -> DropInfo:
    """Read a drag payload entering the list of the repository at ``current_dir``.

    Raises :class:`DropRejected` when the source repository is gone or the
    working directory is dirty (moving a single ref within the same
    repository is still allowed then).
    """
    text = data.decode("utf-8") if isinstance(data, bytes) else data
    header, _, body = text.partition("\n")
    shas = [line for line in body.split("\n") if line]
    if not shas:
        raise DropRejected("No revisions in drag data")

    first, _, source_ref = shas[0].partition(" ")
    shas[0] = first
    info = DropInfo(
        flags=DropFlags.REV_LIST,
        shas=shas,
        source_ref=source_ref,
        source_ref_type=ref_type_from_name(source_ref),
        source_repo=header.partition("@")[2],
    )
    if info.source_repo != current_dir:
        if not repo_exists(info.source_repo):
            raise DropRejected("Remote repository missing: " + info.source_repo)
    else:
        info.flags |= DropFlags.SAME_REPO

    moving_ref = (
        info.source_ref_type != RefType.NONE
        and len(info.shas) == 1
        and DropFlags.SAME_REPO in info.flags
    )
    if not clean_workdir and not moving_ref:
        raise DropRejected("Drag-n-drop rejected: First clean your working dir!")

    if header.startswith("RANGE"):
        info.flags |= DropFlags.REV_RANGE
    return info


def decide_drop(
    info: DropInfo,
    target_ref: str,
    target_sha: str,
    on_log_column: bool,
    modifier: Modifier = Modifier.NONE,
) -> DropDecision:
    """Choose the action for dropping ``info`` on a revision and describe it.

    The chosen action is also stored in ``info.action``. Raises
    :class:`DropRejected` when dropping onto one of the dragged revisions.
    """
    target_ref_type = ref_type_from_name(target_ref)
    accepted = int(DropAction.PATCH)
    default = DropAction.PATCH

    if (
        DropFlags.SAME_REPO in info.flags
        and DropFlags.REV_LIST in info.flags
        and on_log_column
    ):
        if target_sha in info.shas:
            raise DropRejected("Cannot drop onto current selection.")
        if DropFlags.REV_RANGE in info.flags:
            accepted |= DropAction.REBASE
            default = DropAction.REBASE
        if target_ref_type == RefType.BRANCH:
            accepted |= DropAction.MERGE
            default = DropAction.MERGE
        if (
            len(info.shas) == 1
            and info.source_ref_type != RefType.NONE
            and target_sha != ZERO_SHA
        ):
            accepted |= DropAction.MOVE_REF
            default = DropAction.MOVE_REF

    action = _FORCED.get(modifier, default)
    message = ""
    if action & accepted == 0:
        message = action_name(action) + " not allowed. "
        message = message[0].upper() + message[1:]
        action = default

    if action == DropAction.PATCH:
        message += "Applying patches"
    elif action == DropAction.REBASE:
        source = (
            info.source_ref
            if info.source_ref_type == RefType.BRANCH and len(info.shas) == 1
            else "selection"
        )
        onto = target_ref if target_ref_type == RefType.BRANCH else target_sha
        message += f"Rebasing {source} onto {onto}"
    elif action == DropAction.MOVE_REF:
        message += "Moving " + info.source_ref
    else:
        message += "Merging selected branches into " + target_ref

    info.action = action
    return DropDecision(action, accepted, message)