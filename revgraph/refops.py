"""Commands and name lists for checking out, creating and deleting references."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum


class CheckoutMode(Enum):
    """How a checkout treats the requested local branch name."""

    EXISTING = "existing"
    CREATE = "create"
    RESET = "reset"


def checkout_command(rev: str, branch: str, mode: CheckoutMode) -> str:
    """Build the checkout command for ``rev``.

    EXISTING checks ``rev`` out as is; CREATE makes ``branch`` at ``rev``;
    RESET moves an existing ``branch`` to ``rev``.
    """
    parts = ["git", "checkout", "-q"]
    if mode is CheckoutMode.CREATE or mode is CheckoutMode.RESET:
        if not branch:
            raise ValueError("a branch name is needed to create or reset a branch")
        parts += ["-b" if mode is CheckoutMode.CREATE else "-B", branch]
    parts.append(rev)
    return " ".join(parts)


def checkout_names(
    local_branches: Iterable[str], remote_branches: Iterable[str]
) -> list[str]:
    """Branch names offered for checkout; remotes lose their leading remote name."""
    names = list(local_branches)
    for remote in remote_branches:
        _, sep, rest = remote.partition("/")
        if sep:
            names.append(rest)
    return names


def _group_of(ref: str) -> tuple[str, str]:
    if ref.startswith("tags/"):
        return "tags/", ref[len("tags/"):]
    if ref.startswith("remotes/"):
        parts = ref.split("/")
        return parts[1], "/".join(parts[2:])
    return "", ref


def group_refs(names: Iterable[str]) -> dict[str, list[str]]:
    """Group qualified ref names by origin, keyed and ordered by group name.

    Local branches go under ``""``, tags under ``"tags/"`` and remote
    branches under their remote's name.
    """
    groups: dict[str, list[str]] = {}
    for ref in names:
        group, name = _group_of(ref)
        groups.setdefault(group, []).append(name)
    return dict(sorted(groups.items()))


def strip_names(names: Iterable[str]) -> list[str]:
    """Keep only the last path component of each name."""
    return [name.rsplit("/", 1)[-1] for name in names]


def delete_candidates(
    local_branches: Iterable[str],
    remote_branches: Iterable[str],
    tags: Iterable[str],
) -> list[str]:
    """Qualified names of every reference that could be deleted."""
    return [
        *local_branches,
        *(f"remotes/{name}" for name in remote_branches),
        *(f"tags/{name}" for name in tags),
    ]


def delete_ref_commands(groups: Mapping[str, Sequence[str]]) -> list[str]:
    """Commands removing the grouped references, one per group."""
    commands = []
    for group, names in sorted(groups.items()):
        if group == "":
            commands.append("git branch -D " + " ".join(names))
        elif group == "tags/":
            commands.append("git tag -d " + " ".join(names))
        else:
            commands.append(f"git push -q {group} :" + " :".join(names))
    return commands