"""Command lines for rebasing, moving references and creating branches or tags."""

from __future__ import annotations


def rebase_commands(from_sha: str, to: str, onto: str) -> list[str]:
    """Commands rebasing onto ``onto``.

    With no ``from_sha`` the branch ``to`` is checked out and rebased whole;
    otherwise the revisions ``from_sha``..``to`` are moved.
    """
    if not from_sha:
        return [f"git checkout -q {to}", f"git rebase {onto}"]
    return [f"git rebase --onto {onto} {from_sha}^ {to}"]


def move_ref_command(target: str, to_sha: str, current_branch: str) -> str:
    """Command moving the qualified reference ``target`` to ``to_sha``."""
    if target.startswith("remotes/"):
        parts = target.split("/")
        remote = parts[1]
        name = "/".join(parts[2:])
        return f"git push -q {remote} {to_sha}:{name}"
    if target.startswith("tags/"):
        return f"git tag -f {target[len('tags/'):]} {to_sha}"
    if not target:
        raise ValueError("no reference to move")
    if target == current_branch:
        return f"git checkout -q -B {target} {to_sha}"
    return f"git branch -f {target} {to_sha}"


def branch_or_tag_command(
    ref: str, sha: str, is_tag: bool, message: str = "", force: bool = False
) -> str:
    """Command creating branch or tag ``ref`` at ``sha``.

    A tag with a ``message`` is annotated; ``force`` resets an existing ref.
    """
    if is_tag:
        cmd = "git tag "
        if message:
            cmd += f'-m "{message}" '
    else:
        cmd = "git branch "
    if force:
        cmd += "-f "
    return cmd + f"{ref} {sha}"


def import_status_message(index: int, total: int, sha: str, failed: bool = False) -> str:
    """Status line shown while importing revision ``index`` of ``total``."""
    verb = "Failed to import" if failed else "Importing"
    return f"{verb} revision {index} of {total}: {sha}"