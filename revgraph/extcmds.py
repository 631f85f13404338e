"""Build argument lists for external diff viewers, editors and custom actions."""

from __future__ import annotations

import re

_EMPTY_SHA = re.compile(r"0*")
CMD_LINE_TOKEN = " %lineedit:cmdline args%"


def is_empty_sha(sha: str) -> bool:
    """True for an empty string or one made only of zeros."""
    return _EMPTY_SHA.fullmatch(sha) is not None


def diff_temp_name(cur_dir: str, sha: str, file_name: str) -> str:
    """Path of the file to hand to the diff viewer for ``file_name`` at ``sha``.

    The working copy is used for an empty sha; otherwise a temporary file in
    ``cur_dir`` named after the first six characters of the sha.
    """
    if is_empty_sha(sha):
        return f"{cur_dir}/{file_name}"
    base = file_name.rsplit("/", 1)[-1]
    return f"{cur_dir}/{sha[:6]}_{base}"


def external_diff_args(command: str, new_file: str, old_file: str) -> list[str]:
    """Arguments for the diff viewer; ``%1`` is the old file, ``%2`` the new one.

    Placeholders missing from ``command`` are appended at the end.
    """
    if "%1" not in command:
        command += " %1"
    if "%2" not in command:
        command += " %2"
    return [
        arg.replace("%1", old_file).replace("%2", new_file)
        for arg in command.split(" ")
    ]


def external_editor_args(command: str, file_name: str) -> list[str]:
    """Arguments for the editor; ``%1`` is the file, appended when missing."""
    if "%1" not in command:
        command += " %1"
    return [arg.replace("%1", file_name) for arg in command.split(" ")]


def custom_action_command(command: str, add_cmd_line: bool) -> str:
    """Trim a custom action command, optionally adding a command-line prompt.

    The prompt token goes at the end of the first line.
    """
    cmd = command.strip()
    if add_cmd_line:
        pos = cmd.find("\n")
        if pos < 0:
            pos = len(cmd)
        cmd = cmd[:pos] + CMD_LINE_TOKEN + cmd[pos:]
    return cmd