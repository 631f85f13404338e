"""Split a command line into arguments, honouring quoted sections."""

from __future__ import annotations

SEPARATOR_CANDIDATES = "#%&!?"
_QUOTES = ('"', "'")


class SeparatorError(ValueError):
    """Raised when no separator character is free to split a quoted command."""


def _check_quote_char(quote_char: str) -> None:
    if len(quote_char) != 1:
        raise ValueError(f"quote character must be a single character, got {quote_char!r}")


def restore_spaces(cmd: str, sep_char: str, quote_char: str) -> str:
    """Turn ``sep_char`` back into spaces inside quoted sections of ``cmd``.

    A quote opens a section only when it occurs an even number of times in
    ``cmd``; the section ends at the next occurrence of the same quote, so
    other quote kinds may nest inside it.
    """
    _check_quote_char(quote_char)
    openers = (quote_char, *_QUOTES)
    chars = list(cmd)
    active: str | None = None
    for i, c in enumerate(chars):
        if active is None:
            if c in openers and cmd.count(c) % 2 == 0:
                active = c
            continue
        if c == active:
            active = None
        elif c == sep_char:
            chars[i] = " "
    return "".join(chars)


def _strip_quotes(arg: str) -> str:
    if arg[:1] in _QUOTES and arg[-1:] == arg[:1]:
        return arg[1:-1]
    return arg


def split_arg_list(cmd: str, quote_char: str) -> list[str]:
    """Split ``cmd`` on spaces, keeping quoted text together.

    ``quote_char`` delimits arguments that themselves contain quoted text;
    it is removed from the result, as are quotes enclosing a whole argument.
    Raises :class:`SeparatorError` when every separator candidate already
    occurs in a command that needs quote handling.
    """
    _check_quote_char(quote_char)
    if not any(q in cmd for q in (quote_char, *_QUOTES)):
        return [part for part in cmd.split(" ") if part]

    sep_char = next((c for c in SEPARATOR_CANDIDATES if c not in cmd), None)
    if sep_char is None:
        raise SeparatorError(f"no unique separator found for command {cmd!r}")

    new_cmd = restore_spaces(cmd.replace(" ", sep_char), sep_char, quote_char)
    new_cmd = new_cmd.replace(quote_char, "")
    return [_strip_quotes(part) for part in new_cmd.split(sep_char) if part]