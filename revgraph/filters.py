"""Filtering and highlighting of revisions by a wildcard pattern or a set of shas."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum


class FilterColumn(Enum):
    """What part of a revision a filter looks at."""

    LOG = "log"
    AUTHOR = "author"
    LOG_MSG = "log_msg"
    COMMIT = "commit"
    SHA_MAP = "sha_map"
    EXTERNAL = "external"


@dataclass(frozen=True)
class Revision:
    """The searchable fields of one revision."""

    sha: str
    short_log: str = ""
    author: str = ""
    long_log: str = ""


def wildcard_to_regex(pattern: str) -> str:
    """Translate a shell-style wildcard into a regular expression.

    ``*`` matches any run of characters, ``?`` any single character and
    ``[...]`` a set of characters, negated by a leading ``!`` or ``^``.
    An unterminated ``[`` is taken literally.
    """
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "*":
            out.append(".*")
        elif c == "?":
            out.append(".")
        elif c == "[":
            j = i + 1
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                out.append(re.escape(c))
            else:
                body = pattern[i + 1:end]
                negated = body[:1] in ("!", "^")
                if negated:
                    body = body[1:]
                body = body.replace("\\", "\\\\").replace("[", "\\[")
                out.append("[" + ("^" if negated else "") + body + "]")
                i = end + 1
                continue
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


@dataclass
class RevisionFilter:
    """A filter over the revision list.

    When ``enabled`` and not ``highlight``, only matching revisions are
    shown; with ``highlight`` every revision is shown and matching ones are
    highlighted. Matching is a case-insensitive wildcard search anywhere in
    the selected field; the SHA_MAP column matches the shas in ``sha_set``
    and the EXTERNAL column asks ``external``.
    """

    pattern: str = ""
    column: FilterColumn = FilterColumn.LOG
    enabled: bool = True
    highlight: bool = False
    sha_set: frozenset[str] = field(default_factory=frozenset)
    external: Callable[[str], bool] | None = None

    def __post_init__(self) -> None:
        self.sha_set = frozenset(self.sha_set)
        self._regex = re.compile(wildcard_to_regex(self.pattern), re.IGNORECASE)
        if self.column is FilterColumn.EXTERNAL and self.external is None:
            raise ValueError("an external matcher is needed for the EXTERNAL column")

    @property
    def highlighting(self) -> bool:
        """True when matches are highlighted rather than filtered."""
        return self.highlight and self.enabled

    def _target(self, revision: Revision) -> str:
        if self.column is FilterColumn.LOG:
            return revision.short_log
        if self.column is FilterColumn.AUTHOR:
            return revision.author
        if self.column is FilterColumn.LOG_MSG:
            return revision.long_log
        if self.column is FilterColumn.COMMIT:
            return revision.sha
        return ""

    def matches(self, revision: Revision) -> bool:
        """True when ``revision`` satisfies the filter."""
        if self.column is FilterColumn.SHA_MAP:
            return revision.sha in self.sha_set
        if self.column is FilterColumn.EXTERNAL:
            assert self.external is not None
            return bool(self.external(revision.sha))
        return self._regex.search(self._target(revision)) is not None

    def is_highlighted(self, revision: Revision) -> bool:
        """True when ``revision`` is drawn highlighted."""
        return self.highlighting and self.matches(revision)

    def accepts(self, revision: Revision) -> bool:
        """True when ``revision`` stays visible in a filtered list."""
        return self.highlighting or self.matches(revision)

    def apply(self, revisions: Iterable[Revision]) -> list[Revision]:
        """The revisions shown with this filter, in their original order.

        A disabled or highlighting filter shows every revision.
        """
        if not self.enabled or self.highlighting:
            return list(revisions)
        return [rev for rev in revisions if self.accepts(rev)]