import re

import pytest

from revgraph.filters import (
    FilterColumn,
    Revision,
    RevisionFilter,
    wildcard_to_regex,
)

REVS = [
    Revision("aaa111", "Fix parser bug", "Alice", "Fix parser bug\n\nLonger text about lexer"),
    Revision("bbb222", "Add feature", "Bob", "Add feature\n\nmentions parser"),
    Revision("ccc333", "Update docs", "alice", "Update docs"),
]


@pytest.mark.parametrize(
    "pattern, text, expected",
    [
        ("a*c", "xxabbcx", True),
        ("a?c", "abc", True),
        ("a?c", "ac", False),
        ("[abc]x", "bx", True),
        ("[!abc]x", "bx", False),
        ("[!abc]x", "dx", True),
        ("a.b", "axb", False),
        ("a.b", "a.b", True),
        ("[oops", "[oops", True),
        ("(x)", "(x)", True),
    ],
)
def test_wildcard_to_regex(pattern, text, expected):
    assert (re.search(wildcard_to_regex(pattern), text) is not None) is expected


def test_short_log_filter_is_case_insensitive_substring():
    flt = RevisionFilter("PARSER", FilterColumn.LOG)
    assert [r.sha for r in flt.apply(REVS)] == ["aaa111"]


def test_author_filter():
    flt = RevisionFilter("alice", FilterColumn.AUTHOR)
    assert [r.sha for r in flt.apply(REVS)] == ["aaa111", "ccc333"]


def test_long_log_filter():
    flt = RevisionFilter("parser", FilterColumn.LOG_MSG)
    assert [r.sha for r in flt.apply(REVS)] == ["aaa111", "bbb222"]


def test_commit_filter_with_wildcard():
    flt = RevisionFilter("b*2", FilterColumn.COMMIT)
    assert [r.sha for r in flt.apply(REVS)] == ["bbb222"]


def test_sha_map_filter():
    flt = RevisionFilter("ignored", FilterColumn.SHA_MAP, sha_set={"ccc333", "aaa111"})
    assert [r.sha for r in flt.apply(REVS)] == ["aaa111", "ccc333"]


def test_external_filter():
    flt = RevisionFilter("x", FilterColumn.EXTERNAL, external=lambda sha: sha.startswith("c"))
    assert [r.sha for r in flt.apply(REVS)] == ["ccc333"]


def test_external_column_needs_matcher():
    with pytest.raises(ValueError):
        RevisionFilter("x", FilterColumn.EXTERNAL)


def test_highlight_keeps_all_rows_and_marks_matches():
    flt = RevisionFilter("docs", FilterColumn.LOG, highlight=True)
    assert flt.apply(REVS) == REVS
    assert [flt.is_highlighted(r) for r in REVS] == [False, False, True]
    assert all(flt.accepts(r) for r in REVS)


def test_disabled_filter_shows_everything_and_highlights_nothing():
    flt = RevisionFilter("docs", FilterColumn.LOG, enabled=False, highlight=True)
    assert flt.apply(REVS) == REVS
    assert not any(flt.is_highlighted(r) for r in REVS)


def test_filtering_does_not_highlight():
    flt = RevisionFilter("docs", FilterColumn.LOG)
    assert flt.matches(REVS[2])
    assert not flt.is_highlighted(REVS[2])


def test_apply_preserves_order_and_is_subset():
    flt = RevisionFilter("*", FilterColumn.AUTHOR)
    shown = flt.apply(REVS)
    assert shown == REVS