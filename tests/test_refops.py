import pytest

from revgraph.refops import (
    CheckoutMode,
    checkout_command,
    checkout_names,
    delete_candidates,
    delete_ref_commands,
    group_refs,
    strip_names,
)


def test_checkout_existing():
    cmd = checkout_command("abc123", "", CheckoutMode.EXISTING)
    assert cmd.split() == ["git", "checkout", "-q", "abc123"]


def test_checkout_create_and_reset():
    assert checkout_command("abc", "feat", CheckoutMode.CREATE).split() == [
        "git", "checkout", "-q", "-b", "feat", "abc",
    ]
    assert checkout_command("abc", "feat", CheckoutMode.RESET).split()[3:] == [
        "-B", "feat", "abc",
    ]


def test_checkout_requires_branch():
    with pytest.raises(ValueError):
        checkout_command("abc", "", CheckoutMode.CREATE)


def test_checkout_names():
    names = checkout_names(["main"], ["origin/main", "up/feat/x", "bare"])
    assert names == ["main", "main", "feat/x"]


def test_group_refs():
    groups = group_refs(["main", "tags/v1", "remotes/origin/feat/x", "dev"])
    assert groups == {
        "": ["main", "dev"],
        "origin": ["feat/x"],
        "tags/": ["v1"],
    }
    assert list(groups) == sorted(groups)


def test_strip_names():
    assert strip_names(["origin/main", "tags/v1", "plain"]) == ["main", "v1", "plain"]


def test_delete_candidates_round_trip():
    all_names = delete_candidates(["main"], ["origin/dev"], ["v1"])
    assert all_names == ["main", "remotes/origin/dev", "tags/v1"]
    groups = group_refs(all_names)
    assert groups[""] == ["main"]
    assert groups["origin"] == ["dev"]
    assert groups["tags/"] == ["v1"]


def test_delete_ref_commands():
    commands = delete_ref_commands({"": ["a", "b"], "tags/": ["v1"], "origin": ["x", "y"]})
    assert commands == [
        "git branch -D a b",
        "git push -q origin :x :y",
        "git tag -d v1",
    ]


def test_delete_ref_commands_empty():
    assert delete_ref_commands({}) == []