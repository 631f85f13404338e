from revgraph.session import (
    parse_recent_action,
    parse_view_file,
    recent_menu_labels,
    ref_menu_tree,
    startup_dir,
    update_recent_repos,
    window_title,
)


def test_recent_new_entry_goes_first():
    result = update_recent_repos(["/a", "/b"], "/c", 8)
    assert result == ["/c", "/a", "/b"]


def test_recent_existing_entry_moves_to_front():
    result = update_recent_repos(["/a", "/b", "/c"], "/b", 8)
    assert result == ["/b", "/a", "/c"]
    assert len(result) == len(set(result))


def test_recent_empty_entry_keeps_order():
    assert update_recent_repos(["/a", "/b"], "", 8) == ["/a", "/b"]


def test_recent_is_capped():
    recents = [f"/r{i}" for i in range(10)]
    result = update_recent_repos(recents, "/new", 4)
    assert len(result) == 4
    assert result[0] == "/new"
    assert result[1:] == recents[:3]


def test_menu_labels_and_data_round_trip():
    paths = ["/home/x/repo", "/tmp/other repo"]
    labels = recent_menu_labels(paths)
    assert labels[0][0] == "1 /home/x/repo"
    assert labels[1][0].startswith("2 ")
    assert [parse_recent_action(data) for _, data in labels] == paths


def test_parse_recent_rejects_other_data():
    assert parse_recent_action("Ref") is None
    assert parse_recent_action("RECENT") is None


def test_view_file_separate_argument():
    assert parse_view_file(["--view-file", "src/main.c"]) == "src/main.c"


def test_view_file_equals_form():
    assert parse_view_file(["-v", "--view-file=README"]) == "README"


def test_view_file_missing():
    assert parse_view_file(["--all", "HEAD"]) is None
    assert parse_view_file(["--view-file"]) is None


def test_startup_uses_recent_when_allowed():
    assert startup_dir(["/r"], True, lambda p: True, "", "/cwd") == "/r"


def test_startup_falls_back():
    assert startup_dir(["/r"], True, lambda p: False, "", "/cwd") == "/cwd"
    assert startup_dir(["/r"], False, lambda p: True, "/cd", "/cwd") == "/cd"
    assert startup_dir([], True, lambda p: True, "/cd", "/cwd") == "/cd"


def test_window_title_parts():
    title = window_title("/repo", "main", None)
    assert title.startswith("/repo [main] - ")
    assert "FILTER" not in title
    plain = window_title("/repo", "", None)
    assert "[" not in plain


def test_window_title_with_filter():
    title = window_title("/repo", "", ["src", "doc"])
    assert title.endswith(" - FILTER ON < src doc >")


def test_ref_menu_tree_nests():
    tree = ref_menu_tree(["main", "feature/x", "feature/y", "a/b/c"])
    assert tree["actions"] == ["main"]
    assert tree["menus"]["feature"]["actions"] == ["feature/x", "feature/y"]
    assert tree["menus"]["a"]["menus"]["b"]["actions"] == ["a/b/c"]


def test_ref_menu_tree_custom_separator():
    tree = ref_menu_tree(["origin:dev"], sep=":")
    assert tree["menus"]["origin"]["actions"] == ["origin:dev"]
    assert tree["actions"] == []


def test_ref_menu_tree_skips_empty_parts():
    tree = ref_menu_tree(["x//y"])
    assert list(tree["menus"]) == ["x"]
    assert tree["menus"]["x"]["actions"] == ["x//y"]