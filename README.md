# revgraph

revgraph is the model behind a git history viewer. It is written in plain Python and uses only the standard library. It computes the glyphs of the history graph and handles reference names. It also builds the command lines a viewer would run, decides what a drag and drop means, and keeps track of small pieces of session state.

## Modules

- `revgraph.lanes`: `Lanes` walks revisions from the newest to the oldest. For each row of the graph it works out which glyph (`LaneType`) belongs in each column. The helpers `is_head`, `is_tail`, `is_join`, `is_boundary`, `is_active` and `is_free_lane` classify lane types.
- `revgraph.glyphs`: `paint_lane` describes the arc, the vertical and horizontal `Segment`s and the centre `Symbol` of one lane as a `LaneCell`. `layout_row` places a whole row of lanes. Also in this module:
  - `lane_width` gives the width of a lane.
  - `blend` mixes two RGB colours.
  - `active_lane_index` finds the lane that holds the revision of the row.
- `revgraph.refs`: `RefType` and `RefName` describe reference names. The module also provides these functions:
  - `ref_type_from_name` classifies a reference name.
  - `qualified_ref_name` gives the full name of a reference.
  - `tag_mark_label` and `tag_mark_color` give the text and the colour of a reference mark.
  - `iter_ref_names` yields the references of a revision in display order.
  - `ref_at_offset` finds the reference under a horizontal position.
- `revgraph.refops`: builds checkout commands with `checkout_command` and `CheckoutMode`. It lists the names to offer for checkout (`checkout_names`, `strip_names`) and for deletion (`delete_candidates`). It groups references by origin (`group_refs`) and builds the commands that delete them (`delete_ref_commands`).
- `revgraph.gitcmds`: builds command lines for rebasing (`rebase_commands`), for moving a reference (`move_ref_command`) and for creating a branch or a tag (`branch_or_tag_command`). `import_status_message` gives the status line shown while revisions are imported.
- `revgraph.extcmds`: builds argument lists for an external diff viewer (`external_diff_args`) and an external editor (`external_editor_args`). It also names the temporary files for a diff (`diff_temp_name`, `is_empty_sha`) and prepares custom action commands (`custom_action_command`).
- `revgraph.args`: `split_arg_list` splits a command line on spaces and keeps quoted sections together. `restore_spaces` is the step that puts the spaces back inside quotes. `SeparatorError` is raised when no free separator character is left.
- `revgraph.filters`: `RevisionFilter` filters or highlights `Revision`s. It matches a case-insensitive wildcard (`wildcard_to_regex`) against the field chosen by `FilterColumn`, or it matches against a set of shas or an external matcher.
- `revgraph.dragdrop`: covers drag and drop of revisions.
  - `compose_drag_mime` and `parse_drag_mime` write and read the drag payload. `drag_text` gives its plain-text range description.
  - `decide_drop` picks a `DropAction` (patch, rebase, merge or move-ref) and returns a `DropDecision` with a status message.
  - `DropInfo.rebase_args` gives the arguments for a rebase.
  - `DropRejected` explains why a drag or drop was refused.
- `revgraph.session`:
  - `update_recent_repos`, `recent_menu_labels` and `parse_recent_action` handle the list of recent repositories.
  - `parse_view_file` reads the command-line option that names a file to view.
  - `startup_dir` and `window_title` cover startup and the window title.
  - `ref_menu_tree` builds nested ref submenus.
- `revgraph.navigation`: covers navigation and the enabled state of actions.
  - `next_tab_index` handles tab cycling.
  - `scroll_amount` gives scroll distances.
  - `adjusted_font_size` changes the font size.
  - `file_double_click` handles a double-click on a file, using `DoubleClickAction`.
  - `context_actions` works out which actions are enabled and returns a `ContextActions`.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Example: computing graph lanes

```python
from revgraph.lanes import Lanes, LaneType

lanes = Lanes()
lanes.init("c3")                  # the newest commit is expected in lane 0
lanes.snapshot()                  # (LaneType.BRANCH,)
# For each revision, call is_fork / set_fork / set_merge / change_active_lane
# and the after_* methods, then take the row of glyphs with snapshot().
```

## Example: splitting a command line

```python
from revgraph.args import split_arg_list

split_arg_list('git log "some thing" v=\'some value\'', "$")
# ['git', 'log', 'some thing', "v='some value'"]
```

The second argument is the quote character that marks arguments which contain quoted text. It is removed from the result.

## What it does not do

- It has no user interface, and it draws no pixels. The glyph functions return geometry for a renderer to draw.
- It runs no programs. Every command is returned as a string or an argument list, and the caller decides how to run it.
- It reads no repository and stores no settings. Revisions, reference names, recent repositories and option values all come from the caller.
- It has no command-line entry point.
- It has no module that maps the search box modes to filter columns. A caller builds a `RevisionFilter` with the `FilterColumn` it needs.

## Running the tests

```
pytest
```