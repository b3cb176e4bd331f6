# revgraph

This package holds building blocks for a git history viewer. It depends only on
the standard library.

- `revgraph.lanes`: computes the history graph one revision (row) at a time.
  `Lanes` tracks the lanes (columns). `Lanes.lanes()` returns the list of
  `LaneType` glyph codes for the current row.
- `revgraph.glyphs`: turns a lane type into drawing primitives (`lane_glyph`,
  which returns `GlyphPart` items). It also holds the lane colour palette
  (`LANE_COLOR_NAMES`, `lane_color_index`) and colour mixing (`Color`, `blend`).
  `active_lane` and `lane_width` are helpers for laying out a row.
- `revgraph.refs`: works with ref names.
  - `RefType` and `ref_type_from_name` classify a ref name.
  - `qualified_ref_name` builds the full name of a ref.
  - `iter_ref_labels` puts the labels shown beside a revision in order.
  - `tag_mark_style` gives the style of a label.
  - `ref_name_at` finds the label under an x position.
- `revgraph.rowfilter`: filters and highlights history rows with
  case-insensitive shell-style wildcards (`wildcard_to_regex`, `RowFilter`,
  `FilterColumn`, `RevText`).
- `revgraph.dragdrop`: handles dragging revisions.
  - `encode_revs` and `parse_revs` write and read the payload for the
    `application/x-qgit-revs` mime type.
  - `drag_text` builds the plain-text range.
  - `evaluate_drop` picks the drop action (patch, rebase, merge, move ref) and
    the status message.
- `revgraph.gitcmds`: builds git command lines for rebase, ref moving, checkout,
  branch and tag creation, and ref deletion.
- `revgraph.extcmd`: builds argument lists for an external diff viewer or
  editor. It also handles the `--view-file` start-up option and the window
  title.
- `revgraph.cmdline`: splits a command string into arguments and keeps quoted
  sections together (`split_arg_list`). It also decides whether a finished
  command failed (`is_error_exit`).
- `revgraph.navigation`: moves to the next highlighted row, child or parent. It
  also resolves clicks on a graph lane and lays out a drag image.
- `revgraph.tabs`: tab cycling, scrolling steps, font size changes and keyboard
  shortcut bindings.
- `revgraph.recent`: the recent-repository list and its menu entries, nested
  ref submenus, and custom action commands.
- `revgraph.context`: which actions are enabled for a selection
  (`context_actions`, `ActionState`), and the contents of the revision and file
  popup menus.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example: computing graph rows

```python
from revgraph.lanes import Lanes

history = [            # (sha, parents), newest first
    ("c2", ["c1"]),
    ("c1", []),
]

lanes = Lanes()
lanes.init(history[0][0])
for sha, parents in history:
    is_fork, is_discontinuity = lanes.is_fork(sha)
    if is_discontinuity:
        lanes.change_active_lane(sha)
    if is_fork:
        lanes.set_fork(sha)
    if len(parents) > 1:
        lanes.set_merge(parents)
    if not parents:
        lanes.set_initial()

    print(sha, [t.name for t in lanes.lanes()])

    lanes.next_parent(parents[0] if parents else "")
    if len(parents) > 1:
        lanes.after_merge()
    if is_fork:
        lanes.after_fork()
    if lanes.is_branch():
        lanes.after_branch()

# c2 ['BRANCH']
# c1 ['INITIAL']
```

`is_fork` returns a pair. The first value tells whether the sha is expected in
more than one lane. The second tells whether it is expected somewhere other
than the active lane.

## Example: splitting a command line

```python
from revgraph.cmdline import split_arg_list

split_arg_list("git log --grep='some value' HEAD", "\x01")
# ['git', 'log', "--grep='some value'", 'HEAD']
```

## What this package does not do

This package is a library only. It has no window or widgets, and it installs no
command. It never runs git or any other program, and it does not start an
external diff viewer or editor. Modules such as `gitcmds`, `extcmd` and
`cmdline` only build the commands and argument lists; running them is up to
the caller. The package also does not read repositories, and it does not store
settings or the recent-repository list.