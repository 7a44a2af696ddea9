# kitree

A file-tree explorer widget that draws into a character-cell buffer, the kind a
terminal user interface paints to the screen. The explorer holds a set of paths,
builds a tree from them with directories before files, and keeps selection,
expansion and scroll state in a separate object, so keyboard and mouse handling
stay apart from drawing.

## Installation

```
pip install kitree
```

Python 3.10 or later is required. Character widths come from `wcwidth`, so wide
characters take up the right number of cells.

## Building blocks

- `kitree.canvas`: `Position`, `Rect` (with `contains`), `Modifier`, `Style` (with
  `patch`) and `Buffer`, a grid of cells. A buffer is made with `Buffer.empty(area)`
  or `Buffer.with_lines(lines)`, written with `set_stringn` and `set_style`, and read
  back with `lines()` and `cell(x, y)`. Two buffers compare equal when their areas,
  symbols and styles match. `Block` draws an optional border (plain or rounded) and a
  title; `Block.inner` gives the area left inside it. `Scrollbar` draws a vertical bar
  in the rightmost column of an area.
- `kitree.item`: `TreeItem`, a node with an identifier, display text, children and a
  style. `TreeItem.leaf` makes one without children; `child(index)` returns a child or
  `None`; `add_child` appends one; `height()` is the number of text lines. Sibling
  identifiers must be unique, and duplicates raise `DuplicateIdentifierError` (a
  `ValueError`).
- `kitree.flatten`: `flatten(open_identifiers, items)` turns nested items and a set of
  open identifier paths into the visible rows in display order, each a `Flattened`
  holding the identifier path and the item, with `depth()` starting at 0.
- `kitree.tree`: `Tree`, which renders its top-level items into a buffer with
  `render(area, buf, state)`. Its fields set the optional `block` and `scrollbar`, the
  base `style`, the `highlight_style` (reversed by default), a `highlight_symbol`, and
  the symbols in front of closed (`▶ `), open (`▼ `) and childless nodes. Duplicate
  top-level identifiers raise `DuplicateIdentifierError`.
- `kitree.state`: `ExplorerState`, which holds the selection, the expanded nodes, the
  scroll offset and what was drawn where on the last render.
- `kitree.paths`: `SortablePath`, a path that sorts directories before files and
  otherwise by path. A path that does not exist counts as a file.
- `kitree.explorer`: `Explorer`, which builds a tree from the paths below a root and
  draws it inside a rounded, italic border with the title on top;
  `build_directory_tree` builds the item for one directory from a set of paths.

## Example

```python
from pathlib import Path

from kitree.canvas import Buffer, Rect
from kitree.explorer import Explorer
from kitree.paths import SortablePath
from kitree.state import ExplorerState

root = SortablePath(Path("."))
explorer = Explorer("Files", root)
explorer.add_entries(SortablePath(p) for p in Path(".").rglob("*"))

state = ExplorerState()
area = Rect(0, 0, 40, 20)
buf = Buffer.empty(area)

explorer.render(area, buf, state)
state.select_first()
state.toggle_selected()
explorer.render(area, buf, state)

print("\n".join(buf.lines()))
```

`add_entry` records one path without rebuilding; `add_entries` records several and
calls `rebuild_tree`. Paths given as other types are converted to the type of the
root path. The root itself is not shown; its direct entries form the top level.

## Driving the state

Identifiers in an `ExplorerState` are tuples: the identifiers from the top level down
to the node. Each method below returns whether anything changed.

- `select(path)`, `select_next()`, `select_prev()`, `select_first()` and
  `select_last()` move through the rows found on the last render.
- `expand(path)`, `collapse(path)`, `toggle(path)`, `toggle_selected()` and
  `collapse_all()` open and close nodes.
- `scroll_up(n)` and `scroll_down(n)` move the offset; `scroll_selected_into_view()`
  makes the next render bring the selection into view.
- `rendered_at(position)` and `click_at(position)` map a `Position` back to the row
  drawn there, for mouse support; clicking the selected row toggles it.

`ExplorerState.flatten(items)` returns every row viewable with the current expansion.

## What it does not do

The package only draws into a `Buffer`. It does not open a terminal, paint the buffer
to the screen, read keys or mouse events, or run an event loop; a program using it
supplies those and calls the state methods in response to input. It also does not
scan the filesystem itself: the explorer shows exactly the paths it is given.

## Running the tests

```
pip install -e ".[test]"
pytest
```