"""A bordered explorer widget showing a set of filesystem paths as a tree."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union

from kitree.canvas import Block, Buffer, Modifier, Rect, Style
from kitree.item import TreeItem
from kitree.paths import SortablePath
from kitree.state import ExplorerState
from kitree.tree import Tree

PathLike = Union[SortablePath, Path]


def _as_path(path: PathLike) -> Path:
    return Path(os.fspath(path))


def _join(path: PathLike, name: str) -> PathLike:
    if isinstance(path, SortablePath):
        return path.join(name)
    return path / name


def build_directory_tree(
    root_path: PathLike, current_path: PathLike, entries: Iterable[PathLike]
) -> TreeItem:
    """Build the item for ``current_path`` from the entries lying below it.

    Children that have children of their own come first; the rest follow in
    identifier order.
    """
    entries = sorted(entries)
    current = _as_path(current_path)
    children: list[TreeItem] = []
    for path in entries:
        try:
            relative = _as_path(path).relative_to(current)
        except ValueError:
            continue
        if len(relative.parts) != 1:
            continue
        component = relative.parts[0]
        full_path = _join(current_path, component)
        if path.is_dir():
            children.append(build_directory_tree(root_path, full_path, entries))
        else:
            children.append(TreeItem.leaf(full_path, component))

    children.sort(key=lambda child: (0 if child.children else 1, child.identifier))

    display_name = "" if current == _as_path(root_path) else current.name
    return TreeItem(current_path, display_name, children)


@dataclass
class Explorer:
    """A titled, framed tree of the entries lying below ``root_path``."""

    title: str
    root_path: PathLike
    entries: set = field(default_factory=set)
    tree: Tree = field(default_factory=Tree)

    def _coerce(self, path) -> PathLike:
        kind = type(self.root_path)
        return path if isinstance(path, kind) else kind(path)

    def add_entry(self, path) -> None:
        """Record a path without rebuilding the tree."""
        self.entries.add(self._coerce(path))

    def add_entries(self, entries: Iterable) -> None:
        """Record several paths and rebuild the tree."""
        self.entries.update(self._coerce(path) for path in entries)
        self.rebuild_tree()

    def rebuild_tree(self) -> None:
        """Rebuild the tree from the entries; the root itself is not shown."""
        root = _as_path(self.root_path)
        ordered = sorted(self.entries)
        children: list[TreeItem] = []
        for path in ordered:
            as_path = _as_path(path)
            if as_path == root or as_path.parent != root:
                continue
            if path.is_dir():
                children.append(build_directory_tree(self.root_path, path, ordered))
            else:
                if not as_path.name:
                    raise ValueError("Path has no file name")
                children.append(TreeItem.leaf(path, as_path.name))
        self.tree = Tree(children)

    def render(self, area: Rect, buf: Buffer, state: ExplorerState) -> None:
        """Draw the frame with its title and the tree inside it."""
        state.last_area = area
        block = Block(
            title=f" {self.title} ",
            borders=True,
            rounded=True,
            style=Style(add_modifier=Modifier.ITALIC),
        )
        inner_area = block.inner(area)
        block.render(area, buf)
        self.tree.render(inner_area, buf, state)