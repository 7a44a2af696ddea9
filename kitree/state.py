"""Selection, expansion and scroll state of an explorer tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Iterable

from kitree.canvas import Position, Rect
from kitree.flatten import Flattened, flatten
from kitree.item import TreeItem


@dataclass
class ExplorerState:
    """State kept between renders of a tree.

    Identifiers are tuples holding the path of item identifiers from the top
    level down to the item.
    """

    selected: tuple = ()
    expanded: set = field(default_factory=set)
    open: bool = False
    offset: int = 0
    last_area: Rect = field(default_factory=Rect)
    last_biggest_index: int = 0
    last_identifiers: list = field(default_factory=list)
    last_rendered_identifiers: list = field(default_factory=list)
    ensure_selected_in_view_on_next_render: bool = False

    def flatten(self, items: Iterable[TreeItem]) -> list[Flattened]:
        """Return all items viewable (including by scrolling) with this state."""
        return flatten(self.expanded, items)

    def select(self, identifier: Iterable[Hashable]) -> bool:
        """Select the given identifier; return whether the selection changed."""
        identifier = tuple(identifier)
        self.ensure_selected_in_view_on_next_render = True
        changed = self.selected != identifier
        self.selected = identifier
        return changed

    def expand(self, identifier: Iterable[Hashable]) -> bool:
        """Expand a node; return True when it was collapsed before."""
        identifier = tuple(identifier)
        if not identifier or identifier in self.expanded:
            return False
        self.expanded.add(identifier)
        return True

    def collapse(self, identifier: Iterable[Hashable]) -> bool:
        """Collapse a node; return True when it was expanded before."""
        identifier = tuple(identifier)
        if identifier not in self.expanded:
            return False
        self.expanded.discard(identifier)
        return True

    def toggle(self, identifier: Iterable[Hashable]) -> bool:
        """Flip a node between expanded and collapsed.

        Returns False only for an empty identifier.
        """
        identifier = tuple(identifier)
        if not identifier:
            return False
        if identifier in self.expanded:
            return self.collapse(identifier)
        return self.expand(identifier)

    def toggle_selected(self) -> bool:
        """Flip the selected node; return False only when nothing is selected."""
        if not self.selected:
            return False
        self.ensure_selected_in_view_on_next_render = True
        if self.selected in self.expanded:
            self.expanded.discard(self.selected)
            return True
        return self.expand(self.selected)

    def collapse_all(self) -> bool:
        """Collapse every node; return True when any node was expanded."""
        if not self.expanded:
            return False
        self.expanded.clear()
        return True

    def select_first(self) -> bool:
        """Select the first visible node; return whether the selection changed."""
        return self.select(self.last_identifiers[0] if self.last_identifiers else ())

    def select_last(self) -> bool:
        """Select the last visible node; return whether the selection changed."""
        return self.select(self.last_identifiers[-1] if self.last_identifiers else ())

    def _position_of_selected(self) -> int | None:
        try:
            return self.last_identifiers.index(self.selected)
        except ValueError:
            return None

    def _select_index(self, index: int) -> bool:
        index = min(index, self.last_biggest_index, max(len(self.last_identifiers) - 1, 0))
        if not 0 <= index < len(self.last_identifiers):
            return False
        identifier = self.last_identifiers[index]
        if self.selected == identifier:
            return False
        return self.select(identifier)

    def select_next(self) -> bool:
        """Select the node below the selected one (the first when none is)."""
        if not self.last_identifiers:
            return False
        current = self._position_of_selected()
        return self._select_index(0 if current is None else current + 1)

    def select_prev(self) -> bool:
        """Select the node above the selected one (the last when none is)."""
        if not self.last_identifiers:
            return False
        current = self._position_of_selected()
        index = len(self.last_identifiers) if current is None else max(current - 1, 0)
        return self._select_index(index)

    def rendered_at(self, position: Position) -> tuple | None:
        """Return the identifier drawn at ``position`` on the last render."""
        if not self.last_area.contains(position):
            return None
        for y, identifier in reversed(self.last_rendered_identifiers):
            if position.y >= y:
                return identifier
        return None

    def click_at(self, position: Position) -> bool:
        """Select what was drawn at ``position``, toggling it if already selected.

        Returns False when nothing was drawn there.
        """
        identifier = self.rendered_at(position)
        if identifier is None:
            return False
        if identifier == self.selected:
            return self.toggle_selected()
        return self.select(identifier)

    def scroll_selected_into_view(self) -> None:
        """Make the next render bring the selected item into view."""
        self.ensure_selected_in_view_on_next_render = True

    def scroll_up(self, lines: int) -> bool:
        """Scroll up by ``lines``; return whether the offset changed."""
        before = self.offset
        self.offset = max(self.offset - lines, 0)
        return before != self.offset

    def scroll_down(self, lines: int) -> bool:
        """Scroll down by ``lines``; return whether the offset changed."""
        before = self.offset
        self.offset = min(self.offset + lines, self.last_biggest_index)
        return before != self.offset