"""Items of a tree: an identifier, display text and child items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

from kitree.canvas import Style


class DuplicateIdentifierError(ValueError):
    """Raised when sibling items would share an identifier."""


@dataclass
class TreeItem:
    """A node of the tree; sibling identifiers must be unique."""

    identifier: Hashable
    text: str
    children: list[TreeItem] = field(default_factory=list)
    style: Style = Style()

    def __post_init__(self) -> None:
        self.children = list(self.children)
        identifiers = {child.identifier for child in self.children}
        if len(identifiers) != len(self.children):
            raise DuplicateIdentifierError("The children contain duplicate identifiers")

    @classmethod
    def leaf(cls, identifier: Hashable, text: str) -> TreeItem:
        """Create an item without children."""
        return cls(identifier, text)

    def child(self, index: int) -> TreeItem | None:
        """Return the child at ``index``, or None when there is none."""
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def height(self) -> int:
        """Number of text lines the item takes up."""
        return len(self.text.splitlines())

    def add_child(self, child: TreeItem) -> None:
        """Append a child whose identifier is not yet among the children."""
        if any(existing.identifier == child.identifier for existing in self.children):
            raise DuplicateIdentifierError("identifier already exists in the children")
        self.children.append(child)