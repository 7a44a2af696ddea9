"""Flattening of a tree into the list of rows that are currently visible."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Iterable

from kitree.item import TreeItem


@dataclass(frozen=True)
class Flattened:
    """A visible item together with the identifier path leading to it."""

    identifier: tuple
    item: TreeItem

    def depth(self) -> int:
        """Zero based depth; 0 is the top level."""
        return len(self.identifier) - 1


def flatten(
    open_identifiers,
    items: Iterable[TreeItem],
    current: Iterable[Hashable] = (),
) -> list[Flattened]:
    """Return the visible items in display order.

    The children of an item are included when the identifier path of the
    item is in ``open_identifiers``.
    """
    prefix = tuple(current)
    result: list[Flattened] = []
    for item in items:
        identifier = (*prefix, item.identifier)
        result.append(Flattened(identifier, item))
        if identifier in open_identifiers:
            result.extend(flatten(open_identifiers, item.children, identifier))
    return result