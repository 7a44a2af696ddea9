"""A widget drawing a tree of items into a buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from wcwidth import wcwidth

from kitree.canvas import Block, Buffer, Modifier, Rect, Scrollbar, Style
from kitree.item import DuplicateIdentifierError, TreeItem
from kitree.state import ExplorerState


def _text_width(text: str) -> int:
    return sum(max(wcwidth(char), 0) for char in text)


@dataclass
class Tree:
    """Top-level items of a tree plus how to draw them."""

    items: list[TreeItem] = field(default_factory=list)
    block: Block | None = None
    scrollbar: Scrollbar | None = None
    style: Style = Style()
    highlight_style: Style = Style(add_modifier=Modifier.REVERSED)
    highlight_symbol: str = ""
    node_closed_symbol: str = "\u25b6 "
    node_open_symbol: str = "\u25bc "
    node_no_children_symbol: str = "  "

    def __post_init__(self) -> None:
        self.items = list(self.items)
        identifiers = {item.identifier for item in self.items}
        if len(identifiers) != len(self.items):
            raise DuplicateIdentifierError("The items contain duplicate identifiers")

    def render(self, area: Rect, buf: Buffer, state: ExplorerState) -> None:
        """Draw the visible items into ``buf`` and record what was drawn in ``state``."""
        full_area = area
        buf.set_style(full_area, self.style)
        if self.block is not None:
            area = self.block.inner(full_area)
            self.block.render(full_area, buf)

        state.last_area = area
        state.last_rendered_identifiers.clear()
        if area.width < 1 or area.height < 1:
            return

        visible = state.flatten(self.items)
        state.last_biggest_index = max(len(visible) - 1, 0)
        if not visible:
            return

        available_height = area.height
        ensure_index = None
        if state.ensure_selected_in_view_on_next_render and state.selected:
            ensure_index = next(
                (
                    index
                    for index, flattened in enumerate(visible)
                    if flattened.identifier == state.selected
                ),
                None,
            )

        start = min(state.offset, state.last_biggest_index)
        if ensure_index is not None:
            start = min(start, ensure_index)

        end = start
        height = 0
        for flattened in visible[start:]:
            item_height = flattened.item.height()
            if height + item_height > available_height:
                break
            height += item_height
            end += 1

        if ensure_index is not None:
            while ensure_index >= end:
                height += visible[end].item.height()
                end += 1
                while height > available_height:
                    height = max(height - visible[start].item.height(), 0)
                    start += 1

        state.offset = start
        state.ensure_selected_in_view_on_next_render = False

        if self.scrollbar is not None:
            scrollbar_area = Rect(full_area.x, area.y, full_area.width, area.height)
            self.scrollbar.render(
                scrollbar_area,
                buf,
                position=start,
                content_length=max(len(visible) - height, 0),
                viewport_length=height,
            )

        blank_symbol = " " * _text_width(self.highlight_symbol)
        has_selection = bool(state.selected)
        current_height = 0
        for flattened in visible[start:end]:
            identifier, item = flattened.identifier, flattened.item
            x = area.x
            y = area.y + current_height
            item_height = item.height()
            current_height += item_height
            row = Rect(x, y, area.width, item_height)

            is_selected = state.selected == identifier
            after_symbol_x = x
            if has_selection:
                symbol = self.highlight_symbol if is_selected else blank_symbol
                after_symbol_x, _ = buf.set_stringn(x, y, symbol, area.width, item.style)

            indent_width = flattened.depth() * 2
            after_indent_x, _ = buf.set_stringn(
                after_symbol_x, y, " " * indent_width, indent_width, item.style
            )
            if not item.children:
                node_symbol = self.node_no_children_symbol
            elif identifier in state.expanded:
                node_symbol = self.node_open_symbol
            else:
                node_symbol = self.node_closed_symbol
            max_width = max(area.width - (after_indent_x - x), 0)
            after_depth_x, _ = buf.set_stringn(
                after_indent_x, y, node_symbol, max_width, item.style
            )

            text_area = Rect(
                after_depth_x,
                y,
                max(area.width - (after_depth_x - x), 0),
                item_height,
            )
            self._render_text(item, text_area, buf)

            if is_selected:
                buf.set_style(row, self.highlight_style)

            state.last_rendered_identifiers.append((y, identifier))

        state.last_identifiers = [flattened.identifier for flattened in visible]

    @staticmethod
    def _render_text(item: TreeItem, area: Rect, buf: Buffer) -> None:
        if area.width < 1 or area.height < 1:
            return
        buf.set_style(area, item.style)
        for offset, line in zip(range(area.height), item.text.splitlines()):
            buf.set_stringn(area.x, area.y + offset, line, area.width, Style())