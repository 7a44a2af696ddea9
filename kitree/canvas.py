"""Cell grid, styles and simple decorations used to draw the tree widgets."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from wcwidth import wcwidth


@dataclass(frozen=True)
class Position:
    """A column/row coordinate on the terminal grid."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    """A rectangular region of the terminal grid."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, position: Position) -> bool:
        """Return whether the position lies inside the rectangle."""
        return (
            self.left <= position.x < self.right
            and self.top <= position.y < self.bottom
        )


def _intersection(first: Rect, second: Rect) -> Rect:
    left = max(first.left, second.left)
    top = max(first.top, second.top)
    right = min(first.right, second.right)
    bottom = min(first.bottom, second.bottom)
    return Rect(left, top, max(right - left, 0), max(bottom - top, 0))


class Modifier(enum.Flag):
    """Text attributes a cell can carry."""

    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


_NO_MODIFIER = Modifier(0)


@dataclass(frozen=True)
class Style:
    """Colours and modifiers; unset parts leave what is underneath alone."""

    fg: str | None = None
    bg: str | None = None
    add_modifier: Modifier = _NO_MODIFIER
    sub_modifier: Modifier = _NO_MODIFIER

    def patch(self, other: Style) -> Style:
        """Return this style with the set parts of ``other`` laid over it."""
        return Style(
            fg=other.fg if other.fg is not None else self.fg,
            bg=other.bg if other.bg is not None else self.bg,
            add_modifier=(self.add_modifier & ~other.sub_modifier) | other.add_modifier,
            sub_modifier=(self.sub_modifier & ~other.add_modifier) | other.sub_modifier,
        )


def _text_width(text: str) -> int:
    return sum(max(wcwidth(char), 0) for char in text)


@dataclass
class _Cell:
    symbol: str = " "
    style: Style = field(default_factory=Style)

    def reset(self) -> None:
        self.symbol = " "
        self.style = Style()


class Buffer:
    """A grid of cells covering an area of the terminal."""

    def __init__(self, area: Rect) -> None:
        self.area = area
        self._rows = [
            [_Cell() for _ in range(max(area.width, 0))]
            for _ in range(max(area.height, 0))
        ]

    @classmethod
    def empty(cls, area: Rect) -> Buffer:
        """Create a buffer of blank cells covering ``area``."""
        return cls(area)

    @classmethod
    def with_lines(cls, lines) -> Buffer:
        """Create a buffer at the origin holding the given lines of text."""
        lines = list(lines)
        width = max((_text_width(line) for line in lines), default=0)
        buffer = cls(Rect(0, 0, width, len(lines)))
        for row, line in enumerate(lines):
            buffer.set_stringn(0, row, line, width, Style())
        return buffer

    def _cell(self, x: int, y: int) -> _Cell:
        if not self.area.contains(Position(x, y)):
            raise IndexError(f"position ({x}, {y}) is outside {self.area}")
        return self._rows[y - self.area.y][x - self.area.x]

    def cell(self, x: int, y: int) -> tuple[str, Style]:
        """Return the symbol and style at the given coordinate."""
        found = self._cell(x, y)
        return found.symbol, found.style

    def set_stringn(
        self, x: int, y: int, text: str, max_width: int, style: Style
    ) -> tuple[int, int]:
        """Write at most ``max_width`` columns of text; return the position after it."""
        if not (self.area.top <= y < self.area.bottom) or x < self.area.left:
            return x, y
        remaining = min(max(self.area.right - x, 0), max(max_width, 0))
        last: _Cell | None = None
        for char in text:
            width = wcwidth(char)
            if width < 0:
                continue
            if width == 0:
                if last is not None:
                    last.symbol += char
                continue
            if width > remaining:
                break
            last = self._cell(x, y)
            last.symbol = char
            last.style = last.style.patch(style)
            for hidden in range(x + 1, x + width):
                self._cell(hidden, y).reset()
            x += width
            remaining -= width
        return x, y

    def set_style(self, area: Rect, style: Style) -> None:
        """Lay ``style`` over every cell of ``area`` inside the buffer."""
        region = _intersection(area, self.area)
        for y in range(region.top, region.bottom):
            for x in range(region.left, region.right):
                cell = self._cell(x, y)
                cell.style = cell.style.patch(style)

    def lines(self) -> list[str]:
        """Return the text of each row, skipping cells hidden by wide symbols."""
        result = []
        for row in self._rows:
            parts = []
            skip = 0
            for cell in row:
                if skip:
                    skip -= 1
                    continue
                parts.append(cell.symbol)
                skip = max(_text_width(cell.symbol) - 1, 0)
            result.append("".join(parts))
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Buffer):
            return NotImplemented
        return self.area == other.area and self._rows == other._rows

    def __repr__(self) -> str:
        return f"Buffer(area={self.area!r}, lines={self.lines()!r})"


_PLAIN_CORNERS = ("┌", "┐", "└", "┘")
_ROUNDED_CORNERS = ("╭", "╮", "╰", "╯")


@dataclass(frozen=True)
class Block:
    """A frame drawn around an area, with an optional title on its top edge."""

    title: str | None = None
    borders: bool = False
    rounded: bool = False
    style: Style = Style()

    def inner(self, area: Rect) -> Rect:
        """Return the part of ``area`` left inside the frame."""
        x, y, width, height = area.x, area.y, area.width, area.height
        if self.borders:
            x = min(x + 1, area.right)
            y = min(y + 1, area.bottom)
            width = max(width - 2, 0)
            height = max(height - 2, 0)
        elif self.title:
            y = min(y + 1, area.bottom)
            height = max(height - 1, 0)
        return Rect(x, y, width, height)

    def render(self, area: Rect, buf: Buffer) -> None:
        """Draw the frame and title into ``buf``."""
        area = _intersection(area, buf.area)
        if area.is_empty:
            return
        buf.set_style(area, self.style)
        if self.borders:
            self._render_borders(area, buf)
        if self.title:
            offset = 1 if self.borders else 0
            buf.set_stringn(
                area.x + offset,
                area.y,
                self.title,
                max(area.width - 2 * offset, 0),
                Style(),
            )

    def _render_borders(self, area: Rect, buf: Buffer) -> None:
        plain = Style()
        for x in range(area.left, area.right):
            buf.set_stringn(x, area.top, "─", 1, plain)
            buf.set_stringn(x, area.bottom - 1, "─", 1, plain)
        for y in range(area.top, area.bottom):
            buf.set_stringn(area.left, y, "│", 1, plain)
            buf.set_stringn(area.right - 1, y, "│", 1, plain)
        top_left, top_right, bottom_left, bottom_right = (
            _ROUNDED_CORNERS if self.rounded else _PLAIN_CORNERS
        )
        buf.set_stringn(area.left, area.top, top_left, 1, plain)
        buf.set_stringn(area.right - 1, area.top, top_right, 1, plain)
        buf.set_stringn(area.left, area.bottom - 1, bottom_left, 1, plain)
        buf.set_stringn(area.right - 1, area.bottom - 1, bottom_right, 1, plain)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class Scrollbar:
    """A vertical scrollbar drawn in the rightmost column of an area."""

    thumb: str = "█"
    track: str = "║"
    begin: str | None = "▲"
    end: str | None = "▼"
    style: Style = Style()

    def render(
        self,
        area: Rect,
        buf: Buffer,
        position: int,
        content_length: int,
        viewport_length: int,
    ) -> None:
        """Draw the scrollbar for the given scroll position and lengths."""
        area = _intersection(area, buf.area)
        if content_length <= 0 or area.is_empty:
            return
        begin_length = 1 if self.begin else 0
        end_length = 1 if self.end else 0
        track_length = area.height - begin_length - end_length
        if track_length <= 0:
            return
        viewport = viewport_length if viewport_length > 0 else area.height

        max_position = float(max(content_length - 1, 0))
        start_position = min(max(float(position), 0.0), max_position)
        max_viewport_position = max_position + viewport
        end_position = start_position + viewport
        thumb_start = start_position * track_length / max_viewport_position
        thumb_end = end_position * track_length / max_viewport_position
        thumb_start = min(max(_round_half_up(thumb_start), 0), track_length - 1)
        thumb_end = min(max(_round_half_up(thumb_end), 0), track_length)
        thumb_length = max(thumb_end - thumb_start, 1)
        track_end_length = max(track_length - thumb_start - thumb_length, 0)

        symbols: list[str] = []
        if self.begin:
            symbols.append(self.begin)
        symbols.extend([self.track] * thumb_start)
        symbols.extend([self.thumb] * thumb_length)
        symbols.extend([self.track] * track_end_length)
        if self.end:
            symbols.append(self.end)

        column = area.right - 1
        for row, symbol in zip(range(area.top, area.bottom), symbols):
            buf.set_stringn(column, row, symbol, 1, self.style)