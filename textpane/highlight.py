"""Turn one line of text into styled spans for display."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from wcwidth import wcwidth

# Ranks decide which boundary comes first when two share an offset.
_END = 0
_SELECT = 1
_SEARCH = 2
_CURSOR = 3


@dataclass(frozen=True)
class Style:
    """Foreground and background colours plus text modifiers."""

    fg: str | None = None
    bg: str | None = None
    modifiers: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class Span:
    """A piece of display text with a single style."""

    content: str
    style: Style = field(default_factory=Style)


def _char_width(c: str) -> int:
    w = wcwidth(c)
    return w if w > 0 else 0


@dataclass
class DisplayTextBuilder:
    """Expands tabs (or masks characters) while tracking display width."""

    tab_len: int
    mask: str | None = None
    width: int = 0

    def build(self, s: str) -> str:
        """Return the text to display for ``s``, continuing from ``width``."""
        if self.mask is not None:
            # Masked text has a fixed width per character, so width is not tracked.
            return self.mask * len(s)

        buf = ""
        for i, c in enumerate(s):
            if c == "\t":
                if not buf:
                    buf = s[:i]
                if self.tab_len > 0:
                    n = self.tab_len - (self.width % self.tab_len)
                    buf += " " * n
                    self.width += n
            else:
                if buf:
                    buf += c
                self.width += _char_width(c)
        return buf if buf else s


class LineHighlighter:
    """Collects highlights for one line and renders them into spans.

    Offsets are indices into the line string.
    """

    def __init__(
        self,
        line: str,
        cursor_style: Style,
        tab_len: int,
        mask: str | None,
        select_style: Style,
    ) -> None:
        self.line = line
        self.cursor_style = cursor_style
        self.tab_len = tab_len
        self.mask = mask
        self.select_style = select_style
        self._spans: list[Span] = []
        self._boundaries: list[tuple[int, int, Style | None]] = []
        self._style_begin = Style()
        self._cursor_at_end = False
        self._select_at_end = False

    def _mark(self, rank: int, style: Style, start: int, end: int) -> None:
        self._boundaries.append((start, rank, style))
        self._boundaries.append((end, _END, None))

    def line_number(self, row: int, lnum_len: int, style: Style) -> None:
        """Prefix the line with its right-aligned 1-based number."""
        number = str(row + 1)
        pad = " " * (lnum_len - len(number) + 1)
        self._spans.append(Span(f"{pad}{number} ", style))

    def cursor_line(self, cursor_col: int, style: Style) -> None:
        """Mark this as the cursor line with the cursor at ``cursor_col``."""
        if cursor_col < len(self.line):
            self._mark(_CURSOR, self.cursor_style, cursor_col, cursor_col + 1)
        else:
            self._cursor_at_end = True
        self._style_begin = style

    def search(self, matches: Iterable[tuple[int, int]], style: Style) -> None:
        """Highlight search matches given as ``(start, end)`` pairs."""
        for start, end in matches:
            if start != end:
                self._mark(_SEARCH, style, start, end)

    def selection(
        self,
        current_row: int,
        start_row: int,
        start_off: int,
        end_row: int,
        end_off: int,
    ) -> None:
        """Highlight the part of the selection that falls on ``current_row``."""
        if current_row == start_row:
            if start_row == end_row:
                start, end = start_off, end_off
            else:
                self._select_at_end = True
                start, end = start_off, len(self.line)
        elif current_row == end_row:
            start, end = 0, end_off
        elif start_row < current_row < end_row:
            self._select_at_end = True
            start, end = 0, len(self.line)
        else:
            return
        if start != end:
            self._mark(_SELECT, self.select_style, start, end)

    def _trailer(self, spans: list[Span]) -> None:
        if self._cursor_at_end:
            spans.append(Span(" ", self.cursor_style))
        elif self._select_at_end:
            spans.append(Span(" ", self.select_style))

    def into_spans(self) -> list[Span]:
        """Render the line and its highlights into a list of spans."""
        line = self.line
        spans = list(self._spans)
        builder = DisplayTextBuilder(self.tab_len, self.mask)

        if not self._boundaries:
            built = builder.build(line)
            if built:
                spans.append(Span(built, self._style_begin))
            self._trailer(spans)
            return spans

        boundaries = sorted(self._boundaries, key=lambda b: (b[0], b[1]))
        style = self._style_begin
        start = 0
        stack: list[Style] = []

        for end, _rank, next_style in boundaries:
            if start < end:
                spans.append(Span(builder.build(line[start:end]), style))
            if next_style is not None:
                stack.append(style)
                style = next_style
            else:
                style = stack.pop() if stack else self._style_begin
            start = end

        if start != len(line):
            spans.append(Span(builder.build(line[start:]), style))

        self._trailer(spans)
        return spans