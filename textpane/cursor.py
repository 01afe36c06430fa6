"""Cursor movements and the position each one leads to."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

_PUNCTUATION = frozenset(string.punctuation)

_SPACE = 0
_PUNCT = 1
_OTHER = 2


class CursorMove(Enum):
    """Ways to move the cursor that need no argument."""

    FORWARD = "forward"
    BACK = "back"
    UP = "up"
    DOWN = "down"
    HEAD = "head"
    END = "end"
    TOP = "top"
    BOTTOM = "bottom"
    WORD_FORWARD = "word_forward"
    WORD_END = "word_end"
    WORD_BACK = "word_back"
    PARAGRAPH_FORWARD = "paragraph_forward"
    PARAGRAPH_BACK = "paragraph_back"
    IN_VIEWPORT = "in_viewport"


@dataclass(frozen=True)
class Jump:
    """Move the cursor to ``(row, col)``, fitted into the text."""

    row: int
    col: int

    def __post_init__(self) -> None:
        for name, value in (("row", self.row), ("col", self.col)):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFFFF:
                raise ValueError(f"jump {name} must be in 0..65535, got {value!r}")


Move = Union[CursorMove, Jump]
Viewport = tuple[int, int, int, int]


def _kind(c: str) -> int:
    if c.isspace():
        return _SPACE
    if c in _PUNCTUATION:
        return _PUNCT
    return _OTHER


def _word_start_forward(line: str, start_col: int) -> int | None:
    chars = line[start_col:]
    if not chars:
        return None
    prev = _kind(chars[0])
    for col, c in enumerate(chars[1:], start_col + 1):
        cur = _kind(c)
        if cur != _SPACE and cur != prev:
            return col
        prev = cur
    return None


def _word_inclusive_end_forward(line: str, start_col: int) -> int | None:
    chars = line[start_col:]
    if not chars:
        return None
    last_col = start_col
    prev = _kind(chars[0])
    for col, c in enumerate(chars[1:], start_col + 1):
        cur = _kind(c)
        if prev != _SPACE and cur != prev:
            return max(col - 1, 0)
        prev = cur
        last_col = col
    return last_col if prev != _SPACE else None


def _word_start_backward(line: str, start_col: int) -> int | None:
    before = line[:start_col]
    if not before:
        return None
    reversed_chars = before[::-1]
    cur = _kind(reversed_chars[0])
    for i, c in enumerate(reversed_chars[1:], 1):
        nxt = _kind(c)
        if cur != _SPACE and nxt != cur:
            return start_col - i
        cur = nxt
    return 0 if cur != _SPACE else None


def _fit_col(col: int, line: str) -> int:
    return min(col, len(line))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def next_cursor(
    move: Move,
    cursor: tuple[int, int],
    lines: Sequence[str],
    viewport: Viewport | None = None,
) -> tuple[int, int] | None:
    """Return the cursor position after ``move``, or None if it cannot move.

    ``viewport`` is ``(row_top, col_top, row_bottom, col_bottom)`` and is
    needed only for ``CursorMove.IN_VIEWPORT``.
    """
    row, col = cursor

    if isinstance(move, Jump):
        r = min(move.row, len(lines) - 1)
        return (r, _fit_col(move.col, lines[r]))

    if move is CursorMove.FORWARD:
        if col >= len(lines[row]):
            return (row + 1, 0) if row + 1 < len(lines) else None
        return (row, col + 1)

    if move is CursorMove.BACK:
        if col == 0:
            if row == 0:
                return None
            return (row - 1, len(lines[row - 1]))
        return (row, col - 1)

    if move is CursorMove.UP:
        if row == 0:
            return None
        return (row - 1, _fit_col(col, lines[row - 1]))

    if move is CursorMove.DOWN:
        if row + 1 >= len(lines):
            return None
        return (row + 1, _fit_col(col, lines[row + 1]))

    if move is CursorMove.HEAD:
        return (row, 0)

    if move is CursorMove.END:
        return (row, len(lines[row]))

    if move is CursorMove.TOP:
        return (0, _fit_col(col, lines[0]))

    if move is CursorMove.BOTTOM:
        last = len(lines) - 1
        return (last, _fit_col(col, lines[last]))

    if move is CursorMove.WORD_END:
        # Start one past the cursor so the current position is not accepted.
        found = _word_inclusive_end_forward(lines[row], col + 1)
        if found is not None:
            return (row, found)
        r = row
        while r != len(lines) - 1:
            r += 1
            found = _word_inclusive_end_forward(lines[r], 0)
            if found is not None:
                return (r, found)
        return (r, len(lines[r]))

    if move is CursorMove.WORD_FORWARD:
        found = _word_start_forward(lines[row], col)
        if found is not None:
            return (row, found)
        if row + 1 < len(lines):
            return (row + 1, 0)
        return (row, len(lines[row]))

    if move is CursorMove.WORD_BACK:
        found = _word_start_backward(lines[row], col)
        if found is not None:
            return (row, found)
        if row > 0:
            return (row - 1, len(lines[row - 1]))
        return (row, 0)

    if move is CursorMove.PARAGRAPH_FORWARD:
        prev_is_empty = not lines[row]
        for r, line in enumerate(lines[row + 1 :], row + 1):
            is_empty = not line
            if not is_empty and prev_is_empty:
                return (r, _fit_col(col, line))
            prev_is_empty = is_empty
        last = len(lines) - 1
        return (last, _fit_col(col, lines[last]))

    if move is CursorMove.PARAGRAPH_BACK:
        if row == 0:
            return None
        start = row - 1
        prev_is_empty = not lines[start]
        for r in reversed(range(start)):
            is_empty = not lines[r]
            if is_empty and not prev_is_empty:
                return (r + 1, _fit_col(col, lines[r + 1]))
            prev_is_empty = is_empty
        return (0, _fit_col(col, lines[0]))

    if move is CursorMove.IN_VIEWPORT:
        if viewport is None:
            raise ValueError("moving into the viewport needs the viewport position")
        row_top, col_top, row_bottom, col_bottom = viewport
        r = min(_clamp(row, row_top, row_bottom), len(lines) - 1)
        c = _fit_col(_clamp(col, col_top, col_bottom), lines[r])
        return (r, c)

    raise TypeError(f"unknown cursor move: {move!r}")