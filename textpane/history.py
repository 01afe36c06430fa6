"""Edit records and the undo/redo history of a text area."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Pos:
    """A position in the text: row, character column and string offset."""

    row: int
    col: int
    offset: int


class EditKind(Enum):
    """The kinds of edit that can be recorded."""

    INSERT_CHAR = "insert_char"
    DELETE_CHAR = "delete_char"
    INSERT_NEWLINE = "insert_newline"
    DELETE_NEWLINE = "delete_newline"
    INSERT_STR = "insert_str"
    DELETE_STR = "delete_str"
    INSERT_CHUNK = "insert_chunk"
    DELETE_CHUNK = "delete_chunk"


_INVERSE = {
    EditKind.INSERT_CHAR: EditKind.DELETE_CHAR,
    EditKind.DELETE_CHAR: EditKind.INSERT_CHAR,
    EditKind.INSERT_NEWLINE: EditKind.DELETE_NEWLINE,
    EditKind.DELETE_NEWLINE: EditKind.INSERT_NEWLINE,
    EditKind.INSERT_STR: EditKind.DELETE_STR,
    EditKind.DELETE_STR: EditKind.INSERT_STR,
    EditKind.INSERT_CHUNK: EditKind.DELETE_CHUNK,
    EditKind.DELETE_CHUNK: EditKind.INSERT_CHUNK,
}

_CHAR_KINDS = {EditKind.INSERT_CHAR, EditKind.DELETE_CHAR}
_NEWLINE_KINDS = {EditKind.INSERT_NEWLINE, EditKind.DELETE_NEWLINE}
_STR_KINDS = {EditKind.INSERT_STR, EditKind.DELETE_STR}


@dataclass(frozen=True)
class Change:
    """What an edit does: its kind plus the text it inserts or deletes.

    Character kinds carry one character, string kinds a string without
    newlines, chunk kinds two or more lines, newline kinds nothing.
    """

    kind: EditKind
    payload: str | tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        kind, payload = self.kind, self.payload
        if kind in _CHAR_KINDS:
            if not isinstance(payload, str) or len(payload) != 1:
                raise ValueError(f"{kind.name} needs exactly one character, got {payload!r}")
        elif kind in _NEWLINE_KINDS:
            if payload is not None:
                raise ValueError(f"{kind.name} takes no payload, got {payload!r}")
        elif kind in _STR_KINDS:
            if not isinstance(payload, str):
                raise ValueError(f"{kind.name} needs a string, got {payload!r}")
        else:
            if isinstance(payload, str) or payload is None:
                raise ValueError(f"{kind.name} needs a sequence of lines, got {payload!r}")
            chunk = tuple(payload)
            if len(chunk) < 2:
                raise ValueError(f"chunk size must be > 1: {chunk!r}")
            object.__setattr__(self, "payload", chunk)

    def apply(self, lines: list[str], before: Pos, after: Pos) -> None:
        """Apply this change to ``lines`` in place."""
        kind, payload = self.kind, self.payload
        if kind is EditKind.INSERT_CHAR or kind is EditKind.INSERT_STR:
            line = lines[before.row]
            lines[before.row] = line[: before.offset] + payload + line[before.offset :]
        elif kind is EditKind.DELETE_CHAR:
            line = lines[before.row]
            lines[before.row] = line[: after.offset] + line[after.offset + 1 :]
        elif kind is EditKind.DELETE_STR:
            line = lines[after.row]
            lines[after.row] = line[: after.offset] + line[after.offset + len(payload) :]
        elif kind is EditKind.INSERT_NEWLINE:
            line = lines[before.row]
            lines[before.row] = line[: before.offset]
            lines.insert(before.row + 1, line[before.offset :])
        elif kind is EditKind.DELETE_NEWLINE:
            if before.row <= 0:
                raise ValueError(f"invalid position for joining lines: {before!r}")
            line = lines.pop(before.row)
            lines[before.row - 1] += line
        elif kind is EditKind.INSERT_CHUNK:
            first = lines[before.row]
            tail = first[before.offset :]
            lines[before.row] = first[: before.offset] + payload[0]
            next_row = before.row + 1
            lines[next_row:next_row] = [*payload[1:-1], payload[-1] + tail]
        else:
            removed = lines[after.row + 1 : after.row + len(payload)]
            del lines[after.row + 1 : after.row + len(payload)]
            rest = removed[-1][len(payload[-1]) :]
            lines[after.row] = lines[after.row][: after.offset] + rest

    def inverted(self) -> Change:
        """The change that undoes this one."""
        return Change(_INVERSE[self.kind], self.payload)


@dataclass(frozen=True)
class Edit:
    """A change together with the cursor positions before and after it."""

    change: Change
    before: Pos
    after: Pos

    def redo(self, lines: list[str]) -> None:
        self.change.apply(lines, self.before, self.after)

    def undo(self, lines: list[str]) -> None:
        self.change.inverted().apply(lines, self.after, self.before)

    def cursor_before(self) -> tuple[int, int]:
        return (self.before.row, self.before.col)

    def cursor_after(self) -> tuple[int, int]:
        return (self.after.row, self.after.col)


class History:
    """A bounded undo/redo stack of edits."""

    def __init__(self, max_items: int) -> None:
        self.max_items = max_items
        self._index = 0
        self._edits: deque[Edit] = deque()

    def push(self, edit: Edit) -> None:
        """Record an edit that has already been applied, dropping redo states."""
        if self.max_items == 0:
            return
        if len(self._edits) == self.max_items:
            self._edits.popleft()
            self._index = max(self._index - 1, 0)
        while len(self._edits) > self._index:
            self._edits.pop()
        self._index += 1
        self._edits.append(edit)

    def redo(self, lines: list[str]) -> tuple[int, int] | None:
        """Reapply the next edit; return the cursor after it, or None."""
        if self._index == len(self._edits):
            return None
        edit = self._edits[self._index]
        edit.redo(lines)
        self._index += 1
        return edit.cursor_after()

    def undo(self, lines: list[str]) -> tuple[int, int] | None:
        """Revert the last edit; return the cursor before it, or None."""
        if self._index == 0:
            return None
        self._index -= 1
        edit = self._edits[self._index]
        edit.undo(lines)
        return edit.cursor_before()