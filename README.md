# textpane

The editing core of a multi-line text area for terminal user interfaces.
It works on a plain list of strings and gives you the parts that an editor
widget is built from. Columns count characters, not bytes.

## Modules

### `textpane.keys`

Input events that do not depend on any terminal library.

- `KeyKind`: an enumeration of key kinds (`CHAR`, `F`, `BACKSPACE`, `ENTER`,
  arrow keys, `HOME`, `END`, `PAGE_UP`, `PAGE_DOWN`, `ESC`, `COPY`, `CUT`,
  `PASTE`, `MOUSE_SCROLL_DOWN`, `MOUSE_SCROLL_UP`, `NULL`).
- `Key`: a frozen dataclass holding a kind and, for `CHAR` and `F`, a value.
  `Key.char("a")` makes a character key and `Key.function(1)` makes F1. A
  character key needs exactly one character. A function key needs a number
  from 0 to 255. Other kinds take no value. Each of these rules raises
  `ValueError` when broken. The default `Key()` is `NULL`.
- `Input`: a key together with `ctrl`, `alt` and `shift` flags. All of them
  are off by default.

### `textpane.history`

Undo and redo.

- `Pos(row, col, offset)`: a position in the text.
- `EditKind`: insert or delete a character, a newline, a string, or a chunk
  of two or more lines.
- `Change(kind, payload)`: an edit kind with the text it carries. The payload
  is checked when the change is made. `apply(lines, before, after)` changes
  the list in place. `inverted()` returns the change that undoes it.
- `Edit(change, before, after)`: a change between two positions. It has
  `redo(lines)`, `undo(lines)`, `cursor_before()` and `cursor_after()`.
- `History(max_items)`: a bounded undo stack. `push(edit)` records an edit
  and drops any redo states. When the stack is full, the oldest edit is
  dropped. With `max_items` of 0 nothing is recorded. `undo(lines)` and
  `redo(lines)` return the new cursor `(row, col)`, or `None` when there is
  nothing to undo or redo.

### `textpane.highlight`

Turns one line into styled spans.

- `Style(fg, bg, modifiers)` and `Span(content, style)`: frozen dataclasses.
- `DisplayTextBuilder(tab_len, mask=None)`: `build(s)` expands tabs to the
  next tab stop and keeps track of the display width in `width`. Wide
  characters are measured with `wcwidth`. With a tab length of 0, tabs are
  dropped. With a `mask` character, every character is replaced by the mask.
- `LineHighlighter(line, cursor_style, tab_len, mask, select_style)`: collect
  highlights with `line_number(row, lnum_len, style)`,
  `cursor_line(cursor_col, style)`, `search(matches, style)` and
  `selection(current_row, start_row, start_off, end_row, end_off)`, then call
  `into_spans()` to get a list of `Span`s. Where highlights overlap, the
  cursor wins over search matches, and search matches win over the
  selection. A cursor or a selection that runs past the end of the line adds
  a trailing styled space.

### `textpane.cursor`

- `CursorMove`: `FORWARD`, `BACK`, `UP`, `DOWN`, `HEAD`, `END`, `TOP`,
  `BOTTOM`, `WORD_FORWARD`, `WORD_END`, `WORD_BACK`, `PARAGRAPH_FORWARD`,
  `PARAGRAPH_BACK`, `IN_VIEWPORT`.
- `Jump(row, col)`: an absolute move, with each value in 0..65535. The
  result is fitted into the text.
- `next_cursor(move, cursor, lines, viewport=None)`: returns the new
  `(row, col)`, or `None` when the cursor cannot move. Word boundaries fall
  between whitespace, punctuation and other characters. `IN_VIEWPORT` needs
  `viewport` as `(row_top, col_top, row_bottom, col_bottom)`. Without it,
  `ValueError` is raised.

### `textpane.scroll`

- `Scrolling`: `PAGE_DOWN`, `PAGE_UP`, `HALF_PAGE_DOWN`, `HALF_PAGE_UP`.
- `Delta(rows, cols)`: scroll by a signed amount, with each value in the
  16-bit signed range. `Delta.from_tuple((rows, cols))` builds one from a
  pair.
- `scroll_amount(scrolling, height)`: returns the `(rows, cols)` offset for a
  viewport `height` rows tall. It also accepts a plain `(rows, cols)` tuple.

## Example

```python
from textpane.cursor import CursorMove, next_cursor

lines = ["aaa bbb ccc"]
cursor = next_cursor(CursorMove.WORD_FORWARD, (0, 0), lines)
# cursor == (0, 4)
```

## What it does not do

There is no text area widget here. Nothing ties these parts into a single
editor object, maps keys to editing commands, or keeps a viewport. Nothing
draws to a terminal, reads terminal events, runs regex search over the text,
or loads and saves files. This package supplies the pieces, and the
application puts them together.

## Installation

```
pip install textpane
```

## Running the tests

```
pip install -e ".[test]"
pytest
```