"""Backend-agnostic key input types consumed by the text area."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class KeyKind(Enum):
    """Kinds of keys that can be typed."""

    CHAR = "char"
    F = "f"
    BACKSPACE = "backspace"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    TAB = "tab"
    DELETE = "delete"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    ESC = "esc"
    COPY = "copy"
    CUT = "cut"
    PASTE = "paste"
    MOUSE_SCROLL_DOWN = "mouse_scroll_down"
    MOUSE_SCROLL_UP = "mouse_scroll_up"
    NULL = "null"


@dataclass(frozen=True)
class Key:
    """A key: its kind plus a character (``CHAR``) or a number (``F``).

    The default key is ``NULL``, which the text area always ignores.
    """

    kind: KeyKind = KeyKind.NULL
    value: str | int | None = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.CHAR:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"a character key needs exactly one character, got {self.value!r}")
        elif self.kind is KeyKind.F:
            if isinstance(self.value, bool) or not isinstance(self.value, int) or not 0 <= self.value <= 255:
                raise ValueError(f"a function key needs a number in 0..255, got {self.value!r}")
        elif self.value is not None:
            raise ValueError(f"key {self.kind.name} takes no value, got {self.value!r}")

    @classmethod
    def char(cls, c: str) -> Key:
        """Key for typing the character ``c``."""
        return cls(KeyKind.CHAR, c)

    @classmethod
    def function(cls, n: int) -> Key:
        """Function key F``n``."""
        return cls(KeyKind.F, n)


@dataclass(frozen=True)
class Input:
    """A key press together with the state of its modifier keys."""

    key: Key = field(default_factory=Key)
    ctrl: bool = False
    alt: bool = False
    shift: bool = False