"""How to scroll a text area and by how much."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

_I16_MIN = -0x8000
_I16_MAX = 0x7FFF


class Scrolling(Enum):
    """Page-based scrolling. The cursor moves only when it leaves the viewport."""

    PAGE_DOWN = "page_down"
    PAGE_UP = "page_up"
    HALF_PAGE_DOWN = "half_page_down"
    HALF_PAGE_UP = "half_page_up"


@dataclass(frozen=True)
class Delta:
    """Scroll by rows (down when positive) and columns (right when positive)."""

    rows: int
    cols: int

    def __post_init__(self) -> None:
        for name, value in (("rows", self.rows), ("cols", self.cols)):
            if isinstance(value, bool) or not isinstance(value, int) or not _I16_MIN <= value <= _I16_MAX:
                raise ValueError(f"scroll {name} must be in {_I16_MIN}..{_I16_MAX}, got {value!r}")

    @classmethod
    def from_tuple(cls, pair: tuple[int, int]) -> Delta:
        """Build a delta from a ``(rows, cols)`` pair."""
        rows, cols = pair
        return cls(rows, cols)


ScrollRequest = Union[Scrolling, Delta, "tuple[int, int]"]


def scroll_amount(scrolling: ScrollRequest, height: int) -> tuple[int, int]:
    """Rows and columns to scroll for ``scrolling`` in a viewport ``height`` rows tall."""
    if isinstance(scrolling, tuple):
        scrolling = Delta.from_tuple(scrolling)
    if isinstance(scrolling, Delta):
        return (scrolling.rows, scrolling.cols)
    if height < 0:
        raise ValueError(f"viewport height must not be negative, got {height}")
    if scrolling is Scrolling.PAGE_DOWN:
        return (height, 0)
    if scrolling is Scrolling.PAGE_UP:
        return (-height, 0)
    if scrolling is Scrolling.HALF_PAGE_DOWN:
        return (height // 2, 0)
    if scrolling is Scrolling.HALF_PAGE_UP:
        return (-(height // 2), 0)
    raise TypeError(f"unknown scrolling: {scrolling!r}")