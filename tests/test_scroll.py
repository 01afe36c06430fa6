import pytest

from textpane.scroll import Delta, Scrolling, scroll_amount


def test_delta_passes_through():
    assert scroll_amount(Delta(rows=2, cols=0), 8) == (2, 0)


def test_tuple_is_a_delta():
    assert scroll_amount((1, 0), 8) == (1, 0)
    assert scroll_amount((-3, 5), 8) == scroll_amount(Delta(-3, 5), 8)


def test_from_tuple_round_trip():
    d = Delta.from_tuple((4, -7))
    assert (d.rows, d.cols) == (4, -7)
    assert d == Delta(4, -7)


def test_page_down_and_up_are_opposite():
    assert scroll_amount(Scrolling.PAGE_DOWN, 8) == (8, 0)
    assert scroll_amount(Scrolling.PAGE_UP, 8) == (-8, 0)


def test_half_page():
    assert scroll_amount(Scrolling.HALF_PAGE_DOWN, 8) == (4, 0)
    assert scroll_amount(Scrolling.HALF_PAGE_UP, 8) == (-4, 0)


@pytest.mark.parametrize("height", [0, 1, 7, 8, 25])
def test_half_page_up_mirrors_half_page_down(height):
    down_rows, down_cols = scroll_amount(Scrolling.HALF_PAGE_DOWN, height)
    up_rows, up_cols = scroll_amount(Scrolling.HALF_PAGE_UP, height)
    assert up_rows == -down_rows
    assert down_cols == up_cols == 0
    assert 2 * down_rows <= height


@pytest.mark.parametrize("rows, cols", [(32768, 0), (0, -32769), (True, 0), (1.5, 0)])
def test_delta_rejects_out_of_range(rows, cols):
    with pytest.raises(ValueError):
        Delta(rows, cols)


def test_negative_height_rejected():
    with pytest.raises(ValueError):
        scroll_amount(Scrolling.PAGE_DOWN, -1)