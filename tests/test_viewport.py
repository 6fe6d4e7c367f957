"""Test scrolling of the visible row window."""

from nibbler.core.viewport import Viewport


def test_cursor_inside_window_does_not_scroll():
    viewport = Viewport(rows_visible=4)
    viewport.follow(3 * 16)
    assert viewport.screen_offset_rows == 0


def test_cursor_below_window_scrolls_down():
    viewport = Viewport(rows_visible=4)
    # row 4 is just past rows 0..3
    viewport.follow(4 * 16)
    assert viewport.screen_offset_rows == 2


def test_cursor_above_window_scrolls_up():
    viewport = Viewport(rows_visible=4, screen_offset_rows=10)
    viewport.follow(5 * 16 + 3)
    assert viewport.screen_offset_rows == 5


def test_single_row_window_keeps_cursor_visible():
    viewport = Viewport(rows_visible=1)
    viewport.follow(2 * 16)
    assert viewport.screen_offset_rows == 2


def test_visible_range():
    viewport = Viewport(rows_visible=2, screen_offset_rows=1)
    assert viewport.visible_range(100) == (16, 48)
    assert viewport.visible_range(20) == (16, 20)
    assert viewport.visible_range(0) == (0, 0)


def test_resize_refollows_cursor():
    viewport = Viewport(rows_visible=10)
    viewport.follow(9 * 16)
    viewport.resize(3, 9 * 16)
    assert viewport.rows_visible == 3
    assert viewport.screen_offset_rows <= 9 < viewport.screen_offset_rows + 3
