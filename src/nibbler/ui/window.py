"""
Window management module for the hex editor UI.
"""

import curses
from typing import Dict, Final

from ..core.context import Mode, RenderState
from ..core.cursor import Nibble
from ..utils.hex_utils import format_offset

MODE_LABELS: Final[Dict[Mode, str]] = {
    Mode.NAVIGATION: "",
    Mode.REPLACE_PENDING: "-- REPLACE --",
    Mode.INSERT_PENDING: "-- INSERT --",
    Mode.SEARCH_PENDING: "-- SEARCH --",
    Mode.COMMAND_PENDING: "",
}

MODIFIED_MARK: Final[str] = "[+]"
OFFSET_WIDTH: Final[int] = 8
HEX_START: Final[int] = OFFSET_WIDTH + 2


def safe_addstr(window: 'curses.window', y: int, x: int, string: str, attr: int = 0) -> None:
    """Safely add a string to a window, truncating if necessary."""

    height, width = window.getmaxyx()
    if y >= height or x >= width:
        return

    available = width - x
    if available <= 0:
        return

    if len(string) > available:
        string = string[:available]

    try:
        window.addstr(y, x, string, attr)
    except curses.error:
        pass


class WindowManager:
    """Draws the offset column, hex pane, ASCII pane and status line."""

    def __init__(self, stdscr: 'curses.window'):
        self.stdscr = stdscr
        self.height, self.width = stdscr.getmaxyx()
        self._init_colors()

    def _init_colors(self) -> None:
        if not curses.has_colors():
            return

        curses.start_color()
        curses.use_default_colors()
        curses.init_pair(1, curses.COLOR_GREEN, -1)  # ASCII
        curses.init_pair(2, curses.COLOR_YELLOW, -1)  # Offsets
        curses.init_pair(3, curses.COLOR_RED, -1)  # Status messages

    @property
    def rows_visible(self) -> int:
        """Rows available for data, the last line is the status line."""

        return max(self.height - 1, 1)

    def resize(self) -> None:
        self.height, self.width = self.stdscr.getmaxyx()

    def draw(self, state: RenderState) -> None:
        """Render one frame. Depends only on the given state."""

        self.stdscr.erase()

        columns = state.columns_per_row
        ascii_start = HEX_START + columns * 3 + 1
        first_offset = state.screen_offset_rows * columns

        rows = (len(state.window) + columns - 1) // columns
        for row in range(max(rows, 1)):
            safe_addstr(
                self.stdscr, row, 0,
                format_offset(first_offset + row * columns, OFFSET_WIDTH),
                curses.color_pair(2)
            )

        for index, byte in enumerate(state.window):
            row, column = divmod(index, columns)
            self._draw_byte(state, index, row, column, byte, ascii_start)

        if state.cursor_in_window == len(state.window):
            # empty file or appending at the end
            row, column = divmod(len(state.window), columns)
            x = ascii_start + column if state.ascii_mode else HEX_START + column * 3
            safe_addstr(self.stdscr, row, x, " ", curses.A_REVERSE)

        self._draw_status(state)
        self.stdscr.refresh()

    def _draw_byte(self, state: RenderState, index: int, row: int, column: int,
                   byte: int, ascii_start: int) -> None:
        hex_text = f"{byte:02X}"
        x = HEX_START + column * 3
        is_cursor = index == state.cursor_in_window

        if is_cursor and not state.ascii_mode:
            selected = 0 if state.nibble == Nibble.LEFT else 1
            for i, char in enumerate(hex_text):
                attr = curses.A_REVERSE | curses.A_BOLD if i == selected else curses.A_BOLD
                safe_addstr(self.stdscr, row, x + i, char, attr)
        else:
            safe_addstr(self.stdscr, row, x, hex_text, curses.A_BOLD if is_cursor else curses.A_NORMAL)

        char = chr(byte) if 32 <= byte <= 126 else '.'
        attr = curses.color_pair(1)
        if is_cursor:
            attr |= curses.A_REVERSE if state.ascii_mode else curses.A_UNDERLINE

        safe_addstr(self.stdscr, row, ascii_start + column, char, attr)

    def _draw_status(self, state: RenderState) -> None:
        y = self.height - 1
        label = MODE_LABELS.get(state.mode, "")

        safe_addstr(self.stdscr, y, 0, state.echo_text, curses.color_pair(3))

        right = " ".join(part for part in (MODIFIED_MARK if state.modified else "", label) if part)
        if right:
            safe_addstr(self.stdscr, y, max(self.width - len(right) - 1, 0), right, curses.A_BOLD)
