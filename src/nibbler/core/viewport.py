"""
Scroll model mapping the cursor to the window of rows on screen.
"""

from dataclasses import dataclass
from typing import Tuple

from ..config import COLUMNS_PER_ROW


@dataclass
class Viewport:
    """Visible row window over the buffer."""
    rows_visible: int = 1
    screen_offset_rows: int = 0
    columns_per_row: int = COLUMNS_PER_ROW

    def follow(self, cursor_offset: int) -> None:
        """Scroll so that the cursor's row is inside the window."""

        rows = max(self.rows_visible, 1)
        cursor_row = cursor_offset // self.columns_per_row

        if cursor_row > self.screen_offset_rows + rows - 1:
            # Lands one row above the bottom, clamped so a one-row window still shows the cursor
            self.screen_offset_rows = min(cursor_row, cursor_row - rows + 2)
        elif cursor_row < self.screen_offset_rows:
            self.screen_offset_rows = cursor_row

        self.screen_offset_rows = max(0, self.screen_offset_rows)

    def resize(self, rows_visible: int, cursor_offset: int) -> None:
        self.rows_visible = max(rows_visible, 1)
        self.follow(cursor_offset)

    def visible_range(self, length: int) -> Tuple[int, int]:
        """Half-open byte range [start, end) shown on screen."""

        start = self.screen_offset_rows * self.columns_per_row
        end = (self.screen_offset_rows + self.rows_visible) * self.columns_per_row
        return min(start, length), min(length, end)
