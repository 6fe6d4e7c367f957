"""
Two-level cursor: a byte offset plus the nibble side inside that byte.

Every movement is a pure function taking the current cursor and the buffer
length and returning the new cursor. An empty buffer keeps the cursor at
offset 0 for every movement.
"""

from dataclasses import dataclass, replace
from enum import Enum

from ..config import COLUMNS_PER_ROW


class Nibble(Enum):
    """Which half of the byte the hex cursor sits on."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class CursorState:
    """Position of the cursor in the buffer."""
    offset: int = 0
    nibble: Nibble = Nibble.LEFT
    ascii_mode: bool = False

    @property
    def row(self) -> int:
        return self.offset // COLUMNS_PER_ROW

    @property
    def column(self) -> int:
        return self.offset % COLUMNS_PER_ROW


def last_offset(length: int) -> int:
    """Offset of the last byte, 0 for an empty buffer."""

    return max(length - 1, 0)


def row_start(offset: int) -> int:
    return offset - offset % COLUMNS_PER_ROW


def clamp(cursor: CursorState, length: int) -> CursorState:
    """Pull the offset back into [0, last byte]."""

    if cursor.offset > last_offset(length):
        return replace(cursor, offset=last_offset(length))

    return cursor


def move_left(cursor: CursorState, length: int) -> CursorState:
    if length == 0:
        return cursor

    if cursor.ascii_mode:
        if cursor.offset > 0:
            return replace(cursor, offset=cursor.offset - 1)
        return cursor

    if cursor.nibble == Nibble.RIGHT:
        return replace(cursor, nibble=Nibble.LEFT)

    if cursor.offset > 0:
        return replace(cursor, offset=cursor.offset - 1, nibble=Nibble.RIGHT)

    return cursor


def move_right(cursor: CursorState, length: int) -> CursorState:
    if length == 0:
        return cursor

    at_end = cursor.offset >= length - 1

    if cursor.ascii_mode:
        if not at_end:
            return replace(cursor, offset=cursor.offset + 1)
        return cursor

    if cursor.nibble == Nibble.LEFT:
        return replace(cursor, nibble=Nibble.RIGHT)

    if not at_end:
        return replace(cursor, offset=cursor.offset + 1, nibble=Nibble.LEFT)

    return cursor


def move_down(cursor: CursorState, length: int) -> CursorState:
    if cursor.offset + COLUMNS_PER_ROW < length:
        return replace(cursor, offset=cursor.offset + COLUMNS_PER_ROW)

    return replace(cursor, offset=last_offset(length))


def move_up(cursor: CursorState, length: int) -> CursorState:
    if cursor.offset >= COLUMNS_PER_ROW:
        return replace(cursor, offset=cursor.offset - COLUMNS_PER_ROW)

    return cursor


def line_start(cursor: CursorState, length: int) -> CursorState:
    """Jump to the first byte of the row."""

    if length == 0:
        return cursor

    nibble = cursor.nibble
    if not cursor.ascii_mode and nibble == Nibble.RIGHT:
        nibble = Nibble.LEFT

    return replace(cursor, offset=row_start(cursor.offset), nibble=nibble)


def line_end(cursor: CursorState, length: int) -> CursorState:
    """Jump to the last byte of the row, or of the buffer if shorter."""

    if length == 0:
        return cursor

    offset = min(row_start(cursor.offset) + COLUMNS_PER_ROW - 1, last_offset(length))

    nibble = cursor.nibble
    if not cursor.ascii_mode and nibble == Nibble.LEFT:
        nibble = Nibble.RIGHT

    return replace(cursor, offset=offset, nibble=nibble)


def file_top(cursor: CursorState, length: int) -> CursorState:
    return replace(cursor, offset=0)


def file_bottom(cursor: CursorState, length: int) -> CursorState:
    return replace(cursor, offset=row_start(last_offset(length)))


def goto_line(cursor: CursorState, length: int, line: int) -> CursorState:
    """
    Jump to the start of a row, counting rows from 0.

    A target past the end lands on the row holding the last byte, so the
    cursor never rests on a row without bytes.
    """

    offset = min(line * COLUMNS_PER_ROW, last_offset(length))
    return replace(cursor, offset=row_start(offset))


def toggle_ascii(cursor: CursorState) -> CursorState:
    if cursor.ascii_mode:
        return replace(cursor, ascii_mode=False, nibble=Nibble.LEFT)

    return replace(cursor, ascii_mode=True)
