"""
Session state shared by the session loop, the executor and the renderer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional

from .buffer import ByteBuffer
from .cursor import CursorState, Nibble
from .viewport import Viewport


class Mode(Enum):
    NAVIGATION = "navigation"
    REPLACE_PENDING = "replace"
    INSERT_PENDING = "insert"
    SEARCH_PENDING = "search"
    COMMAND_PENDING = "command"


class RenderState(NamedTuple):
    """Everything the renderer needs to draw one frame."""
    window: bytes
    cursor_in_window: int
    columns_per_row: int
    mode: Mode
    echo_text: str
    nibble: Nibble
    ascii_mode: bool
    screen_offset_rows: int
    modified: bool = False


@dataclass
class EditorContext:
    """Buffer, cursor and input state of one editing session."""
    buffer: ByteBuffer = field(default_factory=ByteBuffer)
    cursor: CursorState = field(default_factory=CursorState)
    mode: Mode = Mode.NAVIGATION
    pending: str = ""
    viewport: Viewport = field(default_factory=Viewport)
    status_message: Optional[str] = None
    running: bool = True

    @property
    def length(self) -> int:
        return self.buffer.get_size()

    def render_state(self) -> RenderState:
        """Snapshot of the visible window for the renderer."""

        start, end = self.viewport.visible_range(self.length)

        if self.pending:
            echo_text = self.pending
        else:
            echo_text = self.status_message or ""

        return RenderState(
            window=self.buffer.get_range(start, end),
            cursor_in_window=self.cursor.offset - start,
            columns_per_row=self.viewport.columns_per_row,
            mode=self.mode,
            echo_text=echo_text,
            nibble=self.cursor.nibble,
            ascii_mode=self.cursor.ascii_mode,
            screen_offset_rows=self.viewport.screen_offset_rows,
            modified=self.buffer.modified,
        )
