"""
Input handler module turning curses key codes into editor keystrokes.
"""

import curses
from typing import Dict, Final, Optional

from ..config import BACKSPACE, ENTER, ESCAPE
from ..core.session import Session
from .window import WindowManager

SPECIAL_KEYS: Final[Dict[int, str]] = {
    27: ESCAPE,
    10: ENTER,
    13: ENTER,
    curses.KEY_ENTER: ENTER,
    curses.KEY_BACKSPACE: BACKSPACE,
    127: BACKSPACE,
    8: BACKSPACE,
}

# Only used while nothing is pending, so they never end up in search text
NAVIGATION_ALIASES: Final[Dict[int, str]] = {
    curses.KEY_LEFT: 'h',
    curses.KEY_RIGHT: 'l',
    curses.KEY_UP: 'k',
    curses.KEY_DOWN: 'j',
    curses.KEY_HOME: '0',
    curses.KEY_END: '$',
}


class InputHandler:
    """Reads keys from curses and feeds them to the session."""

    def __init__(self, window_manager: WindowManager, session: Session) -> None:
        self.window_manager = window_manager
        self.session = session

    def translate(self, ch: int) -> Optional[str]:
        """Map a curses key code to a keystroke token, or None to ignore it."""

        if ch in SPECIAL_KEYS:
            return SPECIAL_KEYS[ch]

        if ch in NAVIGATION_ALIASES:
            if self.session.context.pending:
                return None
            return NAVIGATION_ALIASES[ch]

        if 0 <= ch < 128:
            return chr(ch)

        return None

    def read_key(self) -> Optional[str]:
        """Block for the next key. Terminal resizes are handled here."""

        ch = self.window_manager.stdscr.getch()

        if ch == curses.KEY_RESIZE:
            self.resize()
            return None

        return self.translate(ch)

    def resize(self) -> None:
        context = self.session.context
        self.window_manager.resize()
        context.viewport.resize(self.window_manager.rows_visible, context.cursor.offset)
