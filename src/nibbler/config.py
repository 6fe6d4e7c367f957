"""
Constants shared by the editor core and the curses front end.
"""

from typing import Final

COLUMNS_PER_ROW: Final[int] = 16

ESCAPE: Final[str] = "\x1b"
ENTER: Final[str] = "\n"
BACKSPACE: Final[str] = "\x7f"

HEX_DIGITS: Final[str] = "0123456789abcdefABCDEF"
WILDCARD_CHARS: Final[str] = "xX"
WILDCARD_NIBBLE: Final[int] = 16

# curses waits this many milliseconds after ESC for an escape sequence
ESCAPE_DELAY_MS: Final[int] = 25

BAD_COMMAND_MESSAGE: Final[str] = "Bad_command!"
INVALID_KEY_MESSAGE: Final[str] = "Invalid key: {key}"
NOT_FOUND_MESSAGE: Final[str] = "Pattern not found!"
FOUND_MESSAGE: Final[str] = "Found at 0x{offset}"
SAVED_MESSAGE: Final[str] = "Written {size} bytes"
SAVE_FAILED_MESSAGE: Final[str] = "File could not be saved!"
HELP_MESSAGE: Final[str] = (
    "hjkl move  0 $ line  gg G file  nG goto  r replace  i insert  "
    "x delete  J ascii  / find  \\ nibbles  :w :q :wq"
)
