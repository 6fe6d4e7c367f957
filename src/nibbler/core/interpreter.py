"""
Incremental parser for the editor's key command language.

The interpreter sees every keystroke typed since the last resolved command
and decides whether they form a complete command, a prefix of one, or
nothing valid. The first key picks the command family, so no backtracking
is ever needed:

    h l j k 0 $ G x J ?     single key commands
    gg                      top of file
    <count>G, <count>Enter  go to row <count>
    r<key>                  replace nibble or byte under the cursor
    i<key>                  insert nibble or byte
    :text Enter             w, q, wq
    /text Enter             exact search
    \\text Enter             nibble wildcard search
    Escape                  abort whatever is pending

The interpreter never touches the buffer or the cursor.
"""

from typing import Dict, Final

from ..config import (
    BACKSPACE,
    BAD_COMMAND_MESSAGE,
    ENTER,
    ESCAPE,
    INVALID_KEY_MESSAGE,
)
from ..utils.hex_utils import (
    is_hex_char,
    is_printable,
    is_wildcard_char,
    parse_wildcard_pattern,
)
from .commands import CommandKind, ParseResult

SINGLE_KEY_COMMANDS: Final[Dict[str, CommandKind]] = {
    'h': CommandKind.MOVE_LEFT,
    'l': CommandKind.MOVE_RIGHT,
    'j': CommandKind.MOVE_DOWN,
    'k': CommandKind.MOVE_UP,
    '0': CommandKind.LINE_START,
    '$': CommandKind.LINE_END,
    'G': CommandKind.FILE_BOTTOM,
    'x': CommandKind.DELETE_BYTE,
    'J': CommandKind.TOGGLE_ASCII,
    '?': CommandKind.HELP,
}

EX_COMMANDS: Final[Dict[str, CommandKind]] = {
    'w': CommandKind.SAVE,
    'q': CommandKind.QUIT,
    'wq': CommandKind.SAVE_AND_QUIT,
}

EX_PREFIX: Final[str] = ':'
SEARCH_PREFIX: Final[str] = '/'
WILDCARD_PREFIX: Final[str] = '\\'
TEXT_PREFIXES: Final[str] = EX_PREFIX + SEARCH_PREFIX + WILDCARD_PREFIX

REPLACE_PREFIX: Final[str] = 'r'
INSERT_PREFIX: Final[str] = 'i'
TOP_PREFIX: Final[str] = 'g'

DIGITS: Final[str] = '0123456789'
COUNT_START: Final[str] = '123456789'
COUNT_TERMINATORS: Final[str] = 'G' + ENTER


def describe_key(key: str) -> str:
    """Readable name of a keystroke for status messages."""

    if is_printable(key):
        return key

    return repr(key)


def interpret(pending: str, ascii_mode: bool = False) -> ParseResult:
    """
    Parse the pending keystrokes.

    Args:
        pending (str): Keystrokes since the last resolved command, newest last
        ascii_mode (bool): Whether the cursor is on the ASCII pane, which
            decides what r and i accept

    Returns:
        ParseResult: INCOMPLETE, COMPLETE or INVALID
    """

    if not pending:
        return ParseResult.incomplete("")

    key = pending[-1]

    if key == ESCAPE:
        return ParseResult.complete(CommandKind.ABORT)

    if key == BACKSPACE:
        return _backspace(pending[:-1])

    head = pending[0]

    if head in TEXT_PREFIXES:
        return _interpret_text(pending)

    if head in COUNT_START:
        return _interpret_count(pending)

    if head == TOP_PREFIX:
        if len(pending) == 1:
            return ParseResult.incomplete(pending)
        if key == TOP_PREFIX:
            return ParseResult.complete(CommandKind.FILE_TOP)
        return _invalid_key(key)

    if head in (REPLACE_PREFIX, INSERT_PREFIX):
        return _interpret_data_key(pending, ascii_mode)

    if len(pending) == 1 and head in SINGLE_KEY_COMMANDS:
        return ParseResult.complete(SINGLE_KEY_COMMANDS[head])

    return _invalid_key(key)


def _invalid_key(key: str) -> ParseResult:
    return ParseResult.invalid(INVALID_KEY_MESSAGE.format(key=describe_key(key)))


def _backspace(prefix: str) -> ParseResult:
    """Drop the last unit of a partial command."""

    if not prefix:
        return ParseResult.complete(CommandKind.BACKSPACE)

    head = prefix[0]

    if head in TEXT_PREFIXES:
        # the prefix character itself stays, the command line remains open
        return ParseResult.incomplete(prefix[:-1] if len(prefix) > 1 else prefix)

    if head in (REPLACE_PREFIX, INSERT_PREFIX):
        return ParseResult.incomplete(prefix)

    return ParseResult.incomplete(prefix[:-1])


def _interpret_text(pending: str) -> ParseResult:
    """Handle :, / and \\ commands, which read text up to Enter."""

    if len(pending) == 1:
        return ParseResult.incomplete(pending)

    head, text, key = pending[0], pending[1:-1], pending[-1]

    if key == ENTER:
        return _finish_text(head, text)

    if not is_printable(key):
        return ParseResult.incomplete(pending[:-1])

    if head == WILDCARD_PREFIX and not is_wildcard_char(key):
        return _invalid_key(key)

    return ParseResult.incomplete(pending)


def _finish_text(head: str, text: str) -> ParseResult:
    if head == EX_PREFIX:
        kind = EX_COMMANDS.get(text)
        if kind is None:
            return ParseResult.invalid(BAD_COMMAND_MESSAGE)
        return ParseResult.complete(kind)

    if head == SEARCH_PREFIX:
        return ParseResult.complete(CommandKind.EXACT_SEARCH, text.encode('ascii'))

    nibbles = parse_wildcard_pattern(text)
    if nibbles is None:
        return ParseResult.invalid(BAD_COMMAND_MESSAGE)

    return ParseResult.complete(CommandKind.WILDCARD_SEARCH, nibbles)


def _interpret_count(pending: str) -> ParseResult:
    """Handle a row number followed by G or Enter."""

    key = pending[-1]

    if key in DIGITS:
        return ParseResult.incomplete(pending)

    if key in COUNT_TERMINATORS:
        return ParseResult.complete(CommandKind.GOTO_LINE, int(pending[:-1]))

    return _invalid_key(key)


def _interpret_data_key(pending: str, ascii_mode: bool) -> ParseResult:
    """Handle the key following r or i."""

    if len(pending) == 1:
        return ParseResult.incomplete(pending)

    head, key = pending[0], pending[-1]

    accepted = is_printable(key) if ascii_mode else is_hex_char(key)
    if not accepted:
        return _invalid_key(key)

    if head == REPLACE_PREFIX:
        return ParseResult.complete(CommandKind.REPLACE_BYTE, key)

    if ascii_mode:
        return ParseResult.complete(CommandKind.INSERT_BYTE, key)

    return ParseResult.complete(CommandKind.INSERT_NIBBLE, key)
