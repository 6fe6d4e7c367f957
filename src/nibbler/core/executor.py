"""
Command executor: applies parsed commands to the buffer and cursor.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, Final, Optional

from ..config import (
    FOUND_MESSAGE,
    HELP_MESSAGE,
    NOT_FOUND_MESSAGE,
    SAVE_FAILED_MESSAGE,
    SAVED_MESSAGE,
)
from ..utils.hex_utils import format_offset, hex_value, set_high_nibble, set_low_nibble
from ..utils.search import SearchEngine, SearchResult
from . import cursor as cursor_moves
from .commands import Command, CommandKind
from .context import EditorContext, Mode
from .cursor import CursorState, Nibble
from .interpreter import (
    EX_PREFIX,
    INSERT_PREFIX,
    REPLACE_PREFIX,
    SEARCH_PREFIX,
    WILDCARD_PREFIX,
)

logger = logging.getLogger(__name__)

MOVEMENTS: Final[Dict[CommandKind, Callable[[CursorState, int], CursorState]]] = {
    CommandKind.MOVE_LEFT: cursor_moves.move_left,
    CommandKind.BACKSPACE: cursor_moves.move_left,
    CommandKind.MOVE_RIGHT: cursor_moves.move_right,
    CommandKind.MOVE_DOWN: cursor_moves.move_down,
    CommandKind.MOVE_UP: cursor_moves.move_up,
    CommandKind.LINE_START: cursor_moves.line_start,
    CommandKind.LINE_END: cursor_moves.line_end,
    CommandKind.FILE_TOP: cursor_moves.file_top,
    CommandKind.FILE_BOTTOM: cursor_moves.file_bottom,
}


def mode_for_pending(pending: str) -> Mode:
    """Editor mode implied by a partially typed command."""

    if not pending:
        return Mode.NAVIGATION

    head = pending[0]
    if head == REPLACE_PREFIX:
        return Mode.REPLACE_PENDING
    if head == INSERT_PREFIX:
        return Mode.INSERT_PENDING
    if head in (SEARCH_PREFIX, WILDCARD_PREFIX):
        return Mode.SEARCH_PENDING
    if head == EX_PREFIX:
        return Mode.COMMAND_PENDING

    return Mode.NAVIGATION


def execute(context: EditorContext, command: Command) -> None:
    """
    Apply a command to the session.

    Pending input is cleared first; commands that keep a multi-key mode open
    (inserting) put their prefix back.
    """

    logger.debug("Executing %s %r at offset %d", command.kind.name, command.argument, context.cursor.offset)

    context.pending = ""

    movement = MOVEMENTS.get(command.kind)
    if movement is not None:
        context.cursor = movement(context.cursor, context.length)
    else:
        _HANDLERS[command.kind](context, command)

    context.mode = mode_for_pending(context.pending)


def _goto_line(context: EditorContext, command: Command) -> None:
    context.cursor = cursor_moves.goto_line(context.cursor, context.length, command.argument)


def _toggle_ascii(context: EditorContext, command: Command) -> None:
    context.cursor = cursor_moves.toggle_ascii(context.cursor)


def _abort(context: EditorContext, command: Command) -> None:
    context.cursor = cursor_moves.clamp(context.cursor, context.length)


def _help(context: EditorContext, command: Command) -> None:
    context.status_message = HELP_MESSAGE


def _replace_byte(context: EditorContext, command: Command) -> None:
    """Overwrite the byte, or in hex mode only the nibble, under the cursor."""

    cursor = context.cursor
    if cursor.offset >= context.length:
        return

    if cursor.ascii_mode:
        value = ord(command.argument)
    else:
        digit = hex_value(command.argument)
        old = context.buffer.get_byte(cursor.offset)
        if cursor.nibble == Nibble.LEFT:
            value = set_high_nibble(old, digit)
        else:
            value = set_low_nibble(old, digit)

    context.buffer.replace_byte(cursor.offset, value)


def _insert_nibble(context: EditorContext, command: Command) -> None:
    """
    Insert one hex digit.

    On the left nibble a new byte is created holding the digit in its high
    half; the following digit fills its low half and moves on to the next
    byte.
    """

    cursor = context.cursor
    digit = hex_value(command.argument)

    if cursor.nibble == Nibble.LEFT or cursor.offset >= context.length:
        context.buffer.insert_byte(cursor.offset, digit << 4)
        context.cursor = replace(cursor, nibble=Nibble.RIGHT)
    else:
        old = context.buffer.get_byte(cursor.offset)
        context.buffer.replace_byte(cursor.offset, set_low_nibble(old, digit))
        context.cursor = replace(cursor, offset=cursor.offset + 1, nibble=Nibble.LEFT)

    context.pending = INSERT_PREFIX


def _insert_byte(context: EditorContext, command: Command) -> None:
    cursor = context.cursor
    context.buffer.insert_byte(cursor.offset, ord(command.argument))
    context.cursor = replace(cursor, offset=cursor.offset + 1)
    context.pending = INSERT_PREFIX


def _delete_byte(context: EditorContext, command: Command) -> None:
    if context.length == 0:
        return

    offset = context.cursor.offset
    context.buffer.delete_byte(offset)

    if offset >= context.length:
        context.cursor = replace(context.cursor, offset=cursor_moves.last_offset(context.length))


def _jump_to(context: EditorContext, result: Optional[SearchResult]) -> None:
    if result is None:
        context.status_message = NOT_FOUND_MESSAGE
        return

    cursor = replace(context.cursor, offset=result.position)
    if not cursor.ascii_mode:
        cursor = replace(cursor, nibble=Nibble.RIGHT if result.on_low_nibble else Nibble.LEFT)

    context.cursor = cursor
    context.status_message = FOUND_MESSAGE.format(offset=format_offset(result.position))
    logger.info("Search match at offset %d", result.position)


def _exact_search(context: EditorContext, command: Command) -> None:
    engine = SearchEngine(context.buffer)
    _jump_to(context, engine.find_exact(command.argument))


def _wildcard_search(context: EditorContext, command: Command) -> None:
    engine = SearchEngine(context.buffer)
    _jump_to(context, engine.find_nibbles(command.argument))


def _save(context: EditorContext) -> bool:
    try:
        size = context.buffer.save()
    except IOError as e:
        logger.warning("Save failed: %s", e)
        context.status_message = SAVE_FAILED_MESSAGE
        return False

    context.status_message = SAVED_MESSAGE.format(size=size)
    return True


def _save_command(context: EditorContext, command: Command) -> None:
    _save(context)


def _save_and_quit(context: EditorContext, command: Command) -> None:
    if _save(context):
        context.running = False


def _quit(context: EditorContext, command: Command) -> None:
    if context.buffer.modified:
        logger.warning("Quitting with unsaved changes to %s", context.buffer.filename)
    context.running = False


_HANDLERS: Final[Dict[CommandKind, Callable[[EditorContext, Command], None]]] = {
    CommandKind.GOTO_LINE: _goto_line,
    CommandKind.REPLACE_BYTE: _replace_byte,
    CommandKind.INSERT_NIBBLE: _insert_nibble,
    CommandKind.INSERT_BYTE: _insert_byte,
    CommandKind.DELETE_BYTE: _delete_byte,
    CommandKind.TOGGLE_ASCII: _toggle_ascii,
    CommandKind.EXACT_SEARCH: _exact_search,
    CommandKind.WILDCARD_SEARCH: _wildcard_search,
    CommandKind.SAVE: _save_command,
    CommandKind.SAVE_AND_QUIT: _save_and_quit,
    CommandKind.QUIT: _quit,
    CommandKind.HELP: _help,
    CommandKind.ABORT: _abort,
}
