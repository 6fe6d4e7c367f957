"""
Command values produced by the interpreter and consumed by the executor.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple, Union

CommandArgument = Union[str, int, bytes, Tuple[int, ...], None]


class CommandKind(Enum):
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    MOVE_DOWN = auto()
    MOVE_UP = auto()
    LINE_START = auto()
    LINE_END = auto()
    FILE_TOP = auto()
    FILE_BOTTOM = auto()
    GOTO_LINE = auto()
    REPLACE_BYTE = auto()
    INSERT_NIBBLE = auto()
    INSERT_BYTE = auto()
    DELETE_BYTE = auto()
    TOGGLE_ASCII = auto()
    EXACT_SEARCH = auto()
    WILDCARD_SEARCH = auto()
    SAVE = auto()
    SAVE_AND_QUIT = auto()
    QUIT = auto()
    HELP = auto()
    BACKSPACE = auto()
    ABORT = auto()


@dataclass(frozen=True)
class Command:
    """A fully parsed command and its argument, if it takes one."""
    kind: CommandKind
    argument: CommandArgument = None


class ParseStatus(Enum):
    INCOMPLETE = "incomplete"
    COMPLETE = "complete"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of interpreting the pending keystrokes.

    For INCOMPLETE results ``pending`` is the text to keep waiting on, which
    can be shorter than what was typed (Backspace, ignored keys).
    """
    status: ParseStatus
    command: Optional[Command] = None
    pending: str = ""
    message: Optional[str] = None

    @classmethod
    def incomplete(cls, pending: str) -> 'ParseResult':
        return cls(ParseStatus.INCOMPLETE, pending=pending)

    @classmethod
    def complete(cls, kind: CommandKind, argument: CommandArgument = None) -> 'ParseResult':
        return cls(ParseStatus.COMPLETE, command=Command(kind, argument))

    @classmethod
    def invalid(cls, message: str) -> 'ParseResult':
        return cls(ParseStatus.INVALID, message=message)
