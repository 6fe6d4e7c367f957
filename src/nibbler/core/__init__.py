"""
Core package for the byte editor.

This package implements the editing core: the ByteBuffer holding the file's
bytes, the two-level cursor, the scroll model, the key command interpreter
and the executor that applies commands, and the Session driving them.
"""

from .buffer import ByteBuffer
from .commands import Command, CommandKind, ParseResult, ParseStatus
from .context import EditorContext, Mode, RenderState
from .cursor import CursorState, Nibble
from .interpreter import interpret
from .executor import execute
from .session import Session
from .viewport import Viewport

__all__ = [
    'ByteBuffer',
    'Command',
    'CommandKind',
    'CursorState',
    'EditorContext',
    'Mode',
    'Nibble',
    'ParseResult',
    'ParseStatus',
    'RenderState',
    'Session',
    'Viewport',
    'execute',
    'interpret',
]
