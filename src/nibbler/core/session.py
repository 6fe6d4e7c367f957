"""
Session loop: read a key, interpret, execute, render.
"""

import logging
from typing import Callable, Optional

from .commands import ParseStatus
from .context import EditorContext, Mode, RenderState
from .cursor import clamp
from .executor import execute, mode_for_pending
from .interpreter import interpret

logger = logging.getLogger(__name__)


class Session:
    """Drives one editing session over an EditorContext."""

    def __init__(self, context: EditorContext) -> None:
        self.context = context

    def handle_key(self, key: str) -> bool:
        """Feed one keystroke. Returns False once the session should end."""

        context = self.context
        context.status_message = None
        context.pending += key

        result = interpret(context.pending, context.cursor.ascii_mode)

        if result.status == ParseStatus.INCOMPLETE:
            context.pending = result.pending
            context.mode = mode_for_pending(context.pending)
        elif result.status == ParseStatus.INVALID:
            logger.debug("Invalid input %r: %s", context.pending, result.message)
            context.pending = ""
            context.mode = Mode.NAVIGATION
            context.status_message = result.message
        else:
            execute(context, result.command)

        if context.mode != Mode.INSERT_PENDING:
            context.cursor = clamp(context.cursor, context.length)

        context.viewport.follow(context.cursor.offset)
        return context.running

    def run(self, read_key: Callable[[], Optional[str]], render: Callable[[RenderState], None]) -> None:
        """
        Loop until quit.

        Args:
            read_key: Blocks for the next keystroke; None means no key
            render: Draws a RenderState
        """

        render(self.context.render_state())

        while self.context.running:
            key = read_key()
            if key is not None:
                self.handle_key(key)

            render(self.context.render_state())
