"""
Entry point for nibbler.
"""

import argparse
import curses
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .config import ESCAPE_DELAY_MS
from .core.buffer import ByteBuffer
from .core.context import EditorContext
from .core.session import Session
from .ui.input_handler import InputHandler
from .ui.window import WindowManager

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nibbler",
        description="nibbler - modal hex editor with vim-like keys"
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log",
        metavar="FILE",
        help="Write debug log to FILE"
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=str,
        help="File to edit, created if missing"
    )
    return parser


def setup_logging(log_file: Optional[str]) -> None:
    """Log to a file when asked; anything on stderr would garble the screen."""

    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
        return

    logging.basicConfig(handlers=[logging.NullHandler()])


def main_with_context(stdscr: 'curses.window', context: EditorContext) -> None:
    """Run the session inside curses."""

    curses.curs_set(0)

    window_manager = WindowManager(stdscr)
    session = Session(context)
    input_handler = InputHandler(window_manager, session)
    input_handler.resize()

    session.run(input_handler.read_key, window_manager.draw)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.path:
        parser.print_usage()
        return 1

    setup_logging(args.log)

    try:
        buf = ByteBuffer.open(args.path)
    except OSError as e:
        print(f"Error loading {args.path}: {e}", file=sys.stderr)
        return 1

    os.environ.setdefault("ESCDELAY", str(ESCAPE_DELAY_MS))

    try:
        curses.wrapper(main_with_context, EditorContext(buffer=buf))
    except KeyboardInterrupt:
        pass
    finally:
        buf.close()

    logger.info("Session ended")
    return 0


if __name__ == "__main__":
    sys.exit(main())
