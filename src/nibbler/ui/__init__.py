"""
UI package for the curses front end.

This package implements the WindowManager that draws the hex and ASCII
panes, and the InputHandler that turns curses key codes into keystrokes.
"""

from .window import WindowManager
from .input_handler import InputHandler

__all__ = ['WindowManager', 'InputHandler']
