"""
nibbler: a modal hex editor driven by vim-style key commands.
"""

__version__ = "0.1.0"
