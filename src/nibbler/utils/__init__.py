"""
Utility package for hex and search support functions.
"""

from .hex_utils import (
    is_hex_char,
    is_printable,
    parse_wildcard_pattern,
    to_nibbles,
    format_offset
)
from .search import SearchEngine, SearchResult

__all__ = [
    'is_hex_char',
    'is_printable',
    'parse_wildcard_pattern',
    'to_nibbles',
    'format_offset',
    'SearchEngine',
    'SearchResult'
]
