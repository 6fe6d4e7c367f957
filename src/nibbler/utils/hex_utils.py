"""
Utility functions for hex digits and nibble-level views of byte data.
"""

from typing import List, Optional, Tuple

from ..config import HEX_DIGITS, WILDCARD_CHARS, WILDCARD_NIBBLE


def is_hex_char(char: str) -> bool:
    """Check if a single character is a valid hex digit."""

    return len(char) == 1 and char in HEX_DIGITS


def is_printable(char: str) -> bool:
    """Check if a single character is printable ASCII (32-126)."""

    return len(char) == 1 and 32 <= ord(char) <= 126


def is_wildcard_char(char: str) -> bool:
    """Check if a character may appear in a nibble wildcard pattern."""

    return is_hex_char(char) or (len(char) == 1 and char in WILDCARD_CHARS)


def hex_value(char: str) -> int:
    """
    Convert a hex digit to its value.

    Raises:
        ValueError: If char is not a hex digit
    """

    if not is_hex_char(char):
        raise ValueError(f"Not a hex digit: {char!r}")

    return int(char, 16)


def to_nibbles(data: bytes) -> List[int]:
    """
    Split bytes into nibbles, high nibble first.

    Args:
        data (bytes): Source bytes

    Returns:
        List[int]: Two values in [0, 15] per byte
    """

    nibbles = []
    for byte in data:
        nibbles.append(byte >> 4)
        nibbles.append(byte & 0x0F)

    return nibbles


def parse_wildcard_pattern(pattern: str) -> Optional[Tuple[int, ...]]:
    """
    Parse a nibble pattern such as "4x1" into nibble values.

    Args:
        pattern (str): Hex digits, with 'x' or 'X' standing for any nibble

    Returns:
        Tuple[int, ...]: Nibble values, WILDCARD_NIBBLE for wildcards, or
        None if the pattern holds any other character
    """

    nibbles = []
    for char in pattern:
        if char in WILDCARD_CHARS:
            nibbles.append(WILDCARD_NIBBLE)
            continue

        if not is_hex_char(char):
            return None

        nibbles.append(int(char, 16))

    return tuple(nibbles)


def set_high_nibble(byte: int, value: int) -> int:
    return (byte & 0x0F) | (value << 4)


def set_low_nibble(byte: int, value: int) -> int:
    return (byte & 0xF0) | value


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string
    """

    return f"{offset:0{width}X}"

