"""
Buffer module for holding and persisting the raw bytes being edited.
"""

import logging
import os
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)


class ByteBuffer:
    """Main buffer class for handling byte data and its backing file."""

    def __init__(self, initial_data: bytes = b'') -> None:
        self.data = bytearray(initial_data)
        self.modified = False
        self.filename: Optional[str] = None
        self.file: Optional[BinaryIO] = None

    @classmethod
    def open(cls, filename: str) -> 'ByteBuffer':
        """
        Open a file read-write, creating it if it does not exist.

        The handle stays open for the whole session and is only touched
        again by save().

        Raises:
            OSError: If the file cannot be opened or read
        """

        fd = os.open(filename, os.O_RDWR | os.O_CREAT, 0o644)
        file = os.fdopen(fd, 'r+b')
        try:
            data = file.read()
        except OSError:
            file.close()
            raise

        buf = cls(data)
        buf.filename = filename
        buf.file = file
        logger.info("Opened %s (%d bytes)", filename, len(data))
        return buf

    def get_size(self) -> int:
        """Get the size of the buffer in bytes."""

        return len(self.data)

    def get_byte(self, position: int) -> int:
        """Get the byte at the specified position."""

        return self.data[position]

    def get_range(self, start: int, end: int) -> bytes:
        """Get the bytes in the half-open range [start, end)."""

        return bytes(self.data[start:end])

    def insert_byte(self, position: int, value: int) -> None:
        """Insert a byte at the specified position."""

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        position = max(0, min(position, len(self.data)))

        self.data.insert(position, value)
        self.modified = True

    def delete_byte(self, position: int) -> None:
        """Delete a byte at the specified position."""

        if not 0 <= position < len(self.data):
            return

        del self.data[position]
        self.modified = True

    def replace_byte(self, position: int, value: int) -> None:
        """Replace a byte at the specified position."""

        if not 0 <= value <= 255:
            raise ValueError("Byte value must be between 0 and 255")

        if not 0 <= position < len(self.data):
            return

        if self.data[position] == value:
            return

        self.data[position] = value
        self.modified = True

    def save(self) -> int:
        """
        Write the buffer to the backing file.

        The file is overwritten from byte 0 and truncated to the buffer's
        length, so shrinking the buffer shrinks the file.

        Returns:
            int: Number of bytes written

        Raises:
            IOError: If there is no backing file or writing fails
        """

        if self.file is None:
            raise IOError("Failed to save file: no file is open")

        try:
            self.file.seek(0)
            self.file.write(self.data)
            self.file.truncate(len(self.data))
            self.file.flush()
        except (OSError, ValueError) as e:
            raise IOError(f"Failed to save file: {str(e)}")

        self.modified = False
        logger.info("Saved %d bytes to %s", len(self.data), self.filename)
        return len(self.data)

    def close(self) -> None:
        """Close the backing file and release resources."""

        if not self.file:
            return

        self.file.close()
        self.file = None
