"""
Search functionality over the byte buffer.
"""

import logging
from typing import Optional, Sequence, TYPE_CHECKING

from ..config import WILDCARD_NIBBLE
from .hex_utils import to_nibbles

if TYPE_CHECKING:
    from ..core.buffer import ByteBuffer

logger = logging.getLogger(__name__)


class SearchResult:
    """Represents a search result: the matched byte and nibble positions."""

    def __init__(self, position: int, nibble_position: Optional[int] = None):
        self.position = position
        self.nibble_position = position * 2 if nibble_position is None else nibble_position

    @property
    def on_low_nibble(self) -> bool:
        """True if the match starts on the low nibble of its byte."""
        return self.nibble_position % 2 == 1


class SearchEngine:
    """Handles exact and nibble wildcard searches in the buffer.

    Both searches scan the whole buffer from offset 0 and return the first
    match; they are not relative to the cursor.
    """

    def __init__(self, buffer: 'ByteBuffer') -> None:
        self.buffer = buffer

    def find_exact(self, pattern: bytes) -> Optional[SearchResult]:
        """Search for a literal byte sequence."""

        if not pattern:
            return None

        pos = self.buffer.data.find(pattern)
        if pos < 0:
            logger.debug("Exact search for %r found nothing", pattern)
            return None

        return SearchResult(pos)

    def find_nibbles(self, pattern: Sequence[int]) -> Optional[SearchResult]:
        """
        Search for a nibble pattern at any nibble position.

        Args:
            pattern (Sequence[int]): Nibble values in [0, 15], or
                WILDCARD_NIBBLE to match any nibble

        Returns:
            Optional[SearchResult]: The first match; position is the byte
            holding the first matched nibble
        """

        if not pattern:
            return None

        nibbles = to_nibbles(self.buffer.data)
        width = len(pattern)

        for start in range(len(nibbles) - width + 1):
            for i, wanted in enumerate(pattern):
                if wanted != WILDCARD_NIBBLE and nibbles[start + i] != wanted:
                    break
            else:
                return SearchResult(start // 2, nibble_position=start)

        logger.debug("Nibble search for %r found nothing", pattern)
        return None
