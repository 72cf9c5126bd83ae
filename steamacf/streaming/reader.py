"""
Forward-only byte source with cursor tracking.

The reader hands out one byte at a time from a binary file-like object and
keeps the line, column and offset of the next unread byte. It never rewinds.
"""

from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass(frozen=True)
class Position:
    """Position in the source (1-based line and column, 0-based byte offset)."""

    line: int
    column: int
    offset: int = 0


class ByteReader:
    """Streaming byte reader over a binary file-like object.

    Read failures from the underlying stream are not caught here; the
    OSError reaches whoever is driving the tokenizer.
    """

    def __init__(self, stream: BinaryIO):
        self.stream = stream
        self.offset = 0
        self.line = 1
        self.column = 1

    def current_position(self) -> Position:
        """Get the position of the next unread byte."""
        return Position(self.line, self.column, self.offset)

    def read_byte(self) -> Optional[int]:
        """Consume and return the next byte, or None at end of input."""
        chunk = self.stream.read(1)
        if not chunk:
            return None

        byte = chunk[0]
        self.offset += 1
        if byte == 0x0A:
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return byte
