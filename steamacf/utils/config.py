"""
Configuration and limits for steamacf reading and writing.

This module defines the reader limits, decoding options and JSON output
settings shared by the tokenizer, navigator and emitter.
"""

from dataclasses import dataclass, field
from typing import Optional

DEFAULT_MAX_STRING_LENGTH = 1024 * 1024
DEFAULT_MAX_NESTING_DEPTH = 100


@dataclass
class ParseLimits:
    """Security limits for reading to prevent resource exhaustion."""

    max_string_length: int = DEFAULT_MAX_STRING_LENGTH
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self) -> None:
        if self.max_string_length <= 0:
            raise ValueError("max_string_length must be positive")
        if self.max_nesting_depth <= 0:
            raise ValueError("max_nesting_depth must be positive")


@dataclass
class ReaderConfig:
    """Configuration options for tokenizing and navigating a document.

    ``encoding`` is applied to the raw bytes of each string literal once the
    closing quote is found. The default ``latin-1`` maps every byte to exactly
    one character, so literals pass through unchanged and re-encode to the
    original bytes.

    ``allow_separators`` lets ``:`` and ``,`` appear between tokens, which
    makes JSON-shaped input readable. They carry no meaning either way.
    """

    limits: ParseLimits = field(default_factory=ParseLimits)
    encoding: str = "latin-1"
    allow_separators: bool = True

    @classmethod
    def strict(cls, limits: Optional[ParseLimits] = None) -> "ReaderConfig":
        """Accept only the bare key-value grammar."""
        return cls(limits=limits or ParseLimits(), allow_separators=False)

    @classmethod
    def lenient(cls, limits: Optional[ParseLimits] = None) -> "ReaderConfig":
        """Tolerate JSON punctuation between tokens."""
        return cls(limits=limits or ParseLimits(), allow_separators=True)


@dataclass
class WriterConfig:
    """JSON rendering settings."""

    compact: bool = False
    indent: int = 2

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("indent must not be negative")

    @classmethod
    def pretty(cls, indent: int = 2) -> "WriterConfig":
        """Indented output, one field per line."""
        return cls(compact=False, indent=indent)

    @classmethod
    def minified(cls) -> "WriterConfig":
        """Output without any insignificant whitespace."""
        return cls(compact=True)
