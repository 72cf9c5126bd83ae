"""
Lexer for steamacf - turns a byte stream into structural tokens.
"""

import io
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Optional, Union

from ..security.exceptions import ParseError, UnexpectedCharacter, UnterminatedString
from ..security.limits import LimitValidator
from ..streaming.reader import ByteReader, Position
from ..utils.config import ReaderConfig
from .constants import BACKSLASH, LBRACE, QUOTE, RBRACE, SEPARATORS, WHITESPACE


class TokenType(Enum):
    """Token types of the key-value format."""

    STRING = "STRING"
    DICT_START = "DICT_START"
    DICT_END = "DICT_END"


@dataclass(frozen=True)
class Token:
    """Token with type, value and the position it started at.

    Position is informational only and never part of equality, so a token
    read from a document compares equal to one built with the constructors.
    """

    type: TokenType
    value: str
    position: Optional[Position] = field(default=None, compare=False, repr=False)

    @classmethod
    def string(cls, text: str, position: Optional[Position] = None) -> "Token":
        return cls(TokenType.STRING, text, position)

    @classmethod
    def dict_start(cls, position: Optional[Position] = None) -> "Token":
        return cls(TokenType.DICT_START, "{", position)

    @classmethod
    def dict_end(cls, position: Optional[Position] = None) -> "Token":
        return cls(TokenType.DICT_END, "}", position)

    @property
    def is_string(self) -> bool:
        return self.type is TokenType.STRING

    def __repr__(self) -> str:
        if self.type is TokenType.STRING:
            return f"Str({self.value!r})"
        return "DictStart" if self.type is TokenType.DICT_START else "DictEnd"


class Tokenizer:
    """Lexical analyzer producing one token per call.

    Only the string literal currently being scanned is held in memory.
    """

    def __init__(self, stream: BinaryIO, config: Optional[ReaderConfig] = None):
        self.config = config or ReaderConfig()
        self.reader = ByteReader(stream)
        self.validator = LimitValidator(self.config.limits)

    @classmethod
    def from_bytes(
        cls, data: bytes, config: Optional[ReaderConfig] = None
    ) -> "Tokenizer":
        """Create a tokenizer over an in-memory document."""
        return cls(io.BytesIO(data), config)

    @classmethod
    def from_string(
        cls, text: str, config: Optional[ReaderConfig] = None
    ) -> "Tokenizer":
        """Create a tokenizer over text, encoded with the configured codec."""
        config = config or ReaderConfig()
        return cls(io.BytesIO(text.encode(config.encoding)), config)

    def current_position(self) -> Position:
        """Get the current cursor position."""
        return self.reader.current_position()

    def next_token(self) -> Optional[Token]:
        """Read the next token, or None once the input is exhausted."""
        while True:
            pos = self.reader.current_position()
            byte = self.reader.read_byte()

            if byte is None:
                return None
            if byte in WHITESPACE:
                continue
            if byte in SEPARATORS and self.config.allow_separators:
                continue
            if byte == LBRACE:
                return Token.dict_start(pos)
            if byte == RBRACE:
                return Token.dict_end(pos)
            if byte == QUOTE:
                return Token.string(self._read_string(pos), pos)

            raise UnexpectedCharacter(chr(byte), pos)

    def _read_string(self, start: Position) -> str:
        """Read a quoted literal up to the next unescaped quote.

        A backslash protects the following byte from ending the literal;
        both bytes are kept as they are.
        """
        buf = bytearray()
        escaped = False

        while True:
            byte = self.reader.read_byte()
            if byte is None:
                raise UnterminatedString(start)

            if byte == QUOTE and not escaped:
                try:
                    return buf.decode(self.config.encoding)
                except UnicodeDecodeError as err:
                    raise ParseError(
                        f"String literal is not valid {self.config.encoding}", start
                    ) from err

            escaped = byte == BACKSLASH and not escaped
            buf.append(byte)
            self.validator.validate_string_length(len(buf), start)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token


def tokenize(
    source: Union[bytes, str, BinaryIO], config: Optional[ReaderConfig] = None
) -> Iterator[Token]:
    """Tokenize a document given as bytes, text or a binary stream."""
    if isinstance(source, bytes):
        return Tokenizer.from_bytes(source, config)
    if isinstance(source, str):
        return Tokenizer.from_string(source, config)
    return Tokenizer(source, config)
