"""
JSON rendering of a token stream.

Strings are written between quotes exactly as read; the format has no escape
decoding, so nothing is escaped on the way out either.
"""

import io
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO

from ..security.exceptions import UnexpectedEndOfInput, UnexpectedToken
from ..security.limits import LimitValidator
from ..utils.config import ParseLimits, WriterConfig
from .tokenizer import Token, TokenType


class JsonWriter:
    """Low-level JSON text writer tracking indentation depth."""

    def __init__(self, out: TextIO, config: Optional[WriterConfig] = None):
        self.out = out
        self.config = config or WriterConfig()
        self.depth = 0

    def _newline(self) -> None:
        if not self.config.compact:
            self.out.write("\n" + " " * (self.depth * self.config.indent))

    def _write_string(self, s: str) -> None:
        self.out.write(f'"{s}"')

    def string_value(self, s: str) -> None:
        self._write_string(s)

    def begin_obj(self) -> None:
        self.depth += 1
        self.out.write("{")

    def end_obj(self, empty: bool = False) -> None:
        self.depth -= 1
        if not empty:
            self._newline()
        self.out.write("}")

    def begin_field(self, name: str) -> None:
        self._newline()
        self._write_string(name)
        self.out.write(":" if self.config.compact else ": ")

    def end_field(self) -> None:
        self.out.write(",")


class _Pipe:
    """Drives a JsonWriter from a token iterator, one dictionary per call."""

    def __init__(
        self,
        tokens: Iterator[Token],
        writer: JsonWriter,
        limits: Optional[ParseLimits] = None,
    ):
        self.tokens = tokens
        self.writer = writer
        self.validator = LimitValidator(limits)

    def _next(self) -> Optional[Token]:
        return next(self.tokens, None)

    def write_root(self) -> None:
        first = self._next()
        if first is None:
            self.writer.begin_obj()
            self.writer.end_obj(empty=True)
            return

        if first.type is TokenType.DICT_START:
            self.write_object(explicit=True)
            trailing = self._next()
            if trailing is not None:
                raise UnexpectedToken(trailing)
        elif first.type is TokenType.STRING:
            self.write_object(explicit=False, first_key=first)
        else:
            raise UnexpectedToken(first)

    def write_object(
        self, explicit: bool, first_key: Optional[Token] = None
    ) -> None:
        """Write one dictionary whose opening brace was already consumed.

        An explicit dictionary ends at its closing brace; the implicit root
        ends with the input.
        """
        self.validator.enter_structure()
        self.writer.begin_obj()
        empty = True
        token = first_key if first_key is not None else self._next()

        while True:
            if token is None:
                if explicit:
                    raise UnexpectedEndOfInput()
                break
            if token.type is TokenType.DICT_END:
                if not explicit:
                    raise UnexpectedToken(token)
                break
            if token.type is not TokenType.STRING:
                raise UnexpectedToken(token)

            if not empty:
                self.writer.end_field()
            empty = False
            self.writer.begin_field(token.value)
            self.write_value()
            token = self._next()

        self.writer.end_obj(empty=empty)
        self.validator.exit_structure()

    def write_value(self) -> None:
        token = self._next()
        if token is None:
            raise UnexpectedEndOfInput()
        if token.type is TokenType.STRING:
            self.writer.string_value(token.value)
        elif token.type is TokenType.DICT_START:
            self.write_object(explicit=True)
        else:
            raise UnexpectedToken(token)


def pipe_to_json(
    tokens: Iterable[Token],
    out: TextIO,
    config: Optional[WriterConfig] = None,
    limits: Optional[ParseLimits] = None,
) -> None:
    """Render a whole document's tokens as one JSON object on ``out``."""
    _Pipe(iter(tokens), JsonWriter(out, config), limits).write_root()


def write_value_json(
    tokens: Iterable[Token],
    out: TextIO,
    config: Optional[WriterConfig] = None,
    limits: Optional[ParseLimits] = None,
) -> None:
    """Render the single value at the front of ``tokens``.

    A string renders as a JSON string; a dictionary renders up to its
    closing brace and nothing after it is read.
    """
    _Pipe(iter(tokens), JsonWriter(out, config), limits).write_value()


def to_json(
    tokens: Iterable[Token],
    config: Optional[WriterConfig] = None,
    limits: Optional[ParseLimits] = None,
) -> str:
    """Render a token stream as a JSON string."""
    buffer = io.StringIO()
    pipe_to_json(tokens, buffer, config, limits)
    return buffer.getvalue()
