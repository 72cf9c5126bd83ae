"""
Depth-tracking navigation over the token stream.

The navigator never builds a tree. It keeps a single depth counter next to the
tokenizer's read position, which is enough to skip whole subtrees and to walk
down a key path while visiting each token at most once.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import BinaryIO, Optional, Union

from ..security.exceptions import (
    PathNotFound,
    UnexpectedEndOfInput,
    UnexpectedToken,
)
from ..security.limits import LimitValidator
from ..utils.config import ReaderConfig
from .tokenizer import Token, Tokenizer, TokenType

logger = logging.getLogger(__name__)


class Navigator:
    """Cursor over a key-value document with field selection primitives.

    Navigation starts at depth 0, inside the implicit root of a document made
    of bare pairs. When a document opens with an explicit brace, the first
    selection steps into it.
    """

    def __init__(
        self,
        source: Union[Tokenizer, BinaryIO],
        config: Optional[ReaderConfig] = None,
    ):
        if isinstance(source, Tokenizer):
            self.tokens = source
        else:
            self.tokens = Tokenizer(source, config)
        self.config = self.tokens.config
        self.validator = LimitValidator(self.config.limits)
        self._depth = 0
        self.tokens_read = 0
        # only a tokenizer that has read nothing yet can yield the root brace
        self._root_pending = self.tokens.current_position().offset == 0
        self._root_brace: Optional[Token] = None

    @classmethod
    def from_bytes(
        cls, data: bytes, config: Optional[ReaderConfig] = None
    ) -> "Navigator":
        return cls(Tokenizer.from_bytes(data, config))

    @classmethod
    def from_string(
        cls, text: str, config: Optional[ReaderConfig] = None
    ) -> "Navigator":
        return cls(Tokenizer.from_string(text, config))

    @property
    def depth(self) -> int:
        """Number of dictionaries opened and not yet closed."""
        return self._depth

    def try_next(self) -> Optional[Token]:
        """Pull one token and update the depth, or None at end of input."""
        token = self.tokens.next_token()
        if token is None:
            return None

        self.tokens_read += 1
        if self._root_pending:
            self._root_pending = False
            if token.type is TokenType.DICT_START:
                self._root_brace = token
        if token.type is TokenType.DICT_START:
            self._depth += 1
            self.validator.enter_structure(token.position)
        elif token.type is TokenType.DICT_END:
            self._depth -= 1
            self.validator.exit_structure()
        return token

    def expect_next(self) -> Token:
        """Pull one token that the grammar requires to exist."""
        token = self.try_next()
        if token is None:
            raise UnexpectedEndOfInput(self.tokens.current_position())
        return token

    def expect(self, expected: Token) -> None:
        """Pull one token and require it to equal ``expected``."""
        token = self.expect_next()
        if token != expected:
            raise UnexpectedToken(token)

    def read_string(self) -> str:
        """Pull one token and require it to be a string literal."""
        token = self.expect_next()
        if not token.is_string:
            raise UnexpectedToken(token)
        return token.value

    def close_dict(self) -> None:
        """Consume the rest of the dictionary entered most recently.

        Nested dictionaries inside it are consumed too; the depth ends one
        below its value at the call.
        """
        target = self._depth - 1
        skipped = 0
        while self._depth > target:
            self.expect_next()
            skipped += 1
        logger.debug(
            "Skipped %d tokens closing dictionary at depth %d", skipped, target + 1
        )

    def skip_value(self) -> None:
        """Consume exactly one value: a string or a whole dictionary."""
        token = self.expect_next()
        if token.type is TokenType.DICT_START:
            self.close_dict()
        elif token.type is TokenType.DICT_END:
            raise UnexpectedToken(token)

    def select(self, target: str) -> bool:
        """Advance to the key ``target`` at the current level.

        Returns True with the cursor right before the key's value. Returns
        False when the current dictionary ends first (the closing brace is
        consumed) or the input ends at a key boundary. Values of other keys
        are always consumed, so a value that happens to equal ``target`` is
        never mistaken for a key.
        """
        while True:
            token = self.try_next()
            if token is None or token.type is TokenType.DICT_END:
                return False
            if token.type is TokenType.DICT_START:
                if token is self._root_brace:
                    continue
                raise UnexpectedToken(token)
            if token.value == target:
                return True
            self.skip_value()

    def try_select_path(self, path: Iterable[str]) -> bool:
        """Walk down ``path`` one dictionary level per key.

        Every key after the first requires the previous key's value to be a
        dictionary. Returns False as soon as a key is missing; an empty path
        succeeds without reading anything.
        """
        first = True
        for key in path:
            if not first:
                self.expect(Token.dict_start())
            first = False
            if not self.select(key):
                logger.debug("Key %r not found at depth %d", key, self._depth)
                return False
        return True

    def select_path(self, path: Iterable[str]) -> None:
        """Walk down ``path``, raising PathNotFound if any key is missing."""
        path = list(path)
        if not self.try_select_path(path):
            raise PathNotFound(path)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.try_next()
        if token is None:
            raise StopIteration
        return token
