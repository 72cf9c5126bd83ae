"""
Exception hierarchy for steamacf.

Every error raised by the tokenizer or navigator derives from AcfError. The
two layers each own a subtree: ParseError for problems found while turning
bytes into tokens, StreamError for tokens that break the expected document
structure. I/O failures are never wrapped; they surface as OSError.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..core.tokenizer import Token
    from ..streaming.reader import Position


class AcfError(Exception):
    """Base exception for all steamacf errors."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    @property
    def kind(self) -> str:
        """Short error kind used in command-line reports."""
        return type(self).__name__

    def _format_message(self) -> str:
        parts = [self.message]

        if self.position:
            parts.append(
                f" at line {self.position.line}, column {self.position.column}"
            )

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)


class ParseError(AcfError):
    """Raised when the byte stream cannot be split into tokens."""


class UnexpectedCharacter(ParseError):
    """A byte outside '{', '}', '"' and whitespace started a token."""

    def __init__(self, char: str, position: Optional["Position"] = None):
        self.char = char
        super().__init__(
            f"Unexpected character {char!r}",
            position,
            ErrorSuggestionEngine.suggest_for_unexpected_character(char),
        )


class UnterminatedString(ParseError):
    """End of input was reached inside a quoted literal."""

    def __init__(self, position: Optional["Position"] = None):
        super().__init__(
            "Unterminated string literal",
            position,
            ErrorSuggestionEngine.suggest_for_unterminated_string(),
        )


class UnexpectedEndOfInput(ParseError):
    """A token was required but the stream had nothing left."""

    def __init__(self, position: Optional["Position"] = None):
        super().__init__("Unexpected end of input", position)


class LimitExceededError(ParseError):
    """A configured size or depth limit was exceeded."""

    def __init__(
        self,
        limit_name: str,
        value: int,
        limit: int,
        position: Optional["Position"] = None,
    ):
        self.limit_name = limit_name
        self.value = value
        self.limit = limit
        super().__init__(f"{limit_name} {value} exceeds limit {limit}", position)


class StreamError(AcfError):
    """Raised when well-formed tokens violate the document structure."""


class UnexpectedToken(StreamError):
    """A token did not match a structurally required expectation."""

    def __init__(self, token: "Token"):
        self.token = token
        super().__init__(f"Unexpected token {token!r}", token.position)


def format_path(path: Iterable[str]) -> str:
    """Render a key path the way error messages show it: ``.a.b.c``."""
    return "".join(f".{key}" for key in path)


class PathNotFound(StreamError):
    """A key path selection ran off the end of some dictionary level."""

    def __init__(self, path: Iterable[str]):
        self.path = list(path)
        super().__init__(f"Path not found {format_path(self.path)}")


class ErrorSuggestionEngine:
    """Generates hints for common authoring mistakes."""

    @staticmethod
    def suggest_for_unexpected_character(char: str) -> list[str]:
        """Generate suggestions for a byte that cannot start a token."""
        suggestions = []

        if char.isdigit() or char in "-.":
            suggestions.append("Numbers must be quoted: every value is a string")
        elif char.isalpha() or char == "_":
            suggestions.append("Keys and values must be wrapped in double quotes")
        elif char == "'":
            suggestions.append("Use double quotes instead of single quotes")
        elif char in "[]":
            suggestions.append("Lists are not supported, use a nested dictionary")
        elif char == "/":
            suggestions.append("Comments are not supported")

        return suggestions

    @staticmethod
    def suggest_for_unterminated_string() -> list[str]:
        """Generate suggestions for a literal that never closes."""
        return [
            "Add the missing closing quote",
            "Check for a trailing backslash escaping the closing quote",
        ]
