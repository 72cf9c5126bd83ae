"""
Test cases for the steamacf exception hierarchy.

Tests focus on layer membership, payloads and message formatting.
"""

import unittest

from steamacf.core.tokenizer import Token
from steamacf.security.exceptions import (
    AcfError,
    ErrorSuggestionEngine,
    LimitExceededError,
    ParseError,
    PathNotFound,
    StreamError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnterminatedString,
    format_path,
)
from steamacf.streaming.reader import Position


class TestAcfError(unittest.TestCase):
    """Test base AcfError exception class."""

    def test_basic_error_creation(self):
        """Test basic error creation with message only."""
        error = AcfError("Test error message")

        self.assertEqual(error.message, "Test error message")
        self.assertIsNone(error.position)
        self.assertEqual(error.suggestions, [])
        self.assertEqual(str(error), "Test error message")
        self.assertEqual(error.kind, "AcfError")

    def test_error_with_position(self):
        """Test error creation with position information."""
        error = AcfError("Bad input", position=Position(line=3, column=15))
        self.assertIn("at line 3, column 15", str(error))

    def test_error_with_suggestions(self):
        """Test error creation with suggestions."""
        suggestions = ["Check for missing quotes", "Verify braces"]
        error = AcfError("Syntax error", suggestions=suggestions)

        error_str = str(error)
        self.assertIn("Suggestions:", error_str)
        self.assertIn("Check for missing quotes", error_str)
        self.assertIn("Verify braces", error_str)


class TestErrorLayers(unittest.TestCase):
    """Test which layer each error belongs to."""

    def test_parse_layer(self):
        """Test tokenizer-level errors."""
        for error in [
            UnexpectedCharacter("x"),
            UnterminatedString(),
            UnexpectedEndOfInput(),
            LimitExceededError("String length", 5, 4),
        ]:
            with self.subTest(kind=error.kind):
                self.assertIsInstance(error, ParseError)
                self.assertNotIsInstance(error, StreamError)
                self.assertIsInstance(error, AcfError)

    def test_stream_layer(self):
        """Test navigation-level errors."""
        for error in [UnexpectedToken(Token.dict_end()), PathNotFound(["a"])]:
            with self.subTest(kind=error.kind):
                self.assertIsInstance(error, StreamError)
                self.assertNotIsInstance(error, ParseError)

    def test_io_errors_are_separate(self):
        """Test that format errors are never OSErrors."""
        self.assertFalse(issubclass(AcfError, OSError))


class TestErrorPayloads(unittest.TestCase):
    """Test the diagnostic data carried by each error."""

    def test_unexpected_character(self):
        """Test the offending character is kept and shown."""
        error = UnexpectedCharacter("x", Position(1, 4, 3))
        self.assertEqual(error.char, "x")
        self.assertIn("'x'", str(error))
        self.assertIn("column 4", str(error))

    def test_unexpected_token(self):
        """Test the offending token is kept and shown."""
        token = Token.string("oops", Position(2, 1, 10))
        error = UnexpectedToken(token)
        self.assertEqual(error.token, token)
        self.assertEqual(error.position, token.position)
        self.assertIn("Str('oops')", str(error))

    def test_path_not_found(self):
        """Test the missing path is kept and rendered with dots."""
        error = PathNotFound(iter(["Registry", "HKCU"]))
        self.assertEqual(error.path, ["Registry", "HKCU"])
        self.assertEqual(str(error), "Path not found .Registry.HKCU")

    def test_limit_exceeded(self):
        """Test limit details in the message."""
        error = LimitExceededError("Nesting depth", 101, 100)
        self.assertEqual(error.value, 101)
        self.assertEqual(error.limit, 100)
        self.assertIn("Nesting depth 101 exceeds limit 100", str(error))

    def test_format_path(self):
        """Test path rendering helper."""
        self.assertEqual(format_path([]), "")
        self.assertEqual(format_path(["a", "b"]), ".a.b")


class TestErrorSuggestionEngine(unittest.TestCase):
    """Test ErrorSuggestionEngine functionality."""

    def test_suggestions_for_common_mistakes(self):
        """Test hints for bytes that cannot start a token."""
        cases = {"1": "quoted", "k": "double quotes", "'": "single", "[": "Lists", "/": "Comments"}
        for char, fragment in cases.items():
            with self.subTest(char=char):
                suggestions = ErrorSuggestionEngine.suggest_for_unexpected_character(char)
                self.assertTrue(any(fragment in s for s in suggestions))

    def test_no_suggestion_for_unknown(self):
        """Test that unusual bytes produce no hint."""
        self.assertEqual(ErrorSuggestionEngine.suggest_for_unexpected_character("@"), [])

    def test_unterminated_string_suggestions(self):
        """Test hints for an unclosed literal."""
        error = UnterminatedString()
        self.assertTrue(any("quote" in s for s in error.suggestions))


if __name__ == '__main__':
    unittest.main()
