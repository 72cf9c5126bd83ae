"""
Test cases for the steamacf tokenizer.

Tests focus on token accuracy, literal passthrough and error reporting.
"""

import io
import unittest

from steamacf.core.tokenizer import Token, Tokenizer, TokenType, tokenize
from steamacf.security.exceptions import (
    LimitExceededError,
    ParseError,
    UnexpectedCharacter,
    UnterminatedString,
)
from steamacf.utils.config import ParseLimits, ReaderConfig


class FailingStream(io.RawIOBase):
    """Binary stream that fails after handing out its data."""

    def __init__(self, data: bytes):
        self.data = data

    def readable(self):
        return True

    def read(self, size=-1):
        if not self.data:
            raise OSError("device went away")
        chunk, self.data = self.data[:size], self.data[size:]
        return chunk


class TestTokenizerAccuracy(unittest.TestCase):
    """Test tokenizer accuracy for various input patterns."""

    def test_round_trip_document_tokens(self):
        """Test the token sequence of a JSON-shaped document."""
        tokens = list(tokenize('{"a":"b","c":{"d":"e"}}'))
        expected = [
            Token.dict_start(), Token.string("a"), Token.string("b"),
            Token.string("c"), Token.dict_start(), Token.string("d"),
            Token.string("e"), Token.dict_end(), Token.dict_end(),
        ]
        self.assertEqual(tokens, expected)

    def test_vdf_layout_tokens(self):
        """Test tokenization of the tab-separated layout Steam writes."""
        text = '"AppState"\n{\n\t"appid"\t\t"220"\n\t"name"\t\t"Half-Life 2"\n}\n'
        tokens = list(tokenize(text))
        types = [t.type for t in tokens]
        self.assertEqual(types, [
            TokenType.STRING, TokenType.DICT_START,
            TokenType.STRING, TokenType.STRING,
            TokenType.STRING, TokenType.STRING,
            TokenType.DICT_END,
        ])
        self.assertEqual(tokens[5].value, "Half-Life 2")

    def test_empty_input_ends_stream(self):
        """Test that empty or blank input yields no tokens and no error."""
        self.assertEqual(list(tokenize(b"")), [])
        self.assertEqual(list(tokenize(b" \t\r\n\x0b\x0c")), [])

    def test_next_token_returns_none_at_end(self):
        """Test that next_token keeps signalling end of input."""
        tokenizer = Tokenizer.from_bytes(b'"x"')
        self.assertEqual(tokenizer.next_token(), Token.string("x"))
        self.assertIsNone(tokenizer.next_token())
        self.assertIsNone(tokenizer.next_token())

    def test_empty_string_literal(self):
        """Test that an empty literal is a valid string token."""
        self.assertEqual(list(tokenize(b'""')), [Token.string("")])

    def test_braces_inside_string_are_text(self):
        """Test that structural characters inside quotes are not tokens."""
        tokens = list(tokenize(b'"{ } : ,"'))
        self.assertEqual(tokens, [Token.string("{ } : ,")])

    def test_token_positions(self):
        """Test that tokens record where they start."""
        tokens = list(tokenize(b'"a"\n  {'))
        self.assertEqual(tokens[0].position.line, 1)
        self.assertEqual(tokens[0].position.column, 1)
        self.assertEqual(tokens[1].position.line, 2)
        self.assertEqual(tokens[1].position.column, 3)
        self.assertEqual(tokens[1].position.offset, 6)

    def test_position_ignored_by_equality(self):
        """Test that tokens compare structurally."""
        tokens = list(tokenize(b'   "k"'))
        self.assertIsNotNone(tokens[0].position)
        self.assertEqual(tokens[0], Token.string("k"))
        self.assertNotEqual(Token.string("k"), Token.string("K"))
        self.assertNotEqual(Token.dict_start(), Token.dict_end())


class TestStringPassthrough(unittest.TestCase):
    """Test that literals are passed through without decoding escapes."""

    def test_backslash_kept_verbatim(self):
        """Test that backslash sequences are not decoded."""
        tokens = list(tokenize(b'"C:\\\\Games\\n"'))
        self.assertEqual(tokens[0].value, "C:\\\\Games\\n")

    def test_escaped_quote_does_not_terminate(self):
        """Test that a backslash-protected quote stays inside the literal."""
        tokens = list(tokenize(b'"say \\"hi\\"" "next"'))
        self.assertEqual(tokens, [
            Token.string('say \\"hi\\"'), Token.string("next"),
        ])

    def test_escaped_backslash_before_quote_terminates(self):
        """Test that an escaped backslash does not protect the quote."""
        tokens = list(tokenize(b'"dir\\\\" "x"'))
        self.assertEqual(tokens, [Token.string("dir\\\\"), Token.string("x")])

    def test_latin1_default_is_byte_exact(self):
        """Test that non-ASCII bytes map one byte to one character."""
        raw = "Café".encode("utf-8")
        tokens = list(tokenize(b'"' + raw + b'"'))
        self.assertEqual(len(tokens[0].value), len(raw))
        self.assertEqual(tokens[0].value.encode("latin-1"), raw)

    def test_utf8_encoding_option(self):
        """Test decoding literals as UTF-8 on request."""
        config = ReaderConfig(encoding="utf-8")
        tokens = list(tokenize('"Café"'.encode("utf-8"), config))
        self.assertEqual(tokens[0].value, "Café")

    def test_invalid_encoding_is_parse_error(self):
        """Test that undecodable literal bytes raise a parse error."""
        config = ReaderConfig(encoding="utf-8")
        with self.assertRaises(ParseError):
            list(tokenize(b'"\xff\xfe"', config))


class TestTokenizerErrors(unittest.TestCase):
    """Test tokenizer failure modes."""

    def test_unterminated_string(self):
        """Test a literal missing its closing quote."""
        with self.assertRaises(UnterminatedString) as cm:
            list(tokenize(b'{"a":"b'))
        self.assertEqual(cm.exception.position.column, 6)

    def test_unexpected_character(self):
        """Test bytes that cannot start a token."""
        for text, char in [(b"123", "1"), (b"[", "["), (b"// c", "/"), (b"key", "k")]:
            with self.subTest(text=text):
                with self.assertRaises(UnexpectedCharacter) as cm:
                    list(tokenize(text))
                self.assertEqual(cm.exception.char, char)

    def test_unexpected_character_after_tokens(self):
        """Test that earlier tokens are delivered before the error."""
        tokenizer = Tokenizer.from_bytes(b'"a" x')
        self.assertEqual(tokenizer.next_token(), Token.string("a"))
        with self.assertRaises(UnexpectedCharacter) as cm:
            tokenizer.next_token()
        self.assertEqual(cm.exception.position.column, 5)

    def test_separators_rejected_in_strict_mode(self):
        """Test that JSON punctuation is an error without separator support."""
        with self.assertRaises(UnexpectedCharacter) as cm:
            list(tokenize(b'{"a":"b"}', ReaderConfig.strict()))
        self.assertEqual(cm.exception.char, ":")

    def test_string_length_limit(self):
        """Test that overlong literals are rejected."""
        config = ReaderConfig(limits=ParseLimits(max_string_length=4))
        self.assertEqual(list(tokenize(b'"abcd"', config)), [Token.string("abcd")])
        with self.assertRaises(LimitExceededError):
            list(tokenize(b'"abcde"', config))

    def test_io_error_propagates_unchanged(self):
        """Test that read failures are not turned into format errors."""
        tokenizer = Tokenizer(FailingStream(b'"a" '))
        self.assertEqual(tokenizer.next_token(), Token.string("a"))
        with self.assertRaises(OSError) as cm:
            tokenizer.next_token()
        self.assertNotIsInstance(cm.exception, ParseError)


if __name__ == '__main__':
    unittest.main()
