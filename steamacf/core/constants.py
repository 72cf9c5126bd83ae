"""
Byte classes used by the tokenizer.
"""

LBRACE = ord("{")
RBRACE = ord("}")
QUOTE = ord('"')
BACKSLASH = ord("\\")

# ASCII whitespace: space, tab, newline, carriage return, vertical tab, form feed
WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")

# JSON punctuation tolerated between tokens when separators are allowed
SEPARATORS = frozenset(b":,")
