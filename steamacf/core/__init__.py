"""
steamacf Core Reading Engine.

This module provides tokenizing, navigation and JSON rendering.
"""

from .emitter import JsonWriter, pipe_to_json, to_json, write_value_json
from .navigator import Navigator
from .tokenizer import Token, Tokenizer, TokenType, tokenize

__all__ = [
    'tokenize', 'Tokenizer', 'Token', 'TokenType',
    'Navigator',
    'JsonWriter', 'pipe_to_json', 'to_json', 'write_value_json',
]
