"""
steamacf - streaming reader for Valve's nested key-value format.

Steam keeps app manifests (.acf) and its registry (registry.vdf) in a small
textual format of quoted keys and values grouped by braces. steamacf reads it
forward-only, one token at a time, and lets callers jump straight to the
fields they need without loading the document.

Key Features:
- Lazy tokenizer over any binary stream
- Navigator with depth tracking, subtree skipping and key path selection
- JSON rendering of a token stream, compact or indented
- Steam registry lookup of installed apps
- Security limits on string length and nesting depth

Quick Start:
    import steamacf

    with open("appmanifest_220.acf", "rb") as f:
        nav = steamacf.Navigator(f)
        nav.select_path(["AppState", "name"])
        print(nav.read_string())

    print(steamacf.to_json(steamacf.tokenize(b'"a" { "b" "c" }')))
"""

from .core.emitter import JsonWriter, pipe_to_json, to_json, write_value_json
from .core.navigator import Navigator
from .core.tokenizer import Token, Tokenizer, TokenType, tokenize
from .security.exceptions import (
    AcfError,
    LimitExceededError,
    ParseError,
    PathNotFound,
    StreamError,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnterminatedString,
)
from .steam.registry import AppRegistry, load_registry
from .streaming.reader import Position
from .utils.config import ParseLimits, ReaderConfig, WriterConfig

__version__ = "0.1.0"
__author__ = "steamacf contributors"

__all__ = [
    # Reading
    "tokenize", "Tokenizer", "Token", "TokenType", "Position", "Navigator",
    # Output
    "to_json", "pipe_to_json", "write_value_json", "JsonWriter",
    # Steam
    "load_registry", "AppRegistry",
    # Configuration classes
    "ParseLimits", "ReaderConfig", "WriterConfig",
    # Exception classes
    "AcfError", "ParseError", "StreamError", "UnexpectedCharacter",
    "UnterminatedString", "UnexpectedEndOfInput", "LimitExceededError",
    "UnexpectedToken", "PathNotFound",
]
