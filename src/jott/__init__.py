"""
Jott Tokenizer
==============

This package scans source code written in Jott, a small instructional
language, into a flat list of classified tokens for a downstream parser.

Main Components
---------------
- **lexer**: Line scanner and file-level lexer
- **classifier**: Maps a finished lexeme to its token type
- **tokens**: TokenType enumeration and the immutable Token value
- **errors**: Lexical and I/O error hierarchy
- **config**: Lexer options (encoding, strict mode)

Quick Start
-----------
Tokenize a file:
    >>> from jott import tokenize
    >>> for token in tokenize("program.jott"):
    ...     print(token.type.name, token.lexeme)

Tokenize a string:
    >>> from jott import JottLexer
    >>> JottLexer().tokenize_source("x = 5;")

Or use the command-line tool:
    $ jottlex program.jott
    $ jottlex --format json program.jott
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from jott.classifier import classify
from jott.config import LexerOptions
from jott.errors import (
    JottError,
    SourceLocation,
    LexicalError,
    StrayPeriodError,
    BareBangError,
    UnterminatedStringError,
    UnclassifiedLexemeError,
    JottIOError,
)
from jott.lexer import JottLexer, LineScanner, tokenize, tokenize_line
from jott.tokens import Token, TokenType

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "JottLexer",
    "LineScanner",
    "tokenize",
    "tokenize_line",
    "classify",
    "LexerOptions",
    # Tokens
    "Token",
    "TokenType",
    # Exception hierarchy
    "JottError",
    "SourceLocation",
    "LexicalError",
    "StrayPeriodError",
    "BareBangError",
    "UnterminatedStringError",
    "UnclassifiedLexemeError",
    "JottIOError",
]
