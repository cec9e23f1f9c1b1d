"""
Lexeme Classifier
=================

Maps a finished lexeme to its TokenType. Rules are tried in order:

1. Numeric literal: ``12``, ``12.``, ``12.5``, ``.5``  -> NUMBER
2. Double-quoted text with no inner quote              -> STRING
3. Letter or underscore, then letters/digits/``_``     -> ID_KEYWORD
4. Fixed punctuation and operator table
5. Anything else                                       -> UNCLASSIFIED
"""

import re
from types import MappingProxyType

from jott.tokens import TokenType


NUMBER_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")
STRING_PATTERN = re.compile(r'"[^"]*"')
IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Read-only view; nothing may register new punctuation at runtime
PUNCTUATION: MappingProxyType = MappingProxyType({
    ";": TokenType.SEMICOLON,
    "{": TokenType.L_BRACE,
    "}": TokenType.R_BRACE,
    "[": TokenType.L_BRACKET,
    "]": TokenType.R_BRACKET,
    ",": TokenType.COMMA,
    ":": TokenType.COLON,
    "::": TokenType.FC_HEADER,
    "=": TokenType.ASSIGN,
    '"': TokenType.STRING,
    "+": TokenType.MATH_OP,
    "-": TokenType.MATH_OP,
    "*": TokenType.MATH_OP,
    "/": TokenType.MATH_OP,
    "<": TokenType.REL_OP,
    "<=": TokenType.REL_OP,
    ">": TokenType.REL_OP,
    ">=": TokenType.REL_OP,
    "!=": TokenType.REL_OP,
    "==": TokenType.REL_OP,
})


def classify(lexeme: str) -> TokenType:
    """
    Return the TokenType for a complete lexeme.

    Never raises; a lexeme outside every category is UNCLASSIFIED.
    """
    if NUMBER_PATTERN.fullmatch(lexeme):
        return TokenType.NUMBER
    if STRING_PATTERN.fullmatch(lexeme):
        return TokenType.STRING
    if IDENTIFIER_PATTERN.fullmatch(lexeme):
        return TokenType.ID_KEYWORD
    return PUNCTUATION.get(lexeme, TokenType.UNCLASSIFIED)
