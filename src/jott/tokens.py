"""
Jott Token Definitions
======================

Token categories and the immutable token value produced by the lexer.

The lexeme carries the token's value; a TokenType is only a tag. Keywords
are not distinguished from identifiers at this layer, both are ID_KEYWORD.
"""

from dataclasses import dataclass
from enum import Enum, auto

from jott.errors import SourceLocation


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical categories of the Jott language."""

    # === Literals and Names ===
    NUMBER = auto()         # 12, 3.14, .5, 5.
    STRING = auto()         # "text" (quotes included in the lexeme)
    ID_KEYWORD = auto()     # identifiers and reserved words alike

    # === Punctuation ===
    SEMICOLON = auto()      # ;
    L_BRACE = auto()        # {
    R_BRACE = auto()        # }
    L_BRACKET = auto()      # [
    R_BRACKET = auto()      # ]
    COMMA = auto()          # ,
    COLON = auto()          # :
    FC_HEADER = auto()      # ::

    # === Operators ===
    ASSIGN = auto()         # =
    MATH_OP = auto()        # + - * /
    REL_OP = auto()         # < <= > >= != ==

    # === No category matched ===
    UNCLASSIFIED = auto()

    @property
    def is_classified(self) -> bool:
        return self is not TokenType.UNCLASSIFIED


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme from Jott source.

    Attributes:
        lexeme: Exact source text of the token, string quotes included
        source_file: Name of the file the token came from
        line_number: Line number in source (1-indexed)
        type: The TokenType classification
        column: Column of the first character (1-indexed)
    """
    lexeme: str
    source_file: str
    line_number: int
    type: TokenType
    column: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.line_number}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.source_file, self.line_number, self.column)

    @property
    def is_classified(self) -> bool:
        return self.type.is_classified
