"""
Jott Tokenizer Error Hierarchy
==============================

This module defines the exception hierarchy for the Jott tokenizer.
All exceptions inherit from JottError, allowing callers to catch every
tokenizer failure with a single except clause if desired.

Exception Hierarchy
-------------------
JottError (base)
├── LexicalError - malformed lexical sequence on a line
│   ├── StrayPeriodError - '.' with no adjacent digit
│   ├── BareBangError - '!' not followed by '='
│   ├── UnterminatedStringError - missing closing quote
│   └── UnclassifiedLexemeError - unknown lexeme (strict mode only)
└── JottIOError - source cannot be opened or read

Error Message Format
--------------------
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in Jott source code.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Base Exception
# =============================================================================

class JottError(Exception):
    """
    Base exception for all Jott tokenizer errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            hello.jott:3:7: error: '!' must be followed by '='
                if[a ! b]
                      ^
            hint: use '!=' for inequality
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(JottError):
    """
    Malformed lexical sequence in a line of Jott source.

    Raising this abandons tokenization of the whole source unit. No
    tokens collected from earlier lines are returned.
    """
    pass


class StrayPeriodError(LexicalError):
    """A '.' that is neither preceded nor followed by a digit."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unexpected '.' outside a numeric literal",
            location=location,
            hint="a decimal point must touch a digit, as in '3.14', '.5' or '5.'",
            source_line=source_line,
        )


class BareBangError(LexicalError):
    """A '!' that does not start the '!=' operator."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "'!' must be followed by '='",
            location=location,
            hint="use '!=' for inequality",
            source_line=source_line,
        )


class UnterminatedStringError(LexicalError):
    """
    Unterminated string literal.

    String literals cannot span lines, so the closing quote must appear
    on the same line as the opening one.
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add closing '\"' before the end of the line",
            source_line=source_line,
        )


class UnclassifiedLexemeError(LexicalError):
    """Lexeme that matches no token category, raised in strict mode."""

    def __init__(
        self,
        lexeme: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.lexeme = lexeme
        super().__init__(
            f"unrecognized lexeme {lexeme!r}",
            location=location,
            source_line=source_line,
        )


# =============================================================================
# I/O Errors
# =============================================================================

class JottIOError(JottError):
    """
    Source file cannot be opened or read.

    The underlying OSError is chained as __cause__.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"cannot read '{path}': {reason}")
