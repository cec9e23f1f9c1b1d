"""
Jott Lexer (Tokenizer)
======================

This module converts Jott source text into a list of classified tokens
for the parser.

Scanning is line-oriented: every physical line is scanned on its own and
no lexeme may span two lines. A malformed line aborts the whole source
unit; the caller gets an exception, never a partial token list.

Lexical Rules
-------------
- ``#`` starts a comment running to the end of the line
- Whitespace separates lexemes and is never tokenized
- Digits accumulate into a pending lexeme; a ``.`` touching a digit joins it
- A letter starts an identifier run of letters and digits
- ``<`` ``>`` ``=`` ``!`` take an optional following ``=``; a bare ``!``
  is an error
- ``"`` starts a string literal closed by the next ``"`` on the same line
- ``::`` is a function header marker, ``:`` a colon
- Any other character is a single-character lexeme

Example Usage
-------------
>>> from jott.lexer import tokenize_line
>>> for token in tokenize_line("x = 5;"):
...     print(token)
Token(ID_KEYWORD, 'x', 1:1)
Token(ASSIGN, '=', 1:3)
Token(NUMBER, '5', 1:5)
Token(SEMICOLON, ';', 1:6)
"""

from pathlib import Path
from typing import Iterable, Optional, Union
import logging
import re

from jott.classifier import classify
from jott.config import LexerOptions
from jott.errors import (
    BareBangError,
    JottIOError,
    SourceLocation,
    StrayPeriodError,
    UnclassifiedLexemeError,
    UnterminatedStringError,
)
from jott.tokens import Token, TokenType

logger = logging.getLogger(__name__)

# Physical line terminators, matching universal-newline file reading
LINE_BREAK = re.compile(r"\r\n|\r|\n")

COMMENT_MARKER = "#"
RELATIONAL_STARTS = "<>=!"

# Unicode spaces that do not separate lexemes
NON_SEPARATING_SPACES = "\u00a0\u2007\u202f\u0085"


# =============================================================================
# Line Scanner
# =============================================================================

class LineScanner:
    """
    Scans a single line of Jott source into tokens.

    The scanner makes one left-to-right pass, looking at most one character
    ahead or behind. Digits are collected in a pending buffer that is
    flushed (classified and emitted) when a delimiter arrives, so token
    order always matches source order.

    Usage:
        scanner = LineScanner("x = 5;", "main.jott", 1)
        tokens = scanner.scan()

    Attributes:
        line: Text of the line, without its line terminator
        filename: Name of the source file (for tokens and errors)
        line_number: Line number in the source file (1-indexed)
        strict: Reject lexemes that match no token category
    """

    def __init__(
        self,
        line: str,
        filename: str = "<input>",
        line_number: int = 1,
        strict: bool = False,
    ):
        self.line = line
        self.filename = filename
        self.line_number = line_number
        self.strict = strict

        self._pos = 0
        self._pending: list[str] = []
        self._pending_column = 0
        self._tokens: list[Token] = []

    def scan(self) -> list[Token]:
        """
        Scan the line and return its tokens in source order.

        Raises:
            LexicalError: If the line contains a malformed lexeme
        """
        while not self._at_end():
            char = self._peek()

            if char == COMMENT_MARKER:
                break

            if char.isspace() and char not in NON_SEPARATING_SPACES:
                self._flush()
                self._advance()
            elif char.isdigit():
                self._append_pending(self._advance())
            elif char.isalpha():
                self._scan_identifier()
            elif char == ".":
                self._scan_period()
            elif char in RELATIONAL_STARTS:
                self._scan_relational()
            elif char == '"':
                self._scan_string()
            elif char == ":":
                self._scan_colon()
            else:
                self._flush()
                column = self._column()
                self._emit(self._advance(), column)

        self._flush()
        return self._tokens

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        return self._pos >= len(self.line)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset.

        Returns empty string outside the line.
        """
        pos = self._pos + offset
        if pos < 0 or pos >= len(self.line):
            return ""
        return self.line[pos]

    def _advance(self) -> str:
        """Consume and return the current character."""
        if self._at_end():
            return ""
        char = self.line[self._pos]
        self._pos += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character if it matches expected."""
        if self._peek() == expected:
            self._advance()
            return True
        return False

    def _column(self) -> int:
        """Column of the current character (1-indexed)."""
        return self._pos + 1

    def _location(self, column: int) -> SourceLocation:
        return SourceLocation(self.filename, self.line_number, column)

    # =========================================================================
    # Pending Lexeme Buffer
    # =========================================================================

    def _append_pending(self, char: str) -> None:
        if not self._pending:
            # _pos already points past char
            self._pending_column = self._pos
        self._pending.append(char)

    def _flush(self) -> None:
        """Emit the pending lexeme, if any, as a token."""
        if self._pending:
            lexeme = "".join(self._pending)
            self._pending.clear()
            self._emit(lexeme, self._pending_column)

    def _emit(self, lexeme: str, column: int) -> None:
        token_type = classify(lexeme)
        if token_type is TokenType.UNCLASSIFIED:
            if self.strict:
                raise UnclassifiedLexemeError(lexeme, self._location(column), self.line)
            logger.debug(f"{self.filename}:{self.line_number}:{column}: unclassified lexeme {lexeme!r}")
        self._tokens.append(
            Token(
                lexeme=lexeme,
                source_file=self.filename,
                line_number=self.line_number,
                type=token_type,
                column=column,
            )
        )

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_identifier(self) -> None:
        """
        Scan a run of letters and digits and emit it at once.

        Digits already pending (as in ``5x``) become part of the same lexeme.
        """
        self._append_pending(self._advance())
        while self._peek() and (self._peek().isalpha() or self._peek().isdigit()):
            self._append_pending(self._advance())
        self._flush()

    def _scan_period(self) -> None:
        """
        Treat '.' as a decimal point when a digit sits on either side.

        Raises:
            StrayPeriodError: If neither neighbour is a digit
        """
        if self._peek(1).isdigit() or self._peek(-1).isdigit():
            self._append_pending(self._advance())
            return

        column = self._column()
        self._pending.clear()
        raise StrayPeriodError(self._location(column), self.line)

    def _scan_relational(self) -> None:
        """
        Scan ``<``, ``>``, ``=``, ``!`` with an optional trailing ``=``.

        Raises:
            BareBangError: If '!' is not followed by '='
        """
        self._flush()
        column = self._column()
        char = self._advance()

        if self._match("="):
            self._emit(char + "=", column)
        elif char == "!":
            raise BareBangError(self._location(column), self.line)
        else:
            self._emit(char, column)

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal, quotes included.

        Characters between the quotes are taken verbatim; there are no
        escape sequences.

        Raises:
            UnterminatedStringError: If the line ends before the closing quote
        """
        self._flush()
        column = self._column()
        chars = [self._advance()]

        while not self._at_end() and self._peek() != '"':
            chars.append(self._advance())

        if self._at_end():
            raise UnterminatedStringError(self._location(column), self.line)

        chars.append(self._advance())
        self._emit("".join(chars), column)

    def _scan_colon(self) -> None:
        """Scan ':' or the '::' function header marker."""
        self._flush()
        column = self._column()
        self._advance()
        if self._match(":"):
            self._emit("::", column)
        else:
            self._emit(":", column)


# =============================================================================
# Lexer
# =============================================================================

class JottLexer:
    """
    Tokenizes whole Jott source units.

    Each line is handed to a LineScanner and the resulting tokens are
    concatenated in line order. Any error aborts the unit: the exception
    propagates and no tokens are returned.

    Usage:
        lexer = JottLexer()
        tokens = lexer.tokenize_file("program.jott")

    Attributes:
        options: Encoding and strictness settings
    """

    def __init__(self, options: Optional[LexerOptions] = None):
        self.options = options or LexerOptions()

    def tokenize_file(self, path: Union[str, Path]) -> list[Token]:
        """
        Tokenize a source file.

        Args:
            path: Path of the source file, absolute or relative

        Returns:
            All tokens of the file in source order

        Raises:
            LexicalError: If any line is malformed
            JottIOError: If the file cannot be opened or read
        """
        filename = str(path)
        logger.debug(f"Tokenizing {filename} (encoding={self.options.encoding})")

        try:
            with open(path, encoding=self.options.encoding, newline=None) as source:
                return self._tokenize_lines((line.rstrip("\n") for line in source), filename)
        except UnicodeDecodeError as e:
            raise JottIOError(filename, str(e)) from e
        except OSError as e:
            raise JottIOError(filename, e.strerror or str(e)) from e

    def tokenize_source(self, source: str, filename: str = "<input>") -> list[Token]:
        """
        Tokenize in-memory source text.

        Args:
            source: Jott source code
            filename: Name recorded in tokens and error messages

        Raises:
            LexicalError: If any line is malformed
        """
        lines = LINE_BREAK.split(source)
        if lines and lines[-1] == "":
            lines.pop()
        return self._tokenize_lines(lines, filename)

    def _tokenize_lines(self, lines: Iterable[str], filename: str) -> list[Token]:
        tokens: list[Token] = []
        line_count = 0

        for line_number, line in enumerate(lines, start=1):
            scanner = LineScanner(line, filename, line_number, strict=self.options.strict)
            line_tokens = scanner.scan()
            logger.debug(f"{filename}:{line_number}: {len(line_tokens)} tokens")
            tokens.extend(line_tokens)
            line_count = line_number

        logger.debug(f"Tokenized {filename}: {len(tokens)} tokens from {line_count} lines")
        return tokens


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(path: Union[str, Path], options: Optional[LexerOptions] = None) -> list[Token]:
    """Tokenize a Jott source file. See JottLexer.tokenize_file."""
    return JottLexer(options).tokenize_file(path)


def tokenize_line(
    line: str,
    filename: str = "<input>",
    line_number: int = 1,
    strict: bool = False,
) -> list[Token]:
    """Tokenize a single line of Jott source. See LineScanner."""
    return LineScanner(line, filename, line_number, strict=strict).scan()
