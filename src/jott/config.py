"""
Lexer Configuration
===================

Options controlling how source files are read and how strictly lexemes
are checked. Configuration can come from:
- Default values (defined here)
- Keyword arguments
- Environment variables (LexerOptions.from_env)
"""

from dataclasses import dataclass
import os


TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        encoding: Text encoding used to read source files
        strict: If True, a lexeme matching no token category aborts
                tokenization with UnclassifiedLexemeError. If False (default),
                it is emitted as an UNCLASSIFIED token.
    """
    encoding: str = "utf-8"
    strict: bool = False

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            JOTT_ENCODING: Source file encoding
            JOTT_STRICT: Enable strict mode (1, true, yes, on)
        """
        options = cls()

        if encoding := os.environ.get("JOTT_ENCODING"):
            options.encoding = encoding

        if strict := os.environ.get("JOTT_STRICT"):
            options.strict = strict.strip().lower() in TRUE_VALUES

        return options
