"""
jottlex - Jott Tokenizer Command-Line Interface
===============================================

This module implements the command-line interface for the Jott tokenizer.
It prints the token stream of a Jott source file, one token per line or
as JSON, for inspecting what the parser will receive.

Usage Examples
--------------
Print tokens:
    $ jottlex program.jott

JSON output to a file:
    $ jottlex program.jott --format json -o program.tokens.json

Reject unrecognized lexemes:
    $ jottlex --strict program.jott

Verbose mode:
    $ jottlex -v program.jott

Environment
-----------
JOTT_ENCODING and JOTT_STRICT set defaults that the command-line
options override.
"""

import codecs
import json
import logging
from pathlib import Path
from typing import Optional

import click

from jott import __version__
from jott.cli.errors import handle_cli_exception
from jott.config import LexerOptions
from jott.lexer import JottLexer
from jott.tokens import Token

logger = logging.getLogger(__name__)


# =============================================================================
# Output Formatting
# =============================================================================

def format_text(tokens: list[Token]) -> str:
    """Format tokens as tab-separated 'line:col  TYPE  lexeme' rows."""
    rows = [
        f"{token.line_number}:{token.column}\t{token.type.name}\t{token.lexeme}"
        for token in tokens
    ]
    return "\n".join(rows)


def format_json(tokens: list[Token]) -> str:
    """Format tokens as a JSON array of objects."""
    records = [
        {
            "lexeme": token.lexeme,
            "type": token.type.name,
            "file": token.source_file,
            "line": token.line_number,
            "column": token.column,
        }
        for token in tokens
    ]
    return json.dumps(records, indent=2)


def validate_encoding(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Reject encoding names Python does not know."""
    if value is None:
        return value
    try:
        codecs.lookup(value)
    except LookupError:
        raise click.BadParameter(f"unknown encoding '{value}'")
    return value


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write tokens to this file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format (default: text)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on lexemes that match no token type",
)
@click.option(
    "--encoding",
    type=str,
    default=None,
    callback=validate_encoding,
    help="Source file encoding (default: utf-8)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="jottlex")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: str,
    strict: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize a Jott source file.

    INPUT_FILE is the Jott source file to tokenize.

    \b
    Examples:
        jottlex hello.jott                # Tokens to stdout
        jottlex hello.jott -f json        # JSON output
        jottlex hello.jott -o tokens.txt  # Write to file
        jottlex --strict hello.jott       # Unknown lexemes are errors

    Exit status is 0 on success, 1 on a lexical or read error and
    2 on invalid arguments.
    """
    setup_logging(verbose)

    options = LexerOptions.from_env()
    if strict:
        options.strict = True
    if encoding is not None:
        options.encoding = encoding
    else:
        try:
            codecs.lookup(options.encoding)
        except LookupError:
            raise click.BadParameter(
                f"unknown encoding '{options.encoding}'", param_hint="JOTT_ENCODING"
            )

    try:
        logger.debug(f"Options: encoding={options.encoding}, strict={options.strict}")
        tokens = JottLexer(options).tokenize_file(input_file)

        if output_format.lower() == "json":
            rendered = format_json(tokens)
        else:
            rendered = format_text(tokens)

        if output is None:
            if rendered:
                click.echo(rendered)
        else:
            output.write_text(rendered + "\n" if rendered else "", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {len(tokens)} tokens to {output}")

        unclassified = sum(1 for token in tokens if not token.is_classified)
        if unclassified:
            logger.warning(f"{input_file}: {unclassified} unclassified token(s)")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
