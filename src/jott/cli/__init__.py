"""
Jott Command-Line Interface
===========================

This package provides command-line tools for the Jott tokenizer:

- **jottlex**: Tokenize a Jott source file and print its tokens

Each tool is implemented as a Click-based CLI application with
help and error reporting.
"""

__all__ = ["jottlex"]
