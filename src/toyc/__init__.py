"""
toyc - Front End for the Toy-C Language
=======================================

This package provides the scanning stage of a compiler toolchain for
Toy-C, a small C-like teaching language with structs, enums, the usual
C control flow and C's integer and floating type keywords.

Main Components
---------------
- **lexer**: the scanner
    Converts source text into a list of tokens, collecting every
    lexical error in a single pass

- **cli**: command-line tools (tclex)
    Reads a source file, runs the scanner and prints the tokens or
    the error report

Quick Start
-----------
Scan a program:
    >>> from toyc import lex
    >>> tokens = lex("int main() { return 0; }")
    >>> len(tokens)
    10

Or use the command-line tool:
    $ tclex hello.tc
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from toyc.errors import ToycError
from toyc.lexer import (
    lex,
    Scanner,
    ScannerOptions,
    ScanResult,
    Token,
    TokenType,
    LexerError,
    ScanError,
    UnrecognizedTokenError,
    UnterminatedCommentError,
    LexError,
)

__all__ = [
    # Version info
    "__version__",
    # Scanner
    "lex",
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    "Token",
    "TokenType",
    # Exception hierarchy
    "ToycError",
    "LexerError",
    "ScanError",
    "UnrecognizedTokenError",
    "UnterminatedCommentError",
    "LexError",
]
