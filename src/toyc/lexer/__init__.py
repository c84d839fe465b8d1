"""
Toy-C Scanner
=============

This package implements the scanning stage of the Toy-C toolchain. It
turns an in-memory source string into a list of classified tokens and
reports every character it cannot classify.

Pipeline
--------
The scanner is the first stage of the toolchain:

    Source → Scanner → Tokens → (parser, type checker, code generator)

Only the scanner lives here. Later stages consume the token list that
lex() returns.

Usage
-----
>>> from toyc.lexer import lex, TokenType
>>> [t.type.name for t in lex("a && b")]
['IDENTIFIER', 'AND', 'IDENTIFIER', 'EOF']

Errors are collected rather than raised one at a time:

>>> from toyc.lexer import LexError
>>> try:
...     lex("x = $;")
... except LexError as e:
...     print(e.errors[0].char)
$
"""

from toyc.lexer.tokens import (
    Token,
    TokenType,
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    SPELLINGS,
)
from toyc.lexer.errors import (
    LexerError,
    ScanError,
    UnrecognizedTokenError,
    UnterminatedCommentError,
    LexError,
    ScanErrorCollector,
)
from toyc.lexer.scanner import Scanner, ScannerOptions, ScanResult, lex

__all__ = [
    # Entry point
    "lex",
    "Scanner",
    "ScannerOptions",
    "ScanResult",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "SINGLE_CHAR_TOKENS",
    "SPELLINGS",
    # Errors
    "LexerError",
    "ScanError",
    "UnrecognizedTokenError",
    "UnterminatedCommentError",
    "LexError",
    "ScanErrorCollector",
]
