"""
Toy-C Error Hierarchy
=====================

This module defines the root of the exception hierarchy for the toyc
toolchain. All exceptions inherit from ToycError, allowing callers to
catch every toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
ToycError (base)
└── LexerError (scanner-related, see toyc.lexer.errors)
    ├── ScanError - one diagnostic for one stretch of source
    │   ├── UnrecognizedTokenError - character outside the language
    │   └── UnterminatedCommentError - block comment never closed
    └── LexError - aggregate of every ScanError found in one pass

Design Philosophy
-----------------
The scanner works on an in-memory string and has no notion of lines or
columns, so errors carry only a message and an optional hint. Turning
them into a user-facing report is the caller's job (see toyc.cli).

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ToycError(Exception):
    """
    Base exception for all toyc errors.

    All exceptions in the toolchain inherit from this class, allowing
    callers to catch all toyc errors with a single except clause:

        try:
            tokens = lex(source)
        except ToycError as e:
            print(f"Error: {e}")

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: unrecognized character '$' (U+0024)
            hint: remove the character or place it inside a comment
        """
        parts = [f"error: {self.message}"]

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)
