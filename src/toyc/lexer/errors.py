"""
Toy-C Scanner Error Hierarchy
=============================

This module defines the exceptions raised by the Toy-C scanner. All of
them inherit from LexerError, which itself inherits from the toolchain
base ToycError.

Exception Hierarchy
-------------------
LexerError (base for all scanner errors)
├── ScanError - a single diagnostic
│   ├── UnrecognizedTokenError - character not in the token vocabulary
│   └── UnterminatedCommentError - end of input inside /* ... */
└── LexError - aggregate failure carrying every ScanError of one pass

Accumulate-and-Continue
-----------------------
The scanner never stops at the first bad character. Each ScanError is
handed to a ScanErrorCollector and scanning resumes at the next
character. Only when the pass is complete does lex() decide between
returning tokens and raising a LexError with the full, ordered list.

Example:
    >>> from toyc.lexer import lex, LexError
    >>> try:
    ...     lex("a $ b #")
    ... except LexError as e:
    ...     [err.char for err in e.errors]
    ['$', '#']
"""

from typing import List, Optional

from toyc.errors import ToycError


# =============================================================================
# Base Scanner Exception
# =============================================================================

class LexerError(ToycError):
    """Base exception for all Toy-C scanner errors."""
    pass


# =============================================================================
# Individual Diagnostics
# =============================================================================

class ScanError(LexerError):
    """
    A single lexical diagnostic.

    Raised by the scanner's dispatch for one offending stretch of source.
    The driving loop catches it, records it, and keeps scanning.
    """
    pass


class UnrecognizedTokenError(ScanError):
    """
    Character that does not start any token.

    Raised when the dispatcher meets a character outside the fixed
    vocabulary: anything that is not whitespace, a comment opener,
    an ASCII letter, digit or underscore, or a known operator or
    punctuation mark.

    Attributes:
        char: The offending character (a one-character string)
    """

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"unrecognized character {char!r} (U+{ord(char):04X})",
            hint="remove the character or place it inside a comment",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnrecognizedTokenError):
            return NotImplemented
        return self.char == other.char

    def __hash__(self) -> int:
        return hash((type(self), self.char))


class UnterminatedCommentError(ScanError):
    """
    Block comment still open at end of input.

    Raised when the input ends while at least one /* is unmatched.
    Nested comments need one */ per /*.

    Attributes:
        depth: How many */ were still missing at end of input
    """

    def __init__(self, depth: int = 1):
        self.depth = depth
        closers = "*/" if depth == 1 else f"{depth} closing '*/'"
        super().__init__(
            "unterminated block comment",
            hint=f"add {closers} to terminate the comment",
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UnterminatedCommentError):
            return NotImplemented
        return self.depth == other.depth

    def __hash__(self) -> int:
        return hash((type(self), self.depth))


# =============================================================================
# Aggregate Failure
# =============================================================================

class LexError(LexerError):
    """
    Aggregate scanning failure.

    Raised by lex() when one or more ScanErrors were collected. Any tokens
    recognized alongside the errors are discarded; callers that want to
    salvage them should use Scanner.scan() directly.

    Attributes:
        errors: Every ScanError in encounter order (never empty)
    """

    def __init__(self, errors: List[ScanError]):
        self.errors = list(errors)
        count = len(self.errors)
        word = "error" if count == 1 else "errors"
        super().__init__(f"{count} lexical {word}")

    def _format_message(self) -> str:
        """Render one line per collected error under a summary line."""
        lines = [f"error: {self.message}"]
        for error in self.errors:
            lines.append(f"  {error.message}")
        return "\n".join(lines)


# =============================================================================
# Error Collection (for multi-error reporting)
# =============================================================================

class ScanErrorCollector:
    """
    Collects scan errors for batch reporting.

    The scanner uses this to continue after a bad character, collecting
    all errors before reporting them together. This helps users fix
    several problems per run.

    Example:
        collector = ScanErrorCollector()

        while True:
            try:
                token = scanner.next_token()
            except ScanError as e:
                collector.add(e)
                if collector.should_stop():
                    break
                continue
            ...

        collector.raise_if_errors()
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize the error collector.

        Args:
            max_errors: Maximum errors to collect before stopping
                        (None for no limit)
        """
        self.errors: List[ScanError] = []
        self.max_errors = max_errors

    def add(self, error: ScanError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True if max_errors has been reached."""
        if self.max_errors is None:
            return False
        return len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors for display."""
        lines = []

        for error in self.errors:
            lines.append(str(error))
            lines.append("")  # Blank line between errors

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")

        return "\n".join(lines)

    def clear(self) -> None:
        """Clear all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a LexError if any errors were collected."""
        if self.has_errors():
            raise LexError(self.errors)
