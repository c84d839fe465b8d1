"""
Toy-C Scanner
=============

This module implements the scanner (lexer) for Toy-C, a small C-like
language. It converts an in-memory source string into a flat list of
tokens for the parser and reports every character it cannot classify.

Scanning Model
--------------
The scanner makes a single pass over the input. Each step:

1. skips whitespace,
2. skips any comments (// to end of line, nested /* ... */),
3. dispatches on the current character to a sub-scanner.

A bad character does not stop the pass. It is recorded as a ScanError
and scanning resumes on the next character, so one run reports every
problem in the input. lex() then either returns the tokens or raises a
LexError holding all of the errors.

End of input is represented by None from the cursor operations, never by
an in-band marker character.

Comments
--------
- Single-line: // comment
- Block: /* comment */, which may nest: /* a /* b */ c */

Example Usage
-------------
>>> from toyc.lexer import lex
>>> for token in lex("int x = 5;"):
...     print(token)
Token(INT)
Token(IDENTIFIER, 'x')
Token(ASSIGN)
Token(NUMBER, '5')
Token(SEMICOLON)
Token(EOF)
"""

import logging
import string
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from toyc.lexer.errors import (
    LexError,
    ScanError,
    ScanErrorCollector,
    UnrecognizedTokenError,
    UnterminatedCommentError,
)
from toyc.lexer.tokens import (
    KEYWORDS,
    SINGLE_CHAR_TOKENS,
    Token,
    TokenType,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Scanner Options
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        report_unterminated_comments: If True (default), a block comment
                     that is still open at end of input is reported as an
                     UnterminatedCommentError. If False the rest of the
                     input is silently discarded and scanning ends with EOF.
        question_mark_as_true: If True (default), '?' produces the same
                     token as the 'true' keyword. If False, '?' is an
                     unrecognized character.
        max_errors: Stop scanning once this many errors have been
                     collected. None means no limit.
    """
    report_unterminated_comments: bool = True
    question_mark_as_true: bool = True
    max_errors: Optional[int] = None


@dataclass
class ScanResult:
    """
    Everything one scanning pass produced.

    Unlike lex(), which is all-or-nothing, a ScanResult keeps the tokens
    recognized alongside any errors so callers can decide whether the
    partial result is useful.

    Attributes:
        tokens: Recognized tokens in source order
        errors: Collected ScanErrors in encounter order
    """
    tokens: List[Token] = field(default_factory=list)
    errors: List[ScanError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when the pass produced no errors."""
        return not self.errors

    def unwrap(self) -> List[Token]:
        """Return the tokens, or raise LexError if there were errors."""
        if self.errors:
            raise LexError(self.errors)
        return self.tokens


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Toy-C source code.

    A Scanner is built for one input, used once, and thrown away. It
    holds no state that outlives the call that created it, so scanning
    different inputs on different threads needs no locking.

    Usage:
        scanner = Scanner(source)
        result = scanner.scan()
        if result.ok:
            parse(result.tokens)

    Attributes:
        source: The source text being scanned
        options: Scanner configuration
        position: Cursor index into source, always in [0, len(source)]
        current: Character at the cursor, or None at end of input
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters + "_"

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    # ASCII only; str.isdigit() would accept other scripts' digits
    DIGITS = string.digits

    # Python treats the ASCII information separators as whitespace,
    # Unicode's White_Space property does not
    NOT_WHITESPACE = "\x1c\x1d\x1e\x1f"

    def __init__(self, source: str, options: Optional[ScannerOptions] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: The Toy-C source text to scan
            options: Scanner configuration (defaults if None)
        """
        self.source = source
        self.options = options or ScannerOptions()

        self.position = 0
        self.current: Optional[str] = source[0] if source else None

    # =========================================================================
    # Cursor Primitives
    # =========================================================================

    def at_end(self) -> bool:
        """Check if the cursor has reached the end of source."""
        return self.position >= len(self.source)

    def advance(self) -> None:
        """Move the cursor forward one character and refresh current."""
        if self.position < len(self.source):
            self.position += 1
        if self.position < len(self.source):
            self.current = self.source[self.position]
        else:
            self.current = None

    def advance_n(self, n: int) -> None:
        """Move the cursor forward n characters."""
        for _ in range(n):
            self.advance()

    def peek(self) -> Optional[str]:
        """
        Look at the character after the cursor without moving.

        Returns None if that position is past the end of source.
        """
        pos = self.position + 1
        if pos >= len(self.source):
            return None
        return self.source[pos]

    def peek_n(self, n: int) -> str:
        """
        Return the next n characters starting at the cursor.

        The result is shorter than n when the source ends first.
        """
        return self.source[self.position:self.position + n]

    def skip_whitespace(self) -> None:
        """Advance past any Unicode whitespace."""
        while self.current is not None and self._is_whitespace(self.current):
            self.advance()

    def _is_whitespace(self, char: str) -> bool:
        return char.isspace() and char not in self.NOT_WHITESPACE

    def _match(self, expected: str) -> bool:
        """
        Consume the current character if it matches expected.

        Args:
            expected: The character to match

        Returns:
            True if matched and consumed, False otherwise
        """
        if self.current == expected:
            self.advance()
            return True
        return False

    # =========================================================================
    # Driving Loop
    # =========================================================================

    def scan(self) -> ScanResult:
        """
        Scan the whole source, collecting tokens and errors.

        The token list of a completed pass always ends with exactly one
        EOF token. If the error cap in the options is reached the pass
        stops early and no EOF is appended.

        Returns:
            ScanResult with every token and every error found
        """
        collector = ScanErrorCollector(self.options.max_errors)
        tokens: List[Token] = []

        while True:
            try:
                token = self.next_token()
            except ScanError as e:
                # The offending character has already been consumed
                logger.debug(f"Scan error at offset {self.position}: {e.message}")
                collector.add(e)
                if collector.should_stop():
                    logger.warning(
                        f"Stopped scanning after {collector.error_count()} errors"
                    )
                    break
                continue

            tokens.append(token)
            if token.type is TokenType.EOF:
                break

        logger.debug(
            f"Scanned {len(self.source)} characters: "
            f"{len(tokens)} tokens, {collector.error_count()} errors"
        )
        return ScanResult(tokens=tokens, errors=list(collector.errors))

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source code.

        Unlike scan(), this stops at the first bad character.

        Yields:
            Token objects, ending with EOF

        Raises:
            ScanError: On the first character that cannot be scanned
        """
        while True:
            token = self.next_token()
            yield token
            if token.type is TokenType.EOF:
                return

    def next_token(self) -> Token:
        """
        Scan and return the next token, leaving the cursor just past it.

        Raises:
            ScanError: If the next significant character is invalid. The
                       cursor is left after the offending character, so
                       calling next_token() again resumes scanning.
        """
        while True:
            self.skip_whitespace()
            if not self._skip_comment():
                break

        char = self.current

        if char is None:
            return Token(TokenType.EOF)

        # Numbers
        if char in self.DIGITS:
            return self._scan_number()

        # Identifiers and keywords
        if char in self.IDENT_START:
            return self._scan_identifier()

        # Operators and delimiters
        return self._scan_operator()

    # =========================================================================
    # Comment Handling
    # =========================================================================

    def _skip_comment(self) -> bool:
        """
        Skip one comment at the cursor, if there is one.

        Returns:
            True if a comment was skipped, False if the cursor is not
            at a comment opener

        Raises:
            UnterminatedCommentError: If a block comment is never closed
                                      and the options ask for a report
        """
        if self.current != "/":
            return False

        next_char = self.peek()

        if next_char == "/":
            self._skip_line_comment()
            return True

        if next_char == "*":
            self._skip_block_comment()
            return True

        return False

    def _skip_line_comment(self) -> None:
        """Skip a // comment up to, but not including, the newline."""
        while self.current is not None and self.current != "\n":
            self.advance()

    def _skip_block_comment(self) -> None:
        """
        Skip a /* ... */ comment, honouring nesting.

        Each /* inside the comment needs its own */. The opening pair is
        consumed first so that "/*/" does not close itself.
        """
        self.advance_n(2)  # consume /*
        depth = 1

        while self.current is not None:
            pair = self.peek_n(2)

            if pair == "*/":
                self.advance_n(2)
                depth -= 1
                if depth == 0:
                    return
            elif pair == "/*":
                self.advance_n(2)
                depth += 1
            else:
                self.advance()

        logger.debug(f"Block comment still open at end of input (depth {depth})")
        if self.options.report_unterminated_comments:
            raise UnterminatedCommentError(depth)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_identifier(self) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers start with a letter or underscore and can contain
        letters, digits, and underscores. The whole run is looked up in
        the keyword table, so 'intx' is an identifier, not 'int' + 'x'.
        """
        start = self.position
        while self.current is not None and self.current in self.IDENT_CHARS:
            self.advance()

        name = self.source[start:self.position]

        keyword = KEYWORDS.get(name)
        if keyword is not None:
            return Token(keyword)

        return Token(TokenType.IDENTIFIER, name)

    def _scan_number(self) -> Token:
        """Scan a run of decimal digits, keeping the raw text."""
        start = self.position
        while self.current is not None and self.current in self.DIGITS:
            self.advance()

        return Token(TokenType.NUMBER, self.source[start:self.position])

    def _scan_operator(self) -> Token:
        """
        Scan an operator or delimiter.

        Two-character operators win over their one-character prefixes
        (greedy longest match with one character of lookahead).
        """
        char = self.current
        self.advance()

        if char == "=":
            if self._match("="):
                return Token(TokenType.EQ)
            return Token(TokenType.ASSIGN)

        if char == "!":
            if self._match("="):
                return Token(TokenType.NE)
            return Token(TokenType.NOT)

        if char == "<":
            if self._match("="):
                return Token(TokenType.LE)
            return Token(TokenType.LT)

        if char == ">":
            if self._match("="):
                return Token(TokenType.GE)
            return Token(TokenType.GT)

        if char == "+":
            if self._match("+"):
                return Token(TokenType.INCREMENT)
            return Token(TokenType.PLUS)

        if char == "-":
            if self._match(">"):
                return Token(TokenType.ARROW)
            if self._match("-"):
                return Token(TokenType.DECREMENT)
            return Token(TokenType.MINUS)

        if char == "&":
            if self._match("&"):
                return Token(TokenType.AND)
            return Token(TokenType.AMPERSAND)

        if char == "|":
            if self._match("|"):
                return Token(TokenType.OR)
            return Token(TokenType.PIPE)

        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char])

        if char == "?" and self.options.question_mark_as_true:
            return Token(TokenType.TRUE)

        # Unknown character
        raise UnrecognizedTokenError(char)


# =============================================================================
# Entry Point
# =============================================================================

def lex(source: str, options: Optional[ScannerOptions] = None) -> List[Token]:
    """
    Convert Toy-C source text into tokens.

    Args:
        source: The source text (may be empty)
        options: Scanner configuration (defaults if None)

    Returns:
        The tokens in source order, ending with exactly one EOF token

    Raises:
        LexError: If any character could not be scanned. The exception's
                  errors attribute lists every problem in source order.
    """
    return Scanner(source, options).scan().unwrap()
