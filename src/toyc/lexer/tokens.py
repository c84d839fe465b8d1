"""
Toy-C Token Vocabulary
======================

This module defines the closed token vocabulary of the Toy-C language:
the TokenType enumeration, the immutable Token record, and the lookup
tables the scanner uses to classify lexemes.

Token Categories
----------------
- Keywords: struct, enum, if, else, return, for, while, do, break,
  continue, switch, case, int, bool, double, float, char, void, signed,
  unsigned, long, const, true
- Identifiers: [a-zA-Z_][a-zA-Z0-9_]*  (payload: the raw name)
- Numbers: [0-9]+                      (payload: the raw digits)
- Operators: + - * / % ++ -- -> && || & | == != <= >= = ! < >
- Symbols: ^ ~
- Punctuation: { } ( ) [ ] ; : , .
- End of input: EOF

Only IDENTIFIER and NUMBER tokens carry a value. Every other token is
fully described by its type.

Example
-------
>>> Token(TokenType.IDENTIFIER, "count")
Token(IDENTIFIER, 'count')
>>> Token(TokenType.SEMICOLON)
Token(SEMICOLON)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Toy-C language.

    Each token type represents a category of lexical element that can
    appear in Toy-C source. Keywords are distinguished from identifiers
    to simplify parsing.
    """

    # === Structural Tokens ===
    EOF = auto()            # End of input

    # === Identifiers and Literals ===
    IDENTIFIER = auto()     # Variable/function names
    NUMBER = auto()         # Decimal digit runs

    # === Keywords - Declarations ===
    STRUCT = auto()         # struct
    ENUM = auto()           # enum
    CONST = auto()          # const

    # === Keywords - Type Specifiers ===
    INT = auto()            # int
    BOOL = auto()           # bool
    DOUBLE = auto()         # double
    FLOAT = auto()          # float
    CHAR = auto()           # char
    VOID = auto()           # void
    SIGNED = auto()         # signed
    UNSIGNED = auto()       # unsigned
    LONG = auto()           # long

    # === Keywords - Control Flow ===
    IF = auto()             # if
    ELSE = auto()           # else
    RETURN = auto()         # return
    FOR = auto()            # for
    WHILE = auto()          # while
    DO = auto()             # do
    BREAK = auto()          # break
    CONTINUE = auto()       # continue
    SWITCH = auto()         # switch
    CASE = auto()           # case

    # === Keywords - Literals ===
    TRUE = auto()           # true (also produced by '?', see ScannerOptions)

    # === Arithmetic Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    STAR = auto()           # *
    SLASH = auto()          # /
    PERCENT = auto()        # %

    # === Increment/Decrement ===
    INCREMENT = auto()      # ++
    DECREMENT = auto()      # --

    # === Member Access ===
    ARROW = auto()          # ->
    DOT = auto()            # .

    # === Comparison Operators ===
    EQ = auto()             # ==
    NE = auto()             # !=
    LT = auto()             # <
    GT = auto()             # >
    LE = auto()             # <=
    GE = auto()             # >=

    # === Logical Operators ===
    AND = auto()            # &&
    OR = auto()             # ||
    NOT = auto()            # !

    # === Bitwise Operators ===
    AMPERSAND = auto()      # &
    PIPE = auto()           # |
    CARET = auto()          # ^
    TILDE = auto()          # ~

    # === Assignment ===
    ASSIGN = auto()         # =

    # === Delimiters ===
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    LBRACKET = auto()       # [
    RBRACKET = auto()       # ]
    SEMICOLON = auto()      # ;
    COLON = auto()          # :
    COMMA = auto()          # ,


# =============================================================================
# Lookup Tables
# =============================================================================

# Reserved words. Lookup is exact and case-sensitive on the whole
# identifier run.
KEYWORDS: dict[str, TokenType] = {
    # Declarations
    "struct": TokenType.STRUCT,
    "enum": TokenType.ENUM,
    "const": TokenType.CONST,

    # Type specifiers
    "int": TokenType.INT,
    "bool": TokenType.BOOL,
    "double": TokenType.DOUBLE,
    "float": TokenType.FLOAT,
    "char": TokenType.CHAR,
    "void": TokenType.VOID,
    "signed": TokenType.SIGNED,
    "unsigned": TokenType.UNSIGNED,
    "long": TokenType.LONG,

    # Control flow
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "for": TokenType.FOR,
    "while": TokenType.WHILE,
    "do": TokenType.DO,
    "break": TokenType.BREAK,
    "continue": TokenType.CONTINUE,
    "switch": TokenType.SWITCH,
    "case": TokenType.CASE,

    # Literals
    "true": TokenType.TRUE,
}

# Characters that always form a token on their own. '?' is not listed
# here; whether it is accepted depends on ScannerOptions.
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "%": TokenType.PERCENT,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "^": TokenType.CARET,
    "~": TokenType.TILDE,
}

TYPE_KEYWORDS = frozenset({
    TokenType.INT,
    TokenType.BOOL,
    TokenType.DOUBLE,
    TokenType.FLOAT,
    TokenType.CHAR,
    TokenType.VOID,
    TokenType.SIGNED,
    TokenType.UNSIGNED,
    TokenType.LONG,
})

# Canonical source spelling of every payload-less token.
SPELLINGS: dict[TokenType, str] = {
    **{token_type: word for word, token_type in KEYWORDS.items()},
    **{token_type: char for char, token_type in SINGLE_CHAR_TOKENS.items()},
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.INCREMENT: "++",
    TokenType.DECREMENT: "--",
    TokenType.ARROW: "->",
    TokenType.EQ: "==",
    TokenType.NE: "!=",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.LE: "<=",
    TokenType.GE: ">=",
    TokenType.AND: "&&",
    TokenType.OR: "||",
    TokenType.NOT: "!",
    TokenType.AMPERSAND: "&",
    TokenType.PIPE: "|",
    TokenType.ASSIGN: "=",
    TokenType.EOF: "",
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from Toy-C source.

    Tokens are plain values: two tokens are equal when their type and
    value are equal, which keeps test assertions and parser lookahead
    simple.

    Attributes:
        type: The TokenType classification
        value: The raw lexeme for IDENTIFIER and NUMBER, otherwise None
    """
    type: TokenType
    value: Optional[str] = None

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r})"
        return f"Token({self.type.name})"

    @property
    def text(self) -> str:
        """Source text of the token: its value, or its canonical spelling."""
        if self.value is not None:
            return self.value
        return SPELLINGS[self.type]

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORDS.values()

    def is_type_keyword(self) -> bool:
        """Return True if this token is a type keyword."""
        return self.type in TYPE_KEYWORDS
