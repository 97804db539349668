"""
MGOL Token Model
================

Tokens produced by the scanner are immutable values made of a class, a
lexeme and an optional subtype.

Token Classes
-------------
| Class         | Lexeme                 | Subtype          |
|---------------|------------------------|------------------|
| NUM           | digits as written      | INTEGER or REAL  |
| IDENTIFIER    | the name               | (none)           |
| LITERAL_CONST | text including quotes  | LITERAL          |
| KEYWORD       | the reserved word      | (none)           |
| ARIT_OP       | + - * /                | (none)           |
| REL_OP        | < > <= >= <> =         | (none)           |
| ATTR          | <-                     | (none)           |
| OPEN_PAR      | (                      | (none)           |
| CLOSE_PAR     | )                      | (none)           |
| SEMICOLON     | ;                      | (none)           |
| COMMENT       | text including braces  | (none)           |
| ERROR         | ERROR                  | (none)           |
| EOF           | EOF                    | (none)           |

Reserved words are a variant of their own (``TokenClass.KEYWORD``). The
language's traditional notation, where a keyword's class, lexeme and
subtype are all the word itself, is still available through
``Token.category`` and ``Token.detail``:

>>> Token.keyword("se").category
'se'
>>> Token.number("1.0", Subtype.REAL).category
'NUM'
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


# =============================================================================
# Token Classes and Subtypes
# =============================================================================

class TokenClass(Enum):
    """Lexical categories recognised by the scanner."""

    # === Values ===
    NUM = auto()            # Numeric constant
    IDENTIFIER = auto()     # User name
    LITERAL_CONST = auto()  # "quoted text"
    KEYWORD = auto()        # Reserved word from the symbol table

    # === Operators ===
    ATTR = auto()           # <-
    ARIT_OP = auto()        # + - * /
    REL_OP = auto()         # < > <= >= <> =

    # === Punctuation ===
    OPEN_PAR = auto()       # (
    CLOSE_PAR = auto()      # )
    SEMICOLON = auto()      # ;

    # === Structural ===
    COMMENT = auto()        # { ... }
    ERROR = auto()          # Lexical error was reported
    EOF = auto()            # End of input


class Subtype(Enum):
    """Secondary classification for numbers and string constants."""
    INTEGER = "INTEGER"
    REAL = "REAL"
    LITERAL = "LITERAL"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified token.

    Tokens carry no position; the scanner returns the position alongside
    each token. Two tokens are equal when class, lexeme and subtype match.

    Attributes:
        kind: The TokenClass
        lexeme: Exact source text (constant for sentinel tokens)
        subtype: INTEGER/REAL for numbers, LITERAL for constants, else None
    """
    kind: TokenClass
    lexeme: str
    subtype: Optional[Subtype] = None

    def __repr__(self) -> str:
        if self.subtype is not None:
            return f"Token({self.kind.name}, {self.lexeme!r}, {self.subtype.name})"
        return f"Token({self.kind.name}, {self.lexeme!r})"

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def number(cls, lexeme: str, subtype: Subtype) -> "Token":
        return cls(TokenClass.NUM, lexeme, subtype)

    @classmethod
    def identifier(cls, name: str) -> "Token":
        return cls(TokenClass.IDENTIFIER, name)

    @classmethod
    def keyword(cls, word: str) -> "Token":
        return cls(TokenClass.KEYWORD, word)

    @classmethod
    def literal(cls, text: str) -> "Token":
        """Build a string constant; ``text`` includes both quotes."""
        return cls(TokenClass.LITERAL_CONST, text, Subtype.LITERAL)

    @classmethod
    def comment(cls, text: str) -> "Token":
        """Build a comment token; ``text`` includes both braces."""
        return cls(TokenClass.COMMENT, text)

    @classmethod
    def arithmetic(cls, operator: str) -> "Token":
        return cls(TokenClass.ARIT_OP, operator)

    @classmethod
    def relational(cls, operator: str) -> "Token":
        return cls(TokenClass.REL_OP, operator)

    # -------------------------------------------------------------------------
    # Classification helpers
    # -------------------------------------------------------------------------

    @property
    def category(self) -> str:
        """
        Class name in the language's traditional notation.

        Keywords report the word itself, everything else the class name.
        """
        if self.kind is TokenClass.KEYWORD:
            return self.lexeme
        return self.kind.name

    @property
    def detail(self) -> Optional[str]:
        """Subtype in the traditional notation (the word for keywords)."""
        if self.kind is TokenClass.KEYWORD:
            return self.lexeme
        if self.subtype is None:
            return None
        return self.subtype.value

    def is_keyword(self, word: Optional[str] = None) -> bool:
        """Return True for reserved words, optionally a specific one."""
        if self.kind is not TokenClass.KEYWORD:
            return False
        return word is None or self.lexeme == word

    def is_sentinel(self) -> bool:
        """Return True for fixed-shape tokens with a constant lexeme."""
        return self.kind in SENTINEL_CLASSES


# =============================================================================
# Sentinel Tokens
# =============================================================================

ATTR_TOKEN = Token(TokenClass.ATTR, "<-")
OPEN_PAR_TOKEN = Token(TokenClass.OPEN_PAR, "(")
CLOSE_PAR_TOKEN = Token(TokenClass.CLOSE_PAR, ")")
SEMICOLON_TOKEN = Token(TokenClass.SEMICOLON, ";")
ERROR_TOKEN = Token(TokenClass.ERROR, "ERROR")
EOF_TOKEN = Token(TokenClass.EOF, "EOF")

SENTINEL_CLASSES = frozenset({
    TokenClass.ATTR,
    TokenClass.OPEN_PAR,
    TokenClass.CLOSE_PAR,
    TokenClass.SEMICOLON,
    TokenClass.ERROR,
    TokenClass.EOF,
})
