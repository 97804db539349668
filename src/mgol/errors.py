"""
MGOL Error Hierarchy
====================

This module defines the exception hierarchy for the MGOL front end and
the position type shared by every component that reports on source text.

Lexical errors (illegal words, malformed numbers, literals and comments)
are *not* exceptions: the scanner reports them through the error reporter
and keeps going. The exceptions below cover misuse of the API and input
that cannot be read at all.

Exception Hierarchy
-------------------
MgolError (base)
├── SymbolConflictError - lexeme re-inserted with a different entry
└── SourceReadError - input stream cannot be read or decoded
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MgolError(Exception):
    """
    Base exception for all MGOL front end errors.

    Callers can catch every package error with a single except clause:

        try:
            table.insert("se", Token.identifier("se"))
        except MgolError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Position Tracking
# =============================================================================

@dataclass(frozen=True, order=True)
class Position:
    """
    A location in source text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'line:column'."""
        return f"{self.line}:{self.column}"


# =============================================================================
# API and Input Errors
# =============================================================================

class SymbolConflictError(MgolError):
    """
    A lexeme already in the symbol table was inserted with another entry.

    Reserved words are never overwritten, so inserting an identifier entry
    for "se" after the table was filled raises this error.
    """

    def __init__(self, lexeme: str, existing, attempted):
        self.lexeme = lexeme
        self.existing = existing
        self.attempted = attempted
        super().__init__(
            f"symbol '{lexeme}' is already defined as {existing!r}, "
            f"cannot redefine it as {attempted!r}"
        )


class SourceReadError(MgolError):
    """The character source could not read from its stream."""

    def __init__(self, message: str, position: Optional[Position] = None):
        self.message = message
        self.position = position
        if position is not None:
            message = f"{position}: {message}"
        super().__init__(message)
