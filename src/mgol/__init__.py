"""
MGOL - Compiler Front End for the MGOL Teaching Language
========================================================

MGOL is a small imperative language with Portuguese reserved words,
used to teach compiler construction:

    inicio
    varinicio
        inteiro A;
    varfim;
    leia A;
    se(A>2)entao
        escreva "A maior que dois";
    fimse
    fim

This package provides the lexical front end:

- **lexer**: scanner automaton, tokens, symbol table and diagnostics
- **cli**: the ``mgolex`` command that tokenizes a source file

Quick Start
-----------
    >>> from mgol import tokenize
    >>> tokenize("A<-B+1;")
    [Token(IDENTIFIER, 'A'), Token(ATTR, '<-'), Token(IDENTIFIER, 'B'), Token(ARIT_OP, '+'), Token(NUM, '1', INTEGER), Token(SEMICOLON, ';'), Token(EOF, 'EOF')]

Or from the terminal:
    $ mgolex programa.alg
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from mgol.errors import MgolError, Position, SourceReadError, SymbolConflictError
from mgol.lexer import (
    EOF_TOKEN,
    ERROR_TOKEN,
    RESERVED_WORDS,
    ErrorReporter,
    Scanner,
    ScannerOptions,
    SymbolTable,
    Token,
    TokenClass,
    tokenize,
)

__all__ = [
    "__version__",
    # Errors
    "MgolError",
    "Position",
    "SourceReadError",
    "SymbolConflictError",
    # Lexer
    "Scanner",
    "ScannerOptions",
    "SymbolTable",
    "RESERVED_WORDS",
    "ErrorReporter",
    "Token",
    "TokenClass",
    "EOF_TOKEN",
    "ERROR_TOKEN",
    "tokenize",
]
