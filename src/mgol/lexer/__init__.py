"""
MGOL Lexical Analyzer
=====================

Converts MGOL source text into classified tokens with line/column
positions, reporting lexical errors without stopping the scan.

Pipeline
--------
    text or byte stream → CharacterSource → Scanner (+ SymbolTable) → tokens
                                        ↓
                                  ErrorReporter → diagnostic lines

Usage
-----
>>> from mgol.lexer import Scanner, SymbolTable, EOF_TOKEN
>>> with SymbolTable.with_reserved_words() as table:
...     scanner = Scanner('escreva "ola";', table)
...     token, position = scanner.scan()
...     while token != EOF_TOKEN:
...         print(position, token)
...         token, position = scanner.scan()
1:1 Token(KEYWORD, 'escreva')
1:9 Token(LITERAL_CONST, '"ola"', LITERAL)
1:14 Token(SEMICOLON, ';')
"""

from mgol.lexer.diagnostics import Diagnostic, ErrorCategory, ErrorReporter
from mgol.lexer.scanner import Scanner, ScannerOptions, State, tokenize
from mgol.lexer.source import CharacterSource, PositionTracker
from mgol.lexer.symbols import RESERVED_WORDS, SymbolTable, fill_symbol_table
from mgol.lexer.tokens import (
    ATTR_TOKEN,
    CLOSE_PAR_TOKEN,
    EOF_TOKEN,
    ERROR_TOKEN,
    OPEN_PAR_TOKEN,
    SEMICOLON_TOKEN,
    Subtype,
    Token,
    TokenClass,
)

__all__ = [
    # Scanner
    "Scanner",
    "ScannerOptions",
    "State",
    "tokenize",
    # Input
    "CharacterSource",
    "PositionTracker",
    # Symbol table
    "SymbolTable",
    "RESERVED_WORDS",
    "fill_symbol_table",
    # Diagnostics
    "ErrorReporter",
    "ErrorCategory",
    "Diagnostic",
    # Tokens
    "Token",
    "TokenClass",
    "Subtype",
    "ATTR_TOKEN",
    "OPEN_PAR_TOKEN",
    "CLOSE_PAR_TOKEN",
    "SEMICOLON_TOKEN",
    "ERROR_TOKEN",
    "EOF_TOKEN",
]
