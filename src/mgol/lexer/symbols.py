"""
Symbol Table
============

Maps lexeme text to the token template the scanner returns for it.

The table is filled with the language's reserved words before scanning
starts; the scanner then consults it for every completed word and may
cache new identifiers on first sighting. Entries are append-only: a
re-insert of an identical entry is a no-op and a reserved word is never
overwritten.

The table is an explicit object with an explicit lifetime:

    with SymbolTable.with_reserved_words() as table:
        scanner = Scanner(source, table)
        ...
    # table.clear() has run here
"""

import logging
import threading
from typing import Iterable, Iterator, Optional

from mgol.errors import SymbolConflictError
from mgol.lexer.tokens import Token, TokenClass


logger = logging.getLogger(__name__)


# =============================================================================
# Reserved Words
# =============================================================================

RESERVED_WORDS: tuple[str, ...] = (
    "inicio",
    "varinicio",
    "varfim",
    "escreva",
    "leia",
    "se",
    "entao",
    "fimse",
    "fim",
    "inteiro",
    "literal",
    "real",
)


# =============================================================================
# Symbol Table
# =============================================================================

class SymbolTable:
    """
    Lexeme to token-template mapping shared by one or more scanners.

    Lookups are lock-free; inserts are serialised so several scanners can
    cache identifiers into the same table.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Token] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_reserved_words(
        cls, words: Iterable[str] = RESERVED_WORDS
    ) -> "SymbolTable":
        """Create a table already filled with ``words``."""
        table = cls()
        fill_symbol_table(table, words)
        return table

    def __enter__(self) -> "SymbolTable":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.clear()

    def __contains__(self, lexeme: str) -> bool:
        return lexeme in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def lookup(self, lexeme: str) -> Optional[Token]:
        """Return the entry for ``lexeme``, or None if it is unknown."""
        return self._entries.get(lexeme)

    def insert(self, lexeme: str, entry: Token) -> Token:
        """
        Add ``entry`` under ``lexeme`` and return the stored entry.

        Raises:
            SymbolConflictError: If ``lexeme`` is already stored with a
                different entry.
        """
        with self._lock:
            existing = self._entries.get(lexeme)
            if existing is None:
                self._entries[lexeme] = entry
                return entry
        if existing != entry:
            raise SymbolConflictError(lexeme, existing, entry)
        return existing

    def keywords(self) -> list[str]:
        """Return the reserved words currently in the table."""
        return [
            lexeme for lexeme, entry in self._entries.items()
            if entry.kind is TokenClass.KEYWORD
        ]

    def clear(self) -> None:
        """Release every entry."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.debug("Symbol table cleared (%d entries)", count)


def fill_symbol_table(table: SymbolTable, words: Iterable[str] = RESERVED_WORDS) -> None:
    """
    Insert every reserved word of the language into ``table``.

    Each word is stored as a keyword token whose class, lexeme and subtype
    (in the traditional notation) are the word itself.
    """
    count = 0
    for word in words:
        table.insert(word, Token.keyword(word))
        count += 1
    logger.debug("Symbol table filled with %d reserved words", count)
