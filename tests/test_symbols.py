# =============================================================================
# test_symbols.py - Symbol Table Tests
# =============================================================================
# Tests for the symbol table: reserved-word filling, lookups, idempotent
# inserts, conflict detection, lifetime and concurrent inserts.
# =============================================================================

import threading

import pytest

from mgol.errors import MgolError, SymbolConflictError
from mgol.lexer import RESERVED_WORDS, SymbolTable, Token, TokenClass, fill_symbol_table


class TestFill:
    """Reserved-word pre-loading."""

    def test_fill_default_words(self):
        table = SymbolTable()
        fill_symbol_table(table)
        assert len(table) == len(RESERVED_WORDS)
        for word in RESERVED_WORDS:
            assert table.lookup(word) == Token.keyword(word)

    def test_fill_custom_words(self):
        """The reserved set is supplied by the caller."""
        table = SymbolTable.with_reserved_words(["enquanto", "faca"])
        assert sorted(table.keywords()) == ["enquanto", "faca"]
        assert table.lookup("se") is None

    def test_keyword_notation(self):
        """Class, lexeme and subtype of a keyword entry are the word."""
        entry = SymbolTable.with_reserved_words().lookup("escreva")
        assert entry.category == entry.lexeme == entry.detail == "escreva"

    def test_fill_twice_is_harmless(self):
        table = SymbolTable.with_reserved_words()
        fill_symbol_table(table)
        assert len(table) == len(RESERVED_WORDS)


class TestInsert:
    """Append-only insert semantics."""

    def test_lookup_unknown(self):
        assert SymbolTable().lookup("nada") is None

    def test_insert_identifier(self):
        table = SymbolTable()
        stored = table.insert("x", Token.identifier("x"))
        assert stored == Token.identifier("x")
        assert "x" in table

    def test_reinsert_is_noop(self):
        table = SymbolTable()
        table.insert("x", Token.identifier("x"))
        table.insert("x", Token.identifier("x"))
        assert len(table) == 1

    def test_reserved_word_never_overwritten(self):
        table = SymbolTable.with_reserved_words()
        with pytest.raises(SymbolConflictError) as exc_info:
            table.insert("se", Token.identifier("se"))
        assert exc_info.value.lexeme == "se"
        assert table.lookup("se").kind is TokenClass.KEYWORD

    def test_conflict_is_package_error(self):
        assert issubclass(SymbolConflictError, MgolError)

    def test_concurrent_inserts(self):
        """Scanners sharing a table can cache the same names at once."""
        table = SymbolTable()
        names = [f"v{i}" for i in range(50)]

        def worker():
            for name in names:
                table.insert(name, Token.identifier(name))

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(table) == len(names)


class TestLifetime:
    """Explicit teardown."""

    def test_clear(self):
        table = SymbolTable.with_reserved_words()
        table.clear()
        assert len(table) == 0
        assert table.lookup("se") is None

    def test_context_manager_clears(self):
        with SymbolTable.with_reserved_words() as table:
            assert "fimse" in table
        assert len(table) == 0

    def test_tables_are_independent(self):
        first = SymbolTable.with_reserved_words()
        second = SymbolTable()
        assert "se" in first
        assert "se" not in second

    def test_iteration(self):
        table = SymbolTable.with_reserved_words(["a", "b"])
        assert list(table) == ["a", "b"]
