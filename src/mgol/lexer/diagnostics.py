"""
Lexical Diagnostics
===================

Formats and emits one line per lexical error. The line format is fixed:

    erro na linha {line} coluna {column}, {category} {payload} {verb}

Example:
    erro na linha 1 coluna 4, palavra abc% inexistente na linguagem

Lines are emitted through the ``mgol.diagnostics`` logger at ERROR level
unless another logger is supplied. Reporting never raises and never stops
the scan. The reporter counts what it emits and, unless told otherwise,
keeps every diagnostic in ``ErrorReporter.diagnostics``; use one reporter
per scan, or pass ``keep_diagnostics=False`` for long inputs where only
the count matters.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from mgol.errors import Position


DIAGNOSTICS_LOGGER = "mgol.diagnostics"


class ErrorCategory(Enum):
    """Lexical error kinds with their message noun and verb."""

    ILLEGAL_WORD = ("palavra", "inexistente na linguagem")
    MALFORMED_NUMBER = ("número", "inválido")
    MALFORMED_LITERAL = ("literal", "inválido")
    MALFORMED_COMMENT = ("comentário", "inválido")

    def __init__(self, noun: str, verb: str):
        self.noun = noun
        self.verb = verb


@dataclass(frozen=True)
class Diagnostic:
    """A single reported lexical error."""
    position: Position
    category: ErrorCategory
    payload: str

    @property
    def message(self) -> str:
        return (
            f"erro na linha {self.position.line} coluna {self.position.column}, "
            f"{self.category.noun} {self.payload} {self.category.verb}"
        )

    def __str__(self) -> str:
        return self.message


class ErrorReporter:
    """
    Emits diagnostic lines and remembers what was reported.

    The list grows with every report. Use a fresh reporter for each scan,
    or turn retention off and rely on ``error_count``.

    Attributes:
        diagnostics: Every diagnostic reported so far, in order (stays
            empty when ``keep_diagnostics`` is False)
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        keep_diagnostics: bool = True,
    ):
        self._logger = logger or logging.getLogger(DIAGNOSTICS_LOGGER)
        self._keep = keep_diagnostics
        self._count = 0
        self.diagnostics: list[Diagnostic] = []

    @property
    def error_count(self) -> int:
        """Number of diagnostics reported, retained or not."""
        return self._count

    def report(self, position: Position, category: ErrorCategory, payload: str) -> Diagnostic:
        """Format and emit one diagnostic line."""
        diagnostic = Diagnostic(position, category, payload)
        self._count += 1
        if self._keep:
            self.diagnostics.append(diagnostic)
        self._logger.error(diagnostic.message)
        return diagnostic
