"""
MGOL Scanner
============

Finite automaton that turns a character source into tokens.

Every call to ``Scanner.scan()`` returns exactly one ``(Token, Position)``
pair. Lexical errors do not raise: the scanner reports them through its
``ErrorReporter``, returns ``ERROR_TOKEN`` and resumes at the next
character on the following call.

States
------
| State           | Entered on                  | Leaves with                 |
|-----------------|-----------------------------|-----------------------------|
| START           | every scan                  | whitespace skipped          |
| INTEGER         | digit                       | NUM INTEGER                 |
| FRACTION        | '.' followed by a digit     | NUM REAL                    |
| EXPONENT_SIGN   | 'E' or 'e' after digits     | optional '+' / '-'          |
| EXPONENT_DIGITS | digit after the marker      | NUM (subtype unchanged)     |
| WORD            | letter                      | keyword or IDENTIFIER       |
| LITERAL         | '"'                         | LITERAL_CONST               |
| COMMENT         | '{'                         | COMMENT (first '}' closes)  |
| WORD_ERROR      | character outside alphabet  | ERROR                       |

Error Recovery
--------------
- Illegal word: the valid prefix plus the one offending character is
  consumed and reported at that character.
- Malformed number ('1.' not followed by a digit, or an exponent marker
  without digits): the consumed prefix is reported at the position of the
  character examined after it. That character stays in the stream but
  counts as consumed for column numbering.
- Unterminated literal or comment: everything up to end of input is
  reported at the last character read.

Example Usage
-------------
>>> from mgol.lexer import Scanner, SymbolTable
>>> with SymbolTable.with_reserved_words() as table:
...     scanner = Scanner("se(A<>1);", table)
...     for token, position in scanner.tokens():
...         print(position, token)
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import BinaryIO, Iterator, Optional, TextIO, Union

from mgol.errors import Position
from mgol.lexer.diagnostics import ErrorCategory, ErrorReporter
from mgol.lexer.source import DEFAULT_ENCODING, CharacterSource
from mgol.lexer.symbols import RESERVED_WORDS, SymbolTable
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


logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

DIGITS = string.digits
LETTERS = string.ascii_letters
IDENT_CHARS = LETTERS + DIGITS + "_"
WHITESPACE = " \t\n\r\f\v"
EXPONENT_MARKERS = "Ee"
EXPONENT_SIGNS = "+-"

# Characters that start an operator or punctuation token
OPERATOR_CHARS = "<>=+-*/();"

# Characters that end a word without making it an error
WORD_DELIMITERS = WHITESPACE + OPERATOR_CHARS + '"{'

SINGLE_TOKENS: dict[str, Token] = {
    "=": Token.relational("="),
    "+": Token.arithmetic("+"),
    "-": Token.arithmetic("-"),
    "*": Token.arithmetic("*"),
    "/": Token.arithmetic("/"),
    "(": OPEN_PAR_TOKEN,
    ")": CLOSE_PAR_TOKEN,
    ";": SEMICOLON_TOKEN,
}


def _is(char: Optional[str], charset: str) -> bool:
    """Return True if ``char`` is present and belongs to ``charset``."""
    return char is not None and char in charset


# =============================================================================
# Options and States
# =============================================================================

@dataclass
class ScannerOptions:
    """
    Scanner configuration.

    Attributes:
        cache_identifiers: Insert new identifiers into the symbol table
        skip_comments: Leave COMMENT tokens out of ``Scanner.tokens()``
        reserved_words: Words used when the scanner has to build its own table
        encoding: Decoding applied when the source is a byte stream
    """
    cache_identifiers: bool = True
    skip_comments: bool = False
    reserved_words: tuple[str, ...] = RESERVED_WORDS
    encoding: str = DEFAULT_ENCODING


class State(Enum):
    """Automaton states."""
    START = auto()
    INTEGER = auto()
    FRACTION = auto()
    EXPONENT_SIGN = auto()
    EXPONENT_DIGITS = auto()
    WORD = auto()
    LITERAL = auto()
    COMMENT = auto()
    WORD_ERROR = auto()


ScanResult = tuple[Token, Position]


# =============================================================================
# Scanner
# =============================================================================

class Scanner:
    """
    Tokenizes MGOL source text one token per call.

    A scanner owns its position and partial-token buffer, so one instance
    must be driven by a single caller. The symbol table may be shared.

    Usage:
        with open("prog.alg", "rb") as stream:
            scanner = Scanner(stream, table)
            token, position = scanner.scan()
            while token != EOF_TOKEN:
                ...
                token, position = scanner.scan()
    """

    def __init__(
        self,
        source: Union[CharacterSource, TextIO, BinaryIO, str, bytes],
        symbol_table: SymbolTable,
        reporter: Optional[ErrorReporter] = None,
        options: Optional[ScannerOptions] = None,
    ):
        """
        Initialize the scanner.

        Args:
            source: Character source, open text or byte stream, or the
                source itself as str/bytes
            symbol_table: Table consulted to classify words
            reporter: Receives lexical errors (a logging reporter by default)
            options: Scanner configuration
        """
        self.options = options or ScannerOptions()
        if not isinstance(source, CharacterSource):
            source = CharacterSource(source, self.options.encoding)
        self._source = source
        self.symbol_table = symbol_table
        self.reporter = reporter or ErrorReporter()

        self._buffer: list[str] = []
        self._start = source.position
        self._subtype = Subtype.INTEGER

        self._handlers = {
            State.START: self._start_state,
            State.INTEGER: self._integer_state,
            State.FRACTION: self._fraction_state,
            State.EXPONENT_SIGN: self._exponent_sign_state,
            State.EXPONENT_DIGITS: self._exponent_digits_state,
            State.WORD: self._word_state,
            State.LITERAL: self._literal_state,
            State.COMMENT: self._comment_state,
            State.WORD_ERROR: self._word_error_state,
        }

    # =========================================================================
    # Public Interface
    # =========================================================================

    def scan(self) -> ScanResult:
        """
        Scan the next token.

        Returns:
            The token and the position it starts at. ERROR tokens carry
            the position the error was reported at. Once input is
            exhausted every call returns ``EOF_TOKEN``.
        """
        self._buffer = []
        self._subtype = Subtype.INTEGER
        state = State.START

        while True:
            outcome = self._handlers[state]()
            if isinstance(outcome, State):
                state = outcome
                continue
            token, position = outcome
            logger.debug("%s %r", position, token)
            return outcome

    def tokens(self) -> Iterator[ScanResult]:
        """Yield ``(token, position)`` pairs up to and including EOF."""
        while True:
            token, position = self.scan()
            if token.kind is TokenClass.COMMENT and self.options.skip_comments:
                continue
            yield token, position
            if token.kind is TokenClass.EOF:
                return

    @property
    def position(self) -> Position:
        """Position of the next unread character."""
        return self._source.position

    # =========================================================================
    # Buffer Helpers
    # =========================================================================

    def _consume(self) -> str:
        """Move the lookahead character into the lexeme buffer."""
        char, _ = self._source.advance()
        self._buffer.append(char)
        return char

    @property
    def _lexeme(self) -> str:
        return "".join(self._buffer)

    def _error(self, position: Position, category: ErrorCategory) -> ScanResult:
        self.reporter.report(position, category, self._lexeme)
        return ERROR_TOKEN, position

    # =========================================================================
    # State Handlers
    # =========================================================================

    def _start_state(self) -> Union[State, ScanResult]:
        char = self._source.peek()

        if char is None:
            return EOF_TOKEN, self._source.position

        if char in WHITESPACE:
            self._source.advance()
            return State.START

        self._start = self._source.position

        if char in DIGITS:
            self._consume()
            return State.INTEGER

        if char in LETTERS:
            self._consume()
            return State.WORD

        if char == '"':
            self._consume()
            return State.LITERAL

        if char == "{":
            self._consume()
            return State.COMMENT

        if char in OPERATOR_CHARS:
            return self._scan_operator()

        return State.WORD_ERROR

    def _integer_state(self) -> Union[State, ScanResult]:
        char = self._source.peek()

        if _is(char, DIGITS):
            self._consume()
            return State.INTEGER

        if char == ".":
            self._consume()
            if _is(self._source.peek(), DIGITS):
                self._subtype = Subtype.REAL
                return State.FRACTION
            return self._malformed_number()

        if _is(char, EXPONENT_MARKERS):
            self._consume()
            return State.EXPONENT_SIGN

        return self._finish_number()

    def _fraction_state(self) -> Union[State, ScanResult]:
        char = self._source.peek()

        if _is(char, DIGITS):
            self._consume()
            return State.FRACTION

        if _is(char, EXPONENT_MARKERS):
            self._consume()
            return State.EXPONENT_SIGN

        return self._finish_number()

    def _exponent_sign_state(self) -> Union[State, ScanResult]:
        if _is(self._source.peek(), EXPONENT_SIGNS):
            self._consume()

        if _is(self._source.peek(), DIGITS):
            return State.EXPONENT_DIGITS

        return self._malformed_number()

    def _exponent_digits_state(self) -> Union[State, ScanResult]:
        if _is(self._source.peek(), DIGITS):
            self._consume()
            return State.EXPONENT_DIGITS
        return self._finish_number()

    def _word_state(self) -> Union[State, ScanResult]:
        char = self._source.peek()

        if _is(char, IDENT_CHARS):
            self._consume()
            return State.WORD

        if char is None or char in WORD_DELIMITERS:
            return self._finish_word()

        return State.WORD_ERROR

    def _word_error_state(self) -> ScanResult:
        char, position = self._source.advance()
        self._buffer.append(char)
        return self._error(position, ErrorCategory.ILLEGAL_WORD)

    def _literal_state(self) -> Union[State, ScanResult]:
        if self._source.at_end():
            return self._error(self._source.last_position, ErrorCategory.MALFORMED_LITERAL)

        if self._consume() == '"':
            return Token.literal(self._lexeme), self._start
        return State.LITERAL

    def _comment_state(self) -> Union[State, ScanResult]:
        if self._source.at_end():
            return self._error(self._source.last_position, ErrorCategory.MALFORMED_COMMENT)

        # Braces do not nest: the first '}' closes the comment
        if self._consume() == "}":
            return Token.comment(self._lexeme), self._start
        return State.COMMENT

    # =========================================================================
    # Token Completion
    # =========================================================================

    def _finish_number(self) -> ScanResult:
        return Token.number(self._lexeme, self._subtype), self._start

    def _malformed_number(self) -> ScanResult:
        position = self._source.mark_examined()
        return self._error(position, ErrorCategory.MALFORMED_NUMBER)

    def _finish_word(self) -> ScanResult:
        lexeme = self._lexeme
        entry = self.symbol_table.lookup(lexeme)
        if entry is not None:
            return entry, self._start

        token = Token.identifier(lexeme)
        if self.options.cache_identifiers:
            self.symbol_table.insert(lexeme, token)
        return token, self._start

    def _scan_operator(self) -> ScanResult:
        """Scan an operator or punctuation character (never a table lookup)."""
        char = self._consume()

        if char == "<":
            following = self._source.peek()
            if following == "-":
                self._consume()
                return ATTR_TOKEN, self._start
            if _is(following, "=>"):
                self._consume()
            return Token.relational(self._lexeme), self._start

        if char == ">":
            if self._source.peek() == "=":
                self._consume()
            return Token.relational(self._lexeme), self._start

        return SINGLE_TOKENS[char], self._start


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize(
    source: Union[TextIO, BinaryIO, str, bytes],
    symbol_table: Optional[SymbolTable] = None,
    reporter: Optional[ErrorReporter] = None,
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Scan ``source`` to the end and return its tokens, EOF included.

    Without a symbol table a temporary one holding ``options.reserved_words``
    is used and cleared afterwards.

    >>> tokenize("A<-B")
    [Token(IDENTIFIER, 'A'), Token(ATTR, '<-'), Token(IDENTIFIER, 'B'), Token(EOF, 'EOF')]
    """
    options = options or ScannerOptions()
    if symbol_table is not None:
        scanner = Scanner(source, symbol_table, reporter, options)
        return [token for token, _ in scanner.tokens()]

    with SymbolTable.with_reserved_words(options.reserved_words) as table:
        scanner = Scanner(source, table, reporter, options)
        return [token for token, _ in scanner.tokens()]
