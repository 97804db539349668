"""
Character Source
================

Pull-based reader with one character of lookahead over any character or
byte stream (an open file, ``io.StringIO``, ``io.BytesIO``, ...). Every
consumed character is paired with its 1-based line and column.

Byte streams are decoded one byte at a time with an incremental decoder,
so an undecodable byte is reported at the position it occupies. Text
streams decode in chunks of their own and a decode error there carries no
position. Either way the source stays failed: every later read raises the
same error instead of reporting end of input.

The source never reads more than one character ahead, so it works with
streams that cannot be rewound.
"""

import codecs
import io
from typing import BinaryIO, Optional, TextIO, Union

from mgol.errors import Position, SourceReadError


LINE_BREAK = "\n"
DEFAULT_ENCODING = "utf-8"


class PositionTracker:
    """
    Line/column counters over a sequence of characters.

    ``current`` is the position the next character will occupy and
    ``last`` the position of the most recently counted character.
    """

    def __init__(self, line: int = 1, column: int = 1):
        self.line = line
        self.column = column
        self.last: Optional[Position] = None

    @property
    def current(self) -> Position:
        return Position(self.line, self.column)

    def advance(self, char: str) -> Position:
        """Count one character and return the position it occupied."""
        position = self.current
        if char == LINE_BREAK:
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.last = position
        return position


class CharacterSource:
    """
    Single-character lookahead reader that tracks positions.

    Usage:
        with open("prog.alg", "rb") as stream:
            source = CharacterSource(stream, encoding="utf-8")
            while not source.at_end():
                char, position = source.advance()

    The stream is not closed by the source; its owner manages it.
    """

    def __init__(
        self,
        stream: Union[TextIO, BinaryIO, str, bytes],
        encoding: str = DEFAULT_ENCODING,
    ):
        """
        Initialize the source.

        Args:
            stream: Text or byte stream, or the source itself as str/bytes
            encoding: Used to decode byte input

        Raises:
            LookupError: If ``encoding`` is unknown
        """
        if isinstance(stream, str):
            stream = io.StringIO(stream)
        elif isinstance(stream, (bytes, bytearray)):
            stream = io.BytesIO(stream)
        self._stream = stream
        self._encoding = encoding
        self._decoder = None
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            self._decoder = codecs.getincrementaldecoder(encoding)()

        self._tracker = PositionTracker()
        self._pending = ""
        self._lookahead: Optional[str] = None
        self._exhausted = False
        self._failure: Optional[SourceReadError] = None

    # =========================================================================
    # Reading
    # =========================================================================

    def _read_char(self) -> str:
        """Read one character from the stream; empty string at end."""
        if self._pending:
            char, self._pending = self._pending[0], self._pending[1:]
            return char

        if self._decoder is None:
            char = self._stream.read(1)
            if not isinstance(char, bytes):
                return char
            # Duck-typed byte stream: decode from here on
            self._decoder = codecs.getincrementaldecoder(self._encoding)()
            self._pending = self._decoder.decode(char)
            return self._read_char() if self._pending else self._read_bytes()

        return self._read_bytes()

    def _read_bytes(self) -> str:
        """Feed bytes to the decoder until it yields a character."""
        while True:
            data = self._stream.read(1)
            decoded = self._decoder.decode(data, final=not data)
            if decoded:
                self._pending = decoded[1:]
                return decoded[0]
            if not data:
                return ""

    def _fill(self) -> None:
        """Load the lookahead slot from the stream if it is empty."""
        if self._failure is not None:
            raise self._failure
        if self._lookahead is not None or self._exhausted:
            return
        try:
            char = self._read_char()
        except UnicodeDecodeError as e:
            position = self._tracker.current if self._decoder is not None else None
            self._failure = SourceReadError(f"cannot decode input: {e.reason}", position)
            raise self._failure from e
        if char:
            self._lookahead = char
        else:
            self._exhausted = True

    def peek(self) -> Optional[str]:
        """Return the next character without consuming it, or None at end."""
        self._fill()
        return self._lookahead

    def advance(self) -> Optional[tuple[str, Position]]:
        """Consume the next character, returning it with its position."""
        self._fill()
        char = self._lookahead
        if char is None:
            return None
        self._lookahead = None
        return char, self._tracker.advance(char)

    def at_end(self) -> bool:
        return self.peek() is None

    # =========================================================================
    # Positions
    # =========================================================================

    @property
    def position(self) -> Position:
        """Position the next character will be reported at."""
        return self._tracker.current

    @property
    def last_position(self) -> Position:
        """Position of the last consumed character (1:1 before any read)."""
        return self._tracker.last or Position(1, 1)

    def mark_examined(self) -> Position:
        """
        Count the lookahead character for position purposes only.

        The character stays in the stream, but the column counter moves
        past it, so it is reported one column further when it is consumed.
        A line break is not counted twice. At end of input there is nothing
        to examine and the last consumed position is returned.
        """
        char = self.peek()
        if char is None:
            return self.last_position
        position = self._tracker.current
        if char != LINE_BREAK:
            self._tracker.column += 1
        return position
