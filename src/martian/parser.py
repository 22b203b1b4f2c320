"""Streaming parser for mission plans and outcome logs.

Both formats are read from a byte source one record at a time: the source
is never read further than the record being requested needs, so arbitrarily
long (or interactive) inputs can be processed.

Grammar (whitespace is space, tab, CR or LF)::

    plan         := ws* point ws* robot-record*
    robot-record := point ws+ orientation ws+ command+ ws*
    outcome-rec  := point ws+ orientation ws* ("LOST")? ws*
    point        := digits ws* digits
    orientation  := 'N' | 'E' | 'S' | 'W'
    command      := 'L' | 'R' | 'F'

The first malformed record raises :class:`ParseError`; the stream is
exhausted afterwards and never resynchronizes.
"""

from __future__ import annotations

import io
from typing import BinaryIO, List, Optional, Tuple, Union

from .geo import Orientation, Point
from .mission import Lost, Outcome, Success
from .robot import Command, Robot

# Coordinates are 32-bit signed integers on the wire.
MAX_COORDINATE = 2**31 - 1

WHITESPACE = frozenset(b" \t\r\n")
LOST_KEYWORD = b"LOST"

_CHUNK_SIZE = 4096
_NEWLINE = ord("\n")
_ZERO = ord("0")
_NINE = ord("9")

_ORIENTATIONS = {ord(o.symbol): o for o in Orientation}
_COMMANDS = {ord(c.symbol): c for c in Command}

Source = Union[BinaryIO, bytes, bytearray, str]
PlanRecord = Tuple[Robot, List[Command]]


class ParseError(ValueError):
    """Malformed input, with the position where parsing stopped.

    Attributes:
        message: Description of what was expected and what was found.
        offset: Zero-based byte offset.
        line: One-based line number.
        column: One-based column number.
    """

    def __init__(self, message: str, offset: int = 0, line: int = 1, column: int = 1):
        super().__init__(message)
        self.message = message
        self.offset = offset
        self.line = line
        self.column = column

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"


def _binary_source(source: Source) -> BinaryIO:
    if isinstance(source, str):
        return io.BytesIO(source.encode("utf-8"))
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(bytes(source))
    if isinstance(source, io.TextIOBase) and hasattr(source, "buffer"):
        # Text wrappers such as sys.stdin expose their byte stream.
        return source.buffer
    return source


class ByteCursor:
    """Pull-based cursor over a byte stream with one byte of lookahead.

    Data is fetched with ``read1`` when the stream provides it, which returns
    whatever is already available instead of blocking for a full chunk.
    """

    def __init__(self, source: Source, chunk_size: int = _CHUNK_SIZE) -> None:
        stream = _binary_source(source)
        self._read = getattr(stream, "read1", None) or stream.read
        self._chunk_size = chunk_size
        self._buffer = b""
        self._index = 0
        self._eof = False
        self.offset = 0
        self.line = 1
        self.column = 1

    def _fill(self) -> bool:
        if self._eof:
            return False
        chunk = self._read(self._chunk_size)
        if isinstance(chunk, str):
            chunk = chunk.encode("utf-8")
        if not chunk:
            self._eof = True
            return False
        self._buffer = chunk
        self._index = 0
        return True

    def peek(self) -> Optional[int]:
        """Return the next byte without consuming it, or None at end of input."""
        if self._index >= len(self._buffer) and not self._fill():
            return None
        return self._buffer[self._index]

    def next(self) -> Optional[int]:
        byte = self.peek()
        if byte is None:
            return None
        self._index += 1
        self.offset += 1
        if byte == _NEWLINE:
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return byte

    def at_end(self) -> bool:
        return self.peek() is None

    def skip_whitespace(self) -> int:
        """Consume a run of whitespace and return its length."""
        count = 0
        while self.peek() in WHITESPACE:
            self.next()
            count += 1
        return count

    def describe_next(self) -> str:
        byte = self.peek()
        if byte is None:
            return "end of input"
        if 0x20 < byte < 0x7F:
            return repr(chr(byte))
        if byte in WHITESPACE:
            return "whitespace"
        return f"byte 0x{byte:02x}"

    def error(self, message: str) -> ParseError:
        return ParseError(message, self.offset, self.line, self.column)


def _is_digit(byte: Optional[int]) -> bool:
    return byte is not None and _ZERO <= byte <= _NINE


def _number(cursor: ByteCursor, what: str) -> int:
    if not _is_digit(cursor.peek()):
        raise cursor.error(f"expected {what}, found {cursor.describe_next()}")
    value = 0
    byte = cursor.peek()
    while byte is not None and _ZERO <= byte <= _NINE:
        value = value * 10 + byte - _ZERO
        if value > MAX_COORDINATE:
            raise cursor.error(f"{what} is larger than {MAX_COORDINATE}")
        cursor.next()
        byte = cursor.peek()
    return value


def _point(cursor: ByteCursor) -> Point:
    x = _number(cursor, "x coordinate")
    cursor.skip_whitespace()
    y = _number(cursor, "y coordinate")
    return Point(x, y)


def _separator(cursor: ByteCursor, after: str) -> None:
    if cursor.skip_whitespace() == 0:
        raise cursor.error(f"expected whitespace after {after}, found {cursor.describe_next()}")


def _orientation(cursor: ByteCursor) -> Orientation:
    orientation = _ORIENTATIONS.get(cursor.peek())  # type: ignore[arg-type]
    if orientation is None:
        raise cursor.error(
            f"expected orientation (N, E, S or W), found {cursor.describe_next()}"
        )
    cursor.next()
    return orientation


def _commands(cursor: ByteCursor) -> List[Command]:
    commands: List[Command] = []
    while True:
        command = _COMMANDS.get(cursor.peek())  # type: ignore[arg-type]
        if command is None:
            break
        commands.append(command)
        cursor.next()
    if not commands:
        raise cursor.error(f"expected command (L, R or F), found {cursor.describe_next()}")
    return commands


def _keyword(cursor: ByteCursor, keyword: bytes) -> None:
    for expected in keyword:
        if cursor.peek() != expected:
            raise cursor.error(
                f"expected {keyword.decode()!r}, found {cursor.describe_next()}"
            )
        cursor.next()


class _RecordStream:
    """Single-pass iterator of records that stops for good on the first error.

    Whitespace between records is consumed lazily, when the next record is
    requested, so a plan record is returned as soon as its last byte arrives.
    An outcome record without a ``LOST`` suffix is the exception, see
    :class:`MissionOutcomes`.
    """

    def __init__(self, cursor: ByteCursor) -> None:
        self._cursor = cursor
        self._done = False

    def __iter__(self):
        return self

    def __next__(self):
        if self._done:
            raise StopIteration
        try:
            self._cursor.skip_whitespace()
            if self._cursor.at_end():
                self._done = True
                raise StopIteration
            return self._parse_record(self._cursor)
        except ParseError:
            self._done = True
            raise

    def _parse_record(self, cursor: ByteCursor):
        raise NotImplementedError


class MissionPlan(_RecordStream):
    """Grid size plus a lazy stream of ``(robot, commands)`` records.

    Use :meth:`read` to construct; it parses the grid size eagerly.
    """

    def __init__(self, cursor: ByteCursor, upper_right: Point) -> None:
        super().__init__(cursor)
        self.upper_right = upper_right

    @classmethod
    def read(cls, source: Source) -> "MissionPlan":
        """Parse the leading grid size from ``source``.

        Leading whitespace is skipped. Raises:
            ParseError: If the input does not start with a grid size.
        """
        cursor = ByteCursor(source)
        cursor.skip_whitespace()
        try:
            upper_right = _point(cursor)
        except ParseError as exc:
            raise ParseError(
                f"expected grid size: {exc.message}", exc.offset, exc.line, exc.column
            ) from None
        return cls(cursor, upper_right)

    def __next__(self) -> PlanRecord:
        return super().__next__()

    def _parse_record(self, cursor: ByteCursor) -> PlanRecord:
        position = _point(cursor)
        _separator(cursor, "robot position")
        facing = _orientation(cursor)
        _separator(cursor, "robot orientation")
        return Robot(position, facing), _commands(cursor)


class MissionOutcomes(_RecordStream):
    """Lazy stream of :class:`Outcome` records from an outcome log.

    A ``LOST`` suffix may follow the orientation on a later line, so a record
    ending in an orientation is returned only once the next non-whitespace
    byte, or the end of input, has been read.
    """

    @classmethod
    def read(cls, source: Source) -> "MissionOutcomes":
        return cls(ByteCursor(source))

    def __next__(self) -> Outcome:
        return super().__next__()

    def _parse_record(self, cursor: ByteCursor) -> Outcome:
        position = _point(cursor)
        _separator(cursor, "robot position")
        robot = Robot(position, _orientation(cursor))
        cursor.skip_whitespace()
        if cursor.peek() == LOST_KEYWORD[0]:
            _keyword(cursor, LOST_KEYWORD)
            return Lost(robot)
        return Success(robot)
