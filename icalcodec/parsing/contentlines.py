"""Read rfc5545 content lines from a byte stream.

Long content lines are split ("folded") across multiple physical lines by
inserting a line break followed by a single space or horizontal tab. The
reader here reverses that, producing one logical content line at a time:

  DESCRIPTION:This is a lo
   ng description

is read as the single content line `DESCRIPTION:This is a long description`.

Bytes are joined before decoding so that a multi-byte UTF-8 character that
was split across a fold is restored. A byte order mark at the start of the
stream is dropped.
"""

from __future__ import annotations

import io
from collections.abc import Generator, Iterator
from dataclasses import dataclass
from typing import BinaryIO

from icalcodec.exceptions import CalendarParseError, CalendarStreamError

_NEWLINE = b"\n"
_CARRIAGE_RETURN = b"\r"
_FOLD_CHARS = (b" ", b"\t")
_ENCODING = "utf-8"
_BYTE_ORDER_MARK = "\ufeff"


@dataclass(frozen=True)
class ContentLine:
    """A single logical (unfolded) line of iCalendar text."""

    value: str
    line_number: int
    """The 1-based physical line the logical line started on."""


class ContentLineReader:
    """Lazily produce unfolded content lines from a binary stream.

    The reader is forward-only and consumes the stream; it is not
    restartable.
    """

    def __init__(self, stream: BinaryIO) -> None:
        """Initialize ContentLineReader."""
        self._stream = stream
        self._pending: bytes | None = None
        self._physical_lines = 0

    @classmethod
    def from_content(cls, content: str | bytes) -> ContentLineReader:
        """Create a reader over an in-memory string or bytes."""
        if isinstance(content, str):
            content = content.encode(_ENCODING)
        return cls(io.BytesIO(content))

    def _read_physical_line(self) -> bytes:
        """Return the next physical line including its terminator."""
        pending, self._pending = self._pending, None
        if pending == _NEWLINE:
            return pending
        try:
            raw = self._stream.readline()
        except OSError as err:
            raise CalendarStreamError(
                f"Failed to read line {self._physical_lines + 1}"
            ) from err
        return (pending or b"") + raw

    def _peek(self) -> bytes:
        """Read one byte ahead, keeping it for the next physical line."""
        try:
            char = self._stream.read(1)
        except OSError as err:
            raise CalendarStreamError(
                f"Failed to read line {self._physical_lines + 1}"
            ) from err
        if char:
            self._pending = char
        return char

    def read_next_line(self) -> ContentLine | None:
        """Return the next logical content line or None at end of stream."""
        buffer = bytearray()
        line_number: int | None = None
        while raw := self._read_physical_line():
            self._physical_lines += 1
            if line_number is None:
                line_number = self._physical_lines
            if not raw.endswith(_NEWLINE):
                # Stream ended without a line terminator
                buffer += raw
                break
            raw = raw[:-1]
            if raw.endswith(_CARRIAGE_RETURN):
                raw = raw[:-1]
            buffer += raw
            if self._peek() in _FOLD_CHARS:
                self._pending = None
                continue
            break

        if line_number is None:
            return None
        try:
            value = buffer.decode(_ENCODING)
        except UnicodeDecodeError as err:
            raise CalendarParseError(
                f"Line {line_number} is not valid {_ENCODING}: {err}",
                detailed_error=repr(bytes(buffer)),
                line_number=line_number,
            ) from err
        if line_number == 1:
            value = value.removeprefix(_BYTE_ORDER_MARK)
        return ContentLine(value=value, line_number=line_number)

    def __iter__(self) -> Iterator[ContentLine]:
        while (line := self.read_next_line()) is not None:
            yield line


def unfolded_lines(content: str | bytes) -> Generator[str, None, None]:
    """Read content and unfold lines."""
    for line in ContentLineReader.from_content(content):
        yield line.value
