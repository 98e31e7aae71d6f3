"""Tests for reading and unfolding content lines."""

import io

import pytest

from icalcodec.exceptions import CalendarParseError, CalendarStreamError
from icalcodec.parsing.contentlines import (
    ContentLine,
    ContentLineReader,
    unfolded_lines,
)


@pytest.mark.parametrize(
    "content",
    [
        "DESCRIPTION:This is a lo\r\n ng description\r\n",
        "DESCRIPTION:This is a lo\r\n\tng description\r\n",
        "DESCRIPTION:This is a lo\n ng description\n",
        "DESCRIPTION:This is a lo\r\n ng des\r\n cription",
        "DESCRIPTION:This is a long description",
    ],
    ids=["space", "tab", "lf", "unterminated", "single"],
)
def test_unfold(content: str) -> None:
    """Test that folded lines are joined into a single content line."""
    assert list(unfolded_lines(content)) == ["DESCRIPTION:This is a long description"]


def test_fold_keeps_remaining_whitespace() -> None:
    """Test that only the first whitespace character of a fold is removed."""
    assert list(unfolded_lines("SUMMARY:a\r\n  b\r\n")) == ["SUMMARY:a b"]


def test_multibyte_split_across_fold() -> None:
    """Test a UTF-8 character split by a fold is decoded after joining."""
    content = b"SUMMARY:caf\xc3\r\n \xa9 au lait\r\n"
    assert list(unfolded_lines(content)) == ["SUMMARY:café au lait"]


def test_line_numbers() -> None:
    """Test each content line records the physical line it started on."""
    reader = ContentLineReader.from_content("A:1\r\nB:2\r\n 3\r\n\r\nC:4")
    assert list(reader) == [
        ContentLine(value="A:1", line_number=1),
        ContentLine(value="B:23", line_number=2),
        ContentLine(value="", line_number=4),
        ContentLine(value="C:4", line_number=5),
    ]


def test_byte_order_mark() -> None:
    """Test a byte order mark at the start of the content is dropped."""
    content = b"\xef\xbb\xbfBEGIN:VCALENDAR\r\nX-NOTE:\xef\xbb\xbfkept\r\n"
    assert list(unfolded_lines(content)) == [
        "BEGIN:VCALENDAR",
        "X-NOTE:\ufeffkept",
    ]


def test_end_of_stream() -> None:
    """Test the reader returns None once the stream is consumed."""
    reader = ContentLineReader.from_content("A:1\r\n")
    assert reader.read_next_line() == ContentLine(value="A:1", line_number=1)
    assert reader.read_next_line() is None
    assert reader.read_next_line() is None


def test_empty_content() -> None:
    """Test empty content has no lines."""
    assert list(unfolded_lines(b"")) == []


def test_invalid_utf8() -> None:
    """Test bytes that are not valid UTF-8 report the line number."""
    reader = ContentLineReader.from_content(b"A:1\r\nB:\xff\xfe\r\n")
    assert reader.read_next_line() == ContentLine(value="A:1", line_number=1)
    with pytest.raises(CalendarParseError, match="Line 2 is not valid utf-8") as exc:
        reader.read_next_line()
    assert exc.value.line_number == 2


class FailingStream(io.BytesIO):
    """A stream that fails when read."""

    def readline(self, size: int | None = -1) -> bytes:
        raise OSError("device not ready")


def test_read_error() -> None:
    """Test an error from the underlying stream is wrapped."""
    reader = ContentLineReader(FailingStream(b"A:1\r\n"))
    with pytest.raises(CalendarStreamError, match="Failed to read line 1") as exc:
        reader.read_next_line()
    assert isinstance(exc.value.__cause__, OSError)
