"""Read and write calendars as rfc5545 iCalendar streams.

This is an example of parsing an ics file into a calendar:
```python
from pathlib import Path
from icalcodec.calendar_stream import IcsCalendarStream

filename = Path("example/calendar.ics")
with filename.open("rb") as ics_file:
    calendar = IcsCalendarStream.read(ics_file)
    print("File contains %s event(s)", len(calendar.events))
```

You can encode a calendar as ics content with `calendar_to_ics`, or stream
it to a file with `write`:

```python
from pathlib import Path

filename = Path("/tmp/output.ics")
with filename.open(mode="w", newline="") as ics_file:
    IcsCalendarStream.write(calendar, ics_file)
```

Open text files with `newline=""` so the CRLF line endings are written
unchanged.
"""

from __future__ import annotations

import io
from typing import BinaryIO, TextIO

from .calendar import Calendar
from .config import SerializationConfig
from .parsing.component import parse_calendar_lines
from .parsing.contentlines import ContentLineReader
from .parsing.encoder import write_calendar

__all__ = [
    "IcsCalendarStream",
]


class IcsCalendarStream:
    """Parse and encode a calendar as an ICS stream."""

    @classmethod
    def read(cls, stream: BinaryIO) -> Calendar:
        """Parse a calendar from a binary stream.

        Raises CalendarParseError on invalid content, with the partially
        parsed calendar attached as `calendar`, and CalendarStreamError
        when the stream cannot be read.
        """
        return parse_calendar_lines(ContentLineReader(stream))

    @classmethod
    def calendar_from_ics(cls, content: str | bytes) -> Calendar:
        """Load a single calendar from an ics string."""
        return parse_calendar_lines(ContentLineReader.from_content(content))

    @classmethod
    def write(
        cls,
        calendar: Calendar,
        sink: TextIO,
        config: SerializationConfig | None = None,
    ) -> None:
        """Serialize a calendar to a text stream.

        Raises CalendarStreamError when writing to the sink fails. Content
        already written is left in the sink.
        """
        write_calendar(calendar, sink, config or SerializationConfig())

    @classmethod
    def calendar_to_ics(
        cls, calendar: Calendar, config: SerializationConfig | None = None
    ) -> str:
        """Serialize a calendar as an ICS stream."""
        buffer = io.StringIO(newline="")
        cls.write(calendar, buffer, config)
        return buffer.getvalue()
