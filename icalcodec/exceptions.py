"""Exceptions for icalcodec library."""

from __future__ import annotations

from typing import Any


class CalendarError(Exception):
    """Base exception for all icalcodec errors."""


class CalendarParseError(CalendarError):
    """Exception raised when parsing an ical string.

    The 'message' attribute contains a human-readable message about the
    error that occurred. The 'detailed_error' attribute can provide additional
    information about the error, such as the offending content line, useful
    for debugging purposes. The 'line_number' attribute is the physical line
    of the input where the failing content line started, when known.

    When raised while building a calendar, the 'calendar' attribute holds the
    partially built calendar to aid diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        detailed_error: str | None = None,
        line_number: int | None = None,
    ) -> None:
        """Initialize the CalendarParseError with a message."""
        super().__init__(message)
        self.message = message
        self.detailed_error = detailed_error
        self.line_number = line_number
        self.calendar: Any = None


class CalendarStructureError(CalendarParseError):
    """Exception raised when components are not nested correctly.

    Examples are a missing BEGIN:VCALENDAR, an END that does not match its
    BEGIN, or the stream ending while a component is still open.
    """


class CalendarStreamError(CalendarError):
    """Exception raised when reading from or writing to a stream fails.

    The underlying OSError is available as '__cause__'.
    """


class PropertyNotFoundError(CalendarError, KeyError):
    """Exception raised when a required property is absent."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ParameterValueError(ValueError):
    """Exception raised when a property parameter makes a value invalid.

    Typed value helpers raise a plain ValueError when a property value does
    not look like the requested data type, and this error when the value is
    of the right shape but a parameter (e.g. an unknown TZID) is invalid.
    """
