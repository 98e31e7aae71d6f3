"""Build the component tree from rfc5545 content lines.

The calendar is read one content line at a time. BEGIN and END lines open
and close components, and every other line is a property of the component
that is currently open. The outermost component must be a VCALENDAR, which
is not kept as a component itself: its properties and sub-components are
stored on the Calendar.

The top level is a small state machine:

  BEGIN       expect BEGIN:VCALENDAR
  PROPERTIES  calendar properties, then BEGIN:<component> or END:VCALENDAR
  COMPONENTS  only BEGIN:<component> or END:VCALENDAR
  END         no further content is allowed

Components nested inside the calendar are parsed recursively. Unknown
properties and components are kept as they are so that content can be
written back out without loss.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator

from icalcodec.calendar import Calendar
from icalcodec.component import Component, new_component
from icalcodec.exceptions import CalendarParseError, CalendarStructureError
from icalcodec.property import Property

from .const import ATTR_BEGIN, ATTR_END, VCALENDAR
from .contentlines import ContentLineReader
from .property import parse_property

__all__ = [
    "parse_calendar_lines",
]

_LOGGER = logging.getLogger(__name__)


class _State(enum.Enum):
    """States while reading the top level calendar."""

    BEGIN = "begin"
    PROPERTIES = "properties"
    COMPONENTS = "components"
    END = "end"


def _is_begin(prop: Property) -> bool:
    return prop.name.upper() == ATTR_BEGIN


def _is_end(prop: Property) -> bool:
    return prop.name.upper() == ATTR_END


def _read_properties(reader: ContentLineReader) -> Iterator[tuple[int, Property]]:
    """Parse each non-empty content line, tagged with its line number."""
    for line in reader:
        if not line.value:
            continue
        try:
            prop = parse_property(line.value)
        except CalendarParseError as err:
            raise CalendarParseError(
                f"Failed to parse line {line.line_number}: {err.message}",
                detailed_error=err.detailed_error,
                line_number=line.line_number,
            ) from err
        yield line.line_number, prop


def _parse_component(
    lines: Iterator[tuple[int, Property]],
    component: Component,
    begin: Property,
    begin_line: int,
) -> None:
    """Fill the component opened by the begin line, including its children.

    Components are attached to their parent before their content is read so
    that a failed parse leaves the partial component in place.
    """
    for line_number, prop in lines:
        if _is_end(prop):
            if prop.value != begin.value:
                raise CalendarStructureError(
                    f"Unbalanced end on line {line_number}: expected "
                    f"{ATTR_END}:{begin.value}, got {ATTR_END}:{prop.value}",
                    line_number=line_number,
                )
            _LOGGER.debug(
                "Parsed component %s with %d properties and %d components",
                component.name,
                len(component.properties),
                len(component.components),
            )
            return
        if _is_begin(prop):
            if prop.value.upper() == VCALENDAR:
                raise CalendarStructureError(
                    f"Malformed calendar on line {line_number}: {VCALENDAR} not "
                    f"where expected inside {begin.value}",
                    line_number=line_number,
                )
            child = component.add_component(new_component(prop.value))
            _parse_component(lines, child, prop, line_number)
            continue
        component.properties.append(prop)

    raise CalendarStructureError(
        f"Ran out of lines: expected {ATTR_END}:{begin.value} for component "
        f"started on line {begin_line}",
        line_number=begin_line,
    )


def parse_calendar_lines(reader: ContentLineReader) -> Calendar:
    """Parse the content lines of a single VCALENDAR into a Calendar.

    Any error raised carries the partially parsed calendar in the
    `calendar` attribute.
    """
    calendar = Calendar()
    try:
        _parse_calendar(reader, calendar)
    except CalendarParseError as err:
        err.calendar = calendar
        raise
    return calendar


def _parse_calendar(reader: ContentLineReader, calendar: Calendar) -> None:
    state = _State.BEGIN
    lines = _read_properties(reader)
    for line_number, prop in lines:
        if state == _State.BEGIN:
            if not _is_begin(prop) or prop.value.upper() != VCALENDAR:
                raise CalendarStructureError(
                    f"Malformed calendar on line {line_number}: expected "
                    f"{ATTR_BEGIN}:{VCALENDAR}, got '{prop.name}:{prop.value}'",
                    line_number=line_number,
                )
            state = _State.PROPERTIES
        elif state == _State.END:
            raise CalendarStructureError(
                f"Malformed calendar on line {line_number}: unexpected "
                f"'{prop.name}' after {ATTR_END}:{VCALENDAR}",
                line_number=line_number,
            )
        elif _is_end(prop):
            if prop.value.upper() != VCALENDAR:
                raise CalendarStructureError(
                    f"Unbalanced end on line {line_number}: expected "
                    f"{ATTR_END}:{VCALENDAR}, got {ATTR_END}:{prop.value}",
                    line_number=line_number,
                )
            state = _State.END
        elif _is_begin(prop):
            if prop.value.upper() == VCALENDAR:
                raise CalendarStructureError(
                    f"Malformed calendar on line {line_number}: {VCALENDAR} not "
                    "where expected",
                    line_number=line_number,
                )
            child = calendar.add_component(new_component(prop.value))
            _parse_component(lines, child, prop, line_number)
            state = _State.COMPONENTS
        elif state == _State.PROPERTIES:
            calendar.properties.append(prop)
        else:
            raise CalendarStructureError(
                f"Malformed calendar on line {line_number}: expected "
                f"{ATTR_BEGIN} or {ATTR_END}, got '{prop.name}'",
                line_number=line_number,
            )

    if state == _State.BEGIN:
        raise CalendarStructureError(
            f"Malformed calendar: expected {ATTR_BEGIN}:{VCALENDAR}, got no content"
        )
    if state != _State.END:
        raise CalendarStructureError(
            f"Ran out of lines: expected {ATTR_END}:{VCALENDAR}"
        )
    _LOGGER.debug(
        "Parsed calendar with %d properties and %d components",
        len(calendar.properties),
        len(calendar.components),
    )
