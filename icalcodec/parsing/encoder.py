"""Encode the component tree as rfc5545 text.

Each property is rendered as a single content line and then folded so that
no physical line is longer than the configured number of octets:

  - Parameters are written sorted by name so that output does not depend
    on the order parameters were added.
  - TEXT values are escaped, other values are written as stored. Content
    that would not parse back the same, such as a name that is not a token
    or a line break in a value without an escape, raises ValueError.
  - A fold is a line ending followed by a single space. The break point is
    the last whitespace or tag boundary that fits, otherwise the last whole
    character that fits. A fold never splits a multi-byte UTF-8 character.
"""

from __future__ import annotations

import logging
import re
from typing import TextIO

from icalcodec.calendar import Calendar
from icalcodec.component import Component
from icalcodec.config import SerializationConfig
from icalcodec.exceptions import CalendarStreamError
from icalcodec.parameters import is_quoted
from icalcodec.property import Property
from icalcodec.types.text import escape_text
from icalcodec.types.value_type import ValueType

from .const import ATTR_BEGIN, ATTR_END, FOLD_INDENT, FOLD_LEN, VCALENDAR, WSP
from .unicode import NAME_RE, PARAM_CONTROL

__all__ = [
    "encode_parameter_value",
    "encode_property",
    "fold_line",
    "write_property",
    "write_component",
    "write_calendar",
]

_LOGGER = logging.getLogger(__name__)

_ENCODING = "utf-8"

# Characters that must be escaped in parameter values
_QUOTED_UNSAFE_CHAR_RE = re.compile(r'["\\\n]')
_UNSAFE_CHAR_RE = re.compile(r"[,\";:\\'\n]")

# A fold may happen before whitespace or '<', or just after '>'
_BREAK_BEFORE = frozenset([*WSP, "<"])
_BREAK_AFTER = ">"


def _escape_char(match: re.Match[str]) -> str:
    if (char := match.group(0)) == "\n":
        return "\\n"
    return f"\\{char}"


def encode_parameter_value(name: str, value: str) -> str:
    """Encode a single parameter value, quoting it where rfc5545 requires."""
    if is_quoted(name):
        return f'"{_QUOTED_UNSAFE_CHAR_RE.sub(_escape_char, value)}"'
    return _UNSAFE_CHAR_RE.sub(_escape_char, value)


def _check_name(name: str, kind: str) -> None:
    if not NAME_RE.fullmatch(name):
        raise ValueError(
            f"Invalid {kind} name '{name}', expected letters, digits or '-'"
        )


def _check_property(prop: Property, value_type: str) -> None:
    """Reject content that can't be written as a single content line.

    TEXT values and parameter values have an escape for a newline, other
    values do not. No value may contain a carriage return.
    """
    _check_name(prop.name, "property")
    for key, values in prop.params.items():
        _check_name(key, "parameter")
        for value in values:
            if any(char in PARAM_CONTROL and char != "\n" for char in value):
                raise ValueError(
                    f"Invalid control character in value of parameter '{key}' "
                    f"in property '{prop.name}'"
                )
    if "\r" in prop.value:
        raise ValueError(f"Invalid carriage return in property '{prop.name}'")
    if value_type != ValueType.TEXT and "\n" in prop.value:
        raise ValueError(
            f"Invalid newline in value of property '{prop.name}', only TEXT "
            "values may contain a newline"
        )


def encode_property(prop: Property) -> str:
    """Encode a Property as a single unfolded content line.

    Raises ValueError when the property can't be represented as rfc5545
    text, for example a name that is not a token.
    """
    value_type = prop.value_type()
    _check_property(prop, value_type)
    result = [prop.name]
    for key in sorted(prop.params):
        values = ",".join(
            encode_parameter_value(key, value) for value in prop.params[key]
        )
        result.append(f";{key}={values}")
    result.append(":")
    if value_type == ValueType.TEXT:
        result.append(escape_text(prop.value))
    else:
        result.append(prop.value)
    return "".join(result)


def _break_index(contentline: str, max_octets: int) -> int:
    """Return the index to break the line at so the head fits max_octets."""
    size = 0
    boundary = 0
    previous = ""
    for index, char in enumerate(contentline):
        if index > 0 and (char in _BREAK_BEFORE or previous == _BREAK_AFTER):
            boundary = index
        size += len(char.encode(_ENCODING))
        if size > max_octets:
            return boundary or max(index, 1)
        previous = char
    return len(contentline)


def fold_line(contentline: str, max_length: int = FOLD_LEN) -> list[str]:
    """Split a content line into physical lines of at most max_length octets.

    Continuation lines start with the fold indent which counts towards the
    limit.
    """
    segments: list[str] = []
    remaining = contentline
    limit = max_length
    while len(remaining.encode(_ENCODING)) > limit:
        index = _break_index(remaining, limit)
        segments.append(remaining[:index])
        remaining = remaining[index:]
        limit = max_length - len(FOLD_INDENT)
    segments.append(remaining)
    return [segments[0], *(f"{FOLD_INDENT}{segment}" for segment in segments[1:])]


def _write_line(sink: TextIO, line: str, config: SerializationConfig) -> None:
    sink.write(f"{line}{config.newline}")


def write_property(
    prop: Property, sink: TextIO, config: SerializationConfig
) -> None:
    """Write a property as folded content lines."""
    lines = fold_line(encode_property(prop), config.max_length_for(prop.name))
    try:
        for line in lines:
            _write_line(sink, line, config)
    except OSError as err:
        raise CalendarStreamError(f"Failed to write property {prop.name}") from err


def _write_marker(
    marker: str, name: str, sink: TextIO, config: SerializationConfig
) -> None:
    _check_name(name, "component")
    try:
        for line in fold_line(f"{marker}:{name}", config.max_length):
            _write_line(sink, line, config)
    except OSError as err:
        raise CalendarStreamError(f"Failed to write {marker}:{name}") from err


def write_component(
    component: Component, sink: TextIO, config: SerializationConfig
) -> None:
    """Write a component, its properties and its sub-components."""
    _write_marker(ATTR_BEGIN, component.name, sink, config)
    for prop in component.properties:
        write_property(prop, sink, config)
    for child in component.components:
        write_component(child, sink, config)
    _write_marker(ATTR_END, component.name, sink, config)


def write_calendar(
    calendar: Calendar, sink: TextIO, config: SerializationConfig
) -> None:
    """Write a calendar wrapped in BEGIN:VCALENDAR and END:VCALENDAR."""
    _LOGGER.debug(
        "Encoding calendar with %d properties and %d components",
        len(calendar.properties),
        len(calendar.components),
    )
    _write_marker(ATTR_BEGIN, VCALENDAR, sink, config)
    for prop in calendar.properties:
        write_property(prop, sink, config)
    for component in calendar.components:
        write_component(component, sink, config)
    _write_marker(ATTR_END, VCALENDAR, sink, config)
