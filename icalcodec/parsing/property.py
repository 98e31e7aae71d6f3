"""A parser for rfc5545 content lines.

This converts a single unfolded content line into a `Property`, splitting
the line into the property name, the parameters and the value. This
library does not attempt to interpret the meaning of the properties or
types themselves, with the exception of TEXT values which are unescaped.

For example, given a content line of:

  ATTENDEE;CN="Doe, Jane";ROLE=CHAIR:mailto:jane@example.com

This library would create a Property object with this structure:

  Property(
    name='ATTENDEE',
    value='mailto:jane@example.com',
    params={
        'CN': ['Doe, Jane'],
        'ROLE': ['CHAIR'],
    }
  )

The grammar is:

  contentline = name *(";" param ) ":" value
  param       = param-name "=" param-value *("," param-value)
  param-value = paramtext / quoted-string

Parameter values may use backslash escapes: `\\n` or `\\N` is a newline and
any other escaped character stands for itself.
"""

from __future__ import annotations

from collections.abc import Generator, Iterable

from icalcodec.exceptions import CalendarParseError
from icalcodec.property import Property
from icalcodec.types.text import unescape_text
from icalcodec.types.value_type import ValueType

from .unicode import NAME_RE, PARAM_CONTROL

__all__ = [
    "parse_property",
    "parse_contentlines",
]

_PARAM_DELIMITERS = (",", ";", ":")
_QUOTE = '"'
_ESCAPE = "\\"
_ESCAPED_NEWLINE = ("n", "N")


def _parse_param_value(
    line: str, pos: int, param_name: str, property_name: str
) -> tuple[str, int]:
    """Read one parameter value starting at pos.

    Returns the decoded value and the position of the delimiter that
    follows it (or the end of the line).
    """
    line_len = len(line)
    quoted = pos < line_len and line[pos] == _QUOTE
    if quoted:
        pos += 1
    chars: list[str] = []
    while True:
        if pos >= line_len:
            if quoted:
                raise CalendarParseError(
                    f"Unexpected end of line: unclosed quoted value for parameter "
                    f"'{param_name}' in property '{property_name}'",
                    detailed_error=line,
                )
            return "".join(chars), pos

        char = line[pos]
        if char in PARAM_CONTROL:
            raise CalendarParseError(
                f"Unexpected control character {ord(char):#04x} in value of "
                f"parameter '{param_name}' in property '{property_name}'",
                detailed_error=line,
            )
        if char == _ESCAPE:
            if pos + 1 >= line_len:
                raise CalendarParseError(
                    f"Unexpected end of line after escape in value of parameter "
                    f"'{param_name}' in property '{property_name}'",
                    detailed_error=line,
                )
            escaped = line[pos + 1]
            chars.append("\n" if escaped in _ESCAPED_NEWLINE else escaped)
            pos += 2
            continue
        if char == _QUOTE:
            if not quoted:
                raise CalendarParseError(
                    f"Unexpected double quote in value of parameter '{param_name}' "
                    f"in property '{property_name}'",
                    detailed_error=line,
                )
            pos += 1
            if pos < line_len and line[pos] not in _PARAM_DELIMITERS:
                raise CalendarParseError(
                    f"Expected {_PARAM_DELIMITERS} after quoted value of parameter "
                    f"'{param_name}' in property '{property_name}', got '{line[pos]}'",
                    detailed_error=line,
                )
            return "".join(chars), pos
        if not quoted and char in _PARAM_DELIMITERS:
            return "".join(chars), pos
        chars.append(char)
        pos += 1


def _parse_param(
    line: str, pos: int, property_name: str, params: dict[str, list[str]]
) -> int:
    """Read a parameter starting at pos (just after the ';').

    The values are accumulated into params and the position of the ';' or
    ':' ending the parameter is returned.
    """
    if not (match := NAME_RE.match(line, pos)):
        raise CalendarParseError(
            f"Invalid parameter format: expected parameter name in property "
            f"'{property_name}'",
            detailed_error=line,
        )
    param_name = match.group(0)
    pos = match.end()
    if pos >= len(line) or line[pos] != "=":
        raise CalendarParseError(
            f"Invalid parameter format: missing '=' after parameter name "
            f"'{param_name}' in property '{property_name}'",
            detailed_error=line,
        )
    pos += 1

    values = params.setdefault(param_name, [])
    while True:
        value, pos = _parse_param_value(line, pos, param_name, property_name)
        values.append(value)
        if pos >= len(line):
            raise CalendarParseError(
                f"Unexpected end of line after value of parameter '{param_name}' "
                f"in property '{property_name}'. Expected {_PARAM_DELIMITERS}",
                detailed_error=line,
            )
        if line[pos] != ",":
            return pos
        pos += 1


def parse_property(line: str) -> Property:
    """Parse a single content line into a Property.

    Will raise a CalendarParseError on failure.
    """
    if not (match := NAME_RE.match(line)):
        raise CalendarParseError(
            "Invalid property line, expected a property name", detailed_error=line
        )
    name = match.group(0)
    pos = match.end()
    line_len = len(line)

    params: dict[str, list[str]] = {}
    while True:
        if pos >= line_len:
            raise CalendarParseError(
                f"Unexpected end of line in property '{name}'. Expected ';' or ':'",
                detailed_error=line,
            )
        if (char := line[pos]) == ":":
            break
        if char != ";":
            raise CalendarParseError(
                f"Invalid property line, unexpected '{char}' in property '{name}'. "
                "Expected ';' or ':'",
                detailed_error=line,
            )
        pos = _parse_param(line, pos + 1, name, params)

    prop = Property(name=name, value=line[pos + 1 :], params=params)
    if prop.value_type() == ValueType.TEXT:
        prop.value = unescape_text(prop.value)
    return prop


def parse_contentlines(
    contentlines: Iterable[str],
) -> Generator[Property, None, None]:
    """Parse content lines into Property objects, skipping empty lines."""
    for contentline in contentlines:
        if not contentline:
            continue
        yield parse_property(contentline)
