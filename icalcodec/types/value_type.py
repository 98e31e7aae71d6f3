"""Property value data types and the default value type of each property."""

from __future__ import annotations

import enum
from collections.abc import Mapping

__all__ = [
    "ValueType",
    "default_value_type",
    "resolve_value_type",
]

ATTR_VALUE = "VALUE"


class ValueType(str, enum.Enum):
    """A value data type from rfc5545 section 3.3."""

    BINARY = "BINARY"
    BOOLEAN = "BOOLEAN"
    CAL_ADDRESS = "CAL-ADDRESS"
    DATE = "DATE"
    DATE_TIME = "DATE-TIME"
    DURATION = "DURATION"
    FLOAT = "FLOAT"
    INTEGER = "INTEGER"
    PERIOD = "PERIOD"
    RECUR = "RECUR"
    TEXT = "TEXT"
    TIME = "TIME"
    URI = "URI"
    UTC_OFFSET = "UTC-OFFSET"


# Properties not listed here, including all x-name properties, are TEXT.
_DEFAULT_VALUE_TYPES: dict[str, ValueType] = {
    "ATTACH": ValueType.URI,
    "TZURL": ValueType.URI,
    "URL": ValueType.URI,
    "IMAGE": ValueType.URI,
    "CONFERENCE": ValueType.URI,
    "GEO": ValueType.FLOAT,
    "PERCENT-COMPLETE": ValueType.INTEGER,
    "PRIORITY": ValueType.INTEGER,
    "REPEAT": ValueType.INTEGER,
    "SEQUENCE": ValueType.INTEGER,
    "COMPLETED": ValueType.DATE_TIME,
    "DTEND": ValueType.DATE_TIME,
    "DUE": ValueType.DATE_TIME,
    "DTSTART": ValueType.DATE_TIME,
    "RECURRENCE-ID": ValueType.DATE_TIME,
    "EXDATE": ValueType.DATE_TIME,
    "RDATE": ValueType.DATE_TIME,
    "CREATED": ValueType.DATE_TIME,
    "DTSTAMP": ValueType.DATE_TIME,
    "LAST-MODIFIED": ValueType.DATE_TIME,
    "DURATION": ValueType.DURATION,
    "TRIGGER": ValueType.DURATION,
    "REFRESH-INTERVAL": ValueType.DURATION,
    "FREEBUSY": ValueType.PERIOD,
    "TZOFFSETFROM": ValueType.UTC_OFFSET,
    "TZOFFSETTO": ValueType.UTC_OFFSET,
    "ATTENDEE": ValueType.CAL_ADDRESS,
    "ORGANIZER": ValueType.CAL_ADDRESS,
    "RRULE": ValueType.RECUR,
    "EXRULE": ValueType.RECUR,
}


def default_value_type(name: str) -> ValueType:
    """Return the value type a property has when no VALUE parameter is set."""
    return _DEFAULT_VALUE_TYPES.get(name.upper(), ValueType.TEXT)


def resolve_value_type(name: str, params: Mapping[str, list[str]]) -> str:
    """Return the effective value type of a property.

    An explicit VALUE parameter with a single value overrides the default.
    Unrecognized VALUE types are returned as written.
    """
    for key, values in params.items():
        if key.upper() == ATTR_VALUE and len(values) == 1:
            try:
                return ValueType(values[0].upper())
            except ValueError:
                return values[0]
    return default_value_type(name)
