"""Parameters or meta information associated with a property.

Property parameters are additional modifiers on a property to specify extra
information about the value for the property (e.g. language, value type, a
display attribute, etc).

Parameters are passed to the property accessors as an ordered list of
`PropertyParameter` key/values pairs. The `with_*` helpers build the common
ones:

```python
event.add_property(
    "ATTENDEE",
    "mailto:jane@example.com",
    [with_cn("Jane Doe"), with_rsvp(True), with_partstat("ACCEPTED")],
)
```
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

__all__ = [
    "PropertyParameter",
    "is_quoted",
    "with_altrep",
    "with_cn",
    "with_cutype",
    "with_encoding",
    "with_fmt_type",
    "with_partstat",
    "with_role",
    "with_rsvp",
    "with_tzid",
    "with_value",
]


class PropertyParameter(NamedTuple):
    """A single parameter name with its values."""

    key: str
    values: list[str]


class ParameterType:
    """Base for the parameters defined in rfc5545."""

    ics_name: str
    quoted: bool = False


class AlternateText(ParameterType):
    """An alternate text representation for the property value."""

    ics_name = "ALTREP"
    quoted = True


class CommonName(ParameterType):
    """The common name associated with the user specified by the property."""

    ics_name = "CN"


class CalendarUserType(ParameterType):
    """Identifies the type of calendar user specified by the property."""

    ics_name = "CUTYPE"


class Delegator(ParameterType):
    """The calendar users that have delegated their participation."""

    ics_name = "DELEGATED-FROM"
    quoted = True


class Delegatee(ParameterType):
    """The calendar users to whom participation has been delegated."""

    ics_name = "DELEGATED-TO"
    quoted = True


class DirectoryEntry(ParameterType):
    """A reference to a directory entry for the calendar user."""

    ics_name = "DIR"
    quoted = True


class Encoding(ParameterType):
    """An alternate inline encoding for the property value."""

    ics_name = "ENCODING"


class FormatType(ParameterType):
    """The content type of a referenced object."""

    ics_name = "FMTTYPE"


class Member(ParameterType):
    """The group or list membership of the calendar user."""

    ics_name = "MEMBER"
    quoted = True


class ParticipationStatus(ParameterType):
    """The participation status for the calendar user."""

    ics_name = "PARTSTAT"


class ParticipationRole(ParameterType):
    """The participation role for the calendar user."""

    ics_name = "ROLE"


class Rsvp(ParameterType):
    """Whether a reply is expected from the calendar user."""

    ics_name = "RSVP"


class SentBy(ParameterType):
    """The calendar user that is acting on behalf of the specified user."""

    ics_name = "SENT-BY"
    quoted = True


class TimezoneId(ParameterType):
    """The timezone definition for a date or date-time value."""

    ics_name = "TZID"


class ValueDataType(ParameterType):
    """Explicitly specifies the value type of the property value."""

    ics_name = "VALUE"


PARAMETER_TYPES: list[type[ParameterType]] = [
    AlternateText,
    CommonName,
    CalendarUserType,
    Delegator,
    Delegatee,
    DirectoryEntry,
    Encoding,
    FormatType,
    Member,
    ParticipationStatus,
    ParticipationRole,
    Rsvp,
    SentBy,
    TimezoneId,
    ValueDataType,
]
PARAMETERS_BY_ICS_MAP = {param.ics_name: param for param in PARAMETER_TYPES}


def is_quoted(name: str) -> bool:
    """Return True if rfc5545 requires values of the parameter to be quoted."""
    if not (param_type := PARAMETERS_BY_ICS_MAP.get(name.upper())):
        return False
    return param_type.quoted


def to_params(params: Iterable[PropertyParameter] | None) -> dict[str, list[str]]:
    """Convert a list of parameters into the ordered mapping on a property.

    A later parameter with the same key replaces an earlier one.
    """
    result: dict[str, list[str]] = {}
    for key, values in params or ():
        result[key] = list(values)
    return result


def _single(param_type: type[ParameterType], value: str) -> PropertyParameter:
    return PropertyParameter(param_type.ics_name, [value])


def with_cn(common_name: str) -> PropertyParameter:
    """Common name of the calendar user, e.g. on an ATTENDEE."""
    return _single(CommonName, common_name)


def with_tzid(tzid: str) -> PropertyParameter:
    """Timezone of a DATE-TIME value, e.g. America/New_York."""
    return _single(TimezoneId, tzid)


def with_altrep(uri: str) -> PropertyParameter:
    """Alternate representation, which must be a valid URI."""
    return _single(AlternateText, uri)


def with_encoding(encoding: str) -> PropertyParameter:
    """Inline encoding of the value, e.g. BASE64."""
    return _single(Encoding, encoding)


def with_fmt_type(content_type: str) -> PropertyParameter:
    """Media type of a referenced or inline object, e.g. text/html."""
    return _single(FormatType, content_type)


def with_value(value_type: str) -> PropertyParameter:
    """Explicit value type, e.g. DATE to override a DATE-TIME default."""
    return _single(ValueDataType, value_type)


def with_rsvp(rsvp: bool) -> PropertyParameter:
    """Whether a reply is expected from the calendar user."""
    return _single(Rsvp, "TRUE" if rsvp else "FALSE")


def with_cutype(user_type: str) -> PropertyParameter:
    """Calendar user type, e.g. INDIVIDUAL or GROUP."""
    return _single(CalendarUserType, user_type)


def with_partstat(status: str) -> PropertyParameter:
    """Participation status, e.g. ACCEPTED or DECLINED."""
    return _single(ParticipationStatus, status)


def with_role(role: str) -> PropertyParameter:
    """Participation role, e.g. CHAIR or REQ-PARTICIPANT."""
    return _single(ParticipationRole, role)
