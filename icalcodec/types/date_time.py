"""Library for parsing and encoding DATE and DATE-TIME values.

Values may be written in four shapes:

  19980119             an all day DATE, floating
  19980119Z            an all day DATE in UTC (not rfc5545, seen in the wild)
  19980119T070000      a DATE-TIME, floating or in the TZID timezone
  19980119T070000Z     a DATE-TIME in UTC

A TZID parameter takes precedence over a trailing 'Z': a value carrying
both is interpreted in the TZID timezone. Floating values are returned as
naive datetimes.
"""

from __future__ import annotations

import datetime
import logging
import re
import zoneinfo

from icalcodec.exceptions import ParameterValueError
from icalcodec.property import Property

__all__ = [
    "parse_time",
    "format_date_time",
]

_LOGGER = logging.getLogger(__name__)

TZID = "TZID"
MIDNIGHT = datetime.time()
TIMESTAMP_REGEX = re.compile(r"^([0-9]{8})?([TZ])?([0-9]{6})?(Z)?$")


def _property_timezone(prop: Property, utc: bool) -> datetime.tzinfo | None:
    """Return the timezone of the property value.

    The TZID parameter wins over the UTC suffix.
    """
    if tzids := prop.get_parameter_values(TZID):
        if len(tzids) != 1:
            raise ParameterValueError(f"Expected one TZID, got {tzids}")
        try:
            return zoneinfo.ZoneInfo(tzids[0])
        except (zoneinfo.ZoneInfoNotFoundError, ValueError) as err:
            raise ParameterValueError(
                f"Expected TZID value '{tzids[0]}' to be valid timezone"
            ) from err
    if utc:
        return datetime.timezone.utc
    return None


def _parse_date(value: str) -> datetime.date:
    try:
        return datetime.date(int(value[0:4]), int(value[4:6]), int(value[6:8]))
    except ValueError as err:
        raise ValueError(f"Invalid date value '{value}': {err}") from err


def _parse_time_of_day(value: str) -> datetime.time:
    try:
        return datetime.time(int(value[0:2]), int(value[2:4]), int(value[4:6]))
    except ValueError as err:
        raise ValueError(f"Invalid time value '{value}': {err}") from err


def parse_time(
    prop: Property, expect_all_day: bool = False
) -> tuple[datetime.datetime, bool]:
    """Parse a DATE or DATE-TIME property value.

    Returns the value and whether it is an all day value. All day values are
    returned as midnight at the start of the day. When `expect_all_day` is
    set, any time of day in the value is ignored.
    """
    value = prop.value
    if not (match := TIMESTAMP_REGEX.fullmatch(value)):
        raise ValueError(f"Time value not matched, got '{value}'")
    date_part, t_or_z, time_part, z_suffix = match.groups()
    if not date_part:
        raise ValueError(f"Time value matched but not supported, got '{value}'")
    tzinfo = _property_timezone(prop, utc="Z" in (t_or_z, z_suffix))
    date_value = _parse_date(date_part)

    if expect_all_day:
        return datetime.datetime.combine(date_value, MIDNIGHT, tzinfo=tzinfo), True
    if time_part and t_or_z == "T":
        result = datetime.datetime.combine(
            date_value, _parse_time_of_day(time_part), tzinfo=tzinfo
        )
        _LOGGER.debug("Parsed %s as %s", value, result)
        return result, False
    if not time_part and t_or_z != "T" and not z_suffix:
        return datetime.datetime.combine(date_value, MIDNIGHT, tzinfo=tzinfo), True
    raise ValueError(f"Time value matched but not supported, got '{value}'")


def format_date_time(value: datetime.date | datetime.datetime) -> str:
    """Encode a date or datetime as a DATE or DATE-TIME value.

    Aware datetimes are converted to UTC.
    """
    if not isinstance(value, datetime.datetime):
        return value.strftime("%Y%m%d")
    if value.tzinfo is None:
        return value.strftime("%Y%m%dT%H%M%S")
    return value.astimezone(datetime.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
