"""Library for parsing and encoding UTC-OFFSET values."""

from __future__ import annotations

import datetime
import re

__all__ = [
    "parse_utc_offset",
    "encode_utc_offset",
]

UTC_OFFSET_REGEX = re.compile(r"^([-+]?)([0-9]{2})([0-9]{2})([0-9]{2})?$")


def parse_utc_offset(value: str) -> datetime.timedelta:
    """Parse a UTC-OFFSET value such as -0500 or +053000."""
    if not (match := UTC_OFFSET_REGEX.fullmatch(value)):
        raise ValueError(f"Expected value to match UTC-OFFSET pattern: {value}")
    sign, hours, minutes, seconds = match.groups()
    result = datetime.timedelta(
        hours=int(hours or 0),
        minutes=int(minutes or 0),
        seconds=int(seconds or 0),
    )
    if sign == "-":
        result = -result
    return result


def encode_utc_offset(offset: datetime.timedelta) -> str:
    """Serialize a time delta as a UTC-OFFSET ICS value."""
    parts = []
    if offset < datetime.timedelta(days=0):
        parts.append("-")
        offset = -offset
    else:
        parts.append("+")
    seconds = offset.seconds
    hours = seconds // 3600
    seconds %= 3600
    parts.append(f"{hours:02}")
    minutes = seconds // 60
    seconds %= 60
    parts.append(f"{minutes:02}")
    if seconds:
        parts.append(f"{seconds:02}")
    return "".join(parts)
