"""Library for parsing and encoding DURATION values."""

from __future__ import annotations

import datetime
import re

__all__ = [
    "parse_duration",
    "parse_durations",
    "encode_duration",
]

DATE_PART = r"(\d+)D"
TIME_PART = r"T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?"
DATETIME_PART = f"(?:{DATE_PART})?(?:{TIME_PART})?"
WEEKS_PART = r"(\d+)W"
DURATION_REGEX = re.compile(f"([-+]?)P(?:{WEEKS_PART}|{DATETIME_PART})$")


def parse_duration(value: str) -> datetime.timedelta:
    """Parse an rfc5545 DURATION value such as P15DT5H0M20S or -PT15M."""
    if not (match := DURATION_REGEX.fullmatch(value.strip().upper())):
        raise ValueError(f"Expected value to match DURATION pattern: {value}")
    sign, weeks, days, hours, minutes, seconds = match.groups()
    result: datetime.timedelta
    if weeks:
        result = datetime.timedelta(weeks=int(weeks))
    else:
        result = datetime.timedelta(
            days=int(days or 0),
            hours=int(hours or 0),
            minutes=int(minutes or 0),
            seconds=int(seconds or 0),
        )
    if sign == "-":
        result = -result
    return result


def parse_durations(value: str) -> list[datetime.timedelta]:
    """Parse a comma separated list of DURATION values."""
    return [parse_duration(part) for part in value.split(",") if part.strip()]


def encode_duration(duration: datetime.timedelta) -> str:
    """Serialize a time delta as a DURATION ICS value."""
    parts = []
    if duration < datetime.timedelta(days=0):
        parts.append("-")
        duration = -duration
    parts.append("P")
    days = duration.days
    if days and days % 7 == 0 and not duration.seconds:
        return "".join([*parts, f"{days // 7}W"])
    if days:
        parts.append(f"{days}D")
    if duration.seconds or not days:
        parts.append("T")
        seconds = duration.seconds
        hours = seconds // 3600
        seconds %= 3600
        if hours:
            parts.append(f"{hours}H")
        minutes = seconds // 60
        seconds %= 60
        if minutes:
            parts.append(f"{minutes}M")
        if seconds or not (hours or minutes):
            parts.append(f"{seconds}S")
    return "".join(parts)
