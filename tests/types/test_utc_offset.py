"""Tests for UTC-OFFSET property values."""

import datetime

import pytest

from icalcodec.types.utc_offset import encode_utc_offset, parse_utc_offset


@pytest.mark.parametrize(
    "value,offset,encoded",
    [
        ("-0500", datetime.timedelta(hours=-5), "-0500"),
        ("+0100", datetime.timedelta(hours=1), "+0100"),
        ("0100", datetime.timedelta(hours=1), "+0100"),
        ("+0530", datetime.timedelta(hours=5, minutes=30), "+0530"),
        ("+053000", datetime.timedelta(hours=5, minutes=30), "+0530"),
        ("-001730", datetime.timedelta(minutes=-17, seconds=-30), "-001730"),
        ("+0000", datetime.timedelta(), "+0000"),
    ],
)
def test_utc_offset(value: str, offset: datetime.timedelta, encoded: str) -> None:
    """Test parsing and encoding UTC offsets."""
    assert parse_utc_offset(value) == offset
    assert encode_utc_offset(offset) == encoded


@pytest.mark.parametrize("value", ["5", "-05", "+05:00", "UTC"])
def test_invalid_utc_offset(value: str) -> None:
    """Test values that are not UTC offsets."""
    with pytest.raises(ValueError, match="UTC-OFFSET pattern"):
        parse_utc_offset(value)
