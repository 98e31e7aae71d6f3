"""Library for rfc5545 property value types.

The parser keeps every property value as a string. The only value type the
codec itself interprets is TEXT, which is unescaped on parse and escaped on
serialization. The remaining modules here are helpers for callers that want
to interpret DATE, DATE-TIME, DURATION or UTC-OFFSET values.
"""

__all__ = [
    "date_time",
    "duration",
    "text",
    "utc_offset",
    "value_type",
]
