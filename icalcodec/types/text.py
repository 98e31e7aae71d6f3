"""Library for escaping and unescaping TEXT values."""

import re

__all__ = [
    "escape_text",
    "unescape_text",
]

UNESCAPE_CHAR = {"\\\\": "\\", "\\;": ";", "\\,": ",", "\\N": "\n", "\\n": "\n"}
ESCAPE_CHAR = {"\\": "\\\\", ";": "\\;", ",": "\\,", "\n": "\\n"}

_UNESCAPE_RE = re.compile(r"\\[\\;,Nn]")
_ESCAPE_RE = re.compile(r"[\\;,\n]")


def unescape_text(value: str) -> str:
    """Decode an rfc5545 TEXT value.

    Replacement is a single left to right pass so that an escaped backslash
    followed by 'n' is not mistaken for an escaped newline.
    """
    return _UNESCAPE_RE.sub(lambda match: UNESCAPE_CHAR[match.group(0)], value)


def escape_text(value: str) -> str:
    """Encode a string as an rfc5545 TEXT value."""
    return _ESCAPE_RE.sub(lambda match: ESCAPE_CHAR[match.group(0)], value)
