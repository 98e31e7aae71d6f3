"""Character sets used in rfc5545.

This file defines the character sets used when tokenizing content lines,
expressed as pyparsing unicode ranges and compiled into the regular
expressions used by the property parser.
"""

from __future__ import annotations

import re
from typing import cast

from pyparsing import unicode_set
from pyparsing.unicode import UnicodeRangeList


class CharRange(unicode_set):
    """A base class that returns all characters in a range."""

    @classmethod
    def all(cls) -> list[str]:
        """Return all characters from the range."""
        return cast(list[str], cls._chars_for_ranges)


class NameChar(CharRange):
    """Characters allowed in an iana-token or x-name."""

    _ranges: UnicodeRangeList = [
        (0x2D,),  # -
        (0x30, 0x39),  # 0-9
        (0x41, 0x5A),  # A-Z
        (0x61, 0x7A),  # a-z
    ]


class ParamControl(CharRange):
    """Controls rejected in a parameter value, all except HTAB."""

    _ranges: UnicodeRangeList = [
        (0x00, 0x08),
        (0x0A, 0x1F),
    ]


NAME_CHAR = "".join(NameChar.all())
PARAM_CONTROL = frozenset(ParamControl.all())

NAME_RE = re.compile(f"[{re.escape(NAME_CHAR)}]+")
