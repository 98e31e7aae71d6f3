"""Utility methods used by multiple components."""

from __future__ import annotations

from importlib import metadata

__all__ = [
    "prodid_factory",
]


PRODID = "github.com/icalcodec"
VERSION = metadata.version("icalcodec")


def prodid_factory() -> str:
    """Return the product identifier to facilitate mocking."""
    return f"-//{PRODID}//{VERSION}//EN"
