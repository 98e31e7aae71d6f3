"""Configuration for encoding calendars as rfc5545 text."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .parsing.const import CRLF, FOLD_LEN, LF, MIN_FOLD_LEN

__all__ = [
    "SerializationConfig",
]


class SerializationConfig(BaseModel):
    """Options that control how content lines are written.

    rfc5545 mandates CRLF line endings and recommends folding lines longer
    than 75 octets. LF line endings are accepted as a convenience.
    """

    model_config = ConfigDict(frozen=True)

    max_length: int = Field(default=FOLD_LEN, ge=MIN_FOLD_LEN)
    """Maximum octets in a physical line, excluding the line ending."""

    newline: str = CRLF
    """Line ending written after every physical line."""

    property_max_length: dict[str, int] = Field(default_factory=dict)
    """Per property name overrides of max_length."""

    @field_validator("newline")
    @classmethod
    def _check_newline(cls, value: str) -> str:
        if value not in (CRLF, LF):
            raise ValueError(f"Newline must be CRLF or LF, got {value!r}")
        return value

    @field_validator("property_max_length")
    @classmethod
    def _check_property_max_length(cls, value: dict[str, int]) -> dict[str, int]:
        for name, max_length in value.items():
            if max_length < MIN_FOLD_LEN:
                raise ValueError(
                    f"Maximum length for {name} must be at least {MIN_FOLD_LEN}, "
                    f"got {max_length}"
                )
        return value

    def max_length_for(self, name: str) -> int:
        """Return the maximum physical line length for the property."""
        return self.property_max_length.get(name, self.max_length)
