"""Library for handling rfc5545 properties.

A property is the definition of an individual attribute describing a
calendar object or a calendar component. Properties are stored exactly as
they were parsed: a name, the ordered parameters and the value string. The
only interpretation applied is TEXT unescaping, so a property whose value
type is TEXT holds the decoded string.

Both components and the calendar itself hold an ordered list of properties
and share the accessors in `PropertyContainer`. These are simple linear
scans, which is fine for the tens of properties a component typically has.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .exceptions import PropertyNotFoundError
from .parameters import PropertyParameter, to_params
from .parsing.unicode import NAME_RE
from .types.value_type import resolve_value_type

__all__ = [
    "Property",
    "PropertyContainer",
]


def _check_name(name: str) -> None:
    if not NAME_RE.fullmatch(name):
        raise ValueError(
            f"Invalid property name '{name}', expected letters, digits or '-'"
        )


@dataclass
class Property:
    """An rfc5545 property."""

    name: str
    value: str
    params: dict[str, list[str]] = field(default_factory=dict)

    def value_type(self) -> str:
        """Return the effective value type, e.g. TEXT or DATE-TIME."""
        return resolve_value_type(self.name, self.params)

    def get_parameter_values(self, name: str) -> list[str]:
        """Return the list of property parameter values."""
        for key, values in self.params.items():
            if key.upper() == name.upper():
                return values
        return []

    def get_parameter_value(self, name: str) -> str | None:
        """Return the property parameter value."""
        values = self.get_parameter_values(name)
        if not values:
            return None
        if len(values) > 1:
            raise ValueError(f"Expected only a single parameter value, got {values}")
        return values[0]

    def has_parameter(self, name: str) -> bool:
        """Return True if the parameter is present."""
        return any(key.upper() == name.upper() for key in self.params)


@dataclass
class PropertyContainer:
    """An ordered list of properties with accessors used by helpers."""

    properties: list[Property] = field(default_factory=list)

    def get_property(self, name: str) -> Property | None:
        """Return the first property with the specified name."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def get_properties(self, name: str) -> list[Property]:
        """Return all properties with the specified name in order."""
        return [prop for prop in self.properties if prop.name == name]

    def has_property(self, name: str) -> bool:
        """Return True if a property with the name is present."""
        return self.get_property(name) is not None

    def require_property(self, name: str) -> Property:
        """Return the first property with the name or raise if absent."""
        if (prop := self.get_property(name)) is None:
            raise PropertyNotFoundError(f"Property not found: {name}")
        return prop

    def set_property(
        self,
        name: str,
        value: str,
        params: Iterable[PropertyParameter] | None = None,
    ) -> Property:
        """Replace the value and parameters of the first match, else append."""
        _check_name(name)
        if (prop := self.get_property(name)) is None:
            return self.add_property(name, value, params)
        prop.value = value
        prop.params = to_params(params)
        return prop

    def add_property(
        self,
        name: str,
        value: str,
        params: Iterable[PropertyParameter] | None = None,
    ) -> Property:
        """Append a property, used for properties that may repeat."""
        _check_name(name)
        prop = Property(name=name, value=value, params=to_params(params))
        self.properties.append(prop)
        return prop

    def replace_property(
        self,
        name: str,
        value: str,
        params: Iterable[PropertyParameter] | None = None,
    ) -> list[Property]:
        """Remove all properties with the name then append a new one.

        Returns the removed properties.
        """
        _check_name(name)
        removed = self.remove_property(name)
        self.add_property(name, value, params)
        return removed

    def remove_property(
        self,
        name: str,
        *,
        value: str | None = None,
        predicate: Callable[[Property], bool] | None = None,
    ) -> list[Property]:
        """Remove properties with the name and return the removed entries.

        When `value` is given only properties with that value are removed,
        and when `predicate` is given only properties it accepts.
        """

        def matches(prop: Property) -> bool:
            if prop.name != name:
                return False
            if value is not None and prop.value != value:
                return False
            if predicate is not None and not predicate(prop):
                return False
            return True

        kept: list[Property] = []
        removed: list[Property] = []
        for prop in self.properties:
            (removed if matches(prop) else kept).append(prop)
        self.properties = kept
        return removed
