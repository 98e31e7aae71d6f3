"""Library for handling rfc5545 components.

An iCalendar object consists of one or more components, that may have
properties or sub-components. An example of a component might be an event,
a to-do, a journal entry, timezone info, etc.

Each known component type has its own class so that callers can find
components of a type with `isinstance`, for example all events of a
calendar. Any other component name is kept as an `Other` component with the
name as written so that vendor components survive a round trip.

Components created here have no semantic meaning, but hold all the data
needed to interpret them based on the type.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from .property import PropertyContainer

__all__ = [
    "ComponentType",
    "Component",
    "Event",
    "Todo",
    "Journal",
    "FreeBusy",
    "Timezone",
    "Alarm",
    "Standard",
    "Daylight",
    "Other",
    "new_component",
    "filter_components",
]

ATTR_UID = "UID"

T_COMPONENT = TypeVar("T_COMPONENT", bound="Component")


class ComponentType(str, enum.Enum):
    """Names of the components defined in rfc5545."""

    VCALENDAR = "VCALENDAR"
    VEVENT = "VEVENT"
    VTODO = "VTODO"
    VJOURNAL = "VJOURNAL"
    VFREEBUSY = "VFREEBUSY"
    VTIMEZONE = "VTIMEZONE"
    VALARM = "VALARM"
    STANDARD = "STANDARD"
    DAYLIGHT = "DAYLIGHT"


def filter_components(
    components: Iterable[Component], kind: type[T_COMPONENT]
) -> list[T_COMPONENT]:
    """Return the components that are instances of the specified type."""
    return [component for component in components if isinstance(component, kind)]


@dataclass
class Component(PropertyContainer):
    """Properties and sub-components shared by every component type."""

    components: list[Component] = field(default_factory=list)

    component_type: ClassVar[ComponentType]

    @property
    def name(self) -> str:
        """Return the component name used in BEGIN and END lines."""
        return self.component_type.value

    @property
    def uid(self) -> str | None:
        """Return the unique identifier of the component, if any."""
        if (prop := self.get_property(ATTR_UID)) is None:
            return None
        return prop.value

    def add_component(self, component: T_COMPONENT) -> T_COMPONENT:
        """Append a sub-component and return it."""
        self.components.append(component)
        return component

    def components_of(self, kind: type[T_COMPONENT]) -> list[T_COMPONENT]:
        """Return the sub-components of the specified type."""
        return filter_components(self.components, kind)


@dataclass
class Alarm(Component):
    """A grouping of properties that define a reminder or alarm."""

    component_type = ComponentType.VALARM


@dataclass
class Event(Component):
    """A single event on a calendar."""

    component_type = ComponentType.VEVENT

    @property
    def alarms(self) -> list[Alarm]:
        """Return the alarms associated with the event."""
        return self.components_of(Alarm)


@dataclass
class Todo(Component):
    """A calendar todo component."""

    component_type = ComponentType.VTODO

    @property
    def alarms(self) -> list[Alarm]:
        """Return the alarms associated with the todo."""
        return self.components_of(Alarm)


@dataclass
class Journal(Component):
    """A single journal entry on a calendar."""

    component_type = ComponentType.VJOURNAL


@dataclass
class FreeBusy(Component):
    """A request for or response to free/busy time information."""

    component_type = ComponentType.VFREEBUSY


@dataclass
class Standard(Component):
    """A standard time observance within a timezone."""

    component_type = ComponentType.STANDARD


@dataclass
class Daylight(Component):
    """A daylight saving time observance within a timezone."""

    component_type = ComponentType.DAYLIGHT


@dataclass
class Timezone(Component):
    """A timezone definition made of standard and daylight observances."""

    component_type = ComponentType.VTIMEZONE

    @property
    def tzid(self) -> str | None:
        """Return the timezone identifier."""
        if (prop := self.get_property("TZID")) is None:
            return None
        return prop.value

    @property
    def standard(self) -> list[Standard]:
        return self.components_of(Standard)

    @property
    def daylight(self) -> list[Daylight]:
        return self.components_of(Daylight)


@dataclass
class Other(Component):
    """A component with a name not known to this library."""

    token: str = field(kw_only=True)

    @property
    def name(self) -> str:
        return self.token


COMPONENT_TYPES: list[type[Component]] = [
    Event,
    Todo,
    Journal,
    FreeBusy,
    Timezone,
    Alarm,
    Standard,
    Daylight,
]
COMPONENTS_BY_NAME = {
    component.component_type.value: component for component in COMPONENT_TYPES
}


def new_component(token: str) -> Component:
    """Create an empty component for the BEGIN value, e.g. VEVENT."""
    if component_cls := COMPONENTS_BY_NAME.get(token.upper()):
        return component_cls()
    return Other(token=token)
