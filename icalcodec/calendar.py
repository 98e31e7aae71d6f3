"""The Calendar component.

The calendar is the root of the tree. The VCALENDAR wrapper itself is
implicit: a calendar holds the calendar level properties (VERSION, PRODID,
METHOD, ...) and the top level components (events, todos, timezones, ...).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TypeVar

from .component import (
    Alarm,
    Component,
    Event,
    FreeBusy,
    Journal,
    Timezone,
    Todo,
    filter_components,
)
from .property import PropertyContainer
from .util import prodid_factory

__all__ = [
    "Calendar",
    "new_calendar",
]

_LOGGER = logging.getLogger(__name__)

_VERSION = "2.0"
ATTR_VERSION = "VERSION"
ATTR_PRODID = "PRODID"

T_COMPONENT = TypeVar("T_COMPONENT", bound=Component)


@dataclass
class Calendar(PropertyContainer):
    """A sequence of calendar properties and calendar components."""

    components: list[Component] = field(default_factory=list)

    def add_component(self, component: T_COMPONENT) -> T_COMPONENT:
        """Append a top level component and return it."""
        self.components.append(component)
        return component

    def components_of(self, kind: type[T_COMPONENT]) -> list[T_COMPONENT]:
        """Return the top level components of the specified type."""
        return filter_components(self.components, kind)

    @property
    def events(self) -> list[Event]:
        """Events associated with this calendar."""
        return self.components_of(Event)

    @property
    def todos(self) -> list[Todo]:
        """Todos associated with this calendar."""
        return self.components_of(Todo)

    @property
    def journals(self) -> list[Journal]:
        """Journals associated with this calendar."""
        return self.components_of(Journal)

    @property
    def free_busy(self) -> list[FreeBusy]:
        """Free/busy objects associated with this calendar."""
        return self.components_of(FreeBusy)

    @property
    def timezones(self) -> list[Timezone]:
        """Timezones associated with this calendar."""
        return self.components_of(Timezone)

    @property
    def alarms(self) -> list[Alarm]:
        """Top level alarms, which some producers emit outside of events."""
        return self.components_of(Alarm)

    @property
    def version(self) -> str | None:
        if (prop := self.get_property(ATTR_VERSION)) is None:
            return None
        return prop.value

    @property
    def prodid(self) -> str | None:
        if (prop := self.get_property(ATTR_PRODID)) is None:
            return None
        return prop.value


def new_calendar(service: str | None = None) -> Calendar:
    """Create an empty calendar with the required VERSION and PRODID.

    The product identifier names the `service` producing the calendar when
    specified.
    """
    calendar = Calendar()
    calendar.set_property(ATTR_VERSION, _VERSION)
    prodid = f"-//{service}//icalcodec//EN" if service else prodid_factory()
    calendar.set_property(ATTR_PRODID, prodid)
    _LOGGER.debug("Created calendar with %s", prodid)
    return calendar
