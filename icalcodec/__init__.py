"""A codec for rfc5545 iCalendar text.

Content is parsed into a tree of `Calendar`, `Component` and `Property`
objects and encoded back into text with line folding and escaping applied:

```python
from icalcodec.calendar_stream import IcsCalendarStream

calendar = IcsCalendarStream.calendar_from_ics(content)
for event in calendar.events:
    print(event.uid, event.get_property("SUMMARY"))
ics = IcsCalendarStream.calendar_to_ics(calendar)
```

Properties that are not known to this library, including vendor `X-`
properties, are kept as they are so content survives a round trip.
"""

__all__ = [
    "calendar",
    "calendar_stream",
    "component",
    "config",
    "exceptions",
    "parameters",
    "property",
    "types",
    "util",
]
