"""Tests for building the component tree from content lines."""

import pytest

from icalcodec.calendar import Calendar
from icalcodec.component import Alarm, Event, Other, Todo
from icalcodec.exceptions import CalendarParseError, CalendarStructureError
from icalcodec.parsing.component import parse_calendar_lines
from icalcodec.parsing.contentlines import ContentLineReader
from icalcodec.property import Property


def parse(lines: list[str]) -> Calendar:
    """Parse the lines as a calendar."""
    content = "".join(f"{line}\r\n" for line in lines)
    return parse_calendar_lines(ContentLineReader.from_content(content))


def test_single_event() -> None:
    """Test a calendar with a single event."""
    calendar = parse(
        [
            "BEGIN:VCALENDAR",
            "VERSION:2.0",
            "PRODID:-//x//y",
            "BEGIN:VEVENT",
            "UID:1",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
    )
    assert calendar.properties == [
        Property(name="VERSION", value="2.0"),
        Property(name="PRODID", value="-//x//y"),
    ]
    assert len(calendar.components) == 1
    event = calendar.components[0]
    assert isinstance(event, Event)
    assert event.properties == [Property(name="UID", value="1")]
    assert event.components == []


def test_nested_components() -> None:
    """Test components nested inside other components."""
    calendar = parse(
        [
            "BEGIN:VCALENDAR",
            "BEGIN:VTODO",
            "UID:todo-1",
            "BEGIN:VALARM",
            "ACTION:DISPLAY",
            "TRIGGER:-PT15M",
            "END:VALARM",
            "SUMMARY:After the alarm",
            "END:VTODO",
            "BEGIN:VEVENT",
            "UID:event-1",
            "END:VEVENT",
            "END:VCALENDAR",
        ]
    )
    todo, event = calendar.components
    assert isinstance(todo, Todo)
    assert isinstance(event, Event)
    assert [prop.name for prop in todo.properties] == ["UID", "SUMMARY"]
    assert len(todo.alarms) == 1
    alarm = todo.alarms[0]
    assert isinstance(alarm, Alarm)
    assert alarm.get_property("TRIGGER") == Property(name="TRIGGER", value="-PT15M")


@pytest.mark.parametrize(
    "begin,end",
    [
        ("BEGIN", "END"),
        ("begin", "end"),
        ("Begin", "End"),
        ("bEgiN", "eNd"),
    ],
)
def test_begin_end_case_insensitive(begin: str, end: str) -> None:
    """Test the BEGIN and END keywords are matched in any case."""
    calendar = parse(
        [
            f"{begin}:VCALENDAR",
            f"{begin}:VEVENT",
            "UID:1",
            f"{end}:VEVENT",
            f"{end}:VCALENDAR",
        ]
    )
    assert len(calendar.events) == 1


def test_component_name_case() -> None:
    """Test known component names are recognized in any case."""
    calendar = parse(
        [
            "BEGIN:VCALENDAR",
            "BEGIN:vevent",
            "UID:1",
            "END:vevent",
            "END:VCALENDAR",
        ]
    )
    assert len(calendar.events) == 1
    assert calendar.events[0].name == "VEVENT"


def test_unknown_component_and_properties() -> None:
    """Test unknown components and properties are kept as written."""
    calendar = parse(
        [
            "BEGIN:VCALENDAR",
            "X-WR-CALNAME:Team",
            "BEGIN:X-VENDOR",
            "X-ANSWER;X-P=1:42",
            "BEGIN:X-INNER",
            "END:X-INNER",
            "END:X-VENDOR",
            "END:VCALENDAR",
        ]
    )
    assert calendar.properties == [Property(name="X-WR-CALNAME", value="Team")]
    vendor = calendar.components[0]
    assert isinstance(vendor, Other)
    assert vendor.name == "X-VENDOR"
    assert vendor.properties == [
        Property(name="X-ANSWER", value="42", params={"X-P": ["1"]})
    ]
    assert [child.name for child in vendor.components] == ["X-INNER"]


def test_empty_lines_skipped() -> None:
    """Test empty lines between content lines are ignored."""
    calendar = parse(
        [
            "",
            "BEGIN:VCALENDAR",
            "",
            "BEGIN:VEVENT",
            "",
            "UID:1",
            "END:VEVENT",
            "END:VCALENDAR",
            "",
        ]
    )
    assert calendar.events[0].uid == "1"


@pytest.mark.parametrize(
    "lines,message,line_number",
    [
        (
            ["BEGIN:VEVENT", "END:VEVENT"],
            "expected BEGIN:VCALENDAR, got 'BEGIN:VEVENT'",
            1,
        ),
        (["VERSION:2.0"], "expected BEGIN:VCALENDAR, got 'VERSION:2.0'", 1),
        ([], "expected BEGIN:VCALENDAR, got no content", None),
        (["", ""], "expected BEGIN:VCALENDAR, got no content", None),
        (
            ["BEGIN:VCALENDAR", "VERSION:2.0"],
            "Ran out of lines: expected END:VCALENDAR",
            None,
        ),
        (
            ["BEGIN:VCALENDAR", "BEGIN:VEVENT", "UID:1"],
            "expected END:VEVENT for component started on line 2",
            2,
        ),
        (
            ["BEGIN:VCALENDAR", "BEGIN:VEVENT", "END:VTODO", "END:VCALENDAR"],
            "Unbalanced end on line 3: expected END:VEVENT, got END:VTODO",
            3,
        ),
        (
            ["BEGIN:VCALENDAR", "BEGIN:VEVENT", "END:vevent", "END:VCALENDAR"],
            "Unbalanced end on line 3",
            3,
        ),
        (
            ["BEGIN:VCALENDAR", "END:VEVENT"],
            "expected END:VCALENDAR, got END:VEVENT",
            2,
        ),
        (
            [
                "BEGIN:VCALENDAR",
                "BEGIN:VEVENT",
                "END:VEVENT",
                "VERSION:2.0",
                "END:VCALENDAR",
            ],
            "expected BEGIN or END, got 'VERSION'",
            4,
        ),
        (
            ["BEGIN:VCALENDAR", "END:VCALENDAR", "VERSION:2.0"],
            "unexpected 'VERSION' after END:VCALENDAR",
            3,
        ),
        (
            ["BEGIN:VCALENDAR", "END:VCALENDAR", "BEGIN:VCALENDAR", "END:VCALENDAR"],
            "unexpected 'BEGIN' after END:VCALENDAR",
            3,
        ),
        (
            ["BEGIN:VCALENDAR", "BEGIN:VCALENDAR"],
            "VCALENDAR not where expected",
            2,
        ),
        (
            ["BEGIN:VCALENDAR", "BEGIN:VEVENT", "BEGIN:VCALENDAR"],
            "VCALENDAR not where expected inside VEVENT",
            3,
        ),
    ],
)
def test_structure_errors(
    lines: list[str], message: str, line_number: int | None
) -> None:
    """Test content where components are not nested correctly."""
    with pytest.raises(CalendarStructureError, match=message) as exc:
        parse(lines)
    assert exc.value.line_number == line_number


def test_grammar_error_line_number() -> None:
    """Test an invalid content line reports where it started."""
    with pytest.raises(CalendarParseError, match="Failed to parse line 3") as exc:
        parse(
            [
                "BEGIN:VCALENDAR",
                "VERSION:2.0",
                "ATTENDEE;CN:mailto:jane@example.com",
                "END:VCALENDAR",
            ]
        )
    assert not isinstance(exc.value, CalendarStructureError)
    assert exc.value.line_number == 3
    assert exc.value.detailed_error == "ATTENDEE;CN:mailto:jane@example.com"


def test_partial_calendar_on_error() -> None:
    """Test the calendar parsed up to the error is attached to the error."""
    with pytest.raises(CalendarStructureError) as exc:
        parse(
            [
                "BEGIN:VCALENDAR",
                "VERSION:2.0",
                "BEGIN:VEVENT",
                "UID:1",
                "END:VEVENT",
                "BEGIN:VTODO",
                "UID:2",
            ]
        )
    calendar = exc.value.calendar
    assert isinstance(calendar, Calendar)
    assert calendar.version == "2.0"
    assert [event.uid for event in calendar.events] == ["1"]
    assert [todo.uid for todo in calendar.todos] == ["2"]


def test_partial_component_on_error() -> None:
    """Test a component that fails to parse is kept with the content read."""
    with pytest.raises(CalendarParseError, match="Failed to parse line 6") as exc:
        parse(
            [
                "BEGIN:VCALENDAR",
                "BEGIN:VEVENT",
                "UID:1",
                "BEGIN:VALARM",
                "ACTION:DISPLAY",
                "TRIGGER;RELATED:-PT15M",
                "END:VALARM",
                "END:VEVENT",
                "END:VCALENDAR",
            ]
        )
    calendar = exc.value.calendar
    assert [event.uid for event in calendar.events] == ["1"]
    alarms = calendar.events[0].alarms
    assert len(alarms) == 1
    assert alarms[0].properties == [Property(name="ACTION", value="DISPLAY")]
