from __future__ import annotations

from datetime import date

import pytest

from admin_panel.core.events import (
    EventStore,
    generate_sample_events,
    month_grid,
    range_for,
    range_label,
    shift_anchor,
    validate_event,
)
from admin_panel.core.exceptions import NotFoundError
from admin_panel.validation.errors import ValidationError

TODAY = date(2024, 5, 15)  # a Wednesday


def _store() -> EventStore:
    return EventStore(generate_sample_events(TODAY))


def test_sample_events_are_relative_to_today():
    events = generate_sample_events(TODAY)
    assert [e.id for e in events] == ["1", "2", "3", "4", "5", "6"]
    assert events[0].date == TODAY
    assert events[-1].date == date(2024, 5, 25)
    assert events[-1].is_all_day
    assert events[-1].time_label() == "All day"
    assert events[0].time_label() == "09:00 - 10:30"


def test_add_requires_title():
    store = _store()
    with pytest.raises(ValidationError) as exc:
        store.add({"title": "  ", "date": "2024-05-16"})

    assert exc.value.field_errors["title"] == "Please enter an event title"
    assert len(store) == 6


def test_add_collects_every_problem():
    with pytest.raises(ValidationError) as exc:
        validate_event({"title": "", "date": None, "category": "party",
                        "start_time": "10:00", "end_time": "09:00", "attendees": "-2"})

    assert set(exc.value.field_errors) == {"title", "date", "category", "end_time", "attendees"}


def test_add_generates_seven_char_id_and_defaults_category():
    store = _store()
    event = store.add({"title": "Standup", "date": "2024-05-16", "start_time": "09:15", "attendees": "4"})

    assert len(event.id) == 7
    assert event.category == "work"
    assert event.attendees == 4
    assert store.get(event.id) == event


def test_delete_and_delete_missing():
    store = _store()
    removed = store.delete("3")

    assert removed.title == "Dentist Appointment"
    assert len(store) == 5
    with pytest.raises(NotFoundError):
        store.delete("3")


def test_for_date_sorts_by_start_time():
    store = _store()
    assert [e.title for e in store.for_date(TODAY)] == ["Team Meeting", "Project Review"]


def test_week_runs_monday_to_sunday():
    start, end = range_for("week", TODAY)
    assert start == date(2024, 5, 13)
    assert end == date(2024, 5, 19)

    # today (x2), +2 and +3 days fall in the week; +5 is the next Monday
    assert [e.id for e in _store().in_range("week", TODAY)] == ["1", "2", "3", "4"]


def test_month_and_day_ranges():
    assert range_for("month", TODAY) == (date(2024, 5, 1), date(2024, 5, 31))
    assert range_for("day", TODAY) == (TODAY, TODAY)
    with pytest.raises(ValueError):
        range_for("year", TODAY)


def test_upcoming_limits_and_skips_past():
    store = _store()
    upcoming = store.upcoming(date(2024, 5, 18), limit=5)
    assert [e.id for e in upcoming] == ["4", "5", "6"]
    assert len(store.upcoming(TODAY, limit=2)) == 2


def test_counts_by_date():
    counts = _store().counts_by_date()
    assert counts[TODAY] == 2
    assert counts[date(2024, 5, 17)] == 1


def test_shift_anchor_clamps_month_end():
    assert shift_anchor("month", date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert shift_anchor("month", date(2024, 1, 15), -1) == date(2023, 12, 15)
    assert shift_anchor("week", TODAY, 1) == date(2024, 5, 22)
    assert shift_anchor("day", TODAY, -1) == date(2024, 5, 14)


def test_range_label():
    assert range_label("month", TODAY) == "May 2024"
    assert range_label("week", TODAY) == "May 13 - May 19, 2024"


def test_month_grid_starts_on_sunday_and_covers_month():
    weeks = month_grid(2024, 5)
    assert all(len(w) == 7 for w in weeks)
    assert weeks[0][0] == date(2024, 4, 28)
    assert date(2024, 5, 31) in weeks[-1]


def test_to_from_list_roundtrip():
    store = _store()
    rebuilt = EventStore.from_list(store.to_list())
    assert rebuilt.events == store.events
