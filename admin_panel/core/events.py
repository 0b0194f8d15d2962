from __future__ import annotations

import calendar
import logging
import uuid
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from admin_panel.validation.errors import ValidationError, ValidationIssue
from admin_panel.validation.form_validation import parse_iso_date

from .exceptions import NotFoundError

logger = logging.getLogger(__name__)

EVENT_CATEGORIES: tuple[str, ...] = ("meeting", "personal", "work", "holiday")
VIEW_MODES: tuple[str, ...] = ("day", "week", "month")

# Bootstrap colour per category, used for badges in the calendar
CATEGORY_COLOURS: Dict[str, str] = {
    "meeting": "primary",
    "personal": "info",
    "work": "success",
    "holiday": "danger",
}


def generate_event_id() -> str:
    return uuid.uuid4().hex[:7]


@dataclass(frozen=True)
class Event:
    """
    A calendar entry. Times are "HH:MM" strings; all-day events have none.
    """
    id: str
    title: str
    date: date
    category: str = "work"
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    attendees: Optional[int] = None

    @property
    def is_all_day(self) -> bool:
        return not self.start_time

    def time_label(self) -> str:
        if self.is_all_day:
            return "All day"
        if self.end_time:
            return f"{self.start_time} - {self.end_time}"
        return self.start_time

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "category": self.category,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "location": self.location,
            "description": self.description,
            "attendees": self.attendees,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Event:
        return cls(
            id=str(data["id"]),
            title=str(data["title"]),
            date=parse_iso_date(data["date"]),
            category=data.get("category", "work"),
            start_time=data.get("start_time") or None,
            end_time=data.get("end_time") or None,
            location=data.get("location") or None,
            description=data.get("description") or None,
            attendees=data.get("attendees"),
        )


def generate_sample_events(today: date) -> List[Event]:
    return [
        Event("1", "Team Meeting", today, "meeting", "09:00", "10:30",
              "Conference Room A", "Weekly sprint planning with the development team.", 8),
        Event("2", "Project Review", today, "work", "14:00", "15:00",
              "Virtual Meeting", "Review the progress of the current project with stakeholders.", 5),
        Event("3", "Dentist Appointment", today + timedelta(days=2), "personal", "11:00", "12:00",
              "Dental Clinic", "Regular dental checkup."),
        Event("4", "Client Presentation", today + timedelta(days=3), "work", "13:00", "14:30",
              "Meeting Room B", "Present the new product features to the client.", 12),
        Event("5", "Team Building", today + timedelta(days=5), "work", "15:00", "18:00",
              "City Park", "Outdoor team building activities.", 20),
        Event("6", "Independence Day", today + timedelta(days=10), "holiday",
              description="Public holiday."),
    ]


def validate_event(candidate: Mapping[str, Any]) -> Event:
    """
    Build an Event from form values, collecting every problem before raising.
    The id is generated here.
    """
    issues: list[ValidationIssue] = []

    title = (candidate.get("title") or "").strip()
    if not title:
        issues.append(ValidationIssue("TITLE", "Please enter an event title", "title"))

    event_date = parse_iso_date(candidate.get("date"))
    if event_date is None:
        issues.append(ValidationIssue("DATE", "Please pick a date.", "date"))

    category = candidate.get("category") or "work"
    if category not in EVENT_CATEGORIES:
        issues.append(ValidationIssue("CATEGORY", f"Unknown category '{category}'.", "category"))

    start_time = candidate.get("start_time") or None
    end_time = candidate.get("end_time") or None
    # "HH:MM" strings compare correctly as text
    if start_time and end_time and end_time < start_time:
        issues.append(ValidationIssue("END_TIME", "End time must be after start time.", "end_time"))

    attendees = candidate.get("attendees")
    if attendees in ("", None):
        attendees = None
    else:
        try:
            attendees = int(attendees)
        except (TypeError, ValueError):
            attendees = -1
        if attendees < 0:
            issues.append(ValidationIssue("ATTENDEES", "Attendees must be a positive number.", "attendees"))

    if issues:
        raise ValidationError(issues)

    return Event(
        id=generate_event_id(),
        title=title,
        date=event_date,
        category=category,
        start_time=start_time,
        end_time=end_time,
        location=(candidate.get("location") or "").strip() or None,
        description=(candidate.get("description") or "").strip() or None,
        attendees=attendees,
    )


def range_for(view_mode: str, anchor: date) -> Tuple[date, date]:
    """Inclusive date range shown by a view mode. Weeks run Monday to Sunday."""
    if view_mode == "day":
        return anchor, anchor
    if view_mode == "week":
        start = anchor - timedelta(days=anchor.weekday())
        return start, start + timedelta(days=6)
    if view_mode == "month":
        last = calendar.monthrange(anchor.year, anchor.month)[1]
        return anchor.replace(day=1), anchor.replace(day=last)
    raise ValueError(f"Unknown view mode '{view_mode}'")


class EventStore:
    """
    In-memory list of calendar events for one session.
    """

    def __init__(self, events: Iterable[Event] = ()):
        self._events: List[Event] = list(events)

    def __len__(self) -> int:
        return len(self._events)

    @property
    def events(self) -> List[Event]:
        return list(self._events)

    def get(self, event_id: str) -> Event:
        for e in self._events:
            if e.id == event_id:
                return e
        raise NotFoundError(event_id, kind="Event")

    def add(self, candidate: Mapping[str, Any]) -> Event:
        event = validate_event(candidate)
        existing = {e.id for e in self._events}
        while event.id in existing:
            event = replace(event, id=generate_event_id())
        self._events.append(event)
        logger.info("Event added", extra={"event_id": event.id, "event_date": event.date.isoformat()})
        return event

    def delete(self, event_id: str) -> Event:
        event = self.get(event_id)
        self._events = [e for e in self._events if e.id != event_id]
        logger.info("Event deleted", extra={"event_id": event_id})
        return event

    def for_date(self, day: date) -> List[Event]:
        return self._sorted(e for e in self._events if e.date == day)

    def in_range(self, view_mode: str, anchor: date) -> List[Event]:
        start, end = range_for(view_mode, anchor)
        return self._sorted(e for e in self._events if start <= e.date <= end)

    def upcoming(self, today: date, limit: int = 5) -> List[Event]:
        return self._sorted(e for e in self._events if e.date >= today)[:limit]

    def counts_by_date(self) -> Dict[date, int]:
        counts: Dict[date, int] = {}
        for e in self._events:
            counts[e.date] = counts.get(e.date, 0) + 1
        return counts

    @staticmethod
    def _sorted(events: Iterable[Event]) -> List[Event]:
        # all-day events first, then by start time
        return sorted(events, key=lambda e: (e.date, e.start_time or ""))

    def to_list(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._events]

    @classmethod
    def from_list(cls, data: Optional[List[Mapping[str, Any]]]) -> EventStore:
        return cls(Event.from_dict(d) for d in (data or []))


def month_grid(year: int, month: int) -> List[List[date]]:
    """Weeks (Sunday first) covering the month, padded with neighbouring days."""
    return calendar.Calendar(firstweekday=6).monthdatescalendar(year, month)


def shift_anchor(view_mode: str, anchor: date, step: int) -> date:
    """Move `anchor` by `step` days, weeks or months. Month steps clamp the day (Jan 31 -> Feb 28)."""
    if view_mode == "day":
        return anchor + timedelta(days=step)
    if view_mode == "week":
        return anchor + timedelta(weeks=step)
    if view_mode == "month":
        month_index = anchor.year * 12 + anchor.month - 1 + step
        year, month = divmod(month_index, 12)
        month += 1
        last = calendar.monthrange(year, month)[1]
        return date(year, month, min(anchor.day, last))
    raise ValueError(f"Unknown view mode '{view_mode}'")


def range_label(view_mode: str, anchor: date) -> str:
    start, end = range_for(view_mode, anchor)
    if view_mode == "day":
        return anchor.strftime("%A, %B %d, %Y")
    if view_mode == "week":
        return f"{start.strftime('%b %d')} - {end.strftime('%b %d, %Y')}"
    return anchor.strftime("%B %Y")
