"""Builders shared by the test modules."""

from datetime import datetime

from eventgrid.models import CalendarEvent

DAY = datetime(2026, 3, 2)  # a Monday


def at(hour: int, minute: int = 0, day: datetime = DAY) -> datetime:
    """Datetime on the test day."""
    return day.replace(hour=hour, minute=minute)


def make_event(event_id: str, start: datetime, end: datetime | None = None, **kwargs) -> CalendarEvent:
    return CalendarEvent(id=event_id, title=f"Event {event_id}", start=start, end=end, **kwargs)
