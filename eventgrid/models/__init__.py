from eventgrid.models.event import CalendarEvent, EventLayout, LayoutWindow, MonthCell
from eventgrid.models.recurrence import Frequency, RecurrencePattern, Weekday

__all__ = [
    "CalendarEvent",
    "EventLayout",
    "LayoutWindow",
    "MonthCell",
    "Frequency",
    "RecurrencePattern",
    "Weekday",
]
