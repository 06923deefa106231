"""Common recurrence choices offered when creating an event."""
from typing import Callable

from eventgrid.models import Frequency, RecurrencePattern, Weekday

RECURRENCE_PRESETS: dict[str, Callable[[], RecurrencePattern]] = {
    "daily": lambda: RecurrencePattern(frequency=Frequency.DAILY),
    "weekdays": lambda: RecurrencePattern(
        frequency=Frequency.WEEKLY,
        by_day=[Weekday.MO, Weekday.TU, Weekday.WE, Weekday.TH, Weekday.FR],
    ),
    "weekly": lambda: RecurrencePattern(frequency=Frequency.WEEKLY),
    "biweekly": lambda: RecurrencePattern(frequency=Frequency.WEEKLY, interval=2),
    "monthly": lambda: RecurrencePattern(frequency=Frequency.MONTHLY),
    "yearly": lambda: RecurrencePattern(frequency=Frequency.YEARLY),
}
