"""Month-view day cells.

No column math here: a day cell lists its events in start order and cuts
off after a fixed number, reporting how many were hidden ("+2 more").
"""
from datetime import date
from typing import Iterable

from eventgrid.layout.overlap import to_instant
from eventgrid.models import CalendarEvent, MonthCell

DEFAULT_MAX_VISIBLE = 3


def month_cell(
    events: Iterable[CalendarEvent],
    day: date,
    max_visible: int = DEFAULT_MAX_VISIBLE,
) -> MonthCell:
    """Events starting on ``day``, truncated to ``max_visible``."""
    day_events = sorted(
        (event for event in events if event.start.date() == day),
        key=lambda event: to_instant(event.start),
    )
    max_visible = max(max_visible, 0)
    return MonthCell(
        visible=day_events[:max_visible],
        overflow=max(len(day_events) - max_visible, 0),
    )
