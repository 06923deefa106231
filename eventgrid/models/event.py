"""Event and layout models for the day/week/month grids.

This module defines the storage-agnostic event record consumed by the
layout engine and the placement records it produces. None of these are
table models: events arrive from whatever store the caller reads, and
layouts live only for a single render pass.
"""

from datetime import datetime, timedelta

from sqlmodel import Field, SQLModel

DEFAULT_EVENT_DURATION = timedelta(hours=1)

# Derived all-day thresholds
ALL_DAY_MIN_DURATION = timedelta(hours=20)
MIDNIGHT_ALL_DAY_MIN_DURATION = timedelta(hours=12)


class CalendarEvent(SQLModel):
    """A calendar event as seen by the layout engine.

    Attributes:
        id: Opaque unique identifier.
        title: Display title.
        start: When the event starts (midnight for date-only events).
        end: When the event ends. If absent the event is treated as
            lasting one hour.
        is_all_day: Explicit all-day flag. When absent it is derived from
            the duration, see ``all_day``.
        recurrence_id: For a materialized occurrence, the id of the
            recurring event it was generated from.
    """
    id: str
    title: str = ""
    start: datetime
    end: datetime | None = None
    is_all_day: bool | None = None
    recurrence_id: str | None = None

    @property
    def effective_end(self) -> datetime:
        return self.end if self.end is not None else self.start + DEFAULT_EVENT_DURATION

    @property
    def duration(self) -> timedelta:
        return self.effective_end - self.start

    @property
    def all_day(self) -> bool:
        """Whether the event belongs in the all-day row.

        Uses the explicit flag when set, otherwise: lasts at least 20 hours,
        or starts at midnight and lasts at least 12 hours.
        """
        if self.is_all_day is not None:
            return self.is_all_day
        duration = self.duration
        if duration >= ALL_DAY_MIN_DURATION:
            return True
        starts_at_midnight = self.start.hour == 0 and self.start.minute == 0
        return starts_at_midnight and duration >= MIDNIGHT_ALL_DAY_MIN_DURATION


class LayoutWindow(SQLModel):
    """The time range being rendered (a day, or an hour slot)."""
    start: datetime
    end: datetime


class EventLayout(SQLModel):
    """Placement of one event within a rendered window.

    Attributes:
        event_id: Id of the placed event.
        column: Zero-based column index.
        total_columns: Columns in the event's overlap group.
        is_contained: The event lies entirely inside another event's span.
        has_contained: The event entirely covers at least one other event.
        left_percent: Horizontal offset within the day column.
        width_percent: Width within the day column.
        z_index: Stacking order; contained events sit above their container.
        top_percent: Vertical offset within the window, if one was given.
        height_percent: Height within the window, if one was given.
    """
    event_id: str
    column: int = 0
    total_columns: int = 1
    is_contained: bool = False
    has_contained: bool = False
    left_percent: float = 0.0
    width_percent: float = 100.0
    z_index: int = 5
    top_percent: float | None = None
    height_percent: float | None = None


class MonthCell(SQLModel):
    """Events shown in one month-view day cell."""
    visible: list[CalendarEvent] = Field(default_factory=list)
    overflow: int = 0
