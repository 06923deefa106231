"""Materialize a recurring event into concrete events.

Each occurrence becomes its own CalendarEvent with the parent's title and
duration, ready to be handed to the layout engine alongside one-off events.
"""
import logging
from datetime import datetime
from typing import Iterable

from eventgrid.layout.overlap import to_instant
from eventgrid.models import CalendarEvent, LayoutWindow, RecurrencePattern
from eventgrid.models.event import DEFAULT_EVENT_DURATION
from eventgrid.recurrence.expand import (
    DEFAULT_MAX_OCCURRENCES,
    HARD_MAX_OCCURRENCES,
    MAX_SCAN_OCCURRENCES,
    is_excepted,
    iter_occurrences,
)

logger = logging.getLogger(__name__)


def instance_id(parent_id: str, occurrence: datetime) -> str:
    """Stable id for one occurrence of a series."""
    return f"{parent_id}:{occurrence:%Y%m%dT%H%M%S}"


def expand_event_instances(
    event: CalendarEvent,
    pattern: RecurrencePattern,
    *,
    exceptions: Iterable[str] = (),
    window: LayoutWindow | None = None,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[CalendarEvent]:
    """
    Generate the concrete instances of a recurring event.

    The series is anchored on ``event.start``. Excepted days (YYYY-MM-DD)
    are skipped, and with a window only instances touching it are kept.
    ``max_occurrences`` caps the number of instances returned. The walk
    through the series stops after MAX_SCAN_OCCURRENCES occurrences, so
    a window far past the anchor of an unbounded series comes back empty.
    """
    excluded = set(exceptions)
    duration = event.end - event.start if event.end is not None else None
    span = duration if duration is not None else DEFAULT_EVENT_DURATION
    limit = min(max(max_occurrences, 0), HARD_MAX_OCCURRENCES)

    window_start = window_end = None
    if window is not None:
        window_start = to_instant(window.start)
        window_end = to_instant(window.end)

    instances = []
    skipped = 0
    for scanned, occurrence in enumerate(iter_occurrences(event.start, pattern)):
        if len(instances) >= limit or scanned >= MAX_SCAN_OCCURRENCES:
            break
        if is_excepted(occurrence, excluded):
            skipped += 1
            continue

        if window is not None:
            start = to_instant(occurrence)
            if start >= window_end:
                break
            end = to_instant(occurrence + span)
            if end <= window_start and start < window_start:
                continue

        instances.append(
            CalendarEvent(
                id=instance_id(event.id, occurrence),
                title=event.title,
                start=occurrence,
                end=occurrence + duration if duration is not None else None,
                is_all_day=event.is_all_day,
                recurrence_id=event.id,
            )
        )

    logger.debug(
        f"Expanded {event.id} into {len(instances)} instances ({skipped} excepted)"
    )
    return instances
