"""Column layout for overlapping timed events.

Given the events of one rendering window (a day column in the day or week
view), assign every event a column so that overlapping events sit side by
side, and nest events that lie entirely inside another one an inset level
deeper instead of splitting the width.

Rendering policy derived from the layout:
    - Contained events render at a fixed inset (left = inset, width =
      100 - inset) above their container.
    - Containers render full width.
    - Everything else splits the width evenly: 100 / total_columns.
"""
import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Iterable

from eventgrid.models import CalendarEvent, EventLayout, LayoutWindow

logger = logging.getLogger(__name__)

DEFAULT_INSET_PERCENT = 10.0
CONTAINED_Z_INDEX = 10
DEFAULT_Z_INDEX = 5


def to_instant(value: datetime) -> float:
    """Seconds since the epoch. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.timestamp()


@dataclass
class _Placement:
    """Working state for one event during a layout pass."""
    event: CalendarEvent
    start: float
    end: float
    column: int = 0
    is_contained: bool = False
    has_contained: bool = False

    @property
    def span(self) -> float:
        return self.end - self.start

    def overlaps(self, other: "_Placement") -> bool:
        # Strict: events that only touch at an endpoint do not overlap
        return self.start < other.end and other.start < self.end

    def contains(self, other: "_Placement") -> bool:
        if self.start == other.start and self.end == other.end:
            return False
        return self.start <= other.start and self.end >= other.end


def split_all_day(
    events: Iterable[CalendarEvent],
) -> tuple[list[CalendarEvent], list[CalendarEvent]]:
    """Split events into (all-day row, timed grid)."""
    all_day: list[CalendarEvent] = []
    timed: list[CalendarEvent] = []
    for event in events:
        (all_day if event.all_day else timed).append(event)
    return all_day, timed


def _placements(
    events: Iterable[CalendarEvent], window: LayoutWindow | None
) -> list[_Placement]:
    """Resolve effective ends and clip events to the window.

    Events that do not touch the window are dropped. An event starting
    inside the window is always kept, even with zero duration.
    """
    placements = []
    if window is None:
        for event in events:
            placements.append(
                _Placement(event, to_instant(event.start), to_instant(event.effective_end))
            )
        return placements

    window_start = to_instant(window.start)
    window_end = to_instant(window.end)
    for event in events:
        start = to_instant(event.start)
        end = to_instant(event.effective_end)
        starts_inside = window_start <= start < window_end
        if not starts_inside and not (start < window_end and end > window_start):
            continue
        placements.append(
            _Placement(event, max(start, window_start), min(end, window_end))
        )
    return placements


def _assign_columns(placements: list[_Placement]) -> None:
    """Greedy column assignment over placements sorted by start.

    A contained event starts one column past its immediate container (the
    containing event with the highest column). Any other event starts at
    column 0. Each takes the first column from there on whose members
    neither overlap it nor contain it, or opens a new one. Containers
    always sort before the events they contain, so their column is final
    by the time a contained event is placed.
    """
    columns: list[list[_Placement]] = []

    for placement in placements:
        containers = [
            other
            for other in placements
            if other is not placement and other.contains(placement)
        ]
        first = 0
        if containers:
            container = max(containers, key=lambda c: (c.column, -c.span))
            first = container.column + 1

        index = first
        while index < len(columns) and any(
            member.overlaps(placement) and not member.contains(placement)
            for member in columns[index]
        ):
            index += 1
        while len(columns) <= index:
            columns.append([])
        columns[index].append(placement)
        placement.column = index


def compute_layout(
    events: Iterable[CalendarEvent],
    window: LayoutWindow | None = None,
    *,
    exclude_all_day: bool = False,
    inset_percent: float = DEFAULT_INSET_PERCENT,
) -> dict[str, EventLayout]:
    """
    Lay out a window's events into columns.

    Args:
        events: Events to place, in any order.
        window: Optional rendering window. Events outside it are ignored,
            events crossing its edges are clipped, and vertical geometry
            is reported relative to it.
        exclude_all_day: Drop all-day events first (timed grid rendering).
        inset_percent: Left inset applied to contained events.

    Returns a mapping of event id to its layout. Never raises on odd input:
    inverted ranges get a best-effort placement.
    """
    if exclude_all_day:
        events = [event for event in events if not event.all_day]

    placements = _placements(events, window)
    # Start ascending, longer first on ties, so containers precede contents
    placements.sort(key=lambda p: (p.start, -p.end))

    for placement in placements:
        for other in placements:
            if other is not placement and other.contains(placement):
                placement.is_contained = True
                other.has_contained = True

    _assign_columns(placements)

    window_start = window_span = None
    if window is not None:
        window_start = to_instant(window.start)
        window_span = to_instant(window.end) - window_start

    layouts: dict[str, EventLayout] = {}
    for placement in placements:
        total_columns = 1 + max(
            other.column
            for other in placements
            if other is placement or other.overlaps(placement)
        )

        if placement.is_contained:
            left, width = inset_percent, 100.0 - inset_percent
        elif placement.has_contained:
            left, width = 0.0, 100.0
        else:
            width = 100.0 / total_columns
            left = placement.column * width

        top = height = None
        if window_span:
            top = (placement.start - window_start) / window_span * 100.0
            height = placement.span / window_span * 100.0

        layouts[placement.event.id] = EventLayout(
            event_id=placement.event.id,
            column=placement.column,
            total_columns=total_columns,
            is_contained=placement.is_contained,
            has_contained=placement.has_contained,
            left_percent=left,
            width_percent=width,
            z_index=CONTAINED_Z_INDEX if placement.is_contained else DEFAULT_Z_INDEX,
            top_percent=top,
            height_percent=height,
        )

    logger.debug(f"Laid out {len(layouts)} events")
    return layouts
