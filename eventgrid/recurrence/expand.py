"""Expand recurrence patterns into concrete occurrence dates.

Expansion starts at the anchor (always the first occurrence) and steps
forward one occurrence at a time:

    DAILY    anchor + n * interval days
    WEEKLY   + 7 * interval days, or with BYDAY the next matching weekday
             within the following 7 days
    MONTHLY  anchor + n * interval months, day from BYMONTHDAY[0] if set
    YEARLY   anchor + n * interval years, month from BYMONTH[0] and day
             from BYMONTHDAY[0] if set

Month and year steps are taken from the anchor and clamp to the last day
of short months, so a series anchored on Jan 31 runs Jan 31, Feb 28 (29),
Mar 31, Apr 30 without drifting.

A series ends at the first of: COUNT occurrences, the next date passing
UNTIL, the caller's cap (never more than HARD_MAX_OCCURRENCES), or a
step past the end of the supported date range.
"""
import logging
from calendar import monthrange
from datetime import UTC, date, datetime, timedelta
from itertools import islice
from typing import Iterable, Iterator

from dateutil.relativedelta import relativedelta

from eventgrid.models import Frequency, RecurrencePattern, Weekday

logger = logging.getLogger(__name__)

DEFAULT_MAX_OCCURRENCES = 100
HARD_MAX_OCCURRENCES = 1000
# Bound on occurrences walked to reach a window (about 270 years daily)
MAX_SCAN_OCCURRENCES = 100_000
WEEKDAY_SCAN_DAYS = 7


def _month_day(year: int, month: int, day: int) -> int:
    """Resolve a BYMONTHDAY value (negative counts from the end), clamped."""
    last = monthrange(year, month)[1]
    if day < 0:
        day = last + 1 + day
    return min(max(day, 1), last)


def _comparable(bound: datetime, reference: datetime) -> datetime:
    """Align the awareness of ``bound`` with ``reference``; naive means UTC."""
    if bound.tzinfo is None and reference.tzinfo is not None:
        return bound.replace(tzinfo=UTC)
    if bound.tzinfo is not None and reference.tzinfo is None:
        return bound.astimezone(UTC).replace(tzinfo=None)
    return bound


def next_occurrence(
    current: datetime,
    pattern: RecurrencePattern,
    anchor: datetime,
    index: int,
) -> datetime | None:
    """
    Compute occurrence number ``index`` (the anchor is 0) of a series.

    ``current`` is occurrence ``index - 1``. Returns None when a WEEKLY
    BYDAY scan finds no matching weekday.
    """
    interval = pattern.interval

    if pattern.frequency is Frequency.DAILY:
        return current + timedelta(days=interval)

    if pattern.frequency is Frequency.WEEKLY:
        if not pattern.by_day:
            return current + timedelta(weeks=interval)
        wanted = set(pattern.by_day)
        for offset in range(1, WEEKDAY_SCAN_DAYS + 1):
            candidate = current + timedelta(days=offset)
            if Weekday.from_date(candidate) in wanted:
                return candidate
        return None

    if pattern.frequency is Frequency.MONTHLY:
        shifted = anchor + relativedelta(months=index * interval)
        if pattern.by_month_day:
            day = _month_day(shifted.year, shifted.month, pattern.by_month_day[0])
            shifted = shifted.replace(day=day)
        return shifted

    # YEARLY
    shifted = anchor + relativedelta(years=index * interval)
    if pattern.by_month:
        month = pattern.by_month[0]
        day = pattern.by_month_day[0] if pattern.by_month_day else anchor.day
        shifted = shifted.replace(month=month, day=_month_day(shifted.year, month, day))
    return shifted


def iter_occurrences(anchor: datetime, pattern: RecurrencePattern) -> Iterator[datetime]:
    """
    Lazily yield the occurrences of a series, anchor first.

    Honours COUNT and UNTIL only. An unbounded pattern yields forever, so
    callers must cap it (``expand_occurrences`` does).
    """
    until = _comparable(pattern.until, anchor) if pattern.until is not None else None
    current = anchor
    index = 0

    while True:
        if pattern.count is not None and index >= pattern.count:
            return
        if until is not None and current > until:
            return
        yield current

        index += 1
        try:
            following = next_occurrence(current, pattern, anchor, index)
        except (OverflowError, ValueError) as e:
            logger.warning(f"Series from {anchor} left the date range after {current}: {e}")
            return
        if following is None:
            logger.warning(
                f"No weekday in {pattern.by_day} within "
                f"{WEEKDAY_SCAN_DAYS} days of {current}; ending series"
            )
            return
        current = following


def expand_occurrences(
    anchor: datetime,
    pattern: RecurrencePattern,
    max_occurrences: int = DEFAULT_MAX_OCCURRENCES,
) -> list[datetime]:
    """
    Expand a pattern into an ordered list of occurrence dates.

    The result holds at most ``min(count, max_occurrences, 1000)`` dates.
    Never raises for inconsistent patterns; they just end early.
    """
    limit = min(max(max_occurrences, 0), HARD_MAX_OCCURRENCES)
    return list(islice(iter_occurrences(anchor, pattern), limit))


def is_excepted(value: date, exception_dates: Iterable[str]) -> bool:
    """Whether ``value``'s calendar day (YYYY-MM-DD) is in the exception set.

    Only the local calendar date is compared, never the time of day.
    """
    day = value.date() if isinstance(value, datetime) else value
    return day.isoformat() in set(exception_dates)
