"""Serialize and parse RRULE strings.

Supported subset of RFC 5545:

    RRULE:FREQ=WEEKLY;INTERVAL=2;COUNT=10;BYDAY=MO,WE,FR

Keys are emitted in a fixed order (FREQ, INTERVAL, COUNT, UNTIL, BYDAY,
BYMONTHDAY, BYMONTH). INTERVAL is omitted when it is 1. UNTIL is written in
UTC basic format, ``YYYYMMDDTHHMMSSZ``.
"""
import logging
from datetime import UTC, datetime
from typing import Callable

from eventgrid.models import Frequency, RecurrencePattern, Weekday

logger = logging.getLogger(__name__)

RRULE_PREFIX = "RRULE:"
UNTIL_FORMAT = "%Y%m%dT%H%M%SZ"


def format_until(value: datetime) -> str:
    """Format an UNTIL bound in UTC. Naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).strftime(UNTIL_FORMAT)


def parse_until(value: str) -> datetime:
    """Parse ``YYYYMMDDTHHMMSS[Z]`` or ``YYYYMMDD`` into an aware UTC datetime."""
    text = value.strip().upper().removesuffix("Z")
    if "T" in text:
        parsed = datetime.strptime(text, "%Y%m%dT%H%M%S")
    else:
        parsed = datetime.strptime(text, "%Y%m%d")
    return parsed.replace(tzinfo=UTC)


def serialize_rule(pattern: RecurrencePattern) -> str:
    """Encode a pattern as an ``RRULE:`` string."""
    parts = [f"FREQ={pattern.frequency.value}"]

    if pattern.interval > 1:
        parts.append(f"INTERVAL={pattern.interval}")
    if pattern.count is not None:
        parts.append(f"COUNT={pattern.count}")
    if pattern.until is not None:
        parts.append(f"UNTIL={format_until(pattern.until)}")
    if pattern.by_day:
        parts.append("BYDAY=" + ",".join(day.value for day in pattern.by_day))
    if pattern.by_month_day:
        parts.append("BYMONTHDAY=" + ",".join(str(day) for day in pattern.by_month_day))
    if pattern.by_month:
        parts.append("BYMONTH=" + ",".join(str(month) for month in pattern.by_month))

    return RRULE_PREFIX + ";".join(parts)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ValueError(f"expected a positive integer, got {number}")
    return number


def _weekdays(value: str) -> list[Weekday]:
    return [Weekday(code.strip().upper()) for code in value.split(",") if code.strip()]


def _month_days(value: str) -> list[int]:
    days = [int(day) for day in value.split(",") if day.strip()]
    for day in days:
        if day == 0 or not -31 <= day <= 31:
            raise ValueError(f"invalid day of month: {day}")
    return days


def _months(value: str) -> list[int]:
    months = [int(month) for month in value.split(",") if month.strip()]
    for month in months:
        if not 1 <= month <= 12:
            raise ValueError(f"invalid month: {month}")
    return months


# RRULE key -> (pattern field, value parser)
_FIELDS: dict[str, tuple[str, Callable[[str], object]]] = {
    "FREQ": ("frequency", lambda value: Frequency(value.strip().upper())),
    "INTERVAL": ("interval", _positive_int),
    "COUNT": ("count", _positive_int),
    "UNTIL": ("until", parse_until),
    "BYDAY": ("by_day", _weekdays),
    "BYMONTHDAY": ("by_month_day", _month_days),
    "BYMONTH": ("by_month", _months),
}


def parse_rule(rule: str | None) -> RecurrencePattern | None:
    """
    Decode an ``RRULE:`` string.

    Returns None if the prefix is missing or no valid FREQ is present.
    Unknown keys are ignored. A known key with a value that does not parse
    is skipped (and logged) rather than failing the whole rule.
    """
    if not rule or not rule.startswith(RRULE_PREFIX):
        return None

    fields: dict[str, object] = {}
    for part in rule[len(RRULE_PREFIX):].split(";"):
        key, sep, value = part.partition("=")
        if not sep:
            continue
        entry = _FIELDS.get(key.strip().upper())
        if entry is None:
            continue
        name, parse_value = entry
        try:
            fields[name] = parse_value(value)
        except ValueError as e:
            logger.warning(f"Ignoring malformed {key}={value!r} in {rule!r}: {e}")

    if "frequency" not in fields:
        return None
    return RecurrencePattern(**fields)
