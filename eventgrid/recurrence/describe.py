"""Human-readable recurrence summaries."""
from eventgrid.models import Frequency, RecurrencePattern

_UNITS = {
    Frequency.DAILY: "day",
    Frequency.WEEKLY: "week",
    Frequency.MONTHLY: "month",
    Frequency.YEARLY: "year",
}


def describe_pattern(pattern: RecurrencePattern) -> str:
    """
    Summarize a pattern for display.

    Examples:
        Every day
        Every 2 weeks on Monday, Wednesday
        Every month, 6 times
        Every year, until March 1, 2027
    """
    unit = _UNITS[pattern.frequency]
    if pattern.interval == 1:
        description = f"Every {unit}"
    else:
        description = f"Every {pattern.interval} {unit}s"

    if pattern.frequency is Frequency.WEEKLY and pattern.by_day:
        description += " on " + ", ".join(day.full_name for day in pattern.by_day)

    if pattern.count:
        noun = "time" if pattern.count == 1 else "times"
        description += f", {pattern.count} {noun}"
    elif pattern.until:
        until = pattern.until
        description += f", until {until:%B} {until.day}, {until.year}"

    return description
