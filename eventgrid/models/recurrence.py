"""Recurrence pattern model.

A pattern is the structured form of an RRULE: a frequency, a step, an
optional termination bound and optional BY* refinements. Refinements only
apply to their own frequency (BYDAY to WEEKLY, BYMONTHDAY to MONTHLY,
BYMONTH and BYMONTHDAY to YEARLY); the engine ignores the rest.
"""

from datetime import date, datetime
from enum import Enum

from pydantic import field_validator
from sqlmodel import Field, SQLModel


class Frequency(str, Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class Weekday(str, Enum):
    SU = "SU"
    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"

    @classmethod
    def from_date(cls, value: date) -> "Weekday":
        """Weekday code of a date (``datetime.weekday`` counts from Monday)."""
        return _PYTHON_WEEKDAYS[value.weekday()]

    @property
    def full_name(self) -> str:
        return _WEEKDAY_NAMES[self]


_PYTHON_WEEKDAYS = [
    Weekday.MO,
    Weekday.TU,
    Weekday.WE,
    Weekday.TH,
    Weekday.FR,
    Weekday.SA,
    Weekday.SU,
]

_WEEKDAY_NAMES = {
    Weekday.MO: "Monday",
    Weekday.TU: "Tuesday",
    Weekday.WE: "Wednesday",
    Weekday.TH: "Thursday",
    Weekday.FR: "Friday",
    Weekday.SA: "Saturday",
    Weekday.SU: "Sunday",
}


class RecurrencePattern(SQLModel):
    """A recurrence rule in structured form.

    Attributes:
        frequency: Base unit of repetition.
        interval: Step between occurrences, in frequency units.
        count: Total number of occurrences, anchor included.
        until: Inclusive end of the series.
        by_day: Weekdays a WEEKLY series falls on.
        by_month_day: Days of the month for MONTHLY (and YEARLY with
            by_month). Negative values count back from the month end,
            so -1 is the last day. Only the first value is used.
        by_month: Month for YEARLY series. Only the first value is used.

    Setting both ``count`` and ``until`` is allowed; whichever bound is
    reached first ends the series.
    """
    frequency: Frequency
    interval: int = Field(default=1, ge=1)
    count: int | None = Field(default=None, ge=1)
    until: datetime | None = None
    by_day: list[Weekday] = Field(default_factory=list)
    by_month_day: list[int] = Field(default_factory=list)
    by_month: list[int] = Field(default_factory=list)

    @field_validator("until")
    @classmethod
    def truncate_until(cls, value: datetime | None) -> datetime | None:
        # RRULE UNTIL has whole-second precision
        if value is None:
            return value
        return value.replace(microsecond=0)

    @field_validator("by_month_day")
    @classmethod
    def check_month_days(cls, value: list[int]) -> list[int]:
        for day in value:
            if day == 0 or not -31 <= day <= 31:
                raise ValueError(f"invalid day of month: {day}")
        return value

    @field_validator("by_month")
    @classmethod
    def check_months(cls, value: list[int]) -> list[int]:
        for month in value:
            if not 1 <= month <= 12:
                raise ValueError(f"invalid month: {month}")
        return value
