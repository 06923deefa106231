"""Tests for pattern descriptions and presets."""

from datetime import UTC, datetime

from eventgrid.models import Frequency, RecurrencePattern, Weekday
from eventgrid.recurrence.describe import describe_pattern
from eventgrid.recurrence.presets import RECURRENCE_PRESETS
from eventgrid.recurrence.rrule import serialize_rule


class TestDescribePattern:
    def test_singular_units(self):
        assert describe_pattern(RecurrencePattern(frequency=Frequency.DAILY)) == "Every day"
        assert describe_pattern(RecurrencePattern(frequency=Frequency.WEEKLY)) == "Every week"
        assert describe_pattern(RecurrencePattern(frequency=Frequency.MONTHLY)) == "Every month"
        assert describe_pattern(RecurrencePattern(frequency=Frequency.YEARLY)) == "Every year"

    def test_plural_with_interval(self):
        pattern = RecurrencePattern(frequency=Frequency.MONTHLY, interval=3)
        assert describe_pattern(pattern) == "Every 3 months"

    def test_weekdays(self):
        pattern = RecurrencePattern(
            frequency=Frequency.WEEKLY, interval=2, by_day=[Weekday.MO, Weekday.WE]
        )
        assert describe_pattern(pattern) == "Every 2 weeks on Monday, Wednesday"

    def test_weekdays_ignored_for_other_frequencies(self):
        pattern = RecurrencePattern(frequency=Frequency.DAILY, by_day=[Weekday.MO])
        assert describe_pattern(pattern) == "Every day"

    def test_count(self):
        pattern = RecurrencePattern(frequency=Frequency.MONTHLY, count=6)
        assert describe_pattern(pattern) == "Every month, 6 times"

    def test_single_count(self):
        pattern = RecurrencePattern(frequency=Frequency.DAILY, count=1)
        assert describe_pattern(pattern) == "Every day, 1 time"

    def test_until(self):
        pattern = RecurrencePattern(
            frequency=Frequency.YEARLY, until=datetime(2027, 3, 1, tzinfo=UTC)
        )
        assert describe_pattern(pattern) == "Every year, until March 1, 2027"

    def test_count_preferred_over_until(self):
        pattern = RecurrencePattern(
            frequency=Frequency.DAILY, count=4, until=datetime(2027, 3, 1)
        )
        assert describe_pattern(pattern) == "Every day, 4 times"


class TestPresets:
    def test_rules(self):
        rules = {name: serialize_rule(factory()) for name, factory in RECURRENCE_PRESETS.items()}
        assert rules == {
            "daily": "RRULE:FREQ=DAILY",
            "weekdays": "RRULE:FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR",
            "weekly": "RRULE:FREQ=WEEKLY",
            "biweekly": "RRULE:FREQ=WEEKLY;INTERVAL=2",
            "monthly": "RRULE:FREQ=MONTHLY",
            "yearly": "RRULE:FREQ=YEARLY",
        }

    def test_factories_return_fresh_patterns(self):
        first = RECURRENCE_PRESETS["weekdays"]()
        second = RECURRENCE_PRESETS["weekdays"]()
        assert first is not second
        assert first.by_day is not second.by_day
