"""Tests for data models."""

from datetime import date, datetime, timedelta

import pytest
from pydantic import ValidationError

from eventgrid.models import CalendarEvent, EventLayout, Weekday


class TestCalendarEventModel:
    """Tests for the CalendarEvent model."""

    def test_create_event(self):
        """Test creating a basic event."""
        event = CalendarEvent(
            id="evt_1",
            title="Planning",
            start=datetime(2026, 3, 2, 9),
            end=datetime(2026, 3, 2, 10, 30),
        )
        assert event.duration == timedelta(minutes=90)
        assert event.is_all_day is None
        assert event.all_day is False
        assert event.recurrence_id is None

    def test_effective_end_defaults_to_one_hour(self):
        """Test an event without an end lasts one hour."""
        event = CalendarEvent(id="evt_2", start=datetime(2026, 3, 2, 9))
        assert event.effective_end == datetime(2026, 3, 2, 10)

    def test_date_only_start(self):
        """Test date-only strings parse as midnight."""
        event = CalendarEvent(id="evt_3", start="2026-03-02", end="2026-03-03")
        assert event.start == datetime(2026, 3, 2)
        assert event.all_day is True

    def test_start_is_required(self):
        """Test that an event needs a start."""
        with pytest.raises(ValidationError):
            CalendarEvent(id="evt_4")


class TestEventLayoutModel:
    """Tests for the EventLayout model."""

    def test_defaults(self):
        """Test a fresh layout is a full-width single column."""
        layout = EventLayout(event_id="evt_1")
        assert layout.column == 0
        assert layout.total_columns == 1
        assert layout.width_percent == 100.0
        assert layout.top_percent is None


class TestWeekday:
    """Tests for weekday codes."""

    @pytest.mark.parametrize(
        "day,code",
        [
            (date(2026, 3, 1), Weekday.SU),
            (date(2026, 3, 2), Weekday.MO),
            (date(2026, 3, 7), Weekday.SA),
        ],
    )
    def test_from_date(self, day, code):
        assert Weekday.from_date(day) is code

    def test_full_name(self):
        assert Weekday.TH.full_name == "Thursday"
