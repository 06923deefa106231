"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from eventgrid.main import app
from eventgrid.models import CalendarEvent, LayoutWindow

from helpers import DAY, at, make_event


@pytest.fixture(name="client")
def client_fixture():
    """Create a test client for the API."""
    with TestClient(app) as client:
        yield client


@pytest.fixture(name="day_window")
def day_window_fixture() -> LayoutWindow:
    """The full test day, midnight to midnight."""
    return LayoutWindow(start=at(0), end=DAY.replace(day=3))


@pytest.fixture(name="overlapping_events")
def overlapping_events_fixture() -> list[CalendarEvent]:
    """Two events that overlap without either containing the other."""
    return [
        make_event("a", at(9), at(10)),
        make_event("b", at(9, 30), at(10, 30)),
    ]


@pytest.fixture(name="nested_events")
def nested_events_fixture() -> list[CalendarEvent]:
    """An event fully inside another."""
    return [
        make_event("outer", at(9), at(12)),
        make_event("inner", at(10), at(11)),
    ]
