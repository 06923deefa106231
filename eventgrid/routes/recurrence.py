"""Recurrence routes used by the event editor and the views."""
from datetime import datetime

from fastapi import APIRouter, HTTPException
from sqlmodel import Field, SQLModel

from eventgrid.core.config import settings
from eventgrid.models import RecurrencePattern
from eventgrid.recurrence.describe import describe_pattern
from eventgrid.recurrence.expand import expand_occurrences, is_excepted
from eventgrid.recurrence.presets import RECURRENCE_PRESETS
from eventgrid.recurrence.rrule import parse_rule, serialize_rule

router = APIRouter(prefix="/recurrence", tags=["recurrence"])


class RuleRequest(SQLModel):
    rrule: str


class ExpandRequest(SQLModel):
    anchor: datetime
    rrule: str | None = None
    pattern: RecurrencePattern | None = None
    max_occurrences: int | None = None
    exceptions: list[str] = Field(default_factory=list)


def _resolve_pattern(body: ExpandRequest) -> RecurrencePattern:
    """Return the request's pattern, parsing ``rrule`` if that was sent."""
    if (body.rrule is None) == (body.pattern is None):
        raise HTTPException(
            status_code=400, detail="Provide exactly one of rrule or pattern"
        )
    if body.pattern is not None:
        return body.pattern
    pattern = parse_rule(body.rrule)
    if pattern is None:
        raise HTTPException(status_code=400, detail="Unrecognized recurrence rule")
    return pattern


@router.post("/serialize")
async def serialize(pattern: RecurrencePattern):
    """Encode a recurrence choice as an RRULE string for storage."""
    return {"rrule": serialize_rule(pattern)}


@router.post("/parse")
async def parse(body: RuleRequest):
    """
    Decode a stored RRULE string.

    Returns 400 if the string has no RRULE prefix or no recognised FREQ.
    """
    pattern = parse_rule(body.rrule)
    if pattern is None:
        raise HTTPException(status_code=400, detail="Unrecognized recurrence rule")
    return pattern


@router.post("/expand")
async def expand(body: ExpandRequest):
    """
    Expand a series into occurrence dates.

    Occurrences falling on an exception date are reported separately
    under ``excepted`` rather than in ``occurrences``.
    """
    pattern = _resolve_pattern(body)
    max_occurrences = (
        body.max_occurrences
        if body.max_occurrences is not None
        else settings.default_max_occurrences
    )
    dates = expand_occurrences(body.anchor, pattern, max_occurrences)
    excepted = [d for d in dates if is_excepted(d, body.exceptions)]
    return {
        "occurrences": [d for d in dates if d not in excepted],
        "excepted": excepted,
    }


@router.post("/describe")
async def describe(pattern: RecurrencePattern):
    """Human-readable summary of a pattern."""
    return {"description": describe_pattern(pattern)}


@router.get("/presets")
async def presets():
    """Named recurrence presets, as RRULE strings."""
    return {name: serialize_rule(factory()) for name, factory in RECURRENCE_PRESETS.items()}
