"""Layout routes for the day, week and month views."""
from datetime import date

from fastapi import APIRouter
from sqlmodel import SQLModel

from eventgrid.core.config import settings
from eventgrid.layout.month import month_cell
from eventgrid.layout.overlap import compute_layout
from eventgrid.layout.palette import palette_index
from eventgrid.models import CalendarEvent, LayoutWindow

router = APIRouter(prefix="/layout", tags=["layout"])


class LayoutRequest(SQLModel):
    events: list[CalendarEvent]
    window: LayoutWindow | None = None
    exclude_all_day: bool = False


class MonthCellRequest(SQLModel):
    events: list[CalendarEvent]
    day: date
    max_visible: int | None = None


@router.post("")
async def layout_events(body: LayoutRequest):
    """
    Compute column placement for a day column.

    The caller sends the events already filtered to the day being drawn.
    Returns one layout per event id with column, width, inset and
    vertical geometry to apply when rendering.
    """
    layouts = compute_layout(
        body.events,
        body.window,
        exclude_all_day=body.exclude_all_day,
        inset_percent=settings.contained_inset_percent,
    )
    return {"layouts": layouts}


@router.post("/month")
async def layout_month_cell(body: MonthCellRequest):
    """
    Pick the events shown in a month-view cell.

    Returns the ids of the visible events in start order and how many
    more the "+N more" indicator should report.
    """
    max_visible = (
        body.max_visible if body.max_visible is not None else settings.month_max_visible
    )
    cell = month_cell(body.events, body.day, max_visible)
    return {
        "visible": [event.id for event in cell.visible],
        "overflow": cell.overflow,
    }


@router.get("/palette/{event_id}")
async def event_palette(event_id: str):
    """Stable palette slot for an event id."""
    return {
        "event_id": event_id,
        "index": palette_index(event_id, settings.palette_size),
    }
