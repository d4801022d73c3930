"""
Public calendar endpoints: effective availability per date.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from dayuse.schemas.day import CalendarResponse, DayResponse
from dayuse.services.availability import describe_day, month_calendar
from dayuse.services.store import CapacityStore, get_store

router = APIRouter(prefix="/calendar", tags=["Calendar"])


@router.get("/", response_model=CalendarResponse)
async def get_month(
    year: int | None = Query(None, ge=2000, le=2100),
    month: int | None = Query(None, ge=1, le=12),
    store: CapacityStore = Depends(get_store),
):
    """
    Availability for every day of a month (defaults to the current month).
    Dates never edited by an admin follow the weekday rule.
    """
    today = date.today()
    year = year or today.year
    month = month or today.month
    return CalendarResponse(
        year=year,
        month=month,
        global_limit=store.global_limit,
        days=month_calendar(store, year, month),
    )


@router.get("/{day}", response_model=DayResponse)
async def get_day(day: date, store: CapacityStore = Depends(get_store)):
    """Single date; `bookable` tells whether the confirm action is enabled."""
    return describe_day(store, day)
