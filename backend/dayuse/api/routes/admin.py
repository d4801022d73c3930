"""
Admin endpoints: capacity, blocking, pricing, payments and export.
All routes require the admin bearer token.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from dayuse.core.metrics import record_admin_operation
from dayuse.core.security import get_current_admin
from dayuse.schemas.booking import BookingResponse
from dayuse.schemas.day import (
    AdminCalendarResponse,
    AdminDayResponse,
    BatchStatusUpdate,
    DayResponse,
    LimitUpdate,
    LimitUpdateResponse,
    PaymentUpdate,
)
from dayuse.schemas.tier import AgeTierResponse, AgeTierUpdate
from dayuse.services.admin_service import (
    apply_batch_status,
    change_limit,
    day_bookings,
    set_payment_status,
    update_age_tier,
)
from dayuse.services.availability import describe_day, month_calendar
from dayuse.services.export_service import BOM, MEDIA_TYPE, export_day_csv, export_filename
from dayuse.services.store import CapacityStore, get_store

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(get_current_admin)],
)


def _admin_day(store: CapacityStore, day: date) -> dict:
    return {**describe_day(store, day), "bookings": day_bookings(store, day)}


@router.get("/days", response_model=AdminCalendarResponse)
async def admin_month(
    year: int | None = Query(None, ge=2000, le=2100),
    month: int | None = Query(None, ge=1, le=12),
    store: CapacityStore = Depends(get_store),
):
    """Occupancy overview for a month, with each date's bookings."""
    today = date.today()
    year = year or today.year
    month = month or today.month
    days = [
        {**entry, "bookings": day_bookings(store, entry["date"])}
        for entry in month_calendar(store, year, month)
    ]
    return AdminCalendarResponse(year=year, month=month, global_limit=store.global_limit, days=days)


@router.get("/days/{day}", response_model=AdminDayResponse)
async def admin_day(day: date, store: CapacityStore = Depends(get_store)):
    return _admin_day(store, day)


@router.post("/days/status", response_model=list[DayResponse])
async def batch_status(update: BatchStatusUpdate, store: CapacityStore = Depends(get_store)):
    """Block or open all selected dates."""
    apply_batch_status(store, update.dates, update.blocked)
    return [describe_day(store, d) for d in update.dates]


@router.put("/limit", response_model=LimitUpdateResponse)
async def update_limit(update: LimitUpdate, store: CapacityStore = Depends(get_store)):
    """
    Change capacity. No dates selected: global default plus every stored date.
    Dates selected: only those dates.
    """
    touched = change_limit(store, update.limit, update.dates)
    return LimitUpdateResponse(
        global_limit=store.global_limit,
        updated=[describe_day(store, d) for d in touched],
    )


@router.patch("/tiers/{tier_id}", response_model=AgeTierResponse)
async def edit_tier(tier_id: str, update: AgeTierUpdate, store: CapacityStore = Depends(get_store)):
    changes = update.model_dump(exclude_unset=True)
    return update_age_tier(store, tier_id, **changes)


@router.patch("/days/{day}/bookings/{booking_id}/payment", response_model=BookingResponse)
async def toggle_payment(
    day: date,
    booking_id: str,
    update: PaymentUpdate | None = None,
    store: CapacityStore = Depends(get_store),
):
    """Flip the payment flag, or set it when `paid` is given."""
    paid = update.paid if update is not None else None
    return set_payment_status(store, day, booking_id, paid)


@router.get("/days/{day}/export")
async def export_day(day: date, store: CapacityStore = Depends(get_store)):
    """Download the date's bookings as semicolon-separated CSV."""
    bookings = day_bookings(store, day)
    if not bookings:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No bookings on {day.isoformat()}",
        )
    record_admin_operation("export")
    content = BOM + export_day_csv(store.age_tiers, bookings)
    return Response(
        content=content.encode("utf-8"),
        media_type=MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export_filename(day)}"'},
    )
