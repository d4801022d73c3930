"""
Admin mutations over the capacity store.

Every edit is applied per date with no cross-date rollback. Dates are
materialized on first edit; absent dates keep deriving their defaults.
"""

from datetime import date
from decimal import Decimal

from fastapi import HTTPException, status

from dayuse.core.logging import get_logger
from dayuse.core.metrics import record_admin_operation
from dayuse.models import AgeTier, BookingDetail, DayConfig
from dayuse.services.store import CapacityStore

logger = get_logger(__name__)

# Sentinel so callers can clear max_age to "unbounded" with an explicit None.
UNSET = object()


def apply_batch_status(store: CapacityStore, dates: list[date], blocked: bool) -> list[DayConfig]:
    """Block or open every selected date, creating configs at the global limit."""
    updated = []
    with store.locked():
        for day in dates:
            config = store.materialize(day, blocked=blocked)
            config.blocked = blocked
            updated.append(config)

    record_admin_operation("status")
    logger.info(
        "day_status_changed",
        dates=[d.isoformat() for d in dates],
        blocked=blocked,
    )
    return updated


def change_limit(store: CapacityStore, limit: int, dates: list[date] | None = None) -> list[date]:
    """
    Change daily capacity.

    With no dates selected the global default changes and every stored date
    is overwritten with it. With dates selected only those dates change;
    absent ones are created with their weekday blocked default.
    Returns the dates whose stored limit was written.
    """
    if limit < 0:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Limit cannot be negative",
        )

    with store.locked() as site:
        if not dates:
            site.global_limit = limit
            for config in site.days.values():
                config.limit = limit
            touched = list(site.days)
            scope = "global"
        else:
            for day in dates:
                store.materialize(day).limit = limit
            touched = list(dates)
            scope = "selected"

    record_admin_operation("limit")
    logger.info("limit_changed", limit=limit, scope=scope, dates=len(touched))
    return touched


def update_age_tier(
    store: CapacityStore,
    tier_id: str,
    *,
    label: str | None = None,
    price: Decimal | None = None,
    min_age: int | None = None,
    max_age=UNSET,
) -> AgeTier:
    """Partial update of one tier. Existing bookings are not re-validated."""
    with store.locked():
        tier = store.tier(tier_id)
        if tier is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Age tier {tier_id} not found",
            )
        if label is not None:
            tier.label = label
        if price is not None:
            if Decimal(price) < 0:
                raise HTTPException(
                    status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                    detail="Tier price cannot be negative",
                )
            tier.price = Decimal(price)
        if min_age is not None:
            tier.min_age = min_age
        if max_age is not UNSET:
            tier.max_age = max_age

    record_admin_operation("tier")
    logger.info("tier_updated", tier_id=tier_id, label=tier.label, price=str(tier.price))
    return tier


def set_payment_status(
    store: CapacityStore,
    day: date,
    booking_id: str,
    paid: bool | None = None,
) -> BookingDetail:
    """Flip (or set) one booking's payment flag. Nothing else changes."""
    with store.locked():
        booking = store.find_booking(day, booking_id)
        if booking is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Booking {booking_id} not found on {day.isoformat()}",
            )
        booking.paid = (not booking.paid) if paid is None else paid

    record_admin_operation("payment")
    logger.info("payment_toggled", booking_id=booking_id, date=day.isoformat(), paid=booking.paid)
    return booking


def day_bookings(store: CapacityStore, day: date) -> list[BookingDetail]:
    config = store.get_day(day)
    return list(config.bookings) if config else []
