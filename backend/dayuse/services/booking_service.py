"""
Booking service: submission and returning-guest lookup.

SUBMISSION FLOW
===============

  1. Every tier id in the guest breakdown must exist in the live tier list
  2. The admission strategy checks the date's effective config
  3. A guest who already holds bookings on that date must confirm an
     additional one explicitly
  4. The date is materialized, the booking appended and occupancy increased

Steps 2-4 run under the store lock, so the capacity check and the write see
the same occupancy.

RETURNING GUESTS
================

Guests are recognised by CPF. Every booking on every date is scanned; the
form is pre-filled from the most recently submitted match and matches on the
selected date are surfaced before a new booking is accepted.
"""

import secrets
import string
from datetime import date, datetime

from fastapi import HTTPException, status

from dayuse.core.logging import get_logger
from dayuse.core.metrics import record_booking_attempt
from dayuse.models import BookingDetail
from dayuse.schemas.booking import BookingCreate, NUMERIC_FIELD_MAX_LENGTH, digits_only
from dayuse.services.availability import effective_config
from dayuse.services.interfaces.admission import AdmissionStrategy
from dayuse.services.store import CapacityStore

logger = get_logger(__name__)

BOOKING_ID_LENGTH = 9
BOOKING_ID_ALPHABET = string.ascii_uppercase + string.digits


def generate_booking_id() -> str:
    return "".join(secrets.choice(BOOKING_ID_ALPHABET) for _ in range(BOOKING_ID_LENGTH))


def find_bookings_by_cpf(store: CapacityStore, cpf: str) -> list[BookingDetail]:
    """All bookings for a CPF, in store scan order."""
    return [b for b in store.all_bookings() if b.cpf == cpf]


def submit_booking(
    store: CapacityStore,
    booking_data: BookingCreate,
    admission: AdmissionStrategy,
) -> BookingDetail:
    """
    Commit a booking against its date.
    Raises 400 for unknown tiers and 409 when the date cannot take the party
    or when an additional same-day booking was not confirmed.
    """
    unknown = sorted(t for t in booking_data.guest_breakdown if store.tier(t) is None)
    if unknown:
        record_booking_attempt("invalid")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown age tier(s): {', '.join(unknown)}",
        )

    total_guests = booking_data.total_guests
    day = booking_data.date

    with store.locked():
        config = effective_config(store, day)

        if not admission.admit(config, total_guests):
            logger.warning(
                "booking_rejected",
                date=day.isoformat(),
                requested=total_guests,
                occupancy=config.current_occupancy,
                limit=config.limit,
                blocked=config.blocked,
                strategy=admission.name,
            )
            record_booking_attempt("rejected")
            if config.blocked:
                detail = f"Date {day.isoformat()} is not open for bookings"
            else:
                detail = (
                    f"Not enough vacancies. Requested: {total_guests}, "
                    f"Available: {max(0, config.limit - config.current_occupancy)}"
                )
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)

        same_day = [b for b in config.bookings if b.cpf == booking_data.cpf]
        if same_day and not booking_data.confirm_additional:
            record_booking_attempt("duplicate")
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={
                    "message": "Guest already has bookings for this date; confirm to add another",
                    "existing": [b.id for b in same_day],
                },
            )

        booking = BookingDetail(
            id=generate_booking_id(),
            name=booking_data.name,
            cpf=booking_data.cpf,
            phone=booking_data.phone,
            email=str(booking_data.email),
            birth_date=booking_data.birth_date,
            total_guests=total_guests,
            guest_breakdown={t: c for t, c in booking_data.guest_breakdown.items()},
            timestamp=datetime.now().strftime("%H:%M"),
            date=day,
            sequence=store.next_sequence(),
        )
        store.materialize(day).add_booking(booking)
        occupancy = store.get_day(day).current_occupancy

    record_booking_attempt("success", total_guests)
    logger.info(
        "booking_created",
        booking_id=booking.id,
        date=day.isoformat(),
        guests=total_guests,
        occupancy=occupancy,
    )
    return booking


def lookup_returning_guest(store: CapacityStore, cpf: str, day: date | None = None) -> dict:
    """
    Identify a returning guest by CPF.

    Only a complete identifier is looked up. The prefill comes from the most
    recently submitted booking; `requires_confirmation` is set when the guest
    already has bookings on `day`.
    """
    cpf = digits_only(cpf)
    result = {
        "cpf": cpf,
        "returning": False,
        "prefill": None,
        "history": [],
        "existing_for_date": [],
        "requires_confirmation": False,
    }
    if len(cpf) != NUMERIC_FIELD_MAX_LENGTH:
        return result

    history = find_bookings_by_cpf(store, cpf)
    if not history:
        return result

    latest = max(history, key=lambda b: b.sequence)
    existing = [b for b in history if day is not None and b.date == day]

    logger.info(
        "returning_guest_identified",
        bookings=len(history),
        same_day=len(existing),
    )
    result.update(
        returning=True,
        prefill={
            "name": latest.name,
            "phone": latest.phone,
            "email": latest.email,
            "birth_date": latest.birth_date,
        },
        history=history,
        existing_for_date=existing,
        requires_confirmation=bool(existing),
    )
    return result
