"""
Booking endpoints: submission, returning-guest lookup and pricing tiers.
"""

from datetime import date

from fastapi import APIRouter, Depends, Query, status

from dayuse.core.config import get_settings
from dayuse.schemas.booking import BookingConfirmation, BookingCreate, GuestLookupResponse
from dayuse.schemas.tier import AgeTierResponse
from dayuse.services.booking_service import lookup_returning_guest, submit_booking
from dayuse.services.interfaces.admission import AdmissionStrategy
from dayuse.services.pricing import calculate_total_price, price_lines
from dayuse.services.share_service import build_whatsapp_link
from dayuse.services.store import CapacityStore, get_store
from dayuse.services.strategy_factory import get_admission

router = APIRouter(tags=["Bookings"])


@router.post("/bookings/", response_model=BookingConfirmation, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking_data: BookingCreate,
    store: CapacityStore = Depends(get_store),
    admission: AdmissionStrategy = Depends(get_admission),
):
    """
    Submit a day-use booking.

    Returns the booking with its price breakdown and a WhatsApp link the
    guest uses to request payment details.
    """
    booking = submit_booking(store, booking_data, admission)
    tiers = store.age_tiers
    return BookingConfirmation(
        booking=booking,
        price_lines=price_lines(tiers, booking.guest_breakdown),
        total_price=calculate_total_price(tiers, booking.guest_breakdown),
        share_url=build_whatsapp_link(booking, tiers, get_settings().WHATSAPP_NUMBER),
    )


@router.get("/guests/{cpf}", response_model=GuestLookupResponse)
async def lookup_guest(
    cpf: str,
    day: date | None = Query(None, alias="date"),
    store: CapacityStore = Depends(get_store),
):
    """Recognise a returning guest and list their bookings on the selected date."""
    return lookup_returning_guest(store, cpf, day)


@router.get("/tiers", response_model=list[AgeTierResponse])
async def list_tiers(store: CapacityStore = Depends(get_store)):
    """Current age-tier pricing."""
    return store.age_tiers
