"""
Tests for booking submission, pricing, and returning-guest lookup.
"""

import pytest
from decimal import Decimal
from urllib.parse import unquote
from httpx import AsyncClient

from tests.conftest import SATURDAY, NEXT_SATURDAY, TUESDAY


@pytest.mark.asyncio
async def test_book_default_tiers(client: AsyncClient, booking_payload, store):
    """Breakdown {t1: 2, t2: 1, t3: 3} is 6 guests and 0*2 + 8*1 + 15*3 = 53."""
    response = await client.post("/api/v1/bookings/", json=booking_payload())
    assert response.status_code == 201
    data = response.json()

    assert data["booking"]["total_guests"] == 6
    assert data["booking"]["paid"] is False
    assert data["booking"]["date"] == SATURDAY.isoformat()
    assert len(data["booking"]["id"]) == 9
    assert Decimal(data["total_price"]) == Decimal("53")
    assert [line["tier_id"] for line in data["price_lines"]] == ["t1", "t2", "t3"]
    assert Decimal(data["price_lines"][0]["subtotal"]) == 0

    # Occupancy increased on the calendar
    day = await client.get(f"/api/v1/calendar/{SATURDAY.isoformat()}")
    assert day.json()["occupancy"] == 6
    assert day.json()["vacancies"] == 44
    assert store.get_day(SATURDAY).current_occupancy == 6


@pytest.mark.asyncio
async def test_share_link_encodes_summary(client: AsyncClient, booking_payload):
    """Confirmation carries a WhatsApp link with the percent-encoded summary."""
    response = await client.post("/api/v1/bookings/", json=booking_payload())
    data = response.json()
    url = data["share_url"]

    assert url.startswith("https://wa.me/5516981394818?text=")
    assert " " not in url
    message = unquote(url.split("?text=", 1)[1])
    assert f"#{data['booking']['id']}" in message
    assert "Maria Souza" in message
    assert "6 de julho de 2024" in message
    assert "R$ 53,00" in message
    assert "*3x* Acima de 11 anos" in message


@pytest.mark.asyncio
async def test_numeric_fields_are_sanitized(client: AsyncClient, booking_payload):
    """Non-digits are stripped from CPF and phone and length is capped at 11."""
    response = await client.post(
        "/api/v1/bookings/",
        json=booking_payload(cpf="123.456.789-01", phone="(16) 98123-4567 ramal 99"),
    )
    assert response.status_code == 201
    booking = response.json()["booking"]
    assert booking["cpf"] == "12345678901"
    assert booking["phone"] == "16981234567"


@pytest.mark.asyncio
async def test_missing_required_field(client: AsyncClient, booking_payload):
    payload = booking_payload()
    del payload["email"]
    response = await client.post("/api/v1/bookings/", json=payload)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_cpf_without_digits_rejected(client: AsyncClient, booking_payload):
    response = await client.post("/api/v1/bookings/", json=booking_payload(cpf="abc"))
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_zero_guests_rejected(client: AsyncClient, booking_payload):
    response = await client.post(
        "/api/v1/bookings/",
        json=booking_payload(guest_breakdown={"t1": 0, "t2": 0, "t3": 0}),
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_unknown_tier_rejected(client: AsyncClient, booking_payload, store):
    response = await client.post(
        "/api/v1/bookings/",
        json=booking_payload(guest_breakdown={"t3": 1, "vip": 2}),
    )
    assert response.status_code == 400
    assert "vip" in response.json()["detail"]
    assert store.get_day(SATURDAY) is None


@pytest.mark.asyncio
async def test_book_blocked_weekday(client: AsyncClient, booking_payload, store):
    """Weekdays are closed by default; nothing is materialized on rejection."""
    response = await client.post("/api/v1/bookings/", json=booking_payload(date=TUESDAY.isoformat()))
    assert response.status_code == 409
    assert store.get_day(TUESDAY) is None


@pytest.mark.asyncio
async def test_book_over_capacity(client: AsyncClient, booking_payload, store):
    """A party larger than the remaining vacancies is refused."""
    store.materialize(SATURDAY).limit = 5
    response = await client.post("/api/v1/bookings/", json=booking_payload())
    assert response.status_code == 409
    assert "Available: 5" in response.json()["detail"]
    assert store.get_day(SATURDAY).current_occupancy == 0


@pytest.mark.asyncio
async def test_same_day_booking_requires_confirmation(client: AsyncClient, booking_payload, store):
    """A second booking by the same CPF on the same date needs confirm_additional."""
    first = await client.post("/api/v1/bookings/", json=booking_payload())
    assert first.status_code == 201

    second = await client.post("/api/v1/bookings/", json=booking_payload())
    assert second.status_code == 409
    assert second.json()["detail"]["existing"] == [first.json()["booking"]["id"]]

    confirmed = await client.post("/api/v1/bookings/", json=booking_payload(confirm_additional=True))
    assert confirmed.status_code == 201
    assert store.get_day(SATURDAY).current_occupancy == 12


@pytest.mark.asyncio
async def test_lookup_unknown_guest(client: AsyncClient):
    response = await client.get("/api/v1/guests/98765432100", params={"date": SATURDAY.isoformat()})
    assert response.status_code == 200
    data = response.json()
    assert data["returning"] is False
    assert data["prefill"] is None
    assert data["requires_confirmation"] is False


@pytest.mark.asyncio
async def test_lookup_incomplete_cpf(client: AsyncClient, booking_payload):
    await client.post("/api/v1/bookings/", json=booking_payload())
    response = await client.get("/api/v1/guests/1234567")
    assert response.json()["returning"] is False


@pytest.mark.asyncio
async def test_lookup_prefills_from_latest_booking(client: AsyncClient, booking_payload):
    """Prefill comes from the most recently submitted booking, on any date."""
    await client.post("/api/v1/bookings/", json=booking_payload(date=NEXT_SATURDAY.isoformat()))
    await client.post(
        "/api/v1/bookings/",
        json=booking_payload(name="Maria S. Oliveira", phone="16999990000"),
    )

    response = await client.get(
        "/api/v1/guests/123.456.789-01",
        params={"date": NEXT_SATURDAY.isoformat()},
    )
    data = response.json()
    assert data["returning"] is True
    assert data["prefill"]["name"] == "Maria S. Oliveira"
    assert data["prefill"]["phone"] == "16999990000"
    assert len(data["history"]) == 2
    assert [b["date"] for b in data["existing_for_date"]] == [NEXT_SATURDAY.isoformat()]
    assert data["requires_confirmation"] is True


@pytest.mark.asyncio
async def test_lookup_without_same_day_booking(client: AsyncClient, booking_payload):
    await client.post("/api/v1/bookings/", json=booking_payload())
    response = await client.get(
        "/api/v1/guests/12345678901",
        params={"date": NEXT_SATURDAY.isoformat()},
    )
    data = response.json()
    assert data["returning"] is True
    assert data["existing_for_date"] == []
    assert data["requires_confirmation"] is False


@pytest.mark.asyncio
async def test_list_tiers(client: AsyncClient):
    response = await client.get("/api/v1/tiers")
    assert response.status_code == 200
    tiers = response.json()
    assert [t["id"] for t in tiers] == ["t1", "t2", "t3"]
    assert tiers[2]["max_age"] is None
    assert Decimal(tiers[1]["price"]) == Decimal("8")
