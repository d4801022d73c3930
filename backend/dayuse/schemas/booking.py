"""
Pydantic schemas for booking-related request/response validation.
"""

import re
from datetime import date
from decimal import Decimal
from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

NUMERIC_FIELD_MAX_LENGTH = 11


def digits_only(value: str, max_length: int = NUMERIC_FIELD_MAX_LENGTH) -> str:
    """Strip every non-digit and cap the length, like the form inputs do."""
    return re.sub(r"\D", "", value or "")[:max_length]


class BookingCreate(BaseModel):
    date: date
    name: str = Field(..., min_length=1, max_length=255)
    cpf: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: EmailStr
    birth_date: date
    guest_breakdown: dict[str, int]
    confirm_additional: bool = False

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("cpf", "phone", mode="before")
    @classmethod
    def numeric_only(cls, value):
        if value is None:
            return value
        return digits_only(str(value))

    @field_validator("guest_breakdown")
    @classmethod
    def counts_not_negative(cls, value: dict[str, int]) -> dict[str, int]:
        if any(count < 0 for count in value.values()):
            raise ValueError("Guest counts cannot be negative")
        return value

    @model_validator(mode="after")
    def at_least_one_guest(self):
        if self.total_guests < 1:
            raise ValueError("At least one guest is required")
        return self

    @property
    def total_guests(self) -> int:
        return sum(self.guest_breakdown.values())


class BookingResponse(BaseModel):
    id: str
    date: date
    name: str
    cpf: str
    phone: str
    email: str
    birth_date: date
    total_guests: int
    guest_breakdown: dict[str, int]
    timestamp: str
    paid: bool

    model_config = {"from_attributes": True}


class PriceLine(BaseModel):
    tier_id: str
    label: str
    count: int
    unit_price: Decimal
    subtotal: Decimal


class BookingConfirmation(BaseModel):
    booking: BookingResponse
    price_lines: list[PriceLine]
    total_price: Decimal
    share_url: str


class GuestPrefill(BaseModel):
    name: str
    phone: str
    email: str
    birth_date: date


class GuestLookupResponse(BaseModel):
    cpf: str
    returning: bool
    prefill: GuestPrefill | None = None
    history: list[BookingResponse] = []
    existing_for_date: list[BookingResponse] = []
    requires_confirmation: bool = False
