"""
Pydantic schemas for calendar and capacity administration.
"""

from datetime import date
from pydantic import BaseModel, Field

from dayuse.schemas.booking import BookingResponse


class DayResponse(BaseModel):
    date: date
    weekday: int
    blocked: bool
    limit: int
    occupancy: int
    vacancies: int
    status: str  # open, full, blocked
    low_vacancy: bool
    bookable: bool
    configured: bool


class CalendarResponse(BaseModel):
    year: int
    month: int
    global_limit: int
    days: list[DayResponse]


class AdminDayResponse(DayResponse):
    bookings: list[BookingResponse] = []


class AdminCalendarResponse(BaseModel):
    year: int
    month: int
    global_limit: int
    days: list[AdminDayResponse]


class BatchStatusUpdate(BaseModel):
    dates: list[date] = Field(..., min_length=1)
    blocked: bool


class LimitUpdate(BaseModel):
    limit: int = Field(..., ge=0)
    dates: list[date] = []


class LimitUpdateResponse(BaseModel):
    global_limit: int
    updated: list[DayResponse]


class PaymentUpdate(BaseModel):
    paid: bool | None = None
