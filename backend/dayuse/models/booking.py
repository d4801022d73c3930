"""
Booking record for one guest party on one calendar date.

Key design decisions:
- Only `paid` changes after creation; records are never deleted
- `id` is a short random code meant for humans, not a global key
- `sequence` orders submissions across all dates (most recent = highest)
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone


@dataclass
class BookingDetail:
    id: str
    name: str
    cpf: str
    phone: str
    email: str
    birth_date: date
    total_guests: int
    guest_breakdown: dict[str, int]
    timestamp: str  # display time, e.g. "14:05"
    date: date
    paid: bool = False
    sequence: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __repr__(self) -> str:
        return f"<BookingDetail(id={self.id}, date={self.date}, guests={self.total_guests}, paid={self.paid})>"
