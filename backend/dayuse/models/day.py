"""
Per-date capacity state.

`current_occupancy` is denormalized: it always equals the sum of
`total_guests` over `bookings` as long as bookings are added through
`add_booking`.
"""

from dataclasses import dataclass, field

from dayuse.models.booking import BookingDetail


@dataclass
class DayConfig:
    blocked: bool
    limit: int
    current_occupancy: int = 0
    bookings: list[BookingDetail] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.limit < 0:
            raise ValueError("Day limit cannot be negative")

    def add_booking(self, booking: BookingDetail) -> None:
        self.bookings.append(booking)
        self.current_occupancy += booking.total_guests

    def find_booking(self, booking_id: str) -> BookingDetail | None:
        return next((b for b in self.bookings if b.id == booking_id), None)

    def __repr__(self) -> str:
        return (
            f"<DayConfig(blocked={self.blocked}, occupancy={self.current_occupancy}/{self.limit}, "
            f"bookings={len(self.bookings)})>"
        )
