"""
In-memory capacity store.

OWNERSHIP
=========

One CapacityStore owns the SiteConfig for the whole process and is handed to
the routes through the `get_store` dependency. Nothing is persisted: a
restart discards bookings and admin edits.

Writes that read occupancy and then change it (booking submission, batch
edits) run inside `locked()`, so two requests for the same date cannot both
see room for the last guests. The lock is re-entrant so services can nest
helpers that lock on their own.

Sparse storage: dates are materialized on first write only. Reads go through
`effective_config` in the availability service, which derives defaults for
absent dates without touching the mapping.
"""

import threading
from contextlib import contextmanager
from datetime import date
from typing import Iterator

from dayuse.core.config import get_settings
from dayuse.models import AgeTier, BookingDetail, DayConfig, SiteConfig


def is_default_blocked(day: date) -> bool:
    """Weekdays are closed unless an admin opens them; weekends are open."""
    return day.weekday() < 5


class CapacityStore:
    def __init__(self, site: SiteConfig | None = None):
        self.site = site or SiteConfig.default(get_settings().DEFAULT_DAY_LIMIT)
        self._lock = threading.RLock()
        self._sequence = 0

    @contextmanager
    def locked(self) -> Iterator[SiteConfig]:
        with self._lock:
            yield self.site

    @property
    def global_limit(self) -> int:
        return self.site.global_limit

    @property
    def age_tiers(self) -> list[AgeTier]:
        return self.site.age_tiers

    def get_day(self, day: date) -> DayConfig | None:
        """Stored config for a date, or None. Never materializes."""
        return self.site.days.get(day)

    def materialize(self, day: date, blocked: bool | None = None) -> DayConfig:
        """Return the stored config for a date, creating it on first write."""
        with self._lock:
            config = self.site.days.get(day)
            if config is None:
                config = DayConfig(
                    blocked=is_default_blocked(day) if blocked is None else blocked,
                    limit=self.site.global_limit,
                )
                self.site.days[day] = config
            return config

    def stored_dates(self) -> list[date]:
        return list(self.site.days)

    def all_bookings(self) -> list[BookingDetail]:
        """Every booking, in date-creation order then submission order."""
        return [b for config in self.site.days.values() for b in config.bookings]

    def find_booking(self, day: date, booking_id: str) -> BookingDetail | None:
        config = self.site.days.get(day)
        if config is None:
            return None
        return config.find_booking(booking_id)

    def tier(self, tier_id: str) -> AgeTier | None:
        return next((t for t in self.site.age_tiers if t.id == tier_id), None)

    def next_sequence(self) -> int:
        with self._lock:
            self._sequence += 1
            return self._sequence


_store: CapacityStore | None = None


def get_store() -> CapacityStore:
    """Get capacity store singleton."""
    global _store
    if _store is None:
        _store = CapacityStore()
    return _store


def reset_store() -> None:
    """Drop the singleton (used on application shutdown)."""
    global _store
    _store = None
