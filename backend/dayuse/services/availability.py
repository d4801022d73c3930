"""
Availability reads over the capacity store.

Absent dates are never written here: `effective_config` derives their state
from the weekday rule and the global default limit.
"""

import calendar
from datetime import date

from dayuse.models import DayConfig
from dayuse.services.store import CapacityStore, is_default_blocked

LOW_VACANCY_THRESHOLD = 10

__all__ = [
    "effective_config",
    "can_accept",
    "vacancies",
    "day_status",
    "describe_day",
    "month_calendar",
    "is_default_blocked",
]


def effective_config(store: CapacityStore, day: date) -> DayConfig:
    """Stored config for the date, or a detached default for absent dates."""
    config = store.get_day(day)
    if config is not None:
        return config
    return DayConfig(blocked=is_default_blocked(day), limit=store.global_limit)


def can_accept(config: DayConfig) -> bool:
    return not config.blocked and config.current_occupancy < config.limit


def vacancies(config: DayConfig) -> int:
    return max(0, config.limit - config.current_occupancy)


def day_status(config: DayConfig) -> str:
    if config.blocked:
        return "blocked"
    if vacancies(config) == 0:
        return "full"
    return "open"


def describe_day(store: CapacityStore, day: date) -> dict:
    config = effective_config(store, day)
    free = vacancies(config)
    status = day_status(config)
    return {
        "date": day,
        "weekday": day.weekday(),
        "blocked": config.blocked,
        "limit": config.limit,
        "occupancy": config.current_occupancy,
        "vacancies": free,
        "status": status,
        "low_vacancy": status == "open" and free < LOW_VACANCY_THRESHOLD,
        "bookable": can_accept(config),
        "configured": store.get_day(day) is not None,
    }


def month_calendar(store: CapacityStore, year: int, month: int) -> list[dict]:
    _, days_in_month = calendar.monthrange(year, month)
    return [describe_day(store, date(year, month, d)) for d in range(1, days_in_month + 1)]
