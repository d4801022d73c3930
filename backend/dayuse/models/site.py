"""
Site-wide state: pricing tiers plus the sparse date -> DayConfig mapping.

Key design decisions:
- `days` only holds dates that were written to (first booking or first admin
  edit); every other date is derived on read from the weekday rule
- Age ranges are informational; guests are counted by tier selection only
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from dayuse.models.day import DayConfig


@dataclass
class AgeTier:
    id: str
    label: str
    min_age: int
    max_age: int | None  # None for "and older"
    price: Decimal

    def __post_init__(self) -> None:
        self.price = Decimal(self.price)
        if self.price < 0:
            raise ValueError("Tier price cannot be negative")


@dataclass
class SiteConfig:
    global_limit: int
    age_tiers: list[AgeTier]
    days: dict[date, DayConfig] = field(default_factory=dict)

    @classmethod
    def default(cls, global_limit: int | None = None) -> "SiteConfig":
        from dayuse.catalog import DEFAULT_GLOBAL_LIMIT, default_age_tiers

        return cls(
            global_limit=DEFAULT_GLOBAL_LIMIT if global_limit is None else global_limit,
            age_tiers=default_age_tiers(),
        )

    def __repr__(self) -> str:
        return f"<SiteConfig(global_limit={self.global_limit}, tiers={len(self.age_tiers)}, days={len(self.days)})>"
