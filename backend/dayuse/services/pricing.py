"""Age-tier price arithmetic."""

from decimal import Decimal

from dayuse.models import AgeTier


def calculate_total_price(tiers: list[AgeTier], breakdown: dict[str, int]) -> Decimal:
    """Sum of count x price over the live tier list; unknown tier ids add nothing."""
    return sum(
        (tier.price * breakdown.get(tier.id, 0) for tier in tiers),
        Decimal("0"),
    )


def price_lines(tiers: list[AgeTier], breakdown: dict[str, int]) -> list[dict]:
    """One line per tier with at least one guest, in tier order."""
    lines = []
    for tier in tiers:
        count = breakdown.get(tier.id, 0)
        if count == 0:
            continue
        lines.append({
            "tier_id": tier.id,
            "label": tier.label,
            "count": count,
            "unit_price": tier.price,
            "subtotal": tier.price * count,
        })
    return lines
