"""
Messaging deep link for a confirmed booking request.

The guest forwards a pre-filled WhatsApp message to the property to receive
PIX payment details.
"""

from decimal import Decimal
from urllib.parse import quote

from dayuse.models import AgeTier, BookingDetail
from dayuse.services.pricing import calculate_total_price

WHATSAPP_BASE_URL = "https://wa.me"

MONTHS_PT = [
    "janeiro", "fevereiro", "março", "abril", "maio", "junho",
    "julho", "agosto", "setembro", "outubro", "novembro", "dezembro",
]


def format_brl(amount: Decimal) -> str:
    """Format like pt-BR currency without the symbol: 1234.5 -> '1.234,50'."""
    text = f"{Decimal(amount):,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_long_date(value) -> str:
    return f"{value.day} de {MONTHS_PT[value.month - 1]} de {value.year}"


def build_share_message(booking: BookingDetail, tiers: list[AgeTier]) -> str:
    breakdown = "".join(
        f"\n- *{booking.guest_breakdown.get(tier.id, 0)}x* {tier.label}"
        for tier in tiers
        if booking.guest_breakdown.get(tier.id, 0) > 0
    )
    total = format_brl(calculate_total_price(tiers, booking.guest_breakdown))

    return (
        "*SOLICITAÇÃO DE RESERVA - VISTA ALEGRE*\n\n"
        f"✅ *Reserva:* #{booking.id}\n\n"
        f"👤 *Responsável:* {booking.name}\n"
        f"📅 *Data:* {format_long_date(booking.date)}\n"
        f"👥 *Visitantes:* {booking.total_guests}\n"
        f"{breakdown}\n\n"
        f"💰 *Valor Total:* R$ {total}\n\n"
        "_Olá! Acabei de solicitar meu Day Use pelo site. Gostaria de receber os dados "
        "do PIX para efetuar o pagamento e confirmar minha reserva!_"
    )


def build_whatsapp_link(booking: BookingDetail, tiers: list[AgeTier], phone: str) -> str:
    message = build_share_message(booking, tiers)
    return f"{WHATSAPP_BASE_URL}/{phone}?text={quote(message, safe='')}"
