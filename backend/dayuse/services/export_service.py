"""
CSV export of one day's bookings.

Semicolon-delimited so spreadsheet apps in pt-BR locales open it directly;
the byte-order marker makes them pick UTF-8. Fields are quoted by the csv
module whenever they contain the delimiter, quotes or line breaks.
"""

import csv
import io
from datetime import date

from dayuse.models import AgeTier, BookingDetail

DELIMITER = ";"
BOM = "\ufeff"
MEDIA_TYPE = "text/csv; charset=utf-8"

BASE_HEADERS = [
    "ID Reserva",
    "Status Pagamento",
    "Nome",
    "CPF",
    "Telefone",
    "E-mail",
    "Data Nasc.",
    "Horário Registro",
    "Total Pessoas",
]


def payment_label(booking: BookingDetail) -> str:
    return "PAGO" if booking.paid else "PENDENTE"


def export_rows(tiers: list[AgeTier], bookings: list[BookingDetail]) -> list[list]:
    """Header row followed by one row per booking."""
    rows: list[list] = [BASE_HEADERS + [tier.label for tier in tiers]]
    for b in bookings:
        rows.append([
            b.id,
            payment_label(b),
            b.name,
            b.cpf,
            b.phone,
            b.email,
            b.birth_date.isoformat(),
            b.timestamp,
            b.total_guests,
            *[b.guest_breakdown.get(tier.id, 0) for tier in tiers],
        ])
    return rows


def export_day_csv(tiers: list[AgeTier], bookings: list[BookingDetail]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=DELIMITER, lineterminator="\n")
    writer.writerows(export_rows(tiers, bookings))
    return buffer.getvalue()


def export_filename(day: date) -> str:
    return f"reservas-vista-alegre-{day.isoformat()}.csv"
