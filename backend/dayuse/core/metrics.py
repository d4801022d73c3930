"""
Metrics instrumentation for observability.
Exposes Prometheus-compatible metrics at /metrics endpoint.
"""

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

# Booking metrics
booking_attempts = Counter(
    'dayuse_booking_attempts_total',
    'Total booking submissions',
    ['status']  # success, rejected, duplicate, invalid
)

booked_guests = Counter(
    'dayuse_booked_guests_total',
    'Guests committed against calendar dates'
)

# Admin metrics
admin_operations = Counter(
    'dayuse_admin_operations_total',
    'Admin mutations applied to the capacity store',
    ['operation']  # status, limit, tier, payment, export
)

login_attempts = Counter(
    'dayuse_admin_login_attempts_total',
    'Admin login attempts',
    ['result']  # success, failure
)

# Chat relay metrics
chat_requests = Counter(
    'dayuse_chat_requests_total',
    'Chat relay requests',
    ['result']  # reply, fallback
)

chat_latency = Histogram(
    'dayuse_chat_latency_seconds',
    'Chat relay round-trip latency',
    buckets=[0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0]
)


def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST
    )

# Convenience functions for instrumentation
def record_booking_attempt(status: str, guests: int = 0):
    """Record booking attempt. Status: success, rejected, duplicate, invalid"""
    booking_attempts.labels(status=status).inc()
    if status == "success":
        booked_guests.inc(guests)

def record_admin_operation(operation: str):
    """Record admin mutation. Operation: status, limit, tier, payment, export"""
    admin_operations.labels(operation=operation).inc()

def record_login(success: bool):
    result = "success" if success else "failure"
    login_attempts.labels(result=result).inc()

def record_chat(fallback: bool):
    result = "fallback" if fallback else "reply"
    chat_requests.labels(result=result).inc()
