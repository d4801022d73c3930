"""
Pytest fixtures for the in-memory store, HTTP client, and admin authentication.

Each test gets a fresh CapacityStore injected through the dependency
override, so bookings and admin edits never leak between tests.
"""

from datetime import date
from types import SimpleNamespace
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from dayuse.main import app
from dayuse.core.security import create_access_token
from dayuse.services.chat_service import ChatRelay, get_chat_relay
from dayuse.services.store import CapacityStore, get_store

# July 2024 starts on a Monday
TUESDAY = date(2024, 7, 2)
SATURDAY = date(2024, 7, 6)
SUNDAY = date(2024, 7, 7)
NEXT_SATURDAY = date(2024, 7, 13)


class FakeMessages:
    def __init__(self, text: str | None = None, error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=[SimpleNamespace(type="text", text=self.text)])


class FakeAnthropic:
    """Stands in for AsyncAnthropic: records calls, returns canned text or raises."""

    def __init__(self, text: str | None = "Olá! Escolha um sábado no calendário.", error: Exception | None = None):
        self.messages = FakeMessages(text=text, error=error)


@pytest.fixture
def store() -> CapacityStore:
    """Fresh store with launch defaults (limit 50, three age tiers)."""
    return CapacityStore()


@pytest.fixture
def fake_anthropic() -> FakeAnthropic:
    return FakeAnthropic()


@pytest.fixture
def chat_relay(fake_anthropic: FakeAnthropic) -> ChatRelay:
    return ChatRelay(client=fake_anthropic)


@pytest_asyncio.fixture(scope="function")
async def client(store: CapacityStore, chat_relay: ChatRelay) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client that overrides the store and chat relay dependencies."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_chat_relay] = lambda: chat_relay

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def admin_token() -> str:
    return create_access_token(data={"sub": "Admin", "role": "admin"})


@pytest.fixture
def admin_headers(admin_token: str) -> dict:
    """Authorization headers with the admin bearer token."""
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def booking_payload():
    """Build a valid booking request body; keyword args override fields."""

    def _payload(**overrides) -> dict:
        payload = {
            "date": SATURDAY.isoformat(),
            "name": "Maria Souza",
            "cpf": "12345678901",
            "phone": "16981234567",
            "email": "maria@example.com",
            "birth_date": "1990-05-20",
            "guest_breakdown": {"t1": 2, "t2": 1, "t3": 3},
        }
        payload.update(overrides)
        return payload

    return _payload
