"""
Tests for the chat relay: request shape, history replay, and fallback.
"""

import pytest
from httpx import AsyncClient

from dayuse.services.chat_service import (
    FALLBACK_REPLY,
    GREETING,
    ChatRelay,
    build_messages,
    build_system_instruction,
)
from tests.conftest import FakeAnthropic


@pytest.mark.asyncio
async def test_chat_reply(client: AsyncClient, fake_anthropic):
    response = await client.post("/api/v1/chat/", json={"message": "Quais os preços?"})
    assert response.status_code == 200
    assert response.json()["reply"] == "Olá! Escolha um sábado no calendário."

    call = fake_anthropic.messages.calls[0]
    assert call["temperature"] == 0.7
    assert call["messages"] == [{"role": "user", "content": "Quais os preços?"}]
    assert "EVA" in call["system"]
    assert "Azure Horizon Villa" in call["system"]
    assert "Acima de 11 anos" in call["system"]


@pytest.mark.asyncio
async def test_chat_replays_visible_history(client: AsyncClient, fake_anthropic):
    await client.post("/api/v1/chat/", json={
        "message": "E para crianças?",
        "history": [
            {"role": "bot", "content": GREETING},
            {"role": "user", "content": "Quanto custa?"},
            {"role": "bot", "content": "R$ 15 por adulto."},
        ],
    })
    messages = fake_anthropic.messages.calls[0]["messages"]
    assert [m["role"] for m in messages] == ["user", "assistant", "user"]
    assert messages[-1]["content"] == "E para crianças?"


@pytest.mark.asyncio
async def test_chat_fallback_on_remote_error(store):
    relay = ChatRelay(client=FakeAnthropic(error=RuntimeError("quota exceeded")))
    reply = await relay.reply("Olá", tiers=store.age_tiers)
    assert reply == FALLBACK_REPLY


@pytest.mark.asyncio
async def test_chat_fallback_on_empty_response():
    relay = ChatRelay(client=FakeAnthropic(text=""))
    assert await relay.reply("Olá") == FALLBACK_REPLY


@pytest.mark.asyncio
async def test_chat_fallback_without_api_key(monkeypatch):
    relay = ChatRelay(client=None, api_key=None)
    monkeypatch.setattr(relay, "client", None)
    assert relay.is_available() is False
    assert await relay.reply("Olá") == FALLBACK_REPLY


@pytest.mark.asyncio
async def test_chat_endpoint_never_fails(client: AsyncClient, fake_anthropic):
    fake_anthropic.messages.error = ConnectionError("network down")
    response = await client.post("/api/v1/chat/", json={"message": "Olá"})
    assert response.status_code == 200
    assert response.json()["reply"] == FALLBACK_REPLY


@pytest.mark.asyncio
async def test_chat_rejects_empty_message(client: AsyncClient):
    response = await client.post("/api/v1/chat/", json={"message": ""})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_greeting(client: AsyncClient):
    response = await client.get("/api/v1/chat/greeting")
    assert response.json()["reply"] == GREETING


def test_build_messages_merges_consecutive_user_turns():
    messages = build_messages("segunda", [{"role": "user", "content": "primeira"}])
    assert messages == [{"role": "user", "content": "primeira\n\nsegunda"}]


def test_system_instruction_without_tiers():
    instruction = build_system_instruction()
    assert "Day Use" in instruction
    assert '"day_use_prices": []' in instruction
