"""
Chat relay to the Anthropic Messages API.

Each call is stateless from the remote side: the persona instruction (with
the catalog embedded) and whatever visible history the caller replays are
sent along with the new message. Every failure becomes a fixed fallback
sentence; the relay never raises to its caller.
"""

import json
import time
from typing import Iterable

from anthropic import AsyncAnthropic

from dayuse.catalog import PROPERTIES
from dayuse.core.config import get_settings
from dayuse.core.logging import get_logger
from dayuse.core.metrics import chat_latency, record_chat
from dayuse.models import AgeTier

logger = get_logger(__name__)

GREETING = (
    "Olá! Sou a EVA, sua assistente pessoal de reservas. "
    "Qual destino despertou seu interesse hoje?"
)
FALLBACK_REPLY = "Desculpe, tive um contratempo. Como a EVA pode te ajudar de outra forma?"


def catalog_summary(tiers: Iterable[AgeTier] = ()) -> str:
    payload = {
        "properties": [
            {
                "id": p["id"],
                "name": p["name"],
                "location": p["location"],
                "price": p["price_per_night"],
                "features": p["amenities"],
            }
            for p in PROPERTIES
        ],
        "day_use_prices": [
            {"label": t.label, "min_age": t.min_age, "max_age": t.max_age, "price": str(t.price)}
            for t in tiers
        ],
    }
    return json.dumps(payload, ensure_ascii=False)


def build_system_instruction(tiers: Iterable[AgeTier] = ()) -> str:
    return (
        "Você é a 'EVA', uma Concierge de luxo e assistente pessoal da plataforma EVA RESERVA.\n"
        "Sua plataforma agora é especializada em 'Day Use' (reservas para um único dia).\n\n"
        f"Catálogo: {catalog_summary(tiers)}\n\n"
        "Regras:\n"
        "1. Seja extremamente profissional, calorosa e eficiente.\n"
        "2. Sempre que sugerir algo, mencione os benefícios exclusivos de um Day Use com a EVA.\n"
        "3. Informe que o usuário deve selecionar exatamente um dia no calendário da tela inicial para prosseguir.\n"
        "4. Não trabalhamos com pernoite no momento, apenas experiências de dia inteiro.\n"
        "5. Responda no idioma do usuário."
    )


def build_messages(message: str, history: Iterable[dict] = ()) -> list[dict]:
    """
    Convert the visible chat log into API messages.

    Bot turns map to the assistant role; leading assistant turns (the
    greeting) are dropped because the conversation must open with the user.
    """
    messages: list[dict] = []
    for turn in history:
        role = "assistant" if turn["role"] == "bot" else "user"
        if not messages and role == "assistant":
            continue
        if messages and messages[-1]["role"] == role:
            messages[-1]["content"] += "\n\n" + turn["content"]
            continue
        messages.append({"role": role, "content": turn["content"]})

    if messages and messages[-1]["role"] == "user":
        messages[-1]["content"] += "\n\n" + message
    else:
        messages.append({"role": "user", "content": message})
    return messages


class ChatRelay:
    """Thin async wrapper over the Messages API with a fixed temperature."""

    def __init__(self, client: AsyncAnthropic | None = None, api_key: str | None = None):
        settings = get_settings()
        self.model = settings.CHAT_MODEL
        self.temperature = settings.CHAT_TEMPERATURE
        self.max_tokens = settings.CHAT_MAX_TOKENS

        if client is not None:
            self.client = client
        else:
            key = api_key or settings.ANTHROPIC_API_KEY
            if not key:
                logger.warning("chat_relay_disabled", reason="ANTHROPIC_API_KEY not configured")
                self.client = None
            else:
                self.client = AsyncAnthropic(api_key=key)

    def is_available(self) -> bool:
        return self.client is not None

    async def reply(
        self,
        message: str,
        history: Iterable[dict] = (),
        tiers: Iterable[AgeTier] = (),
    ) -> str:
        if not self.is_available():
            record_chat(fallback=True)
            return FALLBACK_REPLY

        start = time.perf_counter()
        try:
            response = await self.client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=build_system_instruction(tiers),
                messages=build_messages(message, history),
            )
            text = "".join(
                block.text for block in response.content if getattr(block, "type", None) == "text"
            ).strip()
            if not text:
                raise ValueError("Empty response from model")
        except Exception as e:
            logger.error("chat_relay_failed", error=str(e), error_type=type(e).__name__)
            record_chat(fallback=True)
            return FALLBACK_REPLY
        finally:
            chat_latency.observe(time.perf_counter() - start)

        record_chat(fallback=False)
        return text


_relay: ChatRelay | None = None

def get_chat_relay() -> ChatRelay:
    """Get chat relay singleton."""
    global _relay
    if _relay is None:
        _relay = ChatRelay()
    return _relay
