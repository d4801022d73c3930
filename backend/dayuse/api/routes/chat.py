"""
Chat relay endpoints for the EVA concierge widget.
"""

from fastapi import APIRouter, Depends

from dayuse.schemas.chat import ChatRequest, ChatResponse
from dayuse.services.chat_service import GREETING, ChatRelay, get_chat_relay
from dayuse.services.store import CapacityStore, get_store

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.get("/greeting", response_model=ChatResponse)
async def greeting():
    return ChatResponse(reply=GREETING)


@router.post("/", response_model=ChatResponse)
async def chat(
    request: ChatRequest,
    relay: ChatRelay = Depends(get_chat_relay),
    store: CapacityStore = Depends(get_store),
):
    """
    Forward the message to the assistant.
    Always 200: remote failures come back as the fallback reply.
    """
    reply = await relay.reply(
        request.message,
        history=[m.model_dump() for m in request.history],
        tiers=store.age_tiers,
    )
    return ChatResponse(reply=reply)
