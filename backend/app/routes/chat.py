"""
Chat API routes: mock endpoint returning canned markdown.
"""
import logging

from fastapi import APIRouter

from app import config
from app.errors import InternalError, ValidationError
from app.models.chat import ChatRequest, ChatResponse
from app.services.canned import pick_response, simulate_latency

log = logging.getLogger("chat")

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat_endpoint(request: ChatRequest) -> ChatResponse:
    """Validate, wait the simulated latency, answer with a canned document."""
    if not request.message:
        raise ValidationError()

    try:
        document = pick_response()
        await simulate_latency(config.response_delay_seconds())
        return ChatResponse(response=document, format="markdown")
    except Exception as e:
        log.exception("Chat request failed")
        raise InternalError(details=str(e))
