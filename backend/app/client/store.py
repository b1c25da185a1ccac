"""
Client-side conversation state.

The store owns an append-only list of messages and the awaiting-response
flag. Submitting text appends the user's message, sends one chat request, and
appends the bot's reply when it arrives.
"""
import logging
import time
import uuid
from typing import List, Optional, Tuple

from app.client.api import ChatClient
from app.errors import NetworkError
from app.models.chat import Message, MessageFormat

log = logging.getLogger("client")


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def new_message(content: str, *, is_user: bool, fmt: MessageFormat) -> Message:
    timestamp = _now_ms()
    return Message(
        id=f"{timestamp}-{uuid.uuid4().hex[:8]}",
        content=content,
        is_user=is_user,
        timestamp=timestamp,
        format=fmt,
    )


class MessageStore:
    def __init__(self, client: ChatClient):
        self.client = client
        self._messages: List[Message] = []
        self._awaiting_response = False
        self.last_error: Optional[NetworkError] = None

    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def awaiting_response(self) -> bool:
        return self._awaiting_response

    def export(self) -> List[dict]:
        """Conversation as JSON-ready dicts with camelCase keys."""
        return [m.model_dump(mode="json", by_alias=True) for m in self._messages]

    async def submit(self, text: str) -> None:
        """Send `text` and record both sides of the exchange.

        Blank input is ignored. A failed request clears the loading flag and
        is kept in `last_error`; nothing is added to the conversation.
        """
        if not text.strip():
            return

        self._messages.append(new_message(text, is_user=True, fmt=MessageFormat.TEXT))
        self._awaiting_response = True
        try:
            reply = await self.client.send(text)
            self._messages.append(
                new_message(reply.response, is_user=False, fmt=MessageFormat(reply.format))
            )
            self.last_error = None
        except NetworkError as e:
            log.warning(f"Chat request failed: {e}")
            self.last_error = e
        finally:
            self._awaiting_response = False
