"""
Async HTTP client for the chat endpoint.
"""
import logging
from typing import Optional

import httpx
import pydantic

from app import config
from app.errors import NetworkError
from app.models.chat import ChatResponse

log = logging.getLogger("client")


class ChatClient:
    """Talks to the chat backend. One request per call, no retries."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url or config.chat_api_url()
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
        )

    async def close(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        try:
            response = await self.client.request(method, endpoint, **kwargs)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"API error: {e.response.status_code} - {_error_text(e.response)}",
                status_code=e.response.status_code,
            )
        except httpx.RequestError as e:
            raise NetworkError(f"Request error: {str(e)}")

    async def send(self, message: str) -> ChatResponse:
        response = await self._request("POST", "/api/chat", json={"message": message})
        try:
            return ChatResponse.model_validate(response.json())
        except (ValueError, pydantic.ValidationError) as e:
            raise NetworkError(f"Malformed response: {e}", status_code=response.status_code)

    async def health(self) -> bool:
        try:
            response = await self._request("GET", "/health")
        except NetworkError as e:
            log.warning(f"Health check failed: {e}")
            return False
        try:
            body = response.json()
        except ValueError as e:
            log.warning(f"Health check returned a non-JSON body: {e}")
            return False
        return isinstance(body, dict) and body.get("status") == "ok"


def _error_text(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text
