"""
Completion provider backed by a real model.

The mock chat endpoint never calls this; it is the seam where real inference
would plug in.
"""
import logging
from typing import Optional, Protocol

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from app import config

log = logging.getLogger("provider")


class CompletionProvider(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class OpenAIProvider:
    """CompletionProvider over an OpenAI chat model."""

    def __init__(self, api_key: str, model: Optional[str] = None):
        if not api_key:
            raise ValueError("OPENAI_API_KEY is required")
        self.llm = ChatOpenAI(
            model=model or config.openai_model(),
            temperature=0.7,
            api_key=api_key,
        )

    async def generate(self, prompt: str) -> str:
        result = await self.llm.ainvoke([HumanMessage(content=prompt)])
        content = result.content
        if isinstance(content, list):
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        return content


# Global provider instance (lazy initialization)
_provider_instance: Optional[OpenAIProvider] = None


def get_provider() -> Optional[OpenAIProvider]:
    """Return the configured provider, or None when no credential is set."""
    global _provider_instance
    if _provider_instance is None:
        api_key = config.openai_api_key()
        if api_key is None:
            log.info("OPENAI_API_KEY not configured; completion provider disabled")
            return None
        _provider_instance = OpenAIProvider(api_key)
    return _provider_instance


def reset_provider() -> None:
    global _provider_instance
    _provider_instance = None
