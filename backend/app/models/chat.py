"""
Chat-related Pydantic models
"""
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageFormat(str, Enum):
    TEXT = "text"
    MARKDOWN = "markdown"


class ChatRequest(BaseModel):
    """Request model for chat endpoint"""
    message: Optional[str] = None


class ChatResponse(BaseModel):
    """Response model for chat endpoint"""
    response: str
    format: Literal["markdown"] = "markdown"


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class Message(BaseModel):
    """One entry of a conversation. Immutable once created."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    content: str
    is_user: bool = Field(alias="isUser")
    timestamp: int  # epoch millis
    format: MessageFormat = MessageFormat.TEXT
