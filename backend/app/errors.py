"""
Error taxonomy shared by the chat endpoint and the chat client.
"""
from typing import Optional


class ChatError(Exception):
    """Base class for chat errors."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ChatError):
    """Bad or missing request field (user-correctable)."""

    status_code = 400

    def __init__(self, message: str = "Message is required"):
        super().__init__(message)


class InternalError(ChatError):
    """Unexpected server fault. `details` is meant for operators."""

    status_code = 500

    def __init__(self, details: str, message: str = "Internal server error"):
        super().__init__(message)
        self.details = details


class NetworkError(ChatError):
    """Client-side failure talking to the chat endpoint."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
