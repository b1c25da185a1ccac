"""
Environment-backed configuration.

Values are read at call time so tests can override them with monkeypatch.
"""
import os
import logging
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

log = logging.getLogger("config")

DEFAULT_PORT = 3001
DEFAULT_RESPONSE_DELAY_MS = 500
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

_ENV_LOADED = False


def init_env() -> None:
    """Load backend/.env once, if present."""
    global _ENV_LOADED
    if not _ENV_LOADED:
        backend_dir = Path(__file__).resolve().parent.parent
        load_dotenv(dotenv_path=backend_dir / ".env", override=False)
        _ENV_LOADED = True


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        log.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default
    if value < 0:
        log.warning(f"Ignoring negative {name}={raw!r}, using {default}")
        return default
    return value


def host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def port() -> int:
    return _int_env("PORT", DEFAULT_PORT)


def response_delay_seconds() -> float:
    """Simulated processing time for the mock chat endpoint."""
    return _int_env("RESPONSE_DELAY_MS", DEFAULT_RESPONSE_DELAY_MS) / 1000.0


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def openai_api_key() -> Optional[str]:
    """Credential for a real completion provider. Unused by the mock handler."""
    api_key = (os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key or api_key == "your_openai_api_key_here":
        return None
    return api_key


def openai_model() -> str:
    return os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL)


def chat_api_url() -> str:
    """Base URL the chat client talks to."""
    return os.getenv("CHAT_API_URL", f"http://localhost:{port()}")
