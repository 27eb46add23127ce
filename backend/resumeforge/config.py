"""
Configuration settings for the ResumeForge backend.

Values come from the environment (a local .env file is honoured). Settings are
read on every call so tests can monkeypatch the environment freely.
"""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:9002"]


@dataclass
class Settings:
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"
    default_ai_model: str = "gpt-4o-mini"
    ai_temperature: float = 0.3
    ai_max_tokens: int = 2000
    ai_timeout: float = 60.0
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"
    session_ttl: float = 3600.0   # seconds a session may sit idle


def _origins(raw: str | None) -> List[str]:
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def get_settings() -> Settings:
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY", ""),
        openai_base_url=os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/"),
        default_ai_model=os.getenv("DEFAULT_AI_MODEL", "gpt-4o-mini"),
        ai_temperature=float(os.getenv("AI_TEMPERATURE", "0.3")),
        ai_max_tokens=int(os.getenv("AI_MAX_TOKENS", "2000")),
        ai_timeout=float(os.getenv("AI_TIMEOUT", "60")),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        session_ttl=float(os.getenv("SESSION_TTL", "3600")),
    )
