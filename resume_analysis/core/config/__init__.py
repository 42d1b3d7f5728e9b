from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    llm_api_key: str | None
    llm_model: str
    llm_base_url: str
    llm_api_version: str
    llm_timeout_s: float
    llm_max_tokens: int
    log_level: str
    sentry_dsn: str | None
    rate_limit: str
    rate_limit_enabled: bool
    cors_allowed_origins: tuple[str, ...]


settings = Settings(
    llm_api_key=_get_env("RESUME_LLM_API_KEY"),
    llm_model=_get_env("RESUME_LLM_MODEL", "claude-haiku-4-5-20251001") or "claude-haiku-4-5-20251001",
    llm_base_url=(_get_env("RESUME_LLM_BASE_URL", "https://api.anthropic.com") or "https://api.anthropic.com").rstrip("/"),
    llm_api_version=_get_env("RESUME_LLM_API_VERSION", "2023-06-01") or "2023-06-01",
    llm_timeout_s=_get_env_float("RESUME_LLM_TIMEOUT_S", 15.0),
    llm_max_tokens=_get_env_int("RESUME_LLM_MAX_TOKENS", 1024),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ],
    ),
)

if settings.llm_timeout_s <= 0:
    raise RuntimeError("RESUME_LLM_TIMEOUT_S must be a positive number of seconds.")

__all__ = ["Settings", "settings"]
