from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from resume_analysis.core.config import settings

logger = logging.getLogger(__name__)


class JdAnalysisError(RuntimeError):
    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.details = details


def _messages_url() -> str:
    return f"{settings.llm_base_url}/v1/messages"


def _headers(api_key: str) -> dict[str, str]:
    return {
        "content-type": "application/json",
        "x-api-key": api_key,
        "anthropic-version": settings.llm_api_version,
    }


def _http_client() -> httpx.AsyncClient:
    # The wall-clock deadline is enforced by asyncio.wait_for in complete_text.
    return httpx.AsyncClient(timeout=None)


def _first_text_block(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    blocks = payload.get("content")
    if not isinstance(blocks, list):
        return None
    for block in blocks:
        if isinstance(block, dict) and block.get("type") == "text":
            text = block.get("text")
            return text if isinstance(text, str) and text else None
    return None


async def _post_messages(body: dict[str, Any], api_key: str) -> str:
    async with _http_client() as client:
        response = await client.post(_messages_url(), headers=_headers(api_key), json=body)

    if response.is_error:
        logger.warning("jd_llm_http_error status=%s", response.status_code)
        raise JdAnalysisError(
            f"LLM API error: {response.status_code} {response.reason_phrase}",
            response.text or "Unknown error",
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise JdAnalysisError("LLM returned no text content", response.text) from exc

    text = _first_text_block(payload)
    if text is None:
        raise JdAnalysisError("LLM returned no text content")
    return text


async def complete_text(*, system_prompt: str, user_message: str, api_key: str) -> str:
    """Send one Messages API request and return the first text block.

    The request is cancelled once ``settings.llm_timeout_s`` elapses; the
    cancellation closes the client and its connection before the error
    surfaces.
    """
    body = {
        "model": settings.llm_model,
        "max_tokens": settings.llm_max_tokens,
        "system": system_prompt,
        "messages": [{"role": "user", "content": user_message}],
    }
    try:
        return await asyncio.wait_for(_post_messages(body, api_key), timeout=settings.llm_timeout_s)
    except asyncio.TimeoutError as exc:
        logger.warning("jd_llm_timeout timeout_s=%s", settings.llm_timeout_s)
        raise JdAnalysisError("LLM request timed out") from exc
    except httpx.HTTPError as exc:
        logger.warning("jd_llm_request_failed model=%s: %s", settings.llm_model, exc)
        raise JdAnalysisError("LLM request failed", str(exc)) from exc
