"""
Groq inference client.

Groq exposes an OpenAI-compatible chat completions API, so the official
openai SDK is used with Groq's base URL. One call = one model attempt;
choosing which model to call is the fallback helper's job.

Edge cases handled:
  - Missing API key (raises MissingApiKeyError before any attempt)
  - Key / base URL change between requests (.env hot-reload rebuilds the client)
  - Completion with no choices or null content (returns "")
  - Errors without a status code (network failure, timeout) count as 500
"""

import logging
import os
from typing import Any, Optional

from openai import AsyncOpenAI

from inference import config
from inference.errors import MissingApiKeyError

logger = logging.getLogger(__name__)

# Status assumed when the provider error carries none
DEFAULT_ERROR_STATUS = 500


# ─── Lazy client initialization ───────────────────────────────────────

_client: Optional[AsyncOpenAI] = None
_configured: Optional[tuple] = None


def get_client() -> AsyncOpenAI:
    """
    Lazily build and cache the AsyncOpenAI client for Groq.
    Rebuilds only if the key or connection settings change.
    """
    global _client, _configured

    api_key = os.environ.get(config.API_KEY_ENV)
    if not api_key:
        raise MissingApiKeyError(f"{config.API_KEY_ENV} is not set.")

    settings = (api_key, config.base_url(), config.request_timeout(), config.max_retries())
    if settings != _configured:
        kwargs: dict[str, Any] = {
            "api_key": api_key,
            "base_url": settings[1],
            "max_retries": settings[3],
        }
        if settings[2] is not None:
            kwargs["timeout"] = settings[2]
        _client = AsyncOpenAI(**kwargs)
        _configured = settings
        logger.debug("Built inference client for %s", settings[1])

    return _client


# ─── Single attempt ───────────────────────────────────────────────────

async def complete(client, prompt: str, model: str) -> str:
    """Send one chat completion to `model` and return its text ("" if empty)."""
    response = await client.chat.completions.create(
        messages=[{"role": "user", "content": prompt}],
        model=model,
        temperature=config.TEMPERATURE,
        max_tokens=config.MAX_OUTPUT_TOKENS,
    )
    if not response.choices:
        return ""
    message = response.choices[0].message
    return (message.content if message is not None else None) or ""


def _is_status(value) -> bool:
    # a missing, zero or boolean status falls back to DEFAULT_ERROR_STATUS
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def status_code_of(exc: BaseException) -> int:
    """HTTP-style status of a provider error, DEFAULT_ERROR_STATUS if absent."""
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if _is_status(value):
            return value

    response = getattr(exc, "response", None)
    value = getattr(response, "status_code", None)
    if _is_status(value):
        return value

    return DEFAULT_ERROR_STATUS
