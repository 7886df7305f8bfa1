"""
Inference provider configuration.

Priority chain: highest capability first, fastest/most available last.
On a retryable failure the fallback helper tries each model in order.
The chain is fixed at import time and never reordered.

Provider settings come from the environment (or backend/.env):
  GROQ_API_KEY=...
  GROQ_BASE_URL=https://api.groq.com/openai/v1
  GROQ_TIMEOUT_S=30
  GROQ_MAX_RETRIES=0
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# Priority chain: primary first, "last resort" instant model last
MODEL_CHAIN: tuple[str, ...] = (
    "openai/gpt-oss-120b",
    "openai/gpt-oss-20b",
    "llama-3.3-70b-versatile",
    "llama-3.1-8b-instant",
)

# ─── Generation parameters ────────────────────────────────────────────

TEMPERATURE = 0.8
MAX_OUTPUT_TOKENS = 4096

# ─── Provider connection ──────────────────────────────────────────────

API_KEY_ENV = "GROQ_API_KEY"
DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"


def base_url() -> str:
    return os.environ.get("GROQ_BASE_URL") or DEFAULT_BASE_URL


def request_timeout() -> Optional[float]:
    """
    Per-call SDK timeout in seconds, or None for the SDK default.
    An unparseable value is ignored rather than blocking startup.
    """
    raw = os.environ.get("GROQ_TIMEOUT_S")
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid GROQ_TIMEOUT_S=%r", raw)
        return None


def max_retries() -> int:
    # SDK-level retries stay off: a failed model hands over to the next one
    raw = os.environ.get("GROQ_MAX_RETRIES")
    if not raw:
        return 0
    try:
        return max(0, int(raw))
    except ValueError:
        logger.warning("Ignoring invalid GROQ_MAX_RETRIES=%r", raw)
        return 0
