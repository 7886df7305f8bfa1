"""
Model fallback helper.

generate_with_fallback() tries each model in MODEL_CHAIN in order, one at a
time. Retryable failures (400, 404, 429, 5xx) log a warning and move to the
next model. Anything else (notably 401) propagates unchanged, so a bad key
is never reported as exhaustion. ExhaustionError is raised only after every
model has been tried.
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from inference.client import complete, get_client, status_code_of
from inference.config import MODEL_CHAIN
from inference.errors import ExhaustionError

logger = logging.getLogger(__name__)

# 429: rate limit
# 404: model not found (typo'd or deprecated id)
# 400: bad request (often the context window of this particular model)
RETRYABLE_STATUSES = frozenset({400, 404, 429})


def is_retryable(status: int) -> bool:
    return status in RETRYABLE_STATUSES or 500 <= status <= 599


@dataclass(frozen=True)
class FallbackResult:
    text: str
    used_model: str
    attempts: tuple[str, ...]


async def generate_with_fallback(
    prompt: str,
    *,
    client=None,
    models: Sequence[str] = MODEL_CHAIN,
) -> FallbackResult:
    """
    Try each model in `models` in priority order until one succeeds.

    Args:
        prompt: user prompt, sent as a single user message
        client: AsyncOpenAI-compatible client; built from the environment if None
        models: ordered candidate model ids

    Returns:
        FallbackResult for the first model that answered.

    Raises:
        ExhaustionError: every model failed with a retryable status
        Exception: the provider's own error, unchanged, on a fatal status
    """
    if client is None:
        client = get_client()

    total = len(models)
    attempted: list[str] = []

    for index, model in enumerate(models):
        attempted.append(model)
        logger.info(f"[Attempt {index + 1}/{total}] Using model: {model}")

        try:
            text = await complete(client, prompt, model)
        except Exception as e:
            status = status_code_of(e)
            logger.warning(
                f"[Fail] Model {model!r} failed. Status: {status}. Message: {e}"
            )
            if not is_retryable(status):
                raise
            if index + 1 < total:
                logger.info(">>> Switching to next model...")
            continue

        return FallbackResult(text=text, used_model=model, attempts=tuple(attempted))

    logger.error("All models in fallback chain exhausted: %s", attempted)
    raise ExhaustionError(attempted)
