"""Errors raised by the inference layer itself (provider errors pass through)."""

EXHAUSTION_MESSAGE = (
    "All AI models failed due to rate limits, server errors, or invalid model names."
)


class ExhaustionError(RuntimeError):
    """Every model in the chain failed with a retryable status."""

    def __init__(self, attempted: list[str], message: str = EXHAUSTION_MESSAGE) -> None:
        super().__init__(message)
        self.attempted = list(attempted)


class MissingApiKeyError(RuntimeError):
    """GROQ_API_KEY is not set, so no provider client can be built."""
