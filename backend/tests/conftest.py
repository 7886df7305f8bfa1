import pytest


@pytest.fixture(autouse=True)
def groq_env(monkeypatch):
    """Known provider environment for every test; no real key is ever used."""
    monkeypatch.setenv("GROQ_API_KEY", "test-key")
    for name in ("GROQ_BASE_URL", "GROQ_TIMEOUT_S", "GROQ_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)
