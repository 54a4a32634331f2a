"""
Pytest configuration and shared fixtures for LingoBridge tests.
"""
import os
import sys
import pytest
from unittest.mock import AsyncMock, patch

# Add python directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

TRANSLATION_ENV_VARS = [
    "TRANSLATION_BACKEND",
    "HUGGINGFACE_API_URL",
    "HUGGINGFACE_API_KEY",
    "TRANSLATION_API_URL",
    "TRANSLATION_API_KEY",
    "TRANSLATION_TIMEOUT",
    "RATE_LIMIT_MAX_REQUESTS",
    "RATE_LIMIT_WINDOW",
]


class FakeClock:
    """Manually advanced replacement for time.monotonic."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clean_env(monkeypatch):
    """Remove translation-related environment variables and stop .env loading."""
    for name in TRANSLATION_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch('lingobridge.config.load_dotenv'):
        yield monkeypatch


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def rate_window(fake_clock):
    from lingobridge.rate_limiter import RateWindow

    return RateWindow(max_requests=10, window_seconds=60.0, clock=fake_clock)


@pytest.fixture
def settings():
    from lingobridge.config import TranslatorSettings

    return TranslatorSettings(
        base_url="https://inference.test/models",
        api_token="hf_test_token",
    )


@pytest.fixture
def relay_settings():
    from lingobridge.config import TranslatorSettings

    return TranslatorSettings(
        backend="relay",
        relay_url="http://relay.test/",
        api_token="relay-token",
    )


@pytest.fixture
def mock_http():
    """Patch httpx.AsyncClient used by the translation client; yields the client instance."""
    with patch('lingobridge.translation_client.httpx.AsyncClient') as mock_client:
        instance = AsyncMock()
        mock_client.return_value.__aenter__.return_value = instance
        mock_client.return_value.__aexit__.return_value = False
        yield instance


@pytest.fixture
def make_request():
    from lingobridge.schemas import TranslationRequest

    def _make(text="Hello", source="en", target="de"):
        return TranslationRequest(text=text, sourceLanguage=source, targetLanguage=target)

    return _make
