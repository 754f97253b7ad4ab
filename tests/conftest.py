from unittest.mock import AsyncMock, MagicMock

import pytest

from app.config import Settings
from tests.helpers import IMAGE_BYTES, FakeResponse, generation_payload, make_settings


_CONFIG_ENV_VARS = (
    "IMAGE_API_PROVIDER",
    "OPENAI_API_KEY",
    "OPENROUTER_API_KEY",
    "OPENROUTER_MODEL",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "MANUAL_TRIGGER_PASSWORD",
    "ENVIRONMENT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def session():
    """Session mock that records calls in order and routes them by URL."""
    mock = MagicMock()
    mock.calls = []
    mock.responses = {
        "generate": FakeResponse(payload=generation_payload()),
        "download": FakeResponse(content=IMAGE_BYTES),
        "telegram": FakeResponse(payload={"ok": True}),
    }

    async def post(url, **kwargs):
        kind = "telegram" if "sendPhoto" in url else "generate"
        mock.calls.append((kind, url, kwargs))
        return mock.responses[kind]

    async def get(url, **kwargs):
        mock.calls.append(("download", url, kwargs))
        return mock.responses["download"]

    mock.post = AsyncMock(side_effect=post)
    mock.get = AsyncMock(side_effect=get)
    return mock
