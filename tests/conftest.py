from __future__ import annotations

import pytest

from adchat.core.settings import get_settings
from tests.chat._helpers import StubLLM

_ENV_VARS = (
    "APP_ENV",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_TIMEOUT_SECONDS",
    "OPENAI_TEMPERATURE",
    "OPENAI_MAX_TOKENS",
    "CHAT_MAX_MESSAGE_CHARS",
    "CHAT_HISTORY_LIMIT",
    "CHAT_MAX_BODY_BYTES",
    "CORS_ALLOW_ORIGINS",
)


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch: pytest.MonkeyPatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    # Settings are cached via @lru_cache; clear so each test sees its own environment.
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def stub_llm() -> StubLLM:
    return StubLLM()


@pytest.fixture
def client(stub_llm: StubLLM):
    from fastapi.testclient import TestClient

    from adchat.core.llm.deps import get_openai_client
    from adchat.main import create_app

    app = create_app()
    app.dependency_overrides[get_openai_client] = lambda: stub_llm
    with TestClient(app) as c:
        yield c
