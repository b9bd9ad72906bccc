from __future__ import annotations

import pytest

from adchat.core.llm.deps import get_openai_client
from adchat.core.settings import Settings, get_settings


def test_defaults() -> None:
    settings = get_settings()

    assert settings.openai_model == "gpt-4o-mini"
    assert settings.openai_base_url == "https://api.openai.com/v1"
    assert settings.openai_timeout_seconds == 12.0
    assert settings.openai_temperature == 0.2
    assert settings.openai_max_tokens == 180
    assert settings.chat_max_message_chars == 1200
    assert settings.chat_history_limit is None
    assert settings.cors_allow_origins == ["*"]
    assert settings.is_development is False


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("CHAT_HISTORY_LIMIT", "6")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", '["https://shop.example"]')
    monkeypatch.setenv("APP_ENV", "Development")

    settings = Settings()

    assert settings.openai_timeout_seconds == 5.0
    assert settings.chat_history_limit == 6
    assert settings.cors_allow_origins == ["https://shop.example"]
    assert settings.is_development is True


def test_client_dependency_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_openai_client() is not None

    monkeypatch.delenv("OPENAI_API_KEY")
    get_settings.cache_clear()

    assert get_openai_client() is None
