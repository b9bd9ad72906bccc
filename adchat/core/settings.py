from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "adchat"
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )

    # LLM integration (OpenAI)
    # The key is optional at load time; a missing key is reported per request.
    openai_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "openai_api_key"),
        description="OpenAI API key (required for /api/chat).",
    )
    openai_model: str = Field(
        default="gpt-4o-mini",
        validation_alias=AliasChoices("OPENAI_MODEL", "openai_model"),
        description="OpenAI model identifier used for chat replies.",
    )
    openai_base_url: str = Field(
        default="https://api.openai.com/v1",
        validation_alias=AliasChoices("OPENAI_BASE_URL", "openai_base_url"),
        description="Base URL for OpenAI API (override for proxies/emulators).",
    )
    openai_timeout_seconds: float = Field(
        default=12.0,
        gt=0,
        validation_alias=AliasChoices("OPENAI_TIMEOUT_SECONDS", "openai_timeout_seconds"),
        description="Hard wall-clock deadline for one completion call (seconds).",
    )
    openai_temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
        validation_alias=AliasChoices("OPENAI_TEMPERATURE", "openai_temperature"),
        description="Sampling temperature; kept low for a businesslike tone.",
    )
    openai_max_tokens: int = Field(
        default=180,
        ge=1,
        le=1024,
        validation_alias=AliasChoices("OPENAI_MAX_TOKENS", "openai_max_tokens"),
        description="Output-token ceiling for one reply.",
    )

    # Chat input bounds
    chat_max_message_chars: int = Field(
        default=1200,
        ge=1,
        validation_alias=AliasChoices("CHAT_MAX_MESSAGE_CHARS", "chat_max_message_chars"),
        description="Trailing message content longer than this is truncated.",
    )
    chat_history_limit: int | None = Field(
        default=None,
        ge=1,
        validation_alias=AliasChoices("CHAT_HISTORY_LIMIT", "chat_history_limit"),
        description="If set, only the most recent N messages are sent upstream.",
    )
    chat_max_body_bytes: int = Field(
        default=64 * 1024,
        ge=1024,
        validation_alias=AliasChoices("CHAT_MAX_BODY_BYTES", "chat_max_body_bytes"),
        description="Maximum accepted request body size (bytes).",
    )

    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS", "cors_allow_origins"),
        description="Origins allowed to call the API from a browser ('*' allows any).",
    )

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
