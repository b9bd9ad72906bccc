from __future__ import annotations

from adchat.core.llm.openai_client import OpenAIClient, OpenAIConfig
from adchat.core.settings import get_settings


def get_openai_client() -> OpenAIClient | None:
    """
    Dependency provider for OpenAIClient.

    Returns None when the API key is not configured so the route can report a missing
    credential without raising during dependency resolution.
    """

    settings = get_settings()
    if not settings.openai_api_key:
        return None

    config = OpenAIConfig(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        model=settings.openai_model,
        timeout_seconds=float(settings.openai_timeout_seconds),
        temperature=float(settings.openai_temperature),
        max_tokens=int(settings.openai_max_tokens),
    )
    return OpenAIClient(config=config)
