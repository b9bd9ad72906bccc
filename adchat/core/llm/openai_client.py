from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx

from adchat.core.deadline import TIMED_OUT, run_with_deadline
from adchat.core.llm.outcomes import (
    Success,
    TimeoutFailure,
    TransportFailure,
    UpstreamError,
    UpstreamOutcome,
)


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float
    temperature: float = 0.2
    max_tokens: int = 180


class OpenAIClient:
    """
    Minimal OpenAI chat-completions client.

    Design notes:
    - No logging in this module (messages and replies stay out of logs).
    - One attempt per call, bounded by a hard wall-clock deadline.
    - Failures are returned as outcome values, never raised, so the caller decides
      which of them the end user gets to see.
    """

    def __init__(
        self,
        *,
        config: OpenAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    def _build_payload(self, messages: Sequence[dict[str, str]]) -> dict[str, Any]:
        return {
            "model": self._config.model,
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "messages": list(messages),
        }

    async def complete_chat(self, *, messages: Sequence[dict[str, str]]) -> UpstreamOutcome:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload = self._build_payload(messages)

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await run_with_deadline(
                    client.post(url, headers=headers, json=payload),
                    seconds=self._config.timeout_seconds,
                )
        except httpx.TimeoutException:
            return TimeoutFailure()
        except httpx.HTTPError as exc:
            return TransportFailure(detail=type(exc).__name__)

        if resp is TIMED_OUT:
            return TimeoutFailure()

        try:
            data = resp.json()
        except ValueError:
            return UpstreamError(status_code=resp.status_code, detail=resp.text)

        if resp.status_code != 200:
            return UpstreamError(status_code=resp.status_code, detail=data)

        return Success(raw_text=_extract_content(data))


def _extract_content(data: Any) -> str:
    """Return choices[0].message.content, or "" when any part of the path is missing."""

    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""
