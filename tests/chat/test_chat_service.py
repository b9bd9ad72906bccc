from __future__ import annotations

import asyncio

import pytest

from adchat.chat.languages import Language
from adchat.chat.schemas import ChatMessage, ConversationRequest
from adchat.chat.service import ChatService
from adchat.core.llm.outcomes import Success, TimeoutFailure, UpstreamError
from adchat.domain.exceptions import UpstreamFailureError
from tests.chat._helpers import StubLLM


def _conversation(
    language: Language = Language.EN, content: str = "Need ads"
) -> ConversationRequest:
    return ConversationRequest(
        messages=[ChatMessage(role="user", content=content)], language=language
    )


def test_reply_sanitizes_model_output() -> None:
    llm = StubLLM(Success(raw_text="# Budget?\n\n1. Which city?"))

    out = asyncio.run(ChatService(llm_client=llm).reply(_conversation()))

    assert out.reply == "Budget? Which city?"
    assert len(llm.calls) == 1


def test_reply_uses_configured_truncation_limit() -> None:
    llm = StubLLM()

    svc = ChatService(llm_client=llm, max_message_chars=10)
    asyncio.run(svc.reply(_conversation(content="a" * 50)))

    assert llm.calls[0][-1]["content"] == "a" * 10 + "…"


def test_timeout_becomes_localized_reply() -> None:
    llm = StubLLM(TimeoutFailure())

    out = asyncio.run(ChatService(llm_client=llm).reply(_conversation(Language.RU)))

    assert out.reply == "Попробуйте еще раз — сервер отвечал слишком долго."


def test_upstream_error_is_raised_with_detail() -> None:
    llm = StubLLM(UpstreamError(status_code=500, detail={"error": "boom"}))

    with pytest.raises(UpstreamFailureError) as exc_info:
        asyncio.run(ChatService(llm_client=llm).reply(_conversation()))

    assert exc_info.value.detail == {"error": "boom"}
    assert exc_info.value.status_code == 500
