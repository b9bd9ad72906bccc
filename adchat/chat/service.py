from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from adchat.chat.fallbacks import FallbackKind, fallback_message
from adchat.chat.prompt import MAX_MESSAGE_CHARS, build_upstream_messages
from adchat.chat.sanitizer import sanitize_reply
from adchat.chat.schemas import ChatReplyOut, ConversationRequest
from adchat.core.llm.outcomes import (
    Success,
    TimeoutFailure,
    TransportFailure,
    UpstreamError,
    UpstreamOutcome,
)
from adchat.core.metrics import chat_upstream_outcomes_total
from adchat.domain.exceptions import UpstreamFailureError

logger = logging.getLogger("adchat.chat")


class ChatCompletionClient(Protocol):
    async def complete_chat(self, *, messages: Sequence[dict[str, str]]) -> UpstreamOutcome: ...


class ChatService:
    def __init__(
        self,
        *,
        llm_client: ChatCompletionClient,
        max_message_chars: int = MAX_MESSAGE_CHARS,
    ):
        self._llm = llm_client
        self._max_message_chars = max_message_chars

    async def reply(
        self, conversation: ConversationRequest, *, request_id: str | None = None
    ) -> ChatReplyOut:
        """
        Produce one reply for `conversation`.

        A timeout or an empty model answer becomes a localized reply; any other upstream
        failure raises UpstreamFailureError. One upstream call, no retries.
        """

        lang = conversation.language
        messages = build_upstream_messages(
            conversation.messages, language=lang, max_chars=self._max_message_chars
        )
        outcome = await self._llm.complete_chat(messages=messages)

        if isinstance(outcome, Success):
            reply = sanitize_reply(outcome.raw_text, lang)
            empty = reply.text == fallback_message(lang, FallbackKind.EMPTY_REPLY)
            self._record("empty" if empty else "success", conversation, request_id)
            return ChatReplyOut(reply=reply.text)

        if isinstance(outcome, TimeoutFailure):
            self._record("timeout", conversation, request_id)
            return ChatReplyOut(reply=fallback_message(lang, FallbackKind.TIMEOUT))

        if isinstance(outcome, UpstreamError):
            self._record("upstream_error", conversation, request_id)
            raise UpstreamFailureError(outcome.detail, status_code=outcome.status_code)

        if isinstance(outcome, TransportFailure):
            self._record("transport_error", conversation, request_id)
            raise UpstreamFailureError({"transport": outcome.detail})

        raise TypeError(f"unexpected upstream outcome: {outcome!r}")

    @staticmethod
    def _record(outcome: str, conversation: ConversationRequest, request_id: str | None) -> None:
        chat_upstream_outcomes_total.labels(outcome=outcome).inc()
        # Metadata only: message contents and replies are never logged.
        logger.info(
            "Chat reply finished",
            extra={
                "request_id": request_id,
                "lang": conversation.language.value,
                "outcome": outcome,
                "message_count": len(conversation.messages),
            },
        )
