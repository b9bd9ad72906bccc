from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from adchat.chat.languages import DEFAULT_LANGUAGE, Language

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """One chat turn as accepted by the completion service."""

    model_config = ConfigDict(extra="ignore")

    role: ChatRole
    content: str = Field(strict=True)


class ConversationRequest(BaseModel):
    """A resolved caller request: non-empty history plus a supported language."""

    messages: list[ChatMessage] = Field(min_length=1)
    language: Language = DEFAULT_LANGUAGE


class SanitizedReply(BaseModel):
    """Single-line, list-free reply of at most three sentences."""

    text: str


class ChatReplyOut(BaseModel):
    reply: str = Field(
        description="Plain-text reply: one line, at most three sentences, no markdown or lists.",
    )
