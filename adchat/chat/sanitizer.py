"""Deterministic post-processing of model output into a short, single-line reply.

The transformation is total (it never raises) and idempotent: cleaning an already
cleaned reply returns it unchanged.
"""

from __future__ import annotations

import re

from adchat.chat.fallbacks import FallbackKind, fallback_message
from adchat.chat.languages import Language
from adchat.chat.schemas import SanitizedReply

MAX_SENTENCES = 3

_MARKDOWN_RUN = re.compile(r"[#*_`>]+")
# One or more bullets / "1." / "1)" / "(1)" at a line start, each followed by blanks or EOL.
_LIST_MARKERS = re.compile(
    r"^\s*(?:(?:[-*+•◦▪‣]|\d+[.)]|\(\d+\))(?:[^\S\n]+|$))+",
    re.MULTILINE,
)
_WHITESPACE_RUN = re.compile(r"\s+")
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+")


def clean_text(raw: str | None, *, max_sentences: int = MAX_SENTENCES) -> str:
    """Strip markdown and list markers, flatten to one line and keep the first sentences."""

    if not raw:
        return ""

    text = _MARKDOWN_RUN.sub(" ", raw)
    text = _LIST_MARKERS.sub("", text)
    text = _WHITESPACE_RUN.sub(" ", text).strip()
    if not text:
        return ""

    sentences = _SENTENCE_BOUNDARY.split(text)
    return " ".join(sentences[:max_sentences]).strip()


def sanitize_reply(raw: str | None, language: Language | str) -> SanitizedReply:
    """Clean `raw`; fall back to the localized "describe your task" prompt when nothing is left."""

    text = clean_text(raw)
    if not text:
        text = fallback_message(language, FallbackKind.EMPTY_REPLY)
    return SanitizedReply(text=text)
