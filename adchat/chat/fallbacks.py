"""Localized replies used when the model gives nothing usable or is too slow.

These are returned with HTTP 200: they are ordinary conversational turns, not API errors.
"""

from __future__ import annotations

from enum import Enum

from adchat.chat.languages import Language


class FallbackKind(str, Enum):
    TIMEOUT = "timeout"
    EMPTY_REPLY = "empty_reply"


FALLBACK_MESSAGES: dict[FallbackKind, dict[Language, str]] = {
    FallbackKind.TIMEOUT: {
        Language.UK: "Спробуйте ще раз — сервер відповідав надто довго.",
        Language.RU: "Попробуйте еще раз — сервер отвечал слишком долго.",
        Language.DE: "Versuchen Sie es erneut — der Server hat zu lange geantwortet.",
        Language.EN: "Try again — the server took too long to respond.",
    },
    FallbackKind.EMPTY_REPLY: {
        Language.UK: "Опишіть, будь ласка, задачу: Web / Google Ads / SMM / SEO.",
        Language.RU: "Опишите, пожалуйста, задачу: Web / Google Ads / SMM / SEO.",
        Language.DE: "Beschreiben Sie bitte kurz die Aufgabe: Web / Google Ads / SMM / SEO.",
        Language.EN: "Please describe your task: Web / Google Ads / SMM / SEO.",
    },
}

FALLBACK_LANGUAGE = Language.EN


def fallback_message(language: Language | str, kind: FallbackKind) -> str:
    """Return the fallback text for `kind`; unknown language codes get English."""

    try:
        lang = Language(language)
    except ValueError:
        lang = FALLBACK_LANGUAGE
    return FALLBACK_MESSAGES[kind][lang]
