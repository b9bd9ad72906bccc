from __future__ import annotations

from adchat.chat.languages import Language, language_directive
from adchat.chat.schemas import ChatMessage

MAX_MESSAGE_CHARS = 1200
TRUNCATION_MARKER = "…"


def build_system_prompt(language: Language | str) -> str:
    """
    Build the system instruction for one request.

    The text is rebuilt per request; only the language directive varies. The checklist is
    instruction text for the model, it is never evaluated here.
    """

    return "\n".join(
        [
            "You are a marketer with 8 years of experience in web, Google Ads, SMM and SEO.",
            language_directive(language),
            "",
            "Main rule: at most 3 short sentences; no lists or headings; either ask 2-3 "
            "clarifying questions or give a concrete plan with actions and one key metric.",
            "",
            "Check whether the user has provided:",
            "1) niche/business,",
            "2) geography,",
            "3) goal (leads/sales/awareness/repeat purchases),",
            "4) budget,",
            "5) channel (Google Ads / SMM / SEO / website).",
            "",
            "If anything is missing, do NOT give a plan; ask 2-3 short clarifying questions "
            '(e.g. "what is the budget?", "what is the goal?", "which city?", '
            '"which channel?").',
            "When everything is clear, give a plan of up to 3 sentences with concrete actions "
            "and one key metric (CPA or ROAS).",
            "",
            'If the request is generic ("I need advertising" / "потрібна реклама" / '
            '"нужна реклама" / "Ich brauche Werbung"), treat it as Google Ads and ask 2-3 '
            "clarifying questions (niche, budget, region/city, type: Search/Display/"
            "Remarketing/YouTube).",
            "",
            "Glossary (answer with the terms of the user's language):",
            "- uk: Пошук, КМС, Ремаркетинг, YouTube, CPA, ROAS.",
            "- ru: Поиск, КМС, Ремаркетинг, YouTube, CPA, ROAS.",
            "- de: Suche, Display, Remarketing, YouTube, CPA, ROAS.",
            "- en: Search, Display, Remarketing, YouTube, CPA, ROAS.",
        ]
    )


def truncate_last_message(
    messages: list[ChatMessage], *, max_chars: int = MAX_MESSAGE_CHARS
) -> list[ChatMessage]:
    """
    Cap the trailing message at `max_chars` characters plus the truncation marker.

    Returns a new list; earlier messages are passed through untouched and the role of the
    trailing message never changes.
    """

    if not messages:
        return []

    *history, last = messages
    if len(last.content) <= max_chars:
        return list(messages)

    clipped = last.model_copy(update={"content": last.content[:max_chars] + TRUNCATION_MARKER})
    return [*history, clipped]


def build_upstream_messages(
    messages: list[ChatMessage],
    *,
    language: Language | str,
    max_chars: int = MAX_MESSAGE_CHARS,
) -> list[dict[str, str]]:
    """Return the completion-service `messages` payload: system prompt first, then history."""

    system = {"role": "system", "content": build_system_prompt(language)}
    history = [m.model_dump() for m in truncate_last_message(messages, max_chars=max_chars)]
    return [system, *history]
