from __future__ import annotations

from enum import Enum
from typing import Any


class Language(str, Enum):
    DE = "de"
    EN = "en"
    UK = "uk"
    RU = "ru"


DEFAULT_LANGUAGE = Language.DE

# Every Language member must have an entry (enforced in tests).
LANGUAGE_DIRECTIVES: dict[Language, str] = {
    Language.DE: "Antworte streng auf DEUTSCH.",
    Language.EN: "Answer strictly in ENGLISH.",
    Language.UK: "Відповідай строго УКРАЇНСЬКОЮ.",
    Language.RU: "Отвечай строго на РУССКОМ.",
}


def resolve_language(value: Any) -> Language:
    """Map a caller-supplied `lang` value to a supported language, defaulting to German."""

    if not isinstance(value, str):
        return DEFAULT_LANGUAGE
    try:
        return Language(value.strip().lower())
    except ValueError:
        return DEFAULT_LANGUAGE


def language_directive(language: Language | str) -> str:
    """Return the "answer strictly in X" instruction; unknown codes get the German one."""

    try:
        return LANGUAGE_DIRECTIVES[Language(language)]
    except ValueError:
        return LANGUAGE_DIRECTIVES[DEFAULT_LANGUAGE]
