"""Turn a raw request body into a ConversationRequest.

The body may arrive already structured (a mapping) or as raw bytes/text that still needs
JSON decoding. Invalid JSON is coerced to an empty object, which then fails the
non-empty `messages` rule like any other empty request.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from adchat.chat.languages import resolve_language
from adchat.chat.schemas import ChatMessage, ConversationRequest
from adchat.domain.exceptions import EmptyInputError, InvalidMessageError

RawBody = Mapping[str, Any] | bytes | bytearray | str | None


def decode_body(raw: RawBody) -> dict[str, Any]:
    """Return the body as a dict; anything undecodable or non-object becomes `{}`."""

    if isinstance(raw, Mapping):
        return dict(raw)
    if not raw:
        return {}

    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = bytes(raw).decode("utf-8-sig")
        except UnicodeDecodeError:
            return {}

    try:
        decoded = json.loads(raw.lstrip("\ufeff"))
    except (ValueError, RecursionError):
        # RecursionError: pathologically nested arrays/objects within the size bound.
        return {}
    return decoded if isinstance(decoded, dict) else {}


def _parse_messages(items: list[Any]) -> list[ChatMessage]:
    try:
        return [ChatMessage.model_validate(item) for item in items]
    except ValidationError as exc:
        raise InvalidMessageError() from exc


def resolve_conversation(
    raw: RawBody, *, history_limit: int | None = None
) -> ConversationRequest:
    """
    Resolve messages and language from a request body.

    - `messages` that is missing or not a list counts as empty -> EmptyInputError.
    - `lang` is matched case-insensitively; unsupported values silently become `de`.
    - With `history_limit`, only the most recent N messages are kept.
    """

    body = decode_body(raw)

    items = body.get("messages")
    if not isinstance(items, list) or not items:
        raise EmptyInputError()

    if history_limit is not None and history_limit > 0:
        items = items[-history_limit:]

    return ConversationRequest(
        messages=_parse_messages(items),
        language=resolve_language(body.get("lang")),
    )
