from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response, status

from adchat.api.schemas import ErrorOut
from adchat.chat.resolver import resolve_conversation
from adchat.chat.schemas import ChatReplyOut
from adchat.chat.service import ChatService
from adchat.core.llm.deps import get_openai_client
from adchat.core.settings import get_settings
from adchat.domain.exceptions import MissingCredentialError, PayloadTooLargeError

router = APIRouter(prefix="/api", tags=["chat"])


async def _read_body(request: Request, *, limit_bytes: int) -> bytes:
    """Read the raw body chunk by chunk, stopping as soon as it exceeds `limit_bytes`."""

    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit_bytes:
        raise PayloadTooLargeError(limit_bytes)

    chunks: list[bytes] = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit_bytes:
            raise PayloadTooLargeError(limit_bytes)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post(
    "/chat",
    response_model=ChatReplyOut,
    summary="Reply to a conversation turn",
    responses={
        400: {"model": ErrorOut, "description": "Empty or invalid `messages`."},
        413: {"model": ErrorOut, "description": "Request body too large."},
        500: {"model": ErrorOut, "description": "Missing credential or upstream failure."},
    },
)
async def post_chat(
    request: Request,
    openai_client=Depends(get_openai_client),
) -> ChatReplyOut:
    """
    Forward the conversation to the LLM with the marketing system prompt and return a
    short plain-text reply.

    Body: `{"messages": [{"role": "user", "content": "..."}], "lang": "de|en|uk|ru"}`. The
    body is read and decoded here rather than by FastAPI so malformed JSON follows the
    same path as an empty request.

    A slow upstream is answered with a localized "try again" reply (HTTP 200), not an error.
    """

    if openai_client is None:
        raise MissingCredentialError()

    settings = get_settings()
    raw = await _read_body(request, limit_bytes=int(settings.chat_max_body_bytes))
    conversation = resolve_conversation(raw, history_limit=settings.chat_history_limit)

    svc = ChatService(
        llm_client=openai_client, max_message_chars=int(settings.chat_max_message_chars)
    )
    request_id = getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")
    return await svc.reply(conversation, request_id=request_id)


@router.options("/chat", include_in_schema=False)
async def options_chat() -> Response:
    # Browser preflights are answered by the CORS middleware; this covers bare OPTIONS.
    return Response(status_code=status.HTTP_200_OK)
