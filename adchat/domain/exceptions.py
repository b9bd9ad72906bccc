from __future__ import annotations

from typing import Any


class ChatInputError(Exception):
    """Raised when the caller's chat request is unusable (user-correctable, HTTP 400)."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(ChatInputError):
    def __init__(self) -> None:
        super().__init__("messages must be an array and not empty")


class InvalidMessageError(ChatInputError):
    def __init__(self) -> None:
        super().__init__(
            "each message must be an object with role system|user|assistant and string content"
        )


class PayloadTooLargeError(Exception):
    """Raised when the raw request body exceeds the configured size bound."""

    def __init__(self, limit_bytes: int):
        super().__init__(f"request body exceeds {limit_bytes} bytes")
        self.limit_bytes = limit_bytes


class MissingCredentialError(Exception):
    """Raised when the completion-service API key is not configured (operator error)."""


class UpstreamFailureError(Exception):
    """Raised when the completion service fails with anything other than a timeout."""

    def __init__(self, detail: Any, *, status_code: int | None = None):
        super().__init__("completion service failed")
        self.detail = detail
        self.status_code = status_code
