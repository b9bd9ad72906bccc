from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthOut(BaseModel):
    """Health check response."""

    status: str = Field(
        description="Service status indicator. `ok` means the API process is up and responding.",
        examples=["ok"],
    )


class ErrorOut(BaseModel):
    """Error body returned on every failure path."""

    error: str = Field(examples=["messages must be an array and not empty"])
    detail: Any | None = Field(
        default=None,
        description="Diagnostic detail (only for completion-service failures).",
    )
