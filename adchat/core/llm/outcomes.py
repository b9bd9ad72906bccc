from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Success:
    raw_text: str


@dataclass(frozen=True)
class TimeoutFailure:
    pass


@dataclass(frozen=True)
class TransportFailure:
    detail: str


@dataclass(frozen=True)
class UpstreamError:
    status_code: int
    detail: Any


UpstreamOutcome = Success | TimeoutFailure | TransportFailure | UpstreamError
