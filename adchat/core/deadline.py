"""Run one awaitable under a hard wall-clock deadline."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable
from typing import Final, TypeVar

T = TypeVar("T")


class TimedOut:
    """Sentinel type returned when the deadline elapses first."""

    def __repr__(self) -> str:
        return "TIMED_OUT"


TIMED_OUT: Final = TimedOut()


async def run_with_deadline(awaitable: Awaitable[T], *, seconds: float) -> T | TimedOut:
    """
    Await `awaitable` for at most `seconds`.

    Returns the awaitable's result, or `TIMED_OUT` if the deadline elapsed first. On
    timeout the underlying task is cancelled and awaited before returning, so nothing keeps
    running after this call. Exceptions raised by the awaitable propagate unchanged.
    """

    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except TimeoutError:
        return TIMED_OUT
