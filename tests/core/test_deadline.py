from __future__ import annotations

import asyncio

import pytest

from adchat.core.deadline import TIMED_OUT, run_with_deadline


def test_returns_result_when_work_finishes_first() -> None:
    async def work() -> int:
        await asyncio.sleep(0)
        return 42

    assert asyncio.run(run_with_deadline(work(), seconds=1.0)) == 42


def test_returns_sentinel_and_cancels_work_on_deadline() -> None:
    state: dict[str, bool] = {}

    async def slow() -> int:
        try:
            await asyncio.sleep(10)
        except asyncio.CancelledError:
            state["cancelled"] = True
            raise
        return 1

    result = asyncio.run(run_with_deadline(slow(), seconds=0.01))

    assert result is TIMED_OUT
    assert state == {"cancelled": True}


def test_exceptions_from_work_propagate() -> None:
    async def broken() -> None:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        asyncio.run(run_with_deadline(broken(), seconds=1.0))
