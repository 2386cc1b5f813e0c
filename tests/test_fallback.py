from __future__ import annotations

import asyncio

from albumlink.core.fallback import first_success, settle_all


def test_first_success_stops_at_first_result() -> None:
    calls: list[str] = []

    def make(name: str, result):
        async def attempt():
            calls.append(name)
            return result

        return attempt

    out = asyncio.run(first_success([("a", make("a", None)), ("b", make("b", "hit")), ("c", make("c", "late"))]))
    assert out == "hit"
    assert calls == ["a", "b"]


def test_first_success_skips_failures() -> None:
    async def boom():
        raise RuntimeError("down")

    async def ok():
        return "fine"

    assert asyncio.run(first_success([("boom", boom), ("ok", ok)])) == "fine"


def test_first_success_all_empty_returns_none() -> None:
    async def empty():
        return None

    async def blank():
        return ""

    assert asyncio.run(first_success([("empty", empty), ("blank", blank)])) is None


def test_settle_all_maps_failures_in_order() -> None:
    async def value(n: int) -> int:
        await asyncio.sleep(0.01 * (3 - n))
        if n == 1:
            raise ValueError("bad")
        return n

    out = asyncio.run(settle_all([value(0), value(1), value(2)], lambda index, exc: -index))
    assert out == [0, -1, 2]


def test_settle_all_waits_for_slow_tasks_after_failure() -> None:
    finished: list[str] = []

    async def fail():
        raise RuntimeError("fast failure")

    async def slow():
        await asyncio.sleep(0.05)
        finished.append("slow")
        return "slow"

    out = asyncio.run(settle_all([fail(), slow()], lambda index, exc: None))
    assert out == [None, "slow"]
    assert finished == ["slow"]
