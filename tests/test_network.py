# File: tests/test_network.py
"""InflightTracker: ожидание 'тишины' сети с допуском нескольких долгих запросов."""
import asyncio
import time

import pytest
from page_auditor.errors import NavigationError
from page_auditor.network import InflightTracker

from conftest import FakePage


def make_tracker(max_inflight=2, quiet_period=0.05):
    page = FakePage()
    tracker = InflightTracker(max_inflight=max_inflight, quiet_period=quiet_period)
    tracker.attach(page)
    return page, tracker


def test_attach_subscribes_to_request_events():
    page, _ = make_tracker()
    assert set(page.handlers) == {"request", "requestfinished", "requestfailed"}


def test_inflight_counter_never_negative():
    page, tracker = make_tracker()
    page.emit("requestfinished", object())
    page.emit("requestfailed", object())
    assert tracker.inflight == 0
    page.emit("request", object())
    assert tracker.inflight == 1


@pytest.mark.asyncio
async def test_idle_without_requests():
    _, tracker = make_tracker()
    started = time.monotonic()
    await tracker.wait_for_idle(1.0)
    assert time.monotonic() - started < 0.5


@pytest.mark.asyncio
async def test_two_long_requests_are_tolerated():
    page, tracker = make_tracker(max_inflight=2)
    page.emit("request", object())
    page.emit("request", object())
    await tracker.wait_for_idle(1.0)
    assert tracker.inflight == 2


@pytest.mark.asyncio
async def test_too_many_requests_time_out():
    page, tracker = make_tracker(max_inflight=2)
    for _ in range(3):
        page.emit("request", object())
    with pytest.raises(NavigationError, match="waiting for network idle"):
        await tracker.wait_for_idle(0.2)


@pytest.mark.asyncio
async def test_idle_after_request_finishes():
    page, tracker = make_tracker(max_inflight=0, quiet_period=0.05)
    page.emit("request", object())
    asyncio.get_running_loop().call_later(0.1, page.emit, "requestfinished", object())
    started = time.monotonic()
    await tracker.wait_for_idle(2.0)
    assert time.monotonic() - started >= 0.09
    assert tracker.inflight == 0


@pytest.mark.asyncio
async def test_burst_above_threshold_restarts_quiet_window():
    page, tracker = make_tracker(max_inflight=0, quiet_period=0.1)
    loop = asyncio.get_running_loop()
    loop.call_later(0.05, page.emit, "request", object())
    loop.call_later(0.1, page.emit, "requestfinished", object())
    started = time.monotonic()
    await tracker.wait_for_idle(2.0)
    # тишина отсчитывается заново после завершения запроса на 0.1 с
    assert time.monotonic() - started >= 0.18


@pytest.mark.asyncio
async def test_zero_budget_fails_immediately():
    page, tracker = make_tracker(max_inflight=0)
    page.emit("request", object())
    with pytest.raises(NavigationError):
        await tracker.wait_for_idle(0)


@pytest.mark.asyncio
async def test_finish_and_start_in_one_batch_keeps_waiting():
    page, tracker = make_tracker(max_inflight=2, quiet_period=0.1)
    for _ in range(3):
        page.emit("request", object())

    def swap():
        page.emit("requestfinished", object())
        page.emit("request", object())

    asyncio.get_running_loop().call_later(0.02, swap)
    with pytest.raises(NavigationError, match="3 requests in flight"):
        await tracker.wait_for_idle(0.5)
