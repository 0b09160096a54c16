"""Tests for the asyncio tick driver."""

from __future__ import annotations

import asyncio

import pytest

from alugard.engine.models import Reset, Win
from alugard.puzzle.store import GameStore
from alugard.engine.timer import GameTimer


async def _drain(rounds: int = 20) -> None:
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.mark.asyncio
async def test_ticks_until_won(store_2x2):
    delays: list[float] = []

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)
        if len(delays) == 4:
            store_2x2.dispatch(Win())
        await asyncio.sleep(0)

    timer = GameTimer(store_2x2, interval=1.0, sleep=fake_sleep)
    store_2x2.subscribe(timer.sync)
    timer.sync()
    assert timer.running

    await _drain()

    assert store_2x2.state.elapsed_seconds == 3
    assert delays == [1.0, 1.0, 1.0, 1.0]
    assert not timer.running


@pytest.mark.asyncio
async def test_not_started_when_idle():
    timer = GameTimer(GameStore(), sleep=lambda _delay: asyncio.sleep(0))
    timer.sync()
    assert not timer.running


@pytest.mark.asyncio
async def test_reset_stops_timer(store_2x2):
    timer = GameTimer(store_2x2, interval=1.0, sleep=lambda _delay: asyncio.sleep(0))
    store_2x2.subscribe(timer.sync)
    timer.sync()
    await _drain(5)
    assert store_2x2.state.elapsed_seconds > 0

    store_2x2.dispatch(Reset())
    assert not timer.running
    await _drain(5)
    assert store_2x2.state.elapsed_seconds == 0


@pytest.mark.asyncio
async def test_stop_cancels(store_2x2):
    async def slow_sleep(delay: float) -> None:
        await asyncio.sleep(3600)

    timer = GameTimer(store_2x2, sleep=slow_sleep)
    timer.sync()
    await _drain(2)
    timer.stop()
    await _drain(2)
    assert not timer.running
    assert store_2x2.state.elapsed_seconds == 0


@pytest.mark.asyncio
async def test_sync_is_idempotent(store_2x2):
    async def slow_sleep(delay: float) -> None:
        await asyncio.sleep(3600)

    timer = GameTimer(store_2x2, sleep=slow_sleep)
    timer.sync()
    first = timer._task
    timer.sync()
    assert timer._task is first
    timer.stop()
