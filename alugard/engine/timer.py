"""Tick driver: emits TICK actions into a store while a puzzle is active.

The reducer holds no timers; this driver is the external clock. It runs on
the caller's asyncio loop and stops as soon as the phase leaves the active
set (e.g. on win or reset).
"""

from __future__ import annotations

import asyncio
import logging

from alugard.config import settings
from alugard.engine.models import ACTIVE_PHASES, GameState, Tick
from alugard.engine.protocol import Dispatcher, Sleep

logger = logging.getLogger(__name__)


class GameTimer:
    def __init__(
        self,
        store: Dispatcher,
        interval: float | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._store = store
        self._interval = interval if interval is not None else settings.tick_interval_seconds
        self._sleep = sleep
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def sync(self, state: GameState | None = None) -> None:
        """Start or stop ticking to match the phase of *state* (or the store's).

        Suitable as a store subscriber. Starting needs a running event loop.
        """
        phase = (state if state is not None else self._store.state).phase
        if phase in ACTIVE_PHASES:
            if not self.running:
                self._task = asyncio.get_running_loop().create_task(self._run())
                logger.debug(f"Timer started (interval {self._interval}s)")
        else:
            self.stop()

    def stop(self) -> None:
        if self._task is not None:
            if not self._task.done():
                self._task.cancel()
                logger.debug("Timer stopped")
            self._task = None

    async def _run(self) -> None:
        try:
            while self._store.state.phase in ACTIVE_PHASES:
                await self._sleep(self._interval)
                if self._store.state.phase not in ACTIVE_PHASES:
                    break
                self._store.dispatch(Tick())
        except asyncio.CancelledError:
            return
