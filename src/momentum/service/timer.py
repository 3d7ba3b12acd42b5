# SPDX-License-Identifier: MIT

import asyncio
import logging
from typing import Optional

from momentum.time import seconds_to_clock_str

logger = logging.getLogger(__name__)


class CountdownTimer:
    """
    Countdown with a single private tick task.

    Paused until `start()`; while running, `tick()` is called once per
    `interval` seconds by a task on the running event loop. Reaching zero
    pauses the timer. `start()` needs a running loop, the other transitions
    do not.
    """

    def __init__(self, default_seconds: int, interval: float = 1.0) -> None:
        self.default_seconds = default_seconds
        self.interval = interval
        self._remaining = default_seconds
        self._running = False
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def remaining_seconds(self) -> int:
        return self._remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def label(self) -> str:
        return seconds_to_clock_str(self._remaining)

    def start(self, seconds: Optional[int] = None) -> None:
        if seconds is not None:
            self._remaining = max(0, seconds)
        if self._remaining == 0:
            self._stop_ticking()
            return

        self._running = True
        # Re-entering the running state keeps the existing tick task
        if self._task is not None and not self._task.done():
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def pause(self) -> None:
        self._stop_ticking()

    def reset(self, seconds: Optional[int] = None) -> None:
        self._stop_ticking()
        self._remaining = max(
            0, seconds if seconds is not None else self.default_seconds
        )

    def tick(self) -> None:
        if not self._running:
            return
        self._remaining = max(0, self._remaining - 1)
        if self._remaining == 0:
            logger.debug("Countdown finished")
            self._stop_ticking()

    async def wait(self) -> None:
        """Wait until the countdown stops, by finishing or by being paused."""
        while self._task is not None:
            await asyncio.wait({self._task})

    async def _run(self) -> None:
        while self._running:
            await asyncio.sleep(self.interval)
            self.tick()

    def _stop_ticking(self) -> None:
        self._running = False
        task, self._task = self._task, None
        if task is None or task.done():
            return
        try:
            current = asyncio.current_task()
        except RuntimeError:
            current = None
        # The tick task stops itself by leaving its loop
        if task is not current:
            task.cancel()
