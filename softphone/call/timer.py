"""
Recurring duration timer driven by the asyncio event loop.
"""

import asyncio
from typing import Callable, Optional

from softphone.config import settings
from softphone.utils.logging import LoggerMixin


class DurationTimer(LoggerMixin):
    """
    Calls ``on_tick`` once per interval while running.

    Stopping cancels the underlying task, so a tick that was already due
    never fires after ``stop()``. Starting again begins a fresh cadence.
    """

    def __init__(self, on_tick: Callable[[], None], interval: Optional[float] = None):
        self.on_tick = on_tick
        self.interval = interval if interval is not None else settings.call_tick_interval_seconds
        self._task: Optional[asyncio.Task] = None
        self._cancelled: set[asyncio.Task] = set()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pending_cancellations(self) -> int:
        """Cancelled tasks that have not finished unwinding yet."""
        return len(self._cancelled)

    def start(self) -> bool:
        """
        Start ticking on the running event loop.

        Returns:
            True if the timer is running after the call, False if no event
            loop is available
        """
        if self.is_running:
            return True

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self.logger.debug("duration_timer_no_event_loop")
            return False

        self._task = loop.create_task(self._run())
        self.logger.debug("duration_timer_started", interval=self.interval)
        return True

    def stop(self):
        """Cancel the timer task."""
        if self._task is None:
            return

        self._task.cancel()
        self._cancelled.add(self._task)
        self._task.add_done_callback(self._cancelled.discard)
        self._task = None
        self.logger.debug("duration_timer_stopped")

    async def wait_stopped(self):
        """Wait for cancelled tasks to finish unwinding."""
        pending = list(self._cancelled)
        await asyncio.gather(*pending, return_exceptions=True)

    async def _run(self):
        while True:
            await asyncio.sleep(self.interval)
            self.on_tick()
