"""Timer trigger with detached pipeline runs."""

import asyncio
from typing import Awaitable, Callable

from loguru import logger

from app.models.response import OutcomeReport


class MemeScheduler:
    """Runs the pipeline on a fixed interval without waiting for it to finish."""

    def __init__(
        self,
        job: Callable[[], Awaitable[OutcomeReport]],
        interval: int,
    ):
        self._job = job
        self._interval = interval
        self._loop_task: asyncio.Task | None = None
        self._pending: set[asyncio.Task] = set()
        self._running = False

    @property
    def pending_count(self) -> int:
        """Number of scheduled runs still in flight."""
        return len(self._pending)

    async def start(self) -> None:
        """Start the background timer loop."""
        self._running = True
        if self._loop_task is None or self._loop_task.done():
            self._loop_task = asyncio.create_task(self._timer_loop())
            logger.info(f"Started meme schedule (interval: {self._interval}s)")

    async def stop(self) -> None:
        """Stop the timer loop and wait for in-flight runs to settle."""
        self._running = False
        if self._loop_task is not None and not self._loop_task.done():
            self._loop_task.cancel()
            try:
                await self._loop_task
            except asyncio.CancelledError:
                pass
            logger.info("Stopped meme schedule")
        self._loop_task = None

        if self._pending:
            logger.info(f"Waiting for {len(self._pending)} scheduled run(s) to finish")
            await asyncio.gather(*self._pending, return_exceptions=True)

    def trigger(self) -> asyncio.Task:
        """Spawn one detached pipeline run."""
        task = asyncio.create_task(self._run_job())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _timer_loop(self) -> None:
        while self._running:
            try:
                await asyncio.sleep(self._interval)
                if not self._running:
                    break

                logger.info("Scheduled trigger fired")
                self.trigger()
            except asyncio.CancelledError:
                break

    async def _run_job(self) -> None:
        try:
            report = await self._job()
        except Exception as e:
            logger.exception(f"Scheduled run crashed: {e}")
            return

        if report.success:
            logger.info("Scheduled run finished successfully")
        else:
            logger.error(f"Scheduled run failed: {report.error}")
