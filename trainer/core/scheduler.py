# Role: Scheduled-task abstraction for paced replies. Every task is stamped with the playthrough epoch;
# reset() bumps the epoch and cancels pending tasks, so work started for an old playthrough can never
# touch the new one. Delays only simulate typing latency and may be zero.

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Set

import trainer.config as config

log = logging.getLogger("trainer.scheduler")

Job = Callable[[int], Awaitable[None]]


@dataclass(frozen=True)
class Pacing:
    opening: float = 0.0
    reply: float = 0.0
    connect: float = 0.0
    closing: float = 0.0

    @classmethod
    def from_config(cls) -> "Pacing":
        return cls(
            opening=config.OPENING_DELAY_SECONDS,
            reply=config.REPLY_DELAY_SECONDS,
            connect=config.CONNECT_DELAY_SECONDS,
            closing=config.CLOSING_DELAY_SECONDS,
        )


class ReplyScheduler:
    def __init__(self) -> None:
        self._epoch = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def is_current(self, epoch: int) -> bool:
        return epoch == self._epoch

    def reset(self) -> int:
        # Key line: bump first, so a task that is mid-await sees a stale epoch even if cancel lands late.
        self._epoch += 1
        stale = list(self._tasks)
        self._tasks.clear()
        for task in stale:
            task.cancel()
        if stale:
            log.info("Cancelled %d pending task(s) on reset (epoch=%d)", len(stale), self._epoch)
        return self._epoch

    def schedule(self, job: Job, *, delay: float = 0.0) -> asyncio.Task:
        epoch = self._epoch

        async def _run() -> None:
            if not await self.sleep(epoch, delay):
                log.debug("Dropping stale task (epoch %d != %d)", epoch, self._epoch)
                return
            await job(epoch)

        task = asyncio.get_running_loop().create_task(_run())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def sleep(self, epoch: int, delay: float) -> bool:
        """Wait `delay` seconds; return False if the playthrough was reset meanwhile."""
        if delay > 0:
            await asyncio.sleep(delay)
        return self.is_current(epoch)

    async def wait_idle(self) -> None:
        # Jobs may schedule follow-ups, so loop until the set stays empty.
        while self._tasks:
            tasks = list(self._tasks)
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception) and not isinstance(result, asyncio.CancelledError):
                    raise result
