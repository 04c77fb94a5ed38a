from __future__ import annotations

from typing import Callable

from reactivex.abc import SchedulerBase

from pulsewatch.monitor.scheduling import PeriodicTask
from pulsewatch.utilities.logging import get_logger

logger = get_logger(__name__)

IDLE_PROGRESS = 0.2
STARTING_PROGRESS = 0.05
COMPLETE_PROGRESS = 1.0


class SyncSimulation:
    """Fake device sync that fills a progress bar and then yields a reading.

    Progress starts at 0.05 and grows by ``progress_step`` every
    ``step_interval`` until it is capped at 1.0, at which point ``on_complete``
    runs once. Cancelling resets progress to zero and suppresses completion.
    """

    def __init__(
        self,
        on_complete: Callable[[], None],
        *,
        step_interval: float = 0.5,
        progress_step: float = 0.15,
        scheduler: SchedulerBase | None = None,
    ) -> None:
        self._on_complete = on_complete
        self.progress_step = progress_step
        self.progress = IDLE_PROGRESS
        self.syncing = False
        self._task = PeriodicTask(
            step_interval, self._step, scheduler=scheduler, name="sync"
        )

    def start(self) -> bool:
        if self.syncing:
            return False
        self.progress = STARTING_PROGRESS
        self.syncing = True
        logger.info("Device sync started")
        self._task.start()
        return True

    def cancel(self) -> bool:
        if not self.syncing:
            return False
        self.syncing = False
        self.progress = 0.0
        self._task.cancel()
        logger.info("Device sync cancelled")
        return True

    def _step(self) -> None:
        if not self.syncing:
            self._task.cancel()
            return
        self.progress = min(self.progress + self.progress_step, COMPLETE_PROGRESS)
        logger.debug("Sync progress %.2f", self.progress)
        if self.progress >= COMPLETE_PROGRESS:
            self._task.cancel()
            self.syncing = False
            logger.info("Device sync complete")
            self._on_complete()
