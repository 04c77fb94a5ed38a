from __future__ import annotations

from typing import Callable

import reactivex
from reactivex.abc import DisposableBase, SchedulerBase

from pulsewatch.utilities.logging import get_logger

logger = get_logger(__name__)


class PeriodicTask:
    """Cancellable handle around a ``reactivex.interval`` subscription.

    A handle owns at most one live subscription. ``start`` on a running task
    and ``cancel`` on a stopped one are both no-ops.
    """

    def __init__(
        self,
        period: float,
        action: Callable[[], None],
        *,
        scheduler: SchedulerBase | None = None,
        name: str = "periodic",
    ) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self.period = period
        self.name = name
        self._action = action
        self._scheduler = scheduler
        self._subscription: DisposableBase | None = None

    @property
    def running(self) -> bool:
        return self._subscription is not None

    def start(self) -> bool:
        if self._subscription is not None:
            logger.debug("Task %s already running; ignoring start", self.name)
            return False
        logger.debug("Starting task %s every %ss", self.name, self.period)
        self._subscription = reactivex.interval(
            self.period, scheduler=self._scheduler
        ).subscribe(
            on_next=lambda _: self._action(),
            scheduler=self._scheduler,
        )
        return True

    def cancel(self) -> bool:
        subscription, self._subscription = self._subscription, None
        if subscription is None:
            return False
        subscription.dispose()
        logger.debug("Cancelled task %s", self.name)
        return True
