import os
import tempfile
from collections import deque
from datetime import datetime, timedelta
from typing import Iterable

import pytest

os.environ.setdefault("PULSEWATCH_LOG_DIR", tempfile.mkdtemp(prefix="pulsewatch-logs-"))

from hypothesis import HealthCheck, settings
from reactivex.testing import TestScheduler

from pulsewatch.session.controller import SampleSources, SessionController
from pulsewatch.session.state import SessionState

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

# 2024-01-01 is a Monday.
SESSION_START = datetime(2024, 1, 1, 9, 0)


class StubClock:
    """Return ``start`` on the first call and advance by ``step`` afterwards."""

    def __init__(
        self, start: datetime = SESSION_START, step: timedelta = timedelta(minutes=1)
    ) -> None:
        self._next = start
        self._step = step
        self.last: datetime | None = None

    def __call__(self) -> datetime:
        self.last = self._next
        self._next = self._next + self._step
        return self.last


class ScriptedSource:
    """Produce readings from a fixed script, repeating the last value when exhausted."""

    def __init__(self, readings: Iterable[int]) -> None:
        self._readings: deque[int] = deque(readings)
        self._last = self._readings[-1] if self._readings else 0
        self.calls = 0

    def produce_reading(self) -> int:
        self.calls += 1
        if self._readings:
            self._last = self._readings.popleft()
        return self._last


@pytest.fixture()
def scheduler() -> TestScheduler:
    return TestScheduler()


@pytest.fixture()
def clock() -> StubClock:
    return StubClock()


@pytest.fixture()
def sources() -> SampleSources:
    return SampleSources(
        ambient=ScriptedSource([100, 101, 102, 103]),
        refresh=ScriptedSource([119]),
        sync=ScriptedSource([64]),
    )


@pytest.fixture()
def controller(
    scheduler: TestScheduler, clock: StubClock, sources: SampleSources
) -> SessionController:
    session = SessionController(
        SessionState.initial(started_at=SESSION_START),
        sources=sources,
        scheduler=scheduler,
        clock=clock,
    )
    yield session
    session.close()
