from __future__ import annotations

import random
from datetime import datetime
from typing import Any, Callable, Mapping

from lagom import Container, Singleton
from reactivex.abc import SchedulerBase
from reactivex.scheduler import TimeoutScheduler

from pulsewatch.monitor.sources import RandomSampleSource
from pulsewatch.session.controller import SampleSources, SessionController
from pulsewatch.session.state import SessionState
from pulsewatch.utilities.env import Configuration
from pulsewatch.utilities.logging import get_logger

logger = get_logger(__name__)

SessionContainer = Container
Clock = Callable[[], datetime]


def _build_sample_sources(resolver: SessionContainer) -> SampleSources:
    rng = resolver[random.Random]
    return SampleSources(
        ambient=RandomSampleSource(Configuration.ambient_bpm_range(), rng),
        refresh=RandomSampleSource(Configuration.refresh_bpm_range(), rng),
        sync=RandomSampleSource(Configuration.sync_bpm_range(), rng),
    )


def _build_session_state(clock: Clock) -> SessionState:
    return SessionState.initial(
        threshold=Configuration.alert_threshold(),
        alerts_enabled=Configuration.alerts_enabled(),
        trend_capacity=Configuration.trend_capacity(),
        started_at=clock(),
    )


def build_session_container(
    *,
    scheduler: SchedulerBase | None = None,
    rng: random.Random | None = None,
    clock: Clock | None = None,
    overrides: Mapping[type[Any], object] | None = None,
) -> SessionContainer:
    """Wire a :class:`SessionController` and its collaborators from configuration."""

    container = SessionContainer()
    resolved_scheduler = scheduler or TimeoutScheduler.singleton()
    resolved_clock = clock or datetime.now

    _bind(container, overrides, SchedulerBase, resolved_scheduler)
    _bind(container, overrides, random.Random, rng or random.Random())
    _bind(container, overrides, SampleSources, Singleton(_build_sample_sources))
    _bind(
        container,
        overrides,
        SessionState,
        Singleton(lambda: _build_session_state(resolved_clock)),
    )

    def _build_controller(resolver: SessionContainer) -> SessionController:
        return SessionController(
            resolver[SessionState],
            sources=resolver[SampleSources],
            scheduler=resolver[SchedulerBase],
            clock=resolved_clock,
            tick_interval=Configuration.tick_interval_seconds(),
            sync_step_interval=Configuration.sync_step_interval_seconds(),
            sync_progress_step=Configuration.sync_progress_step(),
        )

    _bind(container, overrides, SessionController, Singleton(_build_controller))
    logger.debug(
        "Configured session container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    return container


def _bind(
    container: SessionContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
