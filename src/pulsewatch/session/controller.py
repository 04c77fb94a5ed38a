from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from datetime import datetime, time
from typing import Callable

import reactivex
from reactivex import operators as ops
from reactivex.abc import SchedulerBase
from reactivex.subject import BehaviorSubject, Subject

from pulsewatch.monitor import alerts
from pulsewatch.monitor.alerts import AlertStatus
from pulsewatch.monitor.samples import Sample, describe_age
from pulsewatch.monitor.scheduling import PeriodicTask
from pulsewatch.monitor.sources import (AMBIENT_RANGE, REFRESH_RANGE,
                                        SYNC_RANGE, RandomSampleSource,
                                        SampleSource, SensorSource)
from pulsewatch.monitor.sync import SyncSimulation
from pulsewatch.session.onboarding import OnboardingFlow
from pulsewatch.session.state import SessionState, Symptom, default_symptoms
from pulsewatch.utilities.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TICK_INTERVAL = 7.0


@dataclass(frozen=True)
class SampleSources:
    """The three ways a reading is acquired, each with its own BPM range."""

    ambient: SampleSource
    refresh: SampleSource
    sync: SampleSource

    @classmethod
    def simulated(cls, rng: random.Random | None = None) -> "SampleSources":
        return cls(
            ambient=RandomSampleSource(AMBIENT_RANGE, rng),
            refresh=RandomSampleSource(REFRESH_RANGE, rng),
            sync=RandomSampleSource(SYNC_RANGE, rng),
        )


class SessionController:
    def __init__(
        self,
        state: SessionState | None = None,
        *,
        sources: SampleSources | None = None,
        scheduler: SchedulerBase | None = None,
        clock: Callable[[], datetime] = datetime.now,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
        sync_step_interval: float = 0.5,
        sync_progress_step: float = 0.15,
    ) -> None:
        self.state = state or SessionState()
        self.sources = sources or SampleSources.simulated()
        self._clock = clock
        self._live_feed = PeriodicTask(
            tick_interval, self._on_tick, scheduler=scheduler, name="live-feed"
        )
        self._sync = SyncSimulation(
            self._on_sync_complete,
            step_interval=sync_step_interval,
            progress_step=sync_progress_step,
            scheduler=scheduler,
        )
        self._readings: Subject[Sample] = Subject()
        self._alert_status: BehaviorSubject[AlertStatus] = BehaviorSubject(
            self.alert_status()
        )

    @property
    def onboarding(self) -> OnboardingFlow:
        return self.state.onboarding

    # ---------- Streams -------------------------------------------------------

    @property
    def readings(self) -> reactivex.Observable[Sample]:
        return self._readings

    @property
    def alerts(self) -> reactivex.Observable[AlertStatus]:
        return self._alert_status.pipe(ops.distinct_until_changed())

    # ---------- Readings ------------------------------------------------------

    def record_reading(self, bpm: int) -> Sample:
        self.state.latest_bpm = bpm
        sample = self.state.trend.append(bpm, self._clock())
        logger.debug("Recorded %s bpm as %s", bpm, sample.timestamp_label)
        self._readings.on_next(sample)
        self._publish_alert_status()
        return sample

    def refresh(self) -> int:
        # Quick cellular checks update the headline value only.
        bpm = self.sources.refresh.produce_reading()
        self.state.latest_bpm = bpm
        logger.info("Refreshed reading: %s bpm", bpm)
        self._publish_alert_status()
        return bpm

    def start_live_feed(self) -> bool:
        return self._live_feed.start()

    def stop_live_feed(self) -> bool:
        return self._live_feed.cancel()

    @property
    def live_feed_running(self) -> bool:
        return self._live_feed.running

    def _on_tick(self) -> None:
        if not self.state.onboarding.enrollment_complete:
            logger.debug("Skipping tick until enrollment completes")
            return
        self.record_reading(self.sources.ambient.produce_reading())

    # ---------- Device sync ---------------------------------------------------

    def start_sync(self) -> bool:
        return self._sync.start()

    def cancel_sync(self) -> bool:
        return self._sync.cancel()

    @property
    def syncing(self) -> bool:
        return self._sync.syncing

    @property
    def sync_progress(self) -> float:
        return self._sync.progress

    def _on_sync_complete(self) -> None:
        self.record_reading(self.sources.sync.produce_reading())

    # ---------- Alerts --------------------------------------------------------

    def set_threshold(self, value: int) -> int:
        threshold = self.state.alerts.set_threshold(value)
        self._publish_alert_status()
        return threshold

    def set_alerts_enabled(self, enabled: bool) -> None:
        self.state.alerts.alerts_enabled = enabled
        self._publish_alert_status()

    def alert_status(self) -> AlertStatus:
        return alerts.status(
            self.state.latest_bpm,
            self.state.alerts.threshold,
            self.state.alerts.alerts_enabled,
        )

    def alert_notice(self) -> str:
        return alerts.notice(
            self.state.latest_bpm,
            self.state.alerts.threshold,
            self.state.alerts.alerts_enabled,
        )

    def _publish_alert_status(self) -> None:
        self._alert_status.on_next(self.alert_status())

    # ---------- Sensors, symptoms and preferences ----------------------------

    def select_sensor(self, name: str) -> SensorSource:
        for sensor in self.state.sensors:
            if sensor.name == name:
                self.state.active_sensor = sensor
                logger.info("Active sensor set to %s", name)
                return sensor
        raise KeyError(f"Unknown sensor '{name}'")

    def toggle_symptom(self, name: str) -> Symptom:
        for index, symptom in enumerate(self.state.symptoms):
            if symptom.name == name:
                toggled = dataclasses.replace(symptom, is_present=not symptom.is_present)
                self.state.symptoms[index] = toggled
                return toggled
        raise KeyError(f"Unknown symptom '{name}'")

    def clear_symptoms(self) -> None:
        self.state.symptoms = default_symptoms()

    def set_notifications_enabled(self, enabled: bool) -> None:
        self.state.preferences.notifications_enabled = enabled

    def set_reminder_time(self, reminder: time) -> None:
        self.state.preferences.reminder_time = reminder.replace(second=0, microsecond=0)

    def last_packet_description(self, now: datetime | None = None) -> str:
        last = self.state.trend.last_sample_time
        if last is None:
            return "no packets yet"
        return describe_age(last, now or self._clock())

    # ---------- Lifecycle -----------------------------------------------------

    def close(self) -> None:
        self._live_feed.cancel()
        self._sync.cancel()
        self._readings.on_completed()
        self._alert_status.on_completed()
