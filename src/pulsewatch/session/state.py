from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from pulsewatch.monitor.alerts import AlertSettings
from pulsewatch.monitor.samples import mock_week
from pulsewatch.monitor.sources import DEFAULT_SENSORS, SensorSource
from pulsewatch.monitor.trend import DEFAULT_CAPACITY, TrendBuffer
from pulsewatch.session.onboarding import OnboardingFlow

INITIAL_BPM = 72
DEFAULT_SYMPTOMS = (
    "Chest tightness",
    "Shortness of breath",
    "Dizziness",
    "Fatigue",
    "Headache",
)


@dataclass(frozen=True, slots=True)
class Symptom:
    name: str
    is_present: bool = False


def default_symptoms() -> list[Symptom]:
    return [Symptom(name=name) for name in DEFAULT_SYMPTOMS]


def _current_minute() -> time:
    return datetime.now().time().replace(second=0, microsecond=0)


@dataclass
class Preferences:
    notifications_enabled: bool = True
    reminder_time: time = field(default_factory=_current_minute)


@dataclass
class SessionState:
    """Everything a monitoring session holds in memory.

    Only :class:`~pulsewatch.session.controller.SessionController` mutates it.
    """

    latest_bpm: int = INITIAL_BPM
    trend: TrendBuffer = field(default_factory=lambda: TrendBuffer(mock_week()))
    alerts: AlertSettings = field(default_factory=AlertSettings)
    active_sensor: SensorSource = DEFAULT_SENSORS[0]
    sensors: tuple[SensorSource, ...] = DEFAULT_SENSORS
    symptoms: list[Symptom] = field(default_factory=default_symptoms)
    preferences: Preferences = field(default_factory=Preferences)
    onboarding: OnboardingFlow = field(default_factory=OnboardingFlow)

    @classmethod
    def initial(
        cls,
        *,
        threshold: int = 95,
        alerts_enabled: bool = True,
        trend_capacity: int = DEFAULT_CAPACITY,
        started_at: datetime | None = None,
    ) -> "SessionState":
        return cls(
            trend=TrendBuffer(
                mock_week(), capacity=trend_capacity, last_sample_time=started_at
            ),
            alerts=AlertSettings(threshold=threshold, alerts_enabled=alerts_enabled),
        )
