"""Threshold alert evaluation for the latest heart-rate reading."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

MIN_THRESHOLD = 60
MAX_THRESHOLD = 140


class Severity(StrEnum):
    NEUTRAL = "neutral"
    OK = "ok"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class AlertStatus:
    text: str
    severity: Severity


DISABLED_STATUS = AlertStatus(text="Alerts disabled", severity=Severity.NEUTRAL)
ABOVE_STATUS = AlertStatus(text="Above threshold now", severity=Severity.WARNING)
BELOW_STATUS = AlertStatus(text="Below threshold", severity=Severity.OK)

_NOTICES = {
    Severity.NEUTRAL: "Threshold alerts are off.",
    Severity.WARNING: "Above threshold. Alert would fire.",
    Severity.OK: "Within threshold.",
}


def clamp_threshold(value: int) -> int:
    return max(MIN_THRESHOLD, min(MAX_THRESHOLD, int(value)))


@dataclass
class AlertSettings:
    """User-adjustable alert threshold and toggle."""

    threshold: int = 95
    alerts_enabled: bool = True

    def __post_init__(self) -> None:
        self.threshold = clamp_threshold(self.threshold)

    def set_threshold(self, value: int) -> int:
        self.threshold = clamp_threshold(value)
        return self.threshold

    def describe(self) -> str:
        return f"Alert if BPM goes above {self.threshold}."


def status(latest_bpm: int, threshold: int, alerts_enabled: bool) -> AlertStatus:
    """Classify ``latest_bpm`` against ``threshold``.

    Reaching the threshold counts as above it. Disabled alerts are always
    neutral, whatever the reading.
    """

    if not alerts_enabled:
        return DISABLED_STATUS
    if latest_bpm >= threshold:
        return ABOVE_STATUS
    return BELOW_STATUS


def notice(latest_bpm: int, threshold: int, alerts_enabled: bool) -> str:
    """Return the monitor-card wording for the same classification as :func:`status`."""

    return _NOTICES[status(latest_bpm, threshold, alerts_enabled).severity]
