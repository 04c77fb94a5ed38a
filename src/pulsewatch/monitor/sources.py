"""Simulated heart-rate sources.

Nothing here talks to hardware. A real strap or health API would implement
:class:`SampleSource` and slot in where :class:`RandomSampleSource` is used.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class BpmRange:
    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"Invalid BPM range {self.low}-{self.high}")

    def __contains__(self, bpm: object) -> bool:
        return isinstance(bpm, int) and self.low <= bpm <= self.high


AMBIENT_RANGE = BpmRange(68, 112)
REFRESH_RANGE = BpmRange(65, 120)
SYNC_RANGE = BpmRange(60, 110)


@runtime_checkable
class SampleSource(Protocol):
    def produce_reading(self) -> int:
        ...


class RandomSampleSource:
    def __init__(self, bpm_range: BpmRange, rng: random.Random | None = None) -> None:
        self.bpm_range = bpm_range
        self._rng = rng or random.Random()

    def produce_reading(self) -> int:
        return self._rng.randint(self.bpm_range.low, self.bpm_range.high)


@dataclass(frozen=True, slots=True)
class SensorSource:
    name: str
    icon: str
    detail: str


DEFAULT_SENSORS: tuple[SensorSource, ...] = (
    SensorSource(name="Aurora Band", icon="sportscourt.fill", detail="PPG wrist sensor"),
    SensorSource(name="PulsePod", icon="bolt.heart.fill", detail="Chest strap ECG"),
    SensorSource(name="iPhone PPG", icon="iphone.gen3", detail="Camera fingertip check"),
)
