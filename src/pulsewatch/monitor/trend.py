from __future__ import annotations

from collections import deque
from datetime import datetime
from typing import Iterable, Iterator

from pulsewatch.monitor.samples import Sample, sample_label

DEFAULT_CAPACITY = 14


class TrendBuffer:
    """Rolling window of the most recent samples, oldest first.

    Appending past ``capacity`` drops exactly one sample from the front, so the
    window always holds the latest ``capacity`` readings in arrival order.
    """

    def __init__(
        self,
        samples: Iterable[Sample] = (),
        *,
        capacity: int = DEFAULT_CAPACITY,
        last_sample_time: datetime | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._samples: deque[Sample] = deque(samples, maxlen=capacity)
        self._last_sample_time = last_sample_time

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def samples(self) -> tuple[Sample, ...]:
        return tuple(self._samples)

    @property
    def latest(self) -> Sample | None:
        return self._samples[-1] if self._samples else None

    @property
    def last_sample_time(self) -> datetime | None:
        return self._last_sample_time

    def append(self, bpm: int, now: datetime) -> Sample:
        sample = Sample(timestamp_label=sample_label(now), bpm=bpm)
        # deque(maxlen=...) evicts the single oldest entry on overflow
        self._samples.append(sample)
        self._last_sample_time = now
        return sample

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(tuple(self._samples))
