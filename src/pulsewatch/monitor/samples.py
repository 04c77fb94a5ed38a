"""Heart-rate samples and the labels shown next to them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MOCK_WEEK_BPMS = (78, 74, 80, 76, 82, 79, 77)


@dataclass(frozen=True, slots=True)
class Sample:
    timestamp_label: str
    bpm: int


def sample_label(moment: datetime) -> str:
    """Format ``moment`` as a short weekday and 12-hour clock, e.g. ``Mon 3:45 PM``.

    The weekday names are fixed English abbreviations so labels do not depend
    on the process locale.
    """

    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{WEEKDAY_LABELS[moment.weekday()]} {hour}:{moment.minute:02d} {meridiem}"


def mock_week() -> list[Sample]:
    return [
        Sample(timestamp_label=day, bpm=bpm)
        for day, bpm in zip(WEEKDAY_LABELS, MOCK_WEEK_BPMS)
    ]


def describe_age(then: datetime, now: datetime) -> str:
    """Return an abbreviated relative age such as ``3 min. ago``."""

    elapsed = now - then
    if elapsed < timedelta(0):
        return "just now"

    seconds = int(elapsed.total_seconds())
    if seconds < 60:
        return f"{seconds} sec. ago"
    if seconds < 3600:
        return f"{seconds // 60} min. ago"
    if seconds < 86400:
        return f"{seconds // 3600} hr. ago"
    days = seconds // 86400
    return f"{days} day ago" if days == 1 else f"{days} days ago"
