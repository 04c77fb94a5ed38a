from pulsewatch.monitor.alerts import (AlertSettings, AlertStatus, Severity,
                                       notice, status)
from pulsewatch.monitor.samples import Sample, mock_week, sample_label
from pulsewatch.monitor.sources import (BpmRange, RandomSampleSource,
                                        SampleSource, SensorSource)
from pulsewatch.monitor.trend import TrendBuffer

__all__ = [
    "AlertSettings",
    "AlertStatus",
    "BpmRange",
    "RandomSampleSource",
    "Sample",
    "SampleSource",
    "SensorSource",
    "Severity",
    "TrendBuffer",
    "mock_week",
    "notice",
    "sample_label",
    "status",
]
