from pulsewatch.monitor.sources import BpmRange
from pulsewatch.utilities.env.parsing import (_env_float, _env_int,
                                              _env_int_range)


class FeedConfiguration:
    @classmethod
    def tick_interval_seconds(cls) -> float:
        return _env_float("PULSEWATCH_TICK_INTERVAL_S", default=7.0, minimum=0.001)

    @classmethod
    def sync_step_interval_seconds(cls) -> float:
        return _env_float(
            "PULSEWATCH_SYNC_STEP_INTERVAL_S", default=0.5, minimum=0.001
        )

    @classmethod
    def sync_progress_step(cls) -> float:
        return _env_float(
            "PULSEWATCH_SYNC_PROGRESS_STEP", default=0.15, minimum=0.001, maximum=1.0
        )

    @classmethod
    def trend_capacity(cls) -> int:
        return _env_int("PULSEWATCH_TREND_CAPACITY", default=14, minimum=1)

    @classmethod
    def ambient_bpm_range(cls) -> BpmRange:
        return BpmRange(*_env_int_range("PULSEWATCH_AMBIENT_BPM_RANGE", default=(68, 112)))

    @classmethod
    def refresh_bpm_range(cls) -> BpmRange:
        return BpmRange(*_env_int_range("PULSEWATCH_REFRESH_BPM_RANGE", default=(65, 120)))

    @classmethod
    def sync_bpm_range(cls) -> BpmRange:
        return BpmRange(*_env_int_range("PULSEWATCH_SYNC_BPM_RANGE", default=(60, 110)))
