from pulsewatch.monitor.alerts import MAX_THRESHOLD, MIN_THRESHOLD
from pulsewatch.utilities.env.parsing import _env_flag, _env_int


class AlertsConfiguration:
    @classmethod
    def alert_threshold(cls) -> int:
        return _env_int(
            "PULSEWATCH_ALERT_THRESHOLD",
            default=95,
            minimum=MIN_THRESHOLD,
            maximum=MAX_THRESHOLD,
        )

    @classmethod
    def alerts_enabled(cls) -> bool:
        return _env_flag("PULSEWATCH_ALERTS_ENABLED", default=True)
