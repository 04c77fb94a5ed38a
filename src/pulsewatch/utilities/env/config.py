from pulsewatch.utilities.env.alerts import AlertsConfiguration
from pulsewatch.utilities.env.feed import FeedConfiguration


class Configuration(FeedConfiguration, AlertsConfiguration):
    """Aggregate environment configuration helpers."""
