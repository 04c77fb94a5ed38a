"""Environment configuration helpers."""

from pulsewatch.utilities.env.config import Configuration as Configuration
