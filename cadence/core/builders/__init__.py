"""Configuration builders."""

from cadence.core.builders.configuration import ConfigurationBuilder
from cadence.core.builders.scheduler import SchedulerConfigurationBuilder

__all__ = [
    "ConfigurationBuilder",
    "SchedulerConfigurationBuilder",
]
