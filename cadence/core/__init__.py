"""Core configuration components."""

from cadence.core import codec
from cadence.core.builders import ConfigurationBuilder, SchedulerConfigurationBuilder
from cadence.core.common import (
    ComponentSlot,
    ConfigurationError,
    NullArgumentError,
    UnsupportedOperationError,
    ValidationError,
    keys,
)
from cadence.core.properties import PropertyStore
from cadence.core.slots import (
    ComponentSlotResolver,
    InstanceIdGenerator,
    JobFactory,
    RemotableSchedulerProxyFactory,
    SchedulerExporter,
    TypeLoadHelper,
)

__all__ = [
    # Common Types
    "ComponentSlot",
    "keys",
    # Exceptions
    "ConfigurationError",
    "ValidationError",
    "NullArgumentError",
    "UnsupportedOperationError",
    # Encoding & Storage
    "codec",
    "PropertyStore",
    # Component Slots
    "ComponentSlotResolver",
    "JobFactory",
    "InstanceIdGenerator",
    "SchedulerExporter",
    "RemotableSchedulerProxyFactory",
    "TypeLoadHelper",
    # Builders
    "ConfigurationBuilder",
    "SchedulerConfigurationBuilder",
]
