"""Pluggable component slots and their capabilities."""

from cadence.core.slots.capabilities import (
    InstanceIdGenerator,
    JobFactory,
    RemotableSchedulerProxyFactory,
    SchedulerExporter,
    TypeLoadHelper,
)
from cadence.core.slots.resolver import SLOT_CAPABILITIES, ComponentSlotResolver

__all__ = [
    "ComponentSlotResolver",
    "SLOT_CAPABILITIES",
    # Capabilities
    "JobFactory",
    "InstanceIdGenerator",
    "SchedulerExporter",
    "RemotableSchedulerProxyFactory",
    "TypeLoadHelper",
]
