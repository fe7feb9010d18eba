"""Common type definitions for Cadence."""

from enum import Enum

from cadence.core.common import keys


class ComponentSlot(Enum):
    """Pluggable extension point, valued by the property key it writes."""

    JOB_FACTORY = keys.JOB_FACTORY_TYPE
    INSTANCE_ID_GENERATOR = keys.INSTANCE_ID_GENERATOR_TYPE
    EXPORTER = keys.EXPORTER_TYPE
    PROXY_FACTORY = keys.PROXY_TYPE
    TYPE_LOAD_HELPER = keys.TYPE_LOAD_HELPER_TYPE

    @property
    def key(self) -> str:
        """Property key for the resolved type name."""
        return self.value
