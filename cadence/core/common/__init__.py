"""Common components shared across core modules."""

from cadence.core.common import keys
from cadence.core.common.exceptions import (
    ConfigurationError,
    NullArgumentError,
    UnsupportedOperationError,
    ValidationError,
)
from cadence.core.common.types import ComponentSlot

__all__ = [
    # Types
    "ComponentSlot",
    "keys",
    # Exceptions
    "ConfigurationError",
    "ValidationError",
    "NullArgumentError",
    "UnsupportedOperationError",
]
