"""Component slot resolution."""

from collections.abc import Mapping

from cadence.core import codec
from cadence.core.common.exceptions import UnsupportedOperationError, ValidationError
from cadence.core.common.types import ComponentSlot
from cadence.core.properties import PropertyStore
from cadence.core.slots.capabilities import (
    InstanceIdGenerator,
    JobFactory,
    RemotableSchedulerProxyFactory,
    SchedulerExporter,
    TypeLoadHelper,
)
from cadence.utils.logging import ContextLogger

ComponentType = type | str

SLOT_CAPABILITIES: dict[ComponentSlot, type] = {
    ComponentSlot.JOB_FACTORY: JobFactory,
    ComponentSlot.INSTANCE_ID_GENERATOR: InstanceIdGenerator,
    ComponentSlot.EXPORTER: SchedulerExporter,
    ComponentSlot.PROXY_FACTORY: RemotableSchedulerProxyFactory,
    ComponentSlot.TYPE_LOAD_HELPER: TypeLoadHelper,
}


class ComponentSlotResolver:
    """
    Writes the qualified type name for a component slot into a store.

    Class descriptors are checked against the slot's capability (see
    ``SLOT_CAPABILITIES``). Dotted-path strings are recorded as given,
    since they are resolved by the scheduler factory, not here.

    Usage:
        >>> resolver = ComponentSlotResolver(store)
        >>> resolver.resolve(ComponentSlot.JOB_FACTORY, MyJobFactory)
    """

    def __init__(self, store: PropertyStore, logger: ContextLogger | None = None) -> None:
        self._store = store
        self._logger = logger

    def resolve(
        self,
        slot: ComponentSlot,
        descriptor: ComponentType,
        properties: Mapping[str, str] | None = None,
    ) -> str:
        """
        Record the type requested for a slot.

        Args:
            slot: Extension point being filled
            descriptor: Class implementing the slot capability, or its dotted path
            properties: Auxiliary slot properties (not supported yet)

        Returns:
            The type name written to the store

        Raises:
            UnsupportedOperationError: If properties are supplied
            ValidationError: If the descriptor is invalid for the slot
        """
        if properties is not None:
            raise UnsupportedOperationError(
                f"Auxiliary properties for component slot '{slot.name.lower()}' "
                "are not supported yet. Configure the component type only."
            )

        self.check(slot, descriptor)

        name = codec.type_name(descriptor)
        self._store.set(slot.key, name)
        if self._logger:
            self._logger.debug("Component slot resolved", key=slot.key, type=name)
        return name

    @staticmethod
    def check(slot: ComponentSlot, descriptor: ComponentType) -> None:
        """
        Validate a descriptor for a slot without writing anything.

        Raises:
            ValidationError: If the descriptor is not a class implementing the
                slot capability or a non-empty dotted path
        """
        if isinstance(descriptor, str):
            if not descriptor or any(c.isspace() for c in descriptor):
                raise ValidationError(
                    f"Component type for slot '{slot.name.lower()}' must be a class "
                    f"or a dotted import path, got {descriptor!r}"
                )
            return

        if not isinstance(descriptor, type):
            raise ValidationError(
                f"Component type for slot '{slot.name.lower()}' must be a class "
                f"or a dotted import path, got {type(descriptor).__name__}"
            )

        capability = SLOT_CAPABILITIES[slot]
        if not issubclass(descriptor, capability):
            raise ValidationError(
                f"{descriptor.__qualname__} cannot fill slot '{slot.name.lower()}': "
                f"it does not implement {capability.__name__}. "
                f"Subclass it or call {capability.__name__}.register({descriptor.__qualname__})."
            )
