"""Root configuration builder."""

from __future__ import annotations

import logging
from collections.abc import Callable

from cadence.core.builders.scheduler import SchedulerConfigurationBuilder
from cadence.core.common.exceptions import NullArgumentError, ValidationError
from cadence.core.properties import PropertyStore
from cadence.utils.logging import ContextLogger, resolve_logger

SchedulerConfigurator = Callable[[SchedulerConfigurationBuilder], object]


class ConfigurationBuilder:
    """
    Assembles the flat property set consumed by the scheduler factory.

    Owns the property store. Category builders (currently the scheduler
    builder) write into the same store, and ``build()`` hands out a copy.

    Usage:
        >>> from datetime import timedelta
        >>> properties = (
        ...     ConfigurationBuilder.create()
        ...     .with_scheduler_configuration(
        ...         lambda scheduler: scheduler.instance_name("main").max_batch_size(5)
        ...     )
        ...     .build()
        ... )
        >>> properties["quartz.scheduler.batchTriggerAcquisitionMaxCount"]
        '5'

    Note:
        A builder and the scoped builders it creates must be used from a
        single thread. There is no internal locking.
    """

    def __init__(
        self,
        logger: ContextLogger | logging.Logger | None = None,
        verbose: bool = False,
    ) -> None:
        """
        Initialize builder with an empty store.

        Args:
            logger: Custom logger (uses default if None)
            verbose: Log a summary on every build() (default: False)
        """
        self.store = PropertyStore()
        self.verbose = verbose
        self.logger = resolve_logger(logger, self.__class__.__name__)

    @classmethod
    def create(
        cls,
        logger: ContextLogger | logging.Logger | None = None,
        verbose: bool = False,
    ) -> ConfigurationBuilder:
        """Create a builder with an empty property store."""
        return cls(logger=logger, verbose=verbose)

    def with_scheduler_configuration(
        self, configurator: SchedulerConfigurator
    ) -> ConfigurationBuilder:
        """
        Configure scheduler options through a callback.

        The configurator receives a ``SchedulerConfigurationBuilder`` bound
        to this builder's store. Its return value is ignored.

        Args:
            configurator: Callable taking the scheduler builder

        Returns:
            Self for method chaining

        Raises:
            NullArgumentError: If configurator is None
            ValidationError: If configurator is not callable

        Examples:
            builder.with_scheduler_configuration(
                lambda s: s.instance_name("main").proxy(False)
            )
        """
        if configurator is None:
            raise NullArgumentError("configurator must not be None")
        if not callable(configurator):
            raise ValidationError(
                f"configurator must be callable, got {type(configurator).__name__}"
            )

        configurator(SchedulerConfigurationBuilder(self))
        return self

    def scheduler_configuration(self) -> SchedulerConfigurationBuilder:
        """
        Get a scheduler builder bound to this builder's store.

        Useful when options are set over several statements instead of in
        a single callback.
        """
        return SchedulerConfigurationBuilder(self)

    def build(self) -> dict[str, str]:
        """
        Build the property set.

        Returns a new dict on every call, so later changes to the builder
        never alter a property set that was already handed out.

        Returns:
            Flat ``str -> str`` properties
        """
        properties = self.store.snapshot()
        if self.verbose:
            self.logger.info("Configuration built", properties=len(properties))
        return properties
