"""Fluent builder for scheduler options."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import TYPE_CHECKING, Any

from cadence.core import codec
from cadence.core.common import keys
from cadence.core.common.exceptions import (
    NullArgumentError,
    UnsupportedOperationError,
    ValidationError,
)
from cadence.core.common.types import ComponentSlot
from cadence.core.slots.resolver import ComponentSlotResolver, ComponentType

if TYPE_CHECKING:
    from cadence.core.builders.configuration import ConfigurationBuilder


def _require_text(value: Any, param: str, label: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string, got {type(value).__name__} ({param})")
    if not value:
        raise ValidationError(f"{label} should be specified ({param})")
    return value


def _require_bool(value: Any, param: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{param} must be a bool, got {type(value).__name__}")
    return value


def _require_duration(value: Any, param: str) -> timedelta:
    if not isinstance(value, timedelta):
        raise ValidationError(f"{param} must be a timedelta, got {type(value).__name__}")
    return value


class SchedulerConfigurationBuilder:
    """
    Scoped builder for scheduler options.

    Bound to the property store of a ``ConfigurationBuilder`` without
    owning it. Each method validates its argument, writes the encoded
    value immediately and returns the builder for chaining. A rejected
    call raises and leaves the store untouched; earlier calls are kept.

    Examples:
        ConfigurationBuilder.create().with_scheduler_configuration(
            lambda s: s.instance_name("main")
            .thread_name("main-scheduler")
            .batch_time_window(timedelta(milliseconds=500))
            .max_batch_size(10)
        ).build()

    Note:
        Not thread-safe. Configure a builder from a single thread.
    """

    def __init__(self, builder: ConfigurationBuilder) -> None:
        self._builder = builder
        self._store = builder.store
        self.logger = builder.logger.with_context(scope="scheduler")
        self._slots = ComponentSlotResolver(self._store, self.logger)

    def _set(self, key: str, value: str) -> SchedulerConfigurationBuilder:
        self._store.set(key, value)
        self.logger.debug("Property set", key=key, value=value)
        return self

    # ========================================
    # Identity
    # ========================================

    def instance_name(self, instance_name: str) -> SchedulerConfigurationBuilder:
        """
        Set the scheduler instance name.

        Args:
            instance_name: Non-empty name

        Raises:
            ValidationError: If the name is empty or not a string
        """
        value = _require_text(instance_name, "instance_name", "Instance name")
        return self._set(keys.INSTANCE_NAME, value)

    def instance_id(self, instance_id: str) -> SchedulerConfigurationBuilder:
        """
        Set the scheduler instance id.

        Args:
            instance_id: Non-empty id (the factory also accepts ``"AUTO"``)

        Raises:
            ValidationError: If the id is empty or not a string
        """
        value = _require_text(instance_id, "instance_id", "Instance id")
        return self._set(keys.INSTANCE_ID, value)

    def with_instance_id_generator(
        self,
        generator_type: ComponentType,
        properties: Mapping[str, str] | None = None,
    ) -> SchedulerConfigurationBuilder:
        """
        Set the instance id generator type.

        Args:
            generator_type: ``InstanceIdGenerator`` class or its dotted path
            properties: Generator properties (not supported yet)

        Raises:
            UnsupportedOperationError: If properties are supplied
            ValidationError: If the type does not implement InstanceIdGenerator
        """
        self._slots.resolve(ComponentSlot.INSTANCE_ID_GENERATOR, generator_type, properties)
        return self

    # ========================================
    # Scheduler Thread
    # ========================================

    def thread_name(self, thread_name: str) -> SchedulerConfigurationBuilder:
        """
        Set the name of the main scheduler thread.

        Raises:
            ValidationError: If the name is empty or not a string
        """
        value = _require_text(thread_name, "thread_name", "Thread name")
        return self._set(keys.THREAD_NAME, value)

    def make_thread_daemon(self, enable: bool) -> SchedulerConfigurationBuilder:
        """Run the main scheduler thread as a daemon thread."""
        value = _require_bool(enable, "enable")
        return self._set(keys.MAKE_THREAD_DAEMON, codec.bool_to_string(value))

    def idle_wait_time(self, idle_wait_time: timedelta) -> SchedulerConfigurationBuilder:
        """Set how long the scheduler waits before re-querying for triggers when idle."""
        value = _require_duration(idle_wait_time, "idle_wait_time")
        return self._set(keys.IDLE_WAIT_TIME, codec.duration_to_string(value))

    def db_failure_retry_interval(self, interval: timedelta) -> SchedulerConfigurationBuilder:
        """Set the wait between retries after losing the job store connection."""
        value = _require_duration(interval, "interval")
        return self._set(keys.DB_FAILURE_RETRY_INTERVAL, codec.duration_to_string(value))

    # ========================================
    # Trigger Batching
    # ========================================

    def batch_time_window(self, window: timedelta) -> SchedulerConfigurationBuilder:
        """
        Set how far ahead of their fire time triggers may be acquired.

        Any duration is accepted, including zero and negative values.

        Args:
            window: Time window, stored in whole milliseconds

        Examples:
            scheduler.batch_time_window(timedelta(milliseconds=500))  # "500"
        """
        value = _require_duration(window, "window")
        return self._set(keys.BATCH_TIME_WINDOW, codec.duration_to_string(value))

    def max_batch_size(self, max_batch_size: int) -> SchedulerConfigurationBuilder:
        """
        Set the maximum number of triggers acquired at once.

        Raises:
            ValidationError: If the size is not a positive integer
        """
        if isinstance(max_batch_size, bool) or not isinstance(max_batch_size, int):
            raise ValidationError(
                f"max_batch_size must be an int, got {type(max_batch_size).__name__}"
            )
        if max_batch_size <= 0:
            raise ValidationError(f"max_batch_size must be positive number, got {max_batch_size}")
        return self._set(keys.MAX_BATCH_SIZE, codec.int_to_string(max_batch_size))

    # ========================================
    # Shutdown
    # ========================================

    def interrupt_jobs_on_shutdown(self, value: bool) -> SchedulerConfigurationBuilder:
        """Interrupt running jobs when the scheduler shuts down."""
        return self._set(
            keys.INTERRUPT_JOBS_ON_SHUTDOWN, codec.bool_to_string(_require_bool(value, "value"))
        )

    def interrupt_jobs_on_shutdown_with_wait(self, value: bool) -> SchedulerConfigurationBuilder:
        """Interrupt running jobs on a shutdown that waits for jobs to complete."""
        return self._set(
            keys.INTERRUPT_JOBS_ON_SHUTDOWN_WITH_WAIT,
            codec.bool_to_string(_require_bool(value, "value")),
        )

    # ========================================
    # Remoting
    # ========================================

    def with_exporter(
        self,
        exporter_type: ComponentType,
        properties: Mapping[str, str] | None = None,
    ) -> SchedulerConfigurationBuilder:
        """
        Set the scheduler exporter type.

        Raises:
            UnsupportedOperationError: If properties are supplied
            ValidationError: If the type does not implement SchedulerExporter
        """
        self._slots.resolve(ComponentSlot.EXPORTER, exporter_type, properties)
        return self

    def proxy(self, use_proxy: bool) -> SchedulerConfigurationBuilder:
        """Use a proxy to a remote scheduler instead of a local one."""
        return self._set(keys.PROXY, codec.bool_to_string(_require_bool(use_proxy, "use_proxy")))

    def with_remote_proxy_factory(
        self,
        factory_type: ComponentType,
        properties: Mapping[str, str] | None = None,
    ) -> SchedulerConfigurationBuilder:
        """
        Set the remote scheduler proxy factory type.

        Raises:
            UnsupportedOperationError: If properties are supplied
            ValidationError: If the type does not implement RemotableSchedulerProxyFactory
        """
        self._slots.resolve(ComponentSlot.PROXY_FACTORY, factory_type, properties)
        return self

    # ========================================
    # Components
    # ========================================

    def with_job_factory(
        self,
        factory_type: ComponentType,
        properties: Mapping[str, str] | None = None,
    ) -> SchedulerConfigurationBuilder:
        """
        Set the job factory type.

        Raises:
            UnsupportedOperationError: If properties are supplied
            ValidationError: If the type does not implement JobFactory
        """
        self._slots.resolve(ComponentSlot.JOB_FACTORY, factory_type, properties)
        return self

    def with_type_load_helper(self, helper_type: ComponentType) -> SchedulerConfigurationBuilder:
        """
        Set the type load helper.

        Raises:
            UnsupportedOperationError: Always; the option is not supported yet
        """
        raise UnsupportedOperationError(
            f"Type load helper configuration is not supported yet (requested {helper_type!r})"
        )

    # ========================================
    # Scheduler Context
    # ========================================

    def with_context(self, context_items: Mapping[str, Any]) -> SchedulerConfigurationBuilder:
        """
        Add entries to the scheduler context.

        Each entry is written under ``quartz.context.<key>`` with its value
        in canonical string form. Keys keep their casing.

        The whole mapping is validated before anything is written, so a
        rejected mapping adds no entries at all.

        Args:
            context_items: Context entries

        Raises:
            NullArgumentError: If context_items is None
            ValidationError: If it is not a mapping, a key is empty or not a
                string, or a value is None

        Examples:
            scheduler.with_context({"region": "eu", "retries": 3})
            # quartz.context.region=eu, quartz.context.retries=3
        """
        if context_items is None:
            raise NullArgumentError("context_items must not be None")
        if not isinstance(context_items, Mapping):
            raise ValidationError(
                f"context_items must be a mapping, got {type(context_items).__name__}"
            )

        encoded: list[tuple[str, str]] = []
        for key, value in context_items.items():
            if not isinstance(key, str):
                raise ValidationError(f"Context keys must be strings, got {key!r}")
            if not key:
                raise ValidationError("Empty context keys are not allowed (context_items)")
            if value is None:
                raise ValidationError(f"Context value for '{key}' must not be None")
            encoded.append((keys.context_key(key), codec.value_to_string(value)))

        for key, value in encoded:
            self._set(key, value)
        return self
