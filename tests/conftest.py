"""Common test fixtures and utilities."""

from collections.abc import Callable
from typing import Any

import pytest

from cadence import ConfigurationBuilder, PropertyStore, SchedulerConfigurationBuilder


def _assert_rejected_without_effect(
    store: PropertyStore,
    call: Callable[[], Any],
    error: type[Exception],
    match: str | None = None,
) -> None:
    """
    Assert that a call raises and leaves the store exactly as it was.

    Args:
        store: Store the call writes to
        call: Zero-argument callable performing the rejected operation
        error: Expected exception type
        match: Optional regex the error message must match

    Example:
        assert_rejected(builder.store, lambda: scheduler.max_batch_size(0), ValidationError)
    """
    before = store.snapshot()
    with pytest.raises(error, match=match):
        call()
    assert store.snapshot() == before
    assert list(store) == list(before)


@pytest.fixture
def assert_rejected():
    """Atomicity assertion for rejected builder calls."""
    return _assert_rejected_without_effect


@pytest.fixture
def builder() -> ConfigurationBuilder:
    """Create an empty root builder."""
    return ConfigurationBuilder.create()


@pytest.fixture
def scheduler(builder: ConfigurationBuilder) -> SchedulerConfigurationBuilder:
    """Scheduler builder bound to the ``builder`` fixture's store."""
    return builder.scheduler_configuration()
