"""End-to-end tests for assembling scheduler property sets."""

from datetime import timedelta

import pytest

from cadence import (
    ConfigurationBuilder,
    JobFactory,
    PropertyStore,
    SchedulerConfigurationBuilder,
    ValidationError,
)

BATCH_TIME_WINDOW = "quartz.scheduler.batchTriggerAcquisitionFireAheadTimeWindow"


class ContainerJobFactory(JobFactory):
    """Job factory resolving jobs from a container."""

    def new_job(self, bundle, scheduler):
        return None


def test_imports():
    """Test that all core imports work."""
    assert ConfigurationBuilder is not None
    assert SchedulerConfigurationBuilder is not None
    assert PropertyStore is not None


def test_batch_time_window_in_milliseconds():
    """Test that a 500 ms window is the only property written."""
    properties = (
        ConfigurationBuilder.create()
        .with_scheduler_configuration(
            lambda scheduler: scheduler.batch_time_window(timedelta(milliseconds=500))
        )
        .build()
    )

    assert properties == {BATCH_TIME_WINDOW: "500"}


def test_zero_max_batch_size_leaves_store_empty():
    """Test that a rejected batch size produces an empty property set."""
    builder = ConfigurationBuilder.create()

    with pytest.raises(ValidationError):
        builder.with_scheduler_configuration(lambda scheduler: scheduler.max_batch_size(0))

    assert builder.build() == {}


def test_context_with_empty_key_writes_nothing():
    """Test that one empty key discards the whole context mapping."""
    builder = ConfigurationBuilder.create()

    with pytest.raises(ValidationError):
        builder.with_scheduler_configuration(
            lambda scheduler: scheduler.with_context({"a": "1", "": "x"})
        )

    assert builder.build() == {}


def test_full_configuration():
    """Test assembling every supported scheduler option."""
    properties = (
        ConfigurationBuilder.create()
        .with_scheduler_configuration(
            lambda scheduler: scheduler.instance_name("billing")
            .instance_id("AUTO")
            .with_instance_id_generator("myapp.ids.HostnameGenerator")
            .thread_name("billing-main")
            .make_thread_daemon(True)
            .batch_time_window(timedelta(seconds=1))
            .max_batch_size(25)
            .idle_wait_time(timedelta(seconds=30))
            .db_failure_retry_interval(timedelta(seconds=15))
            .interrupt_jobs_on_shutdown(True)
            .interrupt_jobs_on_shutdown_with_wait(False)
            .with_job_factory(ContainerJobFactory)
            .with_context({"region": "eu-west-1"})
        )
        .build()
    )

    assert properties == {
        "quartz.scheduler.instanceName": "billing",
        "quartz.scheduler.instanceId": "AUTO",
        "quartz.scheduler.instanceIdGenerator.type": "myapp.ids.HostnameGenerator",
        "quartz.scheduler.threadName": "billing-main",
        "quartz.scheduler.makeSchedulerThreadDaemon": "True",
        BATCH_TIME_WINDOW: "1000",
        "quartz.scheduler.batchTriggerAcquisitionMaxCount": "25",
        "quartz.scheduler.idleWaitTime": "30000",
        "quartz.scheduler.dbFailureRetryInterval": "15000",
        "quartz.scheduler.interruptJobsOnShutdown": "True",
        "quartz.scheduler.interruptJobsOnShutdownWithWait": "False",
        "quartz.scheduler.jobFactory.type": f"{__name__}.ContainerJobFactory",
        "quartz.context.region": "eu-west-1",
    }


def test_build_twice_is_identical():
    """Test that build() is idempotent."""
    builder = ConfigurationBuilder.create().with_scheduler_configuration(
        lambda scheduler: scheduler.instance_name("main").proxy(False)
    )

    assert builder.build() == builder.build()
