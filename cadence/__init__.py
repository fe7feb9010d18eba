"""
Cadence - Fluent configuration assembly for scheduler factories

Usage:
    from datetime import timedelta

    from cadence import ConfigurationBuilder, JobFactory

    class ContainerJobFactory(JobFactory):
        def new_job(self, bundle, scheduler):
            ...

    properties = (
        ConfigurationBuilder.create()
        .with_scheduler_configuration(
            lambda scheduler: scheduler.instance_name("billing")
            .instance_id("AUTO")
            .thread_name("billing-scheduler")
            .batch_time_window(timedelta(milliseconds=500))
            .max_batch_size(10)
            .idle_wait_time(timedelta(seconds=30))
            .with_job_factory(ContainerJobFactory)
            .with_context({"region": "eu-west-1"})
        )
        .build()
    )

    # properties is a flat dict[str, str], e.g.
    # {
    #     "quartz.scheduler.instanceName": "billing",
    #     "quartz.scheduler.batchTriggerAcquisitionFireAheadTimeWindow": "500",
    #     "quartz.scheduler.jobFactory.type": "myapp.jobs.ContainerJobFactory",
    #     "quartz.context.region": "eu-west-1",
    #     ...
    # }
"""

from cadence.core import (
    ComponentSlot,
    ConfigurationBuilder,
    ConfigurationError,
    InstanceIdGenerator,
    JobFactory,
    NullArgumentError,
    PropertyStore,
    RemotableSchedulerProxyFactory,
    SchedulerConfigurationBuilder,
    SchedulerExporter,
    TypeLoadHelper,
    UnsupportedOperationError,
    ValidationError,
)

__all__ = [
    # Builders
    "ConfigurationBuilder",
    "SchedulerConfigurationBuilder",
    "PropertyStore",
    "ComponentSlot",
    # Exceptions
    "ConfigurationError",
    "ValidationError",
    "NullArgumentError",
    "UnsupportedOperationError",
    # Component Capabilities
    "JobFactory",
    "InstanceIdGenerator",
    "SchedulerExporter",
    "RemotableSchedulerProxyFactory",
    "TypeLoadHelper",
]
