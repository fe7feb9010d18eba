"""Cadence Quick Start Example - Assembling scheduler properties."""

from datetime import timedelta

from cadence import (
    ConfigurationBuilder,
    JobFactory,
    UnsupportedOperationError,
    ValidationError,
)


class ContainerJobFactory(JobFactory):
    """Example job factory - resolves jobs from an application container."""

    def new_job(self, bundle, scheduler):
        return None


def configure_scheduler(scheduler):
    """Scheduler options for the billing service."""
    scheduler.instance_name("billing").instance_id("AUTO").thread_name("billing-main")
    scheduler.batch_time_window(timedelta(milliseconds=500)).max_batch_size(10)
    scheduler.idle_wait_time(timedelta(seconds=30))
    scheduler.db_failure_retry_interval(timedelta(seconds=15))
    scheduler.make_thread_daemon(True)
    scheduler.with_job_factory(ContainerJobFactory)
    scheduler.with_context({"region": "eu-west-1", "max_invoices": 500})


def main():
    """Main function to demonstrate Cadence usage."""
    print("=== Cadence Quick Start ===\n")

    # 1. Assemble properties through a configurator callback
    print("1. Building properties...")
    builder = ConfigurationBuilder.create(verbose=True)
    properties = builder.with_scheduler_configuration(configure_scheduler).build()

    for key, value in properties.items():
        print(f"   {key} = {value}")

    # 2. Rejected calls leave the property set untouched
    print("\n2. Rejected options...")
    scheduler = builder.scheduler_configuration()
    try:
        scheduler.max_batch_size(0)
    except ValidationError as e:
        print(f"   ✗ {e}")

    try:
        scheduler.with_job_factory(ContainerJobFactory, properties={"pool": "4"})
    except UnsupportedOperationError as e:
        print(f"   ✗ {e}")

    assert builder.build() == properties
    print("\n   ✓ Property set unchanged")


if __name__ == "__main__":
    main()
