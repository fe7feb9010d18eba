"""Property keys understood by the scheduler factory."""

SCHEDULER_PREFIX = "quartz.scheduler"
CONTEXT_PREFIX = "quartz.context."

INSTANCE_NAME = f"{SCHEDULER_PREFIX}.instanceName"
INSTANCE_ID = f"{SCHEDULER_PREFIX}.instanceId"
INSTANCE_ID_GENERATOR_TYPE = f"{SCHEDULER_PREFIX}.instanceIdGenerator.type"
THREAD_NAME = f"{SCHEDULER_PREFIX}.threadName"
MAKE_THREAD_DAEMON = f"{SCHEDULER_PREFIX}.makeSchedulerThreadDaemon"
BATCH_TIME_WINDOW = f"{SCHEDULER_PREFIX}.batchTriggerAcquisitionFireAheadTimeWindow"
MAX_BATCH_SIZE = f"{SCHEDULER_PREFIX}.batchTriggerAcquisitionMaxCount"
EXPORTER_TYPE = f"{SCHEDULER_PREFIX}.exporter.type"
PROXY = f"{SCHEDULER_PREFIX}.proxy"
PROXY_TYPE = f"{SCHEDULER_PREFIX}.proxy.type"
IDLE_WAIT_TIME = f"{SCHEDULER_PREFIX}.idleWaitTime"
JOB_FACTORY_TYPE = f"{SCHEDULER_PREFIX}.jobFactory.type"
DB_FAILURE_RETRY_INTERVAL = f"{SCHEDULER_PREFIX}.dbFailureRetryInterval"
TYPE_LOAD_HELPER_TYPE = f"{SCHEDULER_PREFIX}.typeLoadHelper.type"
INTERRUPT_JOBS_ON_SHUTDOWN = f"{SCHEDULER_PREFIX}.interruptJobsOnShutdown"
INTERRUPT_JOBS_ON_SHUTDOWN_WITH_WAIT = f"{SCHEDULER_PREFIX}.interruptJobsOnShutdownWithWait"


def context_key(name: str) -> str:
    """Namespace a scheduler context entry name (casing kept as given)."""
    return CONTEXT_PREFIX + name
