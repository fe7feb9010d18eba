"""Capabilities a component type must provide to fill a slot.

The scheduler factory instantiates these types; Cadence only checks that
a type declares the capability and records its name. Third-party classes
that already implement the methods can be accepted without subclassing
through ``Capability.register(cls)``.
"""

from abc import ABC, abstractmethod
from typing import Any


class JobFactory(ABC):
    """Creates job instances for the scheduler when triggers fire."""

    @abstractmethod
    def new_job(self, bundle: Any, scheduler: Any) -> Any:
        """
        Create the job instance for a fired trigger.

        Args:
            bundle: Trigger fire bundle supplied by the scheduler
            scheduler: Scheduler requesting the job

        Returns:
            Job instance ready to execute
        """
        pass

    def return_job(self, job: Any) -> None:
        """Release a job instance after execution (optional hook)."""
        pass


class InstanceIdGenerator(ABC):
    """Generates the scheduler instance id when it is set to auto."""

    @abstractmethod
    def generate_instance_id(self) -> str:
        """Return a cluster-unique scheduler instance id."""
        pass


class SchedulerExporter(ABC):
    """Makes a scheduler reachable from other processes."""

    @abstractmethod
    def bind(self, scheduler: Any) -> None:
        """Expose the scheduler."""
        pass

    @abstractmethod
    def unbind(self, scheduler: Any) -> None:
        """Withdraw the scheduler."""
        pass


class RemotableSchedulerProxyFactory(ABC):
    """Builds a proxy to a scheduler running in another process."""

    @abstractmethod
    def get_proxy(self) -> Any:
        """Return a proxy to the remote scheduler."""
        pass


class TypeLoadHelper(ABC):
    """Loads types by name for the scheduler factory."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the helper before first use."""
        pass

    @abstractmethod
    def load_type(self, name: str) -> type | None:
        """Load a type from its qualified name."""
        pass
