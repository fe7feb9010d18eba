"""Custom exceptions for Cadence."""


class ConfigurationError(Exception):
    """Base exception for configuration assembly errors."""

    pass


class ValidationError(ConfigurationError, ValueError):
    """
    An argument violates the constraint of a configuration option.

    Common causes:
        - Empty instance name, instance id, or thread name
        - Non-positive max batch size
        - Empty key in a context mapping
        - Component type that does not implement the slot's capability

    Note:
        The rejected call writes nothing. Properties set by earlier calls
        are kept.
    """

    pass


class NullArgumentError(ConfigurationError, TypeError):
    """
    A required configurator or mapping argument is None.

    Solution:
        Pass a callable to with_scheduler_configuration() and a mapping
        (an empty dict is fine) to with_context().
    """

    pass


class UnsupportedOperationError(ConfigurationError, NotImplementedError):
    """
    The option is recognized but not implemented yet.

    Examples:
        - Auxiliary properties for a component slot
          (with_job_factory(MyFactory, properties={...}))
        - with_type_load_helper()

    Note:
        These calls fail loudly instead of being silently ignored.
    """

    pass
