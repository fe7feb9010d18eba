"""Canonical string encodings for configuration values.

Every rendering is locale-invariant so the property set reads the same on
any host.
"""

from datetime import timedelta
from typing import Any

_MICROSECONDS_PER_MILLISECOND = 1000


def duration_to_string(duration: timedelta) -> str:
    """
    Render a duration as whole milliseconds.

    Fractions of a millisecond are truncated toward zero, never rounded.

    Args:
        duration: Duration to encode

    Returns:
        Base-10 integer string (e.g., ``"500"``)

    Examples:
        >>> duration_to_string(timedelta(milliseconds=500))
        '500'
        >>> duration_to_string(timedelta(microseconds=1_500_900))
        '1500'
    """
    # timedelta normalizes to (days, seconds, microseconds); work in integer microseconds
    micros = (duration.days * 86_400 + duration.seconds) * 1_000_000 + duration.microseconds
    if micros < 0:
        millis = -(-micros // _MICROSECONDS_PER_MILLISECOND)
    else:
        millis = micros // _MICROSECONDS_PER_MILLISECOND
    return str(millis)


def bool_to_string(value: bool) -> str:
    """Render a boolean as ``"True"`` or ``"False"``."""
    return "True" if value else "False"


def int_to_string(value: int) -> str:
    """Render an integer in base 10 without separators."""
    return str(int(value))


def type_name(descriptor: type | str) -> str:
    """
    Render a type descriptor as a module-qualified name.

    The name is what the scheduler factory imports later. Whether it can
    actually be imported is not checked here.

    Args:
        descriptor: Class object, or a dotted import path used verbatim

    Returns:
        Qualified name (e.g., ``"myapp.jobs.MyJobFactory"``)
    """
    if isinstance(descriptor, str):
        return descriptor
    return f"{descriptor.__module__}.{descriptor.__qualname__}"


def value_to_string(value: Any) -> str:
    """Render an arbitrary context value using the canonical encodings."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return bool_to_string(value)
    if isinstance(value, int):
        return int_to_string(value)
    if isinstance(value, timedelta):
        return duration_to_string(value)
    if isinstance(value, type):
        return type_name(value)
    return str(value)
