"""Flat string-keyed property store."""

from collections.abc import Iterator


class PropertyStore:
    """
    Ordered ``str -> str`` accumulator for scheduler properties.

    Setting an existing key overwrites its value (last write wins) while
    keeping its original position, so iteration order is deterministic.

    Not thread-safe: a store is meant to be filled by one thread, from
    ``ConfigurationBuilder.create()`` through ``build()``.

    Usage:
        >>> store = PropertyStore()
        >>> store.set("quartz.scheduler.instanceName", "main")
        >>> store.get("quartz.scheduler.instanceName")
        'main'
    """

    def __init__(self) -> None:
        self._properties: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        """Set a property, replacing any previous value."""
        self._properties[key] = value

    def get(self, key: str, default: str | None = None) -> str | None:
        """
        Get a property value.

        Args:
            key: Property key
            default: Returned when the key is absent

        Returns:
            Stored value, or ``default`` if not set
        """
        return self._properties.get(key, default)

    def snapshot(self) -> dict[str, str]:
        """Return a copy of all properties, detached from the store."""
        return dict(self._properties)

    def keys(self) -> list[str]:
        """List property keys in insertion order."""
        return list(self._properties.keys())

    def __len__(self) -> int:
        """Return number of properties."""
        return len(self._properties)

    def __contains__(self, key: object) -> bool:
        """Check if a property is set."""
        return key in self._properties

    def __iter__(self) -> Iterator[str]:
        """Iterate over property keys."""
        return iter(self._properties)

    def __repr__(self) -> str:
        return f"PropertyStore({self._properties!r})"
