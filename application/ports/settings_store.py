"""
Settings store port (interface).

Persisted user settings consumed by routine generation. The store is an
external collaborator read once per generation request, before the
synchronous pipeline starts.
"""

from typing import Protocol


class SettingsStore(Protocol):
    """Repository interface for persisted routine settings."""

    async def get_transition_duration(self) -> int:
        """
        Get the configured transition duration.

        Returns:
            Seconds between stretches, 0 meaning transitions are disabled
        """
        ...

    async def set_transition_duration(self, seconds: int) -> int:
        """
        Persist a new transition duration.

        Args:
            seconds: Seconds between stretches (0-10)

        Returns:
            The stored value
        """
        ...
