"""
Entitlement provider port (interface).

Resolves whether a requester may receive premium stretches. Backed by the
host's reward/subscription system.
"""

from typing import Optional, Protocol


class EntitlementProvider(Protocol):
    """Interface for premium entitlement checks."""

    async def has_premium_access(self, user_id: Optional[str]) -> bool:
        """
        Check premium entitlement.

        Args:
            user_id: The requesting user, None for anonymous requests

        Returns:
            True if premium stretches may be included
        """
        ...
