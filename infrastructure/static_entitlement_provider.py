"""
Static premium entitlement provider.

Grants premium access to a fixed set of user IDs taken from settings.
Anonymous requests are never entitled.
"""

from typing import Iterable, Optional


class StaticEntitlementProvider:
    """Entitlement provider backed by a configured allow-list."""

    def __init__(self, premium_user_ids: Iterable[str]):
        self._premium_user_ids = frozenset(premium_user_ids)

    async def has_premium_access(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and user_id in self._premium_user_ids
