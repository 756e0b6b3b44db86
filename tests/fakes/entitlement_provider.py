"""
Fake entitlement provider for testing.
"""

from typing import Iterable, Optional


class FakeEntitlementProvider:
    """
    In-memory fake implementation of EntitlementProvider.

    Either everyone is entitled (``grant_all``) or only the listed users.
    """

    def __init__(self, grant_all: bool = False, premium_user_ids: Iterable[str] = ()):
        self._grant_all = grant_all
        self._premium_user_ids = set(premium_user_ids)
        self.checked_users = []

    async def has_premium_access(self, user_id: Optional[str]) -> bool:
        self.checked_users.append(user_id)
        return self._grant_all or (user_id is not None and user_id in self._premium_user_ids)
