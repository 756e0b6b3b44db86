"""
Catalog repository port (interface).

This Protocol defines the contract for access to the stretch catalog.
Infrastructure implementations (e.g., the JSON asset loader) must satisfy
this interface.
"""

from typing import List, Optional, Protocol, Union

from models.stretch import Stretch


class CatalogRepository(Protocol):
    """
    Repository interface for the stretch catalog.

    The catalog is read-only reference data loaded once by the host and
    shared by every generation request.
    """

    def get_all(self) -> List[Stretch]:
        """
        Get every stretch in the catalog.

        Returns:
            List of catalog stretches (never mutated by callers)

        Raises:
            CatalogLoadError: If the catalog cannot be loaded
        """
        ...

    def get_by_id(self, stretch_id: Union[int, str]) -> Optional[Stretch]:
        """
        Get a stretch by its ID.

        Args:
            stretch_id: The stretch identifier

        Returns:
            Stretch if found, None otherwise
        """
        ...
