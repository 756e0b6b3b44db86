"""
JSON-backed stretch catalog.

Loads the static catalog asset once and serves it read-only to every
generation request.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from application.exceptions import CatalogLoadError
from models.stretch import Stretch

logger = logging.getLogger(__name__)

_CATALOG_ADAPTER = TypeAdapter(List[Stretch])


class JsonCatalogRepository:
    """
    Catalog repository reading a JSON array of stretches.

    The file is parsed on first access and cached for the lifetime of the
    repository. Catalog entries use the asset's camelCase ``hasDemo`` key.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the repository.

        Args:
            path: Location of the catalog JSON file
        """
        self._path = Path(path)
        self._stretches: Optional[List[Stretch]] = None
        self._by_id: Dict[Union[int, str], Stretch] = {}

    def get_all(self) -> List[Stretch]:
        return list(self._load())

    def get_by_id(self, stretch_id: Union[int, str]) -> Optional[Stretch]:
        self._load()
        return self._by_id.get(stretch_id)

    def _load(self) -> List[Stretch]:
        if self._stretches is not None:
            return self._stretches

        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise CatalogLoadError(f"Catalog file not found: {self._path}") from e
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(f"Failed to read catalog {self._path}: {e}") from e

        try:
            stretches = _CATALOG_ADAPTER.validate_python(raw)
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid catalog {self._path}: {e}") from e

        self._stretches = stretches
        self._by_id = {s.id: s for s in stretches}
        logger.info(f"Loaded {len(stretches)} stretches from {self._path}")
        return stretches
