"""
YAML-backed settings store.

Persists the routine settings (currently the transition duration) to a
YAML file shared by all users of the deployment.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from core.constants import MAX_TRANSITION_DURATION, MIN_TRANSITION_DURATION

logger = logging.getLogger(__name__)


class YamlSettingsStore:
    """
    Settings store reading and writing ``{"defaults": {...}}`` YAML documents.

    Reads fall back to the configured default when the file or the key is
    missing. Writes are atomic (tempfile + os.replace).
    """

    def __init__(self, path: Union[str, Path], default_transition_duration: int):
        self._path = Path(path)
        self._default_transition_duration = default_transition_duration

    async def get_transition_duration(self) -> int:
        defaults = self._read_defaults()
        value = defaults.get("transition_duration", self._default_transition_duration)
        try:
            seconds = int(value)
        except (TypeError, ValueError):
            logger.warning(
                f"Ignoring invalid transition_duration {value!r} in {self._path}"
            )
            return self._default_transition_duration
        return max(MIN_TRANSITION_DURATION, min(MAX_TRANSITION_DURATION, seconds))

    async def set_transition_duration(self, seconds: int) -> int:
        if not MIN_TRANSITION_DURATION <= seconds <= MAX_TRANSITION_DURATION:
            raise ValueError(
                f"Transition duration must be between {MIN_TRANSITION_DURATION} "
                f"and {MAX_TRANSITION_DURATION} seconds"
            )
        defaults = self._read_defaults()
        defaults["transition_duration"] = seconds
        self._write_defaults(defaults)
        logger.info(f"Saved transition duration {seconds}s to {self._path}")
        return seconds

    def _read_defaults(self) -> Dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with self._path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse settings file {self._path}: {e}") from e
        defaults = data.get("defaults") if isinstance(data, dict) else None
        return dict(defaults) if isinstance(defaults, dict) else {}

    def _write_defaults(self, defaults: Dict[str, Any]) -> None:
        """
        Write settings with an atomic replace.

        Raises:
            FileNotFoundError: If the settings directory cannot be created
            ValueError: If YAML serialization fails
            OSError: If the file write fails
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileNotFoundError(
                f"Cannot create settings directory {self._path.parent}: {e}"
            ) from e

        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=str(self._path.parent),
                suffix=".yaml",
                delete=False,
                encoding="utf-8",
            ) as tmp_file:
                tmp_path = tmp_file.name
                yaml.safe_dump(
                    {"defaults": defaults}, tmp_file, sort_keys=False, default_flow_style=False
                )
            os.replace(tmp_path, str(self._path))
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to serialize settings as YAML: {e}") from e
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise OSError(f"Failed to write settings file: {e}") from e
