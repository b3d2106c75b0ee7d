"""Flat JSON file configuration store."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from artzyful.services.catalog import ConfigStore

logger = logging.getLogger(__name__)


@dataclass
class JsonFileConfigStore(ConfigStore):
    """Stores each record as ``<data_dir>/<key>.json``.

    Writes overwrite the whole file; concurrent writers are last-writer-wins.
    """

    data_dir: Path

    def get(self, key: str) -> dict[str, object] | None:
        """Return the record stored in the key's file, if readable."""
        path = self._path(key)
        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring unreadable config file", extra={"path": str(path)})
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring non-object config file", extra={"path": str(path)})
            return None
        return data

    def put(self, key: str, value: dict[str, object]) -> None:
        """Overwrite the key's file with the record."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(json.dumps(value, indent=2), encoding="utf-8")

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"
