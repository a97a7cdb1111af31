"""
Key-value string stores.

Every value is a string; callers serialize their own data (JSON, "true").
Read and write problems surface as PersistenceUnavailable so callers can
fall back to defaults.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .config import StorageConfig
from .errors import PersistenceUnavailable

log = logging.getLogger("storage")


class KeyValueStore:
    """Base interface: get / set / remove string values."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str):
        raise NotImplementedError

    def remove(self, key: str):
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Keeps values in a dict. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str):
        self.data[key] = value

    def remove(self, key: str):
        self.data.pop(key, None)


class JsonFileStore(KeyValueStore):
    """
    Keeps all keys in one JSON object file.

    The file is re-read on every get and rewritten on every set, so two
    stores pointing at the same file always agree.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        config: Optional[StorageConfig] = None
    ):
        self.config = config or StorageConfig()
        self.path = Path(path) if path is not None else self.config.storage_path()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            text = self.path.read_text(encoding=self.config.ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceUnavailable(f"Could not read {self.path}: {e}") from e

        if not text.strip():
            return {}

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise PersistenceUnavailable(f"{self.path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise PersistenceUnavailable(f"{self.path} does not hold a JSON object")

        return data

    def _write_all(self, data: Dict[str, str]):
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(data, ensure_ascii=False, indent=2),
                encoding=self.config.ENCODING,
            )
            tmp_path.replace(self.path)
        except OSError as e:
            raise PersistenceUnavailable(f"Could not write {self.path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise PersistenceUnavailable(f"Value for {key!r} is not a string")
        return value

    def set(self, key: str, value: str):
        try:
            data = self._read_all()
        except PersistenceUnavailable as e:
            # A corrupt file is replaced rather than blocking every write
            log.warning("Starting a fresh store: %s", e)
            data = {}
        data[key] = value
        self._write_all(data)
        log.debug("Saved %s (%d chars) to %s", key, len(value), self.path)

    def remove(self, key: str):
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)
