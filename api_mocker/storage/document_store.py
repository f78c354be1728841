"""
Persistence for generated documentation.

Provides a uniform save/load interface over an opaque key-value blob,
either held in memory or in a JSON file on disk. The simulator reads the
documentation through this interface and hands back replacement documents
after successful mutations.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from api_mocker.domain.constants import DEFAULT_STORE_PATH, STORE_ENV_VAR, STORE_KEY
from api_mocker.domain.models import Documentation

logger = logging.getLogger(__name__)


class DocumentStore(ABC):
    """Abstract holder of a single documentation blob."""

    @abstractmethod
    def _read_blob(self) -> str | None:
        """Return the serialized documentation, or None if nothing is saved."""

    @abstractmethod
    def _write_blob(self, blob: str) -> None:
        """Persist the serialized documentation."""

    @abstractmethod
    def clear(self) -> None:
        """Remove any saved documentation."""

    def save(self, documentation: Documentation) -> None:
        self._write_blob(json.dumps(documentation.to_dict(), ensure_ascii=False))
        logger.debug("Saved documentation with %d routes", len(documentation.routes))

    def load(self) -> Documentation | None:
        blob = self._read_blob()
        if blob is None:
            return None
        return Documentation.from_dict(json.loads(blob))

    def has_documentation(self) -> bool:
        documentation = self.load()
        return documentation is not None and documentation.has_routes()

    def update_json_data(self, data: Any) -> None:
        """Replace only the live document of the saved documentation."""
        documentation = self.load()
        if documentation is None:
            raise LookupError("No documentation saved")
        documentation.json_data = data
        self.save(documentation)


class InMemoryDocumentStore(DocumentStore):
    """Keeps the serialized blob in a dict under a string key.

    Storing text rather than objects keeps callers from aliasing saved state.
    """

    def __init__(self, key: str = STORE_KEY):
        self._key = key
        self._items: dict[str, str] = {}

    def _read_blob(self) -> str | None:
        return self._items.get(self._key)

    def _write_blob(self, blob: str) -> None:
        self._items[self._key] = blob

    def clear(self) -> None:
        self._items.pop(self._key, None)
        logger.debug("Cleared in-memory documentation %s", self._key)


class JsonFileDocumentStore(DocumentStore):
    """Keeps documentation in a JSON file mapping keys to blobs.

    Writes go through a temp file in the same directory and an atomic
    replace, so readers never observe a half-written file.
    """

    def __init__(self, path: str | os.PathLike, key: str = STORE_KEY):
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        with open(self._path, encoding="utf-8") as f:
            return json.load(f)

    def _write_all(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False)
            os.replace(tmp_path, self._path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def _read_blob(self) -> str | None:
        return self._read_all().get(self._key)

    def _write_blob(self, blob: str) -> None:
        items = self._read_all()
        items[self._key] = blob
        self._write_all(items)

    def clear(self) -> None:
        items = self._read_all()
        if items.pop(self._key, None) is not None:
            self._write_all(items)
            logger.debug("Cleared documentation %s from %s", self._key, self._path)


def default_store_path() -> str:
    """Store location from the environment, else the working-directory default."""
    return os.environ.get(STORE_ENV_VAR) or DEFAULT_STORE_PATH
