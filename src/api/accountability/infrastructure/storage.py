"""Storage provider adapters.

Two adapters implement the StorageProvider port:

- InMemoryStorageProvider keeps collections in a dict and copies records in
  and out, so callers never share mutable state with the store.
- JsonFileStorageProvider keeps all three collections in one JSON document
  and replaces that document atomically, which lets it also satisfy
  AtomicStorageProvider.
"""

from __future__ import annotations

import copy
import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from accountability.infrastructure.observability import (
    DefaultStorageProbe,
    StorageProbe,
)
from accountability.ports.storage import CollectionName, Record


class InMemoryStorageProvider:
    """Dict-backed provider for tests and ephemeral use.

    Saves replace one collection at a time, so this provider is not atomic
    across collections.
    """

    def __init__(self, initial: Mapping[CollectionName, list[Record]] | None = None):
        self._collections: dict[CollectionName, list[Record]] = {
            CollectionName(name): copy.deepcopy(records)
            for name, records in (initial or {}).items()
        }

    def load_collection(self, name: CollectionName) -> list[Record]:
        return copy.deepcopy(self._collections.get(name, []))

    def save_collection(self, name: CollectionName, records: list[Record]) -> None:
        self._collections[name] = copy.deepcopy(records)


class JsonFileStorageProvider:
    """Single-document JSON file provider.

    The document is an object keyed by collection name. A missing file, a
    file that fails to parse, or a key holding something other than a list
    all load as an empty collection.
    """

    def __init__(self, path: Path | str, probe: StorageProbe | None = None):
        self._path = Path(path)
        self._probe = probe or DefaultStorageProbe()

    @property
    def path(self) -> Path:
        return self._path

    def load_collection(self, name: CollectionName) -> list[Record]:
        records = self._read_document().get(name.value, [])
        if not isinstance(records, list):
            self._probe.collection_unreadable(
                path=str(self._path),
                collection=name.value,
                error="collection is not a list",
            )
            return []
        return records

    def save_collection(self, name: CollectionName, records: list[Record]) -> None:
        self.save_collections({name: records})

    def save_collections(self, collections: Mapping[CollectionName, list[Record]]) -> None:
        """Replace the given collections in one atomic file swap."""
        document = self._read_document()
        for name, records in collections.items():
            document[CollectionName(name).value] = records
        self._write_document(document)

    def _read_document(self) -> dict:
        if not self._path.exists():
            return {}

        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            self._probe.collection_unreadable(
                path=str(self._path),
                collection=None,
                error=str(e),
            )
            return {}

        if not isinstance(document, dict):
            self._probe.collection_unreadable(
                path=str(self._path),
                collection=None,
                error="document is not an object",
            )
            return {}
        return document

    def _write_document(self, document: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)

        # Write beside the target so os.replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
