"""Storage provider protocols (ports) for the accountability context.

The core depends on nothing but whole-collection load and replace. Each
collection is an ordered list of JSON-serializable records.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

Record = dict[str, Any]


class CollectionName(StrEnum):
    """Names of the persisted collections, in commit order."""

    GROUPS = "groups"
    MEMBERS = "members"
    TASKS = "tasks"


@runtime_checkable
class StorageProvider(Protocol):
    """Key-based load/save of whole collections.

    No transactional guarantee is assumed beyond replacing one collection
    at a time.
    """

    def load_collection(self, name: CollectionName) -> list[Record]:
        """Load a collection.

        Args:
            name: The collection to load

        Returns:
            The records in storage order, or an empty list if the collection
            is absent or cannot be parsed
        """
        ...

    def save_collection(self, name: CollectionName, records: list[Record]) -> None:
        """Replace a collection entirely (no merge).

        Args:
            name: The collection to replace
            records: The new records, in order
        """
        ...


@runtime_checkable
class AtomicStorageProvider(StorageProvider, Protocol):
    """A provider that can replace several collections as one unit."""

    def save_collections(self, collections: Mapping[CollectionName, list[Record]]) -> None:
        """Replace all given collections together, or none of them."""
        ...
