"""Ports (interfaces) for the accountability context."""

from accountability.ports.repositories import ITrackerStore
from accountability.ports.storage import (
    AtomicStorageProvider,
    CollectionName,
    StorageProvider,
)

__all__ = [
    "AtomicStorageProvider",
    "ITrackerStore",
    "CollectionName",
    "StorageProvider",
]
