"""Infrastructure adapters for the accountability context."""

from accountability.infrastructure.storage import (
    InMemoryStorageProvider,
    JsonFileStorageProvider,
)
from accountability.infrastructure.store import TrackerStore

__all__ = [
    "InMemoryStorageProvider",
    "JsonFileStorageProvider",
    "TrackerStore",
]
