"""Observability probes for accountability infrastructure."""

from accountability.infrastructure.observability.store_probe import (
    DefaultStorageProbe,
    DefaultStoreProbe,
    StorageProbe,
    StoreProbe,
)

__all__ = [
    "DefaultStorageProbe",
    "DefaultStoreProbe",
    "StorageProbe",
    "StoreProbe",
]
