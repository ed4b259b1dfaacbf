"""Domain probes for accountability persistence.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events from the storage adapters and the consistent
store: unreadable collections, skipped records and partial commits.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class StorageProbe(Protocol):
    """Domain probe for storage provider operations."""

    def collection_unreadable(
        self,
        path: str,
        collection: str | None,
        error: str,
    ) -> None:
        """Record that stored data could not be parsed and was read as empty."""
        ...


class StoreProbe(Protocol):
    """Domain probe for TrackerStore transactions."""

    def state_loaded(
        self,
        group_count: int,
        member_count: int,
        task_count: int,
    ) -> None:
        """Record that a snapshot of all collections was loaded."""
        ...

    def record_skipped(self, collection: str, index: int, error: str) -> None:
        """Record that a stored record failed validation and was left out."""
        ...

    def state_committed(self, atomic: bool) -> None:
        """Record that a snapshot was written back."""
        ...

    def transaction_rolled_back(self, error: str) -> None:
        """Record that a transaction was discarded without writing."""
        ...

    def commit_partially_applied(
        self,
        written: tuple[str, ...],
        failed: str,
        error: str,
    ) -> None:
        """Record that a commit stopped part-way, leaving drift behind."""
        ...


class DefaultStorageProbe:
    """Default implementation of StorageProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._logger = logger or structlog.get_logger()

    def collection_unreadable(
        self,
        path: str,
        collection: str | None,
        error: str,
    ) -> None:
        self._logger.warning(
            "collection_unreadable",
            path=path,
            collection=collection,
            error=error,
        )


class DefaultStoreProbe:
    """Default implementation of StoreProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._logger = logger or structlog.get_logger()

    def state_loaded(
        self,
        group_count: int,
        member_count: int,
        task_count: int,
    ) -> None:
        self._logger.debug(
            "state_loaded",
            group_count=group_count,
            member_count=member_count,
            task_count=task_count,
        )

    def record_skipped(self, collection: str, index: int, error: str) -> None:
        self._logger.warning(
            "record_skipped",
            collection=collection,
            index=index,
            error=error,
        )

    def state_committed(self, atomic: bool) -> None:
        self._logger.debug("state_committed", atomic=atomic)

    def transaction_rolled_back(self, error: str) -> None:
        self._logger.debug("transaction_rolled_back", error=error)

    def commit_partially_applied(
        self,
        written: tuple[str, ...],
        failed: str,
        error: str,
    ) -> None:
        self._logger.error(
            "commit_partially_applied",
            written=list(written),
            failed=failed,
            error=error,
        )
