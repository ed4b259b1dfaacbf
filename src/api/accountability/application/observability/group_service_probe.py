"""Protocol for group application service observability.

Defines the interface for domain probes that capture application-level
domain events for group service operations.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class GroupServiceProbe(Protocol):
    """Domain probe for group application service operations."""

    def group_created(self, group_id: str, name: str) -> None:
        """Record that a group was created."""
        ...

    def group_creation_failed(self, name: str, error: str) -> None:
        """Record that group creation failed."""
        ...

    def group_deleted(
        self,
        group_id: str,
        members_removed: int,
        tasks_removed: int,
    ) -> None:
        """Record that a group and its contents were deleted."""
        ...

    def group_deletion_failed(self, group_id: str, error: str) -> None:
        """Record that group deletion failed."""
        ...

    def group_not_found(self, group_id: str) -> None:
        """Record that a group lookup found nothing."""
        ...


class DefaultGroupServiceProbe:
    """Default implementation of GroupServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._logger = logger or structlog.get_logger()

    def group_created(self, group_id: str, name: str) -> None:
        """Record that a group was created."""
        self._logger.info("group_created", group_id=group_id, name=name)

    def group_creation_failed(self, name: str, error: str) -> None:
        """Record that group creation failed."""
        self._logger.warning("group_creation_failed", name=name, error=error)

    def group_deleted(
        self,
        group_id: str,
        members_removed: int,
        tasks_removed: int,
    ) -> None:
        """Record that a group and its contents were deleted."""
        self._logger.info(
            "group_deleted",
            group_id=group_id,
            members_removed=members_removed,
            tasks_removed=tasks_removed,
        )

    def group_deletion_failed(self, group_id: str, error: str) -> None:
        """Record that group deletion failed."""
        self._logger.warning("group_deletion_failed", group_id=group_id, error=error)

    def group_not_found(self, group_id: str) -> None:
        """Record that a group lookup found nothing."""
        self._logger.debug("group_not_found", group_id=group_id)
