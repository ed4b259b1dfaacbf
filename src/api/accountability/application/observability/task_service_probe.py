"""Protocol for task application service observability.

Task probes carry the point and counter values involved in each change so
that drifted counters can be traced back through the logs.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class TaskServiceProbe(Protocol):
    """Domain probe for task application service operations."""

    def task_created(
        self,
        group_id: str,
        task_id: str,
        member_id: str,
        points: int,
    ) -> None:
        """Record that a task was created and assigned."""
        ...

    def task_creation_failed(self, group_id: str, member_id: str | None, error: str) -> None:
        """Record that task creation failed."""
        ...

    def task_completed(
        self,
        task_id: str,
        member_id: str,
        points: int,
        total_points: int | None,
    ) -> None:
        """Record that a task was completed and its points credited."""
        ...

    def task_completion_failed(self, task_id: str, error: str) -> None:
        """Record that completing a task failed."""
        ...

    def task_deleted(self, group_id: str, task_id: str, was_pending: bool) -> None:
        """Record that a task was deleted."""
        ...

    def task_deletion_failed(self, group_id: str, task_id: str, error: str) -> None:
        """Record that deleting a task failed."""
        ...


class DefaultTaskServiceProbe:
    """Default implementation of TaskServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._logger = logger or structlog.get_logger()

    def task_created(
        self,
        group_id: str,
        task_id: str,
        member_id: str,
        points: int,
    ) -> None:
        self._logger.info(
            "task_created",
            group_id=group_id,
            task_id=task_id,
            member_id=member_id,
            points=points,
        )

    def task_creation_failed(self, group_id: str, member_id: str | None, error: str) -> None:
        self._logger.warning(
            "task_creation_failed",
            group_id=group_id,
            member_id=member_id,
            error=error,
        )

    def task_completed(
        self,
        task_id: str,
        member_id: str,
        points: int,
        total_points: int | None,
    ) -> None:
        self._logger.info(
            "task_completed",
            task_id=task_id,
            member_id=member_id,
            points=points,
            total_points=total_points,
        )

    def task_completion_failed(self, task_id: str, error: str) -> None:
        self._logger.warning("task_completion_failed", task_id=task_id, error=error)

    def task_deleted(self, group_id: str, task_id: str, was_pending: bool) -> None:
        self._logger.info(
            "task_deleted",
            group_id=group_id,
            task_id=task_id,
            was_pending=was_pending,
        )

    def task_deletion_failed(self, group_id: str, task_id: str, error: str) -> None:
        self._logger.warning(
            "task_deletion_failed",
            group_id=group_id,
            task_id=task_id,
            error=error,
        )
