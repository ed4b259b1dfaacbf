"""Protocol for member application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class MemberServiceProbe(Protocol):
    """Domain probe for member application service operations."""

    def member_added(self, group_id: str, member_id: str, email: str) -> None:
        """Record that a member was enrolled in a group."""
        ...

    def member_addition_failed(self, group_id: str, email: str, error: str) -> None:
        """Record that enrolling a member failed."""
        ...

    def member_removed(self, group_id: str, member_id: str, tasks_removed: int) -> None:
        """Record that a member and their tasks were removed."""
        ...

    def member_removal_failed(self, group_id: str, member_id: str, error: str) -> None:
        """Record that removing a member failed."""
        ...


class DefaultMemberServiceProbe:
    """Default implementation of MemberServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._logger = logger or structlog.get_logger()

    def member_added(self, group_id: str, member_id: str, email: str) -> None:
        self._logger.info(
            "member_added",
            group_id=group_id,
            member_id=member_id,
            email=email,
        )

    def member_addition_failed(self, group_id: str, email: str, error: str) -> None:
        self._logger.warning(
            "member_addition_failed",
            group_id=group_id,
            email=email,
            error=error,
        )

    def member_removed(self, group_id: str, member_id: str, tasks_removed: int) -> None:
        self._logger.info(
            "member_removed",
            group_id=group_id,
            member_id=member_id,
            tasks_removed=tasks_removed,
        )

    def member_removal_failed(self, group_id: str, member_id: str, error: str) -> None:
        self._logger.warning(
            "member_removal_failed",
            group_id=group_id,
            member_id=member_id,
            error=error,
        )
