"""Protocol for analytics application service observability."""

from __future__ import annotations

from typing import Protocol

import structlog


class AnalyticsServiceProbe(Protocol):
    """Domain probe for analytics queries."""

    def group_analytics_computed(
        self,
        group_id: str,
        member_count: int,
        task_count: int,
        overdue_percentage: float | None,
    ) -> None:
        """Record that analytics were derived for a group."""
        ...

    def dashboard_summary_computed(self, total_groups: int, total_members: int) -> None:
        """Record that the cross-group summary was derived."""
        ...


class DefaultAnalyticsServiceProbe:
    """Default implementation of AnalyticsServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
    ):
        self._logger = logger or structlog.get_logger()

    def group_analytics_computed(
        self,
        group_id: str,
        member_count: int,
        task_count: int,
        overdue_percentage: float | None,
    ) -> None:
        self._logger.debug(
            "group_analytics_computed",
            group_id=group_id,
            member_count=member_count,
            task_count=task_count,
            overdue_percentage=overdue_percentage,
        )

    def dashboard_summary_computed(self, total_groups: int, total_members: int) -> None:
        self._logger.debug(
            "dashboard_summary_computed",
            total_groups=total_groups,
            total_members=total_members,
        )
