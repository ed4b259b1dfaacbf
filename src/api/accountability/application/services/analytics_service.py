"""Analytics application service for the accountability bounded context.

Loads the current state and feeds it to the pure analytics functions. No
result is cached or persisted; every call recomputes from storage.
"""

from __future__ import annotations

from datetime import datetime

from accountability.application import analytics
from accountability.application.observability import (
    AnalyticsServiceProbe,
    DefaultAnalyticsServiceProbe,
)
from accountability.application.value_objects import DashboardSummary, GroupAnalytics
from accountability.domain.value_objects import GroupId
from accountability.ports.exceptions import NotFoundError
from accountability.ports.repositories import ITrackerStore


class AnalyticsService:
    """Read-side service deriving productivity figures."""

    def __init__(
        self,
        store: ITrackerStore,
        recent_groups_limit: int = 5,
        probe: AnalyticsServiceProbe | None = None,
    ):
        """Initialize AnalyticsService with dependencies.

        Args:
            store: Unit of work over the tracker collections
            recent_groups_limit: How many groups the dashboard lists
            probe: Optional domain probe for observability
        """
        self._store = store
        self._recent_groups_limit = recent_groups_limit
        self._probe = probe or DefaultAnalyticsServiceProbe()

    def group_analytics(
        self,
        group_id: GroupId,
        now: datetime | None = None,
    ) -> GroupAnalytics:
        """Compute every analytic for one group.

        Args:
            group_id: The group to analyse
            now: Reference time for overdue checks, defaults to current UTC

        Returns:
            GroupAnalytics for the group

        Raises:
            NotFoundError: If the group does not exist
        """
        state = self._store.snapshot()
        if state.find_group(group_id) is None:
            raise NotFoundError(f"Group {group_id.value} not found")

        members = state.members_of(group_id)
        tasks = state.tasks_of(group_id)

        result = GroupAnalytics(
            group_id=group_id.value,
            top_performer=analytics.top_performer(members),
            productivity_score=analytics.productivity_score(members),
            workload_distribution=analytics.workload_distribution(members),
            overdue_percentage=analytics.overdue_percentage(tasks, now=now),
            leaderboard=tuple(analytics.leaderboard(members)),
        )

        self._probe.group_analytics_computed(
            group_id=group_id.value,
            member_count=len(members),
            task_count=len(tasks),
            overdue_percentage=result.overdue_percentage,
        )
        return result

    def dashboard_summary(self) -> DashboardSummary:
        """Summarize totals across all groups.

        ``recent_groups`` holds the first groups in storage order, which is
        creation order.
        """
        state = self._store.snapshot()

        summary = DashboardSummary(
            total_groups=len(state.groups),
            total_members=len(state.members),
            completed_tasks=sum(1 for t in state.tasks if t.is_completed),
            total_points=sum(m.total_points for m in state.members),
            recent_groups=tuple(state.groups[: self._recent_groups_limit]),
        )

        self._probe.dashboard_summary_computed(
            total_groups=summary.total_groups,
            total_members=summary.total_members,
        )
        return summary
