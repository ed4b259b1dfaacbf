"""Application-layer value objects for the accountability context.

Read-only view objects returned by analytics queries. They are derived on
every query and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass

from accountability.domain.aggregates import Group, Member


@dataclass(frozen=True)
class LeaderboardEntry:
    """One row of a group leaderboard.

    ``rank`` is the 1-based position after sorting; tied members get
    distinct consecutive ranks in their original order.
    """

    member_id: str
    name: str
    total_points: int
    tasks_completed: int
    rank: int


@dataclass(frozen=True)
class GroupAnalytics:
    """Productivity figures for one group.

    Fields that are undefined for an empty input are None.
    """

    group_id: str
    top_performer: Member | None
    productivity_score: float | None
    workload_distribution: float | None
    overdue_percentage: float | None
    leaderboard: tuple[LeaderboardEntry, ...]


@dataclass(frozen=True)
class DashboardSummary:
    """Totals across every group."""

    total_groups: int
    total_members: int
    completed_tasks: int
    total_points: int
    recent_groups: tuple[Group, ...]
