"""Analytics engine: pure functions over a group's members and tasks.

Nothing here reads storage or mutates its input. Every function returns
None as the sentinel for an empty input where the figure is undefined.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import UTC, datetime

from accountability.application.value_objects import LeaderboardEntry
from accountability.domain.aggregates import Member, Task
from accountability.domain.value_objects import to_deadline


def top_performer(members: Sequence[Member]) -> Member | None:
    """Return the member with the most points.

    Ties go to the member encountered first in the input order.
    """
    if not members:
        return None
    return max(members, key=lambda m: m.total_points)


def productivity_score(members: Sequence[Member]) -> float | None:
    """Average points per completed task across the members.

    Returns 0.0 when nobody has completed anything, and None for an empty
    member set.
    """
    if not members:
        return None

    completed = sum(m.tasks_completed for m in members)
    if completed == 0:
        return 0.0
    return round(sum(m.total_points for m in members) / completed, 2)


def workload_distribution(members: Sequence[Member]) -> float | None:
    """Average number of tasks (pending plus completed) per member."""
    if not members:
        return None
    return round(sum(m.workload for m in members) / len(members), 2)


def overdue_percentage(
    tasks: Sequence[Task],
    now: datetime | None = None,
) -> float | None:
    """Percentage of tasks that are still pending past their deadline.

    Args:
        tasks: The tasks to inspect
        now: Reference time, defaults to the current UTC time; a naive value
            is read as UTC

    Returns:
        A value on a 0-100 scale rounded to one decimal place, or None when
        there are no tasks
    """
    if not tasks:
        return None

    now = to_deadline(now) if now else datetime.now(UTC)
    overdue = sum(1 for t in tasks if t.is_overdue(now))
    return round(overdue / len(tasks) * 100, 1)


def leaderboard(members: Sequence[Member]) -> list[LeaderboardEntry]:
    """Rank members by points, highest first.

    The sort is stable, so members with equal points keep their input
    order and still receive distinct ranks.
    """
    ranked = sorted(members, key=lambda m: m.total_points, reverse=True)
    return [
        LeaderboardEntry(
            member_id=m.id.value,
            name=m.name,
            total_points=m.total_points,
            tasks_completed=m.tasks_completed,
            rank=position,
        )
        for position, m in enumerate(ranked, start=1)
    ]
