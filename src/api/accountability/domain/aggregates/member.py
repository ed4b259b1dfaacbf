"""Member entity for the accountability context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from accountability.domain.value_objects import GroupId, MemberId


@dataclass
class Member:
    """A person belonging to exactly one group.

    Members accumulate points by completing the tasks assigned to them.

    Counters:
    - total_points: sum of points over completed assigned tasks
    - tasks_completed: number of completed assigned tasks
    - tasks_pending: number of assigned tasks not yet completed
    """

    id: MemberId
    name: str
    email: str
    group_id: GroupId
    total_points: int = 0
    tasks_completed: int = 0
    tasks_pending: int = 0
    joined_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def create(cls, group_id: GroupId, name: str, email: str) -> Member:
        """Factory method for enrolling a new member with zeroed counters.

        Args:
            group_id: The group the member joins (immutable afterwards)
            name: Display name
            email: Email address used for duplicate detection

        Returns:
            A new Member with a generated id
        """
        return cls(
            id=MemberId.generate(),
            name=name,
            email=email,
            group_id=group_id,
        )

    @property
    def workload(self) -> int:
        """Total tasks this member carries, finished or not."""
        return self.tasks_pending + self.tasks_completed

    def task_assigned(self) -> None:
        self.tasks_pending += 1

    def task_unassigned(self) -> None:
        """Drop one pending task, floored at zero."""
        self.tasks_pending = max(0, self.tasks_pending - 1)

    def task_completed(self, points: int) -> None:
        """Credit a completed task.

        The pending decrement is floored at zero so a drifted counter can
        never go negative.
        """
        self.total_points += points
        self.tasks_completed += 1
        self.tasks_pending = max(0, self.tasks_pending - 1)
