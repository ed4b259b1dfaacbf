"""Task entity for the accountability context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from accountability.domain.value_objects import (
    GroupId,
    MemberId,
    TaskId,
    TaskPriority,
    TaskStatus,
    to_deadline,
)


@dataclass
class Task:
    """A point-valued unit of work assigned to one member of a group.

    Business rules:
    - status moves from PENDING to COMPLETED exactly once
    - completed_at is set on completion and never cleared
    - group_id and assigned_member_id are fixed at creation
    """

    id: TaskId
    title: str
    deadline: datetime
    points: int
    assigned_member_id: MemberId
    group_id: GroupId
    description: str = ""
    priority: TaskPriority = TaskPriority.MEDIUM
    status: TaskStatus = TaskStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    completed_at: datetime | None = None

    @classmethod
    def create(
        cls,
        group_id: GroupId,
        member_id: MemberId,
        title: str,
        deadline: date | datetime,
        points: int,
        description: str | None = None,
        priority: TaskPriority = TaskPriority.MEDIUM,
    ) -> Task:
        """Factory method for creating a new pending task.

        Args:
            group_id: Owning group
            member_id: Assignee, who must belong to group_id
            title: Short title
            deadline: Due date or datetime, normalized to UTC
            points: Non-negative reward credited on completion
            description: Optional free text
            priority: Informational priority label

        Returns:
            A new Task in PENDING status
        """
        return cls(
            id=TaskId.generate(),
            title=title,
            description=description or "",
            deadline=to_deadline(deadline),
            priority=priority,
            points=points,
            assigned_member_id=member_id,
            group_id=group_id,
        )

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def is_overdue(self, now: datetime) -> bool:
        """Check whether the task is still pending past its deadline.

        A naive ``now`` is read as UTC, the same as a naive deadline.
        """
        return not self.is_completed and self.deadline < to_deadline(now)

    def complete(self, at: datetime | None = None) -> None:
        """Mark the task as completed.

        Raises:
            ValueError: If the task is already completed
        """
        if self.is_completed:
            raise ValueError(f"Task {self.id} is already completed")

        self.status = TaskStatus.COMPLETED
        self.completed_at = at or datetime.now(UTC)
