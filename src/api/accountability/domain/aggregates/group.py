"""Group entity for the accountability context."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from accountability.domain.value_objects import GroupId


@dataclass
class Group:
    """A team container owning members and tasks.

    ``member_count`` and ``task_count`` are denormalized shadows of the
    member and task collections. They are only changed through
    ``TrackerState`` so that every mutation keeps them in step with the
    collections they count.
    """

    id: GroupId
    name: str
    description: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    member_count: int = 0
    task_count: int = 0

    @classmethod
    def create(cls, name: str, description: str | None = None) -> Group:
        """Factory method for creating a new group with zeroed counters.

        Args:
            name: The group name
            description: Optional free text

        Returns:
            A new Group with a generated id
        """
        return cls(
            id=GroupId.generate(),
            name=name,
            description=description or "",
        )

    def member_joined(self) -> None:
        self.member_count += 1

    def member_left(self) -> None:
        self.member_count = max(0, self.member_count - 1)

    def task_added(self) -> None:
        self.task_count += 1

    def task_removed(self) -> None:
        self.task_count = max(0, self.task_count - 1)
