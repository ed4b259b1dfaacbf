"""Pydantic record models for persisted collections.

Records are the JSON shape of each entity inside a collection. Keys are
camelCase and timestamps are ISO-8601 strings, so a collection written by
one provider can be read by any other.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from accountability.domain.aggregates import Group, Member, Task
from accountability.domain.value_objects import (
    GroupId,
    MemberId,
    TaskId,
    TaskPriority,
    TaskStatus,
    to_deadline,
)
from accountability.ports.storage import Record


class _RecordModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_record(self) -> Record:
        """Dump to a JSON-serializable dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)


class GroupRecord(_RecordModel):
    """Persisted shape of a Group."""

    id: str
    name: str
    description: str = ""
    created_at: datetime
    member_count: int = Field(default=0, ge=0)
    task_count: int = Field(default=0, ge=0)

    @classmethod
    def from_domain(cls, group: Group) -> GroupRecord:
        return cls(
            id=group.id.value,
            name=group.name,
            description=group.description,
            created_at=group.created_at,
            member_count=group.member_count,
            task_count=group.task_count,
        )

    def to_domain(self) -> Group:
        return Group(
            id=GroupId(value=self.id),
            name=self.name,
            description=self.description,
            created_at=self.created_at,
            member_count=self.member_count,
            task_count=self.task_count,
        )


class MemberRecord(_RecordModel):
    """Persisted shape of a Member."""

    id: str
    name: str
    email: str
    group_id: str
    total_points: int = 0
    tasks_completed: int = Field(default=0, ge=0)
    tasks_pending: int = Field(default=0, ge=0)
    joined_at: datetime

    @classmethod
    def from_domain(cls, member: Member) -> MemberRecord:
        return cls(
            id=member.id.value,
            name=member.name,
            email=member.email,
            group_id=member.group_id.value,
            total_points=member.total_points,
            tasks_completed=member.tasks_completed,
            tasks_pending=member.tasks_pending,
            joined_at=member.joined_at,
        )

    def to_domain(self) -> Member:
        return Member(
            id=MemberId(value=self.id),
            name=self.name,
            email=self.email,
            group_id=GroupId(value=self.group_id),
            total_points=self.total_points,
            tasks_completed=self.tasks_completed,
            tasks_pending=self.tasks_pending,
            joined_at=self.joined_at,
        )


class TaskRecord(_RecordModel):
    """Persisted shape of a Task.

    ``deadline`` may be stored as a bare date (``2025-03-01``) or a full
    timestamp; both load as an aware UTC datetime.
    """

    id: str
    title: str
    description: str = ""
    deadline: datetime
    priority: TaskPriority = TaskPriority.MEDIUM
    points: int = Field(ge=0)
    status: TaskStatus = TaskStatus.PENDING
    assigned_member_id: str
    group_id: str
    created_at: datetime
    completed_at: datetime | None = None

    @classmethod
    def from_domain(cls, task: Task) -> TaskRecord:
        return cls(
            id=task.id.value,
            title=task.title,
            description=task.description,
            deadline=task.deadline,
            priority=task.priority,
            points=task.points,
            status=task.status,
            assigned_member_id=task.assigned_member_id.value,
            group_id=task.group_id.value,
            created_at=task.created_at,
            completed_at=task.completed_at,
        )

    def to_domain(self) -> Task:
        return Task(
            id=TaskId(value=self.id),
            title=self.title,
            description=self.description,
            deadline=to_deadline(self.deadline),
            priority=self.priority,
            points=self.points,
            status=self.status,
            assigned_member_id=MemberId(value=self.assigned_member_id),
            group_id=GroupId(value=self.group_id),
            created_at=self.created_at,
            completed_at=self.completed_at,
        )
