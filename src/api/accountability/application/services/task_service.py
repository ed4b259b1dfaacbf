"""Task application service for the accountability bounded context.

Orchestrates task assignment, completion and deletion. Each operation runs
in one store transaction so that the task collection and the counters on the
owning group and assignee are written from the same in-memory state.
"""

from __future__ import annotations

from datetime import date, datetime

from accountability.application.observability import (
    DefaultTaskServiceProbe,
    TaskServiceProbe,
)
from accountability.domain.aggregates import Task
from accountability.domain.validation import belongs_to_group
from accountability.domain.value_objects import GroupId, MemberId, TaskId, TaskPriority
from accountability.ports.exceptions import (
    AlreadyCompletedError,
    InvalidAssignmentError,
    NotFoundError,
    ValidationError,
)
from accountability.ports.repositories import ITrackerStore


class TaskService:
    """Application service for task management."""

    def __init__(
        self,
        store: ITrackerStore,
        probe: TaskServiceProbe | None = None,
    ):
        """Initialize TaskService with dependencies.

        Args:
            store: Unit of work over the tracker collections
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultTaskServiceProbe()

    def create_task(
        self,
        group_id: GroupId,
        member_id: MemberId | None,
        title: str,
        description: str | None,
        deadline: date | datetime,
        priority: TaskPriority | str,
        points: int,
    ) -> Task:
        """Create a pending task assigned to a member of the group.

        Args:
            group_id: Owning group
            member_id: Assignee; must be enrolled in group_id
            title: Task title
            description: Optional free text
            deadline: Due date or datetime
            priority: Informational priority label
            points: Non-negative reward credited on completion

        Returns:
            The created Task

        Raises:
            ValidationError: If no member is selected, the title is blank,
                the deadline is missing, points are negative or the priority
                is unknown
            NotFoundError: If the group does not exist
            InvalidAssignmentError: If the member does not exist or belongs
                to a different group
        """
        try:
            if member_id is None or not member_id.value:
                raise ValidationError("Please assign a member to the task")
            if not title or not title.strip():
                raise ValidationError("Task title is required")
            if not isinstance(deadline, date):
                raise ValidationError(
                    f"Task deadline must be a date or datetime, got {deadline!r}"
                )
            if isinstance(points, bool) or not isinstance(points, int) or points < 0:
                raise ValidationError(
                    f"Task points must be a non-negative integer, got {points!r}"
                )
            try:
                task_priority = TaskPriority(priority)
            except ValueError as e:
                raise ValidationError(f"Unknown task priority: {priority!r}") from e

            with self._store.transaction() as state:
                if state.find_group(group_id) is None:
                    raise NotFoundError(f"Group {group_id.value} not found")

                member = state.find_member(member_id)
                if member is None or not belongs_to_group(member, group_id):
                    raise InvalidAssignmentError(
                        f"Member {member_id.value} is not in group {group_id.value}"
                    )

                task = Task.create(
                    group_id=group_id,
                    member_id=member_id,
                    title=title,
                    deadline=deadline,
                    points=points,
                    description=description,
                    priority=task_priority,
                )
                state.add_task(task)

            self._probe.task_created(
                group_id=group_id.value,
                task_id=task.id.value,
                member_id=member_id.value,
                points=points,
            )
            return task

        except Exception as e:
            self._probe.task_creation_failed(
                group_id=group_id.value,
                member_id=member_id.value if member_id else None,
                error=str(e),
            )
            raise

    def complete_task(self, task_id: TaskId) -> Task:
        """Complete a task and credit its points to the assignee.

        Completion is not idempotent: points are credited once, and a second
        call is rejected.

        Args:
            task_id: The task to complete

        Returns:
            The completed Task

        Raises:
            NotFoundError: If the task does not exist
            AlreadyCompletedError: If the task is already completed
        """
        try:
            with self._store.transaction() as state:
                task = state.find_task(task_id)
                if task is None:
                    raise NotFoundError(f"Task {task_id.value} not found")
                if task.is_completed:
                    raise AlreadyCompletedError(
                        f"Task {task_id.value} is already completed"
                    )

                member = state.complete_task(task)

            self._probe.task_completed(
                task_id=task_id.value,
                member_id=task.assigned_member_id.value,
                points=task.points,
                total_points=member.total_points if member else None,
            )
            return task

        except Exception as e:
            self._probe.task_completion_failed(task_id=task_id.value, error=str(e))
            raise

    def delete_task(self, group_id: GroupId, task_id: TaskId) -> None:
        """Delete a task from a group.

        Args:
            group_id: The group owning the task
            task_id: The task to delete

        Raises:
            NotFoundError: If the task does not exist in this group
        """
        try:
            with self._store.transaction() as state:
                task = state.find_task(task_id)
                if task is None or task.group_id != group_id:
                    raise NotFoundError(
                        f"Task {task_id.value} not found in group {group_id.value}"
                    )

                was_pending = not task.is_completed
                state.remove_task(task)

            self._probe.task_deleted(
                group_id=group_id.value,
                task_id=task_id.value,
                was_pending=was_pending,
            )

        except Exception as e:
            self._probe.task_deletion_failed(
                group_id=group_id.value,
                task_id=task_id.value,
                error=str(e),
            )
            raise

    def list_tasks(self, group_id: GroupId) -> list[Task]:
        """List a group's tasks in storage order.

        Raises:
            NotFoundError: If the group does not exist
        """
        state = self._store.snapshot()
        if state.find_group(group_id) is None:
            raise NotFoundError(f"Group {group_id.value} not found")
        return state.tasks_of(group_id)
