"""TrackerState: the consistency boundary over groups, members and tasks.

Every counter on Group and Member is a shadow of the task and member
collections. TrackerState owns all three collections at once and offers one
update method per mutation, so each mutation adjusts every related counter
in a single place instead of at scattered call sites.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from accountability.domain.aggregates.group import Group
from accountability.domain.aggregates.member import Member
from accountability.domain.aggregates.task import Task
from accountability.domain.value_objects import GroupId, MemberId, TaskId


@dataclass
class TrackerState:
    """In-memory snapshot of the three collections.

    Collections keep storage order. Lookups are linear scans; there is no
    secondary index.
    """

    groups: list[Group] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)
    tasks: list[Task] = field(default_factory=list)

    def find_group(self, group_id: GroupId) -> Group | None:
        return next((g for g in self.groups if g.id == group_id), None)

    def find_member(self, member_id: MemberId) -> Member | None:
        return next((m for m in self.members if m.id == member_id), None)

    def find_task(self, task_id: TaskId) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def members_of(self, group_id: GroupId) -> list[Member]:
        return [m for m in self.members if m.group_id == group_id]

    def tasks_of(self, group_id: GroupId) -> list[Task]:
        return [t for t in self.tasks if t.group_id == group_id]

    def tasks_assigned_to(self, member_id: MemberId) -> list[Task]:
        return [t for t in self.tasks if t.assigned_member_id == member_id]

    def add_group(self, group: Group) -> None:
        self.groups.append(group)

    def remove_group(self, group: Group) -> tuple[list[Member], list[Task]]:
        """Remove a group together with all of its members and tasks.

        Returns:
            The removed members and tasks
        """
        removed_members = self.members_of(group.id)
        removed_tasks = self.tasks_of(group.id)

        self.groups = [g for g in self.groups if g.id != group.id]
        self.members = [m for m in self.members if m.group_id != group.id]
        self.tasks = [t for t in self.tasks if t.group_id != group.id]

        return removed_members, removed_tasks

    def add_member(self, member: Member) -> None:
        """Enroll a member and bump the owning group's member_count.

        Raises:
            ValueError: If the member's group is not in this state
        """
        group = self._require_group(member.group_id)
        self.members.append(member)
        group.member_joined()

    def remove_member(self, member: Member) -> list[Task]:
        """Remove a member and every task assigned to them.

        The owning group's member_count drops by one and its task_count by
        the number of removed tasks, both floored at zero.

        Returns:
            The removed tasks
        """
        removed_tasks = self.tasks_assigned_to(member.id)

        self.members = [m for m in self.members if m.id != member.id]
        self.tasks = [t for t in self.tasks if t.assigned_member_id != member.id]

        group = self.find_group(member.group_id)
        if group is not None:
            group.member_left()
            for task in removed_tasks:
                if task.group_id == group.id:
                    group.task_removed()

        return removed_tasks

    def add_task(self, task: Task) -> None:
        """Record a new pending task against its group and assignee.

        Raises:
            ValueError: If the group or assignee is not in this state
        """
        group = self._require_group(task.group_id)
        member = self.find_member(task.assigned_member_id)
        if member is None:
            raise ValueError(f"Member {task.assigned_member_id} not found")

        self.tasks.append(task)
        group.task_added()
        member.task_assigned()

    def complete_task(self, task: Task, at: datetime | None = None) -> Member | None:
        """Complete a task and credit its assignee.

        Returns:
            The credited member, or None if the assignee no longer exists

        Raises:
            ValueError: If the task is already completed
        """
        task.complete(at)

        member = self.find_member(task.assigned_member_id)
        if member is not None:
            member.task_completed(task.points)
        return member

    def remove_task(self, task: Task) -> None:
        """Delete a task, releasing the assignee's pending slot if still pending."""
        if not task.is_completed:
            member = self.find_member(task.assigned_member_id)
            if member is not None:
                member.task_unassigned()

        self.tasks = [t for t in self.tasks if t.id != task.id]

        group = self.find_group(task.group_id)
        if group is not None:
            group.task_removed()

    def _require_group(self, group_id: GroupId) -> Group:
        group = self.find_group(group_id)
        if group is None:
            raise ValueError(f"Group {group_id} not found")
        return group
