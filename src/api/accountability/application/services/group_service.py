"""Group application service for the accountability bounded context.

Orchestrates group creation and cascading deletion inside a single store
transaction.
"""

from __future__ import annotations

from accountability.application.observability import (
    DefaultGroupServiceProbe,
    GroupServiceProbe,
)
from accountability.domain.aggregates import Group
from accountability.domain.validation import is_unique_group_name, is_valid_group_name
from accountability.domain.value_objects import GroupId
from accountability.ports.exceptions import (
    DuplicateNameError,
    NotFoundError,
    ValidationError,
)
from accountability.ports.repositories import ITrackerStore


class GroupService:
    """Application service for group management."""

    def __init__(
        self,
        store: ITrackerStore,
        probe: GroupServiceProbe | None = None,
    ):
        """Initialize GroupService with dependencies.

        Args:
            store: Unit of work over the tracker collections
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultGroupServiceProbe()

    def create_group(self, name: str, description: str | None = None) -> Group:
        """Create a new group with zeroed counters.

        Args:
            name: Group name, unique across all groups (case-sensitive)
            description: Optional free text

        Returns:
            The created Group

        Raises:
            ValidationError: If name is empty or whitespace only
            DuplicateNameError: If a group with exactly this name exists
        """
        try:
            if not is_valid_group_name(name):
                raise ValidationError("Group name is required")

            with self._store.transaction() as state:
                if not is_unique_group_name(name, state.groups):
                    raise DuplicateNameError(
                        f"Group with name '{name}' already exists"
                    )

                group = Group.create(name=name, description=description)
                state.add_group(group)

            self._probe.group_created(group_id=group.id.value, name=name)
            return group

        except Exception as e:
            self._probe.group_creation_failed(name=name, error=str(e))
            raise

    def delete_group(self, group_id: GroupId) -> None:
        """Delete a group along with all of its members and tasks.

        Args:
            group_id: The group to delete

        Raises:
            NotFoundError: If the group does not exist
        """
        try:
            with self._store.transaction() as state:
                group = state.find_group(group_id)
                if group is None:
                    raise NotFoundError(f"Group {group_id.value} not found")

                members, tasks = state.remove_group(group)

            self._probe.group_deleted(
                group_id=group_id.value,
                members_removed=len(members),
                tasks_removed=len(tasks),
            )

        except Exception as e:
            self._probe.group_deletion_failed(group_id=group_id.value, error=str(e))
            raise

    def get_group(self, group_id: GroupId) -> Group:
        """Get a group by ID.

        Raises:
            NotFoundError: If the group does not exist
        """
        group = self._store.snapshot().find_group(group_id)
        if group is None:
            self._probe.group_not_found(group_id=group_id.value)
            raise NotFoundError(f"Group {group_id.value} not found")
        return group

    def list_groups(self) -> list[Group]:
        """List all groups in storage order."""
        return self._store.snapshot().groups
