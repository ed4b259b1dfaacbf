"""Member application service for the accountability bounded context."""

from __future__ import annotations

from accountability.application.observability import (
    DefaultMemberServiceProbe,
    MemberServiceProbe,
)
from accountability.domain.aggregates import Member
from accountability.domain.validation import belongs_to_group, is_unique_email
from accountability.domain.value_objects import GroupId, MemberId
from accountability.ports.exceptions import (
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from accountability.ports.repositories import ITrackerStore


class MemberService:
    """Application service for enrolling and removing group members.

    Every change to the member collection goes through TrackerState, which
    keeps the owning group's member_count and task_count in step.
    """

    def __init__(
        self,
        store: ITrackerStore,
        probe: MemberServiceProbe | None = None,
    ):
        """Initialize MemberService with dependencies.

        Args:
            store: Unit of work over the tracker collections
            probe: Optional domain probe for observability
        """
        self._store = store
        self._probe = probe or DefaultMemberServiceProbe()

    def add_member(self, group_id: GroupId, name: str, email: str) -> Member:
        """Enroll a new member in a group.

        Args:
            group_id: The group to join
            name: Member display name
            email: Email address, unique across all groups

        Returns:
            The created Member with zeroed counters

        Raises:
            ValidationError: If name or email is empty
            NotFoundError: If the group does not exist
            DuplicateEmailError: If any member already uses this email
        """
        try:
            if not name or not email:
                raise ValidationError("Name and email are required")

            with self._store.transaction() as state:
                if state.find_group(group_id) is None:
                    raise NotFoundError(f"Group {group_id.value} not found")

                if not is_unique_email(email, state.members):
                    raise DuplicateEmailError(
                        f"Member with email '{email}' already exists"
                    )

                member = Member.create(group_id=group_id, name=name, email=email)
                state.add_member(member)

            self._probe.member_added(
                group_id=group_id.value,
                member_id=member.id.value,
                email=email,
            )
            return member

        except Exception as e:
            self._probe.member_addition_failed(
                group_id=group_id.value,
                email=email,
                error=str(e),
            )
            raise

    def remove_member(self, group_id: GroupId, member_id: MemberId) -> None:
        """Remove a member and every task assigned to them.

        Args:
            group_id: The group the member belongs to
            member_id: The member to remove

        Raises:
            NotFoundError: If the member does not exist in this group
        """
        try:
            with self._store.transaction() as state:
                member = state.find_member(member_id)
                if member is None or not belongs_to_group(member, group_id):
                    raise NotFoundError(
                        f"Member {member_id.value} not found in group {group_id.value}"
                    )

                removed_tasks = state.remove_member(member)

            self._probe.member_removed(
                group_id=group_id.value,
                member_id=member_id.value,
                tasks_removed=len(removed_tasks),
            )

        except Exception as e:
            self._probe.member_removal_failed(
                group_id=group_id.value,
                member_id=member_id.value,
                error=str(e),
            )
            raise

    def list_members(self, group_id: GroupId) -> list[Member]:
        """List a group's members in storage order.

        Raises:
            NotFoundError: If the group does not exist
        """
        state = self._store.snapshot()
        if state.find_group(group_id) is None:
            raise NotFoundError(f"Group {group_id.value} not found")
        return state.members_of(group_id)
