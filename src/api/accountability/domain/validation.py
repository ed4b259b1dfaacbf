"""Structural validation predicates for the accountability domain.

These are pure checks with no side effects. Callers decide which error to
raise when a check fails.
"""

from __future__ import annotations

from collections.abc import Iterable

from accountability.domain.aggregates import Group, Member
from accountability.domain.value_objects import GroupId


def is_valid_group_name(name: str | None) -> bool:
    """A group name must contain at least one non-whitespace character."""
    return bool(name and name.strip())


def is_unique_group_name(name: str, groups: Iterable[Group]) -> bool:
    """Check a name against every existing group (exact, case-sensitive)."""
    return all(g.name != name for g in groups)


def is_unique_email(email: str, members: Iterable[Member]) -> bool:
    """Check an email against every existing member in any group.

    Comparison is exact; ``Ann@x.com`` and ``ann@x.com`` are distinct.
    """
    return all(m.email != email for m in members)


def belongs_to_group(member: Member | None, group_id: GroupId) -> bool:
    """Check that a member exists and is enrolled in the given group."""
    return member is not None and member.group_id == group_id
