"""Domain entities for the accountability context.

Entities are the core business objects containing state and business logic.
They enforce invariants and business rules without depending on infrastructure.
"""

from accountability.domain.aggregates.group import Group
from accountability.domain.aggregates.member import Member
from accountability.domain.aggregates.task import Task
from accountability.domain.aggregates.tracker import TrackerState

__all__ = [
    "Group",
    "Member",
    "Task",
    "TrackerState",
]
