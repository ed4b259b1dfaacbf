"""Value objects for the accountability domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers and domain concepts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time
from enum import StrEnum

from ulid import ULID


def _check_id(value: str, kind: str) -> None:
    # Records written before ULIDs carry millisecond-timestamp ids
    if value.isascii() and value.isdigit():
        return
    try:
        ULID.from_str(value)
    except ValueError as e:
        raise ValueError(f"Invalid {kind}: {value}") from e


@dataclass(frozen=True)
class GroupId:
    """Identifier for a Group.

    Uses ULID for sortability and collision-free generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> GroupId:
        """Generate a new GroupId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> GroupId:
        """Create GroupId from string value.

        Args:
            value: ULID string, or the numeric id of a legacy record

        Returns:
            GroupId instance

        Raises:
            ValueError: If value is neither a ULID nor a legacy numeric id
        """
        _check_id(value, "GroupId")
        return cls(value=value)


@dataclass(frozen=True)
class MemberId:
    """Identifier for a Member.

    Uses ULID for sortability and collision-free generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> MemberId:
        """Generate a new MemberId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> MemberId:
        """Create MemberId from string value.

        Raises:
            ValueError: If value is neither a ULID nor a legacy numeric id
        """
        _check_id(value, "MemberId")
        return cls(value=value)


@dataclass(frozen=True)
class TaskId:
    """Identifier for a Task."""

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> TaskId:
        """Generate a new TaskId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> TaskId:
        """Create TaskId from string value.

        Raises:
            ValueError: If value is neither a ULID nor a legacy numeric id
        """
        _check_id(value, "TaskId")
        return cls(value=value)


class TaskStatus(StrEnum):
    """Lifecycle state of a task.

    There are exactly two states; a task moves from PENDING to COMPLETED
    once and never back.
    """

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class TaskPriority(StrEnum):
    """Priority label carried by a task. Informational only."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def _missing_(cls, value: object) -> TaskPriority | None:
        # Accept "High", "HIGH" etc.
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None


def to_deadline(value: date | datetime) -> datetime:
    """Normalize a deadline to a timezone-aware UTC datetime.

    A plain date is read as midnight UTC at the start of that day, so a task
    due "today" counts as overdue for the whole of today. Naive datetimes are
    assumed to be UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime.combine(value, time.min, tzinfo=UTC)
