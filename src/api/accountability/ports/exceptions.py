"""Domain exceptions for the accountability bounded context.

These exceptions represent expected, recoverable conditions raised by the
service layer. Each carries a message naming the specific reason, and an
operation that raises one leaves every collection unchanged.
"""


class TrackerError(Exception):
    """Base class for all accountability errors."""

    pass


class ValidationError(TrackerError):
    """Raised when a required field is missing, empty or out of range."""

    pass


class DuplicateNameError(TrackerError):
    """Raised when creating a group whose name already exists.

    Names are compared exactly and case-sensitively across all groups.
    """

    pass


class DuplicateEmailError(TrackerError):
    """Raised when enrolling a member whose email is already in use.

    Emails are unique across every member of every group.
    """

    pass


class InvalidAssignmentError(TrackerError):
    """Raised when a task is assigned to a member outside its group.

    This covers both an unknown member id and a member enrolled in a
    different group.
    """

    pass


class AlreadyCompletedError(TrackerError):
    """Raised when completing a task that is already completed.

    Completion credits points exactly once, so a second call is reported
    rather than applied.
    """

    pass


class NotFoundError(TrackerError):
    """Raised when a referenced group, member or task does not exist."""

    pass


class PartialCommitError(TrackerError):
    """Raised when a commit failed after some collections were written.

    The collections are left mutually inconsistent. Nothing in the store
    repairs this; ``written`` lists the collections already replaced so the
    caller can decide what to do.
    """

    def __init__(self, message: str, written: tuple[str, ...]):
        super().__init__(message)
        self.written = written
