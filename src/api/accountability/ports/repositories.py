"""Store protocol (port) for the accountability context.

Services never touch storage providers directly. They open a transaction on
an ITrackerStore, mutate the TrackerState it yields, and let the store write
the result back.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from accountability.domain.aggregates import TrackerState


@runtime_checkable
class ITrackerStore(Protocol):
    """Unit of work over the groups, members and tasks collections."""

    def snapshot(self) -> TrackerState:
        """Load a read-only view of the current state.

        Changes made to the returned state are never persisted.
        """
        ...

    def transaction(self) -> AbstractContextManager[TrackerState]:
        """Open a read/compute/write transaction.

        The yielded state is committed when the block exits cleanly. If the
        block raises, nothing is written and the exception propagates.

        Raises:
            PartialCommitError: If the commit failed after some collections
                were already written
        """
        ...
