"""TrackerStore: consistent read/compute/write over a storage provider.

Each service operation runs as one transaction:

1. load all three collections into a TrackerState
2. let the caller mutate that state in memory
3. write every collection back, but only if the block exited cleanly

A block that raises writes nothing, so a rejected operation never leaves a
trace. A stored record that fails validation is skipped and reported
through the probe instead of failing the whole load.

Cross-collection atomicity at commit time depends on the provider: an
AtomicStorageProvider writes all collections as one unit, while a plain
StorageProvider is written one collection at a time. In the second case a
failure between writes leaves the collections mutually inconsistent. That
drift is reported through PartialCommitError and the probe, and is not
repaired here.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from pydantic import ValidationError as PydanticValidationError

from accountability.domain.aggregates import TrackerState
from accountability.infrastructure.observability import (
    DefaultStoreProbe,
    StoreProbe,
)
from accountability.infrastructure.records import (
    GroupRecord,
    MemberRecord,
    TaskRecord,
)
from accountability.ports.exceptions import PartialCommitError
from accountability.ports.storage import (
    AtomicStorageProvider,
    CollectionName,
    Record,
    StorageProvider,
)


class TrackerStore:
    """ITrackerStore implementation backed by a StorageProvider."""

    def __init__(
        self,
        provider: StorageProvider,
        probe: StoreProbe | None = None,
    ):
        """Initialize the store.

        Args:
            provider: Where the collections live
            probe: Optional domain probe for observability
        """
        self._provider = provider
        self._probe = probe or DefaultStoreProbe()

    @property
    def is_atomic(self) -> bool:
        """Whether commits replace all collections as a single unit."""
        return isinstance(self._provider, AtomicStorageProvider)

    def snapshot(self) -> TrackerState:
        state = TrackerState(
            groups=self._load(CollectionName.GROUPS, GroupRecord),
            members=self._load(CollectionName.MEMBERS, MemberRecord),
            tasks=self._load(CollectionName.TASKS, TaskRecord),
        )
        self._probe.state_loaded(
            group_count=len(state.groups),
            member_count=len(state.members),
            task_count=len(state.tasks),
        )
        return state

    def _load(
        self,
        name: CollectionName,
        model: type[GroupRecord | MemberRecord | TaskRecord],
    ) -> list:
        """Load one collection, skipping records that fail validation.

        A skipped record is dropped from storage by the next commit.
        """
        entities = []
        for index, record in enumerate(self._provider.load_collection(name)):
            try:
                entities.append(model.model_validate(record).to_domain())
            except PydanticValidationError as e:
                self._probe.record_skipped(
                    collection=name.value,
                    index=index,
                    error=str(e),
                )
        return entities

    @contextmanager
    def transaction(self) -> Iterator[TrackerState]:
        state = self.snapshot()
        try:
            yield state
        except Exception as e:
            self._probe.transaction_rolled_back(error=str(e))
            raise

        self._commit(state)

    def _commit(self, state: TrackerState) -> None:
        collections: dict[CollectionName, list[Record]] = {
            CollectionName.GROUPS: [
                GroupRecord.from_domain(g).to_record() for g in state.groups
            ],
            CollectionName.MEMBERS: [
                MemberRecord.from_domain(m).to_record() for m in state.members
            ],
            CollectionName.TASKS: [
                TaskRecord.from_domain(t).to_record() for t in state.tasks
            ],
        }

        if isinstance(self._provider, AtomicStorageProvider):
            self._provider.save_collections(collections)
            self._probe.state_committed(atomic=True)
            return

        written: list[str] = []
        for name, records in collections.items():
            try:
                self._provider.save_collection(name, records)
            except Exception as e:
                if not written:
                    raise
                self._probe.commit_partially_applied(
                    written=tuple(written),
                    failed=name.value,
                    error=str(e),
                )
                raise PartialCommitError(
                    f"Commit failed writing '{name.value}' after writing "
                    f"{', '.join(written)}; collections are now inconsistent",
                    written=tuple(written),
                ) from e
            written.append(name.value)

        self._probe.state_committed(atomic=False)
