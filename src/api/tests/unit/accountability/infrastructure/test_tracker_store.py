"""Unit tests for TrackerStore transactions and commit behavior."""

from unittest.mock import create_autospec

import pytest

from accountability.application.services import (
    GroupService,
    MemberService,
    TaskService,
)
from accountability.domain.aggregates import Group
from accountability.infrastructure import (
    InMemoryStorageProvider,
    JsonFileStorageProvider,
    TrackerStore,
)
from accountability.infrastructure.observability import StoreProbe
from accountability.ports.exceptions import PartialCommitError
from accountability.ports.repositories import ITrackerStore
from accountability.ports.storage import CollectionName


class FailingStorageProvider(InMemoryStorageProvider):
    """In-memory provider whose saves to one collection blow up."""

    def __init__(self):
        super().__init__()
        self.fail_on: CollectionName | None = None

    def save_collection(self, name, records):
        if name == self.fail_on:
            raise OSError(f"disk full writing {name.value}")
        super().save_collection(name, records)


@pytest.fixture
def failing_provider() -> FailingStorageProvider:
    return FailingStorageProvider()


class TestTransaction:
    def test_satisfies_store_protocol(self, store):
        assert isinstance(store, ITrackerStore)

    def test_commits_on_clean_exit(self, store, provider):
        with store.transaction() as state:
            state.add_group(Group.create(name="Alpha"))

        assert [r["name"] for r in provider.load_collection(CollectionName.GROUPS)] == [
            "Alpha"
        ]

    def test_discards_state_when_block_raises(self, store, provider):
        with pytest.raises(RuntimeError):
            with store.transaction() as state:
                state.add_group(Group.create(name="Alpha"))
                raise RuntimeError("boom")

        assert provider.load_collection(CollectionName.GROUPS) == []

    def test_snapshot_changes_are_not_persisted(self, store, provider):
        state = store.snapshot()
        state.add_group(Group.create(name="Alpha"))

        assert provider.load_collection(CollectionName.GROUPS) == []

    def test_probe_records_rollback(self, provider):
        probe = create_autospec(StoreProbe, instance=True)
        store = TrackerStore(provider, probe=probe)

        with pytest.raises(ValueError):
            with store.transaction():
                raise ValueError("rejected")

        probe.transaction_rolled_back.assert_called_once_with(error="rejected")
        probe.state_committed.assert_not_called()


class TestMalformedRecords:
    """Records that fail validation are left out of the snapshot."""

    @pytest.fixture
    def seeded(self, provider, store, future_deadline):
        group = GroupService(store=store).create_group("Alpha")
        ann = MemberService(store=store).add_member(group.id, "Ann", "ann@x.com")
        TaskService(store=store).create_task(
            group.id, ann.id, "Ship", None, future_deadline, "low", 5
        )
        tasks = provider.load_collection(CollectionName.TASKS)
        provider.save_collection(
            CollectionName.TASKS, [*tasks, {**tasks[0], "id": "bad", "points": None}]
        )
        return group

    def test_bad_task_record_does_not_break_reads(self, store, seeded):
        assert [g.name for g in GroupService(store=store).list_groups()] == ["Alpha"]
        assert [t.title for t in TaskService(store=store).list_tasks(seeded.id)] == [
            "Ship"
        ]

    def test_non_object_record_is_skipped(self, provider, store):
        provider.save_collection(CollectionName.GROUPS, ["not a record", 42])

        assert store.snapshot().groups == []

    def test_skipped_record_is_reported(self, provider, seeded):
        probe = create_autospec(StoreProbe, instance=True)

        TrackerStore(provider, probe=probe).snapshot()

        probe.record_skipped.assert_called_once()
        kwargs = probe.record_skipped.call_args[1]
        assert kwargs["collection"] == "tasks"
        assert kwargs["index"] == 1
        assert "points" in kwargs["error"]

    def test_next_commit_drops_skipped_record(self, provider, store, seeded):
        GroupService(store=store).create_group("Beta")

        ids = [r["id"] for r in provider.load_collection(CollectionName.TASKS)]
        assert "bad" not in ids
        assert len(ids) == 1


class TestPartialCommit:
    """A non-atomic provider can leave drift behind; the store reports it."""

    def test_failure_on_first_write_leaves_everything_unchanged(self, failing_provider):
        store = TrackerStore(failing_provider)
        failing_provider.fail_on = CollectionName.GROUPS

        with pytest.raises(OSError):
            GroupService(store=store).create_group("Alpha")

        assert failing_provider.load_collection(CollectionName.GROUPS) == []

    def test_failure_between_writes_leaves_counters_drifted(self, failing_provider):
        store = TrackerStore(failing_provider)
        group = GroupService(store=store).create_group("Alpha")
        failing_provider.fail_on = CollectionName.MEMBERS

        with pytest.raises(PartialCommitError) as exc_info:
            MemberService(store=store).add_member(group.id, "Ann", "ann@x.com")

        assert exc_info.value.written == ("groups",)
        assert isinstance(exc_info.value.__cause__, OSError)

        # Drift is left in place: the group counts a member that was never saved
        state = store.snapshot()
        assert state.find_group(group.id).member_count == 1
        assert state.members_of(group.id) == []

    def test_probe_records_partial_commit(self, failing_provider):
        probe = create_autospec(StoreProbe, instance=True)
        store = TrackerStore(failing_provider, probe=probe)
        group = GroupService(store=store).create_group("Alpha")
        failing_provider.fail_on = CollectionName.TASKS

        with pytest.raises(PartialCommitError):
            MemberService(store=store).add_member(group.id, "Ann", "ann@x.com")

        probe.commit_partially_applied.assert_called_once()
        kwargs = probe.commit_partially_applied.call_args[1]
        assert kwargs["written"] == ("groups", "members")
        assert kwargs["failed"] == "tasks"


class TestAtomicCommit:
    def test_uses_single_write_for_atomic_provider(self, tmp_path):
        provider = JsonFileStorageProvider(tmp_path / "store.json")
        store = TrackerStore(provider)

        assert store.is_atomic

        group = GroupService(store=store).create_group("Alpha")
        MemberService(store=store).add_member(group.id, "Ann", "ann@x.com")

        reopened = TrackerStore(JsonFileStorageProvider(tmp_path / "store.json"))
        state = reopened.snapshot()
        assert state.find_group(group.id).member_count == 1
        assert len(state.members_of(group.id)) == 1

    def test_in_memory_store_is_not_atomic(self, store):
        assert not store.is_atomic
