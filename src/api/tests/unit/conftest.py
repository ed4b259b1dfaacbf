"""Unit test fixtures with in-memory storage."""

from datetime import UTC, datetime, timedelta

import pytest

from accountability.application.services import (
    AnalyticsService,
    GroupService,
    MemberService,
    TaskService,
)
from accountability.infrastructure import InMemoryStorageProvider, TrackerStore


@pytest.fixture
def provider() -> InMemoryStorageProvider:
    """Provide an empty in-memory storage provider."""
    return InMemoryStorageProvider()


@pytest.fixture
def store(provider) -> TrackerStore:
    """Provide a TrackerStore over the in-memory provider."""
    return TrackerStore(provider)


@pytest.fixture
def group_service(store) -> GroupService:
    return GroupService(store=store)


@pytest.fixture
def member_service(store) -> MemberService:
    return MemberService(store=store)


@pytest.fixture
def task_service(store) -> TaskService:
    return TaskService(store=store)


@pytest.fixture
def analytics_service(store) -> AnalyticsService:
    return AnalyticsService(store=store)


@pytest.fixture
def future_deadline() -> datetime:
    return datetime.now(UTC) + timedelta(days=7)


@pytest.fixture
def past_deadline() -> datetime:
    return datetime.now(UTC) - timedelta(days=7)
