"""Service wiring for the accountability context.

Builds the storage provider selected by settings and the services that
share one TrackerStore over it. The calling application shell holds the
returned bundle and passes explicit ids into each operation; nothing here
keeps a "selected group" between calls.
"""

from __future__ import annotations

from dataclasses import dataclass

from accountability.application.services import (
    AnalyticsService,
    GroupService,
    MemberService,
    TaskService,
)
from accountability.infrastructure import (
    InMemoryStorageProvider,
    JsonFileStorageProvider,
    TrackerStore,
)
from accountability.ports.storage import StorageProvider
from infrastructure.logging import configure_logging
from infrastructure.settings import Settings, StorageSettings, get_settings


@dataclass(frozen=True)
class TrackerServices:
    """The service layer, bound to a single store."""

    store: TrackerStore
    groups: GroupService
    members: MemberService
    tasks: TaskService
    analytics: AnalyticsService


def get_storage_provider(settings: StorageSettings) -> StorageProvider:
    """Get the StorageProvider named by settings.

    Args:
        settings: Storage settings

    Returns:
        InMemoryStorageProvider or JsonFileStorageProvider
    """
    if settings.backend == "json":
        return JsonFileStorageProvider(settings.path)
    return InMemoryStorageProvider()


def build_services(
    settings: Settings | None = None,
    provider: StorageProvider | None = None,
) -> TrackerServices:
    """Build the service bundle.

    Args:
        settings: Application settings, defaults to the cached settings
        provider: Storage provider override; built from settings when omitted

    Returns:
        TrackerServices sharing one TrackerStore
    """
    settings = settings or get_settings()
    store = TrackerStore(provider or get_storage_provider(settings.storage))

    return TrackerServices(
        store=store,
        groups=GroupService(store=store),
        members=MemberService(store=store),
        tasks=TaskService(store=store),
        analytics=AnalyticsService(
            store=store,
            recent_groups_limit=settings.recent_groups_limit,
        ),
    )


def bootstrap(settings: Settings | None = None) -> TrackerServices:
    """Configure logging and build the services in one step.

    This is the entry point for an application shell embedding the core.
    """
    settings = settings or get_settings()
    configure_logging(debug=settings.debug)
    return build_services(settings)
