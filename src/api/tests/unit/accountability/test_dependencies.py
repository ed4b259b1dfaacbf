"""Unit tests for accountability service wiring."""

from unittest.mock import patch

from accountability.dependencies import bootstrap, build_services, get_storage_provider
from accountability.infrastructure import InMemoryStorageProvider, JsonFileStorageProvider
from infrastructure.settings import Settings, StorageSettings


class TestGetStorageProvider:
    def test_memory_backend(self):
        provider = get_storage_provider(StorageSettings(backend="memory"))
        assert isinstance(provider, InMemoryStorageProvider)

    def test_json_backend_uses_configured_path(self, tmp_path):
        path = tmp_path / "data.json"

        provider = get_storage_provider(StorageSettings(backend="json", path=path))

        assert isinstance(provider, JsonFileStorageProvider)
        assert provider.path == path


class TestBuildServices:
    def test_services_share_one_store(self):
        services = build_services(Settings(), provider=InMemoryStorageProvider())

        group = services.groups.create_group("Alpha")
        services.members.add_member(group.id, "Ann", "ann@x.com")

        summary = services.analytics.dashboard_summary()
        assert summary.total_groups == 1
        assert summary.total_members == 1

    def test_recent_groups_limit_from_settings(self):
        services = build_services(
            Settings(recent_groups_limit=1), provider=InMemoryStorageProvider()
        )
        services.groups.create_group("A")
        services.groups.create_group("B")

        assert len(services.analytics.dashboard_summary().recent_groups) == 1


class TestBootstrap:
    def test_configures_logging_with_debug_flag(self):
        with patch("accountability.dependencies.configure_logging") as configure:
            services = bootstrap(Settings(debug=True))

        configure.assert_called_once_with(debug=True)
        assert services.groups is not None
