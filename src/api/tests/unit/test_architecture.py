"""Architecture tests using pytest-archon.

These tests enforce DDD architectural boundaries between layers
within the accountability bounded context.
"""

from pytest_archon import archrule


class TestDomainLayerBoundaries:
    """Tests that the domain layer has no forbidden dependencies."""

    def test_domain_does_not_import_infrastructure(self):
        """Domain layer should not depend on infrastructure.

        The domain layer contains pure business logic and should not
        know about storage providers, record formats, or settings.
        """
        (
            archrule("domain_no_infrastructure")
            .match("accountability.domain*")
            .should_not_import("accountability.infrastructure*")
            .should_not_import("infrastructure*")
            .check("accountability")
        )

    def test_domain_does_not_import_application(self):
        """Domain objects should be usable without application services."""
        (
            archrule("domain_no_application")
            .match("accountability.domain*")
            .should_not_import("accountability.application*")
            .check("accountability")
        )

    def test_domain_does_not_import_ports(self):
        """Ports depend on the domain, never the other way round."""
        (
            archrule("domain_no_ports")
            .match("accountability.domain*")
            .should_not_import("accountability.ports*")
            .check("accountability")
        )

    def test_domain_does_not_import_third_party_frameworks(self):
        """Only the ULID generator is allowed into the domain."""
        (
            archrule("domain_no_frameworks")
            .match("accountability.domain*")
            .should_not_import("pydantic*")
            .should_not_import("pydantic_settings*")
            .should_not_import("structlog*")
            .check("accountability")
        )


class TestApplicationLayerBoundaries:
    """Tests that application services stay behind the ports."""

    def test_application_does_not_import_infrastructure(self):
        """Services reach storage only through ITrackerStore."""
        (
            archrule("application_no_infrastructure")
            .match("accountability.application*")
            .should_not_import("accountability.infrastructure*")
            .should_not_import("infrastructure*")
            .check("accountability")
        )
