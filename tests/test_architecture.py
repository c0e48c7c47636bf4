"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters
- Application services don't depend on adapters
- Adapters can depend on domain
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, pydantic and domain geometry."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("team_allocation.domain.models*")
        .should_not_import("team_allocation.adapters*")
        .should_not_import("team_allocation.application*")
        .should_not_import("team_allocation.domain.ports*")
        .may_import("team_allocation.domain.models*")
        .may_import("team_allocation.domain.geometry")
        .check("team_allocation")
    )


def test_domain_ports_have_no_dependencies() -> None:
    """Domain ports (interfaces) should not import adapters or application."""
    (
        archrule("domain ports", comment="Domain ports should be independent")
        .match("team_allocation.domain.ports*")
        .should_not_import("team_allocation.adapters*")
        .should_not_import("team_allocation.application*")
        .may_import("team_allocation.domain.ports*")
        .may_import("team_allocation.domain.models*")
        .check("team_allocation")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("team_allocation.application*")
        .should_not_import("team_allocation.adapters*")
        .should_not_import("team_allocation.cli")
        .may_import("team_allocation.domain*")
        .may_import("team_allocation.application*")
        .check("team_allocation")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("team_allocation.adapters*")
        .should_not_import("team_allocation.application*")
        .may_import("team_allocation.domain*")
        .may_import("team_allocation.adapters*")
        .check("team_allocation", only_direct_imports=True)
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("team_allocation.domain*")
        .should_not_import("team_allocation.adapters*")
        .should_not_import("team_allocation.application*")
        .may_import("team_allocation.domain*")
        .check("team_allocation", only_direct_imports=True)
    )
