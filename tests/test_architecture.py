"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on application or adapters
- Application services don't depend on adapters
- Adapters don't depend on application services
- Only the entry point touches the IRC adapter
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("mumbot.domain.models*")
        .should_not_import("mumbot.adapters*")
        .should_not_import("mumbot.application*")
        .should_not_import("mumbot.domain.ports*")
        .may_import("mumbot.domain.models*")
        .check("mumbot", only_direct_imports=True)
    )


def test_domain_has_no_outward_dependencies() -> None:
    """Domain layer should not import application or adapters."""
    (
        archrule("domain layer", comment="Domain layer should not depend on outer layers")
        .match("mumbot.domain*")
        .should_not_import("mumbot.adapters*")
        .should_not_import("mumbot.application*")
        .may_import("mumbot.domain*")
        .check("mumbot", only_direct_imports=True)
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("mumbot.application*")
        .should_not_import("mumbot.adapters*")
        .should_not_import("twisted*")
        .may_import("mumbot.domain*")
        .may_import("mumbot.application*")
        .check("mumbot")
    )


def test_adapters_dont_import_application() -> None:
    """Adapters should not import application services (to avoid cycles)."""
    (
        archrule(
            "adapters independence", comment="Adapters should not depend on application services"
        )
        .match("mumbot.adapters*")
        .should_not_import("mumbot.application*")
        .may_import("mumbot.domain*")
        .may_import("mumbot.adapters*")
        .check("mumbot", only_direct_imports=True)
    )


def test_cli_does_not_import_irc_adapter() -> None:
    """The CLI must stay importable before the asyncio reactor is installed."""
    (
        archrule("CLI independence", comment="CLI should not pull in the Twisted IRC protocol")
        .match("mumbot.cli")
        .should_not_import("mumbot.adapters.irc*")
        .should_not_import("twisted.words*")
        .may_import("mumbot.adapters.config*")
        .check("mumbot")
    )
