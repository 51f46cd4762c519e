"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on application or adapters
- The departure register does not depend on the console or config adapters
- Adapters can depend on domain and application
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other project modules except domain models."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("train_dispatch.domain.models*")
        .should_not_import("train_dispatch.adapters*")
        .should_not_import("train_dispatch.application*")
        .should_not_import("train_dispatch.domain.contracts*")
        .should_not_import("train_dispatch.domain.ports*")
        .may_import("train_dispatch.domain.models*")
        .check("train_dispatch")
    )


def test_domain_does_not_import_outer_layers() -> None:
    """The domain layer should not import application services or adapters."""
    (
        archrule("domain", comment="Domain should not depend on outer layers")
        .match("train_dispatch.domain*")
        .should_not_import("train_dispatch.adapters*")
        .should_not_import("train_dispatch.application*")
        .check("train_dispatch")
    )


def test_application_services_dont_import_adapters() -> None:
    """The register never prints or reads config; presentation is the adapters' job."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("train_dispatch.application*")
        .should_not_import("train_dispatch.adapters*")
        .should_not_import("train_dispatch.main")
        .should_not_import("train_dispatch.cli")
        .check("train_dispatch")
    )


def test_config_adapter_does_not_import_console() -> None:
    """Configuration should not depend on the console presentation layer."""
    (
        archrule("config adapter", comment="Config is independent of the console")
        .match("train_dispatch.adapters.config*")
        .should_not_import("train_dispatch.adapters.console*")
        .check("train_dispatch")
    )
