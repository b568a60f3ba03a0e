"""Boundary tests for the resolution core's internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "schema_field_resolver"


def test_resolution_core_does_not_import_outer_layers() -> None:
    core_modules = (
        *(_package_root() / "field_model").glob("*.py"),
        *(_package_root() / "schema_resolution").glob("*.py"),
    )
    forbidden_import_fragments = (
        "schema_field_resolver.configuration",
        "schema_field_resolver.schema_management",
        "schema_field_resolver.cli",
        "import click",
        "import yaml",
    )

    assert core_modules
    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"


def test_field_model_does_not_depend_on_the_resolver() -> None:
    for module_path in (_package_root() / "field_model").glob("*.py"):
        text = module_path.read_text(encoding="utf-8")
        assert "schema_field_resolver.schema_resolution" not in text
