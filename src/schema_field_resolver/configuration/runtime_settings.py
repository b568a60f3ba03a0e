"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_field_resolver.schema_resolution import (
    BranchSelector,
    random_branch_selector,
    seeded_branch_selector,
)

TEXT_OUTPUT_FORMAT = "text"
JSON_OUTPUT_FORMAT = "json"
OUTPUT_FORMATS = (TEXT_OUTPUT_FORMAT, JSON_OUTPUT_FORMAT)


@dataclass(frozen=True)
class SchemaConfig:
    """Normalized schema settings."""

    schema_type: str
    text: str
    source_path: Path | None


@dataclass(frozen=True)
class ResolutionSettings:
    """Controls for combinator branch selection."""

    seed: int | None = None

    def branch_selector(self) -> BranchSelector:
        """Return a reproducible selector when a seed is configured."""
        if self.seed is None:
            return random_branch_selector
        return seeded_branch_selector(self.seed)


@dataclass(frozen=True)
class OutputSettings:
    """Flattened field list rendering."""

    format: str = TEXT_OUTPUT_FORMAT


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    schema: SchemaConfig
    resolution: ResolutionSettings
    output: OutputSettings
