"""Per-parse resolution state."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from schema_field_resolver.field_model import Field

from .branch_selection import BranchSelector


@dataclass
class ResolutionContext:
    """Definitions cache and cycle guard scoped to one ``parse`` call.

    A fresh context is created for every parse, so concurrent parses never
    share cached definitions or in-flight reference names.
    """

    definitions: Mapping[str, Any]
    branch_selector: BranchSelector
    cache: dict[str, Field] = field(default_factory=dict)
    cycle_guard: set[str] = field(default_factory=set)

    @contextmanager
    def guard(self, reference_name: str) -> Iterator[bool]:
        """Mark ``reference_name`` as being resolved for the duration of the block.

        Yields ``False`` without touching the guard when the name is already
        being resolved further up the stack.
        """
        if reference_name in self.cycle_guard:
            yield False
            return
        self.cycle_guard.add(reference_name)
        try:
            yield True
        finally:
            self.cycle_guard.discard(reference_name)

    def choose_branch(self, branch_count: int) -> int:
        """Return the selector's branch index, checked against ``branch_count``."""
        index = self.branch_selector(branch_count)
        if not 0 <= index < branch_count:
            raise ValueError(f"Branch selector returned {index} for {branch_count} branches.")
        return index
