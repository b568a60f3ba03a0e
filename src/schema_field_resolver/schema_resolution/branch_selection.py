"""Combinator branch selection strategies.

``anyOf``/``oneOf`` resolution picks exactly one branch. The choice is
delegated to a selector so callers decide between ambient randomness, a
reproducible seed, or a fixed branch.
"""

from __future__ import annotations

import random
from collections.abc import Callable

BranchSelector = Callable[[int], int]


def random_branch_selector(branch_count: int) -> int:
    """Pick a branch index uniformly from ``[0, branch_count)``."""
    return random.randrange(branch_count)


def seeded_branch_selector(seed: int) -> BranchSelector:
    """Return a selector backed by a private generator seeded with ``seed``."""
    generator = random.Random(seed)

    def _select(branch_count: int) -> int:
        return generator.randrange(branch_count)

    return _select


def first_branch_selector(branch_count: int) -> int:
    """Always pick the first declared branch."""
    del branch_count
    return 0
