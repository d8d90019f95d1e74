"""bitcombs: subset enumeration by bitmask index.

Each index ``i`` in ``[1, 2**n - 1]`` selects the elements of an ``n``-element
sequence whose bit positions are set in ``i``. The functions below walk that
range in ascending order, optionally restricted to a subset size and/or a
caller-supplied predicate.

Primary API:
    all_subsets() - Every non-empty subset
    all_qualifying() / all_qualifying_positions() - Predicate-filtered
    combinations() / combinations_positions() - Subsets of a fixed size
    combinations_qualifying_positions() - Fixed size plus predicate
    get_subset() - Decode a single index

Example:
    from bitcombs import all_subsets, combinations

    all_subsets([1, 2, 3])
    # [[1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]]

    combinations([1, 2, 3], 2)
    # [[1, 2], [1, 3], [2, 3]]
"""

from __future__ import annotations

from bitcombs import cli, logging
from bitcombs._version import __version__
from bitcombs.config import ENUMERATION_CONFIG, EnumerationConfig
from bitcombs.enumerate import (
    all_qualifying,
    all_qualifying_positions,
    all_subsets,
    combinations,
    combinations_positions,
    combinations_qualifying,
    combinations_qualifying_positions,
    get_subset,
    iter_positions,
    iter_subsets,
    popcount,
    position_bound,
)
from bitcombs.types import INDEX_BITS, Index, Predicate, Subset

__all__ = [
    # Version
    "__version__",
    # Enumeration
    "get_subset",
    "all_subsets",
    "all_qualifying",
    "all_qualifying_positions",
    "combinations",
    "combinations_qualifying",
    "combinations_positions",
    "combinations_qualifying_positions",
    "iter_positions",
    "iter_subsets",
    "popcount",
    "position_bound",
    # Types
    "Index",
    "Subset",
    "Predicate",
    "INDEX_BITS",
    # Configuration
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    # Utilities
    "cli",
    "logging",
]
