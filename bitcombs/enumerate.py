"""Bitmask-indexed subset enumeration.

Every non-empty subset of an ``n``-element sequence corresponds to exactly one
index in ``[1, 2**n - 1]``: bit ``k`` of the index (least significant first)
selects the element at position ``k``. Walking the indices in ascending order
therefore yields every subset once, each with its elements in input order.

For ``[1, 2, 3]`` the indices ``0b001`` to ``0b111`` decode to::

    [1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]

Note that this is binary counting order, not size order. Restricting the walk
to indices with a given population count yields the fixed-size combinations,
which for a fixed size come out in colexicographic order of their positions
(sorted by highest position first).

Positions returned by the ``*_positions`` functions are the raw indices. An
index ``p`` is also the 1-based ordinal of its subset within
:func:`all_subsets`, i.e. ``all_subsets(v)[p - 1] == get_subset(v, p)``.

Repeated input elements are not collapsed: ``combinations([1, 2, 2, 3], 3)``
contains ``[1, 2, 3]`` twice.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from bitcombs.config import ENUMERATION_CONFIG, EnumerationConfig
from bitcombs.logging import get_logger
from bitcombs.types import Index, Predicate, Subset, T

__all__ = [
    "all_qualifying",
    "all_qualifying_positions",
    "all_subsets",
    "combinations",
    "combinations_positions",
    "combinations_qualifying",
    "combinations_qualifying_positions",
    "get_subset",
    "iter_positions",
    "iter_subsets",
    "popcount",
    "position_bound",
]

logger = get_logger(__name__)


def popcount(pos: Index) -> int:
    """Return the number of set bits in ``pos``.

    Raises:
        ValueError: If ``pos`` is negative.
    """
    if pos < 0:
        raise ValueError(f"Index must be non-negative, got {pos}")
    return pos.bit_count()


def position_bound(n: int, *, config: Optional[EnumerationConfig] = None) -> Index:
    """Return the exclusive upper bound ``2**n`` of the index range.

    Args:
        n: Length of the input sequence.
        config: Limits to validate against. Defaults to ``ENUMERATION_CONFIG``.

    Raises:
        OverflowError: If ``n`` exceeds the configured index width.
    """
    cfg = config or ENUMERATION_CONFIG
    return 1 << cfg.check_length(n)


def get_subset(v: Sequence[T], pos: Index) -> Subset:
    """Decode index ``pos`` into the subset of ``v`` it selects.

    Bits at or above ``len(v)`` are ignored, so out-of-range indices are safe.

    Args:
        v: Input sequence.
        pos: Non-negative bitmask index.

    Returns:
        New list with the selected elements in input order.

    Raises:
        ValueError: If ``pos`` is negative.
    """
    if pos < 0:
        raise ValueError(f"Index must be non-negative, got {pos}")
    return [v[i] for i in range(len(v)) if (pos >> i) & 1]


def _check_size(r: Optional[int]) -> None:
    if r is None:
        return
    if isinstance(r, bool) or not isinstance(r, int):
        raise TypeError(f"Subset size must be an int, got {type(r).__name__}")


def _scan(bound: Index, r: Optional[int]) -> Iterator[Index]:
    for pos in range(1, bound):
        if r is not None and pos.bit_count() != r:
            continue
        yield pos


def iter_positions(
    v: Sequence[T],
    r: Optional[int] = None,
    *,
    config: Optional[EnumerationConfig] = None,
) -> Iterator[Index]:
    """Lazily yield candidate indices for ``v`` in ascending order.

    Arguments are validated eagerly; only the walk itself is deferred.

    Args:
        v: Input sequence.
        r: When given, only indices with exactly ``r`` set bits are yielded.
            ``r <= 0`` and ``r > len(v)`` yield nothing.
        config: Limits to validate against. Defaults to ``ENUMERATION_CONFIG``.

    Raises:
        OverflowError: If ``len(v)`` exceeds the configured index width.
        TypeError: If ``r`` is not an int.
    """
    _check_size(r)
    bound = position_bound(len(v), config=config)
    if r is not None and not 0 < r <= len(v):
        return iter(())
    return _scan(bound, r)


def iter_subsets(
    v: Sequence[T],
    r: Optional[int] = None,
    qualifies: Optional[Predicate] = None,
    *,
    config: Optional[EnumerationConfig] = None,
) -> Iterator[Subset]:
    """Lazily yield decoded subsets of ``v`` in ascending index order.

    ``qualifies`` is called once per index that passes the size filter.
    """
    positions = iter_positions(v, r, config=config)
    return _decode(v, positions, qualifies)


def _decode(
    v: Sequence[T], positions: Iterable[Index], qualifies: Optional[Predicate]
) -> Iterator[Subset]:
    for pos in positions:
        subset = get_subset(v, pos)
        if qualifies is None or qualifies(subset):
            yield subset


def _select(
    v: Sequence[T], positions: Iterable[Index], qualifies: Predicate
) -> Iterator[Index]:
    for pos in positions:
        if qualifies(get_subset(v, pos)):
            yield pos


def _collect(
    op: str,
    v: Sequence[T],
    items: Iterable,
    config: Optional[EnumerationConfig],
) -> list:
    cfg = config or ENUMERATION_CONFIG
    n = len(v)
    if cfg.should_warn(n):
        logger.warning(
            f"{op}: input of length {n} spans {(1 << n) - 1:,} indices; "
            "consider iter_positions()/iter_subsets() instead"
        )
    result = list(items)
    logger.debug(f"{op}: n={n} produced {len(result)} results")
    return result


def all_subsets(
    v: Sequence[T], *, config: Optional[EnumerationConfig] = None
) -> List[Subset]:
    """Return every non-empty subset of ``v`` in index order.

    The result has exactly ``2**len(v) - 1`` entries; an empty input gives
    an empty list.
    """
    subsets = iter_subsets(v, config=config)
    return _collect("all_subsets", v, subsets, config)


def all_qualifying(
    v: Sequence[T], qualifies: Predicate, *, config: Optional[EnumerationConfig] = None
) -> List[Subset]:
    """Return the subsets of ``v`` for which ``qualifies`` is true.

    The predicate is called exactly once for each of the ``2**len(v) - 1``
    candidates, in index order.
    """
    subsets = iter_subsets(v, qualifies=qualifies, config=config)
    return _collect("all_qualifying", v, subsets, config)


def all_qualifying_positions(
    v: Sequence[T], qualifies: Predicate, *, config: Optional[EnumerationConfig] = None
) -> List[Index]:
    """Return the indices of the subsets of ``v`` for which ``qualifies`` is true.

    Each index is the 1-based position of its subset within
    :func:`all_subsets`, not a position within the filtered result.
    """
    positions = _select(v, iter_positions(v, config=config), qualifies)
    return _collect("all_qualifying_positions", v, positions, config)


def combinations(
    v: Sequence[T], r: int, *, config: Optional[EnumerationConfig] = None
) -> List[Subset]:
    """Return every subset of ``v`` with exactly ``r`` elements.

    Yields ``C(len(v), r)`` subsets in index order. ``r <= 0`` or
    ``r > len(v)`` returns an empty list.

    Example:
        >>> combinations([1, 2, 3], 2)
        [[1, 2], [1, 3], [2, 3]]
    """
    subsets = iter_subsets(v, r, config=config)
    return _collect("combinations", v, subsets, config)


def combinations_qualifying(
    v: Sequence[T],
    r: int,
    qualifies: Predicate,
    *,
    config: Optional[EnumerationConfig] = None,
) -> List[Subset]:
    """Return the size-``r`` subsets of ``v`` for which ``qualifies`` is true."""
    subsets = iter_subsets(v, r, qualifies, config=config)
    return _collect("combinations_qualifying", v, subsets, config)


def combinations_positions(
    v: Sequence[T], r: int, *, config: Optional[EnumerationConfig] = None
) -> List[Index]:
    """Return the indices of every size-``r`` subset of ``v``.

    Indices follow the same 1-based ordinal convention as
    :func:`all_qualifying_positions`.
    """
    positions = iter_positions(v, r, config=config)
    return _collect("combinations_positions", v, positions, config)


def combinations_qualifying_positions(
    v: Sequence[T],
    r: int,
    qualifies: Predicate,
    *,
    config: Optional[EnumerationConfig] = None,
) -> List[Index]:
    """Return the indices of size-``r`` subsets of ``v`` accepted by ``qualifies``.

    The predicate is only evaluated for indices with exactly ``r`` set bits.
    """
    positions = _select(v, iter_positions(v, r, config=config), qualifies)
    return _collect("combinations_qualifying_positions", v, positions, config)
