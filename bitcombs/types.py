"""Type aliases shared by the enumeration functions."""

from __future__ import annotations

from typing import Callable, List, TypeVar

T = TypeVar("T")

#: Bitmask selecting a subset; bit ``k`` set means element ``k`` is included.
Index = int

#: Decoded subset, elements kept in input order.
Subset = List[T]

#: Filter applied to each candidate subset.
Predicate = Callable[[List[T]], bool]

#: Default index width. Inputs longer than this cannot be addressed.
INDEX_BITS = 128
