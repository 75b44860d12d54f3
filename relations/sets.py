"""
Finite sets over totally ordered elements.

A FiniteSet keeps its items sorted and duplicate free, so the classical
operations reduce to merges and binary searches.
"""

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic

from .types import T


def _normalize(items: Iterable[T]) -> tuple[T, ...]:
    """Sort and deduplicate, comparing neighbours with `==`."""
    ordered = sorted(items)
    distinct: list[T] = []
    for item in ordered:
        if not distinct or distinct[-1] != item:
            distinct.append(item)
    return tuple(distinct)


@dataclass(frozen=True, slots=True, eq=False)
class FiniteSet(Generic[T]):
    """
    An immutable, duplicate-free collection of ordered elements.

    The constructor normalizes its input, so `len` always counts distinct
    elements and two sets built from permutations of the same items are equal.

    Example:
        >>> FiniteSet([3, 1, 3, 2])
        FiniteSet(1, 2, 3)
        >>> FiniteSet([1, 2]) == FiniteSet([2, 1, 1])
        True
    """

    items: tuple[T, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", _normalize(self.items))

    def has(self, x: T) -> bool:
        """True iff `x` equals some element of the set."""
        index = bisect_left(self.items, x)
        return index < len(self.items) and self.items[index] == x

    def is_subset(self, other: "FiniteSet[T]") -> bool:
        return all(other.has(item) for item in self.items)

    def __contains__(self, x: object) -> bool:
        return self.has(x)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FiniteSet):
            return NotImplemented
        return len(self) == len(other) and all(
            other.has(item) for item in self.items
        )

    def __hash__(self) -> int:
        return hash(self.items)

    def __repr__(self) -> str:
        return f"FiniteSet({', '.join(repr(item) for item in self.items)})"


def union(a: FiniteSet[T], b: FiniteSet[T]) -> FiniteSet[T]:
    """Distinct elements present in either set."""
    return FiniteSet(a.items + b.items)


def inter(a: FiniteSet[T], b: FiniteSet[T]) -> FiniteSet[T]:
    """Elements of `a` that are also members of `b`."""
    return FiniteSet(tuple(item for item in a.items if b.has(item)))


def compl(a: FiniteSet[T], b: FiniteSet[T]) -> FiniteSet[T]:
    """Relative complement of `b` in `a`: elements of `a` not in `b`."""
    return FiniteSet(tuple(item for item in a.items if not b.has(item)))


__all__ = ["FiniteSet", "union", "inter", "compl"]
