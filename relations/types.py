"""
Type definitions for set and relation algebra.

Elements only need a total order and equality: sets are normalized by
sorting, never by hashing.
"""

from __future__ import annotations

from typing import Any, Generic, NamedTuple, Protocol, TypeAlias, TypeVar


class Orderable(Protocol):
    """Anything supporting `<` against values of its own type."""

    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=Orderable)


class Link(NamedTuple, Generic[T]):
    """
    A directed ordered pair (source, target).

    Being a tuple, a Link compares equal to the plain pair `(source, target)`.
    """

    source: T
    target: T

    def reversed(self) -> Link[T]:
        return Link(self.target, self.source)


Pair: TypeAlias = tuple[Any, Any]


__all__ = ["Orderable", "T", "Link", "Pair"]
