"""
Binary relations over a finite carrier.

A Relation owns a carrier FiniteSet and a duplicate-free list of directed
links. Links enter through two doors:

- The constructor copies whatever it is given, without checking endpoints
  against the carrier.
- `add_link` / `add_links` validate: a link is stored only if it is new and
  both endpoints belong to the carrier. Rejected links are dropped silently.

Every other method either queries the relation or returns a new one; the
receiver is never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic

from typing_extensions import Iterable

import constants

from .sets import FiniteSet, union
from .types import Link, Pair, T

logger = logging.getLogger(__name__)


class RelationError(ValueError):
    """Raised when a relation lacks the structure an operation requires."""

    pass


def _distinct_links(pairs: Iterable[Pair]) -> list[Link]:
    links: list[Link] = []
    for source, target in pairs:
        link = Link(source, target)
        if link not in links:
            links.append(link)
    return links


class Relation(Generic[T]):
    """
    A set of directed links between elements of a carrier.

    Example:
        >>> r = Relation(FiniteSet(range(3)))
        >>> r.add_links([(0, 1), (1, 2), (1, 2), (5, 0)])
        >>> sorted(r.links)
        [Link(source=0, target=1), Link(source=1, target=2)]
    """

    __slots__ = ("carrier", "links")

    def __init__(self, carrier: FiniteSet[T], links: Iterable[Pair] = ()) -> None:
        self.carrier: FiniteSet[T] = carrier
        self.links: list[Link[T]] = _distinct_links(links)

    # Mutation

    def add_link(self, pair: Pair) -> None:
        """Insert `pair` if it is new and both endpoints are in the carrier."""
        link = Link(*pair)
        if self.has(link):
            logger.debug(f"Ignoring {link}: already present")
            return
        if not (self.carrier.has(link.source) and self.carrier.has(link.target)):
            logger.debug(f"Ignoring {link}: endpoint outside the carrier")
            return
        self.links.append(link)

    def add_links(self, pairs: Iterable[Pair]) -> None:
        for pair in pairs:
            self.add_link(pair)

    # Queries

    def has(self, pair: Pair) -> bool:
        return pair in self.links

    def links_to(self, v: T) -> FiniteSet[T]:
        """Successors of `v`: every y with (v, y) present."""
        return FiniteSet(link.target for link in self.links if link.source == v)

    def links_from(self, v: T) -> FiniteSet[T]:
        """Predecessors of `v`: every x with (x, v) present."""
        return FiniteSet(link.source for link in self.links if link.target == v)

    def neighbours(self, v: T) -> FiniteSet[T]:
        return union(self.links_to(v), self.links_from(v))

    def degree(self, v: T) -> int:
        return len(self.neighbours(v))

    def domain(self) -> FiniteSet[T]:
        return FiniteSet(link.source for link in self.links)

    def codomain(self) -> FiniteSet[T]:
        return FiniteSet(link.target for link in self.links)

    # Properties

    def is_reflexive(self) -> bool:
        """Every carrier element links to itself, linked elsewhere or not."""
        return all(self.has((x, x)) for x in self.carrier)

    def is_symmetric(self) -> bool:
        return all(self.has(link.reversed()) for link in self.links)

    def is_transitive(self) -> bool:
        """
        Every link (x, z) between carrier elements has a witness.

        A witness is a carrier element y with both (x, y) and (y, z) present.
        The search covers the whole carrier, so x and z themselves qualify when
        the matching self-loop exists. Links with an endpoint outside the
        carrier are not considered.
        """
        for x in self.carrier:
            for z in self.carrier:
                if not self.has((x, z)):
                    continue
                if not any(
                    self.has((x, y)) and self.has((y, z)) for y in self.carrier
                ):
                    return False
        return True

    def is_transitively_closed(self) -> bool:
        """Classical transitivity: (x, y) and (y, z) imply (x, z)."""
        return all(
            self.has((first.source, second.target))
            for first in self.links
            for second in self.links
            if first.target == second.source
        )

    def is_antisymmetric(self) -> bool:
        return not any(
            link.source != link.target and self.has(link.reversed())
            for link in self.links
        )

    def is_equivalence(self) -> bool:
        return (
            self.is_reflexive()
            and self.is_symmetric()
            and self.is_transitively_closed()
        )

    def is_partial_order(self) -> bool:
        return (
            self.is_reflexive()
            and self.is_antisymmetric()
            and self.is_transitively_closed()
        )

    # Closures

    def refl_closure(self) -> Relation[T]:
        """Self plus the loop (x, x) for every carrier element."""
        return Relation(self.carrier, self.links + [(x, x) for x in self.carrier])

    def sym_closure(self) -> Relation[T]:
        """Self plus the reverse of every link."""
        return Relation(
            self.carrier, self.links + [link.reversed() for link in self.links]
        )

    def trans_closure(self, fixed_point: bool | None = None) -> Relation[T]:
        """
        Add (i, j) whenever (i, k) and (k, j) are present, over the carrier.

        One sweep visits every (i, j, k) of the carrier and sees the links it
        has already added. A single sweep can miss pairs on longer chains, so
        by default sweeps repeat until one adds nothing. With
        `fixed_point=False` exactly one sweep runs. Left to None, the choice is
        read from `constants.FIXED_POINT_CLOSURE` at call time.
        """
        if fixed_point is None:
            fixed_point = constants.FIXED_POINT_CLOSURE
        closure = self.copy()
        sweep = 0
        while True:
            sweep += 1
            added = closure._transitive_sweep()
            logger.debug(f"Transitive sweep {sweep} added {added} links")
            if not fixed_point or added == 0:
                return closure

    def _transitive_sweep(self) -> int:
        added = 0
        for i in self.carrier:
            for j in self.carrier:
                for k in self.carrier:
                    if (
                        self.has((i, k))
                        and self.has((k, j))
                        and not self.has((i, j))
                    ):
                        self.links.append(Link(i, j))
                        added += 1
        return added

    # Derived relations

    def inverse(self) -> Relation[T]:
        """The converse relation: every link reversed, same carrier."""
        return Relation(self.carrier, (link.reversed() for link in self.links))

    def copy(self) -> Relation[T]:
        return Relation(self.carrier, self.links)

    # Protocols

    def __contains__(self, pair: object) -> bool:
        return pair in self.links

    def __len__(self) -> int:
        return len(self.links)

    def __iter__(self) -> Iterator[Link[T]]:
        return iter(self.links)

    def __eq__(self, other: object) -> bool:
        """Same links regardless of order; carriers are not compared."""
        if not isinstance(other, Relation):
            return NotImplemented
        return len(self.links) == len(other.links) and all(
            other.has(link) for link in self.links
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        links = ", ".join(f"({link.source!r}, {link.target!r})" for link in self.links)
        return f"Relation(carrier={self.carrier!r}, links=[{links}])"


__all__ = ["Relation", "RelationError"]
