"""
Binary relation algebra.

Each function takes one or two relations and returns a new Relation with a
derived carrier. Operands are never modified.
"""

from .relation import Relation
from .sets import compl, inter, union
from .types import Link, T


def rel_union(a: Relation[T], b: Relation[T]) -> Relation[T]:
    """Carriers united, links of either relation."""
    return Relation(union(a.carrier, b.carrier), a.links + b.links)


def rel_inter(a: Relation[T], b: Relation[T]) -> Relation[T]:
    """Carriers intersected, links present in both relations."""
    return Relation(
        inter(a.carrier, b.carrier),
        (link for link in a.links if b.has(link)),
    )


def rel_compl(a: Relation[T], b: Relation[T]) -> Relation[T]:
    """Carrier of `a` minus carrier of `b`, links of `a` absent from `b`."""
    return Relation(
        compl(a.carrier, b.carrier),
        (link for link in a.links if not b.has(link)),
    )


def rel_compo(a: Relation[T], b: Relation[T]) -> Relation[T]:
    """
    Relational composition: (x, z) whenever (x, y) is in `a` and (y, z) in `b`.

    Pairs come from the link lists only, whatever the declared carriers say.
    The result's carrier is `a.domain()` united with `b.codomain()`.

    Example:
        a = {(0, 1), (1, 1)}, b = {(1, 2), (1, 3)}
        rel_compo(a, b) = {(0, 2), (0, 3), (1, 2), (1, 3)}
    """
    return Relation(
        union(a.domain(), b.codomain()),
        (
            Link(first.source, second.target)
            for first in a.links
            for second in b.links
            if first.target == second.source
        ),
    )


def rel_inverse(a: Relation[T]) -> Relation[T]:
    return a.inverse()


__all__ = ["rel_union", "rel_inter", "rel_compl", "rel_compo", "rel_inverse"]
