"""
Finite set and binary relation algebra.

A FiniteSet is a sorted, duplicate-free collection of ordered elements.
A Relation is a carrier FiniteSet plus directed links between its elements:

1. Build a carrier: FiniteSet(range(4))
2. Build a relation over it: Relation(carrier)
3. Grow it with validated insertions: add_link / add_links
4. Query properties or derive new relations (closures, algebra)

All derivations are pure: they return a new value and leave operands intact.
"""

from .graph import (
    equivalence_classes,
    strong_components,
    topological_order,
    weak_components,
)
from .matrix import from_matrix, to_matrix, warshall_closure
from .operations import rel_compl, rel_compo, rel_inter, rel_inverse, rel_union
from .relation import Relation, RelationError
from .sets import FiniteSet, compl, inter, union
from .types import Link, Orderable

__all__ = [
    # Sets
    "FiniteSet",
    "union",
    "inter",
    "compl",
    # Relations
    "Link",
    "Orderable",
    "Relation",
    "RelationError",
    # Algebra
    "rel_union",
    "rel_inter",
    "rel_compl",
    "rel_compo",
    "rel_inverse",
    # Matrices
    "to_matrix",
    "from_matrix",
    "warshall_closure",
    # Graph views
    "weak_components",
    "strong_components",
    "equivalence_classes",
    "topological_order",
]
