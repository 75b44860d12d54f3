"""
Graph views of a relation.

A relation over a carrier is a directed graph: carrier elements are nodes and
links are edges. The functions here need hashable elements on top of the
usual total order.

- weak_components: components of the undirected graph (BFS)
- strong_components: strongly connected components (scipy csgraph)
- equivalence_classes: the partition induced by an equivalence (union-find)
- topological_order: a linear order compatible with the links (Kahn)
"""

import logging

from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import connected_components

from utils.dag_functionals import topological_sort
from utils.graph import nodes_to_connected_components
from utils.union_find import UnionFind

from .matrix import to_matrix
from .relation import Relation, RelationError
from .sets import FiniteSet
from .types import Link, T

logger = logging.getLogger(__name__)


def _sorted_sets(groups) -> tuple[FiniteSet[T], ...]:
    """Wrap groups as FiniteSets, ordered by their smallest element."""
    sets = (FiniteSet(group) for group in groups)
    return tuple(sorted(sets, key=lambda s: s.items[0]))


def _carrier_links(relation: Relation[T]) -> list[Link[T]]:
    """Links whose endpoints both belong to the carrier."""
    carrier = relation.carrier
    return [
        link
        for link in relation.links
        if carrier.has(link.source) and carrier.has(link.target)
    ]


def weak_components(relation: Relation[T]) -> tuple[FiniteSet[T], ...]:
    """
    Partition the carrier into components linked in either direction.

    Only carrier elements are visited; isolated elements form singletons.
    """
    carrier = relation.carrier

    def carrier_neighbours(node: T) -> list[T]:
        return [n for n in relation.neighbours(node) if carrier.has(n)]

    return _sorted_sets(nodes_to_connected_components(carrier, carrier_neighbours))


def strong_components(relation: Relation[T]) -> tuple[FiniteSet[T], ...]:
    """Partition the carrier into mutually reachable components."""
    if not relation.carrier:
        return ()

    n_components, labels = connected_components(
        csr_matrix(to_matrix(relation)), directed=True, connection="strong"
    )
    logger.debug(f"{n_components} strong components over {relation.carrier}")

    groups: list[list[T]] = [[] for _ in range(n_components)]
    for element, label in zip(relation.carrier, labels):
        groups[label].append(element)
    return _sorted_sets(groups)


def equivalence_classes(relation: Relation[T]) -> tuple[FiniteSet[T], ...]:
    """
    The classes of an equivalence relation.

    Links with an endpoint outside the carrier are ignored.

    Raises:
        RelationError: If the relation is not an equivalence over its carrier.
    """
    if not relation.is_equivalence():
        raise RelationError(f"{relation} is not an equivalence relation")

    classes = UnionFind(relation.carrier)
    for link in _carrier_links(relation):
        classes.union(link.source, link.target)
    return _sorted_sets(classes.classes())


def topological_order(relation: Relation[T]) -> tuple[T, ...]:
    """
    Order the carrier so every link's source precedes its target.

    Self-loops are ignored, which lets partial orders be sorted, and so are
    links with an endpoint outside the carrier.

    Raises:
        ValueError: If the links contain a cycle of length two or more.
    """
    children: dict[T, set[T]] = {x: set() for x in relation.carrier}
    for link in _carrier_links(relation):
        if link.source != link.target:
            children[link.source].add(link.target)
    return topological_sort(children)


__all__ = [
    "weak_components",
    "strong_components",
    "equivalence_classes",
    "topological_order",
]
