"""
Boolean adjacency-matrix view of relations.

Row and column `i` stand for the i-th carrier element in sorted order, so
`matrix[i, j]` is True iff link (carrier[i], carrier[j]) is present.
Links with an endpoint outside the carrier have no cell and are skipped.
"""

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from .relation import Relation, RelationError
from .sets import FiniteSet
from .types import Link, T

logger = logging.getLogger(__name__)


def _index_of(carrier: FiniteSet[T]) -> dict[T, int]:
    return {element: index for index, element in enumerate(carrier)}


def to_matrix(relation: Relation[T]) -> NDArray[np.bool_]:
    """Adjacency matrix of `relation` over its carrier."""
    index = _index_of(relation.carrier)
    size = len(relation.carrier)
    matrix = np.zeros((size, size), dtype=bool)

    for link in relation.links:
        if link.source not in index or link.target not in index:
            logger.debug(f"{link} has no cell in a matrix over {relation.carrier}")
            continue
        matrix[index[link.source], index[link.target]] = True

    return matrix


def from_matrix(
    carrier: FiniteSet[T], matrix: NDArray[np.bool_] | Sequence[Sequence[bool]]
) -> Relation[T]:
    """
    Build the relation whose adjacency matrix over `carrier` is `matrix`.

    Raises:
        RelationError: If the matrix is not square with side `len(carrier)`.
    """
    cells = np.asarray(matrix, dtype=bool)
    size = len(carrier)
    if cells.shape != (size, size):
        raise RelationError(
            f"Adjacency matrix of shape {cells.shape} does not fit a carrier of "
            f"{size} elements"
        )

    elements = carrier.items
    rows, cols = np.nonzero(cells)
    return Relation(
        carrier,
        (Link(elements[row], elements[col]) for row, col in zip(rows, cols)),
    )


def warshall_closure(relation: Relation[T]) -> Relation[T]:
    """
    Transitive closure by Warshall's algorithm on the adjacency matrix.

    For each pivot k, every row that reaches k gains the row of k.
    Only links between carrier elements take part.
    """
    reach = to_matrix(relation)
    for k in range(reach.shape[0]):
        reach |= np.outer(reach[:, k], reach[k, :])
    return from_matrix(relation.carrier, reach)


__all__ = ["to_matrix", "from_matrix", "warshall_closure"]
