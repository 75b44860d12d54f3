"""
Functions related to graphs
"""

from collections import deque
from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def nodes_to_connected_components(
    nodes: Iterable[T], node_to_neighbours: Callable[[T], Iterable[T]]
) -> tuple[frozenset[T], ...]:
    """
    Extract connected components from an undirected graph structure.

    Components are returned in the order their first node appears in `nodes`.
    Neighbours outside `nodes` are still followed, so callers restrict
    `node_to_neighbours` themselves when they want a closed universe.

    Args:
        nodes: nodes of the graph; every one ends up in exactly one component.
        node_to_neighbours: Function returning the nodes adjacent to a node.

    Returns:
        tuple[frozenset[T], ...]: the connected components
    """
    seen: set[T] = set()
    components: list[frozenset[T]] = []

    for node in nodes:
        if node in seen:
            continue

        # Breadth-first traversal, marking nodes when queued
        seen.add(node)
        component = {node}
        queue = deque([node])
        while queue:
            current = queue.popleft()
            for neighbour in node_to_neighbours(current):
                if neighbour not in seen:
                    seen.add(neighbour)
                    component.add(neighbour)
                    queue.append(neighbour)

        components.append(frozenset(component))
    return tuple(components)
