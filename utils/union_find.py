"""
Union-Find (Disjoint Set Union) data structure.

Used to partition a carrier into equivalence classes:
- find(x): representative of the class containing x
- union(x, y): merge the classes of x and y
- classes(): the partition, one frozenset per class

Both operations run in O(α(n)) amortized time thanks to path compression
and union by rank.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

Element = TypeVar("Element")


class UnionFind(Generic[Element]):
    """
    Union-Find with path compression and union by rank.

    Example:
        >>> uf = UnionFind[int]([1, 2, 3, 4])
        >>> uf.union(1, 2)
        >>> uf.union(2, 3)
        >>> uf.connected(1, 3)
        True
        >>> uf.connected(1, 4)
        False
    """

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self._parent: dict[Element, Element] = {}
        self._rank: dict[Element, int] = {}
        for element in elements:
            self.add(element)

    def add(self, element: Element) -> None:
        """Register element as a singleton class if not seen before."""
        if element not in self._parent:
            self._parent[element] = element
            self._rank[element] = 0

    def find(self, element: Element) -> Element:
        self.add(element)

        root = element
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]

        return root

    def union(self, x: Element, y: Element) -> None:
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return

        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1

    def connected(self, x: Element, y: Element) -> bool:
        return self.find(x) == self.find(y)

    def classes(self) -> tuple[frozenset[Element], ...]:
        """The partition, classes ordered by first registration."""
        members: dict[Element, set[Element]] = {}
        for element in self._parent:
            members.setdefault(self.find(element), set()).add(element)
        return tuple(frozenset(group) for group in members.values())
