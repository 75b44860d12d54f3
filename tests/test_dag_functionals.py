"""Tests for utils/dag_functionals.py"""

import pytest

from utils.dag_functionals import topological_sort


class TestTopologicalSort:
    def test_linear_chain(self):
        """A -> B -> C should give [A, B, C]"""
        graph = {"A": {"B"}, "B": {"C"}, "C": set()}
        assert topological_sort(graph) == ("A", "B", "C")

    def test_diamond_is_deterministic(self):
        """A -> B, A -> C, B -> D, C -> D: ties broken by smallest node."""
        graph = {"A": {"C", "B"}, "B": {"D"}, "C": {"D"}, "D": set()}
        assert topological_sort(graph) == ("A", "B", "C", "D")

    def test_child_only_nodes(self):
        """Nodes that only appear as children (not keys) should be included."""
        assert topological_sort({"A": {"B", "C"}}) == ("A", "B", "C")

    def test_smallest_ready_node_first(self):
        graph = {3: {0}, 1: {0}, 2: set()}
        assert topological_sort(graph) == (1, 2, 3, 0)

    def test_empty_graph(self):
        graph: dict[str, set[str]] = {}
        assert topological_sort(graph) == ()

    def test_cycle_detection(self):
        graph = {"A": {"B"}, "B": {"C"}, "C": {"A"}}
        with pytest.raises(ValueError, match="cycle"):
            topological_sort(graph)

    def test_self_loop_detection(self):
        with pytest.raises(ValueError, match="cycle"):
            topological_sort({"A": {"A"}})
