"""Tests for relations/operations.py"""

import pytest

from relations import (
    FiniteSet,
    Relation,
    rel_compl,
    rel_compo,
    rel_inter,
    rel_inverse,
    rel_union,
)


@pytest.fixture
def low():
    r = Relation(FiniteSet(range(6)))
    r.add_links([(0, 0), (4, 5)])
    return r


@pytest.fixture
def high():
    r = Relation(FiniteSet(range(4, 10)))
    r.add_links([(6, 6), (4, 5)])
    return r


class TestRelUnion:
    def test_scenario(self, low, high):
        result = rel_union(low, high)
        assert result.carrier == FiniteSet(range(10))
        assert result == Relation(FiniteSet(range(10)), [(0, 0), (4, 5), (6, 6)])
        assert len(result) == 3

    def test_commutative(self, low, high):
        assert rel_union(low, high) == rel_union(high, low)
        assert rel_union(low, high).carrier == rel_union(high, low).carrier

    def test_operands_untouched(self, low, high):
        rel_union(low, high)
        assert len(low) == 2
        assert len(high) == 2


class TestRelInter:
    def test_scenario(self, low, high):
        result = rel_inter(low, high)
        assert result.carrier == FiniteSet([4, 5])
        assert result == Relation(FiniteSet([4, 5]), [(4, 5)])

    def test_disjoint_links(self):
        a = Relation(FiniteSet(range(3)), [(0, 1)])
        b = Relation(FiniteSet(range(3)), [(1, 0)])
        assert len(rel_inter(a, b)) == 0


class TestRelCompl:
    def test_scenario(self, low, high):
        result = rel_compl(low, high)
        assert result.carrier == FiniteSet(range(4))
        assert result == Relation(FiniteSet(range(4)), [(0, 0)])

    def test_not_commutative(self, low, high):
        result = rel_compl(high, low)
        assert result.carrier == FiniteSet(range(6, 10))
        assert result == Relation(FiniteSet(), [(6, 6)])

    def test_self_complement_is_empty(self, low):
        result = rel_compl(low, low)
        assert len(result) == 0
        assert len(result.carrier) == 0


class TestRelCompo:
    def test_scenario(self):
        a = Relation(FiniteSet(range(6)), [(0, 1), (1, 1)])
        b = Relation(FiniteSet(range(4, 10)), [(1, 2), (1, 3)])
        result = rel_compo(a, b)
        assert result == Relation(FiniteSet(), [(0, 2), (0, 3), (1, 2), (1, 3)])
        assert result.carrier == FiniteSet([0, 1, 2, 3])

    def test_order_matters(self):
        a = Relation(FiniteSet(range(3)), [(0, 1)])
        b = Relation(FiniteSet(range(3)), [(1, 2)])
        assert rel_compo(a, b) == Relation(FiniteSet(), [(0, 2)])
        assert len(rel_compo(b, a)) == 0

    def test_no_duplicate_links(self):
        """Two intermediates yield the same pair once."""
        a = Relation(FiniteSet(range(4)), [(0, 1), (0, 2)])
        b = Relation(FiniteSet(range(4)), [(1, 3), (2, 3)])
        assert rel_compo(a, b).links == [(0, 3)]

    def test_with_inverse_gives_shared_sources(self):
        r = Relation(FiniteSet(range(3)), [(0, 2), (1, 2)])
        result = rel_compo(r, rel_inverse(r))
        assert result == Relation(
            FiniteSet(), [(0, 0), (0, 1), (1, 0), (1, 1)]
        )
