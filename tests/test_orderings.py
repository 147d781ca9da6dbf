import pytest

from grobnerEngine.exceptions import RingMismatch
from grobnerEngine.fields import Rational
from grobnerEngine.orderings import (
    GREVLEX,
    GRLEX,
    LEX,
    EliminationOrdering,
    GrevlexOrdering,
    LexOrdering,
    WeightedOrdering,
    get_ordering,
)
from grobnerEngine.structures import DenseMonomial, SparseMonomial


def m(*exponents):
    return DenseMonomial(exponents, Rational(1))


@pytest.mark.parametrize("a, b, lex, grlex, grevlex", [
    ((1, 0), (0, 5), 1, -1, -1),
    ((2, 3), (1, 4), 1, 1, 1),
    ((2, 0, 1), (1, 1, 1), 1, 1, 1),
    ((1, 2, 0), (2, 0, 1), -1, -1, 1),
    ((0, 0, 1), (0, 1, 0), -1, -1, -1),
    ((1, 1), (1, 1), 0, 0, 0),
])
def test_compare(a, b, lex, grlex, grevlex):
    assert LEX.compare(m(*a), m(*b)) == lex
    assert GRLEX.compare(m(*a), m(*b)) == grlex
    assert GREVLEX.compare(m(*a), m(*b)) == grevlex
    assert GREVLEX.compare(m(*b), m(*a)) == -grevlex


def test_compare_ignores_coefficients_and_representation():
    a = DenseMonomial((1, 2), Rational(5))
    b = SparseMonomial((1, 2), Rational(-3))
    assert GRLEX.compare(a, b) == 0


def test_compare_rejects_different_rings():
    with pytest.raises(RingMismatch):
        LEX.compare(m(1, 0), m(1, 0, 0))


def test_sort_and_greatest():
    monomials = [m(0, 2), m(1, 0), m(1, 1), m(0, 0)]
    assert [x.exponents for x in GREVLEX.sort(monomials)] == [(1, 1), (0, 2), (1, 0), (0, 0)]
    assert [x.exponents for x in LEX.sort(monomials, descending=False)] == [(0, 0), (0, 2), (1, 0), (1, 1)]
    assert LEX.greatest(monomials).exponents == (1, 1)


class TestWeightedOrdering:
    def test_weighted_degree_decides(self):
        ordering = WeightedOrdering([1, 2])
        assert ordering.compare(m(0, 1), m(1, 0)) == 1
        assert ordering.compare(m(3, 0), m(0, 1)) == 1

    def test_ties_use_the_tiebreaker(self):
        assert WeightedOrdering([1, 2]).compare(m(2, 0), m(0, 1)) == 1
        assert WeightedOrdering([1, 1, 1], GREVLEX).compare(m(1, 2, 0), m(2, 0, 1)) == 1

    def test_weights_must_match_the_ring(self):
        with pytest.raises(ValueError):
            WeightedOrdering([1, 2]).compare(m(1, 0, 0), m(0, 1, 0))


class TestEliminationOrdering:
    def test_eliminated_block_decides_first(self):
        ordering = EliminationOrdering([0], [1, 2], GRLEX)
        assert ordering.compare(m(1, 0, 0), m(0, 5, 5)) == 1
        assert ordering.compare(m(1, 0, 1), m(1, 1, 0)) == -1

    def test_accepts_bitsets(self):
        a, b = m(0, 1, 0), m(0, 0, 4)
        assert EliminationOrdering(0b010, 0b101, LEX).compare(a, b) == 1
        assert EliminationOrdering([1], [0, 2], LEX).compare(a, b) == 1

    @pytest.mark.parametrize('elimination, retained', [
        ([0, 1], [1, 2]),
        ([0], [2]),
        (0b11, 0b01),
    ])
    def test_blocks_must_partition_the_variables(self, elimination, retained):
        with pytest.raises(ValueError):
            EliminationOrdering(elimination, retained, LEX)


def test_order_ids_identify_the_family():
    assert [o.order_id for o in (LEX, GRLEX, GREVLEX)] == [1, 2, 3]
    assert WeightedOrdering([1, 2]).order_id == WeightedOrdering([3, 1], GRLEX).order_id == 4
    assert EliminationOrdering([0], [1], LEX).order_id == 5


def test_get_ordering():
    assert get_ordering('lex') is LEX
    assert get_ordering('GREVLEX') is GREVLEX
    assert isinstance(get_ordering('grevlex'), GrevlexOrdering)

    custom = LexOrdering()
    assert get_ordering(custom) is custom

    with pytest.raises(ValueError):
        get_ordering('revlex')
