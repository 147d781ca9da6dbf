import pytest

from grobnerEngine.fields import GaloisFieldElement, Rational
from grobnerEngine.linalg import MacaulayMatrix, MatrixSolver
from grobnerEngine.structures import PolynomialRing


def Q(*values):
    return [Rational(v) for v in values]


@pytest.fixture
def R():
    return PolynomialRing('Q', ['x', 'y'], 'grevlex')


class TestMacaulayMatrix:
    def test_columns_are_the_sorted_monomials(self, R):
        matrix = MacaulayMatrix([R.parse('x + 1'), R.parse('y^2 - x')])
        assert [m.exponents for m in matrix.monomials] == [(0, 2), (1, 0), (0, 0)]
        assert matrix.rows.shape == (2, 3)
        assert list(matrix.rows[1]) == Q(1, -1, 0)

    def test_reduced_rows_span_the_same_space(self, R):
        polynomials = [R.parse('x + y'), R.parse('x - y'), R.parse('2*x')]
        reduced = MacaulayMatrix(polynomials).reduce().polynomials()
        assert reduced == [R.parse('x'), R.parse('y')]

    def test_dependent_rows_vanish(self, R):
        polynomials = [R.parse('x^2 + y'), R.parse('2*x^2 + 2*y'), R.parse('x*y - 1')]
        matrix = MacaulayMatrix(polynomials).reduce()
        assert len(matrix.polynomials()) == 2
        assert matrix.leading_monomials() == {(2, 0), (1, 1)}

    def test_needs_polynomials(self):
        with pytest.raises(ValueError):
            MacaulayMatrix([])


class TestMatrixSolver:
    def test_unique_solution(self):
        solution = MatrixSolver([Q(2, 1), Q(1, 3)], Q(3, 5)).solve()
        assert solution == [Rational(4, 5), Rational(7, 5)]

    def test_galois_field(self):
        solution = MatrixSolver([[GaloisFieldElement(3, 7)]], [GaloisFieldElement(1, 7)]).solve()
        assert solution == [GaloisFieldElement(5, 7)]

    def test_consistent_overdetermined_system(self):
        solution = MatrixSolver([Q(1, 0), Q(0, 1), Q(1, 1)], Q(1, 2, 3)).solve()
        assert solution == Q(1, 2)

    def test_inconsistent_system_has_no_solution(self):
        assert MatrixSolver([Q(1, 0), Q(0, 1), Q(1, 1)], Q(1, 2, 4)).solve() is None

    def test_singular_system_has_no_unique_solution(self):
        assert MatrixSolver([Q(1, 2), Q(2, 4)], Q(1, 2)).solve() is None

    def test_solve_leaves_the_system_untouched(self):
        solver = MatrixSolver([Q(0, 1), Q(1, 0)], Q(5, 6))
        assert solver.solve() == Q(6, 5)
        assert solver.solve() == Q(6, 5)
        assert list(solver.values) == Q(5, 6)

    def test_shapes_must_agree(self):
        with pytest.raises(ValueError):
            MatrixSolver([Q(1, 0)], Q(1, 2))

        with pytest.raises(ValueError):
            MatrixSolver([Q(1, 0), Q(1)], Q(1, 2))
