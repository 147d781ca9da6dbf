'''
Exact Gaussian elimination over the coefficient fields.

Matrices are numpy arrays of dtype object holding field elements, so every entry
keeps its exact arithmetic.
'''

from collections.abc import Sequence

import numpy as np

from grobnerEngine.fields import Numeric
from grobnerEngine.structures import Monomial, Polynomial


def gauss_jordan(rows: np.ndarray, values: np.ndarray | None = None) -> int:
    '''
    Brings rows to reduced row echelon form in place.

    Args:
    - rows: 2d object array of field elements.
    - values: optional right hand side, swapped, scaled and combined along with the rows.

    Returns:
    - the rank of the matrix.
    '''
    n_rows, n_cols = rows.shape
    pivot_row = 0

    for col in range(n_cols):
        if pivot_row == n_rows:
            break

        pivot = next((r for r in range(pivot_row, n_rows) if not rows[r, col].is_zero()), None)
        if pivot is None:
            continue

        if pivot != pivot_row:
            rows[[pivot_row, pivot]] = rows[[pivot, pivot_row]]
            if values is not None:
                values[[pivot_row, pivot]] = values[[pivot, pivot_row]]

        lead = rows[pivot_row, col]
        rows[pivot_row] = rows[pivot_row] / lead
        if values is not None:
            values[pivot_row] = values[pivot_row] / lead

        for r in range(n_rows):
            factor = rows[r, col]
            if r == pivot_row or factor.is_zero():
                continue
            rows[r] = rows[r] - rows[pivot_row] * factor
            if values is not None:
                values[r] = values[r] - values[pivot_row] * factor

        pivot_row += 1

    return pivot_row


class MacaulayMatrix:
    '''
    The coefficient matrix of a list of polynomials sharing a ring and an ordering.

    Columns are the distinct monomials of the polynomials, sorted in decreasing order,
    rows are the polynomials.
    '''

    def __init__(self, polynomials: Sequence[Polynomial]):
        if not polynomials:
            raise ValueError('a Macaulay matrix needs at least one polynomial')

        first = polynomials[0]
        self.ordering = first.ordering
        self.field_size = first.field_size

        distinct = {}
        for polynomial in polynomials:
            for monomial in polynomial:
                if monomial.exponents not in distinct:
                    distinct[monomial.exponents] = monomial.with_coefficient(monomial.coefficient.one())

        self.monomials: list[Monomial] = sorted(distinct.values(), key=self.ordering.key, reverse=True)
        columns = {m.exponents: j for j, m in enumerate(self.monomials)}

        zero = self._zero(polynomials)
        self.rows = np.full((len(polynomials), len(self.monomials)), zero, dtype=object)
        for i, polynomial in enumerate(polynomials):
            for monomial in polynomial:
                self.rows[i, columns[monomial.exponents]] = monomial.coefficient

    @staticmethod
    def _zero(polynomials: Sequence[Polynomial]) -> Numeric | None:
        for polynomial in polynomials:
            if polynomial:
                return polynomial.leading_coefficient().zero()

        return None

    def reduce(self) -> 'MacaulayMatrix':
        '''Row reduces the matrix in place.'''
        if self.rows.size:
            gauss_jordan(self.rows)

        return self

    def polynomials(self) -> list[Polynomial]:
        '''
        The rows as polynomials, all zero rows are dropped.
        '''
        result = []
        for row in self.rows:
            terms = [m.with_coefficient(c) for m, c in zip(self.monomials, row) if not c.is_zero()]
            if terms:
                result.append(Polynomial(terms, self.ordering, self.field_size))

        return result

    def leading_monomials(self) -> set[tuple[int, ...]]:
        '''Exponent vectors of the leading monomials of the nonzero rows.'''
        return {p.leading_term().exponents for p in self.polynomials()}


class MatrixSolver:
    '''
    Solves the square or overdetermined system matrix * x = values over a field.

    Args:
    - matrix: the coefficients, a sequence of rows of field elements.
    - values: the right hand side, one field element per row.
    '''

    def __init__(self, matrix: Sequence[Sequence[Numeric]], values: Sequence[Numeric]):
        n_rows = len(values)
        n_cols = len(matrix[0]) if len(matrix) else 0
        if len(matrix) != n_rows:
            raise ValueError('the matrix and the values must have the same number of rows')

        self.rows = np.empty((n_rows, n_cols), dtype=object)
        for i, row in enumerate(matrix):
            if len(row) != n_cols:
                raise ValueError('all rows must have the same length')
            for j, entry in enumerate(row):
                self.rows[i, j] = entry

        self.values = np.empty(n_rows, dtype=object)
        for i, value in enumerate(values):
            self.values[i] = value

    def solve(self) -> list[Numeric] | None:
        '''
        Returns the unique solution, ordered by column, or None when the system has no
        solution or more than one.
        '''
        rows, values = self.rows.copy(), self.values.copy()
        if rows.size:
            gauss_jordan(rows, values)

        n_rows, n_cols = rows.shape
        used = set()
        solution = []

        for col in range(n_cols):
            nonzero = [r for r in range(n_rows) if not rows[r, col].is_zero()]
            if len(nonzero) != 1:
                return None

            r = nonzero[0]
            if not rows[r, col].is_one() or r in used:
                return None

            used.add(r)
            solution.append(values[r])

        if any(not values[r].is_zero() for r in range(n_rows) if r not in used):
            return None

        return solution
