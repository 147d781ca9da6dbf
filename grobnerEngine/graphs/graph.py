'''
Graph k-coloring through ideal membership.

A graph is k-colorable iff the system x_v^k = 1 for every vertex v and
x_u^(k-1) + x_u^(k-2) * x_v + ... + x_v^(k-1) = 0 for every edge uv has a solution,
that is iff 1 is not in the ideal those polynomials generate.
'''

import logging

from grobnerEngine.algorithms import m4gb
from grobnerEngine.fields import Rational
from grobnerEngine.structures import Polynomial, PolynomialRing

logger = logging.getLogger(__name__)


class Graph:
    '''
    An undirected graph on the vertices 1, ..., vertex_count.
    '''

    def __init__(self, vertex_count: int, edges: list[tuple[int, int]] | None = None):
        if vertex_count < 0:
            raise ValueError('the number of vertices cannot be negative')

        self.vertex_count = vertex_count
        self.adjacency: list[set[int]] = [set() for _ in range(vertex_count)]

        for u, v in edges or ():
            self.add_edge(u, v)

    def add_edge(self, u: int, v: int) -> None:
        '''Adds the edge uv, vertices are numbered from 1.'''
        for vertex in (u, v):
            if not 1 <= vertex <= self.vertex_count:
                raise ValueError(f'vertex {vertex} is not in 1..{self.vertex_count}')

        self.adjacency[u - 1].add(v)
        self.adjacency[v - 1].add(u)

    def edges(self) -> list[tuple[int, int]]:
        '''Every edge once, as (u, v) with u <= v.'''
        return sorted((u + 1, v) for u, neighbors in enumerate(self.adjacency) for v in neighbors if u + 1 <= v)

    def ring(self, field: type | str = Rational, modulus: int | None = None) -> PolynomialRing:
        return PolynomialRing(field, [f'x{i}' for i in range(1, self.vertex_count + 1)],
                              'grevlex', 'sparse', modulus=modulus)

    def k_coloring_ideal_generators(self, k: int, field: type | str = Rational,
                                    modulus: int | None = None) -> list[Polynomial]:
        '''
        One polynomial x_v^k - 1 per vertex and one polynomial
        sum(x_u^(k-1-i) * x_v^i for i < k) per edge, with sparse monomials under grevlex.
        '''
        R = self.ring(field, modulus)
        n = self.vertex_count

        def power(exponents):
            return R.monomial(1, exponents)

        generators = []
        for vertex in range(n):
            exponents = [0] * n
            exponents[vertex] = k
            generators.append(R.polynomial([power(exponents), (-1, ())]))

        for u, v in self.edges():
            terms = []
            for i in range(k):
                exponents = [0] * n
                exponents[u - 1] += k - 1 - i
                exponents[v - 1] += i
                terms.append(power(exponents))
            generators.append(R.polynomial(terms))

        return generators

    def is_k_colorable(self, k: int, field: type | str = Rational, modulus: int | None = None) -> bool:
        '''
        Decides whether the vertices can be colored with k colors so that no edge joins
        two vertices of the same color.
        '''
        if k <= 0:
            raise ValueError(f'the number of colors must be positive, got {k}')

        if k >= self.vertex_count:
            return True

        generators = self.k_coloring_ideal_generators(k, field, modulus)
        basis, stats = m4gb(generators)
        logger.debug('%d-coloring: basis of %d polynomials, %d pairs', k, len(basis), stats['pairs_processed'])

        remainder = self.ring(field, modulus).one().reduce(basis)

        return bool(remainder)

    def __repr__(self):
        return f'Graph({self.vertex_count}, {self.edges()})'
