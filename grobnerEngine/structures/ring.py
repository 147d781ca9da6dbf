'''
Polynomial rings: a coefficient field, named variables, an ordering and a monomial
representation, bundled so that monomials and polynomials can be built from readable
data.
'''

from collections.abc import Iterable, Mapping, Sequence

from grobnerEngine.exceptions import RingMismatch
from grobnerEngine.fields import GaloisFieldElement, Numeric, convert, field_from_name
from grobnerEngine.orderings import MonomialOrdering, get_ordering
from grobnerEngine.structures.monomial import DenseMonomial, Monomial, SparseMonomial
from grobnerEngine.structures.polynomial import Polynomial, format_monomial

REPRESENTATIONS = {
    'dense': DenseMonomial,
    'sparse': SparseMonomial,
}


class PolynomialRing:
    '''
    A polynomial ring k[x0, ..., xn].

    Args:
    - field: the coefficient field, an element type (Rational, Real, ...) or a name
      ('Q', 'R', 'C', 'GF').
    - variables: the variable names, from the largest to the smallest.
    - ordering: a MonomialOrdering or one of 'lex', 'grlex', 'grevlex'.
    - representation: 'dense' or 'sparse' monomials.
    - modulus: the prime modulus when the field is a Galois field.

    >>> R = PolynomialRing('Q', ['x', 'y'], 'lex')
    >>> x, y = R.gens
    >>> R.format(x**2 - 2*y)
    'x^2 - 2*y'
    '''

    def __init__(self, field: type | str, variables: Sequence[str],
                 ordering: MonomialOrdering | str = 'grevlex', representation: str = 'dense',
                 modulus: int | None = None):
        if isinstance(field, str):
            field, modulus = field_from_name(field, modulus)
        elif field is not GaloisFieldElement:
            modulus = None

        if representation not in REPRESENTATIONS:
            raise ValueError(f'unknown monomial representation {representation}')
        if len(set(variables)) != len(variables):
            raise ValueError('variable names must be distinct')

        self.field = field
        self.modulus = modulus
        self.variables = tuple(variables)
        self.ordering = get_ordering(ordering)
        self.representation = representation
        self.monomial_type = REPRESENTATIONS[representation]
        self._one = convert(1, field, modulus)
        self._index = {name: i for i, name in enumerate(self.variables)}

    @property
    def ngens(self) -> int:
        return len(self.variables)

    def coefficient(self, value) -> Numeric:
        '''
        Brings a value into the coefficient field. Python numbers are converted, elements
        of another field are rejected.
        '''
        if isinstance(value, Numeric):
            self._one.same_field(value)
            return value

        return convert(value, self.field, self.modulus)

    def index(self, variable: str) -> int:
        try:
            return self._index[variable]
        except KeyError:
            raise ValueError(f'unknown variable {variable}') from None

    def monomial(self, coefficient, powers: Mapping[str, int] | Sequence[int] = ()) -> Monomial:
        '''
        Builds a monomial from a coefficient and either a {variable: exponent} mapping or
        a full exponent vector.
        '''
        if isinstance(powers, Mapping):
            exponents = [0] * self.ngens
            for variable, power in powers.items():
                exponents[self.index(variable)] += power
        else:
            exponents = list(powers) or [0] * self.ngens
            if len(exponents) != self.ngens:
                raise RingMismatch(f'expected {self.ngens} exponents, got {len(exponents)}')

        return self.monomial_type(exponents, self.coefficient(coefficient))

    def polynomial(self, terms: Iterable[Monomial | tuple]) -> Polynomial:
        '''
        Builds a polynomial from monomials or (coefficient, powers) pairs.
        '''
        monomials = [t if isinstance(t, Monomial) else self.monomial(*t) for t in terms]

        return Polynomial(monomials, self.ordering, self.ngens)

    def zero(self) -> Polynomial:
        return Polynomial((), self.ordering, self.ngens)

    def one(self) -> Polynomial:
        return self.constant(self._one)

    def constant(self, value) -> Polynomial:
        return self.polynomial([(value, ())])

    def __call__(self, value) -> Polynomial:
        return self.constant(value)

    @property
    def gens(self) -> tuple[Polynomial, ...]:
        '''The variables as polynomials.'''
        return tuple(self.polynomial([(1, {name: 1})]) for name in self.variables)

    def contract(self, k: int) -> 'PolynomialRing':
        '''The ring without its first k variables.'''
        if not 0 <= k <= self.ngens:
            raise ValueError(f'cannot drop {k} of {self.ngens} variables')

        return self._replace(variables=self.variables[k:])

    def extend(self, variables: Sequence[str]) -> 'PolynomialRing':
        '''The ring with extra variables appended after the existing ones.'''
        return self._replace(variables=self.variables + tuple(variables))

    def with_ordering(self, ordering: MonomialOrdering | str) -> 'PolynomialRing':
        return self._replace(ordering=ordering)

    def _replace(self, **changes) -> 'PolynomialRing':
        arguments = dict(field=self.field, variables=self.variables, ordering=self.ordering,
                         representation=self.representation, modulus=self.modulus)
        arguments.update(changes)

        return PolynomialRing(**arguments)

    def format(self, element: Polynomial | Monomial) -> str:
        '''Human readable form using the variable names of the ring.'''
        if isinstance(element, Monomial):
            return format_monomial(element, self.variables)

        return element.to_string(self.variables)

    def parse(self, text: str) -> Polynomial:
        '''Parses one polynomial, e.g. '3*x^2*y - y/2 + 1', in this ring.'''
        from grobnerEngine.dsl import parse_polynomial

        return parse_polynomial(text, self)

    def __repr__(self):
        field = self.field.__name__ if self.modulus is None else f'GF({self.modulus})'

        return f'PolynomialRing({field}, {list(self.variables)}, {self.ordering!r}, {self.representation})'
