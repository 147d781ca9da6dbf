'''
Polynomials over one of the coefficient fields, sorted by a monomial ordering.
'''

import re
from collections.abc import Iterable, Sequence

from grobnerEngine.exceptions import (
    FieldConstructionError,
    OrderingMismatch,
    RepresentationMismatch,
    RingMismatch,
)
from grobnerEngine.fields import Numeric
from grobnerEngine.orderings import MonomialOrdering
from grobnerEngine.structures.monomial import Monomial

_TRAILING_ZERO = re.compile(r'\.0(?!\d)')


def format_coefficient(coefficient: Numeric) -> str:
    return _TRAILING_ZERO.sub('', str(coefficient))


def format_monomial(monomial: Monomial, variables: Sequence[str], leading: bool = True) -> str:
    '''
    Renders a monomial with `*` and `^`, hiding unit coefficients. Unless leading, the
    result starts with the ' + ' or ' - ' that joins it to the previous term.
    '''
    coefficient = format_coefficient(monomial.coefficient)
    sign = '-' if coefficient.startswith('-') else '+'
    coefficient = coefficient.lstrip('-')

    powers = [name if power == 1 else f'{name}^{power}'
              for name, power in ((variables[i], p) for i, p in monomial.items())]

    if not powers:
        body = coefficient
    elif coefficient == '1':
        body = '*'.join(powers)
    else:
        body = '*'.join([coefficient] + powers)

    if leading:
        return body if sign == '+' else f'-{body}'

    return f' {sign} {body}'


class Polynomial:
    '''
    An immutable polynomial.

    The monomials are kept sorted in decreasing order, with distinct exponent vectors and
    nonzero coefficients, so the leading term is the first one. Every operation returns a
    new polynomial.

    Args:
    - monomials: the terms, in any order, possibly with repeated exponents.
    - ordering: the monomial ordering.
    - field_size: the number of variables, needed only when there are no monomials.
    '''

    __slots__ = ('monomials', 'ordering', 'field_size', '_degree')

    def __init__(self, monomials: Iterable[Monomial], ordering: MonomialOrdering,
                 field_size: int | None = None):
        merged = {}
        for monomial in monomials:
            if field_size is None:
                field_size = monomial.field_size
            elif monomial.field_size != field_size:
                raise RingMismatch('all monomials should be defined in the same ring')

            exponents = monomial.exponents
            if exponents in merged:
                previous = merged[exponents]
                merged[exponents] = previous.with_coefficient(previous.coefficient + monomial.coefficient)
            else:
                merged[exponents] = monomial

        if field_size is None:
            raise ValueError('the ring dimension of an empty polynomial must be given')

        terms = [m for m in merged.values() if not m.is_zero()]
        terms.sort(key=ordering.key, reverse=True)

        self.monomials = tuple(terms)
        self.ordering = ordering
        self.field_size = field_size
        self._degree = None

    @classmethod
    def _from_sorted(cls, monomials: Sequence[Monomial], ordering: MonomialOrdering,
                     field_size: int) -> 'Polynomial':
        polynomial = cls.__new__(cls)
        polynomial.monomials = tuple(monomials)
        polynomial.ordering = ordering
        polynomial.field_size = field_size
        polynomial._degree = None

        return polynomial

    def _empty(self) -> 'Polynomial':
        return Polynomial._from_sorted((), self.ordering, self.field_size)

    def _check(self, other: 'Polynomial') -> None:
        if self.field_size != other.field_size:
            raise RingMismatch('both polynomials should be defined in the same ring')
        if self.ordering.order_id != other.ordering.order_id:
            raise OrderingMismatch('both polynomials should use the same monomial ordering')
        if self.monomials and other.monomials and \
                self.monomials[0].representation != other.monomials[0].representation:
            raise RepresentationMismatch('cannot combine dense and sparse polynomials')

    def is_zero(self) -> bool:
        return not self.monomials

    def is_one(self) -> bool:
        return len(self.monomials) == 1 and self.monomials[0].is_one()

    def degree(self) -> int:
        '''
        The largest total degree among the terms, which under a non graded ordering need
        not be the degree of the leading term.
        '''
        if self._degree is None:
            self._degree = max((m.degree for m in self.monomials), default=0)

        return self._degree

    def leading_term(self) -> Monomial:
        if not self.monomials:
            raise ValueError('the zero polynomial has no leading term')

        return self.monomials[0]

    def leading_coefficient(self) -> Numeric:
        return self.leading_term().coefficient

    def leading_monomial(self) -> Monomial:
        '''The leading term with its coefficient replaced by one.'''
        lt = self.leading_term()

        return lt.with_coefficient(lt.coefficient.one())

    def multidegree(self) -> tuple[int, ...]:
        return self.leading_term().exponents

    def tail(self) -> 'Polynomial':
        '''The polynomial without its leading term.'''
        return Polynomial._from_sorted(self.monomials[1:], self.ordering, self.field_size)

    def coefficient_of(self, monomial: Monomial) -> Numeric | None:
        '''
        The coefficient of the term with the exponents of monomial, None if absent.
        '''
        exponents = monomial.exponents
        for term in self.monomials:
            if term.exponents == exponents:
                return term.coefficient

        return None

    def _merge(self, other: 'Polynomial', negate: bool) -> 'Polynomial':
        self._check(other)
        key = self.ordering.key
        a, b = self.monomials, other.monomials
        i = j = 0
        result = []

        while i < len(a) and j < len(b):
            ka, kb = key(a[i]), key(b[j])
            if ka > kb:
                result.append(a[i])
                i += 1
            elif ka < kb:
                result.append(b[j].with_coefficient(-b[j].coefficient) if negate else b[j])
                j += 1
            else:
                if negate:
                    coefficient = a[i].coefficient - b[j].coefficient
                else:
                    coefficient = a[i].coefficient + b[j].coefficient
                if not coefficient.is_zero():
                    result.append(a[i].with_coefficient(coefficient))
                i += 1
                j += 1

        result.extend(a[i:])
        if negate:
            result.extend(m.with_coefficient(-m.coefficient) for m in b[j:])
        else:
            result.extend(b[j:])

        return Polynomial._from_sorted(result, self.ordering, self.field_size)

    def add(self, other: 'Polynomial') -> 'Polynomial':
        return self._merge(other, negate=False)

    def subtract(self, other: 'Polynomial') -> 'Polynomial':
        return self._merge(other, negate=True)

    def negate(self) -> 'Polynomial':
        terms = [m.with_coefficient(-m.coefficient) for m in self.monomials]

        return Polynomial._from_sorted(terms, self.ordering, self.field_size)

    def multiply(self, other) -> 'Polynomial':
        '''
        Multiplies by a scalar, a monomial or another polynomial.
        '''
        if isinstance(other, Polynomial):
            self._check(other)
            result = self._empty()
            for monomial in other.monomials:
                result = result.add(self.multiply(monomial))
            return result

        if not self.monomials:
            return self

        if isinstance(other, Monomial):
            if other.is_zero():
                return self._empty()
            if other.field_size != self.field_size:
                raise RingMismatch('the monomial should be defined in the same ring')
            terms = [m.multiply(other) for m in self.monomials]
        else:
            scalar = self.monomials[0].coefficient._coerce(other)
            if scalar is None:
                raise TypeError(f'cannot multiply a polynomial by {other!r}')
            if scalar.is_zero():
                return self._empty()
            if scalar.is_one():
                return self
            terms = [m.multiply(scalar) for m in self.monomials]

        terms = [m for m in terms if not m.is_zero()]

        return Polynomial._from_sorted(terms, self.ordering, self.field_size)

    def divide(self, scalar) -> 'Polynomial':
        '''
        Divides every coefficient by a nonzero field element.
        '''
        if not self.monomials:
            return self

        scalar = self.monomials[0].coefficient._coerce(scalar)
        if scalar is None:
            raise TypeError('a polynomial can only be divided by a field element')
        if scalar.is_zero():
            raise FieldConstructionError('division by zero')

        return self.multiply(scalar.inverse())

    def monic(self) -> 'Polynomial':
        if not self.monomials:
            return self

        return self.divide(self.leading_coefficient())

    def reduce(self, basis: Sequence['Polynomial']) -> 'Polynomial':
        '''
        The remainder of the division of self by the basis.

        The leading term of the working polynomial is divided by the leading term of the
        first basis element whose leading term divides it; when no element does, the term
        is moved to the remainder.

        Args:
        - basis: the divisors, tried in list order.

        Returns:
        - the remainder.
        '''
        divisors = [(g, g.leading_term()) for g in basis if g.monomials]
        remainder = []
        working = self

        while working.monomials:
            lt = working.monomials[0]

            for g, glt in divisors:
                quotient = lt.divide(glt)
                if not quotient.is_zero():
                    working = working.subtract(g.multiply(quotient))
                    break
            else:
                remainder.append(lt)
                working = working.tail()

        return Polynomial._from_sorted(remainder, self.ordering, self.field_size)

    def reorder(self, ordering: MonomialOrdering) -> 'Polynomial':
        '''The same polynomial sorted by another ordering.'''
        return Polynomial(self.monomials, ordering, self.field_size)

    def to_string(self, variables: Sequence[str] | None = None) -> str:
        if not self.monomials:
            return '0'

        if variables is None:
            variables = [f'x{i}' for i in range(self.field_size)]

        first, *rest = self.monomials

        return format_monomial(first, variables) + ''.join(format_monomial(m, variables, leading=False) for m in rest)

    def __iter__(self):
        return iter(self.monomials)

    def __len__(self):
        return len(self.monomials)

    def __bool__(self):
        return bool(self.monomials)

    def __add__(self, other):
        if isinstance(other, Polynomial):
            return self.add(other)
        if isinstance(other, (Monomial, Numeric, int)):
            return self.add(self._lift(other))

        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Polynomial):
            return self.subtract(other)
        if isinstance(other, (Monomial, Numeric, int)):
            return self.subtract(self._lift(other))

        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, (Monomial, Numeric, int)):
            return self._lift(other).subtract(self)

        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (Polynomial, Monomial, Numeric, int)):
            return self.multiply(other)

        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Monomial, Numeric, int)):
            return self.multiply(other)

        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (Numeric, int)):
            return self.divide(other)

        return NotImplemented

    def __neg__(self):
        return self.negate()

    def __pow__(self, exponent: int):
        if not isinstance(exponent, int) or exponent < 0:
            raise ValueError('polynomials can only be raised to nonnegative integer powers')

        result = self._lift(1)
        for _ in range(exponent):
            result = result.multiply(self)

        return result

    def _lift(self, value) -> 'Polynomial':
        '''
        A monomial or a constant as a polynomial of this ring.
        '''
        if isinstance(value, Monomial):
            return Polynomial([value], self.ordering, self.field_size)

        if not self.monomials:
            raise ValueError('cannot infer the coefficient field of the zero polynomial')

        lt = self.monomials[0]
        coefficient = lt.coefficient._coerce(value)
        constant = lt.from_items(self.field_size, {}, coefficient)

        return Polynomial([constant], self.ordering, self.field_size)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented

        return (self.field_size == other.field_size
                and self.ordering.order_id == other.ordering.order_id
                and self.monomials == other.monomials)

    def __hash__(self):
        return hash((self.field_size, self.ordering.order_id, self.monomials))

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f'Polynomial({self.to_string()})'
