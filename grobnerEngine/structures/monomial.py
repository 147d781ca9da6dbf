'''
Monomials: an exponent vector tagged with a field coefficient.

Two representations exist, a dense one that keeps every exponent and a sparse one
that keeps a bitset of the nonzero positions and only the nonzero exponents. They
cannot be mixed, except in `lcm`.
'''

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from itertools import product

from grobnerEngine.exceptions import RepresentationMismatch, RingMismatch
from grobnerEngine.fields import Numeric


class Monomial(ABC):
    '''
    An immutable monomial. `degree` is the sum of the exponents.
    '''

    __slots__ = ('coefficient', 'degree', '_keys')
    representation = None

    @property
    @abstractmethod
    def field_size(self) -> int:
        pass

    @property
    @abstractmethod
    def exponents(self) -> tuple[int, ...]:
        pass

    @abstractmethod
    def exponent(self, index: int) -> int:
        pass

    @abstractmethod
    def items(self) -> Iterator[tuple[int, int]]:
        '''
        Yields (index, exponent) for every nonzero exponent, by increasing index.
        '''

    @classmethod
    @abstractmethod
    def from_items(cls, field_size: int, powers: dict[int, int], coefficient: Numeric) -> 'Monomial':
        pass

    def _check(self, other: 'Monomial') -> None:
        if self.field_size != other.field_size:
            raise RingMismatch('both monomials should be defined in the same ring')
        if self.representation != other.representation:
            raise RepresentationMismatch(
                f'cannot combine a {self.representation} monomial with a {other.representation} one')

    def with_coefficient(self, coefficient: Numeric) -> 'Monomial':
        '''
        The same exponents with another coefficient.
        '''
        monomial = self.from_items(self.field_size, dict(self.items()), coefficient)
        monomial._keys = self._keys

        return monomial

    def zero_monomial(self) -> 'Monomial':
        '''
        The sentinel returned by a division that does not go through.
        '''
        return self.from_items(self.field_size, {}, self.coefficient.zero())

    def is_zero(self) -> bool:
        return self.coefficient.is_zero()

    def is_one(self) -> bool:
        return self.degree == 0 and self.coefficient.is_one()

    def exponents_equal(self, other: 'Monomial') -> bool:
        self._check(other)

        return self.exponents == other.exponents

    def multiply(self, other) -> 'Monomial':
        '''
        Multiplies by a monomial of the same representation, or scales the coefficient by
        a field element.
        '''
        if not isinstance(other, Monomial):
            scaled = self.from_items(self.field_size, dict(self.items()), self.coefficient * other)
            scaled._keys = self._keys
            return scaled

        self._check(other)
        powers = dict(self.items())
        for index, power in other.items():
            powers[index] = powers.get(index, 0) + power

        return self.from_items(self.field_size, powers, self.coefficient * other.coefficient)

    def divide(self, other) -> 'Monomial':
        '''
        Divides by a monomial of the same representation, or divides the coefficient by a
        field element.

        When other does not divide self (some exponent would turn negative) the zero
        monomial is returned instead, so the result doubles as a divisibility test.
        '''
        if not isinstance(other, Monomial):
            return self.multiply(self.coefficient.one() / other)

        self._check(other)
        powers = dict(self.items())
        for index, power in other.items():
            remaining = powers.get(index, 0) - power
            if remaining < 0:
                return self.zero_monomial()
            powers[index] = remaining

        return self.from_items(self.field_size, powers, self.coefficient / other.coefficient)

    def divides(self, other: 'Monomial') -> bool:
        self._check(other)

        return all(other.exponent(index) >= power for index, power in self.items())

    def disjoint_with(self, other: 'Monomial') -> bool:
        '''
        True when no variable appears in both monomials; a constant is never disjoint.
        '''
        self._check(other)
        if self.degree == 0:
            return False

        return not any(other.exponent(index) for index, _ in self.items())

    def is_power_of(self, other: 'Monomial') -> bool:
        '''
        True if self = other^k for some integer k >= 0, ignoring coefficients.
        '''
        mine, theirs = self.exponents, other.exponents
        if len(mine) != len(theirs):
            raise RingMismatch('both monomials should be defined in the same ring')

        base = next((i for i, e in enumerate(theirs) if e), None)
        if base is None:
            return not any(mine)

        k, rest = divmod(mine[base], theirs[base])
        if rest:
            return False

        return all(a == k * b for a, b in zip(mine, theirs))

    def divisors(self) -> Iterator['Monomial']:
        '''
        Enumerates every proper, nonconstant divisor of this monomial with coefficient
        one, counting down the exponent vector with the first index most significant.

        Every call returns a fresh generator.
        '''
        exponents = self.exponents
        one = self.coefficient.one()
        ranges = [range(e, -1, -1) for e in exponents]

        for candidate in product(*ranges):
            if candidate == exponents or not any(candidate):
                continue
            yield self.from_items(self.field_size, {i: e for i, e in enumerate(candidate) if e}, one)

    def __mul__(self, other):
        if isinstance(other, (Monomial, Numeric, int)):
            return self.multiply(other)

        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (Numeric, int)):
            return self.multiply(other)

        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, (Monomial, Numeric, int)):
            return self.divide(other)

        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Monomial):
            return NotImplemented

        return self.exponents == other.exponents and self.coefficient == other.coefficient

    def __hash__(self):
        return hash((self.exponents, self.coefficient))

    def __repr__(self):
        return f'{type(self).__name__}({list(self.exponents)}, {self.coefficient})'


class DenseMonomial(Monomial):
    '''
    A monomial storing the full exponent vector.
    '''

    __slots__ = ('_exponents',)
    representation = 'dense'

    def __init__(self, exponents: Sequence[int], coefficient: Numeric):
        self._exponents = tuple(exponents)
        if any(e < 0 for e in self._exponents):
            raise ValueError('exponents must be nonnegative')
        self.coefficient = coefficient
        self.degree = sum(self._exponents)
        self._keys = {}

    @property
    def field_size(self):
        return len(self._exponents)

    @property
    def exponents(self):
        return self._exponents

    def exponent(self, index):
        return self._exponents[index]

    def items(self):
        return ((i, e) for i, e in enumerate(self._exponents) if e)

    @classmethod
    def from_items(cls, field_size, powers, coefficient):
        exponents = [0] * field_size
        for index, power in powers.items():
            exponents[index] = power

        return cls(exponents, coefficient)


class SparseMonomial(Monomial):
    '''
    A monomial storing a bitset of the variables it contains and their exponents.
    '''

    __slots__ = ('bits', 'powers', '_size', '_full')
    representation = 'sparse'

    def __init__(self, exponents: Sequence[int], coefficient: Numeric):
        bits = 0
        powers = []
        for index, power in enumerate(exponents):
            if power < 0:
                raise ValueError('exponents must be nonnegative')
            if power:
                bits |= 1 << index
                powers.append(power)

        self._size = len(exponents)
        self._full = tuple(exponents)
        self.bits = bits
        self.powers = tuple(powers)
        self.coefficient = coefficient
        self.degree = sum(self.powers)
        self._keys = {}

    @property
    def field_size(self):
        return self._size

    @property
    def exponents(self):
        if self._full is None:
            exponents = [0] * self._size
            for index, power in self.items():
                exponents[index] = power
            self._full = tuple(exponents)

        return self._full

    def exponent(self, index):
        mask = 1 << index
        if not self.bits & mask:
            return 0

        return self.powers[(self.bits & (mask - 1)).bit_count()]

    def items(self):
        bits = self.bits
        for power in self.powers:
            low = bits & -bits
            yield low.bit_length() - 1, power
            bits ^= low

    @classmethod
    def from_items(cls, field_size, powers, coefficient):
        monomial = cls.__new__(cls)
        bits = 0
        for index, power in powers.items():
            if power:
                bits |= 1 << index

        monomial._size = field_size
        monomial._full = None
        monomial.bits = bits
        monomial.powers = tuple(powers[i] for i in sorted(powers) if powers[i])
        monomial.coefficient = coefficient
        monomial.degree = sum(monomial.powers)
        monomial._keys = {}

        return monomial

    def disjoint_with(self, other):
        self._check(other)

        return self.degree != 0 and not self.bits & other.bits


def lcm(a: Monomial, b: Monomial) -> Monomial:
    '''
    Least common multiple of two monomials with coefficient one. Either representation
    is accepted; the result is sparse only when both operands are sparse.
    '''
    if a.field_size != b.field_size:
        raise RingMismatch('both monomials should be defined in the same ring')

    one = a.coefficient.one()
    if isinstance(a, SparseMonomial) and isinstance(b, SparseMonomial):
        powers = dict(a.items())
        for index, power in b.items():
            powers[index] = max(powers.get(index, 0), power)
        return SparseMonomial.from_items(a.field_size, powers, one)

    return DenseMonomial([max(x, y) for x, y in zip(a.exponents, b.exponents)], one)


def one_like(monomial: Monomial) -> Monomial:
    '''The monomial 1 in the ring and representation of monomial.'''
    return monomial.from_items(monomial.field_size, {}, monomial.coefficient.one())


def contains_monomial(monomials: Iterable[Monomial], monomial: Monomial) -> bool:
    return any(m.exponents == monomial.exponents for m in monomials)
