from functools import lru_cache

from sympy import isprime

from grobnerEngine.exceptions import FieldConstructionError
from grobnerEngine.fields.numeric import Numeric


@lru_cache(maxsize=None)
def _check_modulus(modulus: int) -> int:
    if not isinstance(modulus, int) or not isprime(modulus):
        raise FieldConstructionError(f'modulus must be a prime number, got {modulus}')

    return modulus


def xgcd(a: int, b: int) -> tuple[int, int, int]:
    '''
    Extended euclidean algorithm.

    Returns:
    - (g, s, t) such that g = gcd(a, b) = s * a + t * b
    '''
    s0, s1, t0, t1 = 1, 0, 0, 1

    while b:
        q, a, b = a // b, b, a % b
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1

    return a, s0, t0


class GaloisFieldElement(Numeric):
    '''
    A residue modulo a prime, always normalized into [0, modulus).

    >>> GaloisFieldElement(-1, 5)
    GaloisFieldElement(4)
    '''

    __slots__ = ('value', 'modulus')

    def __init__(self, value: int, modulus: int):
        self.modulus = _check_modulus(modulus)
        self.value = value % modulus

    def same_field(self, other):
        super().same_field(other)

        if other.modulus != self.modulus:
            raise FieldConstructionError(
                f'elements of GF({self.modulus}) and GF({other.modulus}) cannot be combined')

    def _add(self, other):
        return GaloisFieldElement(self.value + other.value, self.modulus)

    def _mul(self, other):
        return GaloisFieldElement(self.value * other.value, self.modulus)

    def __neg__(self):
        return GaloisFieldElement(-self.value, self.modulus)

    def inverse(self):
        if self.value == 0:
            raise FieldConstructionError('zero has no inverse')

        _, s, _ = xgcd(self.value, self.modulus)

        return GaloisFieldElement(s, self.modulus)

    def zero(self):
        return _constants(self.modulus)[0]

    def one(self):
        return _constants(self.modulus)[1]

    def cast(self, value):
        return GaloisFieldElement(value, self.modulus)

    def is_zero(self):
        return self.value == 0

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other % self.modulus
        if not isinstance(other, GaloisFieldElement):
            return NotImplemented

        return self.value == other.value and self.modulus == other.modulus

    def __hash__(self):
        return hash((self.value, self.modulus))

    def __int__(self):
        return self.value

    def __str__(self):
        return str(self.value)


@lru_cache(maxsize=None)
def _constants(modulus: int) -> tuple[GaloisFieldElement, GaloisFieldElement]:
    return GaloisFieldElement(0, modulus), GaloisFieldElement(1, modulus)
