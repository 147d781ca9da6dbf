from math import gcd

from grobnerEngine.exceptions import FieldConstructionError
from grobnerEngine.fields.numeric import Numeric


class Rational(Numeric):
    '''
    An exact fraction, always kept in lowest terms with a positive denominator.
    '''

    __slots__ = ('numerator', 'denominator')

    def __init__(self, numerator: int = 0, denominator: int = 1):
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError('numerator and denominator must be integers')
        if denominator == 0:
            raise FieldConstructionError('denominator cannot be zero')

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        divisor = gcd(numerator, denominator)
        self.numerator = numerator // divisor
        self.denominator = denominator // divisor

    def _add(self, other):
        return Rational(self.numerator * other.denominator + other.numerator * self.denominator,
                        self.denominator * other.denominator)

    def _mul(self, other):
        return Rational(self.numerator * other.numerator, self.denominator * other.denominator)

    def __neg__(self):
        return Rational(-self.numerator, self.denominator)

    def inverse(self):
        if self.numerator == 0:
            raise FieldConstructionError('zero has no inverse')

        return Rational(self.denominator, self.numerator)

    def zero(self):
        return RATIONAL_ZERO

    def one(self):
        return RATIONAL_ONE

    def cast(self, value):
        return Rational(value)

    def is_zero(self):
        return self.numerator == 0

    def __eq__(self, other):
        if isinstance(other, int):
            return self.denominator == 1 and self.numerator == other
        if not isinstance(other, Rational):
            return NotImplemented

        return self.numerator == other.numerator and self.denominator == other.denominator

    def __hash__(self):
        return hash((self.numerator, self.denominator))

    def __float__(self):
        return self.numerator / self.denominator

    def __str__(self):
        if self.denominator == 1:
            return str(self.numerator)

        return f'{self.numerator}/{self.denominator}'


RATIONAL_ZERO = Rational(0)
RATIONAL_ONE = Rational(1)
