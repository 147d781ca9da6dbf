from grobnerEngine.exceptions import FieldConstructionError
from grobnerEngine.fields.numeric import Numeric


class Complex(Numeric):
    '''
    A complex number stored as a pair of floats.
    '''

    __slots__ = ('real', 'imaginary')

    def __init__(self, real: float = 0.0, imaginary: float = 0.0):
        self.real = float(real)
        self.imaginary = float(imaginary)

    def _add(self, other):
        return Complex(self.real + other.real, self.imaginary + other.imaginary)

    def _mul(self, other):
        return Complex(self.real * other.real - self.imaginary * other.imaginary,
                       self.real * other.imaginary + self.imaginary * other.real)

    def __neg__(self):
        return Complex(-self.real, -self.imaginary)

    def conjugate(self) -> 'Complex':
        return Complex(self.real, -self.imaginary)

    def inverse(self):
        norm = self.real * self.real + self.imaginary * self.imaginary
        if norm == 0.0:
            raise FieldConstructionError('zero has no inverse')

        conjugate = self.conjugate()
        return Complex(conjugate.real / norm, conjugate.imaginary / norm)

    def zero(self):
        return COMPLEX_ZERO

    def one(self):
        return COMPLEX_ONE

    def cast(self, value):
        return Complex(value, 0.0)

    def is_zero(self):
        return self.real == 0.0 and self.imaginary == 0.0

    def is_real(self) -> bool:
        return self.imaginary == 0.0

    def __eq__(self, other):
        if isinstance(other, int):
            return self.imaginary == 0.0 and self.real == other
        if not isinstance(other, Complex):
            return NotImplemented

        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self):
        return hash((self.real, self.imaginary))

    def __str__(self):
        return f'({self.real},{self.imaginary})'


COMPLEX_ZERO = Complex(0.0, 0.0)
COMPLEX_ONE = Complex(1.0, 0.0)
Complex.I = Complex(0.0, 1.0)
