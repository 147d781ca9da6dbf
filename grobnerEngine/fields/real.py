from grobnerEngine.exceptions import FieldConstructionError
from grobnerEngine.fields.numeric import Numeric


class Real(Numeric):
    '''
    A floating point real number.
    '''

    __slots__ = ('value',)

    def __init__(self, value: float = 0.0):
        self.value = float(value)

    def _add(self, other):
        return Real(self.value + other.value)

    def _mul(self, other):
        return Real(self.value * other.value)

    def __neg__(self):
        return Real(-self.value)

    def inverse(self):
        if self.value == 0.0:
            raise FieldConstructionError('zero has no inverse')

        return Real(1.0 / self.value)

    def zero(self):
        return REAL_ZERO

    def one(self):
        return REAL_ONE

    def cast(self, value):
        return Real(value)

    def is_zero(self):
        return self.value == 0.0

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if not isinstance(other, Real):
            return NotImplemented

        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return str(self.value)


REAL_ZERO = Real(0.0)
REAL_ONE = Real(1.0)
