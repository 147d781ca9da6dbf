'''
The contract shared by the four coefficient fields.
'''

from abc import ABC, abstractmethod

from grobnerEngine.exceptions import FieldConstructionError, RingMismatch


class Numeric(ABC):
    '''
    An immutable element of a field.

    Subclasses implement the arithmetic between two elements of the same field in
    `_add`, `_mul` and `inverse`; the operators here take care of checking that both
    operands belong to the same field and of lifting plain python integers into it.
    '''

    __slots__ = ()

    @abstractmethod
    def _add(self, other: 'Numeric') -> 'Numeric':
        pass

    @abstractmethod
    def _mul(self, other: 'Numeric') -> 'Numeric':
        pass

    @abstractmethod
    def __neg__(self) -> 'Numeric':
        pass

    @abstractmethod
    def inverse(self) -> 'Numeric':
        '''
        Returns the multiplicative inverse, raises FieldConstructionError on zero.
        '''

    @abstractmethod
    def zero(self) -> 'Numeric':
        pass

    @abstractmethod
    def one(self) -> 'Numeric':
        pass

    @abstractmethod
    def cast(self, value: int) -> 'Numeric':
        '''
        Builds the element of this field that corresponds to the integer value.
        '''

    @abstractmethod
    def is_zero(self) -> bool:
        pass

    def is_one(self) -> bool:
        return self == self.one()

    def same_field(self, other: 'Numeric') -> None:
        '''
        Raises unless other is an element of the same field as self.
        '''
        if type(other) is not type(self):
            raise RingMismatch(f'cannot combine {type(self).__name__} with {type(other).__name__}')

    def _coerce(self, other):
        if isinstance(other, int):
            return self.cast(other)

        if not isinstance(other, Numeric):
            return None

        self.same_field(other)

        return other

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return self._add(other)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return self._add(-other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return other._add(-self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return self._mul(other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        if other.is_zero():
            raise FieldConstructionError('division by zero')

        return self._mul(other.inverse())

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented

        return other / self

    def __pos__(self):
        return self

    def __bool__(self):
        return not self.is_zero()

    def __repr__(self):
        return f'{type(self).__name__}({self})'
