'''
Lossless coercion of values between the coefficient fields.
'''

import math
from fractions import Fraction

from grobnerEngine.exceptions import ConversionError, FieldConstructionError
from grobnerEngine.fields.complex import Complex
from grobnerEngine.fields.galois import GaloisFieldElement
from grobnerEngine.fields.numeric import Numeric
from grobnerEngine.fields.rational import Rational
from grobnerEngine.fields.real import Real

FIELDS = {
    'R': Real,
    'C': Complex,
    'Q': Rational,
    'GF': GaloisFieldElement,
}


def field_from_name(name: str, modulus: int | None = None) -> tuple[type, int | None]:
    '''
    Resolves a field name ('R', 'C', 'Q' or 'GF') to its element type.

    Args:
    - name: the field name, case insensitive.
    - modulus: the prime modulus, required for 'GF' and ignored otherwise.

    Returns:
    - (field type, modulus)
    '''
    field = FIELDS.get(name.upper())
    if field is None:
        raise ValueError(f'unknown field {name}')

    if field is GaloisFieldElement:
        if modulus is None:
            raise FieldConstructionError('a Galois field needs a modulus')
        return field, modulus

    return field, None


def one(field: type, modulus: int | None = None) -> Numeric:
    return convert(1, field, modulus)


def zero(field: type, modulus: int | None = None) -> Numeric:
    return convert(0, field, modulus)


def _as_fraction(value) -> Fraction:
    '''
    The exact rational value of a real-valued input, or ConversionError.
    '''
    if isinstance(value, GaloisFieldElement):
        return Fraction(value.value)
    if isinstance(value, Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, Complex):
        if not value.is_real():
            raise ConversionError(f'{value} has a nonzero imaginary part')
        value = value.real
    if isinstance(value, Real):
        value = value.value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ConversionError(f'{value} is not a finite number')
        return Fraction(value)
    if isinstance(value, (int, Fraction)):
        return Fraction(value)

    raise ConversionError(f'cannot convert {value!r}')


def convert(value, field: type, modulus: int | None = None) -> Numeric:
    '''
    Assigns value into the given field, raising ConversionError when that would lose
    information (a non integral number into a Galois field, a complex number with a
    nonzero imaginary part into the reals, ...).

    Args:
    - value: a Numeric, or a python int, float or Fraction.
    - field: one of Real, Rational, Complex, GaloisFieldElement.
    - modulus: the modulus of the target Galois field.

    Returns:
    - the converted element.
    '''
    if type(value) is field and (field is not GaloisFieldElement or value.modulus == modulus):
        return value

    if field is Complex:
        if isinstance(value, Complex):
            return value
        return Complex(float(_as_fraction(value)), 0.0)

    exact = _as_fraction(value)

    if field is Real:
        return Real(float(exact))

    if field is Rational:
        return Rational(exact.numerator, exact.denominator)

    if field is GaloisFieldElement:
        if modulus is None:
            raise FieldConstructionError('a Galois field needs a modulus')
        if exact.denominator != 1:
            raise ConversionError(f'{value} is not an integer and cannot be assigned to GF({modulus})')
        return GaloisFieldElement(exact.numerator, modulus)

    raise ValueError(f'unknown field {field}')
