'''
Errors raised by the algebra engine.

All of them signal a misuse of the API (mixing rings, orderings, representations
or fields) and are raised at the point of misuse, nothing inside the engine
catches them.
'''


class GrobnerError(Exception):
    '''Base class of every error raised by grobnerEngine.'''


class RingMismatch(GrobnerError, ValueError):
    '''Operands live in rings of different dimension, or in different numeric fields.'''


class OrderingMismatch(GrobnerError, ValueError):
    '''Polynomials sorted under incompatible monomial orderings were combined.'''


class RepresentationMismatch(GrobnerError, ValueError):
    '''A dense monomial was combined with a sparse one.'''


class FieldConstructionError(GrobnerError, ArithmeticError):
    '''Invalid field element: composite modulus, zero denominator, division by zero.'''


class ConversionError(GrobnerError, ValueError):
    '''A value cannot be assigned into another field without losing information.'''
