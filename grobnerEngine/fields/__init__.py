from grobnerEngine.fields.numeric import Numeric
from grobnerEngine.fields.real import Real
from grobnerEngine.fields.rational import Rational
from grobnerEngine.fields.complex import Complex
from grobnerEngine.fields.galois import GaloisFieldElement
from grobnerEngine.fields.conversion import convert, field_from_name, one, zero, FIELDS

__all__ = [
    'Numeric',
    'Real',
    'Rational',
    'Complex',
    'GaloisFieldElement',
    'convert',
    'field_from_name',
    'one',
    'zero',
    'FIELDS',
]
