from grobnerEngine.structures.monomial import (
    Monomial,
    DenseMonomial,
    SparseMonomial,
    lcm,
    one_like,
    contains_monomial,
)
from grobnerEngine.structures.polynomial import Polynomial
from grobnerEngine.structures.ring import PolynomialRing

__all__ = [
    'Monomial',
    'DenseMonomial',
    'SparseMonomial',
    'lcm',
    'one_like',
    'contains_monomial',
    'Polynomial',
    'PolynomialRing',
]
