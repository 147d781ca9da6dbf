from grobnerEngine.algorithms.basis import (
    s_polynomial,
    minimize_grobner_basis,
    reduce_grobner_basis,
    is_grobner_basis,
)
from grobnerEngine.algorithms.buchberger import buchberger, STRATEGIES
from grobnerEngine.algorithms.f4 import f4
from grobnerEngine.algorithms.m4gb import m4gb
from grobnerEngine.algorithms.fglm import fglm

__all__ = [
    's_polynomial',
    'minimize_grobner_basis',
    'reduce_grobner_basis',
    'is_grobner_basis',
    'buchberger',
    'STRATEGIES',
    'f4',
    'm4gb',
    'fglm',
]
