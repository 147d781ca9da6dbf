import logging

from grobnerEngine.exceptions import (
    GrobnerError,
    RingMismatch,
    OrderingMismatch,
    RepresentationMismatch,
    FieldConstructionError,
    ConversionError,
)
from grobnerEngine.fields import Numeric, Real, Rational, Complex, GaloisFieldElement, convert
from grobnerEngine.orderings import (
    MonomialOrdering,
    LexOrdering,
    GrlexOrdering,
    GrevlexOrdering,
    WeightedOrdering,
    EliminationOrdering,
    get_ordering,
)
from grobnerEngine.structures import Monomial, DenseMonomial, SparseMonomial, Polynomial, PolynomialRing, lcm
from grobnerEngine.linalg import MacaulayMatrix, MatrixSolver
from grobnerEngine.algorithms import (
    s_polynomial,
    minimize_grobner_basis,
    reduce_grobner_basis,
    is_grobner_basis,
    buchberger,
    f4,
    m4gb,
    fglm,
)
from grobnerEngine.dsl import parse_system, load_system

logging.getLogger(__name__).addHandler(logging.NullHandler())


def enable_logging(level: int = logging.DEBUG) -> None:
    '''Prints the log records of the package to stderr.'''
    logger = logging.getLogger(__name__)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s %(name)s %(levelname)s: %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(level)
