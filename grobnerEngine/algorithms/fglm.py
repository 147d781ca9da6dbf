'''
FGLM: converts a Groebner basis of a zero dimensional ideal into a lex Groebner basis
using linear algebra on normal forms.
'''

import logging

from grobnerEngine.fields import Numeric
from grobnerEngine.linalg import MatrixSolver
from grobnerEngine.orderings import LEX
from grobnerEngine.structures import Monomial, Polynomial

logger = logging.getLogger(__name__)


def is_zero_dimensional(G: list[Polynomial]) -> bool:
    '''
    A Groebner basis spans a zero dimensional ideal iff every variable has a pure power
    among the leading monomials.
    '''
    leads = [g.leading_term() for g in G if g]
    if any(lt.degree == 0 for lt in leads):
        return True

    pure = {next(i for i, _ in lt.items()) for lt in leads if len(list(lt.items())) == 1}

    return bool(leads) and len(pure) == leads[0].field_size


def linear_combination(normal_form: Polynomial, normal_forms: list[Polynomial]) -> list[Numeric] | None:
    '''
    Writes normal_form as a linear combination of normal_forms.

    Returns:
    - the coefficients, one per element of normal_forms, or None if there is none.
    '''
    if not normal_forms:
        return [] if not normal_form else None

    rows = {}
    for p in normal_forms:
        for m in p:
            rows.setdefault(m.exponents, len(rows))

    if any(m.exponents not in rows for m in normal_form):
        return None

    zero = normal_forms[0].leading_coefficient().zero()
    matrix = [[zero] * len(normal_forms) for _ in rows]
    for j, p in enumerate(normal_forms):
        for m in p:
            matrix[rows[m.exponents]][j] = m.coefficient

    values = [zero] * len(rows)
    for m in normal_form:
        values[rows[m.exponents]] = m.coefficient

    return MatrixSolver(matrix, values).solve()


def fglm(G: list[Polynomial]) -> tuple[list[Polynomial], dict]:
    '''
    Computes the lex Groebner basis of the ideal whose Groebner basis, under any other
    ordering, is G.

    Candidate monomials are visited in increasing lex order, starting from 1. A candidate
    whose normal form by G is independent of the normal forms already seen is a new
    standard monomial, and its products with every variable become candidates. A
    dependent one gives a lex basis element. Multiples of the leading monomials found so
    far are skipped.

    Args:
    - G: a Groebner basis of a zero dimensional ideal, usually under grevlex.

    Returns:
    - (basis, stats) with the reduced lex basis sorted by increasing leading monomial.
    '''
    G = [g for g in G if g]
    if not G:
        raise ValueError('the basis must contain a nonzero polynomial')
    if not is_zero_dimensional(G):
        raise ValueError('the ideal is not zero dimensional')

    source = G[0].ordering
    n = G[0].field_size
    template = G[0].leading_term()
    one = template.coefficient.one()

    def monomial(exponents: list[int]) -> Monomial:
        return template.from_items(n, dict(enumerate(exponents)), one)

    standard: list[Monomial] = []
    normal_forms: list[Polynomial] = []
    basis: list[Polynomial] = []
    leads: list[Monomial] = []

    candidates = {(0,) * n: monomial([0] * n)}

    while candidates:
        candidate = min(candidates.values(), key=LEX.key)
        del candidates[candidate.exponents]

        if any(lead.divides(candidate) for lead in leads):
            continue

        normal_form = Polynomial([candidate], source, n).reduce(G)
        combination = linear_combination(normal_form, normal_forms)

        if combination is None:
            logger.debug('fglm: %s is a standard monomial', candidate.exponents)
            standard.append(candidate)
            normal_forms.append(normal_form)
            for variable in range(n):
                exponents = list(candidate.exponents)
                exponents[variable] += 1
                candidates.setdefault(tuple(exponents), monomial(exponents))
            continue

        logger.debug('fglm: %s is dependent', candidate.exponents)
        terms = [candidate] + [m.multiply(-c) for m, c in zip(standard, combination)]
        basis.append(Polynomial(terms, LEX, n))
        leads.append(candidate)

    return basis, {'standard_monomials': len(standard)}
