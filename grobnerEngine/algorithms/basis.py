'''
S-polynomials and the post processing of Groebner bases.
'''

from grobnerEngine.exceptions import OrderingMismatch, RingMismatch
from grobnerEngine.structures import Polynomial, lcm


def s_polynomial(f: Polynomial, g: Polynomial) -> Polynomial:
    '''
    The s-polynomial f * (L / LT(f)) - g * (L / LT(g)), with L the lcm of the leading
    monomials of f and g.
    '''
    if f.field_size != g.field_size:
        raise RingMismatch('both polynomials should be defined in the same ring')
    if f.ordering.order_id != g.ordering.order_id:
        raise OrderingMismatch('both polynomials should use the same monomial ordering')

    ltf, ltg = f.leading_term(), g.leading_term()
    common = lcm(ltf, ltg)

    return f.multiply(common.divide(ltf)).subtract(g.multiply(common.divide(ltg)))


def minimize_grobner_basis(G: list[Polynomial]) -> list[Polynomial]:
    '''
    Makes every element monic and drops the elements whose leading monomial is divisible
    by the leading monomial of another remaining element.

    Args:
    - G: a Groebner basis.

    Returns:
    - a minimal Groebner basis of the same ideal.
    '''
    monic = [g.monic() for g in G if g]
    leads = [g.leading_term() for g in monic]
    kept = [True] * len(monic)

    for i in range(len(monic)):
        for j in range(len(monic)):
            if i != j and kept[j] and leads[j].divides(leads[i]):
                kept[i] = False
                break

    return [g for g, keep in zip(monic, kept) if keep]


def reduce_grobner_basis(G: list[Polynomial]) -> list[Polynomial]:
    '''
    The reduced Groebner basis: the minimal basis with every element reduced by the others.
    '''
    basis = minimize_grobner_basis(G)
    if len(basis) <= 1:
        return basis

    for i in range(len(basis)):
        others = basis[:i] + basis[i + 1:]
        basis[i] = basis[i].reduce(others)

    return basis


def is_grobner_basis(G: list[Polynomial]) -> bool:
    '''
    Buchberger's criterion: every s-polynomial of two elements reduces to zero.
    '''
    basis = [g for g in G if g]

    for i in range(len(basis)):
        for j in range(i + 1, len(basis)):
            if s_polynomial(basis[i], basis[j]).reduce(basis):
                return False

    return True
