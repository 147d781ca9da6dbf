'''
M4GB (Makarim and Stevens): a Groebner basis algorithm that keeps every basis element
fully reduced and caches the reduced multiples ("reductors") it builds along the way,
so that reducing a product of a monomial and a polynomial is a lookup per term.

The pairs are pairs of leading monomials instead of pairs of polynomials.
'''

import logging
from dataclasses import dataclass, field

from tqdm import tqdm

from grobnerEngine.orderings import MonomialOrdering
from grobnerEngine.structures import Monomial, Polynomial, lcm, one_like

logger = logging.getLogger(__name__)

MonomialPair = tuple[Monomial, Monomial]


@dataclass
class M4GBState:
    '''
    The mutable state of one M4GB run.

    Attributes:
    - ordering, field_size: the ring the polynomials live in.
    - polynomials: every monic, tail reduced polynomial built so far, including cached
      multiples and elements whose leading monomial left the frontier.
    - index: exponents of a leading monomial -> position in polynomials.
    - monomials: the frontier, the minimal leading monomials found so far.
    - pairs: the pairs of frontier monomials still to process.
    '''

    ordering: MonomialOrdering
    field_size: int
    polynomials: list[Polynomial] = field(default_factory=list)
    index: dict[tuple[int, ...], int] = field(default_factory=dict)
    monomials: list[Monomial] = field(default_factory=list)
    pairs: list[MonomialPair] = field(default_factory=list)

    def add(self, polynomial: Polynomial) -> None:
        self.index[polynomial.leading_term().exponents] = len(self.polynomials)
        self.polynomials.append(polynomial)

    def lookup(self, monomial: Monomial) -> Polynomial | None:
        position = self.index.get(monomial.exponents)

        return None if position is None else self.polynomials[position]

    def reducible(self, monomial: Monomial) -> bool:
        return any(m.divides(monomial) for m in self.monomials)

    def basis(self) -> list[Polynomial]:
        frontier = {m.exponents for m in self.monomials}

        return [p for p in self.polynomials if p.leading_term().exponents in frontier]


def multiply_full_reduce(state: M4GBState, term: Monomial, polynomial: Polynomial) -> Polynomial:
    '''
    Reduces term * polynomial by the frontier. Every product term divisible by a frontier
    monomial is replaced by the tail of its reductor.
    '''
    terms = []

    for monomial in polynomial:
        product = term.multiply(monomial)
        if state.reducible(product):
            reductor = get_reductor(state, product)
            factor = product.coefficient / reductor.leading_coefficient()
            terms.extend(m.multiply(-factor) for m in reductor.monomials[1:])
        else:
            terms.append(product)

    return Polynomial(terms, state.ordering, state.field_size)


def get_reductor(state: M4GBState, monomial: Monomial) -> Polynomial:
    '''
    The monic polynomial with leading monomial `monomial` and a fully reduced tail, built
    and cached on first use.
    '''
    reductor = state.lookup(monomial)
    if reductor is not None:
        return reductor

    divisor = next(m for m in state.monomials if m.divides(monomial))
    f = state.lookup(divisor)

    unit = monomial.with_coefficient(monomial.coefficient.one())
    reduced = multiply_full_reduce(state, unit.divide(f.leading_term()), f.tail())
    reductor = reduced.add(Polynomial([unit], state.ordering, state.field_size))
    state.add(reductor)

    return reductor


def _eliminate(polynomial: Polynomial, row: Polynomial) -> Polynomial:
    '''Removes the leading monomial of the monic row from the tail of polynomial.'''
    coefficient = polynomial.tail().coefficient_of(row.leading_term())
    if coefficient is None:
        return polynomial

    return polynomial.subtract(row.multiply(coefficient))


def update_reduce(state: M4GBState, polynomial: Polynomial) -> None:
    '''
    Adds a nonzero polynomial, already reduced by the frontier, to the state.

    Every monomial in the tails of the known polynomials that is divisible by the new
    leading monomial gets its own reduced multiple of the polynomial, then all the new
    and old polynomials are reduced by each other, and finally the frontier and the
    pairs are updated.
    '''
    lead = polynomial.leading_term()
    rows = [polynomial.monic()]
    leads = {lead.exponents}
    pending = {}
    scanned = 0

    def scan(p):
        for m in p.monomials[1:]:
            if m.exponents not in leads and lead.divides(m):
                pending[m.exponents] = m

    scan(rows[0])
    while True:
        for p in state.polynomials[scanned:]:
            scan(p)
        scanned = len(state.polynomials)

        if not pending:
            break

        selected = state.ordering.greatest(pending.values())
        del pending[selected.exponents]
        selected = selected.with_coefficient(selected.coefficient.one())

        reduced = multiply_full_reduce(state, selected.divide(lead), polynomial.tail())
        row = reduced.add(Polynomial([selected], state.ordering, state.field_size))
        rows.append(row)
        leads.add(selected.exponents)
        scan(row)

    key = state.ordering.key
    while rows:
        top = max(rows, key=lambda p: key(p.leading_term()))
        rows = [_eliminate(p, top) for p in rows if p is not top]
        state.polynomials[:] = [_eliminate(p, top) for p in state.polynomials]
        state.add(top)

    update_pairs(state, lead.with_coefficient(lead.coefficient.one()))


def update_pairs(state: M4GBState, monomial: Monomial) -> None:
    '''
    Gebauer-Moeller criteria on monomials: pairs whose lcm is a multiple of the lcm of
    another new pair are dropped, then coprime pairs, then old pairs made redundant by
    the chain criterion. The frontier drops the multiples of the new monomial.
    '''
    candidates = [(monomial, m) for m in state.monomials]
    saved = []

    while candidates:
        pair = candidates.pop()
        if monomial.disjoint_with(pair[1]):
            saved.append(pair)
            continue

        common = lcm(monomial, pair[1])
        if not any(lcm(monomial, other[1]).divides(common) for other in candidates + saved):
            saved.append(pair)

    new_pairs = [pair for pair in saved if not monomial.disjoint_with(pair[1])]

    def keep(pair):
        x, y = pair
        common = lcm(x, y)
        return (not monomial.divides(common)
                or lcm(x, monomial).exponents == common.exponents
                or lcm(monomial, y).exponents == common.exponents)

    state.pairs = [pair for pair in state.pairs if keep(pair)] + new_pairs
    state.monomials = [m for m in state.monomials if not monomial.divides(m)] + [monomial]


def m4gb(G: list[Polynomial], verbose: bool = False) -> tuple[list[Polynomial], dict]:
    '''
    Computes the reduced Groebner basis of the ideal generated by G with M4GB.

    Args:
    - G: the generators, zero polynomials are ignored.
    - verbose: show a progress bar over the processed pairs.

    Returns:
    - (basis, stats); the basis holds the polynomials whose leading monomial is still in
      the frontier.
    '''
    generators = [g for g in G if g]
    stats = {
        'pairs_processed': 0,
        'zero_reductions': 0,
        'nonzero_reductions': 0,
    }

    if not generators:
        return [], stats

    first = generators[0]
    state = M4GBState(first.ordering, first.field_size)
    one = one_like(first.leading_term())

    for g in generators:
        reduced = multiply_full_reduce(state, one, g)
        if reduced:
            update_reduce(state, reduced)

    logger.debug('m4gb: %d generators, %d pairs', len(generators), len(state.pairs))

    key = state.ordering.key
    with tqdm(desc='m4gb', unit='pair', disable=not verbose) as pbar:
        while state.pairs:
            pair = min(state.pairs, key=lambda p: key(p[0]))
            state.pairs.remove(pair)
            stats['pairs_processed'] += 1

            x, y = pair
            f, g = state.lookup(x), state.lookup(y)
            common = lcm(x, y)

            h = multiply_full_reduce(state, common.divide(f.leading_term()), f.tail()).subtract(
                multiply_full_reduce(state, common.divide(g.leading_term()), g.tail()))

            if h:
                stats['nonzero_reductions'] += 1
                update_reduce(state, h)
            else:
                stats['zero_reductions'] += 1

            pbar.update(1)
            pbar.set_postfix(basis=len(state.monomials), pairs=len(state.pairs))

    basis = state.basis()
    stats['reductors'] = len(state.polynomials) - len(basis)
    logger.debug('m4gb: basis of %d polynomials after %d pairs', len(basis), stats['pairs_processed'])

    return basis, stats
