'''
Faugere's F4: pairs of the same degree are reduced together by row reducing a Macaulay
matrix.
'''

import logging

from tqdm import tqdm

from grobnerEngine.linalg import MacaulayMatrix
from grobnerEngine.structures import Polynomial, lcm

logger = logging.getLogger(__name__)


def select_pairs(G: list[Polynomial], pairs: list[tuple[int, int]]) -> tuple[list[tuple[int, int]], list[tuple[int, int]]]:
    '''
    Splits the pairs into the ones whose lcm has the minimal total degree and the rest.
    '''
    degrees = [lcm(G[i].leading_term(), G[j].leading_term()).degree for i, j in pairs]
    lowest = min(degrees)

    selected = [p for p, d in zip(pairs, degrees) if d == lowest]
    remaining = [p for p, d in zip(pairs, degrees) if d != lowest]

    return selected, remaining


def s_halves(G: list[Polynomial], pairs: list[tuple[int, int]]) -> list[Polynomial]:
    '''
    The two multiples f * (L / LT(f)) and g * (L / LT(g)) of every pair, kept apart.
    '''
    rows = []
    for i, j in pairs:
        f, g = G[i], G[j]
        common = lcm(f.leading_term(), g.leading_term())
        rows.append(f.multiply(common.divide(f.leading_term())))
        rows.append(g.multiply(common.divide(g.leading_term())))

    return rows


def symbolic_preprocessing(rows: list[Polynomial], G: list[Polynomial]) -> list[Polynomial]:
    '''
    Adds reducers to the rows until every monomial that some basis element can reduce is
    the leading monomial of a row.

    Args:
    - rows: the s-halves.
    - G: the current basis.

    Returns:
    - the rows followed by the reducers.
    '''
    rows = list(rows)
    ordering = rows[0].ordering
    done = {p.leading_term().exponents for p in rows}
    pending = {}
    for p in rows:
        for m in p:
            if m.exponents not in done:
                pending[m.exponents] = m

    while pending:
        monomial = ordering.greatest(pending.values())
        del pending[monomial.exponents]
        done.add(monomial.exponents)

        monomial = monomial.with_coefficient(monomial.coefficient.one())
        reducer = next((g for g in G if g.leading_term().divides(monomial)), None)
        if reducer is None:
            continue

        row = reducer.multiply(monomial.divide(reducer.leading_term()))
        rows.append(row)
        for m in row:
            if m.exponents not in done:
                pending[m.exponents] = m

    return rows


def reduction(pairs: list[tuple[int, int]], G: list[Polynomial]) -> list[Polynomial]:
    '''
    Row reduces the preprocessed s-halves and returns the rows with new leading monomials.
    '''
    rows = symbolic_preprocessing(s_halves(G, pairs), G)
    leads = {p.leading_term().exponents for p in rows}

    matrix = MacaulayMatrix(rows).reduce()

    return [p for p in matrix.polynomials() if p.leading_term().exponents not in leads]


def f4(G: list[Polynomial], verbose: bool = False) -> tuple[list[Polynomial], dict]:
    '''
    Computes a Groebner basis of the ideal generated by G with F4.

    Args:
    - G: the generators, zero polynomials are ignored.
    - verbose: show a progress bar over the processed pairs.

    Returns:
    - (basis, stats), the basis is neither minimized nor reduced.
    '''
    basis = [g for g in G if g]
    pairs = [(i, j) for i in range(len(basis)) for j in range(i + 1, len(basis))]
    stats = {
        'rounds': 0,
        'pairs_processed': 0,
        'zero_reductions': 0,
        'nonzero_reductions': 0,
    }

    logger.debug('f4: %d generators, %d pairs', len(basis), len(pairs))

    with tqdm(desc='f4', unit='pair', disable=not verbose) as pbar:
        while pairs:
            selected, pairs = select_pairs(basis, pairs)
            new = reduction(selected, basis)

            stats['rounds'] += 1
            stats['pairs_processed'] += len(selected)
            stats['nonzero_reductions'] += len(new)
            stats['zero_reductions'] += max(len(selected) - len(new), 0)

            for p in new:
                pairs.extend((k, len(basis)) for k in range(len(basis)))
                basis.append(p)

            pbar.update(len(selected))
            pbar.set_postfix(basis=len(basis), pairs=len(pairs))

    logger.debug('f4: basis of %d polynomials after %d rounds', len(basis), stats['rounds'])

    return basis, stats
