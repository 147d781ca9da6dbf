'''
Buchberger's algorithm with a choice of pair selection strategies.
'''

import heapq
import itertools
import logging

from tqdm import tqdm

from grobnerEngine.algorithms.basis import s_polynomial
from grobnerEngine.structures import Polynomial, lcm

logger = logging.getLogger(__name__)

STRATEGIES = ('first', 'degree', 'normal', 'sugar')


def pair_key(G: list[Polynomial], pair: tuple[int, int], strategy: str):
    '''
    Priority of a pair under a selection strategy, smaller is selected first.

    Args:
    - G: the current basis.
    - pair: indices (i, j) into G.
    - strategy: 'first' (fifo), 'degree' (total degree of the lcm), 'normal' (the lcm under
      the ordering of the ring) or 'sugar' (the sugar degree of the s-polynomial).

    Returns:
    - a sort key.
    '''
    f, g = G[pair[0]], G[pair[1]]
    ltf, ltg = f.leading_term(), g.leading_term()

    if strategy == 'first':
        return 0
    elif strategy == 'degree':
        return lcm(ltf, ltg).degree
    elif strategy == 'normal':
        return f.ordering.key(lcm(ltf, ltg))
    elif strategy == 'sugar':
        return max(f.degree() - ltf.degree, g.degree() - ltg.degree) + lcm(ltf, ltg).degree
    else:
        raise ValueError('unknown selection strategy')


def buchberger(G: list[Polynomial], strategy: str = 'normal',
               verbose: bool = False) -> tuple[list[Polynomial], dict]:
    '''
    Computes a Groebner basis of the ideal generated by G.

    Pairs wait in a priority queue ordered by the strategy, ties are served in insertion
    order. The result is neither minimized nor reduced.

    Args:
    - G: the generators, zero polynomials are ignored.
    - strategy: one of 'first', 'degree', 'normal', 'sugar'.
    - verbose: show a progress bar over the processed pairs.

    Returns:
    - (basis, stats) where stats counts the processed pairs and the zero and nonzero
      reductions.
    '''
    if strategy not in STRATEGIES:
        raise ValueError('unknown selection strategy')

    basis = [g for g in G if g]
    stats = {
        'pairs_processed': 0,
        'zero_reductions': 0,
        'nonzero_reductions': 0,
    }

    counter = itertools.count()
    pairs = []

    def push(i, j):
        heapq.heappush(pairs, (pair_key(basis, (i, j), strategy), next(counter), i, j))

    for i in range(len(basis)):
        for j in range(i + 1, len(basis)):
            push(i, j)

    logger.debug('buchberger: %d generators, %d pairs, strategy %s', len(basis), len(pairs), strategy)

    with tqdm(desc='buchberger', unit='pair', disable=not verbose) as pbar:
        while pairs:
            _, _, i, j = heapq.heappop(pairs)
            stats['pairs_processed'] += 1

            remainder = s_polynomial(basis[i], basis[j]).reduce(basis)

            if remainder:
                stats['nonzero_reductions'] += 1
                basis.append(remainder)
                for k in range(len(basis) - 1):
                    push(k, len(basis) - 1)
            else:
                stats['zero_reductions'] += 1

            pbar.update(1)
            pbar.set_postfix(basis=len(basis), pairs=len(pairs))

    logger.debug('buchberger: basis of %d polynomials after %d pairs', len(basis), stats['pairs_processed'])

    return basis, stats
