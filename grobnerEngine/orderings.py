'''
Monomial orderings.

Every ordering turns an exponent vector into a sort key, the way `R.order` does for
sympy rings; `compare` and the leading term of a polynomial are defined through that
key. Keys are cached on the monomials since the same monomial gets compared many times
during a reduction.
'''

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from grobnerEngine.exceptions import RingMismatch

if TYPE_CHECKING:
    from grobnerEngine.structures.monomial import Monomial


def _bitset(indices: int | Iterable[int]) -> int:
    if isinstance(indices, int):
        return indices

    bits = 0
    for index in indices:
        bits |= 1 << index

    return bits


class MonomialOrdering:
    '''
    Base class of the orderings. `order_id` is shared by all orderings of the same
    family, polynomials sorted by orderings with the same id may be combined.
    '''

    order_id = 0
    name = None

    def _key(self, exponents: tuple[int, ...]) -> tuple:
        raise NotImplementedError

    def key(self, monomial: 'Monomial') -> tuple:
        '''
        Sort key of a monomial, larger keys are larger monomials.
        '''
        cache = monomial._keys
        key = cache.get(self)
        if key is None:
            key = cache[self] = self._key(monomial.exponents)

        return key

    def compare(self, a: 'Monomial', b: 'Monomial') -> int:
        '''
        Returns a negative number, zero or a positive number as a is smaller than, equal
        to or greater than b. Coefficients are ignored.
        '''
        if a.field_size != b.field_size:
            raise RingMismatch('both monomials should be defined in the same ring')

        ka, kb = self.key(a), self.key(b)

        return (ka > kb) - (ka < kb)

    def greatest(self, monomials: Iterable['Monomial']) -> 'Monomial':
        return max(monomials, key=self.key)

    def sort(self, monomials: Iterable['Monomial'], descending: bool = True) -> list['Monomial']:
        return sorted(monomials, key=self.key, reverse=descending)

    def __repr__(self):
        return f'{type(self).__name__}()'


class LexOrdering(MonomialOrdering):
    '''
    Pure lexicographic ordering, x0 > x1 > ... > xn.
    '''

    order_id = 1
    name = 'lex'

    def _key(self, exponents):
        return exponents


class GrlexOrdering(MonomialOrdering):
    '''
    Total degree first, lexicographic on ties.
    '''

    order_id = 2
    name = 'grlex'

    def _key(self, exponents):
        return sum(exponents), exponents


class GrevlexOrdering(MonomialOrdering):
    '''
    Total degree first; on ties the monomial with the larger exponent in the last
    variable where they differ is the smaller one.
    '''

    order_id = 3
    name = 'grevlex'

    def _key(self, exponents):
        return sum(exponents), tuple(-e for e in reversed(exponents))


class WeightedOrdering(MonomialOrdering):
    '''
    Compares the weighted degrees sum(w_i * e_i), ties are broken by another ordering.

    Args:
    - weights: one integer weight per variable.
    - tiebreaker: the ordering used on equal weighted degrees, lex by default.
    '''

    order_id = 4
    name = 'weighted'

    def __init__(self, weights: Sequence[int], tiebreaker: MonomialOrdering | None = None):
        self.weights = tuple(weights)
        self.tiebreaker = tiebreaker if tiebreaker is not None else LexOrdering()

    def _key(self, exponents):
        if len(exponents) != len(self.weights):
            raise ValueError(f'expected {len(self.weights)} weights, the ring has {len(exponents)} variables')

        weighted = sum(w * e for w, e in zip(self.weights, exponents))

        return weighted, self.tiebreaker._key(exponents)

    def __repr__(self):
        return f'WeightedOrdering({list(self.weights)}, {self.tiebreaker!r})'


class EliminationOrdering(MonomialOrdering):
    '''
    Block ordering: the exponents of the eliminated variables are compared first, by the
    inner ordering, and the retained variables only decide ties.

    Args:
    - elimination: the eliminated variable indices, as an iterable or a bitset.
    - retained: the retained variable indices, as an iterable or a bitset.
    - ordering: the inner ordering used for both blocks.
    '''

    order_id = 5
    name = 'elimination'

    def __init__(self, elimination: int | Iterable[int], retained: int | Iterable[int],
                 ordering: MonomialOrdering):
        elimination, retained = _bitset(elimination), _bitset(retained)
        cover = elimination ^ retained
        if elimination & retained or cover.bit_count() != cover.bit_length():
            raise ValueError('the eliminated and retained variables must partition the ring variables')

        self.elimination = elimination
        self.retained = retained
        self.ordering = ordering
        self.size = cover.bit_length()

    def _key(self, exponents):
        if len(exponents) != self.size:
            raise ValueError(f'the blocks cover {self.size} variables, the ring has {len(exponents)}')

        eliminated = tuple(e if self.elimination >> i & 1 else 0 for i, e in enumerate(exponents))
        retained = tuple(e if self.retained >> i & 1 else 0 for i, e in enumerate(exponents))

        return self.ordering._key(eliminated), self.ordering._key(retained)

    def __repr__(self):
        return f'EliminationOrdering({bin(self.elimination)}, {bin(self.retained)}, {self.ordering!r})'


LEX = LexOrdering()
GRLEX = GrlexOrdering()
GREVLEX = GrevlexOrdering()

ORDERINGS = {
    'lex': LEX,
    'grlex': GRLEX,
    'grevlex': GREVLEX,
}


def get_ordering(ordering: str | MonomialOrdering) -> MonomialOrdering:
    '''
    Resolves an ordering name ('lex', 'grlex' or 'grevlex'); ordering instances are
    returned unchanged.
    '''
    if isinstance(ordering, MonomialOrdering):
        return ordering

    try:
        return ORDERINGS[ordering.lower()]
    except KeyError:
        raise ValueError(f'unknown ordering {ordering}') from None
