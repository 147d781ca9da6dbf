'''
Benchmark polynomial systems.
'''

from grobnerEngine.structures import Polynomial, PolynomialRing


def katsura3(representation: str = 'dense') -> list[Polynomial]:
    '''
    The Katsura system in three variables over GF(5), with grlex ordering.
    '''
    R = PolynomialRing('GF', ['x', 'y', 'z'], 'grlex', representation, modulus=5)
    x, y, z = R.gens

    return [
        x + 2*y + 2*z - 1,
        x**2 + 2*y**2 + 2*z**2 - x,
        2*x*y + 2*y*z - y,
    ]


def katsura(n: int, modulus: int = 5, ordering: str = 'grlex',
            representation: str = 'dense') -> list[Polynomial]:
    '''
    The Katsura-n system, in the n + 1 variables x0, ..., xn.

    Args:
    - n: the size of the system, at least 1.
    - modulus: the characteristic of the coefficient field.

    Returns:
    - the n + 1 generators: x0 + 2 * (x1 + ... + xn) - 1 followed by, for every m < n,
      sum(x_|l| * x_|m - l| for l in -n..n) - x_m.
    '''
    if n < 1:
        raise ValueError('n must be positive')

    R = PolynomialRing('GF', [f'x{i}' for i in range(n + 1)], ordering, representation, modulus=modulus)
    X = R.gens

    ideal = [X[0] + 2 * sum(X[1:], R.zero()) - 1]

    for m in range(n):
        poly = -X[m]
        for l in range(-n, n + 1):
            if abs(m - l) <= n:
                poly = poly + X[abs(l)] * X[abs(m - l)]
        ideal.append(poly)

    return ideal


def reimer(n: int, modulus: int = 5, ordering: str = 'grevlex',
           representation: str = 'dense') -> list[Polynomial]:
    '''
    The Reimer-n system: for k = 2, ..., n + 1, sum((-1)^i * 2 * x_i^k) - 1 in the
    variables x0, ..., x(n-1).
    '''
    if n < 3:
        raise ValueError('the Reimer system is defined for n >= 3')

    R = PolynomialRing('GF', [f'x{i}' for i in range(n)], ordering, representation, modulus=modulus)
    X = R.gens

    ideal = []
    for k in range(2, n + 2):
        poly = R.constant(-1)
        for i, x in enumerate(X):
            poly = poly + (2 if i % 2 == 0 else -2) * x**k
        ideal.append(poly)

    return ideal
