import pytest

from grobnerEngine.dsl import load_system, parse_polynomial, parse_system
from grobnerEngine.exceptions import ConversionError
from grobnerEngine.fields import Complex, GaloisFieldElement, Rational, Real
from grobnerEngine.ideals import katsura3
from grobnerEngine.orderings import GREVLEX, GRLEX
from grobnerEngine.structures import PolynomialRing, SparseMonomial

KATSURA = '''
# Katsura-3
@variables(x, y, z)
@field(GF[5])
@ordering(grlex)
dense
x + 2*y + 2*z - 1
x^2 + 2*y^2 + 2*z^2 - x
2*x*y + 2*y*z - y   # last generator
'''


def test_katsura():
    ring, polynomials = parse_system(KATSURA)

    assert ring.variables == ('x', 'y', 'z')
    assert ring.field is GaloisFieldElement and ring.modulus == 5
    assert ring.ordering is GRLEX
    assert polynomials == katsura3()


def test_defaults_and_inferred_variables():
    ring, polynomials = parse_system('y*x + z\nx^2 - 1\n')

    assert ring.variables == ('y', 'x', 'z')
    assert ring.field is Rational
    assert ring.ordering is GREVLEX
    assert ring.representation == 'dense'
    assert [ring.format(p) for p in polynomials] == ['y*x + z', 'x^2 - 1']


def test_sparse_representation():
    ring, polynomials = parse_system('sparse\nx*y - 1')
    assert ring.representation == 'sparse'
    assert all(isinstance(m, SparseMonomial) for m in polynomials[0])


def test_rational_and_decimal_literals():
    R = PolynomialRing('Q', ['x', 'y'])
    p = parse_polynomial('0.25*x - y/3 + 2^3', R)
    assert p == R.polynomial([(Rational(1, 4), {'x': 1}), (Rational(-1, 3), {'y': 1}), (8, ())])


def test_real_field_keeps_floats():
    R = PolynomialRing('R', ['x'])
    p = parse_polynomial('0.5*x + 1', R)
    assert p.leading_coefficient() == Real(0.5)


def test_imaginary_unit():
    ring, polynomials = parse_system('@field(C)\nx^2 + I*y')
    assert ring.variables == ('x', 'y')
    assert polynomials[0].coefficient_of(ring.monomial(1, {'y': 1})) == Complex(0, 1)

    with pytest.raises(ConversionError):
        parse_system('x + I')


def test_decimal_in_a_galois_field():
    with pytest.raises(ConversionError):
        parse_system('@field(GF[7])\n0.5*x + 1')


def test_products_are_expanded():
    R = PolynomialRing('Q', ['x', 'y'])
    x, y = R.gens
    assert R.parse('(x + y)^2 - x*(x - 1)') == 2*x*y + y**2 + x


@pytest.mark.parametrize('text', [
    '@variables(x)\nx + y',
    '@precision(10)\nx',
    '@field(Z)\nx',
    '@ordering(revlex)\nx',
    'x/y',
])
def test_invalid_systems(text):
    with pytest.raises(ValueError):
        parse_system(text)


def test_load_system(tmp_path):
    path = tmp_path / 'katsura.txt'
    path.write_text(KATSURA)

    _, polynomials = load_system(path)
    assert polynomials == katsura3()
