import itertools

import pytest

from grobnerEngine.exceptions import ConversionError, FieldConstructionError, RingMismatch
from grobnerEngine.fields import Complex, GaloisFieldElement, Rational, Real, convert, field_from_name


# values whose products, sums and inverses are exact in binary floating point
SAMPLES = {
    'real': [Real(0.5), Real(-2.0), Real(4.0), Real(0.0)],
    'rational': [Rational(1, 2), Rational(-3, 4), Rational(5), Rational(0)],
    'complex': [Complex(1, 1), Complex(0, 1), Complex(-0.5, 0.5), Complex(0, 0)],
    'galois': [GaloisFieldElement(v, 7) for v in (0, 1, 3, 6)],
}


@pytest.fixture(params=list(SAMPLES))
def elements(request):
    return SAMPLES[request.param]


def test_addition_and_multiplication_commute(elements):
    for a, b in itertools.product(elements, repeat=2):
        assert a + b == b + a
        assert a * b == b * a


def test_multiplication_distributes_over_addition(elements):
    for a, b, c in itertools.product(elements, repeat=3):
        assert a * (b + c) == a * b + a * c


def test_identities_and_additive_inverse(elements):
    zero, one = elements[0].zero(), elements[0].one()
    for a in elements:
        assert a + zero == a
        assert a * one == a
        assert (a + (-a)).is_zero()
        assert a - a == zero


def test_multiplicative_inverse(elements):
    one = elements[0].one()
    for a in elements:
        if a.is_zero():
            with pytest.raises(FieldConstructionError):
                a.inverse()
        else:
            assert a * a.inverse() == one
            assert a / a == one


def test_division_by_zero_raises(elements):
    with pytest.raises(FieldConstructionError):
        elements[1] / elements[0].zero()


class TestRational:
    def test_normalizes_to_lowest_terms_with_positive_denominator(self):
        r = Rational(2, -4)
        assert (r.numerator, r.denominator) == (-1, 2)
        assert str(r) == '-1/2'
        assert str(Rational(4, 2)) == '2'

    def test_zero_denominator_raises(self):
        with pytest.raises(FieldConstructionError):
            Rational(1, 0)

    def test_accepts_python_integers(self):
        assert Rational(1, 2) + 1 == Rational(3, 2)
        assert 1 - Rational(1, 2) == Rational(1, 2)
        assert 3 * Rational(1, 3) == 1


class TestGaloisFieldElement:
    @pytest.mark.parametrize('value, expected', [(-1, 4), (12, 2), (5, 0), (3, 3), (-11, 4)])
    def test_residue_is_normalized(self, value, expected):
        assert GaloisFieldElement(value, 5).value == expected

    @pytest.mark.parametrize('modulus', [-7, 0, 1, 4, 9, 15, 91])
    def test_rejects_non_prime_modulus(self, modulus):
        with pytest.raises(FieldConstructionError):
            GaloisFieldElement(1, modulus)

    def test_every_nonzero_residue_is_invertible(self):
        for v in range(1, 13):
            a = GaloisFieldElement(v, 13)
            assert (a * a.inverse()).value == 1

    def test_different_moduli_cannot_be_combined(self):
        with pytest.raises(FieldConstructionError):
            GaloisFieldElement(1, 5) + GaloisFieldElement(1, 7)


def test_different_fields_cannot_be_combined():
    with pytest.raises(RingMismatch):
        Rational(1) + Real(1.0)

    with pytest.raises(RingMismatch):
        Complex(1, 0) * GaloisFieldElement(1, 5)


def test_string_forms():
    assert str(Complex(1, 2)) == '(1.0,2.0)'
    assert str(Real(2.5)) == '2.5'
    assert str(GaloisFieldElement(-2, 7)) == '5'


def test_complex_conjugate_and_inverse():
    z = Complex(1, 2)
    assert z.conjugate() == Complex(1, -2)
    assert z.inverse() == Complex(0.2, -0.4)
    assert z * z.conjugate() == Complex(5, 0)


class TestConvert:
    def test_integral_values_enter_a_galois_field(self):
        assert convert(Real(3.0), GaloisFieldElement, 5) == GaloisFieldElement(3, 5)
        assert convert(Rational(-8, 2), GaloisFieldElement, 5) == GaloisFieldElement(1, 5)
        assert convert(7, GaloisFieldElement, 5) == GaloisFieldElement(2, 5)

    @pytest.mark.parametrize('value', [Real(2.5), Rational(3, 2), 0.1])
    def test_non_integral_values_do_not_enter_a_galois_field(self, value):
        with pytest.raises(ConversionError):
            convert(value, GaloisFieldElement, 7)

    def test_complex_with_imaginary_part_is_not_real(self):
        with pytest.raises(ConversionError):
            convert(Complex(1, 2), Real)

        assert convert(Complex(1.5, 0), Real) == Real(1.5)

    def test_exact_conversions(self):
        assert convert(Rational(1, 2), Real) == Real(0.5)
        assert convert(0.75, Rational) == Rational(3, 4)
        assert convert(GaloisFieldElement(3, 5), Rational) == Rational(3)
        assert convert(Rational(1, 4), Complex) == Complex(0.25, 0)

    def test_non_finite_floats_are_rejected(self):
        with pytest.raises(ConversionError):
            convert(float('inf'), Rational)


def test_field_from_name():
    assert field_from_name('q') == (Rational, None)
    assert field_from_name('GF', 11) == (GaloisFieldElement, 11)

    with pytest.raises(ValueError):
        field_from_name('Z')
