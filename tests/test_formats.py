from decimal import Decimal
from fractions import Fraction

import numpy
import pytest

from polynomials import Polynomial, formatPolynomial


def test_render_scenario():
    assert str(Polynomial.fromCoefficients([1, 1, -2])) == "x^2 + x - 2"

@pytest.mark.parametrize("coeffs, standard, latex, concise", [
    ([-2, 0, 1], "- 2x^2 + 1", "- 2x^{2} + 1", "- 2x2 + 1"),
    ([1, -1, 0], "x^2 - x", "x^{2} - x", "x2 - x"),
    ([3, 0, 0, 0, 0, 0, 0, 0, 0, 0, -1], "3x^10 - 1", "3x^{10} - 1", "3x10 - 1"),
    ([-1, 0], "- x", "- x", "- x"),
    ([-1], "- 1", "- 1", "- 1"),
    ([1], "1", "1", "1"),
    ([7, 1], "7x + 1", "7x + 1", "7x + 1"),
])
def test_render_formats(coeffs, standard, latex, concise):
    poly = Polynomial.fromCoefficients(coeffs)
    assert poly.formatWith("standard") == standard
    assert poly.formatWith("latex") == latex
    assert poly.formatWith("concise") == concise
    assert formatPolynomial(poly) == str(poly) == standard

@pytest.mark.parametrize("format", ["standard", "latex", "concise"])
def test_render_zero_polynomial(format):
    assert Polynomial().formatWith(format) == "0"

def test_render_unknown_format():
    with pytest.raises(ValueError):
        Polynomial({1: 1}).formatWith("markdown")

def test_render_other_variable():
    assert str(Polynomial({2: 1, 1: -3}, variableName="t")) == "t^2 - 3t"

def test_render_floats():
    assert str(Polynomial.fromCoefficients([2.5, 1.0, -3.0])) == "2.5x^2 + x - 3"
    assert str(Polynomial({0: -0.125})) == "- 0.125"

def test_render_fractions():
    poly = Polynomial({2: Fraction(1, 2), 1: Fraction(-3, 4), 0: Fraction(5, 3)})
    assert str(poly) == "1/2*x^2 - 3/4*x + 5/3"
    assert poly.formatWith("latex") == "\\frac{1}{2}\\cdot x^{2} - \\frac{3}{4}\\cdot x + \\frac{5}{3}"
    assert poly.formatWith("concise") == "1/2*x2 - 3/4*x + 5/3"

def test_render_integral_fractions():
    poly = Polynomial({2: Fraction(1), 1: Fraction(-4, 2), 0: Fraction(3)})
    assert str(poly) == "x^2 - 2x + 3"

def test_render_complex():
    assert str(Polynomial({2: 1+2j, 0: -3j})) == "(1+2i)*x^2 - 3i"
    assert str(Polynomial({1: 2j, 0: 1+0j})) == "2i*x + 1"
    assert str(Polynomial({2: -1j})) == "- 1i*x^2"
    assert str(Polynomial({1: 1.5-0.5j})) == "(1.5-0.5i)*x"
    assert Polynomial({1: 2j}).formatWith("latex") == "2i\\cdot x"

def test_render_decimal():
    poly = Polynomial.fromCoefficients([Decimal("1.5"), Decimal("-2")])
    assert str(poly) == "1.5x - 2"

def test_render_numpy_scalars():
    assert str(Polynomial.fromCoefficients(numpy.array([1, -2, 3]))) == "x^2 - 2x + 3"
    assert str(Polynomial.fromCoefficients(numpy.array([0.5, -1.0]))) == "0.5x - 1"
    assert str(Polynomial.fromCoefficients([numpy.uint8(3), numpy.uint8(1)])) == "3x + 1"
    assert str(Polynomial({1: numpy.complex128(2j)})) == "2i*x"


class _Symbol:
    """a coefficient without any dedicated formatting"""
    def __init__(self, name):
        self.name = name
    def __eq__(self, other):
        return isinstance(other, _Symbol) and (other.name == self.name)
    def __hash__(self):
        return hash(self.name)
    def __str__(self):
        return self.name

def test_render_unknown_domain():
    poly = Polynomial({1: _Symbol("a"), 0: _Symbol("b")})
    assert str(poly) == "a*x + b"
    assert poly.formatWith("latex") == "a\\cdot x + b"
