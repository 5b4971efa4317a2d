import logging
import typing
from fractions import Fraction

import numpy
import pytest

from polynomials import Polynomial, DivisionResult

from conftest import assertSparse


def poly(*coeffs):
    return Polynomial.fromCoefficients(coeffs)

def fractionPoly(*coeffs):
    return Polynomial.fromCoefficients([Fraction(coef) for coef in coeffs])


def test_long_division_scenario():
    result = poly(-4, 12, -21, 19, 0) / poly(2, -3, 5)
    assert isinstance(result, DivisionResult)
    assert result.quotient == poly(-2, 3, -1)
    assert result.remainder == poly(1, 5)
    (quotient, remainder) = result
    assert quotient == result.quotient
    assert remainder == result.remainder

@pytest.mark.parametrize("numerator, denominator", [
    ((-4, 12, -21, 19, 0), (2, -3, 5)),
    ((1, 0, 0, 0, -1), (1, -1)),
    ((3, 1, 4, 1, 5, 9, 2, 6), (2, 7, 1)),
    ((1, 2), (5, 0, 0, 1)),
    ((7, 0, 0, 0, 0, 0), (3, 0, 0)),
    ((2, 1, 3), (4, )),
])
def test_division_identity(numerator, denominator):
    numerator = fractionPoly(*numerator)
    denominator = fractionPoly(*denominator)
    (quotient, remainder) = numerator / denominator
    assert quotient * denominator + remainder == numerator
    assert remainder.isZero() or (remainder.degree < denominator.degree)
    assertSparse(quotient)
    assertSparse(remainder)

def test_float_division_identity():
    numerator = poly(0.3, -1.7, 2.2, 0.1, -5.0)
    denominator = poly(0.7, 0.3, -1.1)
    (quotient, remainder) = numerator / denominator
    assert remainder.isZero() or (remainder.degree < denominator.degree)
    xs = numpy.linspace(-3.0, 3.0, 13)
    assert numpy.allclose((quotient * denominator + remainder)(xs), numerator(xs))

def test_denominator_of_higher_degree():
    (quotient, remainder) = poly(1, 2) / poly(1, 0, 0)
    assert quotient.isZero()
    assert remainder == poly(1, 2)

def test_null_numerator():
    (quotient, remainder) = Polynomial() / poly(1, 2)
    assert quotient.isZero()
    assert remainder.isZero()

def test_division_by_itself(quadratic):
    (quotient, remainder) = quadratic / quadratic
    assert quotient == Polynomial({0: 1})
    assert remainder.isZero()

def test_division_operands_are_not_mutated(quadratic):
    denominator = poly(1, -1)
    _ = quadratic / denominator
    _ = divmod(quadratic, denominator)
    assert quadratic == poly(1, 1, -2)
    assert denominator == poly(1, -1)

def test_python_division_spellings(quadratic):
    denominator = poly(1, 3)
    (quotient, remainder) = quadratic / denominator
    assert quadratic // denominator == quotient
    assert quadratic % denominator == remainder
    assert divmod(quadratic, denominator) == (quotient, remainder)
    # x^2 + x - 2 = (x + 3)(x - 2) + 4
    assert quotient == poly(1, -2)
    assert remainder == poly(4)

def test_in_place_division(quadratic):
    target = quadratic
    quadratic /= poly(1, -1)
    assert quadratic is target
    assert quadratic == poly(1, 2)
    quadratic %= poly(1, 0)
    assert quadratic is target
    assert quadratic == poly(2)

def test_in_place_division_by_itself(quadratic):
    other = quadratic.copy()
    quadratic /= quadratic
    assert quadratic == Polynomial({0: 1})
    other %= other
    assert other.isZero()

def test_division_by_the_zero_polynomial(quadratic):
    with pytest.raises(ZeroDivisionError, match="Cannot divide by the zero polynomial."):
        quadratic / Polynomial()
    with pytest.raises(ZeroDivisionError):
        divmod(quadratic, Polynomial())
    with pytest.raises(ZeroDivisionError):
        quadratic /= Polynomial()
    with pytest.raises(ZeroDivisionError):
        quadratic %= Polynomial()
    assert quadratic == poly(1, 1, -2)

def test_scalar_division(quadratic):
    assert quadratic / 2 == poly(0.5, 0.5, -1)
    assert fractionPoly(1, 1, -2) / Fraction(3) == Polynomial.fromCoefficients(
        [Fraction(1, 3), Fraction(1, 3), Fraction(-2, 3)])
    target = quadratic
    quadratic /= 4
    assert quadratic is target
    assert quadratic == poly(0.25, 0.25, -0.5)

def test_scalar_division_by_zero(quadratic):
    with pytest.raises(ZeroDivisionError, match="Cannot divide by zero."):
        quadratic / 0
    with pytest.raises(ZeroDivisionError):
        quadratic /= 0.0
    assert quadratic == poly(1, 1, -2)

def test_division_logs_its_steps(caplog):
    caplog.set_level(logging.DEBUG, logger="polynomials.polynomial")
    _ = poly(1, 0, 0, -1) / poly(1, -1)
    assert "in 3 steps" in caplog.text

def test_integer_coefficients_are_divided_as_floats():
    numerator = Polynomial({1: 10 ** 20 + 1})
    denominator = Polynomial({1: 1})
    (quotient, remainder) = numerator / denominator
    assert isinstance(quotient.getCoefficient(0), float)
    # the big integer lost its last digit in the float division
    assert quotient * denominator + remainder != numerator
    exact = Polynomial({1: Fraction(10 ** 20 + 1)}) / Polynomial({1: Fraction(1)})
    assert exact.quotient == Polynomial({0: 10 ** 20 + 1})
    assert exact.remainder.isZero()

def test_division_result_holds_polynomials():
    hints = typing.get_type_hints(DivisionResult)
    assert hints == {"quotient": Polynomial[typing.Any], "remainder": Polynomial[typing.Any]}
